#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Water Phase Diagram Explorer
================================================================================

Project:        Water Phase Diagram Explorer
Description:    Phase classification and boundary curves behind an
                interactive pressure-temperature phase diagram of water

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This package implements the science behind the phase diagram:
- Wagner vapor pressure, sublimation fit and Simon-Glatzel melting line
- Classification of (T, P) into solid, liquid, gas or supercritical
- Sampling of the boundary curves for drawing
- Input validation and slider helpers for the interactive controls

Modules:
    - constants: Triple point, critical point and anchor values
    - physics: Analytic phase boundary models
    - thermodynamics: Phase classification and phase change tracking
    - curves: Boundary curve sampling
    - controls: Input parsing, unit conversion, slider mapping
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
