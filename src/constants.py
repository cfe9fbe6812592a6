#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Constants for Water
================================================================================

Project:        Water Phase Diagram Explorer
Module:         constants.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Fixed reference values for the water phase diagram. The bare module-level
floats are what the Numba-compiled kernels read (Numba freezes globals at
compile time); the PhysicalConstants record bundles them for Python callers.
"""

from dataclasses import dataclass


# Unit conversion
PA_PER_ATM = 101325.0
KELVIN_OFFSET = 273.15

# Triple point (solid, liquid and gas coexist)
T_TRIPLE = 273.16      # K
P_TRIPLE = 0.00604     # atm

# Critical point (end of the liquid-gas line)
T_CRITICAL = 647.096   # K
P_CRITICAL = 217.75    # atm
P_CRITICAL_PA = 22.064e6  # Pa, IAPWS-95 value of P_CRITICAL

# Normal boiling point
T_BOILING = 373.15     # K
P_BOILING = 1.0        # atm

# Anchor points of the piecewise-linear boundaries used for classification
T_SUBLIMATION_KNEE = 250.0   # K, below this the sublimation model is used as-is
T_VAPOR_ANCHOR = 300.0       # K
P_VAPOR_ANCHOR = 0.03        # atm

# Solid-liquid line as drawn on the diagram, (T [K], P [atm]) by rising P.
# Nearly vertical: the melting point drops by 0.09 K up to 300 atm.
FUSION_LINE_ANCHORS = (
    (T_TRIPLE, P_TRIPLE),
    (273.15, 0.01),
    (273.15, 0.1),
    (273.15, 1.0),
    (273.14, 10.0),
    (273.13, 50.0),
    (273.12, 100.0),
    (273.11, 130.0),
    (273.10, 150.0),
    (273.09, 200.0),
    (273.08, 250.0),
    (273.07, 300.0),
)


@dataclass(frozen=True)
class PhysicalConstants:
    """
    Triple and critical point of a substance.

    Temperatures are in kelvin, pressures in atm.
    """
    triple_temperature: float = T_TRIPLE
    triple_pressure: float = P_TRIPLE
    critical_temperature: float = T_CRITICAL
    critical_pressure: float = P_CRITICAL

    def __post_init__(self):
        if not self.triple_temperature < self.critical_temperature:
            raise ValueError("Triple-point temperature must be below the critical temperature")
        if not self.triple_pressure < self.critical_pressure:
            raise ValueError("Triple-point pressure must be below the critical pressure")

    @property
    def triple_point(self):
        """(T, P) of the triple point."""
        return (self.triple_temperature, self.triple_pressure)

    @property
    def critical_point(self):
        """(T, P) of the critical point."""
        return (self.critical_temperature, self.critical_pressure)


WATER = PhysicalConstants()
