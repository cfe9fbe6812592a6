#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Phase Boundary Models for Water
================================================================================

Project:        Water Phase Diagram Explorer
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module implements the three analytic phase boundaries of water:

Vaporization (liquid-gas), Wagner equation from IAPWS-95:
    τ = 1 - T/Tc
    ln(P/Pc) = (Tc/T) [a₁τ + a₂τ^1.5 + a₃τ³ + a₄τ^3.5 + a₅τ⁴ + a₆τ^7.5]

Sublimation (solid-gas), empirical log-linear fit:
    ln(P[Pa]) = A - B/T - C ln(T) - D T

Fusion (solid-liquid), Simon-Glatzel:
    P = Pt [1 + a((T/Tt)^c - 1)]

All functions take T in kelvin and return P in atm. sublimation_temperature
goes the other way, P in atm to T in kelvin. They are compiled with
Numba so the phase classifier and grid kernels can call them directly.
T = 0 is a singularity of the vapor and sublimation models; callers keep
T positive. Compiled code never raises on bad input: domain errors show up
as NaN or inf.
"""

import math
from numba import jit

from .constants import (
    PA_PER_ATM,
    T_TRIPLE,
    P_TRIPLE,
    T_CRITICAL,
    P_CRITICAL_PA,
)


# Wagner equation coefficients and exponents (Wagner & Pruss, 2002)
WAGNER_COEFFICIENTS = (
    -7.85951783,
    1.84408259,
    -11.7866497,
    22.6807411,
    -15.9618719,
    1.80122502,
)
WAGNER_EXPONENTS = (1.0, 1.5, 3.0, 3.5, 4.0, 7.5)

# Sublimation fit, P in Pa
SUBLIMATION_A = 22.5107
SUBLIMATION_B = 6143.7
SUBLIMATION_C = 0.0001
SUBLIMATION_D = 1e-7

# Simon-Glatzel constants for water
SIMON_A = 1.0
SIMON_C = 1.0


@jit(nopython=True, cache=True)
def vapor_pressure(temperature: float) -> float:
    """
    Saturation vapor pressure over liquid water.

    Valid from the triple point up to the critical temperature. Above
    T_critical the reduced temperature τ is negative and the fractional
    powers evaluate to NaN.

    Args:
        temperature: Temperature in K (must be positive)

    Returns:
        Vapor pressure in atm
    """
    tau = 1.0 - temperature / T_CRITICAL

    series = 0.0
    for i in range(len(WAGNER_COEFFICIENTS)):
        series += WAGNER_COEFFICIENTS[i] * tau ** WAGNER_EXPONENTS[i]

    ln_ratio = (T_CRITICAL / temperature) * series
    return math.exp(ln_ratio) * P_CRITICAL_PA / PA_PER_ATM


@jit(nopython=True, cache=True)
def sublimation_pressure(temperature: float) -> float:
    """
    Equilibrium pressure between ice and water vapor.

    Meaningful below the triple-point temperature.

    Args:
        temperature: Temperature in K (must be positive)

    Returns:
        Sublimation pressure in atm
    """
    ln_p = (
        SUBLIMATION_A
        - SUBLIMATION_B / temperature
        - SUBLIMATION_C * math.log(temperature)
        - SUBLIMATION_D * temperature
    )
    return math.exp(ln_p) / PA_PER_ATM


@jit(nopython=True, cache=True)
def ice_liquid_boundary(temperature: float) -> float:
    """
    Melting pressure from the Simon-Glatzel equation.

    With a = c = 1 this is a straight line through the triple point,
    P = Pt * T / Tt.

    Args:
        temperature: Temperature in K

    Returns:
        Melting pressure in atm
    """
    return P_TRIPLE * (1.0 + SIMON_A * ((temperature / T_TRIPLE) ** SIMON_C - 1.0))


@jit(nopython=True, cache=True)
def sublimation_temperature(pressure: float) -> float:
    """
    Temperature at which the sublimation model reaches a given pressure.

    Inverts ln(P) = A - B/T - C ln(T) - D T by fixed-point iteration on
    T = B / (A - C ln(T) - D T - ln(P)). The C and D terms are tiny, so a
    few passes converge to machine precision.

    Args:
        pressure: Pressure in atm (must be positive)

    Returns:
        Temperature in K
    """
    ln_p = math.log(pressure * PA_PER_ATM)
    temperature = SUBLIMATION_B / (SUBLIMATION_A - ln_p)
    for _ in range(6):
        temperature = SUBLIMATION_B / (
            SUBLIMATION_A
            - SUBLIMATION_C * math.log(temperature)
            - SUBLIMATION_D * temperature
            - ln_p
        )
    return temperature
