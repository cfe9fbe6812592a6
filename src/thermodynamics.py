#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Phase Classification for Water
================================================================================

Project:        Water Phase Diagram Explorer
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module maps a (temperature, pressure) point onto a phase of water:
- Phase identification (solid, liquid, gas, supercritical)
- Piecewise-linear decision boundaries matching the drawn diagram
- Inverse boundaries (pressure to temperature) for following a line
- Whole-grid classification for region shading
- Phase change tracking along a path of queries

The decision boundaries are deliberately NOT the analytic curves from
physics.py. The vaporization boundary is a polyline through four anchor
points (triple point, 300 K, boiling point, critical point) and the
sublimation boundary is the analytic model up to 250 K followed by a
straight segment to the triple point. These are the same lines the diagram
draws, so a point's label always agrees with the side of the drawn line it
sits on.
"""

import logging
from collections import deque
import numpy as np
from typing import Deque, Tuple, Optional, List
from dataclasses import dataclass
from enum import Enum
from numba import jit

from .constants import (
    KELVIN_OFFSET,
    T_TRIPLE,
    P_TRIPLE,
    T_CRITICAL,
    P_CRITICAL,
    T_BOILING,
    P_BOILING,
    T_SUBLIMATION_KNEE,
    T_VAPOR_ANCHOR,
    P_VAPOR_ANCHOR,
    FUSION_LINE_ANCHORS,
)
from .physics import (
    vapor_pressure,
    sublimation_pressure,
    sublimation_temperature,
    ice_liquid_boundary,
)


logger = logging.getLogger(__name__)


class Phase(Enum):
    """Phases of water on the P-T diagram."""
    SOLID = "Solid"
    LIQUID = "Liquid"
    GAS = "Gas"
    SUPERCRITICAL = "Supercritical"
    UNKNOWN = "Unknown"  # never produced for a valid input


# Integer codes used by the compiled kernels
PHASE_SOLID = 0
PHASE_LIQUID = 1
PHASE_GAS = 2
PHASE_SUPERCRITICAL = 3
PHASE_UNKNOWN = -1

PHASE_CODES = {
    Phase.SOLID: PHASE_SOLID,
    Phase.LIQUID: PHASE_LIQUID,
    Phase.GAS: PHASE_GAS,
    Phase.SUPERCRITICAL: PHASE_SUPERCRITICAL,
    Phase.UNKNOWN: PHASE_UNKNOWN,
}
PHASES_BY_CODE = {code: phase for phase, code in PHASE_CODES.items()}

# Tolerances for snapping onto the triple and critical points
TRIPLE_POINT_TOLERANCE = (0.01, 0.001)    # (K, atm)
CRITICAL_POINT_TOLERANCE = (0.01, 0.1)    # (K, atm)


@jit(nopython=True, cache=True)
def _lerp(p0: float, p1: float, t: float) -> float:
    # Exact at both ends: t == 1 gives p1 bit-for-bit
    return p0 * (1.0 - t) + p1 * t


@jit(nopython=True, cache=True)
def sublimation_decision_pressure(temperature: float) -> float:
    """
    Solid-gas boundary used for classification below the triple point.

    Up to 250 K this is the sublimation model itself. Between 250 K and
    the triple point the pressure is interpolated linearly from the model
    value at 250 K to the triple-point pressure.

    Args:
        temperature: Temperature in K

    Returns:
        Boundary pressure in atm
    """
    if temperature <= T_SUBLIMATION_KNEE:
        return sublimation_pressure(temperature)

    t = (temperature - T_SUBLIMATION_KNEE) / (T_TRIPLE - T_SUBLIMATION_KNEE)
    return _lerp(sublimation_pressure(T_SUBLIMATION_KNEE), P_TRIPLE, t)


@jit(nopython=True, cache=True)
def vaporization_decision_pressure(temperature: float) -> float:
    """
    Liquid-gas boundary used for classification.

    A polyline through the triple point, (300 K, 0.03 atm), the normal
    boiling point (373.15 K, 1 atm) and the critical point.

    Args:
        temperature: Temperature in K

    Returns:
        Boundary pressure in atm
    """
    if temperature <= T_VAPOR_ANCHOR:
        t = (temperature - T_TRIPLE) / (T_VAPOR_ANCHOR - T_TRIPLE)
        return _lerp(P_TRIPLE, P_VAPOR_ANCHOR, t)

    if temperature <= T_BOILING:
        t = (temperature - T_VAPOR_ANCHOR) / (T_BOILING - T_VAPOR_ANCHOR)
        return _lerp(P_VAPOR_ANCHOR, P_BOILING, t)

    t = (temperature - T_BOILING) / (T_CRITICAL - T_BOILING)
    return _lerp(P_BOILING, P_CRITICAL, t)


VAPORIZATION_ANCHORS = (
    (T_TRIPLE, P_TRIPLE),
    (T_VAPOR_ANCHOR, P_VAPOR_ANCHOR),
    (T_BOILING, P_BOILING),
    (T_CRITICAL, P_CRITICAL),
)


def _polyline_temperature(anchors, pressure: float) -> float:
    # anchors are (T, P) pairs with strictly rising P; clamps at both ends
    if pressure <= anchors[0][1]:
        return anchors[0][0]

    for (t0, p0), (t1, p1) in zip(anchors[:-1], anchors[1:]):
        if pressure <= p1:
            t = (pressure - p0) / (p1 - p0)
            return t0 * (1.0 - t) + t1 * t

    return anchors[-1][0]


def vaporization_decision_temperature(pressure: float) -> float:
    """
    Inverse of vaporization_decision_pressure.

    Pressures below the triple point map to T_triple and pressures above
    the critical point map to T_critical.

    Args:
        pressure: Pressure in atm

    Returns:
        Temperature in K on the liquid-gas polyline
    """
    return _polyline_temperature(VAPORIZATION_ANCHORS, pressure)


def sublimation_decision_temperature(pressure: float) -> float:
    """
    Inverse of sublimation_decision_pressure.

    Below the model pressure at 250 K the sublimation model is inverted;
    above it the straight segment to the triple point is. Pressures at or
    above the triple point map to T_triple.

    Args:
        pressure: Pressure in atm (must be positive)

    Returns:
        Temperature in K on the solid-gas line
    """
    knee_pressure = sublimation_pressure(T_SUBLIMATION_KNEE)
    if pressure <= knee_pressure:
        return sublimation_temperature(float(pressure))
    if pressure >= P_TRIPLE:
        return T_TRIPLE

    t = (pressure - knee_pressure) / (P_TRIPLE - knee_pressure)
    return T_SUBLIMATION_KNEE * (1.0 - t) + T_TRIPLE * t


def fusion_decision_temperature(pressure: float) -> float:
    """
    Melting temperature on the drawn solid-liquid line.

    Interpolates FUSION_LINE_ANCHORS; clamps to the triple point below
    P_triple and to the last anchor above 300 atm.

    Args:
        pressure: Pressure in atm

    Returns:
        Temperature in K
    """
    return _polyline_temperature(FUSION_LINE_ANCHORS, pressure)


def decision_boundary_pressure(temperature: float) -> float:
    """Pressure on the drawn gas boundary: sublimation below T_triple, vaporization above."""
    if temperature < T_TRIPLE:
        return sublimation_decision_pressure(float(temperature))
    return vaporization_decision_pressure(float(temperature))


def decision_boundary_temperature(pressure: float) -> float:
    """Inverse of decision_boundary_pressure."""
    if pressure < P_TRIPLE:
        return sublimation_decision_temperature(pressure)
    return vaporization_decision_temperature(pressure)


@jit(nopython=True, cache=True)
def classify_phase_code(temperature: float, pressure: float) -> int:
    """
    Classify a point and return its integer phase code.

    Args:
        temperature: Temperature in K
        pressure: Pressure in atm

    Returns:
        One of PHASE_SOLID, PHASE_LIQUID, PHASE_GAS, PHASE_SUPERCRITICAL,
        or PHASE_UNKNOWN if no branch matched
    """
    if temperature >= T_CRITICAL and pressure >= P_CRITICAL:
        return PHASE_SUPERCRITICAL

    # Ice or vapor
    if temperature < T_TRIPLE:
        if pressure < sublimation_decision_pressure(temperature):
            return PHASE_GAS
        return PHASE_SOLID

    if temperature >= T_CRITICAL:
        if pressure < P_CRITICAL:
            return PHASE_GAS
        return PHASE_SUPERCRITICAL

    if temperature >= T_TRIPLE:
        if pressure < vaporization_decision_pressure(temperature):
            return PHASE_GAS
        if temperature >= T_TRIPLE and pressure >= P_TRIPLE:
            return PHASE_LIQUID
        return PHASE_SOLID

    # Only NaN input gets here
    return PHASE_UNKNOWN


def classify_phase(temperature: float, pressure: float) -> Phase:
    """
    Classify the phase of water at a point on the P-T diagram.

    The triple point itself (273.16 K, 0.00604 atm) is labelled Liquid.
    No validation is performed; keep T positive.

    Args:
        temperature: Temperature in K
        pressure: Pressure in atm

    Returns:
        Phase at (temperature, pressure)
    """
    return PHASES_BY_CODE[classify_phase_code(float(temperature), float(pressure))]


@jit(nopython=True, cache=True)
def classify_grid(temperatures: np.ndarray, pressures: np.ndarray) -> np.ndarray:
    """
    Classify every point of a temperature x pressure grid.

    Args:
        temperatures: 1D array of temperatures in K (grid columns)
        pressures: 1D array of pressures in atm (grid rows)

    Returns:
        (len(pressures), len(temperatures)) array of phase codes
    """
    n_t = temperatures.shape[0]
    n_p = pressures.shape[0]
    codes = np.empty((n_p, n_t), dtype=np.int64)

    for j in range(n_p):
        for i in range(n_t):
            codes[j, i] = classify_phase_code(temperatures[i], pressures[j])

    return codes


@dataclass
class PhaseInfo:
    """Information about a point on the phase diagram."""
    phase: Phase
    temperature: float
    pressure: float
    vapor_pressure: float
    sublimation_pressure: float
    fusion_pressure: float
    special_point: Optional[str]
    description: str


def special_point(temperature: float, pressure: float) -> Optional[str]:
    """
    Name the special point (T, P) sits on, if any.

    Returns:
        "triple point", "critical point" or None
    """
    dt, dp = TRIPLE_POINT_TOLERANCE
    if abs(temperature - T_TRIPLE) < dt and abs(pressure - P_TRIPLE) < dp:
        return "triple point"

    dt, dp = CRITICAL_POINT_TOLERANCE
    if abs(temperature - T_CRITICAL) < dt and abs(pressure - P_CRITICAL) < dp:
        return "critical point"

    return None


def identify_phase(temperature: float, pressure: float) -> PhaseInfo:
    """
    Classify a point and collect the boundary pressures around it.

    The analytic boundary pressures are evaluated at the query temperature
    whether or not the corresponding curve exists there, so e.g. the
    sublimation pressure above the triple point is only informative.

    Args:
        temperature: Temperature in K
        pressure: Pressure in atm

    Returns:
        PhaseInfo with phase identification and description
    """
    phase = classify_phase(temperature, pressure)
    point_name = special_point(temperature, pressure)

    celsius = temperature - KELVIN_OFFSET
    description = (
        f"{phase.value} at T = {temperature:.2f} K ({celsius:.2f} °C), "
        f"P = {pressure:.3f} atm"
    )
    if point_name is not None:
        description += f" (near the {point_name})"

    return PhaseInfo(
        phase=phase,
        temperature=temperature,
        pressure=pressure,
        vapor_pressure=vapor_pressure(float(temperature)),
        sublimation_pressure=sublimation_pressure(float(temperature)),
        fusion_pressure=ice_liquid_boundary(float(temperature)),
        special_point=point_name,
        description=description,
    )


class PhaseChangeTracker:
    """
    Track phase changes along a sequence of queries.

    Feed it every (T, P) the user moves to; it reports when the point
    crosses into a different region. Both the query history and the list
    of phase changes keep at most history_length entries.
    """

    def __init__(self, history_length: int = 100):
        if history_length < 1:
            raise ValueError(f"history_length must be at least 1, got {history_length}")

        self.history_length = history_length
        self.temperature_history: Deque[float] = deque(maxlen=history_length)
        self.pressure_history: Deque[float] = deque(maxlen=history_length)
        self.phase_history: Deque[Phase] = deque(maxlen=history_length)

        self.transition_events: Deque[Tuple[float, float, Phase, Phase]] = deque(
            maxlen=history_length
        )

    @property
    def current_phase(self) -> Optional[Phase]:
        """Phase of the most recent query, or None before the first."""
        if not self.phase_history:
            return None
        return self.phase_history[-1]

    def update(
        self,
        temperature: float,
        pressure: float
    ) -> Optional[Tuple[Phase, Phase]]:
        """
        Record a new query point.

        Args:
            temperature: Temperature in K
            pressure: Pressure in atm

        Returns:
            (old_phase, new_phase) if the phase changed, else None
        """
        old_phase = self.current_phase
        current_phase = classify_phase(temperature, pressure)

        self.temperature_history.append(temperature)
        self.pressure_history.append(pressure)
        self.phase_history.append(current_phase)

        if old_phase is None or old_phase == current_phase:
            return None

        self.transition_events.append((temperature, pressure, old_phase, current_phase))
        logger.debug(
            "Phase change: %s -> %s at T=%.2f K, P=%.4g atm",
            old_phase.value, current_phase.value, temperature, pressure
        )
        return (old_phase, current_phase)

    def get_recent_transitions(self, n: int = 5) -> List[Tuple[float, float, Phase, Phase]]:
        """Get the n most recent phase changes."""
        if n <= 0:
            return []
        return list(self.transition_events)[-n:]
