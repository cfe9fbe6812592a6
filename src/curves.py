#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Boundary Curve Sampling
================================================================================

Project:        Water Phase Diagram Explorer
Module:         curves.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Sampling utilities that turn the pressure functions into sequences of
(temperature, pressure) points for whoever draws the diagram:
- Analytic curves (Wagner, sublimation fit, Simon-Glatzel)
- Decision curves (the piecewise-linear lines the classifier uses)
- Linear or logarithmic temperature spacing
"""

import numpy as np
from typing import Callable, Iterator, NamedTuple, Tuple

from .constants import T_TRIPLE, T_CRITICAL
from .physics import vapor_pressure, sublimation_pressure, ice_liquid_boundary
from .thermodynamics import (
    sublimation_decision_pressure,
    vaporization_decision_pressure,
)


SPACINGS = ("linear", "log")

# Lowest temperature on the diagram
DIAGRAM_MIN_TEMPERATURE = 200.0


class Point(NamedTuple):
    """A point on the P-T diagram (K, atm)."""
    temperature: float
    pressure: float


class BoundaryCurve:
    """
    Finite, restartable sequence of points along one phase boundary.

    Nothing is computed until the curve is iterated, and every iteration
    starts again from t_min.

    Example:
        >>> curve = BoundaryCurve("vaporization", vapor_pressure, 273.16, 647.096, 50)
        >>> points = list(curve)
    """

    def __init__(
        self,
        name: str,
        pressure_function: Callable[[float], float],
        t_min: float,
        t_max: float,
        n_samples: int = 200,
        spacing: str = "linear"
    ):
        if n_samples < 1:
            raise ValueError(f"n_samples must be at least 1, got {n_samples}")
        if t_min > t_max:
            raise ValueError(f"t_min ({t_min}) must not exceed t_max ({t_max})")
        if spacing not in SPACINGS:
            raise ValueError(f"spacing must be one of {SPACINGS}, got {spacing!r}")
        if t_min <= 0:
            raise ValueError(f"temperatures must be positive, got t_min={t_min}")

        self.name = name
        self.pressure_function = pressure_function
        self.t_min = t_min
        self.t_max = t_max
        self.n_samples = n_samples
        self.spacing = spacing

    def temperatures(self) -> np.ndarray:
        """Sample temperatures in K."""
        if self.spacing == "log":
            return np.geomspace(self.t_min, self.t_max, self.n_samples)
        return np.linspace(self.t_min, self.t_max, self.n_samples)

    def __iter__(self) -> Iterator[Point]:
        for temperature in self.temperatures():
            temperature = float(temperature)
            yield Point(temperature, self.pressure_function(temperature))

    def __len__(self) -> int:
        return self.n_samples

    def __repr__(self) -> str:
        return (
            f"BoundaryCurve({self.name!r}, T=[{self.t_min}, {self.t_max}], "
            f"n={self.n_samples}, spacing={self.spacing!r})"
        )

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Sample the curve into arrays.

        Returns:
            temperatures: Array of temperatures in K
            pressures: Array of pressures in atm
        """
        temperatures = self.temperatures()
        pressures = np.array([self.pressure_function(float(t)) for t in temperatures])
        return temperatures, pressures


def sublimation_curve(
    t_min: float = DIAGRAM_MIN_TEMPERATURE,
    t_max: float = T_TRIPLE,
    n_samples: int = 200,
    spacing: str = "linear"
) -> BoundaryCurve:
    """Analytic solid-gas curve."""
    return BoundaryCurve("sublimation", sublimation_pressure, t_min, t_max, n_samples, spacing)


def vaporization_curve(
    t_min: float = T_TRIPLE,
    t_max: float = T_CRITICAL,
    n_samples: int = 200,
    spacing: str = "linear"
) -> BoundaryCurve:
    """Analytic liquid-gas curve (Wagner equation)."""
    return BoundaryCurve("vaporization", vapor_pressure, t_min, t_max, n_samples, spacing)


def fusion_curve(
    t_min: float = DIAGRAM_MIN_TEMPERATURE,
    t_max: float = T_TRIPLE,
    n_samples: int = 200,
    spacing: str = "linear"
) -> BoundaryCurve:
    """Solid-liquid curve (Simon-Glatzel with a = c = 1)."""
    return BoundaryCurve("fusion", ice_liquid_boundary, t_min, t_max, n_samples, spacing)


def sublimation_decision_curve(
    t_min: float = DIAGRAM_MIN_TEMPERATURE,
    t_max: float = T_TRIPLE,
    n_samples: int = 200,
    spacing: str = "linear"
) -> BoundaryCurve:
    """Solid-gas line as used by the classifier."""
    return BoundaryCurve(
        "sublimation (decision)", sublimation_decision_pressure,
        t_min, t_max, n_samples, spacing
    )


def vaporization_decision_curve(
    t_min: float = T_TRIPLE,
    t_max: float = T_CRITICAL,
    n_samples: int = 200,
    spacing: str = "linear"
) -> BoundaryCurve:
    """Liquid-gas polyline as used by the classifier."""
    return BoundaryCurve(
        "vaporization (decision)", vaporization_decision_pressure,
        t_min, t_max, n_samples, spacing
    )


def all_curves(n_samples: int = 200, spacing: str = "linear") -> Tuple[BoundaryCurve, ...]:
    """Every boundary curve over its default temperature range."""
    return (
        sublimation_curve(n_samples=n_samples, spacing=spacing),
        vaporization_curve(n_samples=n_samples, spacing=spacing),
        fusion_curve(n_samples=n_samples, spacing=spacing),
        sublimation_decision_curve(n_samples=n_samples, spacing=spacing),
        vaporization_decision_curve(n_samples=n_samples, spacing=spacing),
    )
