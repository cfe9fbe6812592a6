#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Diagram Controls: Input Validation and Unit Helpers
================================================================================

Project:        Water Phase Diagram Explorer
Module:         controls.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

The classifier trusts its inputs. This module is the gate in front of it:
- Parsing typed temperature/pressure text with a decimal-place limit
- Range checks against the diagram limits
- Kelvin/Celsius conversion
- Logarithmic pressure slider mapping
- Linked controls that keep the point on a phase boundary
"""

import math
import re
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .constants import KELVIN_OFFSET
from .curves import Point
from .thermodynamics import (
    special_point,
    decision_boundary_pressure,
    decision_boundary_temperature,
    fusion_decision_temperature,
)


CONTROLS = ("temperature", "pressure")


@dataclass
class DiagramConfig:
    """Limits and defaults of the interactive diagram."""
    # Accepted input ranges
    min_temperature: float = 200.0   # K
    max_temperature: float = 700.0   # K
    min_pressure: float = 0.001      # atm
    max_pressure: float = 300.0      # atm

    # Decimal places allowed in typed input
    temperature_decimals: int = 2
    pressure_decimals: int = 3

    # Samples per boundary curve
    n_samples: int = 200


class InputError(ValueError):
    """Base class for rejected diagram input."""


class InputFormatError(InputError):
    """Typed text is not an acceptable number."""

    def __init__(self, text: str, decimals: int):
        self.text = text
        self.decimals = decimals
        super().__init__(
            f"{text!r} is not a number with at most {decimals} decimal places"
        )


class InputRangeError(InputError):
    """Value lies outside the diagram limits."""

    def __init__(self, quantity: str, value: float, minimum: float, maximum: float, unit: str):
        self.quantity = quantity
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit
        super().__init__(
            f"{quantity} {value:g} {unit} is outside [{minimum:g}, {maximum:g}] {unit}"
        )


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


def slider_to_pressure(slider_value: float, config: DiagramConfig = None) -> float:
    """
    Map a linear slider position onto a logarithmic pressure scale.

    Args:
        slider_value: Slider position in [0, 1]
        config: Diagram limits (default: DiagramConfig())

    Returns:
        Pressure in atm
    """
    if config is None:
        config = DiagramConfig()

    min_log = math.log10(config.min_pressure)
    max_log = math.log10(config.max_pressure)
    return 10.0 ** (min_log + slider_value * (max_log - min_log))


def pressure_to_slider(pressure: float, config: DiagramConfig = None) -> float:
    """Inverse of slider_to_pressure."""
    if config is None:
        config = DiagramConfig()

    min_log = math.log10(config.min_pressure)
    max_log = math.log10(config.max_pressure)
    return (math.log10(pressure) - min_log) / (max_log - min_log)


def _number_pattern(decimals: int, signed: bool = False) -> re.Pattern:
    # "12", "12.", "12.3", ".3"; whole numbers only when decimals < 1
    sign = "-?" if signed else ""
    if decimals < 1:
        return re.compile(rf"^{sign}\d+$")
    return re.compile(rf"^{sign}(\d+(\.\d{{0,{decimals}}})?|\.\d{{1,{decimals}}})$")


def _parse_number(text: str, decimals: int, signed: bool = False) -> float:
    stripped = text.strip()
    if not _number_pattern(decimals, signed).match(stripped):
        raise InputFormatError(text, decimals)
    return float(stripped)


def check_temperature(temperature: float, config: DiagramConfig = None) -> float:
    """Raise InputRangeError unless the temperature is within the limits."""
    if config is None:
        config = DiagramConfig()

    if not config.min_temperature <= temperature <= config.max_temperature:
        raise InputRangeError(
            "Temperature", temperature, config.min_temperature, config.max_temperature, "K"
        )
    return temperature


def check_pressure(pressure: float, config: DiagramConfig = None) -> float:
    """Raise InputRangeError unless the pressure is within the limits."""
    if config is None:
        config = DiagramConfig()

    if not config.min_pressure <= pressure <= config.max_pressure:
        raise InputRangeError(
            "Pressure", pressure, config.min_pressure, config.max_pressure, "atm"
        )
    return pressure


def parse_temperature(text: str, config: DiagramConfig = None) -> float:
    """
    Parse typed temperature text in kelvin.

    Args:
        text: User input, e.g. "373.15"
        config: Diagram limits (default: DiagramConfig())

    Returns:
        Temperature in K

    Raises:
        InputFormatError: Not a number, or too many decimal places
        InputRangeError: Outside [min_temperature, max_temperature]
    """
    if config is None:
        config = DiagramConfig()

    temperature = _parse_number(text, config.temperature_decimals)
    return check_temperature(temperature, config)


def parse_celsius(text: str, config: DiagramConfig = None) -> float:
    """
    Parse typed temperature text in degrees Celsius.

    A leading minus sign is allowed; the decimal-place limit and the
    kelvin range are the same as for parse_temperature.

    Args:
        text: User input, e.g. "-12.5"
        config: Diagram limits (default: DiagramConfig())

    Returns:
        Temperature in K

    Raises:
        InputFormatError: Not a number, or too many decimal places
        InputRangeError: Outside [min_temperature, max_temperature] once in K
    """
    if config is None:
        config = DiagramConfig()

    celsius = _parse_number(text, config.temperature_decimals, signed=True)
    return check_temperature(celsius_to_kelvin(celsius), config)


def parse_pressure(text: str, config: DiagramConfig = None) -> float:
    """
    Parse typed pressure text in atm.

    Raises:
        InputFormatError: Not a number, or too many decimal places
        InputRangeError: Outside [min_pressure, max_pressure]
    """
    if config is None:
        config = DiagramConfig()

    pressure = _parse_number(text, config.pressure_decimals)
    return check_pressure(pressure, config)


def validate_point(temperature: float, pressure: float, config: DiagramConfig = None) -> Point:
    """Range-check both coordinates and return them as a Point."""
    if config is None:
        config = DiagramConfig()

    return Point(check_temperature(temperature, config), check_pressure(pressure, config))


class BoundaryStep(NamedTuple):
    """Result of moving a linked control along the drawn boundary."""
    point: Point
    direction: Optional[str]  # control the line is locked to, if any


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def follow_boundary(
    temperature: float,
    pressure: float,
    control: str,
    value: float,
    config: DiagramConfig = None,
    direction: Optional[str] = None
) -> BoundaryStep:
    """
    Move the diagram point along the drawn phase boundary.

    When temperature and pressure are linked, changing one control sets
    the other so the point stays on a line:
    - A temperature change takes its pressure from the gas boundary
      (sublimation line below T_triple, vaporization polyline above),
      clamped to the pressure limits.
    - A pressure change takes its temperature from the inverse of that
      same boundary.
    - Starting at the triple point, the first control moved picks the
      line: pressure locks onto the fusion line, temperature onto the gas
      boundary. The lock is kept until the other control is used.

    Args:
        temperature: Current temperature in K
        pressure: Current pressure in atm
        control: "temperature" or "pressure", the control being moved
        value: New value of that control (K or atm)
        config: Diagram limits (default: DiagramConfig())
        direction: Lock returned by the previous step, or None

    Returns:
        BoundaryStep with the new point and the lock to pass back in
    """
    if control not in CONTROLS:
        raise ValueError(f"control must be one of {CONTROLS}, got {control!r}")
    if config is None:
        config = DiagramConfig()

    if special_point(temperature, pressure) == "triple point":
        direction = control
    elif direction is not None and direction != control:
        direction = None

    if control == "temperature":
        new_pressure = _clamp(
            decision_boundary_pressure(value), config.min_pressure, config.max_pressure
        )
        return BoundaryStep(Point(value, new_pressure), direction)

    new_pressure = _clamp(value, config.min_pressure, config.max_pressure)
    if direction == "pressure":
        new_temperature = fusion_decision_temperature(new_pressure)
    else:
        new_temperature = decision_boundary_temperature(new_pressure)
    return BoundaryStep(Point(new_temperature, new_pressure), direction)
