#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Water Phase Diagram Explorer - Command Line Interface
================================================================================

Project:        Water Phase Diagram Explorer
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Command line interface for querying the water phase diagram: classify a
point, print sampled boundary curves, draw a text phase map, or check the
classifier against known reference points.
"""

import argparse
import logging
import sys
import numpy as np

from src.constants import T_TRIPLE, P_TRIPLE, T_CRITICAL, P_CRITICAL
from src.controls import (
    InputError, DiagramConfig, parse_temperature, parse_celsius, parse_pressure,
    kelvin_to_celsius, pressure_to_slider
)
from src.curves import all_curves
from src.thermodynamics import (
    Phase, identify_phase, classify_phase, classify_grid,
    PHASE_SOLID, PHASE_LIQUID, PHASE_GAS, PHASE_SUPERCRITICAL
)


# Reference points: (T [K], P [atm], expected phase, label)
REFERENCE_POINTS = [
    (T_TRIPLE, P_TRIPLE, Phase.LIQUID, "Triple point"),
    (T_CRITICAL, P_CRITICAL, Phase.SUPERCRITICAL, "Critical point"),
    (373.15, 1.0, Phase.LIQUID, "Boiling point, 1 atm"),
    (373.15, 0.5, Phase.GAS, "100 °C, 0.5 atm"),
    (298.15, 1.0, Phase.LIQUID, "Room temperature, 1 atm"),
    (250.0, 1.0, Phase.SOLID, "-23 °C, 1 atm"),
    (260.0, 0.001, Phase.GAS, "-13 °C, 0.001 atm"),
    (700.0, 100.0, Phase.GAS, "700 K, 100 atm"),
    (700.0, 300.0, Phase.SUPERCRITICAL, "700 K, 300 atm"),
]

MAP_SYMBOLS = {
    PHASE_SOLID: "S",
    PHASE_LIQUID: "L",
    PHASE_GAS: ".",
    PHASE_SUPERCRITICAL: "*",
}


def run_classify(temperature_text: str, pressure_text: str, celsius: bool = False) -> int:
    """
    Classify a single typed point.

    Args:
        temperature_text: Temperature as typed (K, or °C with celsius=True)
        pressure_text: Pressure as typed (atm)
        celsius: Interpret the temperature as Celsius

    Returns:
        Process exit code
    """
    config = DiagramConfig()

    try:
        if celsius:
            temperature = parse_celsius(temperature_text, config)
        else:
            temperature = parse_temperature(temperature_text, config)
        pressure = parse_pressure(pressure_text, config)
    except InputError as exc:
        print(f"⚠ {exc}")
        return 2

    info = identify_phase(temperature, pressure)

    print("=" * 60)
    print("Water Phase Diagram - Point Classification")
    print("=" * 60)
    print(f"\n  Temperature:          {temperature:.2f} K ({kelvin_to_celsius(temperature):.2f} °C)")
    print(f"  Pressure:             {pressure:.3f} atm (slider {pressure_to_slider(pressure, config):.3f})")
    print(f"  Phase:                {info.phase.value}")
    if info.special_point is not None:
        print(f"  Special point:        {info.special_point}")
    print(f"\n  Vapor pressure:       {info.vapor_pressure:.6g} atm")
    print(f"  Sublimation pressure: {info.sublimation_pressure:.6g} atm")
    print(f"  Fusion pressure:      {info.fusion_pressure:.6g} atm")
    print(f"\n  {info.description}")
    return 0


def run_curves(n_samples: int = 10, spacing: str = "linear"):
    """
    Print every boundary curve as a table of sampled points.

    Args:
        n_samples: Points per curve
        spacing: "linear" or "log" temperature spacing
    """
    print("=" * 60)
    print("Water Phase Diagram - Boundary Curves")
    print("=" * 60)

    for curve in all_curves(n_samples=n_samples, spacing=spacing):
        print(f"\n{curve.name} ({curve.t_min:.2f} - {curve.t_max:.2f} K)")
        print(f"  {'T [K]':>10}  {'P [atm]':>14}")
        for point in curve:
            print(f"  {point.temperature:10.2f}  {point.pressure:14.6g}")


def run_map(width: int = 60, height: int = 24):
    """
    Print a text rendering of the phase regions.

    Temperature runs left to right on a linear axis, pressure bottom to
    top on a log axis, both over the diagram limits.
    """
    config = DiagramConfig()
    temperatures = np.linspace(config.min_temperature, config.max_temperature, width)
    pressures = np.geomspace(config.max_pressure, config.min_pressure, height)

    codes = classify_grid(temperatures, pressures)

    print("=" * 60)
    print("Water Phase Diagram - Phase Map")
    print("=" * 60)
    print("  S = solid, L = liquid, . = gas, * = supercritical\n")

    for j, pressure in enumerate(pressures):
        row = "".join(MAP_SYMBOLS.get(code, "?") for code in codes[j])
        print(f"{pressure:9.3g} |{row}")
    print(" " * 10 + "+" + "-" * width)
    print(f"{'':11}{config.min_temperature:<.0f} K{'':>{width - 12}}{config.max_temperature:.0f} K")


def run_check() -> int:
    """
    Check the classifier against known reference points.

    Returns:
        Process exit code (0 if every point matches)
    """
    print("=" * 60)
    print("Water Phase Diagram - Reference Check")
    print("=" * 60 + "\n")

    failures = 0
    for temperature, pressure, expected, label in REFERENCE_POINTS:
        phase = classify_phase(temperature, pressure)
        if phase == expected:
            print(f"  ✓ {label:26s} T={temperature:8.3f} K  P={pressure:8.4g} atm  {phase.value}")
        else:
            failures += 1
            print(f"  ✗ {label:26s} T={temperature:8.3f} K  P={pressure:8.4g} atm  "
                  f"{phase.value} (expected {expected.value})")

    if failures == 0:
        print("\n  ✓ All reference points classified correctly")
        return 0

    print(f"\n  ⚠ {failures} reference point(s) misclassified")
    return 1


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Water Phase Diagram Explorer - phase classification for water",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --classify 373.15 1         Classify a point (K, atm)
  python main.py --classify 25 1 --celsius   Classify with T in °C
  python main.py --curves --samples 20       Print boundary curves
  python main.py --map                       Draw a text phase map
  python main.py --check                     Check reference points
        """
    )

    parser.add_argument('--classify', nargs=2, metavar=('T', 'P'),
                       help='Classify a point (temperature, pressure)')
    parser.add_argument('--celsius', action='store_true',
                       help='Interpret --classify temperature in °C')
    parser.add_argument('--curves', action='store_true',
                       help='Print sampled boundary curves')
    parser.add_argument('--samples', '-n', type=int, default=10,
                       help='Points per curve (default: 10)')
    parser.add_argument('--log-spacing', action='store_true',
                       help='Sample curves at logarithmically spaced temperatures')
    parser.add_argument('--map', action='store_true',
                       help='Draw a text phase map')
    parser.add_argument('--check', action='store_true',
                       help='Check reference points')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Enable debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.classify:
        sys.exit(run_classify(args.classify[0], args.classify[1], celsius=args.celsius))
    elif args.curves:
        run_curves(n_samples=args.samples, spacing="log" if args.log_spacing else "linear")
    elif args.map:
        run_map()
    elif args.check:
        sys.exit(run_check())
    else:
        parser.print_help()
        print("\nNo action specified. Run with --classify, --curves, --map, or --check")


if __name__ == "__main__":
    main()
