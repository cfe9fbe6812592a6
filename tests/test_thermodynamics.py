#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermodynamics Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import logging
import numpy as np
import pytest
from src.constants import T_TRIPLE, P_TRIPLE, T_CRITICAL, P_CRITICAL
from src.physics import vapor_pressure, sublimation_pressure
from src.thermodynamics import (
    Phase,
    PHASE_UNKNOWN,
    PHASES_BY_CODE,
    classify_phase,
    classify_phase_code,
    classify_grid,
    sublimation_decision_pressure,
    vaporization_decision_pressure,
    sublimation_decision_temperature,
    vaporization_decision_temperature,
    fusion_decision_temperature,
    decision_boundary_pressure,
    decision_boundary_temperature,
    identify_phase,
    special_point,
    PhaseChangeTracker
)


class TestReferencePoints:
    """Classification of well-known points."""

    def test_triple_point_is_liquid(self):
        """The triple point is labelled Liquid, every time."""
        phases = {classify_phase(273.16, 0.00604) for _ in range(20)}
        assert phases == {Phase.LIQUID}

    def test_critical_point_is_supercritical(self):
        assert classify_phase(647.096, 217.75) == Phase.SUPERCRITICAL

    def test_boiling_point_is_liquid(self):
        """At 1 atm and 373.15 K water is still liquid."""
        assert classify_phase(373.15, 1.0) == Phase.LIQUID

    def test_below_boiling_pressure_is_gas(self):
        assert classify_phase(373.15, 0.5) == Phase.GAS

    def test_just_above_triple_temperature_is_liquid(self):
        assert classify_phase(273.17, 0.5) == Phase.LIQUID

    def test_zero_celsius_lies_below_triple_cut(self):
        """273.15 K is below the 273.16 K split, so the ice branch decides."""
        assert classify_phase(273.15, 0.5) == Phase.SOLID

    def test_room_conditions(self):
        assert classify_phase(298.15, 1.0) == Phase.LIQUID

    def test_cold_high_pressure_is_solid(self):
        assert classify_phase(220.0, 100.0) == Phase.SOLID

    def test_integer_arguments(self):
        assert classify_phase(300, 1) == Phase.LIQUID


class TestCriticalRegion:
    """Branches at and above the critical temperature."""

    def test_above_critical_temperature_low_pressure_is_gas(self):
        assert classify_phase(700.0, 100.0) == Phase.GAS

    def test_above_critical_point_is_supercritical(self):
        assert classify_phase(700.0, 300.0) == Phase.SUPERCRITICAL

    def test_critical_pressure_edge(self):
        assert classify_phase(700.0, P_CRITICAL) == Phase.SUPERCRITICAL
        assert classify_phase(700.0, P_CRITICAL - 1e-9) == Phase.GAS

    def test_critical_temperature_below_critical_pressure(self):
        assert classify_phase(T_CRITICAL, P_CRITICAL - 1.0) == Phase.GAS

    def test_just_below_critical_temperature(self):
        """Below T_critical high pressure is liquid, not supercritical."""
        assert classify_phase(T_CRITICAL - 0.01, 250.0) == Phase.LIQUID


class TestSublimationBoundary:
    """Solid-gas decision boundary."""

    def test_knee_continuity(self):
        """Crossing the model value at 250 K flips Gas to Solid."""
        boundary = sublimation_pressure(250.0)
        assert classify_phase(250.0, boundary * (1 - 1e-6)) == Phase.GAS
        assert classify_phase(250.0, boundary * (1 + 1e-6)) == Phase.SOLID

    def test_model_used_up_to_knee(self):
        for T in (200.0, 225.0, 250.0):
            assert sublimation_decision_pressure(T) == sublimation_pressure(T)

    def test_linear_between_knee_and_triple(self):
        p_knee = sublimation_pressure(250.0)
        T = 250.0 + 0.5 * (T_TRIPLE - 250.0)
        assert sublimation_decision_pressure(T) == pytest.approx(0.5 * (p_knee + P_TRIPLE))

    def test_meets_triple_point(self):
        assert sublimation_decision_pressure(T_TRIPLE) == pytest.approx(P_TRIPLE)

    def test_no_kink_jump_at_knee(self):
        assert sublimation_decision_pressure(250.0 + 1e-9) == pytest.approx(
            sublimation_decision_pressure(250.0), rel=1e-6
        )

    def test_between_knee_and_triple(self):
        """Above 250 K the interpolated line decides."""
        assert classify_phase(260.0, 0.001) == Phase.GAS
        assert classify_phase(260.0, 0.01) == Phase.SOLID


class TestVaporizationBoundary:
    """Liquid-gas decision boundary."""

    def test_anchor_points(self):
        assert vaporization_decision_pressure(T_TRIPLE) == P_TRIPLE
        assert vaporization_decision_pressure(300.0) == 0.03
        assert vaporization_decision_pressure(373.15) == 1.0
        assert vaporization_decision_pressure(T_CRITICAL) == P_CRITICAL

    def test_midpoints_are_linear(self):
        assert vaporization_decision_pressure(0.5 * (300.0 + 373.15)) == pytest.approx(0.515)
        assert vaporization_decision_pressure(0.5 * (373.15 + T_CRITICAL)) == pytest.approx(
            0.5 * (1.0 + P_CRITICAL)
        )

    def test_decision_line_differs_from_wagner(self):
        """Between anchors the classifier keeps its own line, not the Wagner curve."""
        T = 330.0
        assert vaporization_decision_pressure(T) > 2 * vapor_pressure(T)
        # Above the analytic curve but below the drawn line: still Gas
        assert classify_phase(T, 1.5 * vapor_pressure(T)) == Phase.GAS


class TestInverseBoundaries:
    """Pressure-to-temperature inverses of the drawn boundaries."""

    @pytest.mark.parametrize("P", [0.01, 0.03, 0.5, 1.0, 50.0, 200.0])
    def test_vaporization_round_trip(self, P):
        T = vaporization_decision_temperature(P)
        assert T_TRIPLE <= T <= T_CRITICAL
        assert vaporization_decision_pressure(T) == pytest.approx(P, rel=1e-9)

    def test_vaporization_anchors(self):
        assert vaporization_decision_temperature(P_TRIPLE) == T_TRIPLE
        assert vaporization_decision_temperature(0.03) == pytest.approx(300.0)
        assert vaporization_decision_temperature(1.0) == pytest.approx(373.15)
        assert vaporization_decision_temperature(P_CRITICAL) == pytest.approx(T_CRITICAL)

    def test_vaporization_clamped(self):
        assert vaporization_decision_temperature(0.001) == T_TRIPLE
        assert vaporization_decision_temperature(300.0) == T_CRITICAL

    @pytest.mark.parametrize("P", [1e-7, 1e-6, 0.001, 0.003, 0.005])
    def test_sublimation_round_trip(self, P):
        T = sublimation_decision_temperature(P)
        assert T < T_TRIPLE
        assert sublimation_decision_pressure(T) == pytest.approx(P, rel=1e-9)

    def test_sublimation_clamped_at_triple_point(self):
        assert sublimation_decision_temperature(P_TRIPLE) == T_TRIPLE
        assert sublimation_decision_temperature(1.0) == T_TRIPLE

    def test_fusion_line(self):
        assert fusion_decision_temperature(P_TRIPLE) == T_TRIPLE
        assert fusion_decision_temperature(1.0) == 273.15
        assert fusion_decision_temperature(100.0) == pytest.approx(273.12)
        assert fusion_decision_temperature(500.0) == 273.07

    def test_fusion_line_non_increasing(self):
        pressures = np.geomspace(P_TRIPLE, 300.0, 200)
        temperatures = np.array([fusion_decision_temperature(p) for p in pressures])
        assert np.all(np.diff(temperatures) <= 1e-12)

    @pytest.mark.parametrize("P", [1e-5, 0.002, P_TRIPLE, 0.2, 20.0, 150.0])
    def test_gas_boundary_round_trip(self, P):
        T = decision_boundary_temperature(P)
        assert decision_boundary_pressure(T) == pytest.approx(P, rel=1e-9)


class TestMonotonicity:
    """Raising pressure at fixed T crosses the gas boundary exactly once."""

    def test_single_flip(self):
        pressures = np.geomspace(1e-12, 300.0, 500)
        for T in np.linspace(200.0, T_CRITICAL - 0.5, 60):
            is_gas = np.array([classify_phase(T, p) == Phase.GAS for p in pressures])
            flips = np.count_nonzero(is_gas[1:] != is_gas[:-1])
            assert flips == 1, f"T={T}: {flips} flips"
            assert is_gas[0] and not is_gas[-1]


class TestRangeSafety:
    """The fall-through sentinel is unreachable over the diagram domain."""

    def test_grid_has_no_unknown(self):
        temperatures = np.linspace(200.0, 700.0, 501)
        pressures = np.geomspace(0.001, 300.0, 301)
        codes = classify_grid(temperatures, pressures)
        assert codes.shape == (301, 501)
        assert not np.any(codes == PHASE_UNKNOWN)

    def test_special_temperatures_have_no_unknown(self):
        edges = [200.0, 250.0, T_TRIPLE, 300.0, 373.15, T_CRITICAL, 700.0]
        for T in edges:
            for P in (0.001, P_TRIPLE, 0.03, 1.0, P_CRITICAL, 300.0):
                assert classify_phase(T, P) != Phase.UNKNOWN

    def test_nan_reaches_sentinel(self):
        """Only invalid numbers fall through every branch."""
        assert classify_phase(float("nan"), 1.0) == Phase.UNKNOWN

    def test_determinism(self):
        rng = np.random.default_rng(7)
        for _ in range(200):
            T = rng.uniform(200.0, 700.0)
            P = 10 ** rng.uniform(-3.0, np.log10(300.0))
            assert classify_phase(T, P) == classify_phase(T, P)


class TestClassifyGrid:
    """Tests for grid classification."""

    def test_matches_pointwise(self):
        temperatures = np.linspace(200.0, 700.0, 41)
        pressures = np.geomspace(0.001, 300.0, 37)
        codes = classify_grid(temperatures, pressures)

        for j, P in enumerate(pressures):
            for i, T in enumerate(temperatures):
                assert PHASES_BY_CODE[int(codes[j, i])] == classify_phase(T, P)

    def test_scalar_code(self):
        assert PHASES_BY_CODE[classify_phase_code(373.15, 0.5)] == Phase.GAS


class TestIdentifyPhase:
    """Tests for PhaseInfo."""

    def test_fields(self):
        info = identify_phase(298.15, 1.0)
        assert info.phase == Phase.LIQUID
        assert info.temperature == 298.15
        assert info.pressure == 1.0
        assert info.vapor_pressure == pytest.approx(vapor_pressure(298.15))
        assert info.special_point is None
        assert "Liquid" in info.description
        assert "25.00 °C" in info.description

    def test_triple_point(self):
        info = identify_phase(T_TRIPLE, P_TRIPLE)
        assert info.special_point == "triple point"
        assert "triple point" in info.description

    def test_special_point(self):
        assert special_point(273.165, 0.0065) == "triple point"
        assert special_point(647.1, 217.7) == "critical point"
        assert special_point(647.1, 217.0) is None
        assert special_point(300.0, 1.0) is None


class TestPhaseChangeTracker:
    """Tests for phase change tracking."""

    def test_first_update_has_no_transition(self):
        tracker = PhaseChangeTracker()
        assert tracker.current_phase is None
        assert tracker.update(298.15, 1.0) is None
        assert tracker.current_phase == Phase.LIQUID

    def test_boiling_transition(self):
        tracker = PhaseChangeTracker()
        tracker.update(350.0, 1.0)
        assert tracker.update(360.0, 1.0) is None
        assert tracker.update(380.0, 1.0) == (Phase.LIQUID, Phase.GAS)

        events = tracker.get_recent_transitions()
        assert len(events) == 1
        assert events[0][2:] == (Phase.LIQUID, Phase.GAS)

    def test_transition_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="src.thermodynamics")
        tracker = PhaseChangeTracker()
        tracker.update(260.0, 1.0)
        tracker.update(300.0, 1.0)
        assert "Phase change: Solid -> Liquid" in caplog.text

    def test_history_trimmed(self):
        tracker = PhaseChangeTracker(history_length=5)
        for T in np.linspace(280.0, 290.0, 12):
            tracker.update(T, 1.0)
        assert len(tracker.phase_history) == 5
        assert len(tracker.temperature_history) == 5
        assert len(tracker.pressure_history) == 5

    def test_single_entry_history_reports_transition(self):
        tracker = PhaseChangeTracker(history_length=1)
        assert tracker.update(350.0, 1.0) is None
        assert tracker.update(380.0, 1.0) == (Phase.LIQUID, Phase.GAS)
        assert tracker.current_phase == Phase.GAS

    def test_invalid_history_length(self):
        with pytest.raises(ValueError):
            PhaseChangeTracker(history_length=0)

    def test_transition_events_bounded(self):
        tracker = PhaseChangeTracker(history_length=5)
        for i in range(1000):
            tracker.update(350.0 if i % 2 == 0 else 380.0, 1.0)
        assert len(tracker.transition_events) == 5
        assert tracker.transition_events[-1][2:] == (Phase.LIQUID, Phase.GAS)

        recent = tracker.get_recent_transitions(3)
        assert isinstance(recent, list)
        assert len(recent) == 3
        assert recent[-1] == tracker.transition_events[-1]
        assert tracker.get_recent_transitions(0) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
