"""Tests for the room cooling load calculator."""

from __future__ import annotations

import pytest

from home_audit.audit_engine.load_calculator import (
    ThermalLoadCalculator,
    effective_u_factor,
    window_heat_gain,
)
from home_audit.models import (
    CardinalDirection,
    CeilingHeight,
    ClimateZone,
    FrameMaterial,
    Home,
    InsulationQuality,
    PaneType,
    Room,
    WindowCondition,
    WindowInfo,
    WindowSize,
)


class TestWindowHeatGain:
    """Test per-window U-factor and solar gain."""

    def test_reference_window_has_unit_ratio(self):
        # double pane (0.30) * vinyl (0.95) * good (1.00) == reference 0.285
        window = WindowInfo(direction=CardinalDirection.NORTH, size=WindowSize.MEDIUM)
        assert effective_u_factor(window) == pytest.approx(0.285)
        assert window_heat_gain(window) == pytest.approx(40 * 20)

    def test_worst_case_window(self):
        window = WindowInfo(
            direction=CardinalDirection.SOUTH,
            size=WindowSize.LARGE,
            pane_type=PaneType.SINGLE,
            frame_material=FrameMaterial.ALUMINUM,
            condition=WindowCondition.POOR,
        )
        u = 1.10 * 1.30 * 1.35
        assert effective_u_factor(window) == pytest.approx(u)
        assert window_heat_gain(window) == pytest.approx(150 * 35 * u / 0.285)

    def test_unassessed_window_calculates_as_double_pane(self):
        window = WindowInfo(
            pane_type="not_assessed", frame_material="not_assessed", condition="not_assessed"
        )
        assert effective_u_factor(window) == pytest.approx(0.30)
        assert not window.is_fully_assessed

    def test_condition_monotonic(self):
        gains = [
            window_heat_gain(WindowInfo(condition=c))
            for c in (WindowCondition.POOR, WindowCondition.FAIR, WindowCondition.GOOD)
        ]
        assert gains[0] > gains[1] > gains[2]

    @pytest.mark.parametrize("direction", list(CardinalDirection))
    @pytest.mark.parametrize("pane", list(PaneType))
    def test_gain_never_negative(self, direction, pane):
        assert window_heat_gain(WindowInfo(direction=direction, pane_type=pane)) >= 0


class TestThermalLoadCalculator:
    """Test the room load breakdown."""

    def setup_method(self):
        self.calc = ThermalLoadCalculator()

    def test_demo_room(self, demo_room):
        """2000 sq ft hot room with poor insulation and five windows."""
        result = self.calc.calculate_room(demo_room)

        assert result.base_btu == pytest.approx(2000 * 1.12 * 30)  # 67200
        south = 150 * 35 * (1.10 * 1.30 * 1.35) / 0.285
        west = 120 * 20 * (0.30 * 0.95 * 1.15) / 0.285
        north = 40 * 20 * 1.0
        east = 100 * 10 * 0.30 / 0.285
        gain = 2 * south + west + north + east
        assert result.window_heat_gain == pytest.approx(gain)
        assert result.subtotal == pytest.approx(67200 + gain)
        assert result.after_insulation == pytest.approx((67200 + gain) * 1.30)
        assert result.final_btu == pytest.approx((67200 + gain) * 1.30 * 1.10)
        assert result.tonnage == pytest.approx(result.final_btu / 12000)
        assert result.final_btu == pytest.approx(204_399, rel=1e-4)

    def test_upgrades_reduce_demo_load(self, demo_room):
        before = self.calc.calculate_room(demo_room).final_btu
        upgraded_windows = [
            w.model_copy(update={
                "pane_type": PaneType.DOUBLE,
                "frame_material": FrameMaterial.VINYL,
                "condition": WindowCondition.GOOD,
            })
            for w in demo_room.windows
        ]
        upgraded = demo_room.model_copy(update={
            "insulation": InsulationQuality.GOOD,
            "windows": upgraded_windows,
        })
        assert self.calc.calculate_room(upgraded).final_btu < before

    def test_idempotent(self, demo_room):
        assert self.calc.calculate_room(demo_room) == self.calc.calculate_room(demo_room)

    def test_safety_invariant(self, demo_room):
        result = self.calc.calculate_room(demo_room)
        assert result.final_btu == result.after_insulation * 1.10
        assert result.tonnage == result.final_btu / 12000
        assert result.safety_buffer == pytest.approx(result.final_btu - result.after_insulation)

    def test_insulation_monotonic(self, demo_windows):
        loads = [
            self.calc.calculate(500, CeilingHeight.EIGHT, ClimateZone.MODERATE, q, demo_windows).final_btu
            for q in (InsulationQuality.POOR, InsulationQuality.AVERAGE, InsulationQuality.GOOD)
        ]
        assert loads[0] > loads[1] > loads[2]

    def test_unknown_insulation_matches_average(self):
        unknown = self.calc.calculate(300, CeilingHeight.EIGHT, ClimateZone.COLD, InsulationQuality.UNKNOWN)
        average = self.calc.calculate(300, CeilingHeight.EIGHT, ClimateZone.COLD, InsulationQuality.AVERAGE)
        assert unknown == average
        assert unknown.insulation_adjustment == 0

    def test_good_insulation_adjustment_negative(self):
        result = self.calc.calculate(300, CeilingHeight.EIGHT, ClimateZone.MODERATE, InsulationQuality.GOOD)
        assert result.insulation_adjustment == pytest.approx(-0.15 * 300 * 25)

    def test_window_percentage(self):
        result = self.calc.calculate(
            100, CeilingHeight.EIGHT, ClimateZone.MODERATE, InsulationQuality.AVERAGE,
            [WindowInfo(direction=CardinalDirection.NORTH, size=WindowSize.MEDIUM)],
        )
        assert result.window_heat_gain_percentage == pytest.approx(800 / result.final_btu * 100)

    def test_zero_area_room(self):
        result = self.calc.calculate(0, CeilingHeight.EIGHT, ClimateZone.MODERATE, InsulationQuality.AVERAGE)
        assert result.final_btu == 0
        assert result.window_heat_gain_percentage == 0

    def test_refresh_room_ignores_stale_cache(self, demo_room):
        stale = demo_room.model_copy(update={"calculated_btu": 1.0, "calculated_tonnage": 99.0})
        refreshed = self.calc.refresh_room(stale)
        expected = self.calc.calculate_room(demo_room)
        assert refreshed.calculated_btu == expected.final_btu
        assert refreshed.calculated_tonnage == expected.tonnage
        assert stale.calculated_btu == 1.0  # input untouched

    def test_total_btu_skips_placeholder_rooms(self):
        home = Home(rooms=[
            Room(name="Real", square_footage=100),
            Room(name="Placeholder", square_footage=0, calculated_btu=5000),
        ])
        assert self.calc.total_btu(home) == pytest.approx(100 * 25 * 1.10)
