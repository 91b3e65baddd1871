"""Tests for efficiency lookups and the annual cost model."""

import pytest

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.constants import EFFICIENCY_TABLE
from home_audit.models import AgeRange, ClimateZone, Equipment, EquipmentType


class TestEfficiencyTable:
    """Test the (type, age) efficiency table."""

    def test_table_is_complete(self):
        entries = [(t, a) for t in EquipmentType for a in AgeRange]
        assert len(entries) == 55
        for eq_type, age in entries:
            spec = efficiency.lookup(eq_type, age)
            assert spec.upgrade_cost > 0

    @pytest.mark.parametrize("eq_type", [t for t in EquipmentType if t != EquipmentType.WINDOWS])
    def test_older_is_never_more_efficient(self, eq_type):
        ages = [AgeRange.YEARS_20_PLUS, AgeRange.YEARS_15_20, AgeRange.YEARS_10_15,
                AgeRange.YEARS_5_10, AgeRange.YEARS_0_5]
        estimates = [EFFICIENCY_TABLE[eq_type][a].estimated for a in ages]
        assert estimates == sorted(estimates)

    def test_windows_lower_is_better(self):
        assert not efficiency.higher_is_better(EquipmentType.WINDOWS)
        old = efficiency.lookup(EquipmentType.WINDOWS, AgeRange.YEARS_20_PLUS).estimated
        new = efficiency.lookup(EquipmentType.WINDOWS, AgeRange.YEARS_0_5).estimated
        assert old > new

    def test_old_central_ac(self):
        spec = efficiency.lookup(EquipmentType.CENTRAL_AC, AgeRange.YEARS_20_PLUS)
        assert spec.estimated == 9.0
        assert spec.code_minimum == 15.2
        assert spec.best_in_class == 24.0

    def test_labels(self):
        assert efficiency.label(EquipmentType.CENTRAL_AC) == "Central AC"
        assert efficiency.efficiency_unit(EquipmentType.FURNACE) == "AFUE %"
        assert efficiency.icon(EquipmentType.CENTRAL_AC) == "snowflake"


class TestMeetsTarget:

    def test_higher_is_better(self):
        assert efficiency.meets_target(EquipmentType.CENTRAL_AC, 16.0, 15.2)
        assert not efficiency.meets_target(EquipmentType.CENTRAL_AC, 14.0, 15.2)

    def test_windows_compare_downward(self):
        assert efficiency.meets_target(EquipmentType.WINDOWS, 0.25, 0.30)
        assert not efficiency.meets_target(EquipmentType.WINDOWS, 0.40, 0.30)

    @pytest.mark.parametrize("eq_type", [EquipmentType.WINDOWS, EquipmentType.CENTRAL_AC])
    @pytest.mark.parametrize("current", [0.0, -1.0])
    def test_non_positive_never_meets(self, eq_type, current):
        assert not efficiency.meets_target(eq_type, current, 0.30)


class TestSpecFor:

    def test_recorded_values_override_table(self):
        eq = Equipment(
            equipment_type=EquipmentType.CENTRAL_AC,
            age_range=AgeRange.YEARS_20_PLUS,
            estimated_efficiency=14.0,
            best_in_class=26.0,
        )
        spec = efficiency.spec_for(eq)
        assert spec.estimated == 14.0
        assert spec.code_minimum == 15.2
        assert spec.best_in_class == 26.0

    def test_falls_back_to_age_estimate(self, old_central_ac):
        assert efficiency.current_efficiency(old_central_ac) == 9.0


class TestAnnualCost:
    """Test the annual cost model."""

    def test_central_ac_moderate(self):
        cost = efficiency.estimate_annual_cost(
            EquipmentType.CENTRAL_AC, 9.0, 1500, ClimateZone.MODERATE, 0.16
        )
        assert cost == pytest.approx(1500 * 27.5 / 9.0 * 0.16)
        assert cost == pytest.approx(733.33, abs=0.01)

    def test_furnace(self):
        cost = efficiency.estimate_annual_cost(
            EquipmentType.FURNACE, 80, 1000, ClimateZone.COLD, gas_rate=1.0
        )
        assert cost == pytest.approx(1000 * 1000 * 1.0 / 80)

    def test_water_heater(self):
        cost = efficiency.estimate_annual_cost(
            EquipmentType.WATER_HEATER, 0.5, 1500, ClimateZone.HOT
        )
        assert cost == pytest.approx(800.0)

    @pytest.mark.parametrize("eq_type", [
        EquipmentType.THERMOSTAT,
        EquipmentType.INSULATION,
        EquipmentType.WINDOWS,
        EquipmentType.WASHER,
        EquipmentType.DRYER,
    ])
    def test_no_direct_cost_model(self, eq_type):
        assert efficiency.estimate_annual_cost(eq_type, 10.0, 1500, ClimateZone.HOT) == 0.0

    @pytest.mark.parametrize("value", [0.0, -3.0])
    def test_non_positive_efficiency(self, value):
        assert efficiency.estimate_annual_cost(
            EquipmentType.CENTRAL_AC, value, 1500, ClimateZone.HOT
        ) == 0.0

    def test_rate_scales_cost(self):
        low = efficiency.estimate_annual_cost(EquipmentType.HEAT_PUMP, 14, 2000, ClimateZone.HOT, 0.10)
        high = efficiency.estimate_annual_cost(EquipmentType.HEAT_PUMP, 14, 2000, ClimateZone.HOT, 0.30)
        assert high == pytest.approx(low * 3)


class TestSavingsAndPayback:

    def test_savings_positive_for_upgrade(self):
        savings = efficiency.estimate_annual_savings(
            EquipmentType.CENTRAL_AC, 9.0, 24.0, 1500, ClimateZone.MODERATE
        )
        expected = 1500 * 27.5 * 0.16 * (1 / 9.0 - 1 / 24.0)
        assert savings == pytest.approx(expected)

    def test_savings_never_negative(self):
        assert efficiency.estimate_annual_savings(
            EquipmentType.CENTRAL_AC, 24.0, 9.0, 1500, ClimateZone.MODERATE
        ) == 0.0

    def test_payback(self):
        assert efficiency.payback_years(6000, 500) == pytest.approx(12.0)

    @pytest.mark.parametrize("savings", [0.0, -10.0])
    def test_payback_without_savings(self, savings):
        assert efficiency.payback_years(6000, savings) is None


class TestHeatPumpHeating:

    def test_cost(self):
        cost = efficiency.estimate_heat_pump_heating_cost(10, 1500, ClimateZone.COLD, 0.20)
        assert cost == pytest.approx(1500 * 60_000 / 10_000 * 0.20)

    def test_higher_hspf_is_cheaper(self):
        low = efficiency.estimate_heat_pump_heating_cost(8, 1500, ClimateZone.MODERATE)
        high = efficiency.estimate_heat_pump_heating_cost(13, 1500, ClimateZone.MODERATE)
        assert high < low

    def test_zero_hspf(self):
        assert efficiency.estimate_heat_pump_heating_cost(0, 1500, ClimateZone.COLD) == 0.0
