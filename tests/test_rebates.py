"""Tests for state rebate matching."""

import pytest

from home_audit.audit_engine.rebates import (
    STATE_REBATES,
    match_rebates,
    rebates_for_equipment,
    rebates_for_state,
)
from home_audit.models import Equipment, EquipmentType, Home, USState


class TestRebateTable:

    def test_every_state_has_programs(self):
        assert set(STATE_REBATES) == set(USState)
        for state in USState:
            assert rebates_for_state(state)

    def test_returns_a_copy(self):
        rebates_for_state(USState.CALIFORNIA).clear()
        assert rebates_for_state(USState.CALIFORNIA)


class TestRebatesForEquipment:

    def test_heat_pump_in_california(self):
        titles = [r.title for r in rebates_for_equipment(USState.CALIFORNIA, [EquipmentType.HEAT_PUMP])]
        assert "TECH Clean California Heat Pump Rebate" in titles
        assert "Self-Generation Incentive Program (SGIP)" not in titles

    def test_tankless_matches_water_heater_program(self):
        titles = [
            r.title
            for r in rebates_for_equipment(USState.CALIFORNIA, [EquipmentType.WATER_HEATER_TANKLESS])
        ]
        assert "PG&E Heat Pump Water Heater Rebate" in titles

    def test_no_types(self):
        assert rebates_for_equipment(USState.TEXAS, []) == []


class TestMatchRebates:
    """Test home-level matching including programs open to any home."""

    def test_general_programs_always_match(self, empty_home):
        titles = [r.title for r in match_rebates(empty_home, USState.CALIFORNIA)]
        assert titles == ["Self-Generation Incentive Program (SGIP)"]

    def test_weatherization(self):
        home = Home(equipment=[Equipment(equipment_type=EquipmentType.WINDOWS)])
        titles = [r.title for r in match_rebates(home, USState.MASSACHUSETTS)]
        assert "Mass Save Weatherization" in titles

    @pytest.mark.parametrize("state", list(USState))
    def test_matches_cover_home_equipment(self, state, audited_home):
        home_types = {eq.equipment_type for eq in audited_home.equipment}
        for rebate in match_rebates(audited_home, state):
            assert not rebate.equipment_types or home_types.intersection(rebate.equipment_types)
