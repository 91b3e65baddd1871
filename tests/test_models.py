"""Tests for record decoding and derived properties."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from home_audit.models import (
    AgeRange,
    Appliance,
    ApplianceCategory,
    AuditProgress,
    AuditStep,
    CardinalDirection,
    CeilingHeight,
    ClimateZone,
    EnergyBill,
    Equipment,
    EquipmentType,
    Home,
    InsulationQuality,
    PaneType,
    Room,
    USState,
    WindowInfo,
    parse_state,
)


class TestLenientDecoding:
    """Stored strings decode by value or name and fall back instead of failing."""

    @pytest.mark.parametrize("raw,expected", [
        ("good", InsulationQuality.GOOD),
        ("Good", InsulationQuality.GOOD),
        ("GOOD", InsulationQuality.GOOD),
        ("excellent", InsulationQuality.UNKNOWN),
    ])
    def test_insulation(self, raw, expected):
        assert Room(insulation=raw).insulation == expected

    def test_unknown_climate_is_moderate(self):
        assert Room(climate_zone="tropical").climate_zone == ClimateZone.MODERATE

    @pytest.mark.parametrize("raw,expected", [
        ("S", CardinalDirection.SOUTH),
        ("south", CardinalDirection.SOUTH),
        ("w", CardinalDirection.WEST),
        ("northeast", CardinalDirection.SOUTH),
    ])
    def test_direction(self, raw, expected):
        assert WindowInfo(direction=raw).direction == expected

    def test_unknown_pane_is_not_assessed(self):
        assert WindowInfo(pane_type="quad").pane_type == PaneType.NOT_ASSESSED

    @pytest.mark.parametrize("raw,expected", [
        (9, CeilingHeight.NINE),
        ("10", CeilingHeight.TEN),
        ("12ft", CeilingHeight.TWELVE),
        ("vaulted", CeilingHeight.EIGHT),
        (14, CeilingHeight.EIGHT),
    ])
    def test_ceiling(self, raw, expected):
        assert Room(ceiling_height=raw).ceiling_height == expected

    def test_age_range(self):
        assert Equipment(equipment_type="furnace", age_range="20+").age_range == AgeRange.YEARS_20_PLUS
        assert Equipment(equipment_type="furnace", age_range="ancient").age_range == AgeRange.YEARS_5_10

    def test_appliance_category(self):
        assert Appliance(category="Game Console").category == ApplianceCategory.GAME_CONSOLE
        assert Appliance(category="aquarium").category == ApplianceCategory.OTHER

    def test_equipment_type_by_name(self):
        assert Equipment(equipment_type="CENTRAL_AC").equipment_type == EquipmentType.CENTRAL_AC

    def test_unknown_equipment_type_rejected(self):
        with pytest.raises(ValidationError):
            Equipment(equipment_type="hot_tub")

    def test_unknown_home_type_is_none(self):
        assert Home(home_type="castle").home_type is None
        assert Home(home_type="Townhouse").home_type.value == "townhouse"


class TestFieldValidation:

    def test_negative_square_footage(self):
        with pytest.raises(ValidationError):
            Room(square_footage=-10)

    def test_hours_per_day_capped(self):
        with pytest.raises(ValidationError):
            Appliance(hours_per_day=25)

    def test_quantity_at_least_one(self):
        with pytest.raises(ValidationError):
            Appliance(quantity=0)


class TestUSState:

    @pytest.mark.parametrize("raw", ["California", "california", "CA", "ca"])
    def test_decodes_name_and_code(self, raw):
        assert parse_state(raw) == USState.CALIFORNIA

    def test_unsupported_state(self):
        assert parse_state("Oregon") is None
        assert Home(state="OR").state is None

    def test_code(self):
        assert USState.NEW_YORK.code == "NY"
        assert len({s.code for s in USState}) == len(USState)


class TestEnergyBill:

    def test_derived_values(self):
        bill = EnergyBill(period_start=date(2024, 6, 1), period_end=date(2024, 7, 1),
                          total_kwh=900, total_cost=180)
        assert bill.billing_days == 30
        assert bill.computed_rate == pytest.approx(0.20)
        assert bill.annualized_kwh == pytest.approx(900 / 30 * 365)

    def test_explicit_rate_wins(self):
        bill = EnergyBill(period_start=date(2024, 6, 1), period_end=date(2024, 7, 1),
                          total_kwh=900, total_cost=180, rate_per_kwh=0.25)
        assert bill.computed_rate == 0.25

    def test_empty_bill(self):
        bill = EnergyBill(period_start=date(2024, 6, 1), period_end=date(2024, 6, 1))
        assert bill.computed_rate == 0
        assert bill.annualized_kwh is None


class TestHome:

    def test_room_sum_when_total_unset(self):
        home = Home(rooms=[Room(square_footage=300), Room(square_footage=250)])
        assert home.computed_total_sq_ft == 550

    def test_manual_total_wins(self, audited_home):
        assert audited_home.computed_total_sq_ft == 1800

    def test_appliance_kwh(self, audited_home):
        expected = (150 * 24 + 100 * 5 + 20 * 24 * 2 + 60 * 5 * 6) * 365 / 1000
        assert audited_home.total_appliance_annual_kwh == pytest.approx(expected)

    def test_round_trip_json(self, audited_home):
        assert Home.model_validate_json(audited_home.model_dump_json()) == audited_home


class TestAuditProgress:

    def test_walkthrough(self):
        progress = AuditProgress()
        assert progress.next_incomplete_step == AuditStep.HOME_BASICS
        assert progress.progress_percentage == 0

        progress = progress.mark_complete(AuditStep.HOME_BASICS).mark_complete(AuditStep.HOME_BASICS)
        assert progress.completed_steps == [AuditStep.HOME_BASICS]
        assert progress.next_incomplete_step == AuditStep.ROOM_SCANNING
        assert progress.progress_percentage == pytest.approx(10.0)

    def test_complete(self):
        progress = AuditProgress()
        for step in AuditStep:
            progress = progress.mark_complete(step)
        assert progress.is_complete
        assert progress.next_incomplete_step is None
        assert progress.progress_percentage == pytest.approx(100.0)

    def test_legacy_step_decodes_to_first(self):
        progress = AuditProgress(completed_steps=["solar_survey"], current_step="review")
        assert progress.completed_steps == [AuditStep.HOME_BASICS]
        assert progress.current_step == AuditStep.REVIEW

    def test_step_numbers(self):
        assert AuditStep.HOME_BASICS.step_number == 1
        assert AuditStep.REVIEW.step_number == 10
