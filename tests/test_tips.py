"""Tests for room tips and home quick wins."""

import pytest

from home_audit.audit_engine.profile import generate_profile
from home_audit.audit_engine.tips import home_quick_wins, room_recommendations
from home_audit.models import (
    AgeRange,
    CardinalDirection,
    CeilingHeight,
    Equipment,
    EquipmentType,
    Home,
    InsulationQuality,
    Room,
    WindowInfo,
    WindowSize,
)


class TestRoomRecommendations:

    def test_demo_room(self, demo_room):
        titles = [t.title for t in room_recommendations(demo_room)]
        assert titles == [
            "Low-E Window Film",
            "Upgrade to R-49 Attic Insulation",
            "Aerosol Duct Sealing",
        ]

    def test_duct_sealing_always_last(self):
        tips = room_recommendations(Room(square_footage=150, insulation=InsulationQuality.GOOD))
        assert [t.title for t in tips] == ["Aerosol Duct Sealing"]

    def test_film_skipped_for_north_windows(self):
        room = Room(square_footage=300, windows=[WindowInfo(direction=CardinalDirection.NORTH)])
        assert "Low-E Window Film" not in [t.title for t in room_recommendations(room)]

    def test_glazing_and_tall_ceiling(self):
        room = Room(
            square_footage=100,
            ceiling_height=CeilingHeight.TWELVE,
            insulation=InsulationQuality.GOOD,
            windows=[WindowInfo(direction=CardinalDirection.EAST, size=WindowSize.LARGE)],
        )
        titles = [t.title for t in room_recommendations(room)]
        assert titles == [
            "Reduce Thermal Glazing Exposure",
            "Install Ceiling Fans for Destratification",
            "Aerosol Duct Sealing",
        ]

    def test_ten_foot_ceiling_is_not_tall(self):
        room = Room(square_footage=300, ceiling_height=CeilingHeight.TEN)
        assert "Install Ceiling Fans for Destratification" not in [
            t.title for t in room_recommendations(room)
        ]


class TestQuickWins:
    """Test home-level quick wins."""

    def test_audited_home(self, audited_home):
        wins = home_quick_wins(audited_home, generate_profile(audited_home))
        assert [w.title for w in wins] == [
            "Switch to LED Bulbs",
            "Use Smart Power Strips",
            "Set Back Your Thermostat",
            "Lower Water Heater to 120F",
            "Improve Attic Insulation",
        ]

    def test_empty_home_asks_for_bills(self, empty_home):
        wins = home_quick_wins(empty_home, generate_profile(empty_home))
        assert [w.title for w in wins] == ["Add Your Utility Bills"]

    @pytest.mark.parametrize("age,expected", [
        (AgeRange.YEARS_20_PLUS, True),
        (AgeRange.YEARS_0_5, False),
    ])
    def test_thermostat_setback(self, age, expected):
        home = Home(equipment=[Equipment(equipment_type=EquipmentType.THERMOSTAT, age_range=age)])
        titles = [w.title for w in home_quick_wins(home, generate_profile(home))]
        assert ("Set Back Your Thermostat" in titles) is expected

    def test_hvac_without_thermostat(self, old_central_ac):
        home = Home(equipment=[old_central_ac])
        titles = [w.title for w in home_quick_wins(home, generate_profile(home))]
        assert "Set Back Your Thermostat" in titles

    def test_setback_savings_use_default_size(self, old_central_ac):
        home = Home(equipment=[old_central_ac])
        wins = home_quick_wins(home, generate_profile(home), default_sq_ft=2000)
        setback = next(w for w in wins if w.title == "Set Back Your Thermostat")
        assert setback.estimated_savings == "Save ~$400/yr"
