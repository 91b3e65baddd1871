"""Tests for letter grades and the equipment, room and home scores."""

import pytest

from home_audit.audit_engine.grading import (
    equipment_score,
    grade_equipment,
    grade_home,
    grade_room,
    room_score,
)
from home_audit.audit_engine.rating import grade_summary, letter_grade
from home_audit.models import (
    AgeRange,
    Equipment,
    EquipmentType,
    Home,
    InsulationQuality,
    LetterGrade,
    Room,
)


class TestLetterGrade:

    @pytest.mark.parametrize("score,expected", [
        (100, LetterGrade.A),
        (85, LetterGrade.A),
        (84.9, LetterGrade.B),
        (70, LetterGrade.B),
        (55, LetterGrade.C),
        (40, LetterGrade.D),
        (39.9, LetterGrade.F),
        (0, LetterGrade.F),
        (-5, LetterGrade.F),
    ])
    def test_breakpoints(self, score, expected):
        assert letter_grade(score) == expected

    def test_every_grade_has_summary(self):
        for grade in LetterGrade:
            assert grade_summary(grade)


class TestEquipmentScore:
    """Test equipment scoring between code minimum and best in class."""

    def test_old_central_ac_fails(self, old_central_ac):
        assert equipment_score(old_central_ac) == pytest.approx(40 * 9.0 / 15.2)
        assert grade_equipment(old_central_ac).grade == LetterGrade.F

    def test_code_minimum_is_d(self):
        eq = Equipment(equipment_type=EquipmentType.CENTRAL_AC, estimated_efficiency=15.2)
        assert equipment_score(eq) == pytest.approx(40.0)
        assert grade_equipment(eq).grade == LetterGrade.D

    def test_best_in_class_is_a(self):
        eq = Equipment(equipment_type=EquipmentType.CENTRAL_AC, estimated_efficiency=24.0)
        assert equipment_score(eq) == 100.0
        assert grade_equipment(eq).grade == LetterGrade.A

    def test_windows_score_downward(self):
        # U-0.225 is halfway between code minimum 0.30 and best 0.15
        eq = Equipment(equipment_type=EquipmentType.WINDOWS, estimated_efficiency=0.225)
        assert equipment_score(eq) == pytest.approx(40 + 45 * 0.5)

    def test_old_windows_below_code(self):
        eq = Equipment(equipment_type=EquipmentType.WINDOWS, age_range=AgeRange.YEARS_20_PLUS)
        assert equipment_score(eq) == pytest.approx(40 * 0.30 / 1.1)

    @pytest.mark.parametrize("u_factor", [0.0, -0.5])
    def test_non_positive_window_u_factor_fails(self, u_factor):
        eq = Equipment(equipment_type=EquipmentType.WINDOWS, estimated_efficiency=u_factor)
        assert equipment_score(eq) == 0.0
        assert grade_equipment(eq).grade == LetterGrade.F

    def test_thermostat_without_savings(self):
        eq = Equipment(equipment_type=EquipmentType.THERMOSTAT, age_range=AgeRange.YEARS_20_PLUS)
        assert equipment_score(eq) == 0.0

    @pytest.mark.parametrize("eq_type", list(EquipmentType))
    def test_newer_never_scores_lower(self, eq_type):
        ages = [AgeRange.YEARS_20_PLUS, AgeRange.YEARS_15_20, AgeRange.YEARS_10_15,
                AgeRange.YEARS_5_10, AgeRange.YEARS_0_5]
        scores = [equipment_score(Equipment(equipment_type=eq_type, age_range=a)) for a in ages]
        assert scores == sorted(scores)
        assert all(0 <= s <= 100 for s in scores)


class TestRoomScore:

    def test_average_windowless_room(self):
        room = Room(square_footage=200, insulation=InsulationQuality.AVERAGE)
        assert room_score(room) == pytest.approx(85.0)

    def test_good_insulation_scores_full(self):
        room = Room(square_footage=200, insulation=InsulationQuality.GOOD)
        assert room_score(room) == pytest.approx(100.0)

    def test_poor_insulation(self):
        room = Room(square_footage=200, insulation=InsulationQuality.POOR)
        assert room_score(room) == pytest.approx(55.0)
        assert grade_room(room).score == pytest.approx(55.0)

    def test_demo_room_is_clamped(self, demo_room):
        assert room_score(demo_room) == 0.0
        assert grade_room(demo_room).grade == LetterGrade.F

    def test_placeholder_room(self):
        room = Room(name="Closet", square_footage=0)
        assert room_score(room) is None
        result = grade_room(room)
        assert not result.has_data
        assert result.summary


class TestHomeGrade:

    def test_empty_home_has_no_data(self, empty_home):
        result = grade_home(empty_home)
        assert result.grade is None
        assert result.score is None
        assert not result.has_data
        assert "Not enough data" in result.summary

    def test_envelope_only(self, all_good_envelope):
        result = grade_home(Home(envelope=all_good_envelope))
        assert result.score == pytest.approx(100.0)
        assert result.grade == LetterGrade.A

    def test_weighted_blend(self, all_good_envelope, old_central_ac):
        home = Home(
            equipment=[old_central_ac],
            envelope=all_good_envelope,
            rooms=[Room(square_footage=200)],
        )
        equipment = 40 * 9.0 / 15.2
        expected = 0.5 * equipment + 0.3 * 100 + 0.2 * 85
        assert grade_home(home).score == pytest.approx(expected)

    def test_weights_renormalised(self, old_central_ac):
        home = Home(equipment=[old_central_ac], rooms=[Room(square_footage=200)])
        equipment = 40 * 9.0 / 15.2
        expected = (0.5 * equipment + 0.2 * 85) / 0.7
        assert grade_home(home).score == pytest.approx(expected)

    def test_audited_home(self, audited_home):
        result = grade_home(audited_home)
        assert result.has_data
        assert 0 <= result.score <= 100
