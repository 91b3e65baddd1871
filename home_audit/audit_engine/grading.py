"""
Grading engine.

Scores are on a 0-100 scale and map to letters through ``rating.letter_grade``.

Equipment is scored by where its efficiency sits between the code minimum and
the best in class for its type, respecting the metric direction:

    at or beyond best in class      -> 100
    between code minimum and best   -> 40 + 45 * fraction of the way to best
    short of code minimum           -> 40 * efficiency / code minimum

so code-minimum equipment lands at the bottom of D and anything short of it is F.
"""

from __future__ import annotations

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.constants import (
    CEILING_FACTOR,
    CLIMATE_BTU_PER_SQFT,
    EQUIPMENT_SCORE_AT_CODE_MINIMUM,
    EQUIPMENT_SCORE_SPAN_TO_BEST,
    HOME_GRADE_WEIGHTS,
    NO_DATA_SUMMARY,
    ROOM_SCORE_REFERENCE_RATIO,
    SAFETY_FACTOR,
)
from home_audit.audit_engine.load_calculator import ThermalLoadCalculator
from home_audit.audit_engine.profile import score_envelope
from home_audit.audit_engine.rating import grade_summary, letter_grade
from home_audit.models import Equipment, GradeResult, Home, Room


def no_data() -> GradeResult:
    return GradeResult(grade=None, score=None, summary=NO_DATA_SUMMARY)


def grade_from_score(score: float) -> GradeResult:
    grade = letter_grade(score)
    return GradeResult(grade=grade, score=score, summary=grade_summary(grade))


# --- equipment ---

def equipment_score(equipment: Equipment) -> float:
    """0-100 efficiency score for one piece of equipment."""
    eq_type = equipment.equipment_type
    spec = efficiency.spec_for(equipment)
    current, code_min, best = spec.estimated, spec.code_minimum, spec.best_in_class
    if current <= 0 or code_min <= 0:
        return 0.0

    if efficiency.meets_target(eq_type, current, best):
        return 100.0
    if efficiency.meets_target(eq_type, current, code_min):
        # best != code_min here, otherwise the first check would have matched
        fraction = (current - code_min) / (best - code_min)
        return EQUIPMENT_SCORE_AT_CODE_MINIMUM + EQUIPMENT_SCORE_SPAN_TO_BEST * fraction

    if efficiency.higher_is_better(eq_type):
        ratio = current / code_min
    else:
        ratio = code_min / current
    return EQUIPMENT_SCORE_AT_CODE_MINIMUM * min(ratio, 1.0)


def grade_equipment(equipment: Equipment) -> GradeResult:
    return grade_from_score(equipment_score(equipment))


# --- rooms ---

def room_score(room: Room, calculator: ThermalLoadCalculator | None = None) -> float | None:
    """Score a room by its load relative to an average-insulated, windowless room.

    Returns None for placeholder rooms without a floor area.
    """
    if room.square_footage <= 0:
        return None
    calculator = calculator or ThermalLoadCalculator()
    final_btu = calculator.calculate_room(room).final_btu
    reference = (
        room.square_footage
        * CEILING_FACTOR[room.ceiling_height]
        * CLIMATE_BTU_PER_SQFT[room.climate_zone]
        * SAFETY_FACTOR
    )
    ratio = final_btu / reference
    return min(max(100.0 - (ratio - ROOM_SCORE_REFERENCE_RATIO) * 100.0, 0.0), 100.0)


def grade_room(room: Room) -> GradeResult:
    score = room_score(room)
    if score is None:
        return no_data()
    return grade_from_score(score)


# --- home ---

def grade_home(home: Home) -> GradeResult:
    """Blend equipment, envelope and room scores into one home grade."""
    parts: dict[str, float] = {}

    if home.equipment:
        scores = [equipment_score(eq) for eq in home.equipment]
        parts["equipment"] = sum(scores) / len(scores)

    envelope = score_envelope(home)
    if envelope is not None:
        parts["envelope"] = envelope.score

    calculator = ThermalLoadCalculator()
    room_scores = [s for s in (room_score(r, calculator) for r in home.rooms) if s is not None]
    if room_scores:
        parts["rooms"] = sum(room_scores) / len(room_scores)

    if not parts:
        return no_data()

    weight_total = sum(HOME_GRADE_WEIGHTS[name] for name in parts)
    score = sum(HOME_GRADE_WEIGHTS[name] * value for name, value in parts.items()) / weight_total
    return grade_from_score(score)
