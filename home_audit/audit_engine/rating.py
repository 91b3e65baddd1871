"""Letter grade scale: map a 0-100 score to A-F."""

from __future__ import annotations

from home_audit.audit_engine.constants import GRADE_BREAKPOINTS, GRADE_SUMMARY
from home_audit.models import LetterGrade


def letter_grade(score: float) -> LetterGrade:
    """Return the letter grade for *score*.

    Args:
        score: Score on a 0-100 scale. Values outside the range are accepted.

    Returns:
        A for 85+, B for 70+, C for 55+, D for 40+, otherwise F.
    """
    for threshold, grade in GRADE_BREAKPOINTS:
        if score >= threshold:
            return grade
    return LetterGrade.F


def grade_summary(grade: LetterGrade) -> str:
    return GRADE_SUMMARY[grade]
