"""Data models for field validation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Limits:
    """Inclusive numeric bounds applied by the validators.

    Attributes:
        score_min: Lowest accepted viability/adherence score.
        score_max: Highest accepted viability/adherence score.
        semester_min: Lowest accepted student semester.
        semester_max: Highest accepted student semester.
        gpa_min: Lowest accepted student GPA.
        gpa_max: Highest accepted student GPA.
    """

    score_min: int = 1
    score_max: int = 5
    semester_min: int = 1
    semester_max: int = 20
    gpa_min: float = 0.0
    gpa_max: float = 10.0


DEFAULT_LIMITS = Limits()
