"""Validation - Stateless field checks shared by all registries."""

from pesquisa.validation.exceptions import ValidationError
from pesquisa.validation.models import DEFAULT_LIMITS, Limits
from pesquisa.validation.validator import (
    require_choice,
    require_date,
    require_email,
    require_gpa,
    require_photo_url,
    require_score,
    require_semester,
    require_text,
)

__all__ = [
    "DEFAULT_LIMITS",
    "Limits",
    "ValidationError",
    "require_choice",
    "require_date",
    "require_email",
    "require_gpa",
    "require_photo_url",
    "require_score",
    "require_semester",
    "require_text",
]
