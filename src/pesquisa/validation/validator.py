"""Validator - stateless checks for record fields.

Every check returns None when the value is acceptable and raises
ValidationError with a human-readable message otherwise. No check
transforms its input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pesquisa.validation.exceptions import ValidationError
from pesquisa.validation.models import DEFAULT_LIMITS, Limits

EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(\.[\w-]+)*")
PHOTO_URL_PATTERN = re.compile(r"https?://\S+")
DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")
DATE_FORMAT = "%d/%m/%Y"


def require_text(value: str | None, message: str) -> None:
    """Fail if value is None, empty, or whitespace-only.

    Args:
        value: Text to check
        message: Error message used when the check fails

    Raises:
        ValidationError: If value is blank
    """
    if value is None or not str(value).strip():
        raise ValidationError(message)


def _require_int(value: Any, message: str) -> None:
    # bool is an int subclass but never a meaningful score or semester
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(message)


def require_score(value: int, message: str, limits: Limits = DEFAULT_LIMITS) -> None:
    """Fail if value is not an integer score within the configured bounds.

    Args:
        value: Score to check
        message: Error message used when the check fails
        limits: Bounds to apply

    Raises:
        ValidationError: If value is outside [score_min, score_max]
    """
    _require_int(value, message)
    if not limits.score_min <= value <= limits.score_max:
        raise ValidationError(message)


def require_email(value: str | None) -> None:
    """Fail if value does not look like local@domain."""
    require_text(value, "Email cannot be empty.")
    if not EMAIL_PATTERN.fullmatch(str(value)):
        raise ValidationError(f"Invalid email format: '{value}'.")


def require_photo_url(value: str | None) -> None:
    """Fail if value is not an http(s) URL."""
    require_text(value, "Photo URL cannot be empty.")
    if not PHOTO_URL_PATTERN.fullmatch(str(value)):
        raise ValidationError(f"Invalid photo URL format: '{value}'.")


def require_semester(value: int, limits: Limits = DEFAULT_LIMITS) -> None:
    """Fail if value is not a semester number within the configured bounds."""
    message = (
        f"Invalid semester: must be an integer between "
        f"{limits.semester_min} and {limits.semester_max}."
    )
    _require_int(value, message)
    if not limits.semester_min <= value <= limits.semester_max:
        raise ValidationError(message)


def require_gpa(value: float, limits: Limits = DEFAULT_LIMITS) -> None:
    """Fail if value is not a GPA within the configured bounds."""
    message = f"Invalid GPA: must be between {limits.gpa_min} and {limits.gpa_max}."
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(message)
    if not limits.gpa_min <= value <= limits.gpa_max:
        raise ValidationError(message)


def require_date(value: str | None) -> None:
    """Fail if value is not a real calendar date written as dd/mm/yyyy."""
    require_text(value, "Date cannot be empty.")
    text = str(value)
    if not DATE_PATTERN.fullmatch(text):
        raise ValidationError(f"Invalid date format: '{value}'. Expected dd/mm/yyyy.")
    try:
        datetime.strptime(text, DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(f"Invalid date: '{value}'.") from e


def require_choice(
    value: str | None,
    choices: Iterable[str],
    message: str,
    case_sensitive: bool = True,
) -> None:
    """Fail if value is not one of the recognized tokens.

    Args:
        value: Token to check
        choices: Recognized tokens
        message: Error message used when the check fails
        case_sensitive: Compare tokens exactly when True, lower-cased otherwise

    Raises:
        ValidationError: If value is not recognized
    """
    require_text(value, message)
    if case_sensitive:
        recognized = value in choices
    else:
        recognized = str(value).lower() in {choice.lower() for choice in choices}
    if not recognized:
        raise ValidationError(message)
