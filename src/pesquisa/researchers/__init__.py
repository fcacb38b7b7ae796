"""Researchers - Registry of researchers keyed by email."""

from pesquisa.researchers.exceptions import (
    EmptyResultError,
    NotFoundError,
    ResearcherError,
    RoleMismatchError,
    UnknownFieldError,
)
from pesquisa.researchers.models import (
    ProfessorProfile,
    Researcher,
    ResearcherField,
    Role,
    Specialty,
    StudentProfile,
)
from pesquisa.researchers.registry import ResearcherRegistry

__all__ = [
    "EmptyResultError",
    "NotFoundError",
    "ProfessorProfile",
    "Researcher",
    "ResearcherError",
    "ResearcherField",
    "ResearcherRegistry",
    "Role",
    "RoleMismatchError",
    "Specialty",
    "StudentProfile",
    "UnknownFieldError",
]
