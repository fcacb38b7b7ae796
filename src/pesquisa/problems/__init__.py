"""Problems - Registry of research problems and objectives."""

from pesquisa.problems.exceptions import (
    ObjectiveNotFoundError,
    ProblemError,
    ProblemNotFoundError,
)
from pesquisa.problems.models import Objective, ObjectiveType, Problem
from pesquisa.problems.registry import ProblemRegistry

__all__ = [
    "Objective",
    "ObjectiveNotFoundError",
    "ObjectiveType",
    "Problem",
    "ProblemError",
    "ProblemNotFoundError",
    "ProblemRegistry",
]
