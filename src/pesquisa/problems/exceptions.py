"""Custom exceptions for the Problem/Objective registry."""

from pesquisa.exceptions import PesquisaError


class ProblemError(PesquisaError):
    """Base exception for Problem/Objective registry errors."""


class ProblemNotFoundError(ProblemError, LookupError):
    """Problem with given code does not exist."""


class ObjectiveNotFoundError(ProblemError, LookupError):
    """Objective with given code does not exist."""
