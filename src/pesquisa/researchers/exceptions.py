"""Custom exceptions for the Researcher registry."""

from pesquisa.exceptions import PesquisaError


class ResearcherError(PesquisaError):
    """Base exception for Researcher registry errors."""


class NotFoundError(ResearcherError, LookupError):
    """Researcher with given email does not exist."""


class EmptyResultError(NotFoundError):
    """A listing matched no researchers."""


class RoleMismatchError(ResearcherError):
    """Specialty does not match the researcher's role."""


class UnknownFieldError(ResearcherError):
    """Field name is not a mutable researcher field."""
