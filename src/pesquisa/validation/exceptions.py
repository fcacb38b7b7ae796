"""Custom exceptions for field validation."""

from pesquisa.exceptions import PesquisaError


class ValidationError(PesquisaError, ValueError):
    """A field value is missing, malformed, or out of range."""
