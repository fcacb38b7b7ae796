"""Base exception shared by all Pesquisa components."""


class PesquisaError(Exception):
    """Base exception for Pesquisa errors."""
