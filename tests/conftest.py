"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from pesquisa.logging import reset_logging


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture(autouse=True)
def reset_pesquisa_logger() -> Iterator[None]:
    """Undo handlers and levels set by setup_logging after each test."""
    yield
    reset_logging()


@pytest.fixture
def ana_fields() -> dict[str, str]:
    """Registration fields for a student researcher."""
    return {
        "name": "Ana",
        "role": "student",
        "biography": "works on graphs",
        "email": "ana@x.com",
        "photo_url": "http://x/a.png",
    }
