"""Configuration loading for Pesquisa registries."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from pesquisa.exceptions import PesquisaError
from pesquisa.validation import DEFAULT_LIMITS, Limits

CONFIG_FILE_NAME = "pesquisa.yaml"
DEFAULT_DELIMITER = " | "


class ConfigError(PesquisaError):
    """Raised when configuration is invalid or missing."""


@dataclass
class RegistryConfig:
    """Settings shared by the researcher and problem registries.

    Attributes:
        limits: Numeric bounds for scores, semesters and GPA.
        list_delimiter: Separator between entries of a role listing.
        search_delimiter: Suffix written after every search match.
    """

    limits: Limits = DEFAULT_LIMITS
    list_delimiter: str = DEFAULT_DELIMITER
    search_delimiter: str = DEFAULT_DELIMITER

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegistryConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If limits are unknown, non-numeric or inverted, or a
                delimiter is not a string.
        """
        limits_data = data.get("limits") or {}
        if not isinstance(limits_data, dict):
            raise ConfigError("'limits' must be a mapping")

        known = {f.name for f in fields(Limits)}
        unknown = sorted(set(limits_data) - known)
        if unknown:
            raise ConfigError(f"Unknown limits: {', '.join(unknown)}")

        for name, value in limits_data.items():
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ConfigError(f"Limit '{name}' must be a number, got {value!r}")

        limits = Limits(**{**_limits_as_dict(DEFAULT_LIMITS), **limits_data})
        for prefix in ("score", "semester", "gpa"):
            low = getattr(limits, f"{prefix}_min")
            high = getattr(limits, f"{prefix}_max")
            if low > high:
                raise ConfigError(f"{prefix}_min ({low}) is greater than {prefix}_max ({high})")

        delimiters = {}
        for name in ("list_delimiter", "search_delimiter"):
            value = data.get(name, DEFAULT_DELIMITER)
            if not isinstance(value, str):
                raise ConfigError(f"'{name}' must be a string, got {value!r}")
            delimiters[name] = value

        return cls(limits=limits, **delimiters)


def _limits_as_dict(limits: Limits) -> dict[str, Any]:
    return {f.name: getattr(limits, f.name) for f in fields(limits)}


def load_config(config_path: Path | str) -> RegistryConfig:
    """Load registry configuration from a YAML file.

    Args:
        config_path: Path to pesquisa.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return RegistryConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return RegistryConfig.from_dict(data)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find pesquisa.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to pesquisa.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    start_path = Path.cwd() if start_path is None else Path(start_path)
    current = start_path.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

    raise ConfigError(f"No {CONFIG_FILE_NAME} found in {start_path} or any parent directory")
