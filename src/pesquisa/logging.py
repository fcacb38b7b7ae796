"""Logging setup for Pesquisa registries.

Everything logs under the ``pesquisa`` logger: one child per registry
(``pesquisa.researchers``, ``pesquisa.problems``). setup_logging writes
them to a rotating file and lets each registry run at its own level,
so a script can trace searches in one registry without the other's noise.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "pesquisa"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "pesquisa.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ENV_LOG_DIR = "PESQUISA_LOG_DIR"
ENV_LOG_LEVEL = "PESQUISA_LOG_LEVEL"
ENV_COMPONENT_LEVELS = "PESQUISA_LOG_LEVELS"

_EMAIL_PATTERN = re.compile(r"([\w.+-])[\w.+-]*@([\w-]+(?:\.[\w-]+)*)")

# Component loggers whose level setup_logging changed; reset on the next call
_tuned_components: set[str] = set()


def _level_number(level: str) -> int:
    return getattr(logging, level.strip().upper(), logging.INFO)


def parse_component_levels(text: str) -> dict[str, str]:
    """Parse 'researchers=DEBUG,problems=WARNING' into a mapping.

    Raises:
        ValueError: If an entry is not of the form component=LEVEL
    """
    levels: dict[str, str] = {}
    for entry in filter(None, (part.strip() for part in text.split(","))):
        component, sep, level = entry.partition("=")
        if not sep or not component.strip() or not level.strip():
            raise ValueError(f"Invalid component level '{entry}', expected component=LEVEL")
        levels[component.strip()] = level.strip().upper()
    return levels


def reset_logging() -> None:
    """Close pesquisa handlers and clear every level setup_logging set."""
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    for name in _tuned_components:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _tuned_components.clear()


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
    component_levels: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Send pesquisa logs to a rotating file and, optionally, the console.

    Calling it again replaces the previous setup.

    Args:
        log_dir: Directory for log files. Defaults to $PESQUISA_LOG_DIR or 'logs'.
        log_file: Log file name.
        max_bytes: Size at which the file rotates.
        backup_count: Rotated files to keep.
        level: Level for the whole tree. Defaults to $PESQUISA_LOG_LEVEL or INFO.
        console: Whether to also log to stderr.
        component_levels: Per-registry overrides such as {'researchers': 'DEBUG'}.
            Defaults to the parsed $PESQUISA_LOG_LEVELS.

    Returns:
        The root pesquisa logger.
    """
    if log_dir is None:
        log_dir = os.environ.get(ENV_LOG_DIR, DEFAULT_LOG_DIR)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = level or os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    if component_levels is None:
        component_levels = parse_component_levels(os.environ.get(ENV_COMPONENT_LEVELS, ""))

    reset_logging()
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_level_number(level))
    for component, component_level in component_levels.items():
        component_logger = get_logger(component)
        component_logger.setLevel(_level_number(component_level))
        _tuned_components.add(component_logger.name)

    # Handlers stay at NOTSET; logger levels decide what gets through
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    log_path = log_dir / log_file
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info(
        "Pesquisa logging initialized (level=%s, components=%s, file=%s)",
        level.upper(),
        dict(component_levels) or "-",
        log_path,
    )
    return root


def get_logger(name: str) -> logging.Logger:
    """Return the logger of a component, e.g. 'researchers' -> 'pesquisa.researchers'."""
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def mask_email(text: str) -> str:
    """Redact the local part of every email address in text.

    Args:
        text: Text that may contain email addresses.

    Returns:
        Text with each address reduced to its first character and domain,
        e.g. 'ana@x.com' becomes 'a***@x.com'.
    """
    return _EMAIL_PATTERN.sub(r"\1***@\2", text)
