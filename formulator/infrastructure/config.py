"""
Configuration utilities for infrastructure layer.

Settings are read from the environment on each call. The library never
loads files or configures logging on import; an application embedding
the engine does both once at startup, before building services:

    from formulator.infrastructure.config import configure_logging, load_env_file

    load_env_file()          # .env from the working directory, if any
    configure_logging()      # structlog console output at LOG_LEVEL

Environment variables:
    LOG_LEVEL: structlog level name (default INFO)
    FORMULATOR_DEFAULT_TARGET_MARGIN: margin in % for recipes without one
        (default 30)
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import structlog
from dotenv import find_dotenv, load_dotenv

from formulator.domain.formulation.costing import DEFAULT_TARGET_MARGIN
from formulator.domain.shared.errors import ConfigurationError


def load_env_file(path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """
    Load environment variables from a .env file.

    Args:
        path: File to load; defaults to the nearest ".env" from the
            working directory upwards
        override: Whether file values replace variables already set

    Returns:
        True if at least one variable was set
    """
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return False
    elif not Path(path).exists():
        return False
    return load_dotenv(dotenv_path=path, override=override)


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        LOG_LEVEL env var upper-cased, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_default_target_margin() -> float:
    """
    Get the margin applied to recipes without a target margin.

    Returns:
        FORMULATOR_DEFAULT_TARGET_MARGIN as float, defaults to 30.0

    Raises:
        ConfigurationError: If the value is not a non-negative number
    """
    raw = os.getenv("FORMULATOR_DEFAULT_TARGET_MARGIN")
    if raw is None or not raw.strip():
        return DEFAULT_TARGET_MARGIN

    try:
        margin = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"FORMULATOR_DEFAULT_TARGET_MARGIN must be a number, got {raw!r}"
        ) from e

    if margin < 0:
        raise ConfigurationError(
            f"FORMULATOR_DEFAULT_TARGET_MARGIN cannot be negative, got {margin}"
        )
    return margin


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog console output.

    Args:
        level: Level name; defaults to get_log_level()
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
