"""
CLI utility functions.

Helper functions for the command-line interface.
"""

import json
import logging
import math
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import click

__all__ = [
    "setup_logging",
    "validate_path",
    "format_number",
    "emit_result",
]


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Set up logging for CLI.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger
    """
    logger = logging.getLogger("spherekit")
    logger.setLevel(getattr(logging, level.upper()))

    # Create console handler if not exists
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(getattr(logging, level.upper()))

    return logger


def validate_path(
    path: Union[str, Path],
    must_exist: bool = True,
    must_be_file: bool = False,
    create_dirs: bool = False,
) -> Path:
    """
    Validate and resolve a file path.

    Args:
        path: Path to validate
        must_exist: Path must exist
        must_be_file: Path must be a file
        create_dirs: Create parent directories if needed

    Returns:
        Resolved Path object

    Raises:
        click.ClickException: If validation fails
    """
    path = Path(path).resolve()

    if must_exist and not path.exists():
        raise click.ClickException(f"Path does not exist: {path}")

    if must_be_file and path.exists() and not path.is_file():
        raise click.ClickException(f"Path is not a file: {path}")

    if create_dirs and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    return path


def format_number(value: float, precision: int) -> str:
    """
    Format a float with a fixed number of decimal places.

    NaN and infinities are printed as ``nan``, ``inf`` and ``-inf``.
    """
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return str(value)
    return f"{value:.{precision}f}"


def _json_number(value: float, precision: int) -> Optional[float]:
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return None
    return round(value, precision)


def emit_result(fields: Dict[str, Any], precision: int, fmt: str) -> None:
    """
    Print named numeric results.

    Args:
        fields: Mapping of result name to value, printed in order
        precision: Decimal places
        fmt: "text" prints one ``name: value`` line per field,
            "json" prints a single JSON object with NaN and
            infinities written as null
    """
    if fmt == "json":
        data = {key: _json_number(value, precision) for key, value in fields.items()}
        click.echo(json.dumps(data, allow_nan=False))
        return

    for key, value in fields.items():
        click.echo(f"{key}: {format_number(value, precision)}")
