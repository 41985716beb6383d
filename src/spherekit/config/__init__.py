"""
Configuration management for spherekit.

Pydantic-based configuration schemas with support for loading
from TOML and YAML files.
"""

from spherekit.config.schema import (
    Config,
    OutputConfig,
    LoggingConfig,
)

__all__ = [
    "Config",
    "OutputConfig",
    "LoggingConfig",
]
