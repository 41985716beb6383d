"""
Pydantic configuration schemas for spherekit.

This module defines the configuration classes used by the command-line
front end, using Pydantic v2 for validation and serialization.
"""

from pathlib import Path
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "OutputConfig",
    "LoggingConfig",
    "Config",
]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class OutputConfig(BaseModel):
    """Configuration for how results are printed."""

    model_config = ConfigDict(extra="forbid")

    precision: int = Field(
        default=6,
        ge=0,
        le=17,
        description="Decimal places used when printing results",
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="Result output format",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Normalize and check the level name."""
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


class Config(BaseModel):
    """
    Main configuration class for spherekit.

    Example:
        >>> config = Config.from_toml("spherekit.toml")
        >>> config = Config(output=OutputConfig(precision=3))
    """

    model_config = ConfigDict(extra="forbid")

    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @classmethod
    def from_toml(cls, path: Union[str, Path]) -> "Config":
        """
        Load configuration from TOML file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance
        """
        import sys

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        # Use tomli for Python < 3.11, tomllib for >= 3.11
        if sys.version_info >= (3, 11):
            import tomllib

            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            import tomli

            with open(path, "rb") as f:
                data = tomli.load(f)

        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance
        """
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """
        Load configuration from file (auto-detect format).

        Args:
            path: Path to configuration file (.toml or .yaml/.yml)

        Returns:
            Config instance
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == ".toml":
            return cls.from_toml(path)
        elif suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    def to_toml(self, path: Union[str, Path]) -> None:
        """
        Save configuration to TOML file.

        Args:
            path: Output path
        """
        import tomli_w

        with open(Path(path), "wb") as f:
            tomli_w.dump(self.model_dump(mode="json"), f)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Output path
        """
        import yaml

        with open(Path(path), "w") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as plain Python data."""
        return self.model_dump(mode="json")
