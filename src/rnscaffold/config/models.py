"""
Pydantic models for validating the application descriptor.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..util import unsafe_name_reason


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class AppConfig(BaseModel):
    """
    Application descriptor for one generation run.

    Attributes:
        name: Application name, used as the output directory and bundle identifier.
        description: Free-text description echoed into app.json.
        author: Free-text author echoed into app.json.
        version: Version string (semantic-version shaped by convention, not validated).
        features: Ordered feature list echoed into app.json.
    """
    name: str
    description: str = ""
    author: str = ""
    version: str = "1.0.0"
    features: List[str] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @field_validator("name")
    @classmethod
    def _name_is_filesystem_safe(cls, value: str) -> str:
        reason = unsafe_name_reason(value)
        if reason:
            raise ValueError(f"name {reason}")
        return value

    def metadata(self) -> Dict[str, Any]:
        """
        Return the exact payload written to app.json.
        """
        return {
            "name": self.name,
            "description": self.description,
            "author": self.author,
            "version": self.version,
            "features": list(self.features),
        }


DEFAULT_APP = AppConfig(
    name="MyApp",
    description="My app description",
    author="John Doe",
    version="1.0.0",
    features=["feature1", "feature2"],
)


def load_config(path: Path | str) -> AppConfig:
    """
    Load and validate a TOML descriptor file into an AppConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated AppConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    raw_data = _normalize_toml_schema(raw_data)

    try:
        return AppConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _normalize_toml_schema(data: Any) -> Dict[str, Any]:
    """
    Accept either top-level descriptor keys or a single [app] table.
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a TOML table/object.")

    if "app" not in data:
        return dict(data)

    app_table = data["app"]
    if not isinstance(app_table, dict):
        raise ConfigError("Invalid [app] block; expected a table.")
    others = sorted(key for key in data if key != "app")
    if others:
        raise ConfigError(f"Keys outside [app] are not supported alongside it: {', '.join(others)}")
    return dict(app_table)
