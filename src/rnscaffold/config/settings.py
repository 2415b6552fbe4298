"""
Runtime settings loaded from the environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv

DEFAULT_OUTPUT_ROOT = Path("apps")


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Container for environment-driven defaults.

    Attributes:
        output_root: Directory under which `<app.name>/` is generated.
        log_level: Logging level name overriding the CLI flag.
    """
    output_root: Path = Field(default=DEFAULT_OUTPUT_ROOT, alias="RNSCAFFOLD_OUTPUT_ROOT")
    log_level: Optional[str] = Field(default=None, alias="RNSCAFFOLD_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {field.alias: os.getenv(field.alias) for field in Settings.model_fields.values()}
    values = {key: value for key, value in values.items() if value}
    return Settings(**values)
