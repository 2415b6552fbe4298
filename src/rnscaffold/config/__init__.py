"""
Configuration helpers for the scaffold generator.
"""

from .models import DEFAULT_APP, AppConfig, ConfigError, load_config
from .settings import DEFAULT_OUTPUT_ROOT, Settings, get_settings

__all__ = ["DEFAULT_APP", "AppConfig", "ConfigError", "load_config", "DEFAULT_OUTPUT_ROOT", "Settings", "get_settings"]
