"""
Settings Management Module

Provides pydantic-based configuration management with:
- YAML configuration file loading
- Environment variable overrides (MEDIA_SESSION_*)
- Multi-environment support (dev, prod, test)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import MediaConfigError, MediaConfigNotFoundError
from .log_config import MediaLogEvents, get_context_logger


class Settings(BaseSettings):
    """
    Media session settings.

    Configuration hierarchy (lowest to highest precedence):
    1. config file passed to ``load_from_yaml``
    2. config.{environment}.yaml next to it
    3. Environment variables (MEDIA_SESSION_*)

    Examples:
        >>> settings = Settings(log_page_event=True)
        >>> settings.log_media_event
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_SESSION_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="allow",
    )

    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = False

    log_media_event: bool = True
    log_page_event: bool = False

    @classmethod
    def load_from_yaml(cls, config_path: Path | str | None = None) -> "Settings":
        """
        Load settings from a YAML configuration file.

        Environment variables still take precedence over file values.

        Args:
            config_path: Path to config file. ``None`` returns defaults.

        Returns:
            Settings instance

        Raises:
            MediaConfigNotFoundError: If ``config_path`` does not exist
            MediaConfigError: If the file is not a YAML mapping
        """
        if config_path is None:
            return cls()

        config_path = Path(config_path)
        if not config_path.exists():
            raise MediaConfigNotFoundError(
                "Configuration file not found", config_path=str(config_path)
            )

        config_data = cls._read_yaml(config_path)

        env = os.getenv("MEDIA_SESSION_ENVIRONMENT", config_data.get("environment", "development"))
        env_config_path = config_path.parent / f"{config_path.stem}.{env}{config_path.suffix}"
        if env_config_path.exists():
            config_data = cls._deep_merge(config_data, cls._read_yaml(env_config_path))

        # Init kwargs outrank env vars in pydantic-settings; drop overridden keys.
        env_keys = {
            key[len("MEDIA_SESSION_"):].lower()
            for key in os.environ
            if key.upper().startswith("MEDIA_SESSION_")
        }
        settings = cls(**{k: v for k, v in config_data.items() if k not in env_keys})

        get_context_logger("media_settings").info(
            MediaLogEvents.SETTINGS_LOADED.value,
            config_path=str(config_path),
            environment=settings.environment,
            env_override_file=str(env_config_path) if env_config_path.exists() else None,
        )
        return settings

    @staticmethod
    def _read_yaml(path: Path) -> dict[str, Any]:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise MediaConfigError(
                "Configuration file must contain a mapping",
                context={"config_path": str(path), "type": type(data).__name__},
            )
        return data

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = Settings._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


@lru_cache
def get_settings(config_path: Path | str | None = None) -> Settings:
    """
    Get cached settings instance.

    Args:
        config_path: Optional path to config file

    Returns:
        Settings instance
    """
    return Settings.load_from_yaml(config_path)


def reload_settings(config_path: Path | str | None = None) -> Settings:
    """Reload settings by clearing cache."""
    get_settings.cache_clear()
    return get_settings(config_path)


__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
]
