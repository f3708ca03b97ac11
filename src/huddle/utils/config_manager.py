"""Configuration manager for persistent settings stored as JSON."""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .errors import (
    ConfigurationError,
    FileSystemError,
    HuddleError,
    InvalidConfigError,
    MissingConfigError,
)
from .logging import get_logger, log_call
from .paths import CONFIG_PATH

logger = get_logger(__name__)

_MISSING = object()

_CHANNEL_RE = re.compile(r"^[a-z0-9_][a-z0-9_-]*$")


class WorkspaceConfig(BaseModel):
    """Pydantic model for workspace settings."""

    name: str = "Huddle"
    display_name: str = "me"
    channels: list[str] = Field(default_factory=lambda: ["general", "random"], min_length=1)
    default_channel: str = "general"

    @field_validator("channels")
    @classmethod
    def _check_channel_names(cls, channels: list[str]) -> list[str]:
        for channel in channels:
            if not _CHANNEL_RE.match(channel):
                raise ValueError(
                    f"Channel '{channel}' must be lowercase letters, digits, '-' or '_'"
                )
        return channels

    @model_validator(mode="after")
    def _check_default_channel(self) -> "WorkspaceConfig":
        if self.default_channel not in self.channels:
            raise ValueError(f"Default channel '{self.default_channel}' is not in channels")
        return self


class EditorConfig(BaseModel):
    """Pydantic model for message editor settings."""

    placeholder: str = "Write something..."
    show_toolbar: bool = True
    max_image_bytes: int = 5 * 1024 * 1024  # 5 MB
    image_types: list[str] = Field(
        default_factory=lambda: [".png", ".jpg", ".jpeg", ".gif", ".webp"]
    )


class UIConfig(BaseModel):
    """Pydantic model for UI settings."""

    theme: str = "textual-dark"
    show_hint_bar: bool = True


class LoggingConfig(BaseModel):
    """Pydantic model for logging settings."""

    log_level: str = "INFO"
    max_file_size: int = 5_242_880  # 5 MB
    backup_count: int = 5


class AppConfig(BaseModel):
    """Pydantic model for overall application configuration."""

    version: str = "0.1.0"
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages persistent application configuration."""

    _instance = None
    _initialized = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        if not ConfigManager._initialized:
            self.path = config_path or CONFIG_PATH
            self.config = self._load_or_create_config()
            logger.info(f"Configuration loaded from {self.path}")
            ConfigManager._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next call reloads from disk (for tests)."""
        cls._instance = None
        cls._initialized = False

    def _load_or_create_config(self) -> AppConfig:
        """Load configuration from file or create default if not present."""

        from pydantic import ValidationError

        if not self.path.exists():
            logger.info("No config file found, creating default configuration.")
            config = AppConfig()
            self._save_config(config)
            return config

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = AppConfig(**data)
            logger.debug("Configuration successfully loaded and validated.")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise InvalidConfigError(f"Configuration file is not valid JSON: {str(e)}") from e
        except ValidationError as e:
            logger.error(f"Failed to validate config file: {e}")
            raise InvalidConfigError(f"Configuration data does not match expected schema: {str(e)}") from e
        except (TypeError, ValueError) as e:
            raise InvalidConfigError(f"Configuration data is malformed: {str(e)}") from e
        except OSError as e:
            raise FileSystemError(f"Failed to read configuration file: {self.path}") from e

    def _save_config(self, config: Optional[AppConfig] = None):
        """Save the current configuration to file."""

        config = config or self.config

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            logger.debug("Configuration successfully saved.")
        except OSError as e:
            raise FileSystemError(f"Failed to write configuration file: {str(e)}") from e

    def get_config(self, key_path: str, default: Any = None) -> Any:
        """Get a configuration value using dot-separated key path."""

        obj: Any = self.config
        for key in key_path.split("."):
            obj = getattr(obj, key, _MISSING)
            if obj is _MISSING:
                return default
        return obj

    @log_call
    def set_config(self, key_path: str, value: Any, persist: bool = True):
        """Set a configuration value using dot-separated key path."""

        from pydantic import ValidationError

        keys = key_path.split(".")
        obj = self.config

        for key in keys[:-1]:
            if not isinstance(getattr(obj, key, None), BaseModel):
                raise MissingConfigError(f"Configuration path '{key_path}' is invalid: '{key}' not found")
            obj = getattr(obj, key)

        if keys[-1] not in type(obj).model_fields:
            raise MissingConfigError(f"Configuration key '{keys[-1]}' does not exist in path '{key_path}'")

        try:
            # Re-validate the owning section so type errors surface here
            updated = type(obj)(**{**obj.model_dump(), keys[-1]: value})
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for '{key_path}': {str(e)}") from e

        setattr(obj, keys[-1], getattr(updated, keys[-1]))

        if persist:
            self._save_config()

        logger.info(f"Config key '{key_path}' updated.")

    @log_call
    def reset_to_defaults(self):
        """Reset configuration to default values."""

        logger.warning("Resetting configuration to default values.")
        self.config = AppConfig()
        self._save_config()

    @log_call
    def backup_config(self) -> Path:
        """Create a backup of the current configuration file."""

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        backup_path = self.path.with_name(f"config_backup_{timestamp}.json")

        try:
            backup_path.parent.mkdir(parents=True, exist_ok=True)
            with open(backup_path, "w", encoding="utf-8") as f:
                json.dump(self.config.model_dump(), f, indent=2)
        except OSError as e:
            raise FileSystemError(f"Failed to write backup file: {str(e)}") from e

        logger.info(f"Configuration backup created at {backup_path}")
        return backup_path


def get_config_manager() -> ConfigManager:
    """Return the shared ConfigManager, wrapping unexpected failures."""

    try:
        return ConfigManager()
    except HuddleError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
