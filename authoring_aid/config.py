"""Configuration management for Authoring Aid."""

import os
import sys
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from loguru import logger

from .analyzers.style_checker import validate_allowed_characters


class ContrastConfig(BaseModel):
    """Contrast engine configuration."""
    fix_target_ratio: float = 4.5


class ReadabilityConfig(BaseModel):
    """Readability configuration."""
    words_per_minute: int = Field(200, gt=0)
    gauge_max_grade: int = Field(15, gt=0)


class StyleConfig(BaseModel):
    """Style checker configuration."""
    max_sentence_length: int = Field(200, ge=0)
    allowed_token_characters: str = "a-zA-Z0-9.,!?'-"

    @field_validator("allowed_token_characters")
    @classmethod
    def check_character_class(cls, value: str) -> str:
        return validate_allowed_characters(value)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    rotation: str = "10 MB"


class Config(BaseModel):
    """Main configuration class."""
    contrast: ContrastConfig = ContrastConfig()
    readability: ReadabilityConfig = ReadabilityConfig()
    style: StyleConfig = StyleConfig()
    logging: LoggingConfig = LoggingConfig()


class ConfigManager:
    """Configuration manager for the application."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_config_file()
        self.config: Optional[Config] = None
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        possible_paths = [
            "authoring_aid.yaml",
            "config.yaml",
            os.path.expanduser("~/.authoring-aid/config.yaml"),
        ]

        for path in possible_paths:
            if os.path.exists(path):
                return path

        return None

    def _load_config(self):
        """Load configuration from file, falling back to defaults."""
        if self.config_path is None:
            self.config = Config()
            logger.debug("No configuration file found, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}

            self.config = Config(**config_data)
            logger.info(f"Configuration loaded from {self.config_path}")

        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

    def get_config(self) -> Config:
        """Get the current configuration."""
        if not self.config:
            raise RuntimeError("Configuration not loaded")
        return self.config

    def reload_config(self):
        """Reload configuration from file."""
        self._load_config()


def configure_logging(logging_config: LoggingConfig):
    """Point loguru at stderr (and optionally a file) at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=logging_config.level.upper())

    if logging_config.file:
        Path(logging_config.file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            logging_config.file,
            level=logging_config.level.upper(),
            rotation=logging_config.rotation,
        )


# Global configuration instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config_manager
    if not _config_manager:
        _config_manager = ConfigManager()
    return _config_manager.get_config()


def init_config(config_path: Optional[str] = None):
    """Initialize configuration with a specific path."""
    global _config_manager
    _config_manager = ConfigManager(config_path)


def reset_config():
    """Drop the global configuration so the next get_config() reloads it."""
    global _config_manager
    _config_manager = None
