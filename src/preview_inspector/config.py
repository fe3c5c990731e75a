from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
import json
import os

from preview_inspector.constants import (
    DEFAULT_ACCEPT_LANGUAGE,
    DEFAULT_PRIMARY_TIMEOUT_SECONDS,
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

load_dotenv()  # Loads variables from .env file


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")


settings = Settings()


@dataclass
class InspectorConfig:
    """Configuration for the preview inspector."""
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    primary_timeout: float = DEFAULT_PRIMARY_TIMEOUT_SECONDS
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS
    fallback_enabled: bool = True
    max_concurrent_inspections: int = 4

    @classmethod
    def from_env(cls) -> "InspectorConfig":
        """Load configuration from environment variables.

        Returns:
            InspectorConfig: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            accept_language=os.getenv("ACCEPT_LANGUAGE", DEFAULT_ACCEPT_LANGUAGE),
            primary_timeout=float(os.getenv("PRIMARY_TIMEOUT", str(DEFAULT_PRIMARY_TIMEOUT_SECONDS))),
            probe_timeout=float(os.getenv("PROBE_TIMEOUT", str(DEFAULT_PROBE_TIMEOUT_SECONDS))),
            fallback_enabled=_env_flag("FALLBACK_ENABLED", True),
            max_concurrent_inspections=int(os.getenv("MAX_CONCURRENT_INSPECTIONS", "4")),
        )


@dataclass
class ScoringThresholds:
    """Configurable limits and penalties for preview scoring."""

    # Length limits (characters)
    title_max: int = 60
    description_max: int = 160

    # Penalties subtracted from the base score
    og_image_penalty: int = 30
    missing_description_penalty: int = 20
    long_title_penalty: int = 10
    long_description_penalty: int = 10

    @classmethod
    def from_env(cls) -> "ScoringThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with PREVIEW_THRESHOLD_
        e.g., PREVIEW_THRESHOLD_TITLE_MAX=70

        Returns:
            ScoringThresholds with values from environment
        """
        thresholds = cls()
        prefix = "PREVIEW_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_value = os.getenv(f"{prefix}{field_name.upper()}")

            if env_value is not None:
                try:
                    setattr(thresholds, field_name, int(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "ScoringThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            ScoringThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                try:
                    setattr(thresholds, field_name, int(threshold_config[field_name]))
                except (TypeError, ValueError):
                    pass  # Keep default if conversion fails

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary."""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current thresholds to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds instance
default_thresholds = ScoringThresholds()
