"""
Centralized configuration management using Pydantic for locale defaults,
preference storage, speech backends and recognition timing.

Configuration settings for the MediTech voice layer
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LOCALE_CODES = ("en", "hi", "ta", "ml", "pa")


class VoicePortalSettings(BaseSettings):
    """Main configuration settings"""

    # Locale Settings
    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE")
    preferences_path: str = Field(
        default="data/preferences.json",
        alias="PREFERENCES_PATH",
        description="JSON file holding durable preference keys",
    )
    locales_path: Optional[str] = Field(
        default=None,
        alias="LOCALES_PATH",
        description="Directory of <code>.json translation overrides",
    )

    # Speech Backends
    synthesis_backend: Literal["gtts", "pyttsx3", "none"] = Field(default="gtts", alias="SYNTHESIS_BACKEND")
    recognition_backend: Literal["google", "none"] = Field(default="google", alias="RECOGNITION_BACKEND")
    temp_audio_dir: Optional[str] = Field(default=None, alias="TEMP_AUDIO_DIR")

    # Microphone Settings
    listen_timeout: float = Field(default=8.0, gt=0, alias="LISTEN_TIMEOUT", description="Seconds to wait for speech to begin")
    phrase_time_limit: float = Field(default=10.0, gt=0, alias="PHRASE_TIME_LIMIT", description="Maximum phrase length in seconds")
    ambient_noise_duration: float = Field(default=0.5, ge=0, alias="AMBIENT_NOISE_DURATION")
    energy_threshold: int = Field(default=300, ge=0, alias="ENERGY_THRESHOLD")

    # Session Settings
    recognition_timeout: float = Field(
        default=20.0,
        ge=0,
        alias="RECOGNITION_TIMEOUT",
        description="Seconds before a silent recognition session is expired (0 disables)",
    )
    announce_listening: bool = Field(default=False, alias="ANNOUNCE_LISTENING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("default_locale", mode="before")
    @classmethod
    def normalize_default_locale(cls, v):
        if not isinstance(v, str):
            return "en"
        code = v.strip().lower().split("-")[0]
        return code if code in SUPPORTED_LOCALE_CODES else "en"


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        alias="LOG_FORMAT"
    )
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


# Global settings instances (lazy initialization)
_settings = None
_logging_settings = None


def get_settings() -> VoicePortalSettings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = VoicePortalSettings()
    return _settings


def get_logging_settings() -> LoggingSettings:
    """Get the logging settings instance"""
    global _logging_settings
    if _logging_settings is None:
        _logging_settings = LoggingSettings()
    return _logging_settings


def reset_settings():
    """Drop cached settings so the next access re-reads the environment"""
    global _settings, _logging_settings
    _settings = None
    _logging_settings = None
