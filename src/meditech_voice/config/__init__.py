"""
Configuration package for the MediTech voice layer
"""

from .settings import (
    VoicePortalSettings,
    LoggingSettings,
    get_settings,
    get_logging_settings,
    reset_settings,
)

__all__ = [
    "VoicePortalSettings",
    "LoggingSettings",
    "get_settings",
    "get_logging_settings",
    "reset_settings",
]
