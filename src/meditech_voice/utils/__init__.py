"""
MediTech voice utilities
"""

from .logger import setup_logger
from .exceptions import (
    VoicePortalError,
    AudioError,
    TextToSpeechError,
    ConfigurationError,
    PreferenceStoreError,
)

__all__ = [
    "setup_logger",
    "VoicePortalError",
    "AudioError",
    "TextToSpeechError",
    "ConfigurationError",
    "PreferenceStoreError",
]
