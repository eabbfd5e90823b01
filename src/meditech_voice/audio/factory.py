"""
Backend selection from settings
"""

import logging

from ..config.settings import VoicePortalSettings
from ..utils.exceptions import ConfigurationError
from .backends import (
    RecognitionBackend,
    SynthesisBackend,
    UnavailableRecognitionBackend,
    UnavailableSynthesisBackend,
)

logger = logging.getLogger(__name__)


def create_synthesis_backend(settings: VoicePortalSettings) -> SynthesisBackend:
    name = settings.synthesis_backend
    if name == "gtts":
        from .gtts_backend import GTTSSynthesisBackend
        return GTTSSynthesisBackend(temp_dir=settings.temp_audio_dir)
    if name == "pyttsx3":
        from .pyttsx3_backend import Pyttsx3SynthesisBackend
        return Pyttsx3SynthesisBackend()
    if name == "none":
        logger.info("Speech synthesis disabled by configuration")
        return UnavailableSynthesisBackend()
    raise ConfigurationError(f"Unknown synthesis backend: {name}")


def create_recognition_backend(settings: VoicePortalSettings) -> RecognitionBackend:
    name = settings.recognition_backend
    if name == "google":
        from .google_recognition import GoogleRecognitionBackend
        return GoogleRecognitionBackend(
            listen_timeout=settings.listen_timeout,
            phrase_time_limit=settings.phrase_time_limit,
            ambient_noise_duration=settings.ambient_noise_duration,
            energy_threshold=settings.energy_threshold,
        )
    if name == "none":
        logger.info("Speech recognition disabled by configuration")
        return UnavailableRecognitionBackend()
    raise ConfigurationError(f"Unknown recognition backend: {name}")
