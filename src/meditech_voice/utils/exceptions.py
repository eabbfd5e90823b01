"""
Custom exceptions for the voice layer.

Adapters and storage raise these; the engine or LocaleStore that owns the
boundary turns them into a state change. ConfigurationError is the exception:
it reaches the caller that built the service.
"""


class VoicePortalError(Exception):
    """Base exception for the voice layer"""
    pass


class AudioError(VoicePortalError):
    """Audio processing related errors"""
    pass


class TextToSpeechError(AudioError):
    """Text-to-speech specific errors"""
    pass


class ConfigurationError(VoicePortalError):
    """Configuration related errors"""
    pass


class PreferenceStoreError(VoicePortalError):
    """Durable preference storage errors"""
    pass
