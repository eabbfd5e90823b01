"""
MediTech voice audio package
Contains the platform capability interfaces, the concrete speech backends and
the locale-aware input/output engines.

Concrete backends (gTTS, pyttsx3, Google recognition) are imported by the
factory on demand so that merely importing this package never opens audio
devices.
"""

from .backends import (
    CancellationToken,
    RecognitionBackend,
    RecognitionError,
    RecognitionResult,
    SynthesisBackend,
    Utterance,
    UnavailableRecognitionBackend,
    UnavailableSynthesisBackend,
)
from .speech_output import SpeechOutputEngine, SPEECH_RATE, SPEECH_PITCH
from .speech_input import SpeechInputEngine, RecognitionSession
from .factory import create_synthesis_backend, create_recognition_backend

__all__ = [
    'CancellationToken',
    'RecognitionBackend',
    'RecognitionError',
    'RecognitionResult',
    'SynthesisBackend',
    'Utterance',
    'UnavailableRecognitionBackend',
    'UnavailableSynthesisBackend',
    'SpeechOutputEngine',
    'SPEECH_RATE',
    'SPEECH_PITCH',
    'SpeechInputEngine',
    'RecognitionSession',
    'create_synthesis_backend',
    'create_recognition_backend',
]
