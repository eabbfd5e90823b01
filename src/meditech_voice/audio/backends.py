"""
Capability interfaces for platform speech input and output.

Each backend operation starts work and immediately returns a Future plus
honours a CancellationToken, so engines can enforce the single-session and
single-utterance rules without knowing how the platform delivers events.
"""

import threading
import time
import uuid
from abc import ABC, abstractmethod
from concurrent.futures import Future, InvalidStateError
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ..i18n.locales import LocaleCode


class RecognitionError(Enum):
    """Terminal error reasons for a recognition session"""
    NOT_ALLOWED = "not-allowed"
    AUDIO_CAPTURE = "audio-capture"
    NETWORK = "network"
    NO_SPEECH = "no-speech"
    NO_MATCH = "no-match"
    TIMEOUT = "timeout"
    ABORTED = "aborted"
    UNAVAILABLE = "unavailable"
    BUSY = "busy"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RecognitionResult:
    """Outcome of one recognition attempt: a transcript or an error reason"""
    transcript: Optional[str] = None
    error: Optional[RecognitionError] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.transcript and self.transcript.strip())

    @classmethod
    def success(cls, transcript: str) -> "RecognitionResult":
        return cls(transcript=transcript)

    @classmethod
    def failure(cls, error: RecognitionError, detail: str = "") -> "RecognitionResult":
        return cls(error=error, detail=detail)


@dataclass
class Utterance:
    """One text-to-speech playback request"""
    text: str
    locale: LocaleCode
    rate: float
    pitch: float
    utterance_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: float = field(default_factory=time.time)

    @property
    def speech_tag(self) -> str:
        return self.locale.speech_tag


class CancellationToken:
    """Thread-safe cancellation flag; callbacks run once, on the cancelling thread"""

    def __init__(self):
        self._event = threading.Event()
        self._callbacks: List[Callable[[], None]] = []
        self._lock = threading.Lock()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self):
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def add_callback(self, callback: Callable[[], None]):
        """Run callback on cancellation (immediately if already cancelled)"""
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)


def resolve_future(future: Future, value) -> bool:
    """Set a future's result unless it already has one"""
    if future.done():
        return False
    try:
        future.set_result(value)
    except InvalidStateError:
        return False
    return True


class SynthesisBackend(ABC):
    """Platform text-to-speech capability"""

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def synthesize(self, utterance: Utterance, token: CancellationToken) -> "Future[bool]":
        """Start playback; the future resolves True when it completed, False otherwise"""
        pass


class RecognitionBackend(ABC):
    """Platform single-shot speech-to-text capability"""

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def recognize(self, speech_tag: str, token: CancellationToken) -> "Future[RecognitionResult]":
        """Capture one phrase in the given speech tag"""
        pass


class UnavailableSynthesisBackend(SynthesisBackend):
    """Stand-in used when the platform has no synthesis support"""

    def is_available(self) -> bool:
        return False

    def synthesize(self, utterance: Utterance, token: CancellationToken) -> "Future[bool]":
        future: Future = Future()
        future.set_result(False)
        return future


class UnavailableRecognitionBackend(RecognitionBackend):
    """Stand-in used when the platform has no recognition support"""

    def is_available(self) -> bool:
        return False

    def recognize(self, speech_tag: str, token: CancellationToken) -> "Future[RecognitionResult]":
        future: Future = Future()
        future.set_result(RecognitionResult.failure(RecognitionError.UNAVAILABLE))
        return future
