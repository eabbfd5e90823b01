"""
Locale-aware speech output with at most one utterance in flight.
"""

import logging
import threading
from concurrent.futures import Future
from typing import Callable, List, Optional, Tuple

from ..i18n.locale_store import LocaleStore
from .backends import CancellationToken, SynthesisBackend, Utterance

logger = logging.getLogger(__name__)

SPEECH_RATE = 0.9
SPEECH_PITCH = 1.0

UtteranceListener = Callable[[Utterance, bool], None]


class SpeechOutputEngine:
    """Wraps a synthesis backend and binds each utterance to the active locale"""

    def __init__(self, backend: SynthesisBackend, locale_store: LocaleStore):
        self.backend = backend
        self.locale_store = locale_store
        self.enabled = True
        self._available = self._check_available(backend)
        self._current: Optional[Tuple[Utterance, CancellationToken]] = None
        self._listeners: List[UtteranceListener] = []
        self._lock = threading.RLock()

    @staticmethod
    def _check_available(backend: SynthesisBackend) -> bool:
        try:
            available = bool(backend.is_available())
        except Exception as e:
            logger.error(f"Speech synthesis availability check failed: {e}")
            return False
        if not available:
            logger.warning("Speech synthesis not available on this platform")
        return available

    def is_available(self) -> bool:
        return self._available

    @property
    def current_utterance(self) -> Optional[Utterance]:
        with self._lock:
            return self._current[0] if self._current else None

    @property
    def is_speaking(self) -> bool:
        return self.current_utterance is not None

    def add_listener(self, listener: UtteranceListener):
        """listener(utterance, completed) runs when an utterance ends or is cancelled"""
        self._listeners.append(listener)

    def speak(self, text: str) -> Optional[Utterance]:
        """
        Interrupt whatever is playing and speak text in the current locale.

        Returns the submitted utterance, or None when output is disabled,
        unavailable, or the text is empty.
        """
        if not self.enabled or not self._available:
            return None
        if not text or not text.strip():
            logger.debug("Empty text provided for TTS")
            return None

        with self._lock:
            self.cancel()
            utterance = Utterance(
                text=text.strip(),
                locale=self.locale_store.get_locale(),
                rate=SPEECH_RATE,
                pitch=SPEECH_PITCH,
            )
            token = CancellationToken()
            self._current = (utterance, token)

            try:
                future = self.backend.synthesize(utterance, token)
            except Exception as e:
                logger.error(f"Speech synthesis failed to start: {e}")
                self._current = None
                return None

            logger.debug(f"Speaking in {utterance.speech_tag}: {utterance.text[:50]}")

        future.add_done_callback(lambda f: self._on_finished(utterance, f))
        return utterance

    def cancel(self) -> bool:
        """Cancel the in-flight utterance, if any"""
        with self._lock:
            if self._current is None:
                return False
            utterance, token = self._current
        logger.debug(f"Cancelling utterance {utterance.utterance_id}")
        token.cancel()
        return True

    def _on_finished(self, utterance: Utterance, future: Future):
        completed = False
        if not future.cancelled():
            error = future.exception()
            if error is not None:
                logger.error(f"Speech synthesis error: {error}")
            else:
                completed = bool(future.result())

        with self._lock:
            if self._current is not None and self._current[0] is utterance:
                self._current = None

        for listener in list(self._listeners):
            try:
                listener(utterance, completed)
            except Exception:
                logger.exception("Utterance listener failed")
