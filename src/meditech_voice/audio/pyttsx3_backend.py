"""
Offline text-to-speech backend using pyttsx3
"""

import logging
import threading
from concurrent.futures import Future
from typing import Optional

import pyttsx3

from .backends import CancellationToken, SynthesisBackend, Utterance, resolve_future

logger = logging.getLogger(__name__)


class Pyttsx3SynthesisBackend(SynthesisBackend):
    """Speaks through the operating system's speech engine"""

    def __init__(self):
        self._engine_lock = threading.Lock()
        self.base_rate: Optional[int] = None

        try:
            self.engine = pyttsx3.init()
            self.base_rate = self.engine.getProperty('rate')
            logger.info("Offline speech engine initialized")
        except (RuntimeError, OSError, ImportError) as e:
            logger.error(f"Failed to initialize offline speech engine: {e}")
            self.engine = None

    def is_available(self) -> bool:
        return self.engine is not None

    def synthesize(self, utterance: Utterance, token: CancellationToken) -> "Future[bool]":
        future: Future = Future()
        worker = threading.Thread(target=self._run, args=(utterance, token, future), daemon=True)
        worker.start()
        return future

    def _run(self, utterance: Utterance, token: CancellationToken, future: Future):
        with self._engine_lock:
            if token.is_cancelled:
                resolve_future(future, False)
                return
            try:
                self._configure(utterance)
                token.add_callback(self.engine.stop)
                self.engine.say(utterance.text)
                self.engine.runAndWait()
                resolve_future(future, not token.is_cancelled)
            except RuntimeError as e:
                logger.error(f"Offline TTS error: {e}")
                resolve_future(future, False)
            except Exception as e:
                logger.exception(f"Unexpected offline TTS error: {e}")
                resolve_future(future, False)

    def _configure(self, utterance: Utterance):
        if self.base_rate:
            self.engine.setProperty('rate', int(self.base_rate * utterance.rate))

        language = utterance.locale.code
        for voice in self.engine.getProperty('voices') or []:
            languages = [
                lang.decode('utf-8', 'ignore') if isinstance(lang, bytes) else str(lang)
                for lang in (getattr(voice, 'languages', None) or [])
            ]
            if any(language in lang.lower() for lang in languages) or f"{language}-" in str(voice.id).lower():
                self.engine.setProperty('voice', voice.id)
                return
        logger.debug(f"No offline voice for {utterance.locale.english_name}, using default")
