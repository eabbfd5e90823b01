"""
Locale-aware single-shot speech input.

At most one recognition session is open at a time. Every session ends with
exactly one terminal callback: on_result(transcript) or on_error(reason).
A session that completes without a transcript ends with NO_SPEECH.
"""

import logging
import threading
import time
import uuid
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from ..i18n.locale_store import LocaleStore
from ..i18n.locales import LocaleCode
from .backends import CancellationToken, RecognitionBackend, RecognitionError, RecognitionResult

logger = logging.getLogger(__name__)

ResultCallback = Callable[[str], None]
ErrorCallback = Callable[[RecognitionError], None]


@dataclass(eq=False)
class RecognitionSession:
    """Handle for one recognition attempt, bound to the locale at start time"""
    locale: LocaleCode
    on_result: ResultCallback
    on_error: ErrorCallback
    started_at: float = field(default_factory=time.time)
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    token: CancellationToken = field(default_factory=CancellationToken)
    terminated: bool = False

    @property
    def speech_tag(self) -> str:
        return self.locale.speech_tag


class SpeechInputEngine:
    """Wraps a recognition backend and enforces one open session"""

    def __init__(self, backend: RecognitionBackend, locale_store: LocaleStore):
        self.backend = backend
        self.locale_store = locale_store
        self._available = self._check_available(backend)
        self._active: Optional[RecognitionSession] = None
        self._lock = threading.RLock()
        self.stats = self._empty_stats()

    @staticmethod
    def _check_available(backend: RecognitionBackend) -> bool:
        try:
            available = bool(backend.is_available())
        except Exception as e:
            logger.error(f"Speech recognition availability check failed: {e}")
            return False
        if not available:
            logger.warning("Speech recognition not available on this platform")
        return available

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_sessions": 0,
            "successful_recognitions": 0,
            "failed_recognitions": 0,
            "errors": {},
            "by_locale": {},
        }

    def is_available(self) -> bool:
        return self._available

    @property
    def active_session(self) -> Optional[RecognitionSession]:
        with self._lock:
            return self._active

    def start_session(self, on_result: ResultCallback, on_error: ErrorCallback,
                      locale: Optional[LocaleCode] = None
                      ) -> Tuple[Optional[RecognitionSession], Optional[RecognitionError]]:
        """
        Open a session in the given locale, or the current one when omitted.

        Returns:
            Tuple of (session, error). The session is None when recognition is
            unavailable (UNAVAILABLE) or another session is open (BUSY).
        """
        if not self._available:
            return None, RecognitionError.UNAVAILABLE

        with self._lock:
            if self._active is not None:
                logger.debug("Recognition session already active")
                return None, RecognitionError.BUSY

            session = RecognitionSession(
                locale=locale or self.locale_store.get_locale(),
                on_result=on_result,
                on_error=on_error,
            )
            self._active = session
            self.stats["total_sessions"] += 1

            try:
                future = self.backend.recognize(session.speech_tag, session.token)
            except Exception as e:
                logger.error(f"Speech recognition failed to start: {e}")
                self._active = None
                return None, RecognitionError.UNKNOWN

        logger.info(f"Listening for speech in {session.locale.english_name} ({session.speech_tag})")
        future.add_done_callback(lambda f: self._on_backend_done(session, f))
        return session, None

    def stop_session(self, session: RecognitionSession) -> bool:
        """
        Request early cancellation.

        The terminal callback still fires exactly once, with ABORTED unless the
        backend already produced a result.
        """
        with self._lock:
            if session.terminated or session is not self._active:
                return False

        session.token.cancel()
        self._terminate(session, RecognitionResult.failure(RecognitionError.ABORTED))
        return True

    def expire_session(self, session: RecognitionSession) -> bool:
        """End a session that never produced a terminal event"""
        with self._lock:
            if session.terminated or session is not self._active:
                return False
        logger.warning(f"Recognition session {session.session_id} timed out")
        expired = self._terminate(session, RecognitionResult.failure(RecognitionError.TIMEOUT))
        session.token.cancel()
        return expired

    def _on_backend_done(self, session: RecognitionSession, future: Future):
        if future.cancelled():
            result = RecognitionResult.failure(RecognitionError.ABORTED)
        elif future.exception() is not None:
            logger.error(f"Speech recognition backend error: {future.exception()}")
            result = RecognitionResult.failure(RecognitionError.UNKNOWN, str(future.exception()))
        else:
            result = future.result()
        self._terminate(session, result)

    def _terminate(self, session: RecognitionSession, result: RecognitionResult) -> bool:
        with self._lock:
            if session.terminated:
                return False
            session.terminated = True
            if self._active is session:
                self._active = None
            self._record(session.locale, result)

        try:
            if result.ok:
                session.on_result(result.transcript.strip())
            else:
                session.on_error(result.error or RecognitionError.NO_SPEECH)
        except Exception:
            logger.exception("Recognition callback failed")
        return True

    def _record(self, locale: LocaleCode, result: RecognitionResult):
        lang_stats = self.stats["by_locale"].setdefault(locale.code, {"success": 0, "failed": 0})
        if result.ok:
            self.stats["successful_recognitions"] += 1
            lang_stats["success"] += 1
            return

        reason = (result.error or RecognitionError.NO_SPEECH).value
        self.stats["failed_recognitions"] += 1
        self.stats["errors"][reason] = self.stats["errors"].get(reason, 0) + 1
        lang_stats["failed"] += 1
        if result.detail:
            logger.debug(f"Recognition failed ({reason}): {result.detail}")

    def get_recognition_statistics(self) -> Dict[str, Any]:
        with self._lock:
            total = self.stats["total_sessions"]
            finished = self.stats["successful_recognitions"] + self.stats["failed_recognitions"]
            success_rate = (self.stats["successful_recognitions"] / finished * 100) if finished else 0
            return {
                "total_sessions": total,
                "successful_recognitions": self.stats["successful_recognitions"],
                "failed_recognitions": self.stats["failed_recognitions"],
                "success_rate": round(success_rate, 2),
                "errors": dict(self.stats["errors"]),
                "by_locale": {code: dict(v) for code, v in self.stats["by_locale"].items()},
                "available": self._available,
            }

    def reset_statistics(self):
        with self._lock:
            self.stats = self._empty_stats()
        logger.info("Recognition statistics reset")
