"""
Speech recognition backend using the SpeechRecognition microphone capture
and Google Speech Recognition.
"""

import logging
import threading
from concurrent.futures import Future

import speech_recognition as sr

from .backends import (
    CancellationToken,
    RecognitionBackend,
    RecognitionError,
    RecognitionResult,
    resolve_future,
)

logger = logging.getLogger(__name__)


class GoogleRecognitionBackend(RecognitionBackend):
    """Single-shot recognition: one phrase per call, no interim results"""

    def __init__(self, listen_timeout: float = 8.0, phrase_time_limit: float = 10.0,
                 ambient_noise_duration: float = 0.5, energy_threshold: int = 300):
        self.listen_timeout = listen_timeout
        self.phrase_time_limit = phrase_time_limit
        self.ambient_noise_duration = ambient_noise_duration

        self.recognizer = sr.Recognizer()
        self.recognizer.energy_threshold = energy_threshold
        self.recognizer.dynamic_energy_threshold = True
        self.recognizer.pause_threshold = 0.8

        self.microphone = None
        self._microphone_lock = threading.Lock()
        self._initialize_microphone()

    def _initialize_microphone(self):
        try:
            self.microphone = sr.Microphone()
            logger.info("Microphone detected successfully")
        except (OSError, AttributeError) as e:
            # AttributeError is how SpeechRecognition reports a missing PyAudio
            logger.error(f"Microphone setup failed: {e}")
            self.microphone = None

    def is_available(self) -> bool:
        return self.microphone is not None

    def recognize(self, speech_tag: str, token: CancellationToken) -> "Future[RecognitionResult]":
        future: Future = Future()
        token.add_callback(
            lambda: resolve_future(future, RecognitionResult.failure(RecognitionError.ABORTED))
        )
        worker = threading.Thread(
            target=self._run, args=(speech_tag, token, future), name=f"stt-{speech_tag}", daemon=True
        )
        worker.start()
        return future

    def _run(self, speech_tag: str, token: CancellationToken, future: Future):
        resolve_future(future, self.listen_once(speech_tag, token))

    def listen_once(self, speech_tag: str, token: CancellationToken) -> RecognitionResult:
        """Capture and transcribe one phrase, mapping library errors to results"""
        if self.microphone is None:
            return RecognitionResult.failure(RecognitionError.UNAVAILABLE, "Microphone not available")

        try:
            with self._microphone_lock:
                with self.microphone as source:
                    if self.ambient_noise_duration:
                        self.recognizer.adjust_for_ambient_noise(source, duration=self.ambient_noise_duration)
                    logger.debug(f"Listening for speech in {speech_tag}...")
                    audio = self.recognizer.listen(
                        source,
                        timeout=self.listen_timeout,
                        phrase_time_limit=self.phrase_time_limit,
                    )

            if token.is_cancelled:
                return RecognitionResult.failure(RecognitionError.ABORTED)

            text = self.recognizer.recognize_google(audio, language=speech_tag)
            logger.info(f"Recognized text in {speech_tag}: {text}")
            return RecognitionResult.success(text.strip())

        except sr.WaitTimeoutError:
            error_msg = f"No speech detected within {self.listen_timeout} seconds"
            logger.debug(error_msg)
            return RecognitionResult.failure(RecognitionError.NO_SPEECH, error_msg)

        except sr.UnknownValueError:
            error_msg = f"Could not understand speech in {speech_tag}"
            logger.warning(error_msg)
            return RecognitionResult.failure(RecognitionError.NO_MATCH, error_msg)

        except sr.RequestError as e:
            error_msg = f"Speech recognition service error: {e}"
            logger.error(error_msg)
            return RecognitionResult.failure(RecognitionError.NETWORK, error_msg)

        except PermissionError as e:
            error_msg = f"Microphone access denied: {e}"
            logger.error(error_msg)
            return RecognitionResult.failure(RecognitionError.NOT_ALLOWED, error_msg)

        except OSError as e:
            error_msg = f"Audio capture failed: {e}"
            logger.error(error_msg)
            return RecognitionResult.failure(RecognitionError.AUDIO_CAPTURE, error_msg)

        except Exception as e:
            error_msg = f"Unexpected speech recognition error: {e}"
            logger.exception(error_msg)
            return RecognitionResult.failure(RecognitionError.UNKNOWN, error_msg)
