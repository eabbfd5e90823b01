"""
Text-to-speech backend using Google Text-to-Speech (gTTS) for rendering and
the pygame mixer for playback.
"""

import logging
import os
import tempfile
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Union

# Suppress pygame welcome message
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame
from gtts import gTTS
from gtts.tts import gTTSError

from ..utils.exceptions import TextToSpeechError
from .backends import CancellationToken, SynthesisBackend, Utterance, resolve_future

logger = logging.getLogger(__name__)

# gTTS has no rate control beyond "slow"
SLOW_RATE_THRESHOLD = 0.75


class GTTSSynthesisBackend(SynthesisBackend):
    """Renders each utterance with gTTS and plays it through pygame"""

    def __init__(self, temp_dir: Optional[Union[str, Path]] = None, poll_interval_ms: int = 50):
        self.temp_dir = Path(temp_dir) if temp_dir else Path(tempfile.gettempdir()) / "meditech_voice"
        self.poll_interval_ms = poll_interval_ms
        self._playback_lock = threading.Lock()
        self._playing_token: Optional[CancellationToken] = None

        try:
            self.temp_dir.mkdir(parents=True, exist_ok=True)
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
            self.audio_initialized = True
            logger.info("Audio system initialized successfully")
        except (pygame.error, OSError) as e:
            logger.error(f"Failed to initialize audio system: {e}")
            self.audio_initialized = False

    def is_available(self) -> bool:
        return self.audio_initialized

    def synthesize(self, utterance: Utterance, token: CancellationToken) -> "Future[bool]":
        future: Future = Future()
        worker = threading.Thread(
            target=self._run,
            args=(utterance, token, future),
            name=f"tts-{utterance.utterance_id[:8]}",
            daemon=True,
        )
        worker.start()
        return future

    def _run(self, utterance: Utterance, token: CancellationToken, future: Future):
        audio_file = None
        try:
            audio_file = self._render(utterance)
            if not self._start_playback(audio_file, token):
                resolve_future(future, False)
                return

            token.add_callback(lambda: self._stop_playback(token))
            while pygame.mixer.music.get_busy() and not token.is_cancelled:
                pygame.time.wait(self.poll_interval_ms)

            resolve_future(future, not token.is_cancelled)
        except (TextToSpeechError, pygame.error) as e:
            logger.error(f"TTS error for {utterance.locale.english_name}: {e}")
            resolve_future(future, False)
        except Exception as e:
            logger.exception(f"Unexpected TTS error for {utterance.locale.english_name}: {e}")
            resolve_future(future, False)
        finally:
            with self._playback_lock:
                if self._playing_token is token:
                    self._playing_token = None
            if audio_file is not None:
                try:
                    audio_file.unlink()
                except OSError as cleanup_error:
                    logger.warning(f"Failed to cleanup temp file: {cleanup_error}")

    def _render(self, utterance: Utterance) -> Path:
        """Render the utterance to an mp3 file"""
        language, _, region = utterance.speech_tag.partition("-")
        tld = "co.in" if region == "IN" else "com"
        audio_file = self.temp_dir / f"tts_{language}_{utterance.utterance_id}.mp3"

        logger.debug(f"Generating speech in {utterance.locale.english_name}: {utterance.text[:50]}...")
        try:
            tts = gTTS(
                text=utterance.text,
                lang=language,
                tld=tld,
                slow=utterance.rate < SLOW_RATE_THRESHOLD,
            )
            tts.save(str(audio_file))
        except (gTTSError, AssertionError, ValueError, OSError) as e:
            raise TextToSpeechError(f"Could not render speech: {e}") from e
        return audio_file

    def _start_playback(self, audio_file: Path, token: CancellationToken) -> bool:
        with self._playback_lock:
            if token.is_cancelled:
                return False
            pygame.mixer.music.load(str(audio_file))
            pygame.mixer.music.play()
            self._playing_token = token
        return True

    def _stop_playback(self, token: CancellationToken):
        """Stop the mixer only if it is still playing this token's audio"""
        with self._playback_lock:
            if self._playing_token is not token:
                return
            try:
                pygame.mixer.music.stop()
                logger.debug("Stopped current speech playback")
            except pygame.error as e:
                logger.warning(f"Error stopping speech: {e}")
            self._playing_token = None
