"""
Unit tests for the gTTS and pyttsx3 synthesis backends.
Rendering, playback and the OS speech engine are mocked.
"""

import threading
from types import SimpleNamespace
from unittest.mock import MagicMock, Mock, patch

import pygame
import pytest

from meditech_voice.audio.backends import CancellationToken, Utterance
from meditech_voice.audio.gtts_backend import GTTSSynthesisBackend
from meditech_voice.audio.pyttsx3_backend import Pyttsx3SynthesisBackend
from meditech_voice.audio.speech_output import SpeechOutputEngine
from meditech_voice.i18n.locales import LocaleCode


def make_utterance(text="Welcome", locale=LocaleCode.ENGLISH, rate=0.9):
    return Utterance(text=text, locale=locale, rate=rate, pitch=1.0)


@pytest.fixture
def mock_pygame():
    with patch("meditech_voice.audio.gtts_backend.pygame") as mocked:
        mocked.error = pygame.error
        mocked.mixer.music.get_busy.return_value = False
        yield mocked


@pytest.fixture
def mock_gtts():
    def save(path):
        with open(path, "wb") as f:
            f.write(b"ID3")

    with patch("meditech_voice.audio.gtts_backend.gTTS") as mocked:
        mocked.return_value.save.side_effect = save
        yield mocked


@pytest.mark.unit
@pytest.mark.audio
class TestGTTSSynthesisBackend:
    """Test rendering parameters and playback outcomes."""

    def test_mixer_failure_marks_unavailable(self, mock_pygame, tmp_path):
        mock_pygame.mixer.init.side_effect = pygame.error("No available audio device")

        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        assert backend.is_available() is False

    def test_completed_playback(self, mock_pygame, mock_gtts, tmp_path):
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        future = backend.synthesize(make_utterance(locale=LocaleCode.HINDI), CancellationToken())

        assert future.result(timeout=2) is True
        _, kwargs = mock_gtts.call_args
        assert kwargs == {"text": "Welcome", "lang": "hi", "tld": "co.in", "slow": False}
        mock_pygame.mixer.music.play.assert_called_once()

    def test_english_uses_default_domain(self, mock_pygame, mock_gtts, tmp_path):
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        backend.synthesize(make_utterance(), CancellationToken()).result(timeout=2)

        assert mock_gtts.call_args.kwargs["tld"] == "com"

    def test_slow_rate(self, mock_pygame, mock_gtts, tmp_path):
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        backend.synthesize(make_utterance(rate=0.5), CancellationToken()).result(timeout=2)

        assert mock_gtts.call_args.kwargs["slow"] is True

    def test_cancelled_before_playback(self, mock_pygame, mock_gtts, tmp_path):
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)
        token = CancellationToken()
        token.cancel()

        assert backend.synthesize(make_utterance(), token).result(timeout=2) is False
        mock_pygame.mixer.music.play.assert_not_called()

    def test_render_failure(self, mock_pygame, mock_gtts, tmp_path):
        mock_gtts.side_effect = ValueError("Language not supported: xx")
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        assert backend.synthesize(make_utterance(), CancellationToken()).result(timeout=2) is False

    def test_cancel_stops_mixer(self, mock_pygame, mock_gtts, tmp_path):
        token = CancellationToken()
        mock_pygame.mixer.music.get_busy.side_effect = lambda: (token.cancel(), True)[1]
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        assert backend.synthesize(make_utterance(), token).result(timeout=2) is False
        mock_pygame.mixer.music.stop.assert_called_once()


@pytest.fixture
def mock_engine():
    engine = MagicMock()
    voices = [
        SimpleNamespace(id="english", languages=[b"\x05en-us"]),
        SimpleNamespace(id="hindi", languages=[b"\x05hi"]),
    ]
    engine.getProperty.side_effect = lambda name: {"rate": 200, "voices": voices}[name]
    with patch("meditech_voice.audio.pyttsx3_backend.pyttsx3.init", return_value=engine):
        yield engine


@pytest.mark.unit
@pytest.mark.audio
class TestPyttsx3SynthesisBackend:
    """Test offline voice selection and rate scaling."""

    def test_init_failure_marks_unavailable(self):
        with patch("meditech_voice.audio.pyttsx3_backend.pyttsx3.init", side_effect=RuntimeError("no driver")):
            backend = Pyttsx3SynthesisBackend()

        assert backend.is_available() is False

    def test_speaks_with_scaled_rate_and_locale_voice(self, mock_engine):
        backend = Pyttsx3SynthesisBackend()

        future = backend.synthesize(make_utterance("नमस्ते", LocaleCode.HINDI), CancellationToken())

        assert future.result(timeout=2) is True
        mock_engine.setProperty.assert_any_call("rate", 180)
        mock_engine.setProperty.assert_any_call("voice", "hindi")
        mock_engine.say.assert_called_once_with("नमस्ते")

    def test_missing_voice_keeps_default(self, mock_engine):
        backend = Pyttsx3SynthesisBackend()

        backend.synthesize(make_utterance("ਸਤ ਸ੍ਰੀ ਅਕਾਲ", LocaleCode.PUNJABI), CancellationToken()).result(timeout=2)

        voice_calls = [c for c in mock_engine.setProperty.call_args_list if c.args[0] == "voice"]
        assert voice_calls == []

    def test_cancel_stops_engine(self, mock_engine):
        token = CancellationToken()
        mock_engine.runAndWait.side_effect = token.cancel
        backend = Pyttsx3SynthesisBackend()

        assert backend.synthesize(make_utterance(), token).result(timeout=2) is False
        mock_engine.stop.assert_called_once()


@pytest.mark.unit
@pytest.mark.audio
class TestSynthesisWorkerFailure:
    """Test that an unexpected playback error still ends the utterance."""

    def test_gtts_unexpected_error(self, mock_pygame, mock_gtts, tmp_path):
        mock_gtts.return_value.save.side_effect = RuntimeError("encoder crashed")
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        assert backend.synthesize(make_utterance(), CancellationToken()).result(timeout=2) is False

    def test_gtts_unexpected_playback_error(self, mock_pygame, mock_gtts, tmp_path):
        mock_pygame.mixer.music.load.side_effect = KeyError("codec")
        backend = GTTSSynthesisBackend(temp_dir=tmp_path)

        assert backend.synthesize(make_utterance(), CancellationToken()).result(timeout=2) is False

    def test_pyttsx3_unexpected_error(self, mock_engine):
        mock_engine.runAndWait.side_effect = ReferenceError("driver gone")
        backend = Pyttsx3SynthesisBackend()

        assert backend.synthesize(make_utterance(), CancellationToken()).result(timeout=2) is False

    def test_engine_reports_not_completed_once(self, mock_pygame, mock_gtts, tmp_path, locale_store):
        mock_gtts.return_value.save.side_effect = RuntimeError("encoder crashed")
        finished = threading.Event()
        listener = Mock(side_effect=lambda utterance, completed: finished.set())
        engine = SpeechOutputEngine(GTTSSynthesisBackend(temp_dir=tmp_path), locale_store)
        engine.add_listener(listener)

        utterance = engine.speak("Welcome")

        assert finished.wait(2)
        listener.assert_called_once_with(utterance, False)
        assert engine.current_utterance is None
