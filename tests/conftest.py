"""
Shared fixtures: a temporary preference file, fake speech backends and a
fully wired voice session controller.
"""

import logging

import pytest

from meditech_voice.audio.speech_input import SpeechInputEngine
from meditech_voice.audio.speech_output import SpeechOutputEngine
from meditech_voice.commands.interpreter import CommandInterpreter
from meditech_voice.config.settings import VoicePortalSettings, reset_settings
from meditech_voice.core.service import reset_voice_service
from meditech_voice.core.voice_session import VoiceSessionController
from meditech_voice.i18n.locale_store import LocaleStore
from meditech_voice.navigation.router import RouteNavigator
from meditech_voice.storage.preferences import PreferenceStore
from tests.mocks.mock_speech import MockRecognitionBackend, MockSynthesisBackend


@pytest.fixture
def preferences_path(tmp_path):
    return tmp_path / "data" / "preferences.json"


@pytest.fixture
def preferences(preferences_path):
    return PreferenceStore(preferences_path)


@pytest.fixture
def locale_store(preferences):
    return LocaleStore(preferences)


@pytest.fixture
def synthesis_backend():
    return MockSynthesisBackend()


@pytest.fixture
def recognition_backend():
    return MockRecognitionBackend()


@pytest.fixture
def output_engine(synthesis_backend, locale_store):
    return SpeechOutputEngine(synthesis_backend, locale_store)


@pytest.fixture
def input_engine(recognition_backend, locale_store):
    return SpeechInputEngine(recognition_backend, locale_store)


@pytest.fixture
def navigator():
    return RouteNavigator()


@pytest.fixture
def controller(locale_store, output_engine, input_engine, navigator):
    controller = VoiceSessionController(
        locale_store=locale_store,
        output=output_engine,
        input_engine=input_engine,
        interpreter=CommandInterpreter(),
        navigator=navigator,
    )
    yield controller
    controller.shutdown()


@pytest.fixture
def test_settings(tmp_path):
    """Settings that never touch real audio devices."""
    return VoicePortalSettings(
        preferences_path=str(tmp_path / "preferences.json"),
        synthesis_backend="none",
        recognition_backend="none",
        recognition_timeout=0,
    )


@pytest.fixture(autouse=True)
def reset_globals():
    """Drop cached settings and the global service after each test."""
    yield
    reset_voice_service()
    reset_settings()


@pytest.fixture(autouse=True)
def capture_debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="meditech_voice")
    yield
