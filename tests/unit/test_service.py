"""
Unit tests for the voice service facade, backend factory and the
process-wide service lifecycle.
"""

from unittest.mock import patch

import pytest

from meditech_voice.audio.backends import UnavailableRecognitionBackend, UnavailableSynthesisBackend
from meditech_voice.audio.factory import create_recognition_backend, create_synthesis_backend
from meditech_voice.core.service import (
    VoicePortalService,
    get_voice_service,
    init_voice_service,
    reset_voice_service,
)
from meditech_voice.core.voice_session import VoiceSessionState
from meditech_voice.i18n.locales import LocaleCode
from meditech_voice.navigation.router import RouteNavigator
from meditech_voice.storage.preferences import LOCALE_STORAGE_KEY, PreferenceStore
from meditech_voice.utils.exceptions import ConfigurationError
from tests.mocks.mock_speech import MockRecognitionBackend, MockSynthesisBackend


@pytest.fixture
def service(test_settings, synthesis_backend, recognition_backend, navigator):
    service = VoicePortalService(
        settings=test_settings,
        synthesis_backend=synthesis_backend,
        recognition_backend=recognition_backend,
        navigator=navigator,
    )
    yield service
    service.shutdown()


@pytest.mark.unit
class TestBackendFactory:
    """Test backend selection from settings."""

    def test_none_backends(self, test_settings):
        assert isinstance(create_synthesis_backend(test_settings), UnavailableSynthesisBackend)
        assert isinstance(create_recognition_backend(test_settings), UnavailableRecognitionBackend)

    def test_google_backend_settings(self, test_settings):
        settings = test_settings.model_copy(update={"recognition_backend": "google", "listen_timeout": 4.0})
        with patch("meditech_voice.audio.google_recognition.GoogleRecognitionBackend") as backend_cls:
            create_recognition_backend(settings)

        _, kwargs = backend_cls.call_args
        assert kwargs["listen_timeout"] == 4.0
        assert kwargs["energy_threshold"] == 300

    def test_unknown_backend(self, test_settings):
        settings = test_settings.model_copy(update={"synthesis_backend": "espeak"})

        with pytest.raises(ConfigurationError):
            create_synthesis_backend(settings)


@pytest.mark.unit
class TestVoicePortalService:
    """Test the facade used by UI collaborators."""

    def test_initial_state(self, service):
        assert service.state is VoiceSessionState.DISABLED
        assert not service.is_voice_enabled
        assert not service.is_listening
        assert service.transcript == ""
        assert service.get_locale() is LocaleCode.ENGLISH

    def test_voice_command_round_trip(self, service, synthesis_backend, recognition_backend, navigator):
        service.toggle_voice()
        synthesis_backend.finish()

        assert service.start_listening() is True
        assert service.is_listening
        recognition_backend.respond("login as pharmacist")

        assert navigator.history == ["/login/pharmacist"]
        assert service.transcript == "login as pharmacist"
        assert service.status().state is VoiceSessionState.IDLE

    def test_stop_listening(self, service):
        service.toggle_voice()
        service.start_listening()

        assert service.stop_listening() is True
        assert service.state is VoiceSessionState.IDLE

    def test_speak_requires_voice(self, service, synthesis_backend):
        assert service.speak("Hello") is False

        service.toggle_voice()
        assert service.speak("Hello") is True
        assert synthesis_backend.spoken_texts[-1] == "Hello"

    def test_set_locale_persists(self, service, test_settings):
        assert service.set_locale("pa") is True
        assert service.translate("login") == "ਲੌਗਇਨ"

        reloaded = PreferenceStore(test_settings.preferences_path)
        assert reloaded.get(LOCALE_STORAGE_KEY) == "pa"

    def test_persisted_locale_restored(self, test_settings):
        PreferenceStore(test_settings.preferences_path).set(LOCALE_STORAGE_KEY, "ml")

        service = VoicePortalService(settings=test_settings)

        assert service.get_locale() is LocaleCode.MALAYALAM

    def test_default_locale_from_settings(self, test_settings):
        settings = test_settings.model_copy(update={"default_locale": "hi"})

        assert VoicePortalService(settings=settings).get_locale() is LocaleCode.HINDI

    def test_translate_falls_back_to_key(self, service):
        assert service.translate("nonexistent_key") == "nonexistent_key"

    def test_unavailable_platform(self, test_settings):
        service = VoicePortalService(settings=test_settings)

        assert service.toggle_voice() is VoiceSessionState.IDLE
        assert service.start_listening() is False
        assert service.speak("Hello") is False

    def test_translation_overrides(self, tmp_path, test_settings):
        locales_dir = tmp_path / "locales"
        locales_dir.mkdir()
        (locales_dir / "en.json").write_text('{"welcome": "Welcome, friend"}', encoding="utf-8")
        settings = test_settings.model_copy(update={"locales_path": str(locales_dir)})

        assert VoicePortalService(settings=settings).translate("welcome") == "Welcome, friend"


@pytest.mark.unit
class TestGlobalService:
    """Test the process-wide init/get/reset lifecycle."""

    def test_init_and_get(self, test_settings):
        service = init_voice_service(settings=test_settings)

        assert get_voice_service() is service

    def test_init_replaces_previous_service(self, test_settings):
        synthesis = MockSynthesisBackend()
        first = init_voice_service(
            settings=test_settings,
            synthesis_backend=synthesis,
            recognition_backend=MockRecognitionBackend(),
        )
        first.toggle_voice()

        second = init_voice_service(settings=test_settings)

        assert second is not first
        assert first.state is VoiceSessionState.DISABLED
        assert synthesis.active == []

    def test_reset(self, test_settings):
        service = init_voice_service(settings=test_settings, navigator=RouteNavigator())
        reset_voice_service()

        with patch("meditech_voice.core.service.get_settings", return_value=test_settings):
            assert get_voice_service() is not service
