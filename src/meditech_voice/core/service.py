"""
Process-wide voice service with an explicit init()/reset() lifecycle.

UI collaborators receive the service as a constructed dependency instead of
reaching for ambient global state; get_voice_service() exists for entry points.
"""

import logging
from typing import Optional, Union

from ..audio.backends import RecognitionBackend, SynthesisBackend
from ..audio.factory import create_recognition_backend, create_synthesis_backend
from ..audio.speech_input import SpeechInputEngine
from ..audio.speech_output import SpeechOutputEngine
from ..commands.interpreter import CommandInterpreter
from ..config.settings import VoicePortalSettings, get_settings
from ..i18n.locale_store import LocaleStore
from ..i18n.locales import LocaleCode
from ..i18n.translations import build_translation_tables
from ..storage.preferences import PreferenceStore
from .voice_session import Navigator, VoiceSessionController, VoiceSessionState, VoiceStatus

logger = logging.getLogger(__name__)


class VoicePortalService:
    """Facade over the locale store, speech engines and session controller"""

    def __init__(self, settings: Optional[VoicePortalSettings] = None,
                 preferences: Optional[PreferenceStore] = None,
                 synthesis_backend: Optional[SynthesisBackend] = None,
                 recognition_backend: Optional[RecognitionBackend] = None,
                 interpreter: Optional[CommandInterpreter] = None,
                 navigator: Optional[Navigator] = None):
        self.settings = settings or get_settings()

        if preferences is None:
            preferences = PreferenceStore(self.settings.preferences_path)
        self.preferences = preferences

        self.locale_store = LocaleStore(
            preferences=preferences,
            translations=build_translation_tables(self.settings.locales_path),
            default_locale=self.settings.default_locale,
        )

        if synthesis_backend is None:
            synthesis_backend = create_synthesis_backend(self.settings)
        if recognition_backend is None:
            recognition_backend = create_recognition_backend(self.settings)

        self.output = SpeechOutputEngine(synthesis_backend, self.locale_store)
        self.input = SpeechInputEngine(recognition_backend, self.locale_store)
        self.interpreter = interpreter or CommandInterpreter()
        self.controller = VoiceSessionController(
            locale_store=self.locale_store,
            output=self.output,
            input_engine=self.input,
            interpreter=self.interpreter,
            navigator=navigator,
            recognition_timeout=self.settings.recognition_timeout,
            announce_listening=self.settings.announce_listening,
        )

        logger.info(
            f"Voice service ready (locale={self.locale_store.get_locale().code}, "
            f"output={self.output.is_available()}, input={self.input.is_available()})"
        )

    # Voice operations

    def speak(self, text: str) -> bool:
        return self.controller.speak(text)

    def start_listening(self) -> bool:
        return self.controller.start_listening()

    def stop_listening(self) -> bool:
        return self.controller.stop_listening()

    def toggle_voice(self) -> VoiceSessionState:
        return self.controller.toggle_voice()

    @property
    def is_listening(self) -> bool:
        return self.controller.is_listening

    @property
    def is_voice_enabled(self) -> bool:
        return self.controller.is_voice_enabled

    @property
    def transcript(self) -> str:
        return self.controller.transcript

    @property
    def state(self) -> VoiceSessionState:
        return self.controller.state

    def status(self) -> VoiceStatus:
        return self.controller.status()

    # Locale operations

    def translate(self, key: str, **kwargs) -> str:
        return self.locale_store.translate(key, **kwargs)

    def set_locale(self, code: Union[str, LocaleCode]) -> bool:
        return self.controller.change_locale(code)

    def get_locale(self) -> LocaleCode:
        return self.locale_store.get_locale()

    def shutdown(self):
        self.controller.shutdown()


# Global service instance (lazy initialization)
_service: Optional[VoicePortalService] = None


def init_voice_service(**kwargs) -> VoicePortalService:
    """Create the process-wide service, replacing any previous one"""
    global _service
    if _service is not None:
        _service.shutdown()
    _service = VoicePortalService(**kwargs)
    return _service


def get_voice_service() -> VoicePortalService:
    """Get the process-wide service, creating it from settings on first use"""
    global _service
    if _service is None:
        _service = VoicePortalService()
    return _service


def reset_voice_service():
    """Shut down and forget the process-wide service"""
    global _service
    if _service is not None:
        _service.shutdown()
    _service = None
