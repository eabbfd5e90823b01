"""
MediTech Voice
Multilingual voice navigation layer for the MediTech rural healthcare portal
"""

from .core.service import VoicePortalService, init_voice_service, get_voice_service, reset_voice_service
from .core.voice_session import VoiceSessionController, VoiceSessionState
from .i18n.locales import LocaleCode
from .i18n.locale_store import LocaleStore
from .commands.interpreter import CommandInterpreter, CommandIntent, IntentType

__version__ = "0.1.0"

__all__ = [
    "VoicePortalService",
    "init_voice_service",
    "get_voice_service",
    "reset_voice_service",
    "VoiceSessionController",
    "VoiceSessionState",
    "LocaleCode",
    "LocaleStore",
    "CommandInterpreter",
    "CommandIntent",
    "IntentType",
]
