"""
Voice session coordination
"""

from .voice_session import VoiceSessionController, VoiceSessionState, VoiceStatus
from .service import VoicePortalService, init_voice_service, get_voice_service, reset_voice_service

__all__ = [
    "VoiceSessionController",
    "VoiceSessionState",
    "VoiceStatus",
    "VoicePortalService",
    "init_voice_service",
    "get_voice_service",
    "reset_voice_service",
]
