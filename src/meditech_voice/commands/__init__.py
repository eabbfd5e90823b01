"""
Voice command interpretation
"""

from .interpreter import CommandInterpreter, CommandIntent, IntentType, INTENT_PRIORITY, normalize_text
from .keywords import COMMAND_KEYWORDS, ROLE_KEYWORDS, DEFAULT_ROLE

__all__ = [
    "CommandInterpreter",
    "CommandIntent",
    "IntentType",
    "INTENT_PRIORITY",
    "normalize_text",
    "COMMAND_KEYWORDS",
    "ROLE_KEYWORDS",
    "DEFAULT_ROLE",
]
