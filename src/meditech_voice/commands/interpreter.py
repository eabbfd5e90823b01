"""
Maps recognized transcripts to navigation intents.

Matching is a pure function of (transcript, locale): normalize, then test the
locale's keyword sets in the fixed order Home, Login, Help and return the
first set with a substring match.
"""

import copy
import logging
import re
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from ..i18n.locales import LocaleCode, resolve_locale
from .keywords import COMMAND_KEYWORDS, DEFAULT_ROLE, ROLE_KEYWORDS

logger = logging.getLogger(__name__)


class IntentType(Enum):
    """Kinds of command intent"""
    NAVIGATE_HOME = "home"
    NAVIGATE_LOGIN = "login"
    REQUEST_HELP = "help"
    UNRECOGNIZED = "unrecognized"


# Matching priority
INTENT_PRIORITY = (IntentType.NAVIGATE_HOME, IntentType.NAVIGATE_LOGIN, IntentType.REQUEST_HELP)


@dataclass(frozen=True)
class CommandIntent:
    """Action derived from a voice command"""
    kind: IntentType
    role: Optional[str] = None
    keyword: Optional[str] = None
    transcript: str = ""

    @property
    def is_navigation(self) -> bool:
        return self.kind in (IntentType.NAVIGATE_HOME, IntentType.NAVIGATE_LOGIN)

    @classmethod
    def navigate_home(cls, **kwargs) -> "CommandIntent":
        return cls(IntentType.NAVIGATE_HOME, **kwargs)

    @classmethod
    def navigate_login(cls, role: str = DEFAULT_ROLE, **kwargs) -> "CommandIntent":
        return cls(IntentType.NAVIGATE_LOGIN, role=role, **kwargs)

    @classmethod
    def request_help(cls, **kwargs) -> "CommandIntent":
        return cls(IntentType.REQUEST_HELP, **kwargs)

    @classmethod
    def unrecognized(cls, **kwargs) -> "CommandIntent":
        return cls(IntentType.UNRECOGNIZED, **kwargs)


def normalize_text(text: str) -> str:
    """NFC-normalize, lowercase, trim and collapse whitespace"""
    text = unicodedata.normalize("NFC", text or "")
    return re.sub(r"\s+", " ", text.lower()).strip()


class CommandInterpreter:
    """Keyword-based interpreter; keyword sets are data and can be extended per locale"""

    def __init__(self, keyword_sets: Optional[Dict[str, Dict[str, List[str]]]] = None,
                 role_keywords: Optional[Dict[str, Dict[str, List[str]]]] = None,
                 default_role: str = DEFAULT_ROLE):
        self.keyword_sets = self._normalized(keyword_sets if keyword_sets is not None else COMMAND_KEYWORDS)
        self.role_keywords = self._normalized(role_keywords if role_keywords is not None else ROLE_KEYWORDS)
        self.default_role = default_role

    @staticmethod
    def _normalized(table: Dict[str, Dict[str, List[str]]]) -> Dict[str, Dict[str, List[str]]]:
        table = copy.deepcopy(table)
        for groups in table.values():
            for name, words in groups.items():
                groups[name] = [normalize_text(w) for w in words if normalize_text(w)]
        return table

    def interpret(self, transcript: str, locale: Union[str, LocaleCode, None]) -> CommandIntent:
        text = normalize_text(transcript)
        locale = resolve_locale(locale)
        keyword_set = self.keyword_sets.get(locale.code, {})

        if text:
            for kind in INTENT_PRIORITY:
                keyword = self._first_match(text, keyword_set.get(kind.value, ()))
                if keyword is None:
                    continue
                if kind is IntentType.NAVIGATE_LOGIN:
                    return CommandIntent.navigate_login(
                        role=self._extract_role(text, locale), keyword=keyword, transcript=text
                    )
                return CommandIntent(kind, keyword=keyword, transcript=text)

        logger.info(f"No command matched in {locale.code}: {text!r}")
        return CommandIntent.unrecognized(transcript=text)

    def _extract_role(self, text: str, locale: LocaleCode) -> str:
        for role, words in self.role_keywords.get(locale.code, {}).items():
            if self._first_match(text, words) is not None:
                return role
        return self.default_role

    @staticmethod
    def _first_match(text: str, keywords: Iterable[str]) -> Optional[str]:
        for keyword in keywords:
            if keyword in text:
                return keyword
        return None

    def extend(self, locale: Union[str, LocaleCode], intent: IntentType, keywords: Iterable[str]):
        """Add keywords for one intent in one locale"""
        if intent is IntentType.UNRECOGNIZED:
            raise ValueError("Keywords cannot be registered for UNRECOGNIZED")
        locale = resolve_locale(locale)
        words = self.keyword_sets.setdefault(locale.code, {}).setdefault(intent.value, [])
        for keyword in keywords:
            normalized = normalize_text(keyword)
            if normalized and normalized not in words:
                words.append(normalized)
