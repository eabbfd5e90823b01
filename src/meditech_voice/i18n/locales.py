"""
Closed set of portal locales and their speech metadata
"""

from enum import Enum
from typing import Dict, List, Optional, Union


class LocaleCode(Enum):
    """Supported locales with their speech tags and display metadata"""
    ENGLISH = ("en", "en-US", "English", "English", "latin")
    HINDI = ("hi", "hi-IN", "हिन्दी", "Hindi", "devanagari")
    TAMIL = ("ta", "ta-IN", "தமிழ்", "Tamil", "tamil")
    MALAYALAM = ("ml", "ml-IN", "മലയാളം", "Malayalam", "malayalam")
    PUNJABI = ("pa", "pa-IN", "ਪੰਜਾਬੀ", "Punjabi", "gurmukhi")

    def __init__(self, code: str, speech_tag: str, native_name: str,
                 english_name: str, script: str):
        self.code = code
        self.speech_tag = speech_tag
        self.native_name = native_name
        self.english_name = english_name
        self.script = script

    @classmethod
    def from_code(cls, code: Union[str, "LocaleCode", None]) -> Optional["LocaleCode"]:
        """Look up a locale by ISO code or speech tag ("hi" or "hi-IN")"""
        if isinstance(code, LocaleCode):
            return code
        if not isinstance(code, str):
            return None

        normalized = code.strip().lower()
        for locale in cls:
            if normalized in (locale.code, locale.speech_tag.lower()):
                return locale
        return None

    def __str__(self) -> str:
        return self.code


DEFAULT_LOCALE = LocaleCode.ENGLISH


def resolve_locale(code: Union[str, LocaleCode, None]) -> LocaleCode:
    """Resolve a code to a locale, falling back to English"""
    return LocaleCode.from_code(code) or DEFAULT_LOCALE


def speech_tag_for(code: Union[str, LocaleCode, None]) -> str:
    """Region-qualified speech tag for a code (unknown codes map to en-US)"""
    return resolve_locale(code).speech_tag


def get_locale_info(locale: LocaleCode) -> Dict[str, str]:
    return {
        "code": locale.code,
        "speech_tag": locale.speech_tag,
        "native_name": locale.native_name,
        "english_name": locale.english_name,
        "script": locale.script,
    }


def list_locales() -> List[Dict[str, str]]:
    """Locale metadata in display order, as used by a language switcher"""
    return [get_locale_info(locale) for locale in LocaleCode]
