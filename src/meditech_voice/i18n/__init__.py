"""
Internationalization (i18n) module for the MediTech voice layer
Provides the locale set, translation tables and the active-locale store
"""

from .locales import LocaleCode, DEFAULT_LOCALE, resolve_locale, speech_tag_for, list_locales
from .translations import TRANSLATIONS, build_translation_tables
from .locale_store import LocaleStore

__all__ = [
    'LocaleCode',
    'DEFAULT_LOCALE',
    'resolve_locale',
    'speech_tag_for',
    'list_locales',
    'TRANSLATIONS',
    'build_translation_tables',
    'LocaleStore',
]
