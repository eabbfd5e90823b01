"""
Active locale selection and translation lookup.

The selected locale is the only state shared across voice sessions. It is
written by whoever calls set_locale() and read lazily by the speech engines,
so a change only affects sessions and utterances started afterwards.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Union

from ..storage.preferences import LOCALE_STORAGE_KEY, PreferenceStore
from ..utils.exceptions import PreferenceStoreError
from .locales import DEFAULT_LOCALE, LocaleCode, list_locales
from .translations import TranslationTable, build_translation_tables

logger = logging.getLogger(__name__)

LocaleListener = Callable[[LocaleCode, LocaleCode], None]


class LocaleStore:
    """Holds the active locale and resolves translation keys against it"""

    def __init__(self, preferences: Optional[PreferenceStore] = None,
                 translations: Optional[Dict[str, TranslationTable]] = None,
                 default_locale: Union[str, LocaleCode] = DEFAULT_LOCALE):
        self.preferences = preferences if preferences is not None else PreferenceStore()
        self.translations = translations if translations is not None else build_translation_tables()
        self.default_locale = LocaleCode.from_code(default_locale) or DEFAULT_LOCALE
        self._listeners: List[LocaleListener] = []
        self._lock = threading.RLock()
        self._current = self._load_persisted()

    def _load_persisted(self) -> LocaleCode:
        stored = self.preferences.get(LOCALE_STORAGE_KEY)
        if stored is None:
            return self.default_locale

        locale = LocaleCode.from_code(stored)
        if locale is None:
            logger.warning(f"Ignoring unsupported persisted locale: {stored!r}")
            return self.default_locale
        return locale

    def get_locale(self) -> LocaleCode:
        with self._lock:
            return self._current

    def set_locale(self, code: Union[str, LocaleCode]) -> bool:
        """
        Select a new locale.

        Codes outside the supported set are ignored and the current locale is
        kept. Returns True when the code was accepted.
        """
        locale = LocaleCode.from_code(code)
        if locale is None:
            logger.warning(f"Locale code not supported: {code!r}")
            return False

        with self._lock:
            old_locale = self._current
            self._current = locale
            try:
                self.preferences.set(LOCALE_STORAGE_KEY, locale.code)
            except PreferenceStoreError as e:
                logger.error(f"Locale {locale.code} selected but not persisted: {e}")
            listeners = list(self._listeners) if locale is not old_locale else []

        if listeners:
            logger.info(f"Language changed from {old_locale.english_name} to {locale.english_name}")
        for listener in listeners:
            try:
                listener(old_locale, locale)
            except Exception:
                logger.exception("Locale listener failed")
        return True

    def translate(self, key: str, locale: Optional[LocaleCode] = None, **kwargs) -> str:
        """Translate a key; unknown keys come back unchanged"""
        if locale is None:
            locale = self.get_locale()

        translation = self.translations.get(locale.code, {}).get(key)
        if not translation:
            logger.debug(f"Translation not found for key: {key} ({locale.code})")
            return key

        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, IndexError, ValueError) as e:
                logger.warning(f"Error formatting translation for key {key}: {e}")

        return translation

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Register listener(old, new) for locale changes; returns an unsubscribe callable"""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def available_locales(self) -> List[Dict[str, str]]:
        return list_locales()
