"""
Durable preference storage
"""

from .preferences import PreferenceStore, LOCALE_STORAGE_KEY, AUTH_SESSION_KEY

__all__ = ["PreferenceStore", "LOCALE_STORAGE_KEY", "AUTH_SESSION_KEY"]
