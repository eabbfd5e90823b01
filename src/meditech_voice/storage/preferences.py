"""
JSON-file key/value store for values that must survive a restart.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..utils.exceptions import PreferenceStoreError

logger = logging.getLogger(__name__)

LOCALE_STORAGE_KEY = "meditech-language"
# Written by the auth collaborator only
AUTH_SESSION_KEY = "meditech-user"


class PreferenceStore:
    """Durable preference storage backed by a single JSON file"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self._values: Dict[str, Any] = {}
        self._lock = threading.RLock()
        self._load()

    def _load(self):
        """Load persisted values, treating a missing or corrupt file as empty"""
        if self.path is None or not self.path.exists():
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read preferences from {self.path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: expected a JSON object")
            return

        self._values = data
        logger.debug(f"Loaded {len(data)} preference keys from {self.path}")

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: Any):
        """Store a value and flush to disk before returning"""
        with self._lock:
            previous = self._values.get(key)
            self._values[key] = value
            try:
                self._flush()
            except PreferenceStoreError:
                if previous is None:
                    self._values.pop(key, None)
                else:
                    self._values[key] = previous
                raise

    def remove(self, key: str) -> bool:
        with self._lock:
            if key not in self._values:
                return False
            value = self._values.pop(key)
            try:
                self._flush()
            except PreferenceStoreError:
                self._values[key] = value
                raise
            return True

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._values)

    def _flush(self):
        if self.path is None:
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                prefix=".preferences-", suffix=".json", dir=str(self.path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(self._values, f, ensure_ascii=False, indent=2)
                os.replace(temp_path, self.path)
            except BaseException:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise
        except OSError as e:
            raise PreferenceStoreError(f"Could not write preferences to {self.path}: {e}") from e
