"""Auto-save of in-progress translations, keyed by the content of the source file."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from srtstudio.error_codes import ErrorCode
from srtstudio.exceptions import PersistenceError

logger = logging.getLogger(__name__)

KEY_PREFIX = 'srt-translation-'


def derive_key(content: str, prefix: str = KEY_PREFIX) -> str:
    """Build the auto-save key for a file from a 32-bit rolling hash of its text.

    ``hash = hash * 31 + code_unit`` over the UTF-16 code units, wrapped to a
    signed 32-bit integer. This is a fingerprint, not a digest: two files
    that collide share one auto-save slot.
    """
    data = content.encode('utf-16-le', 'surrogatepass')
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return f"{prefix}{h}"


class JsonFileStorage:
    """Key-value string storage, one file per key under a directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f'{key}.json'

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(
                f"Failed to read auto-save data: {path}",
                error_code=str(ErrorCode.STORAGE_READ_ERROR.value),
                original_error=e,
            ) from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding='utf-8')
        except OSError as e:
            raise PersistenceError(
                f"Failed to write auto-save data: {path}",
                error_code=str(ErrorCode.STORAGE_WRITE_ERROR.value),
                original_error=e,
            ) from e

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(
                f"Failed to remove auto-save data: {path}",
                error_code=str(ErrorCode.STORAGE_WRITE_ERROR.value),
                original_error=e,
            ) from e


class AutosaveStore:
    """Sparse map of entry position -> translated text, one per file key."""

    def __init__(self, storage: JsonFileStorage) -> None:
        self.storage = storage

    def _read(self, key: str) -> Optional[Dict[str, str]]:
        raw = self.storage.get_item(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Discarding corrupted auto-save data for %s", key)
            return None
        if not isinstance(data, dict):
            return None
        bad = [k for k, v in data.items() if not isinstance(v, str)]
        if bad:
            logger.warning("Dropping %d non-text auto-save value(s) for %s", len(bad), key)
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def save(self, key: str, position: int, text: str) -> bool:
        """Store one translation. Returns False instead of raising when persistence fails."""
        try:
            mapping = self._read(key) or {}
            mapping[str(position)] = text
            self.storage.set_item(key, json.dumps(mapping, ensure_ascii=False))
        except (PersistenceError, TypeError, ValueError) as e:
            logger.error("Failed to auto-save line %s: %s", position, e)
            return False
        return True

    def load_all(self, key: str) -> Optional[Dict[str, str]]:
        try:
            return self._read(key)
        except PersistenceError as e:
            logger.error("Failed to load auto-save data: %s", e)
            return None

    def clear(self, key: str) -> None:
        self.storage.remove_item(key)
        logger.info("Cleared auto-save data for %s", key)
