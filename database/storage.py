# database/storage.py

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from models.journal import JournalEntry
from models.mood import MoodEntry

logger = logging.getLogger(__name__)

MOODS_KEY = "mentalHealth_moods"
JOURNAL_KEY = "mentalHealth_journal"

T = TypeVar("T")


class StorageBackend(ABC):
    """Key-value store of JSON arrays"""

    @abstractmethod
    def load(self, key: str) -> Optional[List[Any]]:
        """Stored array for key, or None when absent or unreadable"""

    @abstractmethod
    def save(self, key: str, items: List[Any]) -> None:
        """Overwrite the array stored under key"""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove key; a missing key is not an error"""


class MemoryStorage(StorageBackend):
    """In-memory backend, values are kept serialized like on disk"""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def load(self, key: str) -> Optional[List[Any]]:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"⚠️ Corrupt value under {key}, treating as empty")
            return None
        return data if isinstance(data, list) else None

    def save(self, key: str, items: List[Any]) -> None:
        self._data[key] = json.dumps(items, ensure_ascii=False)

    def clear(self, key: str) -> None:
        self._data.pop(key, None)

    def set_raw(self, key: str, raw: str) -> None:
        self._data[key] = raw


class JsonFileStorage(StorageBackend):
    """One JSON file per key inside a directory"""

    def __init__(self, directory: Path, backup_dir: Optional[Path] = None):
        self.directory = Path(directory)
        self.backup_dir = Path(backup_dir) if backup_dir else None

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Optional[List[Any]]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"❌ JSON parse error in {path}: {e}")
            self._move_corrupted(key, path)
            return None
        except OSError as e:
            logger.error(f"❌ Failed to read {path}: {e}")
            return None

        if not isinstance(data, list):
            logger.warning(f"⚠️ Unexpected data format in {path}")
            self._move_corrupted(key, path)
            return None
        return data

    def save(self, key: str, items: List[Any]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"💾 Saved {len(items)} items to {path}")

    def clear(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.info(f"🗑️ Cleared {path}")

    def _move_corrupted(self, key: str, path: Path) -> None:
        if self.backup_dir is None:
            return
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            backup_name = f"corrupted_{key}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            backup_path = self.backup_dir / backup_name
            path.replace(backup_path)
            logger.warning(f"🔄 Corrupted file moved to {backup_path}")
        except OSError as e:
            logger.error(f"❌ Failed to back up corrupted file {path}: {e}")


class WellnessStorage:
    """Typed mood and journal collections over a StorageBackend"""

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    # ===== MOODS =====

    def load_moods(self) -> List[MoodEntry]:
        return self._load(MOODS_KEY, MoodEntry.from_dict)

    def save_moods(self, entries: List[MoodEntry]) -> None:
        self.backend.save(MOODS_KEY, [entry.to_dict() for entry in entries])

    def clear_moods(self) -> None:
        self.backend.clear(MOODS_KEY)

    # ===== JOURNAL =====

    def load_journal(self) -> List[JournalEntry]:
        return self._load(JOURNAL_KEY, JournalEntry.from_dict)

    def save_journal(self, entries: List[JournalEntry]) -> None:
        self.backend.save(JOURNAL_KEY, [entry.to_dict() for entry in entries])

    def clear_journal(self) -> None:
        self.backend.clear(JOURNAL_KEY)

    def _load(self, key: str, parse: Callable[[Dict[str, Any]], T]) -> List[T]:
        raw_items = self.backend.load(key) or []
        items = []
        for raw in raw_items:
            try:
                items.append(parse(raw))
            except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
                logger.warning(f"⚠️ Skipping malformed item under {key}: {e}")
        return items
