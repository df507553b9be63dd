# database/manager.py

import logging
import shutil
from pathlib import Path
from typing import Dict, Optional

from database.storage import JsonFileStorage, WellnessStorage

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Per-user storage placement: DATA_DIR/user_<id>/<key>.json"""

    def __init__(self, data_dir: Path, backup_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir)
        self.backup_dir = Path(backup_dir) if backup_dir else None
        self._cache: Dict[int, WellnessStorage] = {}

    def _user_dir(self, user_id: int) -> Path:
        return self.data_dir / f"user_{user_id}"

    def user_storage(self, user_id: int) -> WellnessStorage:
        storage = self._cache.get(user_id)
        if storage is None:
            backend = JsonFileStorage(self._user_dir(user_id), backup_dir=self.backup_dir)
            storage = WellnessStorage(backend)
            self._cache[user_id] = storage
        return storage

    def delete_user_data(self, user_id: int) -> bool:
        self._cache.pop(user_id, None)
        path = self._user_dir(user_id)
        if not path.exists():
            return False
        shutil.rmtree(path)
        logger.info(f"🗑️ Deleted data of user {user_id}")
        return True

    def get_users_count(self) -> int:
        if not self.data_dir.exists():
            return 0
        return sum(1 for p in self.data_dir.glob("user_*") if p.is_dir())
