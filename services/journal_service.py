# services/journal_service.py

import logging
from typing import List

from database.storage import WellnessStorage
from models.journal import JournalEntry
from utils.datetime_utils import Clock, epoch_millis

logger = logging.getLogger(__name__)

JOURNAL_LIMIT = 50


class JournalStore:
    """Newest-first journal capped at `limit` entries"""

    def __init__(self, storage: WellnessStorage, clock: Clock, limit: int = JOURNAL_LIMIT):
        self.storage = storage
        self.clock = clock
        self.limit = limit

    def save_journal_entry(self, content: str) -> JournalEntry:
        entries = self.storage.load_journal()
        now = self.clock()
        timestamp = epoch_millis(now)

        entry = JournalEntry(
            id=self._new_id(timestamp, {e.id for e in entries}),
            date=now.date().isoformat(),
            content=content,
            timestamp=timestamp,
        )
        entries.insert(0, entry)
        self.storage.save_journal(entries[:self.limit])
        logger.info(f"📔 Journal entry {entry.id} saved ({len(content)} chars)")
        return entry

    def get_journal_entries(self) -> List[JournalEntry]:
        return self.storage.load_journal()

    def clear_journal(self) -> None:
        self.storage.clear_journal()
        logger.info("🧹 Journal cleared")

    @staticmethod
    def _new_id(timestamp: int, taken: set) -> str:
        candidate = str(timestamp)
        suffix = 1
        while candidate in taken:
            candidate = f"{timestamp}-{suffix}"
            suffix += 1
        return candidate
