# services/mood_service.py

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from database.storage import WellnessStorage
from models.enums import Mood
from models.mood import MoodEntry
from utils.datetime_utils import Clock, last_n_days

logger = logging.getLogger(__name__)

MOOD_HISTORY_LIMIT = 30


class MoodStore:
    """
    Bounded daily mood history

    - one entry per calendar date (upsert by date, kept in place)
    - a new date is prepended, most recently added first
    - at most `limit` entries are persisted, the rest fall off the end
    """

    def __init__(self, storage: WellnessStorage, clock: Clock, limit: int = MOOD_HISTORY_LIMIT):
        self.storage = storage
        self.clock = clock
        self.limit = limit

    def save_mood(self, entry: MoodEntry) -> None:
        by_date: Dict[str, MoodEntry] = {}
        for stored in self.storage.load_moods()[:self.limit]:
            by_date.setdefault(stored.date_iso, stored)

        if entry.date_iso in by_date:
            by_date[entry.date_iso] = entry
        else:
            by_date = {entry.date_iso: entry, **by_date}

        self.storage.save_moods(list(by_date.values())[:self.limit])
        logger.info(f"🙂 Mood saved: {entry.date_iso} -> {entry.mood.value}")

    def record_today(self, mood: Mood) -> MoodEntry:
        entry = MoodEntry(date_iso=self.clock().date().isoformat(), mood=mood)
        self.save_mood(entry)
        return entry

    def get_moods(self, days: int = 7, today: Optional[date] = None) -> List[Optional[MoodEntry]]:
        """Entry or None for each of the last `days` days, today at index 0"""
        if today is None:
            today = self.clock().date()

        by_date: Dict[str, MoodEntry] = {}
        for stored in self.storage.load_moods():
            by_date.setdefault(stored.date_iso, stored)

        return [by_date.get(day) for day in last_n_days(today, max(days, 0))]

    def reset_history(self) -> None:
        self.storage.clear_moods()
        logger.info("🧹 Mood history cleared")


def checkin_streak(history: Sequence[Optional[MoodEntry]]) -> int:
    """Consecutive checked-in days counting back from index 0"""
    streak = 0
    for entry in history:
        if entry is None:
            break
        streak += 1
    return streak
