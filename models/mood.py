# models/mood.py

from dataclasses import dataclass
from typing import Any, Dict

from models.enums import Mood, SuggestionType


@dataclass
class MoodEntry:
    """One day's mood, keyed by calendar date (YYYY-MM-DD)"""
    date_iso: str
    mood: Mood

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dateISO": self.date_iso,
            "mood": self.mood.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MoodEntry":
        mood = Mood.parse(data.get("mood"))
        if mood is None:
            raise ValueError(f"Unknown mood: {data.get('mood')!r}")
        date_iso = data.get("dateISO")
        if not isinstance(date_iso, str):
            raise ValueError(f"Invalid dateISO: {date_iso!r}")
        return cls(date_iso=date_iso, mood=mood)


@dataclass(frozen=True)
class MoodSuggestion:
    type: SuggestionType
    payload: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "payload": self.payload}
