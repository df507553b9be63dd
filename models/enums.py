# models/enums.py

from enum import Enum
from typing import Optional, Union


class Mood(Enum):
    """Daily self-reported mood"""
    HAPPY = "happy"
    CALM = "calm"
    NEUTRAL = "neutral"
    WORRIED = "worried"
    SAD = "sad"

    @classmethod
    def parse(cls, value: Union["Mood", str, None]) -> Optional["Mood"]:
        """Mood for a value, or None when it is not one of the five moods"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class SuggestionType(Enum):
    BREATHING = "breathing"
    AFFIRMATION = "affirmation"


class ChatState(Enum):
    IDLE = "idle"
    VENT = "vent"
