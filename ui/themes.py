# ui/themes.py

from typing import Dict, Optional, Union

from models.enums import Mood

MOOD_THEMES: Dict[Mood, Dict[str, str]] = {
    Mood.HAPPY: {
        "emoji": "😄",
        "square": "🟨",
        "name": "Happy"
    },
    Mood.CALM: {
        "emoji": "😌",
        "square": "🟩",
        "name": "Calm"
    },
    Mood.NEUTRAL: {
        "emoji": "😐",
        "square": "⬛️",
        "name": "Neutral"
    },
    Mood.WORRIED: {
        "emoji": "😟",
        "square": "🟧",
        "name": "Worried"
    },
    Mood.SAD: {
        "emoji": "😢",
        "square": "🟦",
        "name": "Sad"
    }
}

EMPTY_THEME = {
    "emoji": "▫️",
    "square": "⬜️",
    "name": "No check-in"
}


def get_mood_theme(mood: Union[Mood, str, None]) -> Dict[str, str]:
    return MOOD_THEMES.get(Mood.parse(mood), EMPTY_THEME)
