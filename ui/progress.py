# ui/progress.py

from typing import Optional, Sequence

from models.mood import MoodEntry
from ui.themes import get_mood_theme


def mood_heatmap(history: Sequence[Optional[MoodEntry]]) -> str:
    """One square per day, oldest on the left"""
    return "".join(
        get_mood_theme(entry.mood if entry else None)["square"]
        for entry in reversed(history)
    )


def streak_emoji(streak: int) -> str:
    if streak >= 30:
        return "🏆"
    elif streak >= 7:
        return "🔥"
    elif streak >= 3:
        return "✨"
    else:
        return "🔹"
