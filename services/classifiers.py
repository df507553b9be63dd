# services/classifiers.py

"""
Keyword and lookup-table helpers used by the chat and mood screens.

detect_crisis is a best-effort keyword heuristic, not a clinically validated
classifier: paraphrased crisis language is missed and benign phrases that
contain a keyword still match. Callers should only use it to offer helplines.
"""

import random
from datetime import date
from typing import Optional, Union

from models.enums import Mood, SuggestionType
from models.mood import MoodSuggestion

CRISIS_KEYWORDS = [
    "suicide", "kill myself", "hopeless", "end it", "can't go on",
    "worthless", "hate myself", "want to die", "no point", "give up",
]

AFFIRMATIONS = [
    "You are stronger than you know.",
    "This feeling is temporary, you are permanent.",
    "Your mental health matters, and so do you.",
    "It's okay to not be okay. You're not alone.",
    "You have survived difficult days before, you can do it again.",
    "Your feelings are valid, and seeking help is brave.",
    "One step at a time is still progress.",
    "You deserve kindness, especially from yourself.",
    "Your story isn't over yet. Keep writing.",
    "You are worthy of love and support.",
]

SUGGESTIONS = {
    Mood.HAPPY: MoodSuggestion(
        SuggestionType.AFFIRMATION,
        "Keep that positive energy flowing! You're doing great.",
    ),
    Mood.CALM: MoodSuggestion(
        SuggestionType.AFFIRMATION,
        "Your sense of peace is a strength. Embrace this moment.",
    ),
    Mood.NEUTRAL: MoodSuggestion(
        SuggestionType.BREATHING,
        "Try a quick breathing exercise to center yourself.",
    ),
    Mood.WORRIED: MoodSuggestion(
        SuggestionType.BREATHING,
        "Let's calm those worries with some deep breathing.",
    ),
    Mood.SAD: MoodSuggestion(
        SuggestionType.AFFIRMATION,
        "Your feelings are valid. Remember, you're not alone in this.",
    ),
}

MOOD_COLORS = {
    Mood.HAPPY: "#f6c945",
    Mood.CALM: "#6cc4a1",
    Mood.NEUTRAL: "#a3b1c6",
    Mood.WORRIED: "#f29e4c",
    Mood.SAD: "#6d8fd6",
}

FALLBACK_COLOR = "#e5e5e5"

MoodLike = Union[Mood, str, None]


def detect_crisis(text: Optional[str]) -> bool:
    if not text:
        return False
    lower_text = text.lower().replace("’", "'")
    return any(keyword in lower_text for keyword in CRISIS_KEYWORDS)


def suggest_for_mood(mood: MoodLike) -> MoodSuggestion:
    return SUGGESTIONS.get(Mood.parse(mood), SUGGESTIONS[Mood.NEUTRAL])


def mood_to_color(mood: MoodLike) -> str:
    return MOOD_COLORS.get(Mood.parse(mood), FALLBACK_COLOR)


def format_date_label(date_iso: str) -> str:
    """'Mon 19' style label; weekday name follows the process locale"""
    try:
        day = date.fromisoformat(date_iso)
    except (TypeError, ValueError):
        return date_iso
    return day.strftime("%a %d")


def get_random_affirmation(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(AFFIRMATIONS)
