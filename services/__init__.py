"""
MindfulSpace Bot - Services
Mood and journal stores, classifiers and chat replies
"""

from .mood_service import MoodStore, checkin_streak
from .journal_service import JournalStore
from .classifiers import (
    detect_crisis,
    suggest_for_mood,
    mood_to_color,
    format_date_label,
    get_random_affirmation
)
from .chat_service import ChatReply, generate_reply, quick_prompt_reply, vent_acknowledgement
from .resources import HELPLINES, CRISIS_HELPLINES

__all__ = [
    'MoodStore',
    'checkin_streak',
    'JournalStore',
    'detect_crisis',
    'suggest_for_mood',
    'mood_to_color',
    'format_date_label',
    'get_random_affirmation',
    'ChatReply',
    'generate_reply',
    'quick_prompt_reply',
    'vent_acknowledgement',
    'HELPLINES',
    'CRISIS_HELPLINES'
]
