#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MindfulSpace Bot - Models Package
Data models and enums for the wellness companion
"""

from .enums import (
    Mood,
    SuggestionType,
    ChatState
)

from .mood import (
    MoodEntry,
    MoodSuggestion
)

from .journal import JournalEntry

from .helpline import Helpline

__all__ = [
    # Enums
    'Mood',
    'SuggestionType',
    'ChatState',

    # Mood models
    'MoodEntry',
    'MoodSuggestion',

    # Journal models
    'JournalEntry',

    # Resources
    'Helpline'
]
