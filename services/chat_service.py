# services/chat_service.py

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from models.enums import Mood
from models.mood import MoodSuggestion
from services.classifiers import detect_crisis, suggest_for_mood

WELCOME_TEXT = (
    "Hi 👋 Welcome to MindfulSpace! How are you feeling today? "
    "I'm here to listen and support you."
)

# (keywords, reply, mood used for the suggestion); first match wins
KEYWORD_RULES = [
    (("stressed", "stress"),
     "I hear that you're feeling stressed. That's completely normal, and I'm here to help you through it.",
     Mood.WORRIED),
    (("anxious", "anxiety"),
     "Anxiety can be overwhelming. Let's take this one step at a time together.",
     Mood.WORRIED),
    (("sad", "depressed"),
     "I'm sorry you're feeling sad. Your feelings are valid, and you don't have to go through this alone.",
     Mood.SAD),
    (("happy", "good", "great"),
     "I'm so glad to hear you're feeling positive! It's wonderful when we can appreciate these moments.",
     Mood.HAPPY),
    (("okay", "fine"),
     "Thank you for sharing. Sometimes feeling 'okay' is enough, and that's perfectly fine.",
     Mood.CALM),
]

GENERAL_REPLIES = [
    "Thank you for sharing that with me. How can I support you today?",
    "I appreciate you opening up. Your feelings matter.",
    "I'm here to listen. Would you like to tell me more about how you're feeling?",
    "That sounds important. I'm glad you felt comfortable sharing it with me.",
]

QUICK_PROMPTS: Tuple[Tuple[str, Mood], ...] = (
    ("I feel stressed", Mood.WORRIED),
    ("I'm feeling anxious", Mood.WORRIED),
    ("I'm okay today", Mood.CALM),
    ("I feel really sad", Mood.SAD),
    ("I'm happy!", Mood.HAPPY),
)

QUICK_REPLIES = {
    Mood.WORRIED: "I understand you're feeling stressed. Let's work through this together.",
    Mood.SAD: "I'm here with you. It's okay to feel sad sometimes.",
    Mood.HAPPY: "That's wonderful to hear! I'm happy you're feeling good.",
    Mood.CALM: "It sounds like you're in a peaceful place today. That's great.",
}

QUICK_REPLY_DEFAULT = "Thank you for sharing how you're feeling."

VENT_ACKNOWLEDGEMENTS = [
    "Thank you for trusting me with your thoughts. Writing can be very healing.",
    "I've saved your thoughts safely. You've taken a brave step by expressing yourself.",
    "Your feelings are heard and valid. I'm proud of you for sharing.",
    "That took courage to write. Your emotional honesty is a strength.",
]


@dataclass
class ChatReply:
    text: str
    suggestion: Optional[MoodSuggestion] = None
    crisis: bool = False


def generate_reply(text: str, rng: Optional[random.Random] = None) -> ChatReply:
    lower_text = text.lower()
    crisis = detect_crisis(text)

    for keywords, reply, mood in KEYWORD_RULES:
        if any(keyword in lower_text for keyword in keywords):
            return ChatReply(reply, suggest_for_mood(mood), crisis)

    return ChatReply((rng or random).choice(GENERAL_REPLIES), None, crisis)


def quick_prompt_reply(index: int) -> Optional[Tuple[str, ChatReply]]:
    """(prompt text, reply) for a quick prompt, None for an unknown index"""
    if not 0 <= index < len(QUICK_PROMPTS):
        return None
    prompt, mood = QUICK_PROMPTS[index]
    reply = QUICK_REPLIES.get(mood, QUICK_REPLY_DEFAULT)
    return prompt, ChatReply(reply, suggest_for_mood(mood))


def vent_acknowledgement(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(VENT_ACKNOWLEDGEMENTS)
