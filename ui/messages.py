from typing import Optional, Sequence

from models.enums import SuggestionType
from models.helpline import Helpline
from models.journal import JournalEntry
from models.mood import MoodEntry, MoodSuggestion
from services.chat_service import WELCOME_TEXT
from services.classifiers import format_date_label
from services.resources import BREATHING_STEPS, DISCLAIMER, STUDY_TIPS
from ui.progress import mood_heatmap, streak_emoji
from ui.themes import get_mood_theme
from utils.text_utils import bold, escape_html, italic, truncate


def welcome_message(user):
    name = escape_html(user.first_name) if user and user.first_name else "friend"
    return (
        f"Hi, {name}! 🌱\n"
        f"{escape_html(WELCOME_TEXT)}\n\n"
        "Just write to me, or use the menu below. /help lists all commands."
    )


def help_message():
    return (
        "🛠 <b>Commands</b>:\n"
        "/start — main menu\n"
        "/mood — daily mood check-in\n"
        "/history — your last 7 days\n"
        "/resetmood — clear mood history\n"
        "/vent — write privately to your journal\n"
        "/journal — recent journal entries\n"
        "/resources — breathing, affirmations, tips\n"
        "/helplines — 24/7 helplines (also /sos)\n"
        "/affirmation — a random affirmation\n"
        "/breathe — 4-7-8 breathing exercise\n"
        "/export — download your data\n"
        "/forgetme — delete all your data\n"
        "/cancel — leave vent mode"
    )


def mood_saved_message(entry: MoodEntry):
    theme = get_mood_theme(entry.mood)
    return (
        f"{theme['emoji']} Mood saved!\n"
        f"Your mood has been recorded for today: {bold(theme['name'])}"
    )


def suggestion_message(suggestion: Optional[MoodSuggestion]):
    if suggestion is None:
        return ""
    if suggestion.type == SuggestionType.BREATHING:
        return (
            "🌬️ <b>Breathing Exercise</b>\n"
            f"{escape_html(suggestion.payload)}\n"
            + breathing_steps_text()
        )
    return f"💝 <b>Affirmation</b>\n{italic(suggestion.payload)}"


def chat_reply_message(text: str, suggestion: Optional[MoodSuggestion] = None):
    msg = escape_html(text)
    extra = suggestion_message(suggestion)
    if extra:
        msg += "\n\n" + extra
    return msg


def breathing_steps_text():
    return "\n".join(f"• {escape_html(step)}" for step in BREATHING_STEPS)


def breathing_message():
    return (
        "🌬️ <b>4-7-8 Breathing</b>\n"
        "Follow the rhythm:\n"
        + breathing_steps_text()
    )


def mood_history_message(history: Sequence[Optional[MoodEntry]], days: Sequence[str], streak: int):
    """history and days are aligned, today first"""
    lines = [f"📊 <b>Your last {len(history)} days</b>", mood_heatmap(history), ""]
    for entry, day in zip(history, days):
        theme = get_mood_theme(entry.mood if entry else None)
        lines.append(f"{theme['square']} {escape_html(format_date_label(day))} — {theme['name']}")
    lines.append("")
    if streak:
        lines.append(f"{streak_emoji(streak)} Check-in streak: <b>{streak}</b> days")
    else:
        lines.append("No check-in today yet. How are you feeling?")
    return "\n".join(lines)


def journal_list_message(entries: Sequence[JournalEntry], limit: int = 5):
    if not entries:
        return "📔 Your journal is empty. Use /vent to write your first entry."
    lines = [f"📔 <b>Your journal</b> ({len(entries)} entries)"]
    for entry in entries[:limit]:
        lines.append(f"\n<b>{escape_html(entry.date)}</b>\n{escape_html(truncate(entry.content, 200))}")
    if len(entries) > limit:
        lines.append(f"\n…and {len(entries) - limit} older entries. /export downloads all of them.")
    return "\n".join(lines)


def vent_intro_message():
    return (
        "📝 <b>Private Vent Space</b>\n"
        "Write freely about your thoughts and feelings. "
        "Your next message will be saved to your journal.\n"
        "/cancel to leave vent mode."
    )


def helplines_message(helplines: Sequence[Helpline]):
    blocks = [
        f"{bold(h.name)}\n📞 {escape_html(h.number)}\n{escape_html(h.description)}"
        for h in helplines
    ]
    return "🆘 <b>Emergency Mental Health Helplines</b>\n\n" + "\n\n".join(blocks) + \
        "\n\n🇮🇳 India-based helplines available 24/7"


def crisis_message(helplines: Sequence[Helpline]):
    lines = [
        "⚠️ <b>You're Not Alone</b>",
        "I'm concerned about what you shared. Please know that you matter "
        "and there are people who want to help.",
        ""
    ]
    lines.extend(f"📞 {escape_html(h.name)}: <b>{escape_html(h.number)}</b>" for h in helplines)
    return "\n".join(lines)


def affirmation_message(text: str):
    return f"💝 <b>Daily Affirmation</b>\n{italic(text)}"


def resources_message(affirmation: str):
    tips = "\n".join(f"{index}. {escape_html(tip)}" for index, tip in enumerate(STUDY_TIPS, 1))
    return (
        "🧰 <b>Mental Health Resources</b>\n"
        "Tools and support for your mental wellness journey\n\n"
        f"{affirmation_message(affirmation)}\n\n"
        "🌬️ <b>Breathing Exercise</b>\n"
        "Quick 4-7-8 breathing technique to reduce stress and anxiety\n\n"
        f"📚 <b>Student Wellness Tips</b>\n{tips}\n\n"
        f"<b>Important:</b> {escape_html(DISCLAIMER)}"
    )


def reset_confirm_message():
    return "🧹 Clear your whole mood history? This cannot be undone."


def history_cleared_message():
    return "🧹 History cleared. Your mood history has been reset."
