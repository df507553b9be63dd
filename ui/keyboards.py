from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models.enums import Mood
from services.chat_service import QUICK_PROMPTS
from ui.themes import get_mood_theme


# Main menu
def main_menu_keyboard():
    keyboard = [
        [InlineKeyboardButton("🙂 Mood check-in", callback_data="menu:mood"),
         InlineKeyboardButton("📊 7-day history", callback_data="mood_history")],
        [InlineKeyboardButton("📝 Vent mode", callback_data="menu:vent"),
         InlineKeyboardButton("📔 Journal", callback_data="menu:journal")],
        [InlineKeyboardButton("💬 Quick prompts", callback_data="menu:quick"),
         InlineKeyboardButton("🧰 Resources", callback_data="menu:resources")],
        [InlineKeyboardButton("🆘 Helplines", callback_data="menu:helplines")]
    ]
    return InlineKeyboardMarkup(keyboard)


def mood_keyboard():
    row = []
    for mood in Mood:
        theme = get_mood_theme(mood)
        row.append(InlineKeyboardButton(theme["emoji"], callback_data=f"mood_set:{mood.value}"))
    return InlineKeyboardMarkup([row, [InlineKeyboardButton("🔙 Menu", callback_data="main_menu")]])


def mood_history_keyboard():
    keyboard = [
        [InlineKeyboardButton("🙂 Check in", callback_data="menu:mood"),
         InlineKeyboardButton("🧹 Reset history", callback_data="mood_reset")],
        [InlineKeyboardButton("🔙 Menu", callback_data="main_menu")]
    ]
    return InlineKeyboardMarkup(keyboard)


def reset_confirm_keyboard():
    keyboard = [
        [InlineKeyboardButton("✅ Yes, clear it", callback_data="mood_reset_confirm"),
         InlineKeyboardButton("❌ Keep it", callback_data="mood_history")]
    ]
    return InlineKeyboardMarkup(keyboard)


def quick_prompts_keyboard():
    keyboard = [
        [InlineKeyboardButton(text, callback_data=f"quick:{index}")]
        for index, (text, _mood) in enumerate(QUICK_PROMPTS)
    ]
    return InlineKeyboardMarkup(keyboard)


def crisis_keyboard():
    keyboard = [
        [InlineKeyboardButton("💬 Continue chat", callback_data="crisis_continue"),
         InlineKeyboardButton("🧰 Get resources", callback_data="menu:resources")]
    ]
    return InlineKeyboardMarkup(keyboard)


def resources_keyboard():
    keyboard = [
        [InlineKeyboardButton("🔄 New affirmation", callback_data="affirmation_new")],
        [InlineKeyboardButton("🌬️ Start breathing exercise", callback_data="breathing_start")],
        [InlineKeyboardButton("🆘 Helplines", callback_data="menu:helplines")],
        [InlineKeyboardButton("🔙 Menu", callback_data="main_menu")]
    ]
    return InlineKeyboardMarkup(keyboard)


def vent_keyboard():
    return InlineKeyboardMarkup([[InlineKeyboardButton("🚪 Exit vent mode", callback_data="vent_exit")]])


def back_to_menu_keyboard():
    return InlineKeyboardMarkup([[InlineKeyboardButton("🔙 Menu", callback_data="main_menu")]])
