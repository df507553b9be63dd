# handlers/callbacks/main_menu.py

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from models.enums import ChatState
from handlers.commands.mood import MOOD_QUESTION
from handlers.utils import get_journal_store, get_rng, reply_or_edit, set_state
from services.classifiers import get_random_affirmation
from services.resources import HELPLINES
from ui.keyboards import (
    back_to_menu_keyboard,
    main_menu_keyboard,
    mood_keyboard,
    quick_prompts_keyboard,
    resources_keyboard,
    vent_keyboard
)
from ui.messages import helplines_message, journal_list_message, resources_message, vent_intro_message

MENU_TEXT = "🌱 <b>MindfulSpace</b>\nWhat would you like to do?"


async def main_menu_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await reply_or_edit(update, MENU_TEXT, main_menu_keyboard())


async def menu_section_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    section = update.callback_query.data.split(":", 1)[1]
    user_id = update.effective_user.id

    if section == "mood":
        await reply_or_edit(update, MOOD_QUESTION, mood_keyboard())
    elif section == "vent":
        set_state(context, ChatState.VENT)
        await reply_or_edit(update, vent_intro_message(), vent_keyboard())
    elif section == "journal":
        entries = get_journal_store(context, user_id).get_journal_entries()
        await reply_or_edit(update, journal_list_message(entries), back_to_menu_keyboard())
    elif section == "quick":
        await reply_or_edit(update, "💬 Tap how you feel:", quick_prompts_keyboard())
    elif section == "resources":
        text = resources_message(get_random_affirmation(get_rng(context)))
        await reply_or_edit(update, text, resources_keyboard())
    elif section == "helplines":
        await reply_or_edit(update, helplines_message(HELPLINES), back_to_menu_keyboard())
    else:
        await update.callback_query.answer("Unknown menu item")


def register_main_menu_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(main_menu_callback, pattern="^main_menu$"))
    application.add_handler(CallbackQueryHandler(menu_section_callback, pattern="^menu:"))
