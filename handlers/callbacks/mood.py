# handlers/callbacks/mood.py

import logging

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from models.enums import Mood
from handlers.commands.mood import build_history_text
from handlers.utils import get_mood_store, reply_or_edit
from services.classifiers import suggest_for_mood
from ui.keyboards import mood_history_keyboard, reset_confirm_keyboard
from ui.messages import (
    history_cleared_message,
    mood_saved_message,
    reset_confirm_message,
    suggestion_message
)

logger = logging.getLogger(__name__)


async def mood_set_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    mood = Mood.parse(query.data.split(":", 1)[1])
    if mood is None:
        await query.answer("Unknown mood")
        return

    entry = get_mood_store(context, update.effective_user.id).record_today(mood)
    text = mood_saved_message(entry) + "\n\n" + suggestion_message(suggest_for_mood(mood))
    await reply_or_edit(update, text, mood_history_keyboard())


async def mood_history_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = build_history_text(context, update.effective_user.id)
    await reply_or_edit(update, text, mood_history_keyboard())


async def mood_reset_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await reply_or_edit(update, reset_confirm_message(), reset_confirm_keyboard())


async def mood_reset_confirm_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user_id = update.effective_user.id
    get_mood_store(context, user_id).reset_history()
    text = history_cleared_message() + "\n\n" + build_history_text(context, user_id)
    await reply_or_edit(update, text, mood_history_keyboard())


def register_mood_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(mood_set_callback, pattern="^mood_set:"))
    application.add_handler(CallbackQueryHandler(mood_history_callback, pattern="^mood_history$"))
    application.add_handler(CallbackQueryHandler(mood_reset_callback, pattern="^mood_reset$"))
    application.add_handler(CallbackQueryHandler(mood_reset_confirm_callback, pattern="^mood_reset_confirm$"))
