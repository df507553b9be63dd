# handlers/commands/mood.py

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from handlers.utils import get_clock, get_history_days, get_mood_store
from services.mood_service import checkin_streak
from ui.keyboards import mood_history_keyboard, mood_keyboard, reset_confirm_keyboard
from ui.messages import mood_history_message, reset_confirm_message
from utils.datetime_utils import last_n_days

MOOD_QUESTION = "How are you feeling today? Pick the face that fits best:"


def build_history_text(context: ContextTypes.DEFAULT_TYPE, user_id: int) -> str:
    days = get_history_days(context)
    today = get_clock(context)().date()
    history = get_mood_store(context, user_id).get_moods(days, today=today)
    return mood_history_message(history, last_n_days(today, days), checkin_streak(history))


async def mood_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(MOOD_QUESTION, reply_markup=mood_keyboard())


async def history_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = build_history_text(context, update.effective_user.id)
    await update.message.reply_html(text, reply_markup=mood_history_keyboard())


async def resetmood_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(reset_confirm_message(), reply_markup=reset_confirm_keyboard())


def register_mood_handlers(application: Application):
    application.add_handler(CommandHandler("mood", mood_command))
    application.add_handler(CommandHandler("history", history_command))
    application.add_handler(CommandHandler("resetmood", resetmood_command))
