# handlers/callbacks/resources.py

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from handlers.utils import get_rng, reply_or_edit
from services.classifiers import get_random_affirmation
from ui.keyboards import resources_keyboard
from ui.messages import affirmation_message, breathing_message


async def affirmation_new_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = affirmation_message(get_random_affirmation(get_rng(context)))
    await reply_or_edit(update, text, resources_keyboard())


async def breathing_start_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await reply_or_edit(update, breathing_message(), resources_keyboard())


def register_resources_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(affirmation_new_callback, pattern="^affirmation_new$"))
    application.add_handler(CallbackQueryHandler(breathing_start_callback, pattern="^breathing_start$"))
