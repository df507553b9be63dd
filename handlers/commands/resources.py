# handlers/commands/resources.py

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from handlers.utils import get_rng
from services.classifiers import get_random_affirmation
from services.resources import HELPLINES
from ui.keyboards import resources_keyboard
from ui.messages import affirmation_message, breathing_message, helplines_message, resources_message


async def resources_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = resources_message(get_random_affirmation(get_rng(context)))
    await update.message.reply_html(text, reply_markup=resources_keyboard())


async def helplines_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_html(helplines_message(HELPLINES))


async def affirmation_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_html(affirmation_message(get_random_affirmation(get_rng(context))))


async def breathe_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_html(breathing_message())


def register_resources_handlers(application: Application):
    application.add_handler(CommandHandler("resources", resources_command))
    application.add_handler(CommandHandler(["helplines", "sos"], helplines_command))
    application.add_handler(CommandHandler("affirmation", affirmation_command))
    application.add_handler(CommandHandler("breathe", breathe_command))
