# handlers/commands/basic.py

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from models.enums import ChatState
from handlers.utils import get_db, get_state, set_state
from ui.keyboards import main_menu_keyboard
from ui.messages import help_message, welcome_message

logger = logging.getLogger(__name__)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user = update.effective_user
    set_state(context, ChatState.IDLE)
    logger.info(f"👋 /start from user {user.id}")
    await update.message.reply_html(welcome_message(user), reply_markup=main_menu_keyboard())


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_html(help_message())


async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if get_state(context) == ChatState.VENT:
        set_state(context, ChatState.IDLE)
        await update.message.reply_text("Vent mode closed. I'm still here if you want to talk.")
    else:
        await update.message.reply_text("Nothing to cancel.")


async def forgetme_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user_id = update.effective_user.id
    deleted = get_db(context).delete_user_data(user_id)
    set_state(context, ChatState.IDLE)
    if deleted:
        await update.message.reply_text("🗑️ Your moods and journal have been deleted.")
    else:
        await update.message.reply_text("There is no saved data to delete.")


def register_basic_handlers(application: Application):
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("cancel", cancel_command))
    application.add_handler(CommandHandler("forgetme", forgetme_command))
