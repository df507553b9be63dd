# handlers/commands/journal.py

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from models.enums import ChatState
from handlers.utils import get_journal_store, set_state
from ui.keyboards import vent_keyboard
from ui.messages import journal_list_message, vent_intro_message


async def vent_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    set_state(context, ChatState.VENT)
    await update.message.reply_html(vent_intro_message(), reply_markup=vent_keyboard())


async def journal_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    entries = get_journal_store(context, update.effective_user.id).get_journal_entries()
    await update.message.reply_html(journal_list_message(entries))


def register_journal_handlers(application: Application):
    application.add_handler(CommandHandler("vent", vent_command))
    application.add_handler(CommandHandler("journal", journal_command))
