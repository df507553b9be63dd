# handlers/messages.py

import logging

from telegram import Update
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from models.enums import ChatState
from handlers.utils import get_journal_store, get_rng, get_state, set_state
from services.chat_service import generate_reply, vent_acknowledgement
from services.resources import CRISIS_HELPLINES
from ui.keyboards import crisis_keyboard
from ui.messages import chat_reply_message, crisis_message
from utils.validators import JOURNAL_MAX_LENGTH, is_valid_journal_text

logger = logging.getLogger(__name__)


async def handle_vent_text(update: Update, context: ContextTypes.DEFAULT_TYPE, text: str):
    if not is_valid_journal_text(text):
        if text.strip():
            await update.message.reply_text(
                f"That's a bit long for one entry, please keep it under {JOURNAL_MAX_LENGTH} characters."
            )
        else:
            await update.message.reply_text("Write whatever is on your mind, then send it.")
        return

    get_journal_store(context, update.effective_user.id).save_journal_entry(text)
    set_state(context, ChatState.IDLE)
    await update.message.reply_text(vent_acknowledgement(get_rng(context)))


async def handle_chat_text(update: Update, context: ContextTypes.DEFAULT_TYPE, text: str):
    reply = generate_reply(text, get_rng(context))

    if reply.crisis:
        logger.warning(f"🆘 Crisis keywords detected for user {update.effective_user.id}")
        await update.message.reply_html(crisis_message(CRISIS_HELPLINES), reply_markup=crisis_keyboard())

    await update.message.reply_html(chat_reply_message(reply.text, reply.suggestion))


async def text_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    text = update.message.text or ""

    if get_state(context) == ChatState.VENT:
        await handle_vent_text(update, context, text)
        return

    if not text.strip():
        return
    await handle_chat_text(update, context, text)


def register_message_handlers(application: Application):
    application.add_handler(MessageHandler(filters.TEXT & (~filters.COMMAND), text_message))
