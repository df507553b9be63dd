# handlers/callbacks/quick_actions.py

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from models.enums import ChatState
from handlers.utils import get_state, set_state
from services.chat_service import quick_prompt_reply
from ui.messages import chat_reply_message
from utils.text_utils import italic


async def quick_prompt_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    try:
        index = int(query.data.split(":", 1)[1])
    except ValueError:
        index = -1

    result = quick_prompt_reply(index)
    if result is None:
        await query.answer("Unknown prompt")
        return

    prompt, reply = result
    await query.answer()
    await query.message.reply_html(
        f"🗣 {italic(prompt)}\n\n" + chat_reply_message(reply.text, reply.suggestion)
    )


async def crisis_continue_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    await query.edit_message_reply_markup(reply_markup=None)
    await query.message.reply_text("I'm here with you. Tell me more whenever you're ready.")


async def vent_exit_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    if get_state(context) == ChatState.VENT:
        set_state(context, ChatState.IDLE)
    await query.edit_message_text("Vent mode closed. I'm still here if you want to talk.")


def register_quick_actions_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(quick_prompt_callback, pattern="^quick:"))
    application.add_handler(CallbackQueryHandler(crisis_continue_callback, pattern="^crisis_continue$"))
    application.add_handler(CallbackQueryHandler(vent_exit_callback, pattern="^vent_exit$"))
