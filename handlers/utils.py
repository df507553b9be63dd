# ===== handlers/utils.py =====
import logging
import random

from telegram import Update
from telegram.constants import ParseMode
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from database.manager import DatabaseManager
from database.storage import WellnessStorage
from models.enums import ChatState
from services.journal_service import JOURNAL_LIMIT, JournalStore
from services.mood_service import MOOD_HISTORY_LIMIT, MoodStore
from utils.datetime_utils import Clock, make_clock

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_DAYS = 7


# ===== SHARED SERVICES FROM bot_data =====

def get_db(context: ContextTypes.DEFAULT_TYPE) -> DatabaseManager:
    return context.bot_data["db"]


def get_clock(context: ContextTypes.DEFAULT_TYPE) -> Clock:
    clock = context.bot_data.get("clock")
    if clock is None:
        clock = context.bot_data["clock"] = make_clock()
    return clock


def get_rng(context: ContextTypes.DEFAULT_TYPE) -> random.Random:
    rng = context.bot_data.get("rng")
    if rng is None:
        rng = context.bot_data["rng"] = random.Random()
    return rng


def get_history_days(context: ContextTypes.DEFAULT_TYPE) -> int:
    return context.bot_data.get("history_days", DEFAULT_HISTORY_DAYS)


def get_storage(context: ContextTypes.DEFAULT_TYPE, user_id: int) -> WellnessStorage:
    return get_db(context).user_storage(user_id)


def get_mood_store(context: ContextTypes.DEFAULT_TYPE, user_id: int) -> MoodStore:
    return MoodStore(
        get_storage(context, user_id),
        get_clock(context),
        limit=context.bot_data.get("mood_limit", MOOD_HISTORY_LIMIT)
    )


def get_journal_store(context: ContextTypes.DEFAULT_TYPE, user_id: int) -> JournalStore:
    return JournalStore(
        get_storage(context, user_id),
        get_clock(context),
        limit=context.bot_data.get("journal_limit", JOURNAL_LIMIT)
    )


# ===== CHAT STATE =====

def get_state(context: ContextTypes.DEFAULT_TYPE) -> ChatState:
    return context.user_data.get('chat_state', ChatState.IDLE)


def set_state(context: ContextTypes.DEFAULT_TYPE, state: ChatState) -> None:
    context.user_data['chat_state'] = state


# ===== REPLIES =====

async def reply_or_edit(update: Update, text: str, reply_markup=None) -> None:
    """Edit the message behind a callback query, otherwise reply"""
    query = update.callback_query
    if query is not None:
        await query.answer()
        try:
            await query.edit_message_text(text, parse_mode=ParseMode.HTML, reply_markup=reply_markup)
        except BadRequest as e:
            if "not modified" not in str(e).lower():
                raise
            logger.debug(f"Message already shows this content: {e}")
    else:
        await update.effective_message.reply_html(text, reply_markup=reply_markup)
