import logging
import time

from telegram import Update
from telegram.error import NetworkError, TimedOut
from telegram.ext import Application, ApplicationHandlerStop, ContextTypes, TypeHandler

logger = logging.getLogger(__name__)

# === Anti-flood guard ===

class AntiFloodMiddleware:
    """Drops updates from a user that arrive faster than rate_limit_seconds"""

    def __init__(self, rate_limit_seconds=1.0, clock=time.monotonic, max_tracked_users=1000):
        self.rate_limit_seconds = rate_limit_seconds
        self.clock = clock
        self.max_tracked_users = max_tracked_users
        self.user_timestamps = {}

    async def __call__(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        user = update.effective_user
        if user is None:
            return

        now = self.clock()
        last = self.user_timestamps.get(user.id)
        if last is not None and now - last < self.rate_limit_seconds:
            logger.info(f"User {user.id} is flooding, skipping update")
            if update.callback_query:
                await update.callback_query.answer()
            raise ApplicationHandlerStop

        self._evict_stale(now)
        self.user_timestamps[user.id] = now

    def _evict_stale(self, now):
        if len(self.user_timestamps) < self.max_tracked_users:
            return
        self.user_timestamps = {
            user_id: ts for user_id, ts in self.user_timestamps.items()
            if now - ts < self.rate_limit_seconds
        }


# === Error handler ===

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    error = context.error

    if isinstance(error, (TimedOut, NetworkError)):
        logger.warning(f"⚠️ Temporary network error: {error}")
        return

    logger.error("❌ Unexpected error while handling an update", exc_info=error)

    if isinstance(update, Update) and update.effective_user:
        try:
            if update.callback_query:
                await update.callback_query.answer("⚠️ Something went wrong. Please try again.")
            elif update.effective_message:
                await update.effective_message.reply_text(
                    "⚠️ Something went wrong on my side. Please try again in a few seconds."
                )
        except Exception as e:
            logger.error(f"❌ Failed to notify user about error: {e}")


# === Wiring ===

def setup_middlewares(application: Application, rate_limit_seconds: float = 1.0):
    if rate_limit_seconds > 0:
        guard = AntiFloodMiddleware(rate_limit_seconds=rate_limit_seconds)
        application.add_handler(TypeHandler(Update, guard), group=-1)
    application.add_error_handler(error_handler)
