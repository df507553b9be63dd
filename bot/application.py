import logging
import random
from typing import Any, Dict

from telegram.ext import Application, ApplicationBuilder

from bot.middleware import setup_middlewares
from config import BotConfig
from database.manager import DatabaseManager
from handlers.router import register_handlers
from services.health_check import start_health_server
from utils.datetime_utils import make_clock

logger = logging.getLogger(__name__)


def create_bot_data(config: BotConfig) -> Dict[str, Any]:
    """Shared services handed to every handler through context.bot_data"""
    return {
        "db": DatabaseManager(config.storage.data_dir, config.storage.backup_dir),
        "clock": make_clock(config.wellness.timezone),
        "rng": random.Random(),
        "mood_limit": config.storage.mood_history_limit,
        "journal_limit": config.storage.journal_limit,
        "history_days": config.wellness.history_days,
    }


def build_application(config: BotConfig) -> Application:
    async def post_init(application: Application):
        if config.server.health_check_enabled:
            application.bot_data["health_runner"] = await start_health_server(
                config.server.host, config.server.port
            )

    async def post_shutdown(application: Application):
        runner = application.bot_data.pop("health_runner", None)
        if runner is not None:
            await runner.cleanup()

    application = (
        ApplicationBuilder()
        .token(config.telegram.bot_token)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )
    application.bot_data.update(create_bot_data(config))

    setup_middlewares(application, config.telegram.flood_interval)
    register_handlers(application)
    logger.info(f"📂 Stored users: {application.bot_data['db'].get_users_count()}")
    logger.info("✅ Handlers registered")
    return application
