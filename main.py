#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MindfulSpace Bot
Telegram companion for daily mood check-ins, journaling and support resources
"""

import logging
import sys

from telegram import Update

from bot.application import build_application
from config import get_config
from utils.logger import setup_logger


def main():
    try:
        config = get_config()
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    config.ensure_directories()
    setup_logger(config)
    logger = logging.getLogger(__name__)

    logger.info("🚀 Starting MindfulSpace Bot...")
    logger.info(f"Configuration: {config.to_dict()}")

    application = build_application(config)
    application.run_polling(allowed_updates=Update.ALL_TYPES, drop_pending_updates=True)
    logger.info("🛑 Bot stopped")


if __name__ == "__main__":
    main()
