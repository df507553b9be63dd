# handlers/router.py

from telegram.ext import Application

from handlers.commands.basic import register_basic_handlers
from handlers.commands.mood import register_mood_handlers
from handlers.commands.journal import register_journal_handlers
from handlers.commands.resources import register_resources_handlers
from handlers.commands.export_data import register_export_handlers

from handlers.callbacks.main_menu import register_main_menu_callbacks
from handlers.callbacks.mood import register_mood_callbacks
from handlers.callbacks.quick_actions import register_quick_actions_callbacks
from handlers.callbacks.resources import register_resources_callbacks

from handlers.messages import register_message_handlers


def register_handlers(application: Application):
    """Attach all commands, callbacks and the free-text handler"""
    register_basic_handlers(application)
    register_mood_handlers(application)
    register_journal_handlers(application)
    register_resources_handlers(application)
    register_export_handlers(application)

    register_main_menu_callbacks(application)
    register_mood_callbacks(application)
    register_quick_actions_callbacks(application)
    register_resources_callbacks(application)

    # last: catches any remaining text
    register_message_handlers(application)
