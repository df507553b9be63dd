"""
Data export commands
"""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from handlers.utils import get_clock, get_storage
from services.data_export import build_export, export_filename, export_to_json_bytes

logger = logging.getLogger(__name__)


async def export_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/export - send moods and journal as a JSON file"""
    user_id = update.effective_user.id
    exported_at = get_clock(context)()
    data = build_export(get_storage(context, user_id), exported_at)

    if not data["moods"] and not data["journal"]:
        await update.message.reply_text("❌ Nothing to export yet.")
        return

    await update.message.reply_document(
        document=export_to_json_bytes(data),
        filename=export_filename(user_id, exported_at),
        caption=(
            "📊 <b>Your data export</b>\n\n"
            f"• Mood check-ins: {len(data['moods'])}\n"
            f"• Journal entries: {len(data['journal'])}\n\n"
            "<i>JSON format</i>"
        ),
        parse_mode="HTML"
    )
    logger.info(f"📤 Data exported for user {user_id}")


def register_export_handlers(application: Application):
    application.add_handler(CommandHandler("export", export_command))
