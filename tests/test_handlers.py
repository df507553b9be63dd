import pytest
from telegram.error import BadRequest

from handlers.callbacks.main_menu import menu_section_callback
from handlers.callbacks.mood import mood_reset_confirm_callback, mood_set_callback
from handlers.callbacks.quick_actions import quick_prompt_callback, vent_exit_callback
from handlers.callbacks.resources import breathing_start_callback
from handlers.commands.basic import cancel_command, forgetme_command, start_command
from handlers.commands.export_data import export_command
from handlers.commands.journal import journal_command, vent_command
from handlers.commands.mood import history_command
from handlers.messages import text_message
from handlers.utils import get_journal_store, get_mood_store, get_state
from models import ChatState, Mood, MoodEntry
from services.resources import HELPLINES


async def test_start_resets_state_and_shows_menu(make_message_update, context):
    context.user_data["chat_state"] = ChatState.VENT
    update = make_message_update()

    await start_command(update, context)

    assert get_state(context) == ChatState.IDLE
    text = update.message.reply_html.call_args.args[0]
    assert "Asha" in text
    assert update.message.reply_html.call_args.kwargs["reply_markup"] is not None


async def test_mood_set_saves_today_and_suggests(make_callback_update, context):
    update = make_callback_update("mood_set:worried")

    await mood_set_callback(update, context)

    store = get_mood_store(context, 42)
    assert store.get_moods(1) == [MoodEntry("2026-10-19", Mood.WORRIED)]
    text = update.callback_query.edit_message_text.call_args.args[0]
    assert "Mood saved" in text
    assert "Breathing Exercise" in text


async def test_mood_set_unknown_value(make_callback_update, context):
    update = make_callback_update("mood_set:furious")

    await mood_set_callback(update, context)

    update.callback_query.answer.assert_awaited_once_with("Unknown mood")
    assert get_mood_store(context, 42).get_moods(1) == [None]


async def test_history_command_shows_seven_days(make_message_update, context):
    get_mood_store(context, 42).record_today(Mood.HAPPY)
    update = make_message_update()

    await history_command(update, context)

    text = update.message.reply_html.call_args.args[0]
    assert "last 7 days" in text
    assert "Happy" in text


async def test_reset_confirm_clears_history(make_callback_update, context):
    get_mood_store(context, 42).record_today(Mood.SAD)
    update = make_callback_update("mood_reset_confirm")

    await mood_reset_confirm_callback(update, context)

    assert get_mood_store(context, 42).get_moods(7) == [None] * 7
    assert "History cleared" in update.callback_query.edit_message_text.call_args.args[0]


async def test_chat_message_gets_reply(make_message_update, context):
    update = make_message_update("I feel stressed")

    await text_message(update, context)

    update.message.reply_html.assert_awaited_once()
    assert "stressed" in update.message.reply_html.call_args.args[0]


async def test_crisis_message_sends_helplines_first(make_message_update, context):
    update = make_message_update("I feel hopeless")

    await text_message(update, context)

    calls = update.message.reply_html.call_args_list
    assert len(calls) == 2
    assert HELPLINES[0].number in calls[0].args[0]
    assert calls[0].kwargs["reply_markup"] is not None


async def test_blank_chat_message_is_ignored(make_message_update, context):
    update = make_message_update("   ")
    await text_message(update, context)
    update.message.reply_html.assert_not_awaited()


async def test_vent_flow_saves_journal(make_message_update, context):
    await vent_command(make_message_update(), context)
    assert get_state(context) == ChatState.VENT

    update = make_message_update("Everything is a lot right now")
    await text_message(update, context)

    entries = get_journal_store(context, 42).get_journal_entries()
    assert [e.content for e in entries] == ["Everything is a lot right now"]
    assert get_state(context) == ChatState.IDLE
    update.message.reply_text.assert_awaited_once()


async def test_vent_rejects_blank_text(make_message_update, context):
    context.user_data["chat_state"] = ChatState.VENT
    update = make_message_update("  ")

    await text_message(update, context)

    assert get_journal_store(context, 42).get_journal_entries() == []
    assert get_state(context) == ChatState.VENT


async def test_cancel_leaves_vent_mode(make_message_update, context):
    context.user_data["chat_state"] = ChatState.VENT
    await cancel_command(make_message_update(), context)
    assert get_state(context) == ChatState.IDLE


async def test_vent_exit_callback(make_callback_update, context):
    context.user_data["chat_state"] = ChatState.VENT
    await vent_exit_callback(make_callback_update("vent_exit"), context)
    assert get_state(context) == ChatState.IDLE


async def test_journal_command_lists_entries(make_message_update, context):
    get_journal_store(context, 42).save_journal_entry("gratitude: tea")
    update = make_message_update()

    await journal_command(update, context)

    assert "gratitude: tea" in update.message.reply_html.call_args.args[0]


async def test_quick_prompt_callback(make_callback_update, context):
    update = make_callback_update("quick:4")

    await quick_prompt_callback(update, context)

    text = update.callback_query.message.reply_html.call_args.args[0]
    assert "happy!" in text
    assert "wonderful to hear" in text


async def test_menu_helplines(make_callback_update, context):
    update = make_callback_update("menu:helplines")

    await menu_section_callback(update, context)

    text = update.callback_query.edit_message_text.call_args.args[0]
    for helpline in HELPLINES:
        assert helpline.number in text


async def test_export_sends_document(make_message_update, context):
    get_mood_store(context, 42).record_today(Mood.CALM)
    get_journal_store(context, 42).save_journal_entry("note")
    update = make_message_update()

    await export_command(update, context)

    kwargs = update.message.reply_document.call_args.kwargs
    assert kwargs["filename"] == "mindfulspace_export_42_20261019.json"
    assert b'"dateISO": "2026-10-19"' in kwargs["document"]
    assert b'"color": "#6cc4a1"' in kwargs["document"]


async def test_export_with_no_data(make_message_update, context):
    update = make_message_update()
    await export_command(update, context)
    update.message.reply_document.assert_not_awaited()
    update.message.reply_text.assert_awaited_once()


async def test_forgetme_deletes_user_data(make_message_update, context):
    get_mood_store(context, 42).record_today(Mood.CALM)

    await forgetme_command(make_message_update(), context)

    assert get_mood_store(context, 42).get_moods(1) == [None]


async def test_repeated_edit_with_same_content_is_ignored(make_callback_update, context):
    update = make_callback_update("breathing_start")
    update.callback_query.edit_message_text.side_effect = BadRequest(
        "Message is not modified: specified new message content and reply markup are exactly "
        "the same as a current content and reply markup of the message"
    )

    await breathing_start_callback(update, context)

    update.callback_query.answer.assert_awaited_once()


async def test_other_edit_errors_propagate(make_callback_update, context):
    update = make_callback_update("breathing_start")
    update.callback_query.edit_message_text.side_effect = BadRequest("Message to edit not found")

    with pytest.raises(BadRequest):
        await breathing_start_callback(update, context)
