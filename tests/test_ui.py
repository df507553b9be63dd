from models import JournalEntry, Mood, MoodEntry
from services.classifiers import suggest_for_mood
from services.resources import CRISIS_HELPLINES, HELPLINES
from ui.keyboards import main_menu_keyboard, mood_keyboard, quick_prompts_keyboard
from ui.messages import (
    chat_reply_message,
    crisis_message,
    helplines_message,
    journal_list_message,
    mood_history_message,
    suggestion_message
)
from ui.progress import mood_heatmap, streak_emoji
from ui.themes import EMPTY_THEME, get_mood_theme

DAYS = ["2026-10-19", "2026-10-18", "2026-10-17"]


def callback_data(markup):
    return [button.callback_data for row in markup.inline_keyboard for button in row]


def test_mood_keyboard_has_all_moods():
    data = callback_data(mood_keyboard())
    for mood in Mood:
        assert f"mood_set:{mood.value}" in data


def test_quick_prompts_keyboard_indexes():
    assert callback_data(quick_prompts_keyboard()) == [f"quick:{i}" for i in range(5)]


def test_main_menu_sections():
    data = callback_data(main_menu_keyboard())
    assert "menu:helplines" in data
    assert "mood_history" in data


def test_heatmap_oldest_first():
    history = [MoodEntry(DAYS[0], Mood.HAPPY), None, MoodEntry(DAYS[2], Mood.SAD)]
    expected = (
        get_mood_theme(Mood.SAD)["square"]
        + EMPTY_THEME["square"]
        + get_mood_theme(Mood.HAPPY)["square"]
    )
    assert mood_heatmap(history) == expected


def test_unknown_theme_is_empty():
    assert get_mood_theme("bogus") is EMPTY_THEME


def test_streak_emoji():
    assert streak_emoji(1) == "🔹"
    assert streak_emoji(7) == "🔥"
    assert streak_emoji(30) == "🏆"


def test_mood_history_message_lists_each_day():
    history = [MoodEntry(DAYS[0], Mood.CALM), None, None]
    text = mood_history_message(history, DAYS, streak=1)
    assert "last 3 days" in text
    assert "Calm" in text
    assert text.count(EMPTY_THEME["name"]) == 2
    assert "streak: <b>1</b>" in text


def test_mood_history_message_without_checkin():
    text = mood_history_message([None] * 3, DAYS, streak=0)
    assert "No check-in today yet" in text


def test_suggestion_message_kinds():
    assert "Breathing Exercise" in suggestion_message(suggest_for_mood(Mood.WORRIED))
    assert "Affirmation" in suggestion_message(suggest_for_mood(Mood.HAPPY))
    assert suggestion_message(None) == ""


def test_chat_reply_escapes_html():
    assert chat_reply_message("<b>hi</b>") == "&lt;b&gt;hi&lt;/b&gt;"


def test_journal_list_message():
    assert "empty" in journal_list_message([])
    entries = [JournalEntry(str(i), "2026-10-19", f"note <{i}>", i) for i in range(7)]
    text = journal_list_message(entries, limit=5)
    assert "7 entries" in text
    assert "note &lt;0&gt;" in text
    assert "2 older entries" in text


def test_helpline_messages():
    full = helplines_message(HELPLINES)
    for helpline in HELPLINES:
        assert helpline.number in full

    crisis = crisis_message(CRISIS_HELPLINES)
    assert "You're Not Alone" in crisis
    assert HELPLINES[0].number in crisis
    assert HELPLINES[2].number not in crisis
