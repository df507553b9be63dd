from datetime import datetime, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
import random

import pytest
import pytz

from database.manager import DatabaseManager
from database.storage import MemoryStorage, WellnessStorage

KOLKATA = pytz.timezone("Asia/Kolkata")
NOW = KOLKATA.localize(datetime(2026, 10, 19, 10, 30))


class TickingClock:
    """Clock that moves forward by `step` on every call"""

    def __init__(self, start=NOW, step=timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self):
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fixed_clock():
    return lambda: NOW


@pytest.fixture
def ticking_clock():
    return TickingClock()


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest.fixture
def storage(backend):
    return WellnessStorage(backend)


@pytest.fixture
def db(tmp_path):
    return DatabaseManager(tmp_path / "data", tmp_path / "backups")


@pytest.fixture
def context(db, fixed_clock):
    return SimpleNamespace(
        bot_data={
            "db": db,
            "clock": fixed_clock,
            "rng": random.Random(7),
            "mood_limit": 30,
            "journal_limit": 50,
            "history_days": 7,
        },
        user_data={},
    )


def _user(user_id=42):
    user = MagicMock()
    user.id = user_id
    user.first_name = "Asha"
    return user


@pytest.fixture
def make_message_update():
    def factory(text="", user_id=42):
        update = MagicMock()
        update.callback_query = None
        update.effective_user = _user(user_id)
        message = MagicMock()
        message.text = text
        message.reply_text = AsyncMock()
        message.reply_html = AsyncMock()
        message.reply_document = AsyncMock()
        update.message = message
        update.effective_message = message
        return update
    return factory


@pytest.fixture
def make_callback_update():
    def factory(data, user_id=42):
        update = MagicMock()
        update.effective_user = _user(user_id)
        query = MagicMock()
        query.data = data
        query.answer = AsyncMock()
        query.edit_message_text = AsyncMock()
        query.edit_message_reply_markup = AsyncMock()
        query.message.reply_html = AsyncMock()
        query.message.reply_text = AsyncMock()
        update.callback_query = query
        update.message = None
        return update
    return factory
