from datetime import date, datetime, timedelta
from typing import Callable, List

import pytz

DEFAULT_TZ_NAME = "Asia/Kolkata"

Clock = Callable[[], datetime]


def get_timezone(name: str = DEFAULT_TZ_NAME):
    return pytz.timezone(name)


def make_clock(tz_name: str = DEFAULT_TZ_NAME) -> Clock:
    tz = get_timezone(tz_name)

    def now() -> datetime:
        return datetime.now(tz)

    return now


def epoch_millis(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def last_n_days(today: date, days: int) -> List[str]:
    """ISO dates from today backwards, today first"""
    return [(today - timedelta(days=i)).isoformat() for i in range(days)]
