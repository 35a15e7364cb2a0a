# windows.py
"""
Time windows over epoch-millisecond timestamps.

"day" is the local calendar day containing an instant: [midnight, next midnight).
Both ends are rebuilt from year/month/day so DST days come out 23h or 25h long.

The rolling windows are plain durations back from "now" and stay open-ended:
[now - N days, inf).
"""
import math
import time
from datetime import datetime, timedelta, tzinfo

DAY_MS = 24 * 60 * 60 * 1000

DAY = "day"
PAST_7_DAYS = "past_7_days"
PAST_30_DAYS = "past_30_days"

ROLLING_DAYS = {
    PAST_7_DAYS: 7,
    PAST_30_DAYS: 30,
}


def now_millis() -> int:
    return int(time.time() * 1000)


def to_local(instant_ms: int, tz: tzinfo | None = None) -> datetime:
    # tz=None -> naive datetime in the process-local zone
    return datetime.fromtimestamp(instant_ms / 1000, tz)


def _midnight_ms(year: int, month: int, day: int, tz: tzinfo | None) -> int:
    return int(datetime(year, month, day, tzinfo=tz).timestamp() * 1000)


def day_window(instant_ms: int, tz: tzinfo | None = None) -> tuple[int, int]:
    local = to_local(instant_ms, tz)
    following = local.date() + timedelta(days=1)
    start = _midnight_ms(local.year, local.month, local.day, tz)
    end = _midnight_ms(following.year, following.month, following.day, tz)
    return start, end


def window_for(instant_ms: int, granularity: str, tz: tzinfo | None = None) -> tuple[int, float]:
    """Half-open [start, end) in epoch ms. Rolling windows end at math.inf."""
    if granularity == DAY:
        return day_window(instant_ms, tz)
    if granularity in ROLLING_DAYS:
        return instant_ms - ROLLING_DAYS[granularity] * DAY_MS, math.inf
    raise ValueError(f"Unknown window granularity: {granularity!r}")


def in_window(created_at: int, window: tuple[int, float]) -> bool:
    start, end = window
    return start <= created_at < end
