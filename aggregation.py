# aggregation.py
"""
Summary statistics over the full entry history.

The whole list is re-scanned on every call. With one entry per day the history
stays at a few thousand rows over years, so no incremental state is kept.
"""
from datetime import tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from labels import severity_label
from schemas import SeriesPoint, Summary
from windows import PAST_7_DAYS, PAST_30_DAYS, in_window, to_local, window_for

MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def short_date(instant_ms: int, tz: tzinfo | None = None) -> str:
    """'Oct 19' style label, independent of the process locale."""
    local = to_local(instant_ms, tz)
    return f"{MONTH_ABBR[local.month - 1]} {local.day}"


def round_one(value: float) -> float:
    # half-up, like the dashboard's toFixed(1)
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def aggregate(entries: Iterable, now_ms: int, tz: tzinfo | None = None) -> Summary:
    """
    Reduce entries (anything with score / created_at / potential_causes /
    locations / time_of_day attributes) into a Summary.

    Scores are assumed already validated. Input order does not matter.
    """
    ordered = sorted(entries, key=lambda e: e.created_at, reverse=True)

    average = 0.0
    if ordered:
        average = round_one(sum(e.score for e in ordered) / len(ordered))

    week = window_for(now_ms, PAST_7_DAYS, tz)
    week_scores = [e.score for e in ordered if in_window(e.created_at, week)]

    month = window_for(now_ms, PAST_30_DAYS, tz)
    series = [
        SeriesPoint(
            date=short_date(e.created_at, tz),
            score=e.score,
            severity=severity_label(e.score),
            potential_causes=list(e.potential_causes or []),
            locations=list(e.locations or []),
            time_of_day=e.time_of_day or None,
        )
        for e in reversed(ordered)
        if in_window(e.created_at, month)
    ]

    return Summary(
        total_count=len(ordered),
        average_score=average,
        week_high=max(week_scores) if week_scores else None,
        week_low=min(week_scores) if week_scores else None,
        series=series,
    )
