# tracker.py
"""
Write and read paths for entries.

Validation runs before any store call, so a rejected entry never touches the
store. Store errors are not retried.
"""
import logging
from datetime import tzinfo
from typing import Optional

import models
from aggregation import aggregate
from errors import DuplicateForDayError
from schemas import EntryBase, Summary
from store import EntryStoreContract, to_columns
from validation import validate
from windows import DAY, window_for

logger = logging.getLogger(__name__)


def today_entry(store: EntryStoreContract, now_ms: int, tz: tzinfo | None = None) -> Optional[models.HeadacheEntry]:
    """The entry recorded during the local calendar day containing now_ms, if any."""
    start, end = window_for(now_ms, DAY, tz)
    return store.find_first_in_range(start, end)


def add_entry(store: EntryStoreContract, candidate: EntryBase, now_ms: int, tz: tzinfo | None = None) -> int:
    entry = validate(candidate)

    # check-then-insert; not atomic across concurrent requests
    existing = today_entry(store, now_ms, tz)
    if existing is not None:
        logger.warning("refusing second entry for today (existing id=%s)", existing.id)
        raise DuplicateForDayError(f"An entry already exists for today (id={existing.id}); update it instead")

    entry_id = store.insert(entry, created_at=now_ms)
    logger.info("created entry id=%s score=%s", entry_id, entry.score)
    return entry_id


# left untouched on update unless the request sends them
OPTIONAL_CONTENT_FIELDS = ("potential_causes", "locations", "time_of_day")


def update_entry(store: EntryStoreContract, entry_id: int, candidate: EntryBase) -> None:
    """Patch score and notes, plus whichever label fields the candidate explicitly set."""
    entry = validate(candidate)
    fields = to_columns(entry)
    for name in OPTIONAL_CONTENT_FIELDS:
        if name not in candidate.model_fields_set:
            del fields[name]
    store.patch(entry_id, fields)
    logger.info("updated entry id=%s score=%s fields=%s", entry_id, entry.score, sorted(fields))


def delete_entry(store: EntryStoreContract, entry_id: int) -> None:
    store.delete(entry_id)
    logger.info("deleted entry id=%s", entry_id)


def summarize(store: EntryStoreContract, now_ms: int, tz: tzinfo | None = None) -> Summary:
    return aggregate(store.list_all(), now_ms, tz)
