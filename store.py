# store.py
"""Persistence adapter for headache entries."""
import logging
import math
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import models
from errors import NotFoundError, StoreError
from schemas import NormalizedEntry

logger = logging.getLogger(__name__)

# Content fields an update may change. created_at is deliberately absent.
PATCHABLE_FIELDS = ("score", "notes", "potential_causes", "locations", "time_of_day")


class EntryStoreContract(Protocol):
    """What the tracker needs from a store. Uniqueness per day is not enforced here."""

    def insert(self, entry: NormalizedEntry, created_at: int) -> int:
        ...

    def get(self, entry_id: int) -> models.HeadacheEntry:
        ...

    def patch(self, entry_id: int, fields: Dict[str, Any]) -> None:
        ...

    def delete(self, entry_id: int) -> None:
        ...

    def list_all(self) -> List[models.HeadacheEntry]:
        """Newest created_at first."""
        ...

    def find_first_in_range(self, start: int, end: float) -> Optional[models.HeadacheEntry]:
        ...


def to_columns(entry: NormalizedEntry) -> Dict[str, Any]:
    return {
        "score": entry.score,
        "notes": entry.notes or "",
        "potential_causes": list(entry.potential_causes),
        "locations": list(entry.locations),
        "time_of_day": entry.time_of_day,
    }


class EntryStore:
    """EntryStoreContract over a SQLAlchemy session. Every write commits on its own."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self):
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("store operation failed: %s", exc)
            raise StoreError(str(exc)) from exc

    def _require(self, entry_id: int) -> models.HeadacheEntry:
        row = self.db.get(models.HeadacheEntry, entry_id)
        if row is None:
            raise NotFoundError(f"Entry {entry_id} not found")
        return row

    def insert(self, entry: NormalizedEntry, created_at: int) -> int:
        with self._guard():
            row = models.HeadacheEntry(created_at=created_at, **to_columns(entry))
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            return row.id

    def get(self, entry_id: int) -> models.HeadacheEntry:
        with self._guard():
            return self._require(entry_id)

    def patch(self, entry_id: int, fields: Dict[str, Any]) -> None:
        unknown = set(fields) - set(PATCHABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields cannot be patched: {sorted(unknown)}")
        with self._guard():
            row = self._require(entry_id)
            for name, value in fields.items():
                setattr(row, name, value)
            self.db.commit()

    def delete(self, entry_id: int) -> None:
        with self._guard():
            row = self._require(entry_id)
            self.db.delete(row)
            self.db.commit()

    def list_all(self) -> List[models.HeadacheEntry]:
        with self._guard():
            return (
                self.db.query(models.HeadacheEntry)
                .order_by(desc(models.HeadacheEntry.created_at), desc(models.HeadacheEntry.id))
                .all()
            )

    def find_first_in_range(self, start: int, end: float) -> Optional[models.HeadacheEntry]:
        with self._guard():
            query = self.db.query(models.HeadacheEntry).filter(models.HeadacheEntry.created_at >= start)
            if not math.isinf(end):
                query = query.filter(models.HeadacheEntry.created_at < end)
            return query.order_by(asc(models.HeadacheEntry.created_at)).first()
