# validation.py
from errors import OutOfRangeError
from schemas import EntryBase, NormalizedEntry

MIN_SCORE = 0
MAX_SCORE = 5


def validate(candidate: EntryBase) -> NormalizedEntry:
    """
    Check and normalize one observation before it reaches the store.

    - score must lie in [0, 5]; anything else (NaN included) raises OutOfRangeError
    - notes are trimmed; blank notes become None
    - potential_causes / locations default to []
    Same rules for create and update. Validating a NormalizedEntry returns an equal one.
    """
    score = candidate.score
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise OutOfRangeError(f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {score}")

    notes = (candidate.notes or "").strip() or None

    return NormalizedEntry(
        score=score,
        notes=notes,
        potential_causes=list(candidate.potential_causes or []),
        locations=list(candidate.locations or []),
        time_of_day=candidate.time_of_day,
    )
