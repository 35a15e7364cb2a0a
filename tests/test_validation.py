"""Tests for validation.validate."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from errors import OutOfRangeError
from schemas import EntryCreate, NormalizedEntry
from validation import validate


# ---- score bounds ----


@pytest.mark.parametrize("score", [0, 0.5, 2.5, 3.3, 5])
def test_accepts_scores_in_range(score):
    assert validate(EntryCreate(score=score)).score == score


@pytest.mark.parametrize("score", [-0.01, 5.01, -1, 7])
def test_rejects_scores_out_of_range(score):
    with pytest.raises(OutOfRangeError):
        validate(EntryCreate(score=score))


def test_rejects_nan():
    with pytest.raises(OutOfRangeError):
        validate(EntryCreate(score=math.nan))


def test_non_half_step_score_is_kept():
    assert validate(EntryCreate(score=1.37)).score == 1.37


# ---- normalization ----


def test_blank_notes_become_absent():
    assert validate(EntryCreate(score=1, notes="   \n")).notes is None


def test_notes_are_trimmed():
    assert validate(EntryCreate(score=1, notes="  after lunch ")).notes == "after lunch"


def test_lists_default_to_empty():
    result = validate(EntryCreate(score=1))
    assert result.potential_causes == []
    assert result.locations == []
    assert result.time_of_day is None


def test_free_form_labels_pass_through():
    result = validate(
        EntryCreate(
            score=2,
            potential_causes=["Stress", "Loud concert"],
            locations=["Behind left eye"],
            time_of_day="Midnight",
        )
    )
    assert result.potential_causes == ["Stress", "Loud concert"]
    assert result.locations == ["Behind left eye"]
    assert result.time_of_day == "Midnight"


def test_camel_case_input():
    entry = EntryCreate.model_validate({"score": 3, "potentialCauses": ["Caffeine"], "timeOfDay": "Noon"})
    result = validate(entry)
    assert result.potential_causes == ["Caffeine"]
    assert result.time_of_day == "Noon"


def test_idempotent():
    once = validate(EntryCreate(score=4, notes=" x ", locations=["Whole head"]))
    assert isinstance(once, NormalizedEntry)
    assert validate(once) == once


# ---- score type ----


@pytest.mark.parametrize("score", [True, "3", None])
def test_score_must_be_numeric(score):
    with pytest.raises(ValidationError):
        EntryCreate(score=score)
