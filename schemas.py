# schemas.py
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON keys are camelCase (createdAt, potentialCauses, ...)
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntryBase(CamelModel):
    score: Union[StrictInt, StrictFloat]  # no bools or numeric strings
    notes: str | None = None
    potential_causes: Optional[List[str]] = None
    locations: Optional[List[str]] = None
    time_of_day: str | None = None


class EntryCreate(EntryBase):
    pass


class EntryUpdate(EntryBase):
    pass


class NormalizedEntry(EntryBase):
    """Output of validation.validate: lists are always present."""

    potential_causes: List[str] = []
    locations: List[str] = []


class Entry(CamelModel):
    id: int
    score: float
    notes: str = ""
    potential_causes: List[str] = []
    locations: List[str] = []
    time_of_day: str | None = None
    created_at: int


class SeriesPoint(CamelModel):
    date: str
    score: float
    severity: str
    potential_causes: List[str] = []
    locations: List[str] = []
    time_of_day: str | None = None


class Summary(CamelModel):
    total_count: int
    average_score: float
    # None means "no data" for the past week, not zero
    week_high: float | None = None
    week_low: float | None = None
    series: List[SeriesPoint] = []


class PasswordCheck(BaseModel):
    password: str


class AuthResponse(BaseModel):
    authenticated: bool


class Options(CamelModel):
    potential_causes: List[str]
    locations: List[str]
    time_of_day: List[str]
