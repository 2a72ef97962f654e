from __future__ import annotations
import re
from datetime import date as date_type
from typing import List

from pydantic import BaseModel, Field, field_validator

from .slots import is_known_slot

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _iso_date_only(v):
    # без этого pydantic примет и unix-время, и datetime-строку
    if not isinstance(v, str) or not ISO_DATE_RE.fullmatch(v):
        raise ValueError("date must be YYYY-MM-DD")
    return v


class SlotQuery(BaseModel):
    date: date_type
    court: str = Field(min_length=1, max_length=10)

    check_iso_date = field_validator("date", mode="before")(_iso_date_only)


class BookingIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    court: str = Field(min_length=1, max_length=10)
    date: date_type
    slots: List[str] = Field(min_length=1)

    check_iso_date = field_validator("date", mode="before")(_iso_date_only)

    @field_validator("name", "court")
    @classmethod
    def _non_empty(cls, v: str):
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("slots")
    @classmethod
    def _known_unique(cls, v: List[str]):
        unknown = [s for s in v if not is_known_slot(s)]
        if unknown:
            raise ValueError(f"unknown slots: {', '.join(unknown)}")
        if len(set(v)) != len(v):
            raise ValueError("duplicate slots")
        return v
