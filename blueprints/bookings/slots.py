from __future__ import annotations
from typing import Iterable, List, Tuple

FIRST_HOUR = 6
LAST_HOUR = 21  # последний слот 21:00-22:00
SEPARATOR = "–"  # en dash, часть идентичности слота


def _clock12(hour: int) -> int:
    return hour % 12 or 12


def slot_label(hour: int) -> str:
    """Подпись часового слота: 6 -> '6:00–7:00 AM', 12 -> '12:00–1:00 PM'.

    AM/PM определяется по часу начала, поэтому 11 -> '11:00–12:00 AM'.
    """
    if not FIRST_HOUR <= hour <= LAST_HOUR:
        raise ValueError(f"hour must be in [{FIRST_HOUR}, {LAST_HOUR}], got {hour}")
    period = "AM" if hour < 12 else "PM"
    return f"{_clock12(hour)}:00{SEPARATOR}{_clock12(hour + 1)}:00 {period}"


ALL_SLOTS: Tuple[str, ...] = tuple(slot_label(h) for h in range(FIRST_HOUR, LAST_HOUR + 1))


def all_slots() -> Tuple[str, ...]:
    return ALL_SLOTS


def is_known_slot(label: str) -> bool:
    return label in ALL_SLOTS


def available_slots(booked: Iterable[str]) -> List[str]:
    taken = set(booked)
    return [s for s in ALL_SLOTS if s not in taken]
