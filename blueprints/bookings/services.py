# blueprints/bookings/services.py
from __future__ import annotations
import logging
from datetime import date
from typing import Dict, List, Sequence, Set

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blueprints.core.errors import InvalidInput, SlotAlreadyBooked
from extensions import store_session
from models import Booking
from .slots import all_slots, available_slots

log = logging.getLogger(__name__)


def _taken_slots(session: Session, day: date, court: str) -> List[str]:
    stmt = (select(Booking.slot_timings)
            .where(Booking.date == day, Booking.court == court)
            .order_by(Booking.id))
    return list(session.execute(stmt).scalars())


def _check_court(court: str) -> None:
    courts = current_app.config.get("BOOKING_COURTS") or ()
    if courts and court not in courts:
        raise InvalidInput(f"Unknown court {court!r}", detail={"allowed": list(courts)})


def booked_slots(day: date, court: str) -> List[str]:
    """Подписи занятых слотов для (дата, корт) в порядке вставки."""
    with store_session() as s:
        return _taken_slots(s, day, court)


def slot_grid(day: date, court: str) -> Dict:
    booked = booked_slots(day, court)
    taken: Set[str] = set(booked)
    return {
        "date": day.isoformat(),
        "court": court,
        "price": current_app.config["BOOKING_SLOT_PRICE"],
        "slots": [{"label": s, "status": "booked" if s in taken else "available"}
                  for s in all_slots()],
        "available": available_slots(booked),
        "booked": booked,
    }


def create_booking(*, name: str, court: str, day: date, slots: Sequence[str]) -> int:
    """Создать по строке на каждый слот одной транзакцией.

    Либо записываются все слоты, либо ни одного. Занятый слот -> SlotAlreadyBooked,
    в том числе когда гонку ловит уникальный индекс при commit.
    """
    _check_court(court)
    price = current_app.config["BOOKING_SLOT_PRICE"]
    try:
        with store_session() as s:
            taken = set(_taken_slots(s, day, court))
            clash = [slot for slot in slots if slot in taken]
            if clash:
                raise SlotAlreadyBooked("Slot already booked", detail={"slots": clash})
            s.add_all([
                Booking(name=name, court=court, date=day, slot_timings=slot,
                        cost=price, verified=False)
                for slot in slots
            ])
    except IntegrityError as ex:
        # 409 только если строку действительно занял кто-то другой, иначе это сбой хранилища
        with store_session() as s:
            taken = set(_taken_slots(s, day, court))
        clash = [slot for slot in slots if slot in taken]
        if not clash:
            raise
        log.warning("slot race lost on commit", extra={"event": "booking_conflict",
                                                       "court": court, "date": day.isoformat()})
        raise SlotAlreadyBooked("Slot already booked", detail={"slots": clash}) from ex

    log.info("bookings created", extra={"event": "booking_created", "court": court,
                                        "date": day.isoformat(), "slots": list(slots)})
    return len(slots)
