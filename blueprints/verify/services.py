# blueprints/verify/services.py
from __future__ import annotations
import logging
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import case, delete, func, select, update

from blueprints.core.errors import BookingNotFound, InvalidInput
from extensions import store_session
from models import Booking
from .schemas import ACTIONS, STATUS_FILTERS

log = logging.getLogger(__name__)

MESSAGES = {
    "verify": "Booking verified successfully",
    "cancel": "Booking cancelled successfully",
}


def list_bookings(status: str = "all", today: Optional[date] = None) -> List[Dict]:
    """Все брони (все поля), упорядочены по дате и id; status сужает выборку."""
    if status not in STATUS_FILTERS:
        raise InvalidInput(f"Unknown status filter {status!r}", detail={"allowed": list(STATUS_FILTERS)})
    stmt = select(Booking).order_by(Booking.date, Booking.id)
    if status == "verified":
        stmt = stmt.where(Booking.verified.is_(True))
    elif status == "pending":
        stmt = stmt.where(Booking.verified.is_(False))
    elif status == "today":
        stmt = stmt.where(Booking.date == (today or date.today()))
    with store_session() as s:
        return [b.to_dict() for b in s.execute(stmt).scalars()]


def summary(today: Optional[date] = None) -> Dict[str, int]:
    today = today or date.today()
    with store_session() as s:
        total, verified, revenue = s.execute(select(
            func.count(Booking.id),
            func.coalesce(func.sum(case((Booking.verified.is_(True), 1), else_=0)), 0),
            func.coalesce(func.sum(Booking.cost), 0),
        )).one()
        today_count, today_revenue = s.execute(
            select(func.count(Booking.id), func.coalesce(func.sum(Booking.cost), 0))
            .where(Booking.date == today)
        ).one()
    return {
        "total": int(total),
        "verified": int(verified),
        "pending": int(total) - int(verified),
        "today": int(today_count),
        "today_revenue": int(today_revenue),
        "total_revenue": int(revenue),
    }


def apply_action(booking_id: int, action: str) -> str:
    """verify: pending -> verified (повтор безвреден); cancel: удаление строки.

    Ноль затронутых строк -> BookingNotFound.
    """
    if action not in ACTIONS:
        raise InvalidInput("Invalid action")
    if action == "verify":
        stmt = update(Booking).where(Booking.id == booking_id).values(verified=True)
    else:
        stmt = delete(Booking).where(Booking.id == booking_id)

    with store_session() as s:
        result = s.execute(stmt, execution_options={"synchronize_session": False})
        if result.rowcount == 0:
            raise BookingNotFound("Booking not found", detail={"id": booking_id})

    log.info("booking %s", action, extra={"event": f"booking_{action}", "booking_id": booking_id,
                                           "action": action})
    return MESSAGES[action]
