from __future__ import annotations
from datetime import date as date_type, datetime

from sqlalchemy import Boolean, Date, DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from extensions import db


class Booking(db.Model):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    court: Mapped[str] = mapped_column(String(10), nullable=False)
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    slot_timings: Mapped[str] = mapped_column(String(32), nullable=False)
    cost: Mapped[int] = mapped_column(Integer, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        # один корт + дата + слот = одна бронь
        UniqueConstraint("court", "date", "slot_timings", name="uq_bookings_court_date_slot"),
        Index("ix_bookings_date_court", "date", "court"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "court": self.court,
            "date": self.date.isoformat(),
            "slot_timings": self.slot_timings,
            "cost": self.cost,
            "verified": bool(self.verified),
        }

    def __repr__(self):
        return f"<Booking {self.id} {self.court} {self.date} {self.slot_timings}>"
