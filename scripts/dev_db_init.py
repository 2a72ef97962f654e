# scripts/dev_db_init.py
from datetime import date, timedelta

from app import create_app
from extensions import db
from models import Booking
from blueprints.bookings.slots import all_slots

DEMO = [
    # (имя, корт, смещение дня, индексы слотов, подтверждена)
    ("Ravi", "A", 0, (0, 1), True),
    ("Anita", "B", 0, (4,), False),
    ("Karan", "A", 1, (10, 11, 12), False),
]

def seed_minimal(price: int):
    slots = all_slots()
    today = date.today()
    for name, court, offset, idxs, verified in DEMO:
        day = today + timedelta(days=offset)
        for i in idxs:
            exists = Booking.query.filter_by(court=court, date=day, slot_timings=slots[i]).first()
            if exists:
                continue
            db.session.add(Booking(name=name, court=court, date=day, slot_timings=slots[i],
                                   cost=price, verified=verified))
    db.session.commit()

if __name__ == "__main__":
    app = create_app("dev")
    with app.app_context():
        db.create_all()
        seed_minimal(app.config["BOOKING_SLOT_PRICE"])
        print("DB initialized and seeded ✅")
