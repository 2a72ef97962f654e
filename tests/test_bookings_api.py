from __future__ import annotations
import pytest

from app import create_app
from extensions import db
from models import Booking
from blueprints.bookings import services as svc
from blueprints.bookings.slots import all_slots

SIX, SEVEN = "6:00–7:00 AM", "7:00–8:00 AM"

@pytest.fixture()
def app_ctx():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture()
def client(app_ctx):
    return app_ctx.test_client()

def _book(client, **over):
    body = {"name": "Ravi", "court": "A", "date": "2024-01-01", "slots": [SIX, SEVEN]}
    body.update(over)
    return client.post("/api/bookings", json=body)

def test_empty_day_has_no_booked_slots(client):
    r = client.get("/api/bookings?date=2024-01-01&court=A")
    assert r.status_code == 200
    assert r.get_json() == []

    grid = client.get("/api/slots?date=2024-01-01&court=A").get_json()
    assert grid["available"] == list(all_slots())
    assert grid["booked"] == []
    assert all(s["status"] == "available" for s in grid["slots"])

def test_create_then_query(client):
    r = _book(client)
    assert r.status_code == 201
    assert r.get_json() == {"message": "Bookings created successfully"}

    r = client.get("/api/bookings?date=2024-01-01&court=A")
    assert r.get_json() == [SIX, SEVEN]

    grid = client.get("/api/slots?date=2024-01-01&court=A").get_json()
    assert len(grid["available"]) == 14
    assert SIX not in grid["available"] and SEVEN not in grid["available"]
    assert grid["price"] == 500

    # другой корт и другой день не затронуты
    assert client.get("/api/bookings?date=2024-01-01&court=B").get_json() == []
    assert client.get("/api/bookings?date=2024-01-02&court=A").get_json() == []

def test_rows_are_unverified_with_fixed_price(client, app_ctx):
    _book(client)
    rows = Booking.query.order_by(Booking.id).all()
    assert [b.slot_timings for b in rows] == [SIX, SEVEN]
    assert all(b.cost == 500 and b.verified is False and b.name == "Ravi" for b in rows)

@pytest.mark.parametrize("qs", ["", "?date=2024-01-01", "?court=A", "?date=&court=A", "?date=not-a-date&court=A",
                                "?date=1704067200&court=A", "?date=2024-01-01T00:00:00&court=A"])
def test_query_requires_date_and_court(client, qs):
    r = client.get(f"/api/bookings{qs}")
    assert r.status_code == 400
    assert r.get_json()["error"] == "invalid_input"

@pytest.mark.parametrize("over", [
    {"slots": []},
    {"slots": "6:00–7:00 AM"},
    {"name": ""},
    {"name": "   "},
    {"court": None},
    {"date": None},
    {"slots": ["6:00-7:00 AM"]},
    {"slots": [SIX, SIX]},
    {"court": "Z"},
    {"date": "1704067200"},
    {"date": 1704067200},
    {"date": "2024-01-01T00:00:00"},
])
def test_create_rejects_invalid_input(client, over):
    r = _book(client, **over)
    assert r.status_code == 400
    assert r.get_json()["error"] == "invalid_input"
    assert Booking.query.count() == 0

def test_create_rejects_missing_fields(client):
    r = client.post("/api/bookings", json={"name": "Ravi", "court": "A"})
    assert r.status_code == 400
    r = client.post("/api/bookings", data="not json", content_type="application/json")
    assert r.status_code == 400
    assert Booking.query.count() == 0

def test_booked_slot_conflict_writes_nothing(client):
    assert _book(client, slots=[SEVEN]).status_code == 201
    r = _book(client, name="Anita", slots=[SIX, SEVEN])
    assert r.status_code == 409
    js = r.get_json()
    assert js["error"] == "slot_already_booked"
    assert js["detail"]["slots"] == [SEVEN]
    assert Booking.query.count() == 1

def test_unique_constraint_race_rolls_back_whole_batch(client, monkeypatch):
    assert _book(client, slots=[SEVEN]).status_code == 201
    # имитируем гонку: предварительная проверка ничего не видит
    real = svc._taken_slots
    calls = []

    def blind_first_check(*a, **kw):
        calls.append(1)
        return [] if len(calls) == 1 else real(*a, **kw)

    monkeypatch.setattr(svc, "_taken_slots", blind_first_check)
    r = _book(client, name="Anita", slots=[SIX, SEVEN])
    assert r.status_code == 409
    assert r.get_json()["error"] == "slot_already_booked"
    assert r.get_json()["detail"]["slots"] == [SEVEN]
    rows = Booking.query.all()
    assert [(b.name, b.slot_timings) for b in rows] == [("Ravi", SEVEN)]

def test_price_comes_from_config(client, app_ctx):
    app_ctx.config["BOOKING_SLOT_PRICE"] = 750
    _book(client, slots=[SIX])
    assert Booking.query.one().cost == 750

def test_other_integrity_errors_are_not_reported_as_conflict(client, app_ctx):
    # NOT NULL на cost: это не занятый слот, а сбой записи
    app_ctx.config["BOOKING_SLOT_PRICE"] = None
    r = _book(client, slots=[SIX])
    assert r.status_code == 500
    assert r.get_json()["error"] == "internal_error"
    assert Booking.query.count() == 0
