from __future__ import annotations
from flask import jsonify, request
from pydantic import ValidationError

from blueprints.core.errors import InvalidInput, invalid_from_validation
from . import bp
from . import services as svc
from .schemas import BookingIn, SlotQuery


def _slot_query() -> SlotQuery:
    if not request.args.get("date") or not request.args.get("court"):
        raise InvalidInput("Date and court are required")
    try:
        return SlotQuery.model_validate({"date": request.args["date"], "court": request.args["court"]})
    except ValidationError as ve:
        raise invalid_from_validation(ve) from None


@bp.get("/bookings")
def api_booked_slots():
    q = _slot_query()
    return jsonify(svc.booked_slots(q.date, q.court))


@bp.get("/slots")
def api_slot_grid():
    q = _slot_query()
    return jsonify(svc.slot_grid(q.date, q.court))


@bp.post("/bookings")
def api_create_booking():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidInput("Invalid input")
    try:
        data = BookingIn.model_validate(payload)
    except ValidationError as ve:
        raise invalid_from_validation(ve) from None

    svc.create_booking(name=data.name, court=data.court, day=data.date, slots=data.slots)
    return jsonify({"message": "Bookings created successfully"}), 201
