from __future__ import annotations
from flask import jsonify, request
from pydantic import ValidationError

from blueprints.core.errors import InvalidInput, invalid_from_validation
from . import bp
from . import services as svc
from .schemas import ActionIn


@bp.get("/verify")
def api_bookings_list():
    status = request.args.get("status", "all")
    return jsonify(svc.list_bookings(status))


@bp.get("/verify/summary")
def api_bookings_summary():
    return jsonify(svc.summary())


@bp.post("/verify")
def api_booking_action():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or not payload.get("id") or not payload.get("action"):
        raise InvalidInput("Booking ID and action are required")
    try:
        data = ActionIn.model_validate(payload)
    except ValidationError as ve:
        if any(e["loc"] == ("action",) for e in ve.errors()):
            raise InvalidInput("Invalid action") from None
        raise invalid_from_validation(ve) from None

    message = svc.apply_action(data.id, data.action)
    return jsonify({"message": message})
