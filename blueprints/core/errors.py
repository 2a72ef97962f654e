from __future__ import annotations


class BookingError(Exception):
    """Базовая ошибка сервиса; code и http уходят клиенту как есть."""
    code = "booking_error"
    http = 400

    def __init__(self, message: str, detail=None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidInput(BookingError):
    code = "invalid_input"
    http = 400


class BookingNotFound(BookingError):
    code = "not_found"
    http = 404


class SlotAlreadyBooked(BookingError):
    code = "slot_already_booked"
    http = 409


def _pydantic_errors_safe(ve) -> list[dict]:
    errs = ve.errors(include_url=False)
    for e in errs:
        if "ctx" in e and isinstance(e["ctx"], dict):
            e["ctx"] = {k: str(v) for k, v in e["ctx"].items()}
    return errs


def invalid_from_validation(ve, message: str = "Invalid input") -> InvalidInput:
    return InvalidInput(message, detail=_pydantic_errors_safe(ve))
