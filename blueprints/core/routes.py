from __future__ import annotations
import json, logging
from datetime import datetime

from flask import g, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from werkzeug.wrappers.response import Response

from . import bp
from .errors import BookingError

log = logging.getLogger(__name__)

class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.utcnow().isoformat(timespec="milliseconds") + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("event", "path", "method", "status", "duration_ms",
                    "court", "date", "slots", "booking_id", "action"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _setup_structured_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    for logger in (app.logger, logging.getLogger("blueprints")):
        has_json = any(
            isinstance(h, logging.StreamHandler)
            and isinstance(getattr(h, "formatter", None), JSONFormatter)
            for h in logger.handlers
        )
        if not has_json:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)
        logger.setLevel(level)

def _json_err(code: str, http: int, message: str, detail=None):
    body = {"error": code, "message": message}
    if detail is not None:
        body["detail"] = detail
    return jsonify(body), http

@bp.before_app_request
def _start_timer():
    g._req_start = datetime.utcnow()

@bp.after_app_request
def _log_request(response: Response):
    try:
        duration_ms = int((datetime.utcnow() - g._req_start).total_seconds() * 1000)
    except AttributeError:
        duration_ms = None
    extra = {
        "event": "http_request",
        "path": request.path,
        "method": request.method,
        "status": response.status_code,
        "duration_ms": duration_ms,
    }
    log.info("request handled", extra=extra)
    return response

@bp.app_errorhandler(BookingError)
def _handle_booking_error(ex: BookingError):
    return _json_err(ex.code, ex.http, ex.message, ex.detail)

@bp.app_errorhandler(HTTPException)
def _handle_http_error(ex: HTTPException):
    code = "not_found" if ex.code == 404 else "http_error"
    return _json_err(code, ex.code or 500, ex.description or ex.name)

@bp.app_errorhandler(SQLAlchemyError)
def _handle_store_error(ex: SQLAlchemyError):
    log.exception("store failure on %s %s", request.method, request.path)
    return _json_err("internal_error", 500, "Internal server error")

@bp.app_errorhandler(Exception)
def _handle_unexpected(ex: Exception):
    log.exception("unhandled error on %s %s", request.method, request.path)
    return _json_err("internal_error", 500, "Internal server error")

@bp.record_once
def _on_register(state):
    _setup_structured_logging(state.app)

@bp.get("/health")
def health():
    return jsonify({
        "status": "ok",
        "ts": datetime.utcnow().isoformat(timespec="seconds") + "Z",
    })
