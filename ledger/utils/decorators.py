from functools import wraps
from flask import current_app, jsonify

from ledger.errors import LedgerError
from ledger.extensions import db


def json_error(message, code=400):
    return jsonify({"success": False, "message": message}), code


def ledger_errors(fn):
    """Turns a rejected ledger operation into the JSON error envelope."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except LedgerError as e:
            db.session.rollback()
            current_app.logger.info(f"[api] {fn.__name__} -> {e.status_code}: {e.message}")
            return json_error(e.message, e.status_code)
    return wrapper
