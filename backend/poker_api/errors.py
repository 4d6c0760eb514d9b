from flask import jsonify
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES


class ContractViolationError(RuntimeError):
    """A lookup by unique id produced more than one entity."""


class UnknownReferenceError(ValueError):
    """A round, status or card label did not match any reference row."""


def error_builder(status, detail=None):
    """Build a JSON:API error document and return it with *status*."""
    error = {
        'status': str(status),
        'title': HTTP_STATUS_CODES.get(status, 'Unknown Error'),
    }
    if detail:
        error['detail'] = detail
    return jsonify({'errors': [error]}), status


def register_error_handlers(flask_app):
    @flask_app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return error_builder(exc.code, exc.description)

    @flask_app.errorhandler(UnknownReferenceError)
    def handle_unknown_reference(exc):
        return error_builder(400, str(exc))

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        flask_app.logger.exception(f"[error] unhandled {type(exc).__name__}: {exc}")
        return error_builder(500, 'An unexpected error occurred.')
