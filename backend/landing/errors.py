from flask import current_app, jsonify
from landing.domain.exceptions import (
    InvalidColorFormat,
    InvariantViolation,
    SectionNotFound,
    TemplateNotFound,
    UnknownSectionType,
)

ERROR_STATUS = (
    (InvalidColorFormat, 400),
    (SectionNotFound, 404),
    (TemplateNotFound, 404),
    (UnknownSectionType, 422),
)


def _json_error(error, status):
    response = jsonify({
        "error": type(error).__name__,
        "message": str(error)
    })
    response.status_code = status
    return response


def register_error_handlers(app):
    for exc_class, status in ERROR_STATUS:
        app.register_error_handler(
            exc_class,
            lambda error, status=status: _json_error(error, status),
        )

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        current_app.logger.warning("Rejected configuration: %s", error)
        return _json_error(error, 400)
