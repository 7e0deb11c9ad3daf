from flask import current_app, g, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from folio.domain.exceptions import AppError, StoreError
from folio.extensions import jwt

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    415: "UNSUPPORTED_MEDIA_TYPE",
}


def error_response(code, message, status_code, details=None):
    body = {"code": code, "message": message}
    if details is not None:
        body["details"] = details
    body["request_id"] = getattr(g, "request_id", None)

    response = jsonify({"error": body})
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        if error.is_user_error:
            current_app.logger.info("%s: %s", error.code, error.message)
            return error_response(error.code, error.message, error.status_code, error.details)

        # Server-side details never reach the client
        current_app.logger.error("%s: %s", error.code, error.message, exc_info=error)
        return error_response(error.code, error.default_message, error.status_code)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        current_app.logger.error("Store failure outside a transaction", exc_info=error)
        return error_response(StoreError.code, StoreError.default_message, StoreError.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        code = HTTP_ERROR_CODES.get(error.code, "HTTP_ERROR")
        return error_response(code, error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception("Unhandled error")
        return error_response("INTERNAL_ERROR", "An unexpected error occurred", 500)

    # -------------------------------------------------
    # Missing / bad tokens share the same envelope
    # -------------------------------------------------
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return error_response("UNAUTHENTICATED", "Authentication required", 401, {"reason": reason})

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return error_response("UNAUTHENTICATED", "Invalid access token", 401, {"reason": reason})

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return error_response("UNAUTHENTICATED", "Access token has expired", 401)
