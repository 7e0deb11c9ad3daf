from typing import Any, Optional


class AppError(Exception):
    """
    Base class for every error the API translates into a response.

    ``code`` is the stable machine-readable identifier sent to clients,
    ``status_code`` the HTTP status it maps to.
    """

    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message or self.default_message)
        if code is not None:
            self.code = code
        self.message = message or self.default_message
        self.details = details

    @property
    def is_user_error(self) -> bool:
        return self.status_code < 500


class ValidationFailed(AppError):
    code = "VALIDATION_ERROR"
    status_code = 422
    default_message = "Invalid input data"


class InvalidJson(AppError):
    code = "INVALID_JSON"
    status_code = 400
    default_message = "Request body must be valid JSON"


class Unauthenticated(AppError):
    code = "UNAUTHENTICATED"
    status_code = 401
    default_message = "Authentication required"


class NotFound(AppError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Resource not found or access denied"

    @classmethod
    def portfolio(cls, portfolio_id: str) -> "NotFound":
        return cls(
            "Portfolio not found or access denied",
            code="PORTFOLIO_NOT_FOUND",
            details={"portfolio_id": portfolio_id},
        )

    @classmethod
    def section(cls, section_id: str) -> "NotFound":
        return cls(
            "Section not found or access denied",
            code="SECTION_NOT_FOUND",
            details={"section_id": section_id},
        )

    @classmethod
    def component(cls, component_id: str) -> "NotFound":
        return cls(
            "Component not found or access denied",
            code="COMPONENT_NOT_FOUND",
            details={"component_id": component_id},
        )


class LimitReached(AppError):
    code = "LIMIT_REACHED"
    status_code = 409
    default_message = "Capacity limit reached"


class CannotDeleteLastRequired(AppError):
    code = "CANNOT_DELETE_LAST_REQUIRED"
    status_code = 409
    default_message = "Cannot delete the last section of an unpublished portfolio"


class Conflict(AppError):
    code = "CONFLICT"
    status_code = 409
    default_message = "Conflict detected. Resource has been modified."


class UnmetRequirements(AppError):
    code = "UNMET_REQUIREMENTS"
    status_code = 409
    default_message = "Portfolio does not meet publication requirements"


class StoreError(AppError):
    code = "DATABASE_ERROR"
    status_code = 500
    default_message = "Database error occurred"


class InvariantViolation(AppError):
    code = "INVARIANT_VIOLATION"
    status_code = 500
    default_message = "Position invariant violated"
