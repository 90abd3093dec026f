from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: machine-readable error code
        http_status: HTTP status code the exception handlers respond with
    """

    http_status = 500
    default_message = "Internal server error"
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class NotFoundError(ServiceError):
    """Raised when a requested dish or comment was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(ServiceError):
    """Raised when a resource conflict occurs (e.g., duplicate dish name)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class UnauthorizedError(ServiceError):
    """Raised when the request carries no valid identity."""

    http_status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class ForbiddenError(ServiceError):
    """Raised when an authenticated user may not perform the operation."""

    http_status = 403
    default_message = "Forbidden"
    default_code = "FORBIDDEN"


class MethodNotSupportedError(ServiceError):
    """Raised for verbs a route deliberately rejects.

    Rendered as a plain-text 403 body, e.g. ``PUT operation not supported on /dishes``.
    """

    http_status = 403
    default_code = "METHOD_NOT_SUPPORTED"

    def __init__(self, method: str, path: str):
        super().__init__(f"{method} operation not supported on {path}")
        self.method = method
        self.path = path


def dish_not_found(dish_id: str) -> NotFoundError:
    return NotFoundError(f"Dish {dish_id} not found", details={"dish_id": dish_id})


def comment_not_found(comment_id: str) -> NotFoundError:
    return NotFoundError(
        f"Comment {comment_id} not found", details={"comment_id": comment_id}
    )
