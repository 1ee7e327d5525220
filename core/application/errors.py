"""
Application errors.

Use cases translate domain and infrastructure failures into one of these
four kinds; the API layer maps each kind to an HTTP status.
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application-level failures."""

    code: str = "APP_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class ValidationError(AppError):
    """Input data violates a validation rule (HTTP 400)."""

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.field = field
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        data["details"] = self.details
        return data


class NotFoundError(AppError):
    """A requested resource does not exist (HTTP 404)."""

    code = "NOT_FOUND"

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["resource_type"] = self.resource_type
        data["resource_id"] = self.resource_id
        return data


class ConflictError(AppError):
    """
    Request conflicts with current state (HTTP 409).

    Examples: duplicate order id, business rule rejected by the aggregate.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["details"] = self.details
        return data


class InfraError(AppError):
    """A collaborator (repository, pricing, bus) failed (HTTP 503)."""

    code = "SERVICE_UNAVAILABLE"

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.service_name = service_name
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        # Never leak the underlying error to clients
        return {
            "code": self.code,
            "message": "Service temporarily unavailable. Please try again later.",
        }
