"""
Error types raised by the domain services.

Each one is a FastAPI HTTPException carrying a human-readable message and a
machine-readable code, so a route can let them propagate unchanged.

Example:
    from common.utils import ConflictException

    raise ConflictException("Cannot opt in to a dismissed match", code="MATCH_DISMISSED")
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base class: subclasses set STATUS_CODE, DEFAULT_MESSAGE and DEFAULT_CODE.

    The response body is {"message", "code", "details"?}.
    """

    STATUS_CODE = 500
    DEFAULT_MESSAGE = "Internal error"
    DEFAULT_CODE = "INTERNAL_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        self.message = message or self.DEFAULT_MESSAGE
        self.code = code or self.DEFAULT_CODE
        self.details = details

        body: Dict[str, Any] = {"message": self.message, "code": self.code}
        if details is not None:
            body["details"] = details

        super().__init__(status_code=self.STATUS_CODE, detail=body)

    def __str__(self) -> str:
        return self.message


class ForbiddenException(APIException):
    """The caller is not a party to the resource."""
    STATUS_CODE = 403
    DEFAULT_MESSAGE = "Forbidden"
    DEFAULT_CODE = "FORBIDDEN"


class NotFoundException(APIException):
    STATUS_CODE = 404
    DEFAULT_MESSAGE = "Not found"
    DEFAULT_CODE = "NOT_FOUND"


class ConflictException(APIException):
    """The requested transition is not allowed from the current state."""
    STATUS_CODE = 409
    DEFAULT_MESSAGE = "Conflict"
    DEFAULT_CODE = "CONFLICT"


class PreconditionException(APIException):
    """An operation needs a completed assessment that does not exist."""
    STATUS_CODE = 409
    DEFAULT_MESSAGE = "Both parties must complete the assessment"
    DEFAULT_CODE = "ASSESSMENT_REQUIRED"


class ValidationException(APIException):
    """Input failed validation (answers, journal metrics, window size)."""
    STATUS_CODE = 422
    DEFAULT_MESSAGE = "Validation error"
    DEFAULT_CODE = "VALIDATION_ERROR"
