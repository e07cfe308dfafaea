"""
Utilities module - Common exceptions shared by the domain services.
"""

from common.utils.exceptions import (
    APIException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    PreconditionException,
    ValidationException,
)

__all__ = [
    "APIException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "PreconditionException",
    "ValidationException",
]
