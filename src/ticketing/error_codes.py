"""Error catalog shared by every failure response.

Each member binds an HTTP status, a stable machine-readable code and a
default message. Clients branch on ``code``; several codes can share a
status (400 covers COMMON-001, COMMON-002 and COMMON-003).

The set is closed: adding an error means adding a member here.
"""

from enum import Enum, unique

from fastapi import status


@unique
class ErrorCode(Enum):
    """Closed catalog of error kinds, one entry per (status, code, message)."""

    VALIDATION_FAILED = (status.HTTP_400_BAD_REQUEST, "COMMON-001", "Validation failed")
    INVALID_REQUEST_BODY = (status.HTTP_400_BAD_REQUEST, "COMMON-002", "Invalid request body")
    COMMON_INVALID_REQUEST = (status.HTTP_400_BAD_REQUEST, "COMMON-003", "Invalid request")
    COMMON_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "COMMON-404", "Resource not found")
    COMMON_METHOD_NOT_ALLOWED = (
        status.HTTP_405_METHOD_NOT_ALLOWED,
        "COMMON-405",
        "Method not allowed",
    )
    COMMON_INTERNAL_ERROR = (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "COMMON-500",
        "Internal server error",
    )

    MEMBER_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "MEMBER-404", "Member not found")
    MEMBER_DUPLICATE_EMAIL = (status.HTTP_409_CONFLICT, "MEMBER-409", "Duplicate email")

    def __init__(self, status_code: int, code: str, message: str) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message


def lookup(name: str) -> ErrorCode:
    """Return the catalog entry registered under ``name``.

    An unknown name is a programming error and raises ``KeyError``.
    """
    return ErrorCode[name]
