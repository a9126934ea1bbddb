"""Domain exceptions raised by services and caught by the exception handlers.

Services raise these to signal business-rule violations. Each carries the
ErrorCode that the client will see; the handlers in main.py translate them
into the standard envelope:
{"success": false, "data": null, "error": {"code": "...", ...}, "timestamp": "..."}.
"""

from ticketing.error_codes import ErrorCode


class DomainError(Exception):
    """Base class for all classified domain exceptions."""

    not_found: bool = False

    def __init__(self, error_code: ErrorCode) -> None:
        self.error_code = error_code
        super().__init__(error_code.message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    not_found = True

    def __init__(self, error_code: ErrorCode = ErrorCode.COMMON_NOT_FOUND) -> None:
        super().__init__(error_code)
