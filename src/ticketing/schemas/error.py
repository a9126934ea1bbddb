"""Error payload schemas.

Every failed response embeds an ErrorResponse inside the ApiResponse
envelope (see schemas/response.py). The exception handlers in main.py
build these through ticketing.translator.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FieldErrorDetail(BaseModel):
    """One invalid input field and the validator's message for it."""

    model_config = {"frozen": True}

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Structured error body: catalog code and message plus request context."""

    model_config = {"frozen": True}

    code: str
    message: str
    path: str
    timestamp: datetime = Field(default_factory=datetime.now)
    details: list[FieldErrorDetail] | None = None

    @classmethod
    def of(
        cls,
        code: str,
        message: str,
        path: str,
        details: list[FieldErrorDetail] | None = None,
    ) -> "ErrorResponse":
        """Build a payload; ``details`` is only attached for validation failures."""
        return cls(code=code, message=message, path=path, details=details)
