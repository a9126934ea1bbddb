"""The envelope every endpoint returns.

ApiResponse[T] wraps both outcomes so clients always parse the same shape::

    {"success": true,  "data": {...}, "error": null,  "timestamp": "..."}
    {"success": false, "data": null,  "error": {...}, "timestamp": "..."}

Build it with ``ApiResponse.ok(data)`` or ``ApiResponse.fail(error)``.
Instances are frozen and the timestamp is stamped once, at construction.
"""

from datetime import datetime
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, Field, model_validator

from ticketing.schemas.error import ErrorResponse

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success/failure wrapper.

    Exactly one of ``data`` and ``error`` is set, and which one is decided by
    ``success``. Any other combination fails validation, so an inconsistent
    envelope cannot be constructed (directly or through ``response_model``
    re-validation in FastAPI).
    """

    model_config = {"frozen": True}

    success: bool
    data: T | None = None
    error: ErrorResponse | None = None
    timestamp: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_outcome(self) -> Self:
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("a successful response carries data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("a failed response carries an error and no data")
        return self

    @classmethod
    def ok(cls, data: T) -> Self:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ErrorResponse) -> Self:
        return cls(success=False, error=error)
