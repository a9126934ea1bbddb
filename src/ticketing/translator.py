"""Failure-to-envelope translation.

Two steps, both pure:

- ``classify(exc)`` decides which kind of failure an intercepted exception
  is. Order matters and is by exception type, never by message text:
  request validation, then classified domain errors, then routing errors,
  then everything else.
- ``translate(failure, path)`` resolves the ErrorCode for that kind and
  returns the HTTP status together with the failed ApiResponse.

The exception handlers in main.py glue the two together and do the logging.
"""

from dataclasses import dataclass
from typing import Any, TypeAlias, assert_never

from fastapi import status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ticketing.error_codes import ErrorCode
from ticketing.exceptions import DomainError
from ticketing.schemas.error import ErrorResponse, FieldErrorDetail
from ticketing.schemas.response import ApiResponse

# Leading loc entries FastAPI uses to say where a value came from
_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


@dataclass(frozen=True, slots=True)
class FieldValidationFailure:
    violations: tuple[FieldErrorDetail, ...]


@dataclass(frozen=True, slots=True)
class MalformedBodyFailure:
    """The request body could not be parsed as JSON at all."""


@dataclass(frozen=True, slots=True)
class ClassifiedFailure:
    error_code: ErrorCode
    not_found: bool = False


@dataclass(frozen=True, slots=True)
class RouteNotFoundFailure:
    pass


@dataclass(frozen=True, slots=True)
class MethodNotAllowedFailure:
    pass


@dataclass(frozen=True, slots=True)
class UnexpectedFailure:
    """Catch-all. ``exc`` is kept for logging only, never for the payload."""

    exc: BaseException


Failure: TypeAlias = (
    FieldValidationFailure
    | MalformedBodyFailure
    | ClassifiedFailure
    | RouteNotFoundFailure
    | MethodNotAllowedFailure
    | UnexpectedFailure
)


def _field_name(loc: tuple[Any, ...] | list[Any]) -> str:
    """Turn a pydantic error location into a dotted field name.

    ("body", "email") -> "email", ("body", "address", "city") -> "address.city",
    ("body",) -> "body".
    """
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def field_violations(exc: RequestValidationError) -> tuple[FieldErrorDetail, ...]:
    """Field violations in the order the validator reported them."""
    return tuple(
        FieldErrorDetail(field=_field_name(error.get("loc", ())), message=error.get("msg", ""))
        for error in exc.errors()
    )


def classify(exc: BaseException) -> Failure:
    """Map an intercepted exception onto one of the failure kinds (first match wins)."""
    if isinstance(exc, RequestValidationError):
        if any(error.get("type") == "json_invalid" for error in exc.errors()):
            return MalformedBodyFailure()
        return FieldValidationFailure(violations=field_violations(exc))
    if isinstance(exc, DomainError):
        return ClassifiedFailure(error_code=exc.error_code, not_found=exc.not_found)
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return MethodNotAllowedFailure()
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return RouteNotFoundFailure()
    return UnexpectedFailure(exc=exc)


def resolve_error_code(failure: Failure) -> ErrorCode:
    """Pick the catalog entry for a failure kind."""
    match failure:
        case FieldValidationFailure():
            return ErrorCode.VALIDATION_FAILED
        case MalformedBodyFailure():
            return ErrorCode.INVALID_REQUEST_BODY
        case ClassifiedFailure(error_code=error_code):
            # not_found failures resolve the same way; the tag is kept so
            # they can diverge here without touching call sites.
            return error_code
        case RouteNotFoundFailure():
            return ErrorCode.COMMON_NOT_FOUND
        case MethodNotAllowedFailure():
            return ErrorCode.COMMON_METHOD_NOT_ALLOWED
        case UnexpectedFailure():
            return ErrorCode.COMMON_INTERNAL_ERROR
        case _:
            assert_never(failure)


def translate(failure: Failure, path: str) -> tuple[int, ApiResponse[None]]:
    """Build the (status, envelope) pair sent back for ``failure`` on ``path``."""
    error_code = resolve_error_code(failure)
    details = list(failure.violations) if isinstance(failure, FieldValidationFailure) else None
    payload = ErrorResponse.of(error_code.code, error_code.message, path, details)
    return error_code.status_code, ApiResponse[None].fail(payload)
