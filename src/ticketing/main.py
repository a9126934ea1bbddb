from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ticketing.db.session import shutdown
from ticketing.exceptions import DomainError
from ticketing.logging import get_logger
from ticketing.middleware import RequestIDMiddleware
from ticketing.routers import health, member
from ticketing.translator import (
    ClassifiedFailure,
    Failure,
    FieldValidationFailure,
    UnexpectedFailure,
    classify,
    translate,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Nothing to warm up on startup; close pooled connections on shutdown."""
    yield
    await shutdown()


app = FastAPI(title="ticketing", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(health.router)
app.include_router(member.router)


def _log_failure(failure: Failure, request: Request, status_code: int) -> None:
    path = request.url.path
    match failure:
        case UnexpectedFailure(exc=exc):
            # Full traceback goes to the log only; the client sees COMMON-500.
            logger.error(
                "unhandled_exception",
                path=path,
                method=request.method,
                status=status_code,
                exc_info=exc,
            )
        case ClassifiedFailure(error_code=error_code):
            logger.warning("domain_error", code=error_code.code, path=path, status=status_code)
        case FieldValidationFailure(violations=violations):
            logger.info(
                "validation_failed",
                path=path,
                fields=[violation.field for violation in violations],
            )
        case _:
            logger.info(
                "request_rejected", kind=type(failure).__name__, path=path, status=status_code
            )


@app.exception_handler(RequestValidationError)
@app.exception_handler(DomainError)
@app.exception_handler(StarletteHTTPException)
@app.exception_handler(Exception)
async def failure_handler(request: Request, exc: Exception) -> JSONResponse:
    """Single exit for every failure: classify, translate, log, respond.

    Registered for the four exception families FastAPI can hand us.
    Exception itself is served by Starlette's outermost middleware, so the
    catch-all still answers when something below the router breaks.
    """
    failure = classify(exc)
    status_code, envelope = translate(failure, request.url.path)
    _log_failure(failure, request, status_code)
    headers = exc.headers if isinstance(exc, StarletteHTTPException) else None
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json"),
        headers=headers,
    )
