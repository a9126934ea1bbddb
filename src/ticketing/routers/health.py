"""Liveness and database readiness probes."""

from fastapi import APIRouter
from sqlalchemy import text

from ticketing.dependencies import DB
from ticketing.schemas.health import HealthStatus
from ticketing.schemas.response import ApiResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=ApiResponse[HealthStatus])
async def health() -> ApiResponse[HealthStatus]:
    """Process is up. Does not touch the database."""
    return ApiResponse.ok(HealthStatus())


@router.get("/db", response_model=ApiResponse[HealthStatus])
async def health_db(db: DB) -> ApiResponse[HealthStatus]:
    """Database answers ``SELECT 1``.

    A failing ping propagates to the catch-all handler and comes back as a
    COMMON-500 envelope, which is what load balancers key on.
    """
    await db.execute(text("SELECT 1"))
    return ApiResponse.ok(HealthStatus())
