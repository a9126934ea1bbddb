"""Health check response schema."""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "ok"
