"""Shared FastAPI dependencies.

Type aliases that routers import. Kept out of main.py so routers can be
registered there without circular imports.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.config import Settings, settings
from ticketing.db.session import get_db


def get_settings() -> Settings:
    return settings


DB = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]
