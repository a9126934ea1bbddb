"""Member data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes a session and returns models or scalars.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models import Member


async def find_member(db: AsyncSession, member_id: int) -> Member | None:
    return await db.get(Member, member_id)


async def find_member_by_email(db: AsyncSession, email: str) -> Member | None:
    stmt = select(Member).where(Member.email == email)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_latest_members(db: AsyncSession, limit: int) -> list[Member]:
    """Return the most recently created members, highest id first."""
    stmt = select(Member).order_by(Member.id.desc()).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def save_member(db: AsyncSession, member: Member) -> Member:
    """Add and flush so constraint violations surface here, then load server defaults."""
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return member


async def delete_member(db: AsyncSession, member: Member) -> None:
    await db.delete(member)
    await db.flush()
