"""Member business logic.

Every anticipated failure is raised as a DomainError carrying its ErrorCode;
anything else is left to propagate to the catch-all handler.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.error_codes import ErrorCode
from ticketing.exceptions import DomainError, NotFoundError
from ticketing.models import Member
from ticketing.repositories import member as member_repository
from ticketing.schemas.member import MemberCreateRequest, MemberUpdateRequest


async def _ensure_email_available(db: AsyncSession, email: str, member_id: int | None) -> None:
    existing = await member_repository.find_member_by_email(db, email)
    if existing is not None and existing.id != member_id:
        raise DomainError(ErrorCode.MEMBER_DUPLICATE_EMAIL)


async def _save(db: AsyncSession, member: Member) -> Member:
    # The unique index on members.email is the final word when two requests race.
    try:
        return await member_repository.save_member(db, member)
    except IntegrityError as exc:
        raise DomainError(ErrorCode.MEMBER_DUPLICATE_EMAIL) from exc


async def create_member(db: AsyncSession, request: MemberCreateRequest) -> Member:
    await _ensure_email_available(db, request.email, member_id=None)
    return await _save(db, Member(email=request.email, name=request.name))


async def get_member(db: AsyncSession, member_id: int) -> Member:
    member = await member_repository.find_member(db, member_id)
    if member is None:
        raise NotFoundError(ErrorCode.MEMBER_NOT_FOUND)
    return member


async def list_members(db: AsyncSession, limit: int) -> list[Member]:
    return await member_repository.list_latest_members(db, limit)


async def update_member(db: AsyncSession, member_id: int, request: MemberUpdateRequest) -> Member:
    """Apply a partial update.

    Raises MEMBER_NOT_FOUND for an unknown id, COMMON_INVALID_REQUEST when
    the request changes nothing, and MEMBER_DUPLICATE_EMAIL when the new
    email belongs to another member.
    """
    member = await get_member(db, member_id)

    if request.is_empty():
        raise DomainError(ErrorCode.COMMON_INVALID_REQUEST)

    if request.email is not None:
        await _ensure_email_available(db, request.email, member_id=member.id)
        member.change_email(request.email)
    if request.name is not None:
        member.change_name(request.name)

    return await _save(db, member)


async def delete_member(db: AsyncSession, member_id: int) -> Member:
    member = await get_member(db, member_id)
    await member_repository.delete_member(db, member)
    return member
