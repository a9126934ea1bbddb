"""Service-level tests: which DomainError each business rule raises."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.error_codes import ErrorCode
from ticketing.exceptions import DomainError, NotFoundError
from ticketing.models import Member
from ticketing.schemas.member import MemberCreateRequest, MemberUpdateRequest
from ticketing.services.member import (
    _save,
    create_member,
    delete_member,
    get_member,
    list_members,
    update_member,
)


@pytest.mark.asyncio
async def test_create_member_persists_and_returns_member(db: AsyncSession) -> None:
    member = await create_member(db, MemberCreateRequest(email="a@test.com", name="sp"))

    assert member.id is not None
    assert member.email == "a@test.com"
    assert member.name == "sp"
    assert member.created_at is not None


@pytest.mark.asyncio
async def test_create_member_with_taken_email_raises_duplicate(seeded_db: AsyncSession) -> None:
    with pytest.raises(DomainError) as exc_info:
        await create_member(seeded_db, MemberCreateRequest(email="bob@test.com", name="bob2"))

    assert exc_info.value.error_code is ErrorCode.MEMBER_DUPLICATE_EMAIL
    assert not exc_info.value.not_found


@pytest.mark.asyncio
async def test_get_missing_member_raises_not_found(db: AsyncSession) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await get_member(db, 999999)

    assert exc_info.value.error_code is ErrorCode.MEMBER_NOT_FOUND
    assert exc_info.value.not_found


@pytest.mark.asyncio
async def test_list_members_limits_and_orders(seeded_db: AsyncSession) -> None:
    members = await list_members(seeded_db, limit=2)

    assert [member.name for member in members] == ["carol", "bob"]


@pytest.mark.asyncio
async def test_update_member_with_empty_request_raises_invalid_request(
    seeded_db: AsyncSession,
) -> None:
    alice = (await list_members(seeded_db, limit=20))[-1]

    with pytest.raises(DomainError) as exc_info:
        await update_member(seeded_db, alice.id, MemberUpdateRequest())

    assert exc_info.value.error_code is ErrorCode.COMMON_INVALID_REQUEST


@pytest.mark.asyncio
async def test_update_missing_member_checks_existence_first(db: AsyncSession) -> None:
    with pytest.raises(NotFoundError):
        await update_member(db, 999999, MemberUpdateRequest())


@pytest.mark.asyncio
async def test_update_member_changes_fields(seeded_db: AsyncSession) -> None:
    alice = (await list_members(seeded_db, limit=20))[-1]

    updated = await update_member(
        seeded_db, alice.id, MemberUpdateRequest(email="alice@new.com", name="al")
    )

    assert updated.email == "alice@new.com"
    assert updated.name == "al"


@pytest.mark.asyncio
async def test_delete_member_removes_it(seeded_db: AsyncSession) -> None:
    alice = (await list_members(seeded_db, limit=20))[-1]

    await delete_member(seeded_db, alice.id)

    with pytest.raises(NotFoundError):
        await get_member(seeded_db, alice.id)


@pytest.mark.asyncio
async def test_unique_index_violation_raises_duplicate(seeded_db: AsyncSession) -> None:
    # Skips the lookup and lets the unique index on members.email reject the row.
    with pytest.raises(DomainError) as exc_info:
        await _save(seeded_db, Member(email="bob@test.com", name="bob2"))
    await seeded_db.rollback()

    assert exc_info.value.error_code is ErrorCode.MEMBER_DUPLICATE_EMAIL
    assert not exc_info.value.not_found
