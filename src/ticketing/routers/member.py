"""Member endpoints."""

from fastapi import APIRouter, Response, status

from ticketing.dependencies import DB, AppSettings
from ticketing.schemas.member import MemberCreateRequest, MemberResponse, MemberUpdateRequest
from ticketing.schemas.response import ApiResponse
from ticketing.services.member import (
    create_member,
    delete_member,
    get_member,
    list_members,
    update_member,
)

router = APIRouter(prefix="/members", tags=["members"])


@router.post(
    "",
    response_model=ApiResponse[MemberResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create(
    request: MemberCreateRequest, db: DB, response: Response
) -> ApiResponse[MemberResponse]:
    """Create a member and point Location at it."""
    member = await create_member(db, request)
    response.headers["Location"] = f"/members/{member.id}"
    return ApiResponse.ok(MemberResponse.model_validate(member))


@router.get("", response_model=ApiResponse[list[MemberResponse]], status_code=200)
async def list_(db: DB, settings: AppSettings) -> ApiResponse[list[MemberResponse]]:
    """Newest members first, capped at member_list_size."""
    members = await list_members(db, settings.member_list_size)
    return ApiResponse.ok([MemberResponse.model_validate(member) for member in members])


@router.get("/{member_id}", response_model=ApiResponse[MemberResponse], status_code=200)
async def get(member_id: int, db: DB) -> ApiResponse[MemberResponse]:
    member = await get_member(db, member_id)
    return ApiResponse.ok(MemberResponse.model_validate(member))


@router.patch("/{member_id}", response_model=ApiResponse[MemberResponse], status_code=200)
async def update(
    member_id: int, request: MemberUpdateRequest, db: DB
) -> ApiResponse[MemberResponse]:
    member = await update_member(db, member_id, request)
    return ApiResponse.ok(MemberResponse.model_validate(member))


@router.delete("/{member_id}", response_model=ApiResponse[MemberResponse], status_code=200)
async def delete(member_id: int, db: DB) -> ApiResponse[MemberResponse]:
    """Delete a member and return what was removed."""
    member = await delete_member(db, member_id)
    return ApiResponse.ok(MemberResponse.model_validate(member))
