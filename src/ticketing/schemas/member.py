"""Member request and response schemas.

Request models run inside FastAPI's body validation. Whatever they reject
surfaces as a RequestValidationError, which the exception handlers turn into
a COMMON-001 response listing one {field, message} pair per violation, in
field declaration order.
"""

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError


class MemberCreateRequest(BaseModel):
    """Body of POST /members. Both fields are required and must not be blank."""

    # Missing and null values become "" so they fail with the same
    # "<field> is required" message as blank ones.
    email: str = Field(default="", max_length=100, validate_default=True)
    name: str = Field(default="", max_length=30, validate_default=True)

    @field_validator("email", "name", mode="before")
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("email", "name")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "{field} is required", {"field": info.field_name})
        return value


class MemberUpdateRequest(BaseModel):
    """Body of PATCH /members/{id}. Omitted fields are left unchanged."""

    email: EmailStr | None = None
    name: str | None = Field(default=None, max_length=30)

    @field_validator("email")
    @classmethod
    def email_length(cls, value: str | None) -> str | None:
        if value is not None and len(value) > 100:
            raise PydanticCustomError(
                "string_too_long",
                "email must be at most {max_length} characters",
                {"max_length": 100},
            )
        return value

    def is_empty(self) -> bool:
        return self.email is None and self.name is None


class MemberResponse(BaseModel):
    """Member as returned to clients."""

    model_config = {"from_attributes": True}

    id: int
    email: str
    name: str
