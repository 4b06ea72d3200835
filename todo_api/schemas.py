from datetime import UTC, datetime
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    computed_field,
    field_validator,
)
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class APIModel(BaseModel):
    """Base for wire models: camelCase in JSON, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Credentials are only type-checked here; the username/password policy is
# applied by the user service so that every violation is reported together.
class UserRegister(BaseModel):
    username: str = Field(..., description="Username for the new account")
    password: str = Field(..., description="Password for the new account")


class UserLogin(BaseModel):
    username: str = Field(..., description="Username for login")
    password: str = Field(..., description="Password for login")


class UserInfo(APIModel):
    id: int = Field(..., description="User unique identifier")
    username: str = Field(..., description="Username")
    created_at: UTCDateTime = Field(..., description="Account creation timestamp")
    updated_at: UTCDateTime = Field(..., description="Last account update timestamp")


class AuthResponse(BaseModel):
    user: UserInfo
    token: str = Field(..., description="JWT bearer token, valid for one hour")


class MessageResponse(BaseModel):
    message: str = Field(..., description="Response message")


def _clean_title(value: str | None) -> str | None:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Title must not be empty")
    return value


class TodoCreate(BaseModel):
    title: str = Field(..., description="What needs to be done")
    completed: StrictBool = Field(default=False, description="Whether the todo is done")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _clean_title(value)


class TodoUpdate(BaseModel):
    title: str | None = Field(default=None, description="New title")
    completed: StrictBool | None = Field(default=None, description="New completion state")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str | None) -> str | None:
        return _clean_title(value)


class TodoResponse(APIModel):
    id: int
    description: str
    completed: bool
    due_date: UTCDateTime | None = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    @computed_field
    @property
    def title(self) -> str:
        return self.description
