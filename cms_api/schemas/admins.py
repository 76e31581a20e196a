import logging
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cms_api.core.errors import BadRequest
from cms_api.models.admin import AdminRole

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED = "proper username and password is required"
PASSWORD_UPDATE_REQUIRED = "proper current and new password is required"


class Credentials(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    username: str = Field(..., min_length=1, max_length=128)
    password: str = Field(..., min_length=8, max_length=128)


class PasswordUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    current_password: str = Field(..., alias="currentPassword", min_length=8, max_length=128)
    new_password: str = Field(..., alias="newPassword", min_length=8, max_length=128)
    new_password_again: str = Field(..., alias="newPasswordAgain", min_length=8, max_length=128)


def parse_credentials(body: Any) -> Credentials:
    try:
        return Credentials.model_validate(body)
    except ValidationError as exc:
        logger.debug("Request body validation error: %s", exc.errors(include_input=False))
        raise BadRequest(CREDENTIALS_REQUIRED) from exc


def parse_password_update(body: Any) -> PasswordUpdate:
    try:
        return PasswordUpdate.model_validate(body)
    except ValidationError as exc:
        logger.debug("Request body validation error: %s", exc.errors(include_input=False))
        raise BadRequest(PASSWORD_UPDATE_REQUIRED) from exc


class AdminOut(BaseModel):
    id: str = Field(alias="_id")
    username: str
    role: AdminRole
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class TokenData(BaseModel):
    token: str


class TokenResponse(BaseModel):
    status: Literal["success"] = "success"
    data: TokenData


class EmptyResponse(BaseModel):
    status: Literal["success"] = "success"
    data: dict = Field(default_factory=dict)


class AdminData(BaseModel):
    admin: AdminOut


class AdminResponse(BaseModel):
    status: Literal["success"] = "success"
    data: AdminData


class AdminListData(BaseModel):
    admins: list[AdminOut]


class AdminListResponse(BaseModel):
    status: Literal["success"] = "success"
    data: AdminListData


class PasswordRotationData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    admin: AdminOut
    new_password: str | None = Field(default=None, alias="newPassword")
    temporary_password: str | None = Field(default=None, alias="temporaryPassword")


class PasswordRotationResponse(BaseModel):
    status: Literal["success"] = "success"
    data: PasswordRotationData
