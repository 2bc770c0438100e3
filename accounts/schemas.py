"""Request/response bodies for the HTTP layer."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from accounts.core.config import get_settings


class CredentialsIn(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        value = value.strip()
        local, _, domain = value.partition("@")
        if not local or "." not in domain:
            raise ValueError("invalid email address")
        return value


class SignUpIn(BaseModel):
    credentials: CredentialsIn
    username: str = Field(min_length=1, max_length=64)

    @field_validator("username")
    @classmethod
    def _username_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username must not be blank")
        return value

    @field_validator("credentials")
    @classmethod
    def _password_length(cls, value: CredentialsIn) -> CredentialsIn:
        minimum = get_settings().password_min_length
        if len(value.password) < minimum:
            raise ValueError(f"password must have at least {minimum} characters")
        return value


class SignInIn(BaseModel):
    credentials: CredentialsIn


class SignUpOut(BaseModel):
    email: str


class SignInOut(BaseModel):
    access_token: str


class SwitchProjectIn(BaseModel):
    project_id: str = Field(min_length=1)


class UserOut(BaseModel):
    id: str
    username: str
    email: str
    current_project_id: Optional[str] = None

    @classmethod
    def from_entity(cls, user) -> "UserOut":
        return cls(
            id=user.id,
            username=user.profile.username,
            email=user.profile.email,
            current_project_id=user.current_project_id,
        )


class ProjectOut(BaseModel):
    id: str
    name: str


class MembershipOut(BaseModel):
    is_member: bool
