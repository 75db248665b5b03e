"""Users, roles and the result shapes returned by the auth adapter."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    ADMIN = "admin"
    AGENT = "agent"
    TENANT = "tenant"


DEFAULT_ROLE = Role.TENANT.value


class UserMetadata(BaseModel):
    """Metadata stored with the auth user. Unknown keys are preserved."""

    model_config = ConfigDict(extra="allow")

    role: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    company: Optional[str] = None
    agency: Optional[str] = None
    phone: Optional[str] = None


class User(BaseModel):
    id: str
    email: Optional[str] = None
    metadata: UserMetadata = Field(default_factory=UserMetadata)

    @property
    def role(self) -> str:
        return self.metadata.role or DEFAULT_ROLE

    @property
    def display_name(self) -> str:
        meta = self.metadata
        return meta.full_name or meta.name or self.email or self.id


def derive_role(user: Optional[User]) -> Optional[str]:
    if user is None:
        return None
    return user.role


def role_from_email(email: str) -> str:
    """Role guessed from the email address; mock sign-in only."""
    text = email or ""
    if "admin" in text:
        return Role.ADMIN.value
    if "agent" in text:
        return Role.AGENT.value
    return Role.TENANT.value


class AuthResult(BaseModel):
    user: Optional[User] = None
    error: Optional[str] = None
    mock_mode: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class SignOutResult(BaseModel):
    error: Optional[str] = None
    mock_mode: bool = False


class Profile(BaseModel):
    """Row of the ``profiles`` table, keyed by the auth user id."""

    id: str
    email: Optional[str] = None
    role: str = DEFAULT_ROLE
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
