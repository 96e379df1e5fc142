"""
================================================================================
User API Data Models
================================================================================

Typed views of the ReqRes user API payloads.

Response models (``User``, ``UserListResponse``) are immutable and are built
from JSON only after ``ResponseValidator`` has accepted it. Request models
render themselves into JSON-ready dictionaries.

See https://reqres.in/api-docs/ for the upstream contract.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class User:
    """
    A user object as returned by the API.

    Attributes:
        id: Unique numeric identifier
        email: Contact email address
        first_name: Given name
        last_name: Family name
        avatar: URL of the avatar image
    """
    id: int
    email: str
    first_name: str
    last_name: str
    avatar: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            avatar=data["avatar"],
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Support:
    """Support metadata attached to list responses."""
    url: str
    text: str


@dataclass(frozen=True)
class UserListResponse:
    """
    A paginated page of users.

    ``data`` keeps the order the server returned.
    """
    page: int
    per_page: int
    total: int
    total_pages: int
    data: Tuple[User, ...]
    support: Support

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserListResponse":
        return cls(
            page=data["page"],
            per_page=data["per_page"],
            total=data["total"],
            total_pages=data["total_pages"],
            data=tuple(User.from_dict(item) for item in data["data"]),
            support=Support(
                url=data["support"]["url"],
                text=data["support"]["text"],
            ),
        )

    @property
    def is_last_page(self) -> bool:
        return self.total_pages == 0 or self.page >= self.total_pages


# Alias matching the glossary name
PaginatedUserList = UserListResponse


@dataclass
class CreateUserRequest:
    """Payload for ``POST /api/users``."""
    name: str
    job: str

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class UpdateUserRequest:
    """
    Payload for ``PUT``/``PATCH /api/users/{id}``.

    Both fields are optional; unset fields are left out of the payload so a
    partial update only sends what changed.
    """
    name: Optional[str] = None
    job: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass
class LoginRequest:
    """Payload for ``POST /api/login``."""
    email: str
    password: str

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RegisterRequest:
    """Payload for ``POST /api/register``."""
    email: str
    password: str

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "User",
    "Support",
    "UserListResponse",
    "PaginatedUserList",
    "CreateUserRequest",
    "UpdateUserRequest",
    "LoginRequest",
    "RegisterRequest",
]
