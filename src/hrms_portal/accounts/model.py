from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.constants import DEFAULT_AVATAR
from ..core.exceptions import AccountsError

_PROFILE_FIELDS = (
    "fullname",
    "email",
    "profile_picture",
    "role",
    "phone",
    "department",
    "date_of_birth",
    "date_joined",
    "qualification",
    "skills",
)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class Profile:
    """Extended user profile as returned by GET /api/accounts/{role}s/{email}/.

    Missing or null fields become empty strings; role-specific extras are kept in `extra`.
    """

    email: str
    fullname: str = ""
    profile_picture: str = ""
    role: str = ""
    phone: str = ""
    department: str = ""
    date_of_birth: str = ""
    date_joined: str = ""
    qualification: str = ""
    skills: str = ""
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any, *, fallback_email: str = "") -> "Profile":
        if not isinstance(payload, dict):
            raise AccountsError("Malformed profile response")

        values = {name: _text(payload.get(name)) for name in _PROFILE_FIELDS}
        values["email"] = values["email"] or fallback_email
        extra = {k: v for k, v in payload.items() if k not in _PROFILE_FIELDS}
        return cls(extra=extra, **values)


@dataclass(frozen=True)
class LoginUser:
    email: str
    role: str
    is_staff: bool
    fullname: str = ""
    phone: str = ""
    department: str = ""
    picture: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["LoginUser"]:
        """Parse the `user` object of a login response; None when it is missing or unusable."""
        if not isinstance(payload, dict):
            return None
        user = payload.get("user")
        if not isinstance(user, dict):
            return None
        email = _text(user.get("email"))
        role = _text(user.get("role"))
        if not email or not role:
            return None
        return cls(
            email=email,
            role=role,
            is_staff=bool(user.get("is_staff")),
            fullname=_text(user.get("fullname")),
            phone=_text(user.get("phone")),
            department=_text(user.get("department")),
            picture=_text(user.get("picture") or user.get("profile_picture")),
        )


def resolve_avatar(picture: Optional[str], api_base: str) -> str:
    """Absolute URL for a profile picture path served by the backend."""
    picture = (picture or "").strip()
    if not picture:
        return DEFAULT_AVATAR
    if picture.startswith(("http://", "https://")):
        return picture
    if picture == DEFAULT_AVATAR:
        return picture
    base = (api_base or "").rstrip("/")
    if not base:
        return picture if picture.startswith("/") else f"/{picture}"
    return f"{base}/{picture.lstrip('/')}"


def relative_picture(picture: Optional[str], api_base: str) -> str:
    """Inverse of resolve_avatar for values sent back to the backend."""
    picture = (picture or "").strip()
    if not picture or picture == DEFAULT_AVATAR:
        return ""
    base = (api_base or "").rstrip("/")
    if base and picture.startswith(base + "/"):
        return picture[len(base) + 1:]
    if picture.startswith(("http://", "https://")):
        return picture
    return picture.lstrip("/")
