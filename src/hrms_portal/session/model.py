from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Session:
    """The authenticated user's identity as cached in the browser session.

    `email` is the only stable key into the backend; display fields may be stale.
    """

    role: Role
    email: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: str = ""
    department: str = ""

    def to_record(self) -> dict:
        """Persisted layout: {name, email, role, phone, department, picture}."""
        return {
            "name": self.display_name or self.email,
            "email": self.email,
            "role": self.role.value,
            "phone": self.phone,
            "department": self.department,
            "picture": self.avatar_url or "",
        }

    @classmethod
    def from_record(cls, record: Any) -> "Session":
        """Rebuild a Session; raises ValueError when the record is unusable."""
        if not isinstance(record, dict):
            raise ValueError("session record is not an object")

        role = Role.parse(record.get("role"))
        if role is None:
            raise ValueError(f"unknown role {record.get('role')!r}")

        email = record.get("email")
        if not isinstance(email, str) or not email.strip():
            raise ValueError("session record has no email")

        def _opt(key: str) -> Optional[str]:
            value = record.get(key)
            if not isinstance(value, str):
                return None
            return value.strip() or None

        return cls(
            role=role,
            email=email.strip(),
            display_name=_opt("name"),
            avatar_url=_opt("picture"),
            phone=_opt("phone") or "",
            department=_opt("department") or "",
        )

    def with_profile(
        self,
        *,
        display_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        phone: str = "",
        department: str = "",
    ) -> "Session":
        """Copy with fresher display fields; blank values keep the cached ones."""
        return replace(
            self,
            display_name=display_name or self.display_name,
            avatar_url=avatar_url or self.avatar_url,
            phone=phone or self.phone,
            department=department or self.department,
        )
