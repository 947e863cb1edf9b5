from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..accounts.client import AccountsClient
from ..accounts.model import Profile, relative_picture, resolve_avatar
from ..common.datetime_utils import age_on, format_tenure, today_local, try_parse_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..session.model import Session
from ..session.store import SessionStore


@dataclass(frozen=True)
class ProfileView:
    profile: Profile
    avatar_url: str
    age: Optional[int]
    vintage: str


class ProfileService:
    """Use case: show and edit the signed-in user's own profile.

    Both paths rewrite the cached session so the shell greets the user with fresh values.
    """

    def __init__(self, accounts: AccountsClient, *, api_base: str = "", today: Callable[[], date] = today_local):
        self._accounts = accounts
        self._api_base = api_base
        self._today = today

    def load(self, session: Session, store: SessionStore) -> ProfileView:
        profile = self._accounts.get_profile(session.role, session.email)
        self._refresh_cache(session, profile, store)
        return self._view(profile)

    def update(
        self,
        session: Session,
        store: SessionStore,
        *,
        fullname: str,
        phone: str = "",
        department: str = "",
        date_of_birth: str = "",
        qualification: str = "",
        skills: str = "",
        profile_picture: str = "",
    ) -> ProfileView:
        fullname = require_non_empty(fullname, "Full name")
        date_of_birth = (date_of_birth or "").strip()
        if date_of_birth:
            dob = try_parse_iso_date(date_of_birth)
            if dob is None:
                raise ValidationError("Date of birth must be YYYY-MM-DD")
            if dob > self._today():
                raise ValidationError("Date of birth cannot be in the future")

        fields = {
            "fullname": fullname,
            "email": session.email,
            "phone": (phone or "").strip(),
            "department": (department or "").strip(),
            "date_of_birth": date_of_birth or None,
            "qualification": (qualification or "").strip(),
            "skills": (skills or "").strip(),
            "profile_picture": relative_picture(profile_picture or session.avatar_url, self._api_base),
        }
        profile = self._accounts.update_profile(session.role, session.email, fields)
        self._refresh_cache(session, profile, store)
        return self._view(profile)

    def _refresh_cache(self, session: Session, profile: Profile, store: SessionStore) -> None:
        avatar = resolve_avatar(profile.profile_picture, self._api_base) if profile.profile_picture else session.avatar_url
        store.write(
            session.with_profile(
                display_name=profile.fullname,
                avatar_url=avatar,
                phone=profile.phone,
                department=profile.department,
            )
        )

    def _view(self, profile: Profile) -> ProfileView:
        today = self._today()
        dob = try_parse_iso_date(profile.date_of_birth)
        joined = try_parse_iso_date(profile.date_joined)
        return ProfileView(
            profile=profile,
            avatar_url=resolve_avatar(profile.profile_picture, self._api_base),
            age=age_on(dob, today) if dob else None,
            vintage=format_tenure(joined, today) if joined else "",
        )
