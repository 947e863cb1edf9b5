from __future__ import annotations

from typing import Optional

from ..common.validators import require_email, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AccountsError, AuthenticationError, ValidationError
from ..session.model import Session
from .client import AccountsClient
from .model import LoginUser, resolve_avatar


class AuthService:
    """Use case: log in against the accounts backend and build the session to cache."""

    def __init__(self, accounts: AccountsClient):
        self._accounts = accounts

    def authenticate(self, *, role: str, email: str, password: str) -> Session:
        selected: Optional[Role] = Role.parse(role)
        if selected is None:
            raise ValidationError("Please select your role")
        email = require_email(email)
        require_non_empty(password, "Password")

        try:
            body = self._accounts.login(role=selected.value, email=email, password=password)
        except AccountsError as e:
            if e.status_code is None:
                raise AuthenticationError("Network error. Try again.") from e
            if e.detail:
                raise AuthenticationError(e.detail) from e
            if e.status_code < 400:
                raise AuthenticationError("Invalid server response. Try again.") from e
            raise AuthenticationError("Login failed. Check credentials.") from e

        user = LoginUser.from_payload(body)
        if user is None or user.role != selected.value:
            raise AuthenticationError("Role mismatch or check your credentials.")
        if not user.is_staff:
            raise AuthenticationError("Your account is waiting for admin approval.")

        return Session(
            role=selected,
            email=user.email,
            display_name=user.fullname or None,
            avatar_url=resolve_avatar(user.picture, self._accounts.base_url) if user.picture else None,
            phone=user.phone,
            department=user.department,
        )
