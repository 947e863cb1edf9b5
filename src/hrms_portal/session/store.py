from __future__ import annotations

import json
import logging
from typing import MutableMapping, Optional

from ..core.constants import DEFAULT_ROLE_COOKIE_MAX_AGE, ROLE_COOKIE_NAME, SESSION_STORAGE_KEY
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .cookies import CookieMirror
from .model import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """Synchronous storage of the logged-in identity.

    `storage` is the session mapping (flask.session in the app, a dict in tests);
    `cookies` carries the `role` mirror used as a fallback by the access check.
    """

    def __init__(
        self,
        storage: MutableMapping,
        cookies: CookieMirror,
        *,
        key: str = SESSION_STORAGE_KEY,
        role_cookie: str = ROLE_COOKIE_NAME,
        cookie_max_age: int = DEFAULT_ROLE_COOKIE_MAX_AGE,
    ):
        self._storage = storage
        self._cookies = cookies
        self._key = key
        self._role_cookie = role_cookie
        self._cookie_max_age = cookie_max_age

    def write(self, session: Session) -> None:
        if not isinstance(session.role, Role):
            raise ValidationError("Session role is required")
        if not isinstance(session.email, str) or not session.email.strip():
            raise ValidationError("Session email is required")

        self._storage[self._key] = json.dumps(session.to_record())
        self._cookies.set(self._role_cookie, session.role.value, max_age=self._cookie_max_age)

    def read(self) -> Optional[Session]:
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        try:
            record = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
            return Session.from_record(record)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too; corrupt storage reads as absent
            logger.warning("Ignoring unreadable session record: %s", e)
            return None

    def role_from_cookie(self) -> Optional[Role]:
        return Role.parse(self._cookies.get(self._role_cookie))

    def clear(self) -> None:
        self._storage.clear()
        self._cookies.delete(self._role_cookie)
