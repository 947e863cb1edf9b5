from __future__ import annotations

from ..core.enums import AccessOutcome, Role
from ..session.store import SessionStore
from .model import AccessDecision, ResolvedSession

SOURCE_STORAGE = "storage"
SOURCE_COOKIE = "cookie"


class AccessService:
    """Use case: decide whether the current visitor may see a role-scoped screen."""

    def read_session(self, store: SessionStore) -> ResolvedSession:
        """Storage first, then the role cookie. Unreadable storage counts as absent."""
        session = store.read()
        if session is not None:
            return ResolvedSession(role=session.role, session=session, source=SOURCE_STORAGE)

        role = store.role_from_cookie()
        if role is not None:
            return ResolvedSession(role=role, session=None, source=SOURCE_COOKIE)

        return ResolvedSession(role=None, session=None, source=None)

    def decide(self, required_role: Role, store: SessionStore) -> AccessDecision:
        resolved = self.read_session(store)

        if resolved.role is None:
            return AccessDecision(outcome=AccessOutcome.UNAUTHENTICATED, required_role=required_role)

        if resolved.role != required_role:
            return AccessDecision(
                outcome=AccessOutcome.FORBIDDEN,
                required_role=required_role,
                role=resolved.role,
                session=resolved.session,
            )

        return AccessDecision(
            outcome=AccessOutcome.AUTHORIZED,
            required_role=required_role,
            role=resolved.role,
            session=resolved.session,
        )
