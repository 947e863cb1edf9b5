from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import LOGIN_PATH, UNAUTHORIZED_PATH
from ..core.enums import AccessOutcome, Role
from ..session.model import Session


@dataclass(frozen=True)
class ResolvedSession:
    """Role resolved from storage (with the full session) or from the cookie mirror (role only)."""

    role: Optional[Role]
    session: Optional[Session]
    source: Optional[str]


@dataclass(frozen=True)
class AccessDecision:
    outcome: AccessOutcome
    required_role: Role
    role: Optional[Role] = None
    session: Optional[Session] = None

    @property
    def authorized(self) -> bool:
        return self.outcome is AccessOutcome.AUTHORIZED

    @property
    def redirect_to(self) -> Optional[str]:
        if self.outcome is AccessOutcome.UNAUTHENTICATED:
            return LOGIN_PATH
        if self.outcome is AccessOutcome.FORBIDDEN:
            return UNAUTHORIZED_PATH
        return None
