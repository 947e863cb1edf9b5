"""Best-effort refresh of the shell's display name and avatar.

One fetch per guarded page view, run on a worker thread so it never holds up the
access decision or the page's own work. Results are only applied while the
request that started them is still alive; teardown cancels the token.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import CancelledError, Executor, Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Optional

import requests

from ..accounts.client import AccountsClient
from ..accounts.model import Profile, resolve_avatar
from ..access.model import AccessDecision
from ..core.enums import Role
from ..core.exceptions import AccountsError

logger = logging.getLogger(__name__)


class CancelToken:
    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class ShellView:
    """What the layout renders in the header and sidebar."""

    role: Role
    email: str
    display_name: str
    avatar_url: str
    enriched: bool = False


class ShellDisplay:
    """Display state shared between the request thread and the enrichment worker."""

    def __init__(self, *, role: Role, email: str, display_name: str, avatar_url: str, api_base: str = ""):
        self._lock = threading.Lock()
        self._role = role
        self._email = email
        self._display_name = display_name
        self._avatar_url = avatar_url
        self._api_base = api_base
        self._enriched = False

    @classmethod
    def from_decision(cls, decision: AccessDecision, *, api_base: str = "") -> "ShellDisplay":
        role = decision.role or decision.required_role
        session = decision.session
        if session is None:
            return cls(role=role, email="", display_name=role.label, avatar_url=resolve_avatar(None, api_base), api_base=api_base)
        return cls(
            role=role,
            email=session.email,
            display_name=session.display_name or session.email,
            avatar_url=resolve_avatar(session.avatar_url, api_base),
            api_base=api_base,
        )

    def merge(self, profile: Profile, token: CancelToken) -> bool:
        """Apply fetched fields unless the owning request is gone. Returns True when applied."""
        with self._lock:
            if token.cancelled:
                return False
            if profile.fullname:
                self._display_name = profile.fullname
            if profile.profile_picture:
                self._avatar_url = resolve_avatar(profile.profile_picture, self._api_base)
            self._enriched = True
            return True

    def snapshot(self) -> ShellView:
        with self._lock:
            return ShellView(
                role=self._role,
                email=self._email,
                display_name=self._display_name,
                avatar_url=self._avatar_url,
                enriched=self._enriched,
            )


class EnrichmentHandle:
    def __init__(self, display: ShellDisplay, token: CancelToken, future: Optional[Future] = None):
        self.display = display
        self.token = token
        self._future = future

    @property
    def started(self) -> bool:
        return self._future is not None

    def snapshot(self, *, wait: float = 0.0) -> ShellView:
        """Current display values, waiting at most `wait` seconds for a pending fetch."""
        if self._future is not None and wait > 0 and not self._future.done():
            try:
                self._future.result(timeout=wait)
            except (FutureTimeoutError, CancelledError):
                pass
        return self.display.snapshot()

    def cancel(self) -> None:
        self.token.cancel()
        if self._future is not None:
            self._future.cancel()


class ProfileEnricher:
    def __init__(self, accounts: AccountsClient, executor: Executor, *, api_base: str = ""):
        self._accounts = accounts
        self._executor = executor
        self._api_base = api_base

    def start(self, decision: AccessDecision) -> EnrichmentHandle:
        display = ShellDisplay.from_decision(decision, api_base=self._api_base)
        token = CancelToken()

        session = decision.session
        # cookie-only sessions have no email to look up
        if not decision.authorized or session is None:
            return EnrichmentHandle(display, token)

        future = self._executor.submit(self._run, session.role, session.email, display, token)
        return EnrichmentHandle(display, token, future)

    def _run(self, role: Role, email: str, display: ShellDisplay, token: CancelToken) -> bool:
        if token.cancelled:
            return False
        try:
            profile = self._accounts.get_profile(role, email)
        except (AccountsError, requests.RequestException, ValueError) as e:
            logger.debug("Profile enrichment failed for %s/%s: %s", role.value, email, e)
            return False
        return display.merge(profile, token)
