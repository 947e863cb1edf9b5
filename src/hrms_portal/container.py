from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import MutableMapping, Optional

from .access.service import AccessService
from .accounts.client import AccountsClient
from .accounts.service import AuthService
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS, DEFAULT_ENRICHMENT_WORKERS, DEFAULT_ROLE_COOKIE_MAX_AGE
from .leaves.service import LeaveService
from .profile.enrichment import ProfileEnricher
from .profile.service import ProfileService
from .session.cookies import CookieMirror
from .session.store import SessionStore


@dataclass(frozen=True)
class Container:
    accounts: AccountsClient
    executor: Executor

    access_service: AccessService
    auth_service: AuthService
    profile_enricher: ProfileEnricher
    profile_service: ProfileService
    leave_service: LeaveService

    role_cookie_max_age: int = DEFAULT_ROLE_COOKIE_MAX_AGE

    def session_store(self, storage: MutableMapping, cookies: CookieMirror) -> SessionStore:
        return SessionStore(storage, cookies, cookie_max_age=self.role_cookie_max_age)


def build_container(
    *,
    api_base_url: str,
    api_timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
    enrichment_workers: int = DEFAULT_ENRICHMENT_WORKERS,
    role_cookie_max_age: int = DEFAULT_ROLE_COOKIE_MAX_AGE,
    accounts: Optional[AccountsClient] = None,
    executor: Optional[Executor] = None,
) -> Container:
    accounts = accounts or AccountsClient(api_base_url, timeout=api_timeout)
    executor = executor or ThreadPoolExecutor(
        max_workers=max(1, int(enrichment_workers)),
        thread_name_prefix="profile-enrichment",
    )

    return Container(
        accounts=accounts,
        executor=executor,
        access_service=AccessService(),
        auth_service=AuthService(accounts),
        profile_enricher=ProfileEnricher(accounts, executor, api_base=api_base_url),
        profile_service=ProfileService(accounts, api_base=api_base_url),
        leave_service=LeaveService(accounts),
        role_cookie_max_age=int(role_cookie_max_age),
    )
