from __future__ import annotations

import threading
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.enums import Role
from ..core.exceptions import AccountsError
from .model import Profile


class AccountsClient:
    """HTTP client for the accounts backend (`{base}/api/accounts/...`).

    Every failure (network, non-2xx, non-JSON body) is raised as AccountsError.
    Without an injected `http`, each thread uses its own requests.Session.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        http: Optional[requests.Session] = None,
    ):
        self._base = (base_url or "").rstrip("/")
        self._timeout = timeout
        self._http = http
        self._local = threading.local()

    @property
    def base_url(self) -> str:
        return self._base

    def _session(self) -> requests.Session:
        if self._http is not None:
            return self._http
        http = getattr(self._local, "http", None)
        if http is None:
            http = self._local.http = requests.Session()
        return http

    def _url(self, path: str) -> str:
        return f"{self._base}/api/accounts/{path.lstrip('/')}"

    @staticmethod
    def profile_path(role: Role, email: str) -> str:
        return f"{role.value}s/{quote(email, safe='@')}/"

    def _request(self, method: str, path: str, *, json: Any = None, params: Optional[dict] = None) -> Any:
        try:
            resp = self._session().request(
                method,
                self._url(path),
                json=json,
                params=params,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            raise AccountsError(f"Network error: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not resp.ok:
            detail = None
            if isinstance(body, dict):
                detail = body.get("detail") or body.get("error") or body.get("message")
            raise AccountsError(
                str(detail or f"Accounts API error: {resp.status_code}"),
                status_code=resp.status_code,
                detail=str(detail) if detail else None,
            )

        if body is None:
            raise AccountsError("Invalid server response", status_code=resp.status_code)
        return body

    def login(self, *, role: str, email: str, password: str) -> Any:
        return self._request("POST", "login/", json={"role": role, "email": email, "password": password})

    def get_profile(self, role: Role, email: str) -> Profile:
        body = self._request("GET", self.profile_path(role, email))
        return Profile.from_payload(body, fallback_email=email)

    def update_profile(self, role: Role, email: str, fields: dict) -> Profile:
        body = self._request("PUT", self.profile_path(role, email), json=fields)
        if isinstance(body, dict) and isinstance(body.get("user"), dict):
            body = body["user"]
        return Profile.from_payload(body, fallback_email=email)

    def list_leaves(self, *, email: Optional[str] = None) -> list[dict]:
        params = {"email": email} if email else None
        body = self._request("GET", "list_leaves/", params=params)
        if isinstance(body, dict):
            body = body.get("leaves", body.get("results"))
        if not isinstance(body, list):
            raise AccountsError("Malformed leave list response")
        return [item for item in body if isinstance(item, dict)]

    def apply_leave(self, payload: dict) -> Any:
        return self._request("POST", "apply_leave/", json=payload)

    def update_leave(self, leave_id: int, *, status: str) -> Any:
        return self._request("PATCH", f"update_leave/{int(leave_id)}/", json={"status": status})
