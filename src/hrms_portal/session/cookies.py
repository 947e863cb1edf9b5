from __future__ import annotations

from typing import Optional, Protocol

from flask import after_this_request, request


class CookieMirror(Protocol):
    """Cookie jar holding the `role` mirror next to the session record."""

    def get(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, name: str, value: str, *, max_age: int) -> None:
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError


class FlaskCookieMirror:
    """CookieMirror bound to the current Flask request.

    Reads come from the incoming request; writes are applied to the outgoing response.
    Must be used inside a request context.
    """

    def get(self, name: str) -> Optional[str]:
        return request.cookies.get(name)

    def set(self, name: str, value: str, *, max_age: int) -> None:
        @after_this_request
        def _set_cookie(response):
            response.set_cookie(name, value, max_age=max_age, path="/", samesite="Lax")
            return response

    def delete(self, name: str) -> None:
        @after_this_request
        def _delete_cookie(response):
            response.delete_cookie(name, path="/")
            return response
