from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, redirect, session

from ..container import Container
from ..core.enums import Role
from ..session.cookies import FlaskCookieMirror
from ..session.model import Session
from ..session.store import SessionStore


def request_store(container: Container) -> SessionStore:
    """SessionStore over the current request's session and cookies."""
    return container.session_store(session, FlaskCookieMirror())


def role_required(container: Container, role: Role):
    """Run the access decision before the view; redirect instead of raising.

    On success the decision is kept on `g.access` and a profile enrichment is
    started on `g.shell` (cancelled again at request teardown).
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            decision = container.access_service.decide(role, request_store(container))
            if not decision.authorized:
                return redirect(decision.redirect_to)

            g.access = decision
            g.shell = container.profile_enricher.start(decision)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_session() -> Optional[Session]:
    decision = g.get("access")
    return decision.session if decision is not None else None
