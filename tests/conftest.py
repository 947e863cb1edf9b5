from __future__ import annotations

import json
from datetime import date

import pytest

from fakes import FakeAccounts, ImmediateExecutor
from hrms_portal.accounts.model import Profile
from hrms_portal.container import build_container
from hrms_portal.core.enums import Role
from hrms_portal.main import create_app


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def accounts() -> FakeAccounts:
    return FakeAccounts(
        profiles={
            (Role.HR, "a@x.com"): Profile(
                email="a@x.com",
                fullname="Alice HR",
                profile_picture="media/alice.png",
                department="People",
                date_of_birth="1990-05-20",
                date_joined="2020-01-15T09:00:00Z",
            ),
        }
    )


@pytest.fixture
def app(monkeypatch, accounts):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(
        api_base_url="http://backend.test",
        accounts=accounts,
        executor=ImmediateExecutor(),
    )
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    """Seed the session record the way the login screen leaves it."""

    def _login_as(record):
        with client.session_transaction() as sess:
            sess["userInfo"] = record if isinstance(record, str) else json.dumps(record)

    return _login_as
