from __future__ import annotations

import pytest

from fakes import FakeAccounts, InMemoryCookies
from hrms_portal.accounts.model import Profile
from hrms_portal.core.enums import Role
from hrms_portal.core.exceptions import AccountsError, ValidationError
from hrms_portal.profile.service import ProfileService
from hrms_portal.session.model import Session
from hrms_portal.session.store import SessionStore


@pytest.fixture
def store():
    return SessionStore({}, InMemoryCookies())


@pytest.fixture
def session():
    return Session(role=Role.HR, email="a@x.com", display_name="a@x.com")


def test_load_computes_age_and_vintage_and_refreshes_cache(accounts, store, session, fixed_today):
    svc = ProfileService(accounts, api_base="http://backend.test", today=lambda: fixed_today)

    view = svc.load(session, store)

    assert view.age == 36
    assert view.vintage == "6 years, 9 months, 4 days"
    assert view.avatar_url == "http://backend.test/media/alice.png"

    cached = store.read()
    assert cached.display_name == "Alice HR"
    assert cached.avatar_url == "http://backend.test/media/alice.png"
    assert cached.department == "People"


def test_load_propagates_backend_failure_without_touching_cache(store, session, fixed_today):
    accounts = FakeAccounts()
    accounts.profile_error = AccountsError("down", status_code=503)
    svc = ProfileService(accounts, today=lambda: fixed_today)

    with pytest.raises(AccountsError):
        svc.load(session, store)
    assert store.read() is None


def test_update_sends_relative_picture_and_rewrites_cache(accounts, store, fixed_today):
    session = Session(role=Role.HR, email="a@x.com", avatar_url="http://backend.test/media/alice.png")
    svc = ProfileService(accounts, api_base="http://backend.test", today=lambda: fixed_today)

    view = svc.update(session, store, fullname="  Alice Updated ", phone="555", date_of_birth="1990-05-20")

    _, _, fields = accounts.updated[0]
    assert fields["fullname"] == "Alice Updated"
    assert fields["profile_picture"] == "media/alice.png"
    assert view.profile.fullname == "Alice Updated"
    assert store.read().display_name == "Alice Updated"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fullname": ""},
        {"fullname": "A", "date_of_birth": "20/05/1990"},
        {"fullname": "A", "date_of_birth": "2030-01-01"},
    ],
)
def test_update_rejects_invalid_input(accounts, store, session, fixed_today, kwargs):
    svc = ProfileService(accounts, today=lambda: fixed_today)

    with pytest.raises(ValidationError):
        svc.update(session, store, **kwargs)
    assert accounts.updated == []


def test_view_without_dates_leaves_age_and_vintage_empty(store, session, fixed_today):
    accounts = FakeAccounts(profiles={(Role.HR, "a@x.com"): Profile(email="a@x.com", fullname="A")})

    view = ProfileService(accounts, today=lambda: fixed_today).load(session, store)

    assert view.age is None
    assert view.vintage == ""
