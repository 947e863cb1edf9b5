from __future__ import annotations

import json

import pytest

from fakes import InMemoryCookies
from hrms_portal.core.enums import Role
from hrms_portal.core.exceptions import ValidationError
from hrms_portal.session.model import Session
from hrms_portal.session.store import SessionStore


def make_store(storage=None, cookies=None):
    storage = {} if storage is None else storage
    cookies = cookies or InMemoryCookies()
    return SessionStore(storage, cookies, cookie_max_age=3600), storage, cookies


def test_write_persists_record_layout_and_mirrors_role():
    store, storage, cookies = make_store()

    store.write(Session(role=Role.HR, email="a@x.com", display_name="Alice", department="People"))

    record = json.loads(storage["userInfo"])
    assert record == {
        "name": "Alice",
        "email": "a@x.com",
        "role": "hr",
        "phone": "",
        "department": "People",
        "picture": "",
    }
    assert cookies.values["role"] == "hr"
    assert cookies.max_ages["role"] == 3600
    assert store.read() == Session(role=Role.HR, email="a@x.com", display_name="Alice", department="People")


def test_write_overwrites_previous_session():
    store, _, cookies = make_store()
    store.write(Session(role=Role.HR, email="a@x.com"))
    store.write(Session(role=Role.ADMIN, email="b@x.com"))

    assert store.read().email == "b@x.com"
    assert cookies.values["role"] == "admin"


@pytest.mark.parametrize("email", ["", "   "])
def test_write_requires_email(email):
    store, storage, _ = make_store()
    with pytest.raises(ValidationError):
        store.write(Session(role=Role.HR, email=email))
    assert "userInfo" not in storage


def test_write_requires_known_role():
    store, _, _ = make_store()
    with pytest.raises(ValidationError):
        store.write(Session(role="", email="a@x.com"))


def test_read_absent_returns_none():
    store, _, _ = make_store()
    assert store.read() is None


@pytest.mark.parametrize(
    "raw",
    [
        '{role:',
        "not json at all",
        json.dumps(["hr", "a@x.com"]),
        json.dumps({"role": "superuser", "email": "a@x.com"}),
        json.dumps({"role": "hr"}),
        json.dumps({"role": "hr", "email": ""}),
    ],
)
def test_read_treats_corrupt_record_as_absent(raw):
    store, _, _ = make_store(storage={"userInfo": raw})
    assert store.read() is None


def test_read_keeps_optional_display_fields_optional():
    store, _, _ = make_store(storage={"userInfo": json.dumps({"role": "employee", "email": "e@x.com"})})

    s = store.read()

    assert s.role is Role.EMPLOYEE
    assert s.display_name is None
    assert s.avatar_url is None


def test_role_from_cookie_ignores_unknown_values():
    store, _, _ = make_store(cookies=InMemoryCookies({"role": "root"}))
    assert store.role_from_cookie() is None

    store, _, _ = make_store(cookies=InMemoryCookies({"role": "manager"}))
    assert store.role_from_cookie() is Role.MANAGER


def test_clear_twice_leaves_same_absent_state():
    store, storage, cookies = make_store()
    store.write(Session(role=Role.CEO, email="c@x.com"))

    store.clear()
    after_once = (dict(storage), dict(cookies.values))
    store.clear()

    assert (dict(storage), dict(cookies.values)) == after_once
    assert store.read() is None
    assert store.role_from_cookie() is None


def test_clear_drops_every_key_of_the_session():
    store, storage, _ = make_store(storage={"_flashes": [("info", "hi")], "csrf": "x"})
    store.write(Session(role=Role.HR, email="a@x.com"))

    store.clear()

    assert storage == {}
