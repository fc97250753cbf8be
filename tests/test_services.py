from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from src.presence_tracker.presence_tracker.common.datetime_utils import (
    iter_days,
    month_bounds,
    parse_month,
    parse_request_date,
    shift_month,
)
from src.presence_tracker.presence_tracker.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from src.presence_tracker.presence_tracker.users.model import Admin

from fakes import build_fake_container, make_user


@pytest.fixture()
def container():
    return build_fake_container(
        users=[make_user(1, "Doe", "John", date(2024, 1, 10))],
        holidays=[date(2024, 12, 25)],
        admins=[Admin(admin_id=1, username="admin", password_hash=generate_password_hash("admin123"))],
    )


# --- auth ---------------------------------------------------------------

def test_authenticate_ok(container):
    admin = container.auth_service.authenticate("admin", "admin123")
    assert admin.admin_id == 1
    assert admin.username == "admin"


@pytest.mark.parametrize("username, password", [("admin", "nope"), ("ghost", "admin123"), ("", ""), ("admin", "")])
def test_authenticate_rejects(container, username, password):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate(username, password)


def test_placeholder_hash_never_matches():
    container = build_fake_container(admins=[Admin(admin_id=1, username="admin", password_hash="CHANGE_ME")])
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("admin", "CHANGE_ME")


# --- users ----------------------------------------------------------------

def test_create_user_validates_window(container):
    with pytest.raises(ValidationError):
        container.user_service.create_user(
            am="2000",
            surname="Roe",
            name="Jane",
            department_id=1,
            start_date=date(2024, 2, 1),
            end_date=date(2024, 1, 31),
        )

    user_id = container.user_service.create_user(
        am=" 2000 ",
        surname="Roe",
        name="Jane",
        department_id=1,
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 1),
    )
    assert container.user_service.get_user(user_id).am == "2000"


def test_create_user_rejects_duplicate_am(container):
    with pytest.raises(ValidationError):
        container.user_service.create_user(
            am="1001", surname="X", name="Y", department_id=None, start_date=date(2024, 1, 1)
        )


def test_set_end_date(container):
    container.user_service.set_end_date(1, date(2024, 6, 30))
    assert container.user_service.get_user(1).end_date == date(2024, 6, 30)

    with pytest.raises(ValidationError):
        container.user_service.set_end_date(1, date(2024, 1, 1))
    with pytest.raises(NotFoundError):
        container.user_service.set_end_date(99, None)


def test_departments(container):
    assert [d.name for d in container.user_service.list_departments()] == ["R&D"]
    container.user_service.create_department("HR")
    with pytest.raises(ValidationError):
        container.user_service.create_department("HR")
    assert [d.name for d in container.user_service.list_departments()] == ["HR", "R&D"]


# --- categories -------------------------------------------------------------

def test_create_category_normalises_code(container):
    category_id = container.category_service.create(code=" bt ", label="Business Trip", color="#fde68a")
    assert container.category_service.by_code()["BT"].category_id == category_id

    with pytest.raises(ValidationError):
        container.category_service.create(code="BT", label="Again")


def test_toggle_category(container):
    toggled = container.category_service.toggle_active(2)
    assert toggled.is_active is False
    assert [c.code for c in container.category_service.list_active()] == ["OS", "OOO"]
    assert len(container.category_service.list_all()) == 3

    assert container.category_service.toggle_active(2).is_active is True

    with pytest.raises(NotFoundError):
        container.category_service.toggle_active(42)


# --- holidays ---------------------------------------------------------------

def test_holidays(container):
    holiday_id = container.holiday_service.add(date(2024, 1, 1), "New Year")
    with pytest.raises(ValidationError):
        container.holiday_service.add(date(2024, 1, 1))

    assert container.holiday_service.dates_between(date(2024, 1, 1), date(2024, 12, 31)) == {
        date(2024, 1, 1),
        date(2024, 12, 25),
    }
    assert container.holiday_service.dates_between(date(2024, 12, 31), date(2024, 1, 1)) == set()

    container.holiday_service.remove(holiday_id)
    with pytest.raises(NotFoundError):
        container.holiday_service.remove(holiday_id)


# --- date helpers -----------------------------------------------------------

def test_parse_request_date():
    assert parse_request_date(" 2024-02-29 ", "from") == date(2024, 2, 29)
    for bad in (None, "", "  ", "2023-02-29", "01/02/2024"):
        with pytest.raises(ValidationError):
            parse_request_date(bad, "from")


def test_month_helpers():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    assert parse_month("2024-03") == (2024, 3)
    assert parse_month(None, today=date(2025, 7, 4)) == (2025, 7)
    with pytest.raises(ValidationError):
        parse_month("March")


def test_iter_days_is_inclusive():
    assert list(iter_days(date(2024, 1, 1), date(2024, 1, 1))) == [date(2024, 1, 1)]
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []
