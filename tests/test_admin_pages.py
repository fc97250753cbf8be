from __future__ import annotations

from datetime import date

import pytest

from src.presence_tracker.presence_tracker.main import create_app

from fakes import build_fake_container, make_user


@pytest.fixture()
def container():
    return build_fake_container(users=[make_user(1, "Doe", "John", date(2024, 1, 10))])


@pytest.fixture()
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app(container=container).test_client()
    with client.session_transaction() as sess:
        sess["admin_id"] = 1
    return client


@pytest.mark.parametrize("path", ["/admin/users", "/admin/departments", "/admin/categories", "/admin/holidays"])
def test_pages_render(client, path):
    assert client.get(path).status_code == 200


def test_pages_require_login(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    anon = create_app(container=container).test_client()
    resp = anon.get("/admin/holidays")
    assert resp.status_code == 302
    assert "next=/admin/holidays" in resp.headers["Location"] or "next=%2Fadmin%2Fholidays" in resp.headers["Location"]


def test_add_user(client, container):
    resp = client.post(
        "/admin/users",
        data={"am": "2000", "surname": "Roe", "name": "Jane", "department": "1", "startDate": "2024-02-01"},
    )
    assert resp.status_code == 302
    assert container.users_repo.get_by_am("2000").start_date == date(2024, 2, 1)


def test_add_user_with_bad_window_stays_on_page(client, container):
    resp = client.post(
        "/admin/users",
        data={"am": "2000", "surname": "Roe", "name": "Jane", "startDate": "2024-02-01", "endDate": "2024-01-01"},
    )
    assert resp.status_code == 200
    assert container.users_repo.get_by_am("2000") is None


def test_set_end_date(client, container):
    client.post("/admin/users/1/end-date", data={"endDate": "2024-03-31"})
    assert container.users_repo.get_by_id(1).end_date == date(2024, 3, 31)


def test_category_create_and_toggle(client, container):
    client.post("/admin/categories", data={"code": "bt", "label": "Business Trip", "color": "#fde68a"})
    bt = container.categories_repo.get_by_code("BT")
    assert bt is not None and bt.is_active

    client.post(f"/admin/categories/{bt.category_id}/toggle")
    assert container.categories_repo.get_by_code("BT").is_active is False

    listed = client.get("/api/categories").get_json()
    assert [c["code"] for c in listed] == ["OS", "T", "OOO", "BT"]
    assert listed[-1]["isActive"] is False


def test_holiday_add_and_remove(client, container):
    client.post("/admin/holidays", data={"date": "2024-12-25", "name": "Christmas"})
    (holiday,) = container.holidays_repo.list_all()
    assert holiday.holiday_date == date(2024, 12, 25)

    client.post(f"/admin/holidays/{holiday.holiday_id}/delete")
    assert container.holidays_repo.list_all() == []


def test_department_create(client, container):
    client.post("/admin/departments", data={"name": "Sales"})
    assert container.departments_repo.get_by_name("Sales") is not None
