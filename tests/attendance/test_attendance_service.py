from __future__ import annotations

from datetime import date

import pytest

from src.presence_tracker.presence_tracker.core.exceptions import BlockedDayError, NotFoundError, ValidationError

from fakes import BrokenAttendance, build_fake_container, make_user

MONDAY = date(2024, 1, 15)


@pytest.fixture()
def container():
    return build_fake_container(
        users=[
            make_user(1, "Doe", "John", date(2024, 1, 10)),
            make_user(2, "Abe", "Ann", date(2023, 1, 1), date(2024, 1, 12)),
        ],
        holidays=[date(2024, 1, 16)],
    )


def test_cycle_day_walks_through_active_categories_and_clears(container):
    svc = container.attendance_service

    codes = [svc.cycle_day(user_id=1, work_date=MONDAY) for _ in range(4)]

    assert codes == ["OS", "T", "OOO", None]
    assert svc.get_attendance(1, MONDAY) is None
    assert (1, MONDAY) not in container.attendance_repo.rows


def test_cycle_day_overwrites_single_row(container):
    svc = container.attendance_service
    svc.cycle_day(user_id=1, work_date=MONDAY)
    svc.cycle_day(user_id=1, work_date=MONDAY)

    assert container.attendance_repo.rows == {(1, MONDAY): 2}
    assert svc.get_attendance(1, MONDAY) == "T"


@pytest.mark.parametrize(
    "user_id, day",
    [
        (1, date(2024, 1, 9)),  # before start
        (2, date(2024, 1, 15)),  # after end
        (1, date(2024, 1, 13)),  # Saturday
        (1, date(2024, 1, 16)),  # holiday
    ],
)
def test_blocked_days_reject_edits_without_writing(container, user_id, day):
    with pytest.raises(BlockedDayError):
        container.attendance_service.cycle_day(user_id=user_id, work_date=day)
    with pytest.raises(BlockedDayError):
        container.attendance_service.update_attendance(user_id=user_id, work_date=day, category_id=1)

    assert container.attendance_repo.rows == {}


def test_deactivated_category_restarts_cycle_but_keeps_history(container):
    svc = container.attendance_service
    svc.update_attendance(user_id=1, work_date=MONDAY, category_id=2)  # T
    container.category_service.toggle_active(2)

    grid = svc.month_grid(2024, 1, user_id=1)
    cell = grid.matrix.rows[0].cells[MONDAY.day - 1]
    assert cell.code == "T"
    assert grid.categories_by_code["T"].is_active is False
    assert [c.code for c in grid.legend] == ["OS", "OOO"]

    assert svc.cycle_day(user_id=1, work_date=MONDAY) == "OS"


def test_update_attendance_with_none_deletes(container):
    svc = container.attendance_service
    assert svc.update_attendance(user_id=1, work_date=MONDAY, category_id=3) == "OOO"
    assert svc.update_attendance(user_id=1, work_date=MONDAY, category_id=None) is None
    assert svc.get_attendance(1, MONDAY) is None


def test_update_attendance_rejects_unknown_category(container):
    with pytest.raises(ValidationError):
        container.attendance_service.update_attendance(user_id=1, work_date=MONDAY, category_id=99)


def test_unknown_user(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.cycle_day(user_id=42, work_date=MONDAY)


def test_no_active_categories_is_a_noop_on_empty_day():
    container = build_fake_container(users=[make_user(1, "Doe", "John", date(2024, 1, 1))], categories=[])
    assert container.attendance_service.cycle_day(user_id=1, work_date=MONDAY) is None
    assert container.attendance_repo.rows == {}


def test_storage_failure_propagates():
    container = build_fake_container(
        users=[make_user(1, "Doe", "John", date(2024, 1, 1))],
        attendance_cls=BrokenAttendance,
    )
    with pytest.raises(ConnectionError):
        container.attendance_service.cycle_day(user_id=1, work_date=MONDAY)


def test_month_grid_covers_whole_month_for_all_users(container):
    grid = container.attendance_service.month_grid(2024, 2)

    assert len(grid.matrix.days) == 29
    assert [r.surname for r in grid.matrix.rows] == ["Abe", "Doe"]
    # Ann left in January: every February cell is employment-blocked.
    assert all(c.employment_blocked for c in grid.matrix.rows[0].cells)


def test_get_attendance_hides_stale_record_on_blocked_day():
    container = build_fake_container(users=[make_user(1, "Doe", "John", date(2023, 1, 1), date(2024, 1, 12))])
    container.attendance_repo.upsert(user_id=1, work_date=MONDAY, category_id=1)

    grid = container.attendance_service.month_grid(2024, 1, user_id=1)
    assert grid.matrix.rows[0].cells[MONDAY.day - 1].code == ""
    assert container.attendance_service.get_attendance(1, MONDAY) is None
    # hidden, not deleted
    assert container.attendance_repo.rows == {(1, MONDAY): 1}


def test_get_attendance_hides_record_on_holiday(container):
    container.attendance_repo.upsert(user_id=1, work_date=date(2024, 1, 16), category_id=1)
    assert container.attendance_service.get_attendance(1, date(2024, 1, 16)) is None


def test_get_attendance_unknown_user(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.get_attendance(42, MONDAY)
