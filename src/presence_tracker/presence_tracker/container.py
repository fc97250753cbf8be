from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .categories.mysql_category_repository import MySQLCategoryRepository
from .categories.repository import CategoryRepository
from .categories.service import CategoryService
from .database.connection import DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .reports.service import AttendanceReportService
from .users.department_repository import DepartmentRepository
from .users.mysql_department_repository import MySQLDepartmentRepository
from .users.mysql_user_repository import MySQLAdminRepository, MySQLUserRepository
from .users.repository import AdminRepository, UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    """Application state handed to every controller.

    Repositories are the only path to persisted records; services never
    share mutable state between requests.
    """

    users_repo: UserRepository
    admins_repo: AdminRepository
    departments_repo: DepartmentRepository
    categories_repo: CategoryRepository
    holidays_repo: HolidayRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    user_service: UserService
    category_service: CategoryService
    holiday_service: HolidayService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def wire_container(
    *,
    users_repo: UserRepository,
    admins_repo: AdminRepository,
    departments_repo: DepartmentRepository,
    categories_repo: CategoryRepository,
    holidays_repo: HolidayRepository,
    attendance_repo: AttendanceRepository,
) -> Container:
    category_service = CategoryService(categories_repo)
    holiday_service = HolidayService(holidays_repo)
    return Container(
        users_repo=users_repo,
        admins_repo=admins_repo,
        departments_repo=departments_repo,
        categories_repo=categories_repo,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(admins_repo),
        user_service=UserService(users_repo, departments_repo),
        category_service=category_service,
        holiday_service=holiday_service,
        attendance_service=AttendanceService(attendance_repo, users_repo, category_service, holiday_service),
        report_service=AttendanceReportService(attendance_repo, users_repo, holiday_service),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.from_dict(db_config)

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        admins_repo=MySQLAdminRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        categories_repo=MySQLCategoryRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
