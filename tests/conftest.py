from __future__ import annotations

from datetime import date, datetime

import pytest

from src.hr_portal.hr_portal.container import build_services
from src.hr_portal.hr_portal.core.enums import Gender, LeaveType, Role
from src.hr_portal.hr_portal.employees.model import EmployeeProfile
from src.hr_portal.hr_portal.settlements.model import Clearance
from tests.fakes import (
    FakeBalanceRepo,
    FakeEmployeeRepo,
    FakeHolidayRepo,
    FakeLeaveRepo,
    FakeRoleRepo,
    FakeSettingsRepo,
    FakeSettlementRepo,
)


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 15, 10, 30, 0)


@pytest.fixture
def employees():
    return FakeEmployeeRepo(
        [
            EmployeeProfile(user_id="u-emp", name="Anita Sharma", employee_code="EMP003", gender=Gender.FEMALE),
            EmployeeProfile(user_id="u-hr", name="Meera Iyer", employee_code="EMP001", gender=Gender.FEMALE),
        ]
    )


@pytest.fixture
def roles():
    return FakeRoleRepo({Role.HR: ["u-hr"], Role.HOD: ["u-hod"]})


@pytest.fixture
def holidays_repo():
    return FakeHolidayRepo([(date(2024, 1, 26), "Republic Day")])


@pytest.fixture
def container(employees, roles, holidays_repo):
    settings = FakeSettingsRepo()
    return build_services(
        holidays_repo=holidays_repo,
        employees_repo=employees,
        roles_repo=roles,
        leaves_repo=FakeLeaveRepo(),
        balances_repo=FakeBalanceRepo({"u-emp": {LeaveType.PL: 10, LeaveType.SL: 2}}, settings=settings),
        settings_repo=settings,
        settlements_repo=FakeSettlementRepo(
            [Clearance(employee_id="u-exit", employee_name="Ravi Kumar", employee_code="EMP009", overall_status="completed")]
        ),
    )
