from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .leaves.approval_service import LeaveApprovalService
from .leaves.balance_service import LeaveBalanceService
from .leaves.calculator.working_day_calculator import WorkingDayCalculator
from .leaves.mysql_balance_repository import MySQLLeaveBalanceRepository, MySQLSystemSettingsRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveBalanceRepository, LeaveRepository, SystemSettingsRepository
from .leaves.service import LeaveService
from .settlements.mysql_settlement_repository import MySQLSettlementRepository
from .settlements.repository import SettlementRepository
from .settlements.service import SettlementService
from .users.mysql_user_role_repository import MySQLUserRoleRepository
from .users.repository import UserRoleRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    holidays_repo: HolidayRepository
    employees_repo: EmployeeRepository
    roles_repo: UserRoleRepository
    leaves_repo: LeaveRepository
    balances_repo: LeaveBalanceRepository
    settings_repo: SystemSettingsRepository
    settlements_repo: SettlementRepository

    working_day_calculator: WorkingDayCalculator
    holiday_service: HolidayService
    leave_service: LeaveService
    leave_approval_service: LeaveApprovalService
    leave_balance_service: LeaveBalanceService
    settlement_service: SettlementService


def build_services(
    *,
    holidays_repo: HolidayRepository,
    employees_repo: EmployeeRepository,
    roles_repo: UserRoleRepository,
    leaves_repo: LeaveRepository,
    balances_repo: LeaveBalanceRepository,
    settings_repo: SystemSettingsRepository,
    settlements_repo: SettlementRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    calculator = WorkingDayCalculator()

    return Container(
        conn=conn,
        holidays_repo=holidays_repo,
        employees_repo=employees_repo,
        roles_repo=roles_repo,
        leaves_repo=leaves_repo,
        balances_repo=balances_repo,
        settings_repo=settings_repo,
        settlements_repo=settlements_repo,
        working_day_calculator=calculator,
        holiday_service=HolidayService(holidays_repo),
        leave_service=LeaveService(
            leaves_repo,
            balances_repo,
            holidays_repo,
            employees_repo,
            roles_repo,
            calculator=calculator,
        ),
        leave_approval_service=LeaveApprovalService(leaves_repo, balances_repo),
        leave_balance_service=LeaveBalanceService(balances_repo, employees_repo, settings_repo),
        settlement_service=SettlementService(settlements_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.for_config(DBConfig.from_dict(db_config))

    return build_services(
        conn=conn,
        holidays_repo=MySQLHolidayRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        roles_repo=MySQLUserRoleRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        balances_repo=MySQLLeaveBalanceRepository(conn),
        settings_repo=MySQLSystemSettingsRepository(conn),
        settlements_repo=MySQLSettlementRepository(conn),
    )
