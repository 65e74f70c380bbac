"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import LeaveType, Role

# Entitlement given to an employee who has no balance record yet.
DEFAULT_LEAVE_BALANCE: dict[LeaveType, float] = {
    LeaveType.PL: 30,
    LeaveType.CL: 2,
    LeaveType.SL: 7,
    LeaveType.WFH: 15,
    LeaveType.MATERNITY: 182,
    LeaveType.PATERNITY: 14,
    LeaveType.ADOPTION: 84,
    LeaveType.SABBATICAL: 0,
    LeaveType.BEREAVEMENT: 10,
    LeaveType.PARENTAL: 10,
    LeaveType.COMP_OFF: 0,
}

MONTHLY_PL_ACCRUAL = 2.5
LEAVE_ALLOCATION_SETTING = "leave_allocation"

APPROVER_ROLES = (Role.HR, Role.HOD)

UNKNOWN_EMPLOYEE_NAME = "Unknown"

DEFAULT_HISTORY_LIMIT = 200
DEFAULT_ADMIN_LIMIT = 500

# Who may decide leave requests and administer balances/holidays.
LEAVE_DECIDER_ROLES = frozenset({Role.ADMIN, Role.HR, Role.HOD})
HR_ADMIN_ROLES = frozenset({Role.ADMIN, Role.HR})
