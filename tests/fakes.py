from __future__ import annotations

from typing import Optional

from src.hr_portal.hr_portal.core.enums import LeaveType, RequestStatus, Role, SettlementStatus
from src.hr_portal.hr_portal.core.exceptions import PersistenceError
from src.hr_portal.hr_portal.holidays.model import Holiday
from src.hr_portal.hr_portal.leaves.model import LeaveBalance, LeaveRequest
from src.hr_portal.hr_portal.settlements.model import Settlement


class FakeHolidayRepo:
    def __init__(self, holidays=None):
        self._items: dict[int, Holiday] = {}
        self._next_id = 1
        self.list_calls = 0
        for d, name in holidays or []:
            self.create(holiday_date=d, name=name)

    def list_all(self):
        self.list_calls += 1
        return sorted(self._items.values(), key=lambda h: h.holiday_date)

    def create(self, *, holiday_date, name, description=None):
        hid = self._next_id
        self._next_id += 1
        self._items[hid] = Holiday(holiday_id=hid, holiday_date=holiday_date, name=name, description=description)
        return hid

    def create_many(self, rows):
        for d, name, desc in rows:
            self.create(holiday_date=d, name=name, description=desc)
        return len(rows)

    def delete_by_id(self, holiday_id):
        return self._items.pop(int(holiday_id), None) is not None


class FakeEmployeeRepo:
    def __init__(self, employees=None):
        self._by_user = {e.user_id: e for e in employees or []}
        self.lookups: list[str] = []

    def get_by_user_id(self, user_id):
        self.lookups.append(user_id)
        return self._by_user.get(user_id)

    def list_all(self):
        return sorted(self._by_user.values(), key=lambda e: e.name)


class FakeRoleRepo:
    def __init__(self, roles: Optional[dict] = None):
        self._roles = roles or {}
        self.queried: list[Role] = []

    def list_user_ids_by_role(self, role):
        self.queried.append(Role(role))
        return list(self._roles.get(Role(role), []))


class FakeLeaveRepo:
    def __init__(self, *, fail_with: Optional[str] = None):
        self._items: dict[int, LeaveRequest] = {}
        self._next_id = 1
        self.fail_with = fail_with
        self.create_calls = 0
        # set to simulate another approver deciding first
        self.lose_decide_race = False

    def create_leave(self, *, employee_id, employee_name, employee_code, leave_type, start_date, end_date,
                     duration, reason, is_paid, approver_ids, applied_at):
        self.create_calls += 1
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        rid = self._next_id
        self._next_id += 1
        self._items[rid] = LeaveRequest(
            request_id=rid,
            employee_id=employee_id,
            employee_name=employee_name,
            employee_code=employee_code,
            leave_type=LeaveType(leave_type),
            start_date=start_date,
            end_date=end_date,
            duration=duration,
            reason=reason,
            status=RequestStatus.PENDING,
            is_paid=is_paid,
            approver_ids=tuple(approver_ids),
            applied_at=applied_at,
        )
        return rid

    def get_leave(self, *, request_id):
        return self._items.get(int(request_id))

    def list_leaves(self, *, employee_id=None, status=None, limit=200):
        items = [
            x for x in self._items.values()
            if (employee_id is None or x.employee_id == employee_id) and (status is None or x.status == status)
        ]
        items.sort(key=lambda x: (x.applied_at, x.request_id), reverse=True)
        return items[:limit]

    def decide_leave(self, *, request_id, status, decided_by, decided_at, notes=None):
        if self.lose_decide_race:
            return False
        req = self._items.get(int(request_id))
        if not req or req.status != RequestStatus.PENDING:
            return False
        self._items[int(request_id)] = LeaveRequest(
            request_id=req.request_id,
            employee_id=req.employee_id,
            employee_name=req.employee_name,
            employee_code=req.employee_code,
            leave_type=req.leave_type,
            start_date=req.start_date,
            end_date=req.end_date,
            duration=req.duration,
            reason=req.reason,
            status=status,
            is_paid=req.is_paid,
            approver_ids=req.approver_ids,
            applied_at=req.applied_at,
            decided_by=decided_by,
            decided_at=decided_at,
            notes=notes,
        )
        return True


class FakeBalanceRepo:
    def __init__(self, balances: Optional[dict] = None, *, settings: Optional["FakeSettingsRepo"] = None):
        self._items: dict[str, dict] = {k: dict(v) for k, v in (balances or {}).items()}
        self.saved: list[tuple[str, dict]] = []
        # system_settings lives in the same database as the balances
        self.settings = settings
        self.fail_allocation_with: Optional[str] = None

    def get_balance(self, employee_id):
        if employee_id not in self._items:
            return None
        return LeaveBalance(employee_id=employee_id, quantities=dict(self._items[employee_id]))

    def save_balance(self, *, employee_id, quantities, updated_at):
        self._items.setdefault(employee_id, {}).update(quantities)
        self.saved.append((employee_id, dict(quantities)))

    def save_allocation(self, *, balances, setting_key, setting_value, updated_at):
        if self.fail_allocation_with:
            raise PersistenceError(self.fail_allocation_with)
        for employee_id, quantities in balances.items():
            self.save_balance(employee_id=employee_id, quantities=quantities, updated_at=updated_at)
        if self.settings is not None:
            self.settings.set_value(setting_key, setting_value, updated_at=updated_at)


class FakeSettingsRepo:
    def __init__(self, values: Optional[dict] = None):
        self._values = dict(values or {})

    def get_value(self, key):
        return self._values.get(key)

    def set_value(self, key, value, *, updated_at):
        self._values[key] = value


class FakeSettlementRepo:
    def __init__(self, clearances=None):
        self._clearances = {c.employee_id: c for c in clearances or []}
        self._items: dict[int, Settlement] = {}
        self._next_id = 1

    def get_completed_clearance(self, employee_id):
        c = self._clearances.get(employee_id)
        return c if c and c.overall_status == "completed" else None

    def create_settlement(self, *, employee_id, employee_name, employee_code, components, totals, remarks, created_at):
        sid = self._next_id
        self._next_id += 1
        self._items[sid] = Settlement(
            settlement_id=sid,
            employee_id=employee_id,
            employee_name=employee_name,
            employee_code=employee_code,
            components=components,
            totals=totals,
            status=SettlementStatus.DRAFT,
            remarks=remarks,
            created_at=created_at,
        )
        return sid

    def list_settlements(self, *, limit=200):
        return sorted(self._items.values(), key=lambda s: s.created_at, reverse=True)[:limit]


