"""
Per-employee attendance state for the "Mark Today's Attendance" section.

Each employee starts a day unmarked; either status can then be set and
switched to the other any number of times (the backend keeps the last write).
"""

from __future__ import annotations

from typing import Optional, Sequence

from workforce_dashboard.data.models import AttendanceRecord, Employee

UNKNOWN = "Unknown"


def status_for(employee_id: str, today_snapshot: Sequence[AttendanceRecord]) -> Optional[str]:
    """Status of the first snapshot record for `employee_id`, or None if unmarked."""
    record = next((rec for rec in today_snapshot if rec.employee_id == employee_id), None)
    return record.status if record else None


def can_mark(current_status: Optional[str], target_status: str) -> bool:
    return current_status != target_status


def lookup_employee(employee_id: str, employees: Sequence[Employee]) -> Optional[Employee]:
    return next((emp for emp in employees if emp.id == employee_id), None)


def employee_name(employee_id: str, employees: Sequence[Employee]) -> str:
    employee = lookup_employee(employee_id, employees)
    return employee.name if employee else UNKNOWN


def employee_department(employee_id: str, employees: Sequence[Employee]) -> str:
    employee = lookup_employee(employee_id, employees)
    return employee.department if employee else UNKNOWN
