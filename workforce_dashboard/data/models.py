"""
Typed views of the backend's JSON resources.

The backend speaks camelCase (`employeeId`, `totalEmployees`); these
dataclasses expose snake_case attributes and convert at the edges.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

PRESENT = "Present"
ABSENT = "Absent"
ATTENDANCE_STATUSES = (PRESENT, ABSENT)

DateLike = Union[str, dt.date]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _rows(value: Any) -> List[Dict[str, Any]]:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return []


def iso_date(value: Optional[DateLike]) -> Optional[str]:
    """Return `value` as a YYYY-MM-DD string; None and "" pass through as None."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    email: str
    department: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            department=_text(data.get("department")),
        )


@dataclass(frozen=True)
class AttendanceRecord:
    id: str
    employee_id: str
    date: str
    status: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            id=_text(data.get("id")),
            employee_id=_text(data.get("employeeId")),
            date=iso_date(data.get("date")) or "",
            status=_text(data.get("status")),
        )


@dataclass
class FormDraft:
    name: str = ""
    email: str = ""
    department: str = ""
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_employee(cls, employee: Employee) -> "FormDraft":
        return cls(name=employee.name, email=employee.email, department=employee.department)

    def to_payload(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email, "department": self.department}


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int = 0
    present_today: int = 0
    absent_today: int = 0
    total_departments: int = 0
    weekly_trend: List[Dict[str, Any]] = field(default_factory=list)
    department_distribution: List[Dict[str, Any]] = field(default_factory=list)
    today_attendance_status: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DashboardStats":
        return cls(
            total_employees=_int(data.get("totalEmployees")),
            present_today=_int(data.get("presentToday")),
            absent_today=_int(data.get("absentToday")),
            total_departments=_int(data.get("totalDepartments")),
            weekly_trend=_rows(data.get("weeklyTrend")),
            department_distribution=_rows(data.get("departmentDistribution")),
            today_attendance_status=_rows(data.get("todayAttendanceStatus")),
        )
