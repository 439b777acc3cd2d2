"""
CSV export for the employees and attendance tables.

Fields are wrapped in double quotes; embedded quotes and newlines are not
escaped, so values containing `"` produce malformed rows.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional, Sequence, Tuple

from workforce_dashboard.data.attendance import employee_department, employee_name
from workforce_dashboard.data.models import AttendanceRecord, DateLike, Employee, iso_date

EMPLOYEE_HEADERS = ["Employee ID", "Name", "Email", "Department"]
ATTENDANCE_HEADERS = ["Date", "Employee ID", "Employee Name", "Department", "Status"]
CSV_MIME = "text/csv"


def to_csv(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    lines = [",".join(headers)]
    lines.extend(",".join(f'"{field}"' for field in row) for row in rows)
    return "\n".join(lines)


def employee_rows(employees: Sequence[Employee]) -> Tuple[List[str], List[List[str]]]:
    rows = [[emp.id, emp.name, emp.email, emp.department] for emp in employees]
    return list(EMPLOYEE_HEADERS), rows


def attendance_rows(
    records: Sequence[AttendanceRecord],
    employees: Sequence[Employee],
) -> Tuple[List[str], List[List[str]]]:
    rows = [
        [
            rec.date,
            rec.employee_id,
            employee_name(rec.employee_id, employees),
            employee_department(rec.employee_id, employees),
            rec.status,
        ]
        for rec in records
    ]
    return list(ATTENDANCE_HEADERS), rows


def export_file_name(entity: str, date: Optional[DateLike]) -> str:
    """`employees_2024-05-01.csv`, `attendance_all.csv`, ..."""
    return f"{entity}_{iso_date(date) or 'all'}.csv"


def employees_csv(employees: Sequence[Employee], today: Optional[dt.date] = None) -> Tuple[str, str]:
    """Return (file_name, csv_text) for the employees download."""
    headers, rows = employee_rows(employees)
    return export_file_name("employees", today or dt.date.today()), to_csv(headers, rows)


def attendance_csv(
    records: Sequence[AttendanceRecord],
    employees: Sequence[Employee],
    date_filter: Optional[DateLike],
) -> Tuple[str, str]:
    """Return (file_name, csv_text) for the attendance download."""
    headers, rows = attendance_rows(records, employees)
    return export_file_name("attendance", date_filter), to_csv(headers, rows)
