"""
Filter utilities applied to the lists fetched for the employees and attendance pages.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from workforce_dashboard.data.models import AttendanceRecord, DateLike, Employee, iso_date

SEARCH_FIELDS = ("name", "email", "department", "id")


def filter_employees(employees: Sequence[Employee], query: Optional[str]) -> List[Employee]:
    """
    Case-insensitive substring search over name, email, department and ID.

    A blank query returns every employee; otherwise matches keep their
    original relative order.
    """
    if not query or not query.strip():
        return list(employees)
    needle = query.lower()
    return [
        emp for emp in employees
        if any(needle in getattr(emp, attr).lower() for attr in SEARCH_FIELDS)
    ]


def filter_attendance_by_date(
    records: Sequence[AttendanceRecord],
    date: Optional[DateLike],
) -> List[AttendanceRecord]:
    target = iso_date(date)
    if not target:
        return list(records)
    return [rec for rec in records if rec.date == target]


def sort_newest_first(records: Sequence[AttendanceRecord]) -> List[AttendanceRecord]:
    # ISO dates sort lexicographically; sorted() keeps ties in input order
    return sorted(records, key=lambda rec: rec.date, reverse=True)
