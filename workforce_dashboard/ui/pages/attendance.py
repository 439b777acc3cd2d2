from __future__ import annotations

import datetime as dt
from typing import List, Optional

import streamlit as st

from workforce_dashboard.data.attendance import can_mark, status_for
from workforce_dashboard.data.export import attendance_csv, attendance_rows
from workforce_dashboard.data.filters import filter_attendance_by_date, sort_newest_first
from workforce_dashboard.data.loader import load_attendance_page
from workforce_dashboard.data.models import ABSENT, PRESENT, AttendanceRecord, Employee
from workforce_dashboard.data.mutations import mark_attendance
from workforce_dashboard.errors import MutationError
from workforce_dashboard.ui.components.formatting import format_date
from workforce_dashboard.ui.components.tables import render_download, render_table
from workforce_dashboard.ui.layout import flash_and_rerun, page_header
from workforce_dashboard.ui.pages.context import PageContext

DATE_FILTER_KEY = "wd_attendance_date"
CARDS_PER_ROW = 3
STATUS_BADGES = {PRESENT: ":green-background[Present]", ABSENT: ":red-background[Absent]"}


def _selected_date(today: dt.date) -> Optional[dt.date]:
    col_date, col_clear, _ = st.columns([2, 1, 3], vertical_alignment="bottom")
    if DATE_FILTER_KEY not in st.session_state:
        st.session_state[DATE_FILTER_KEY] = today
    if col_clear.button("Clear Filter", key="wd_attendance_clear"):
        st.session_state[DATE_FILTER_KEY] = None
    with col_date:
        return st.date_input("Filter by Date", key=DATE_FILTER_KEY, format="YYYY-MM-DD")


def _mark(context: PageContext, employee: Employee, status: str) -> None:
    try:
        mark_attendance(context.client, employee.id, status, today=context.today)
    except MutationError as exc:
        st.error(exc.message)
        return
    flash_and_rerun(f"{employee.name} marked {status}")


def _render_mark_card(context: PageContext, employee: Employee, snapshot: List[AttendanceRecord]) -> None:
    status = status_for(employee.id, snapshot)
    with st.container(border=True):
        head, badge = st.columns([3, 1])
        head.markdown(f"**{employee.name}**  \n{employee.department}")
        head.caption(employee.id)
        if status:
            badge.markdown(STATUS_BADGES.get(status, status))
        col_present, col_absent = st.columns(2)
        if col_present.button(
            "✅ Present",
            key=f"wd_mark_{employee.id}_{PRESENT}",
            disabled=not can_mark(status, PRESENT),
            use_container_width=True,
        ):
            _mark(context, employee, PRESENT)
        if col_absent.button(
            "❌ Absent",
            key=f"wd_mark_{employee.id}_{ABSENT}",
            disabled=not can_mark(status, ABSENT),
            use_container_width=True,
        ):
            _mark(context, employee, ABSENT)


def _render_mark_section(context: PageContext, employees: List[Employee], snapshot: List[AttendanceRecord]) -> None:
    st.subheader("Mark Today's Attendance")
    st.caption(format_date(context.today.isoformat()))
    if not employees:
        st.info("No employees found. Add employees first to mark attendance.")
        return
    for idx in range(0, len(employees), CARDS_PER_ROW):
        row = employees[idx: idx + CARDS_PER_ROW]
        cols = st.columns(CARDS_PER_ROW)
        for col, employee in zip(cols, row):
            with col:
                _render_mark_card(context, employee, snapshot)


def render(context: PageContext) -> None:
    page_header("Attendance Management", "Mark and track employee attendance")

    with st.spinner("Loading attendance…"):
        data = load_attendance_page(context.client, today=context.today)

    selected_date = _selected_date(context.today)
    filtered = sort_newest_first(filter_attendance_by_date(data.records, selected_date))

    file_name, csv_text = attendance_csv(filtered, data.employees, selected_date)
    render_download(file_name, csv_text, key="wd_attendance_export")

    _render_mark_section(context, data.employees, data.today_snapshot)

    st.divider()
    st.subheader("Attendance Records")
    headers, rows = attendance_rows(filtered, data.employees)
    if selected_date:
        empty_message = f"No attendance records found for {format_date(selected_date.isoformat())}"
    else:
        empty_message = "No attendance records found"
    render_table(headers, rows, empty_message=empty_message, status_column="Status")

    summary = f"Showing {len(filtered)} of {len(data.records)} attendance records"
    if selected_date:
        summary += f" for {format_date(selected_date.isoformat())}"
    st.caption(summary)
