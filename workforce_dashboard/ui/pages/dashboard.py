from __future__ import annotations

import pandas as pd
import streamlit as st

from workforce_dashboard.data.export import employee_rows
from workforce_dashboard.data.loader import load_dashboard_data
from workforce_dashboard.ui.components.charts import line_chart, pie_chart, render_plotly, status_bar_chart
from workforce_dashboard.ui.components.formatting import format_percent, share_percent
from workforce_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from workforce_dashboard.ui.components.tables import render_table
from workforce_dashboard.ui.layout import page_header
from workforce_dashboard.ui.pages.context import PageContext


def _frame(rows, columns) -> pd.DataFrame:
    df = pd.DataFrame(rows or [])
    if df.empty or not set(columns).issubset(df.columns):
        return pd.DataFrame(columns=columns)
    return df[columns]


def render(context: PageContext) -> None:
    page_header("Dashboard", "Company workforce overview & analytics")

    with st.spinner("Loading dashboard…"):
        data = load_dashboard_data(context.client)

    stats = data.stats
    if stats is None:
        st.error("Error loading dashboard data")
        return

    marked_today = stats.present_today + stats.absent_today
    render_kpi_cards([
        KpiCard("Total Employees", stats.total_employees),
        KpiCard(
            "Present Today",
            stats.present_today,
            delta=format_percent(share_percent(stats.present_today, marked_today), 0)
            if marked_today else None,
        ),
        KpiCard(
            "Absent Today",
            stats.absent_today,
            delta=format_percent(share_percent(stats.absent_today, marked_today), 0)
            if marked_today else None,
            delta_color="inverse",
        ),
        KpiCard("Departments", stats.total_departments),
    ])

    st.divider()

    theme = context.theme
    left, right = st.columns(2)
    with left:
        st.subheader("Weekly Attendance Trend")
        trend = _frame(stats.weekly_trend, ["day", "present"])
        if trend.empty:
            st.info("No attendance trend yet.")
        else:
            render_plotly(line_chart(trend, x="day", y="present", theme=theme, yaxis_title="Present"))

    with right:
        st.subheader("Employees by Department")
        distribution = _frame(stats.department_distribution, ["name", "value"])
        if distribution.empty:
            st.info("No departments yet.")
        else:
            render_plotly(pie_chart(distribution, names="name", values="value", theme=theme))

    left, right = st.columns(2)
    with left:
        st.subheader("Today Attendance Status")
        status = _frame(stats.today_attendance_status, ["name", "count"])
        if status.empty:
            st.info("No attendance marked today.")
        else:
            render_plotly(status_bar_chart(status, x="name", y="count", theme=theme))

    with right:
        st.subheader("Recent Employees")
        headers, rows = employee_rows(data.recent_employees)
        render_table(headers, rows, empty_message="No employees found")
