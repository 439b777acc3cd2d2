from __future__ import annotations

from typing import List, Optional

import streamlit as st

from workforce_dashboard.config import DEPARTMENTS
from workforce_dashboard.data.export import employee_rows, employees_csv
from workforce_dashboard.data.filters import filter_employees
from workforce_dashboard.data.loader import load_employees
from workforce_dashboard.data.models import Employee, FormDraft
from workforce_dashboard.data.mutations import delete_employee, save_employee
from workforce_dashboard.errors import MutationError, ValidationError
from workforce_dashboard.ui.components.tables import render_download, render_table
from workforce_dashboard.ui.layout import flash_and_rerun, page_header
from workforce_dashboard.ui.pages.context import PageContext

FORM_OPEN_KEY = "wd_employee_form_open"
EDITING_KEY = "wd_employee_editing_id"
FORM_NONCE_KEY = "wd_employee_form_nonce"
PENDING_DELETE_KEY = "wd_employee_pending_delete"


def _open_form(employee: Optional[Employee]) -> None:
    st.session_state[FORM_OPEN_KEY] = True
    st.session_state[EDITING_KEY] = employee.id if employee else None
    # fresh widget keys so the inputs pick up the new defaults
    st.session_state[FORM_NONCE_KEY] = st.session_state.get(FORM_NONCE_KEY, 0) + 1


def _reset_form() -> None:
    st.session_state[FORM_OPEN_KEY] = False
    st.session_state[EDITING_KEY] = None


def _field_error(slot, errors, field: str) -> None:
    if field in errors:
        slot.error(errors[field])


def _render_form(context: PageContext, employees: List[Employee]) -> None:
    editing_id = st.session_state.get(EDITING_KEY)
    editing = next((emp for emp in employees if emp.id == editing_id), None) if editing_id else None
    initial = FormDraft.from_employee(editing) if editing else FormDraft()
    nonce = st.session_state.get(FORM_NONCE_KEY, 0)

    st.subheader("Edit Employee" if editing_id else "Add Employee")
    with st.form(f"wd_employee_form_{nonce}", clear_on_submit=False):
        name = st.text_input("Name *", value=initial.name, placeholder="Full Name", key=f"wd_form_name_{nonce}")
        name_error = st.empty()
        email = st.text_input(
            "Email *", value=initial.email, placeholder="email@company.com", key=f"wd_form_email_{nonce}"
        )
        email_error = st.empty()
        department_options = [""] + DEPARTMENTS
        if initial.department and initial.department not in department_options:
            department_options.append(initial.department)
        department = st.selectbox(
            "Department *",
            options=department_options,
            index=department_options.index(initial.department) if initial.department else 0,
            format_func=lambda v: v or "Select Department",
            key=f"wd_form_department_{nonce}",
        )
        department_error = st.empty()

        col_cancel, col_submit = st.columns(2)
        cancelled = col_cancel.form_submit_button("Cancel", use_container_width=True)
        submitted = col_submit.form_submit_button(
            "Update" if editing_id else "Add", type="primary", use_container_width=True
        )

    if cancelled:
        _reset_form()
        st.rerun()
    if not submitted:
        return

    draft = FormDraft(name=name, email=email, department=department)
    try:
        save_employee(context.client, draft, editing_id=editing_id)
    except ValidationError as exc:
        _field_error(name_error, exc.errors, "name")
        _field_error(email_error, exc.errors, "email")
        _field_error(department_error, exc.errors, "department")
        return
    except MutationError as exc:
        st.error(exc.message)
        return
    _reset_form()
    flash_and_rerun("Employee updated" if editing_id else "Employee added")


def _render_delete_confirmation(context: PageContext, employee: Employee) -> None:
    st.warning(f"Are you sure you want to delete {employee.name} ({employee.id})?")
    col_yes, col_no = st.columns(2)
    if col_yes.button("Delete", type="primary", key="wd_employee_delete_confirm", use_container_width=True):
        try:
            delete_employee(context.client, employee.id)
        except MutationError as exc:
            st.session_state[PENDING_DELETE_KEY] = None
            st.error(exc.message)
            return
        st.session_state[PENDING_DELETE_KEY] = None
        flash_and_rerun("Employee deleted")
    if col_no.button("Cancel", key="wd_employee_delete_cancel", use_container_width=True):
        st.session_state[PENDING_DELETE_KEY] = None
        st.rerun()


def _render_actions(context: PageContext, filtered: List[Employee]) -> None:
    if not filtered:
        return
    st.markdown("**Manage employee**")
    by_id = {emp.id: emp for emp in filtered}
    col_select, col_edit, col_delete = st.columns([3, 1, 1], vertical_alignment="bottom")
    with col_select:
        selected_id = st.selectbox(
            "Employee",
            options=list(by_id),
            format_func=lambda emp_id: f"{by_id[emp_id].name} · {emp_id}",
            key="wd_employee_selected",
        )
    if col_edit.button("Edit", key="wd_employee_edit", use_container_width=True):
        _open_form(by_id[selected_id])
        st.rerun()
    if col_delete.button("Delete", key="wd_employee_delete", use_container_width=True):
        st.session_state[PENDING_DELETE_KEY] = selected_id

    pending = st.session_state.get(PENDING_DELETE_KEY)
    if pending and pending in by_id:
        _render_delete_confirmation(context, by_id[pending])


def render(context: PageContext) -> None:
    page_header("Employee Management", "Manage your organization's employees")

    with st.spinner("Loading employees…"):
        employees = load_employees(context.client)

    search = st.text_input(
        "Search",
        placeholder="Search by name, email, department, or ID...",
        key="wd_employee_search",
        label_visibility="collapsed",
    )
    filtered = filter_employees(employees, search)

    col_export, col_add, _ = st.columns([1, 1, 4])
    with col_export:
        file_name, csv_text = employees_csv(filtered, today=context.today)
        render_download(file_name, csv_text, key="wd_employee_export")
    with col_add:
        if st.button("Add Employee", type="primary", key="wd_employee_add"):
            _open_form(None)

    if st.session_state.get(FORM_OPEN_KEY):
        _render_form(context, employees)

    headers, rows = employee_rows(filtered)
    render_table(
        headers,
        rows,
        empty_message="No employees found matching your search" if search else "No employees found",
    )
    st.caption(f"Showing {len(filtered)} of {len(employees)} employees")

    _render_actions(context, filtered)
