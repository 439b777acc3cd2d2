"""
HTTP client for the workforce backend (employees, attendance, dashboard stats).

Every call is a direct pass-through: no retries, no caching, no status-code
interpretation. Transport problems surface as `TransportError`.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Any, Dict, List, Optional

import requests

from workforce_dashboard.config import ApiSettings
from workforce_dashboard.data.models import (
    ATTENDANCE_STATUSES,
    AttendanceRecord,
    DashboardStats,
    DateLike,
    Employee,
    FormDraft,
)
from workforce_dashboard.errors import TransportError

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def unwrap_envelope(body: Any) -> Any:
    """Return `body["data"]` for `{data, success}` envelopes, else the body itself."""
    if isinstance(body, dict) and body.get("data") is not None:
        return body["data"]
    return body


def _require_id(value: Any, label: str) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise ValueError(f"{label} must be a non-empty string")
    return text


def _require_date(value: DateLike) -> str:
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    text = "" if value is None else str(value).strip()
    if not ISO_DATE_RE.match(text):
        raise ValueError(f"date must be an ISO calendar date (YYYY-MM-DD), got {value!r}")
    try:
        dt.date.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"date must be an ISO calendar date (YYYY-MM-DD), got {value!r}") from exc
    return text


def _require_status(value: str) -> str:
    if value not in ATTENDANCE_STATUSES:
        raise ValueError(f"status must be one of {ATTENDANCE_STATUSES}, got {value!r}")
    return value


def _as_list(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    return []


class GatewayClient:
    """Session holder; exposes the three resource groups as attributes.

    Use as a context manager so the underlying session is closed::

        with GatewayClient(load_api_settings()) as client:
            employees = client.employees.list()
    """

    def __init__(self, settings: ApiSettings, session: Optional[requests.Session] = None):
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        self.employees = EmployeesApi(self)
        self.attendance = AttendanceApi(self)
        self.dashboard = DashboardApi(self)

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    # ── HTTP ──────────────────────────────────────────────────────────

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the unwrapped JSON payload (None for an empty body)."""
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params)
        try:
            resp = self.session.request(method, url, params=params, json=json, timeout=self.timeout)
            resp.raise_for_status()
            if not resp.content:
                return None
            body = resp.json()
        except requests.RequestException as exc:
            response = getattr(exc, "response", None)
            status_code = getattr(response, "status_code", None)
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {path} failed: {exc}", cause=exc, status_code=status_code) from exc
        return unwrap_envelope(body)


class EmployeesApi:
    def __init__(self, client: GatewayClient):
        self._client = client

    def list(self) -> List[Employee]:
        payload = self._client.request("GET", "/employees")
        return [Employee.from_dict(item) for item in _as_list(payload)]

    def get_by_id(self, employee_id: str) -> Employee:
        employee_id = _require_id(employee_id, "id")
        payload = self._client.request("GET", f"/employees/{employee_id}")
        return Employee.from_dict(payload or {})

    def create(self, draft: FormDraft) -> Employee:
        payload = self._client.request("POST", "/employees", json=draft.to_payload())
        return Employee.from_dict(payload or {})

    def update(self, employee_id: str, draft: FormDraft) -> Employee:
        employee_id = _require_id(employee_id, "id")
        payload = self._client.request("PUT", f"/employees/{employee_id}", json=draft.to_payload())
        return Employee.from_dict(payload or {})

    def delete(self, employee_id: str) -> Any:
        employee_id = _require_id(employee_id, "id")
        return self._client.request("DELETE", f"/employees/{employee_id}")


class AttendanceApi:
    def __init__(self, client: GatewayClient):
        self._client = client

    def list(self, date: Optional[DateLike] = None) -> List[AttendanceRecord]:
        params = {"date": _require_date(date)} if date else None
        payload = self._client.request("GET", "/attendance", params=params)
        return [AttendanceRecord.from_dict(item) for item in _as_list(payload)]

    def list_for_employee(self, employee_id: str) -> List[AttendanceRecord]:
        employee_id = _require_id(employee_id, "employeeId")
        payload = self._client.request("GET", f"/attendance/{employee_id}")
        return [AttendanceRecord.from_dict(item) for item in _as_list(payload)]

    def mark_attendance(self, employee_id: str, date: DateLike, status: str) -> AttendanceRecord:
        body = {
            "employeeId": _require_id(employee_id, "employeeId"),
            "date": _require_date(date),
            "status": _require_status(status),
        }
        payload = self._client.request("POST", "/attendance", json=body)
        if isinstance(payload, dict):
            return AttendanceRecord.from_dict(payload)
        return AttendanceRecord.from_dict(body)

    def today(self, today: Optional[dt.date] = None) -> List[AttendanceRecord]:
        return self.list(today or dt.date.today())


class DashboardApi:
    def __init__(self, client: GatewayClient):
        self._client = client

    def get_stats(self) -> DashboardStats:
        payload = self._client.request("GET", "/dashboard/stats")
        return DashboardStats.from_dict(payload if isinstance(payload, dict) else {})
