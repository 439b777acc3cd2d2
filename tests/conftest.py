"""Shared test fixtures: fake backend session, gateway client and record factories.

The fake session stands in for `requests.Session`: it routes
GET/POST/PUT/DELETE on the backend paths to in-memory dictionaries and
answers with `{data, success}` envelopes, so gateway round trips run
without a network.
"""

from __future__ import annotations

import itertools
import json
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import pytest
import requests

from workforce_dashboard.config import ApiSettings
from workforce_dashboard.data.gateway import GatewayClient
from workforce_dashboard.data.models import AttendanceRecord, Employee

BASE_URL = "http://backend.test/api"


def make_response(status_code: int = 200, body: Any = None, url: str = BASE_URL) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    resp._content = b"" if body is None else json.dumps(body).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    return resp


def _employee(**overrides) -> Employee:
    data = dict(id="E1", name="Ann Lee", email="ann@example.com", department="HR")
    data.update(overrides)
    return Employee(**data)


def _record(**overrides) -> AttendanceRecord:
    data = dict(id="A1", employee_id="E1", date="2024-05-01", status="Present")
    data.update(overrides)
    return AttendanceRecord(**data)


class FakeBackendSession:
    """Minimal in-memory stand-in for the REST backend."""

    def __init__(self, envelope: bool = True):
        self.envelope = envelope
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []
        self.employees: Dict[str, Dict[str, Any]] = {}
        self.attendance: List[Dict[str, Any]] = []
        self.stats: Dict[str, Any] = {}
        self.closed = False
        self._ids = itertools.count(1)

    def close(self) -> None:
        self.closed = True

    def _ok(self, payload: Any, status_code: int = 200) -> requests.Response:
        body = {"data": payload, "success": True} if self.envelope else payload
        return make_response(status_code, body)

    def request(self, method: str, url: str, params=None, json=None, timeout=None) -> requests.Response:
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        path = urlparse(url).path[len(urlparse(BASE_URL).path):]
        parts = [p for p in path.split("/") if p]

        if parts[:1] == ["employees"]:
            return self._employees(method, parts[1] if len(parts) > 1 else None, json)
        if parts[:1] == ["attendance"]:
            return self._attendance(method, parts[1] if len(parts) > 1 else None, params, json)
        if parts == ["dashboard", "stats"] and method == "GET":
            return self._ok(self.stats)
        return make_response(404, {"success": False, "message": "Not found"}, url)

    def _employees(self, method: str, employee_id: Optional[str], body) -> requests.Response:
        if method == "GET" and employee_id is None:
            return self._ok(list(self.employees.values()))
        if method == "POST":
            new_id = f"EMP{next(self._ids):03d}"
            self.employees[new_id] = dict(body, id=new_id)
            return self._ok(self.employees[new_id], 201)
        if employee_id not in self.employees:
            return make_response(404, {"success": False, "message": "Employee not found"})
        if method == "GET":
            return self._ok(self.employees[employee_id])
        if method == "PUT":
            self.employees[employee_id] = dict(body, id=employee_id)
            return self._ok(self.employees[employee_id])
        if method == "DELETE":
            del self.employees[employee_id]
            return self._ok({"message": "Employee deleted"})
        return make_response(405)

    def _attendance(self, method: str, employee_id: Optional[str], params, body) -> requests.Response:
        if method == "GET" and employee_id:
            return self._ok([r for r in self.attendance if r["employeeId"] == employee_id])
        if method == "GET":
            date = (params or {}).get("date")
            return self._ok([r for r in self.attendance if not date or r["date"] == date])
        if method == "POST":
            # last write wins for the same employee and day
            self.attendance = [
                r for r in self.attendance
                if not (r["employeeId"] == body["employeeId"] and r["date"] == body["date"])
            ]
            record = dict(body, id=f"ATT{next(self._ids):03d}")
            self.attendance.append(record)
            return self._ok(record, 201)
        return make_response(405)


@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings(base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def backend() -> FakeBackendSession:
    return FakeBackendSession()


@pytest.fixture
def client(settings, backend) -> GatewayClient:
    with GatewayClient(settings, session=backend) as gateway:
        yield gateway


@pytest.fixture
def employees() -> List[Employee]:
    return [
        _employee(id="E1", name="Ann Lee", email="ann@example.com", department="HR"),
        _employee(id="E2", name="Bob Stone", email="bob@corp.io", department="Engineering"),
        _employee(id="ENG-7", name="Cara Diaz", email="cara@example.com", department="Sales"),
    ]


@pytest.fixture
def records() -> List[AttendanceRecord]:
    return [
        _record(id="A1", employee_id="E1", date="2024-05-01", status="Present"),
        _record(id="A2", employee_id="E2", date="2024-05-02", status="Absent"),
        _record(id="A3", employee_id="E1", date="2024-05-02", status="Absent"),
        _record(id="A4", employee_id="ghost", date="2024-05-03", status="Present"),
    ]
