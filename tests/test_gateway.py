"""Gateway client tests: envelope unwrapping, request shapes, input checks
and transport failures.
"""

from __future__ import annotations

import datetime as dt
from unittest.mock import MagicMock

import pytest
import requests

from workforce_dashboard.config import ApiSettings
from workforce_dashboard.data.gateway import GatewayClient, unwrap_envelope
from workforce_dashboard.data.models import AttendanceRecord, DashboardStats, Employee, FormDraft
from workforce_dashboard.errors import TransportError
from tests.conftest import BASE_URL, FakeBackendSession, make_response


def _mock_session(response=None, side_effect=None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    if side_effect is not None:
        session.request.side_effect = side_effect
    else:
        session.request.return_value = response
    return session


# ── Envelope ────────────────────────────────────────────────────────


class TestUnwrapEnvelope:

    def test_unwraps_data(self):
        assert unwrap_envelope({"data": [1, 2], "success": True}) == [1, 2]

    def test_bare_body_passes_through(self):
        assert unwrap_envelope([1, 2]) == [1, 2]

    def test_object_without_data_passes_through(self):
        body = {"totalEmployees": 3}
        assert unwrap_envelope(body) == body

    def test_null_data_uses_body(self):
        body = {"data": None, "success": True}
        assert unwrap_envelope(body) == body

    def test_empty_list_data_is_unwrapped(self):
        assert unwrap_envelope({"data": [], "success": True}) == []


# ── Client setup ────────────────────────────────────────────────────


class TestClientSetup:

    def test_sets_json_headers(self, client, backend):
        assert backend.headers["Content-Type"] == "application/json"
        assert backend.headers["Accept"] == "application/json"

    def test_strips_trailing_slash(self, backend):
        gateway = GatewayClient(ApiSettings(base_url=BASE_URL + "/", timeout=3), session=backend)
        gateway.employees.list()
        assert backend.calls[-1]["url"] == f"{BASE_URL}/employees"
        assert backend.calls[-1]["timeout"] == 3

    def test_does_not_close_borrowed_session(self, settings, backend):
        with GatewayClient(settings, session=backend):
            pass
        assert backend.closed is False

    def test_closes_own_session(self, settings, monkeypatch):
        created = MagicMock(spec=requests.Session)
        created.headers = {}
        monkeypatch.setattr("workforce_dashboard.data.gateway.requests.Session", lambda: created)
        with GatewayClient(settings):
            pass
        created.close.assert_called_once()


# ── Employees ───────────────────────────────────────────────────────


class TestEmployeesApi:

    def test_list_decodes_envelope(self, client, backend):
        backend.employees["E1"] = {"id": "E1", "name": "Ann", "email": "ann@x.com", "department": "HR"}
        assert client.employees.list() == [Employee(id="E1", name="Ann", email="ann@x.com", department="HR")]

    def test_list_decodes_bare_body(self, settings):
        backend = FakeBackendSession(envelope=False)
        backend.employees["E1"] = {"id": "E1", "name": "Ann", "email": "ann@x.com", "department": "HR"}
        gateway = GatewayClient(settings, session=backend)
        assert [emp.id for emp in gateway.employees.list()] == ["E1"]

    def test_numeric_ids_become_strings(self, settings):
        session = _mock_session(make_response(200, [{"id": 7, "name": "Ann", "email": "a@b.co", "department": "HR"}]))
        gateway = GatewayClient(settings, session=session)
        assert gateway.employees.list()[0].id == "7"

    def test_create_update_get_delete(self, client, backend):
        created = client.employees.create(FormDraft(name="Ann", email="ann@x.com", department="HR"))
        assert created.id
        assert backend.calls[-1]["method"] == "POST"
        assert backend.calls[-1]["json"] == {"name": "Ann", "email": "ann@x.com", "department": "HR"}

        updated = client.employees.update(created.id, FormDraft(name="Ann B", email="ann@x.com", department="Sales"))
        assert updated == Employee(id=created.id, name="Ann B", email="ann@x.com", department="Sales")
        assert backend.calls[-1]["method"] == "PUT"
        assert backend.calls[-1]["url"] == f"{BASE_URL}/employees/{created.id}"

        assert client.employees.get_by_id(created.id).department == "Sales"

        confirmation = client.employees.delete(created.id)
        assert confirmation == {"message": "Employee deleted"}
        assert client.employees.list() == []

    def test_delete_with_empty_body(self, settings):
        session = _mock_session(make_response(204, None))
        gateway = GatewayClient(settings, session=session)
        assert gateway.employees.delete("E1") is None

    @pytest.mark.parametrize("bad_id", ["", "   ", None])
    def test_rejects_empty_id(self, client, backend, bad_id):
        with pytest.raises(ValueError):
            client.employees.get_by_id(bad_id)
        with pytest.raises(ValueError):
            client.employees.delete(bad_id)
        assert backend.calls == []


# ── Attendance ──────────────────────────────────────────────────────


class TestAttendanceApi:

    def test_list_without_date_sends_no_params(self, client, backend):
        client.attendance.list()
        assert backend.calls[-1]["params"] is None

    def test_list_with_date(self, client, backend):
        backend.attendance = [
            {"id": "A1", "employeeId": "E1", "date": "2024-05-01", "status": "Present"},
            {"id": "A2", "employeeId": "E1", "date": "2024-05-02", "status": "Absent"},
        ]
        result = client.attendance.list(dt.date(2024, 5, 2))
        assert backend.calls[-1]["params"] == {"date": "2024-05-02"}
        assert result == [AttendanceRecord(id="A2", employee_id="E1", date="2024-05-02", status="Absent")]

    def test_list_for_employee(self, client, backend):
        backend.attendance = [
            {"id": "A1", "employeeId": "E1", "date": "2024-05-01", "status": "Present"},
            {"id": "A2", "employeeId": "E2", "date": "2024-05-01", "status": "Absent"},
        ]
        result = client.attendance.list_for_employee("E2")
        assert backend.calls[-1]["url"] == f"{BASE_URL}/attendance/E2"
        assert [rec.id for rec in result] == ["A2"]

    def test_today_uses_given_date(self, client, backend):
        client.attendance.today(dt.date(2024, 1, 31))
        assert backend.calls[-1]["params"] == {"date": "2024-01-31"}

    def test_mark_attendance_returns_record(self, client):
        record = client.attendance.mark_attendance("E1", "2024-05-01", "Present")
        assert record.employee_id == "E1"
        assert record.status == "Present"
        assert record.id

    @pytest.mark.parametrize("bad_date", ["2024-5-1", "01/05/2024", "2024-02-30", "", "today"])
    def test_mark_rejects_bad_date(self, client, backend, bad_date):
        with pytest.raises(ValueError):
            client.attendance.mark_attendance("E1", bad_date, "Present")
        assert backend.calls == []

    @pytest.mark.parametrize("bad_status", ["present", "Late", "", None])
    def test_mark_rejects_bad_status(self, client, backend, bad_status):
        with pytest.raises(ValueError):
            client.attendance.mark_attendance("E1", "2024-05-01", bad_status)
        assert backend.calls == []

    def test_mark_rejects_empty_employee(self, client):
        with pytest.raises(ValueError):
            client.attendance.mark_attendance("", "2024-05-01", "Present")


# ── Dashboard ───────────────────────────────────────────────────────


class TestDashboardApi:

    def test_stats_decoded(self, client, backend):
        backend.stats = {
            "totalEmployees": 10,
            "presentToday": 7,
            "absentToday": 2,
            "totalDepartments": 4,
            "weeklyTrend": [{"day": "Mon", "present": 7}],
            "departmentDistribution": [{"name": "HR", "value": 3}],
            "todayAttendanceStatus": [{"name": "Present", "count": 7}],
        }
        stats = client.dashboard.get_stats()
        assert stats.total_employees == 10
        assert stats.present_today == 7
        assert stats.absent_today == 2
        assert stats.total_departments == 4
        assert stats.weekly_trend == [{"day": "Mon", "present": 7}]

    def test_missing_fields_default(self, settings):
        gateway = GatewayClient(settings, session=_mock_session(make_response(200, {"success": True})))
        assert gateway.dashboard.get_stats() == DashboardStats()


# ── Failures ────────────────────────────────────────────────────────


class TestTransportFailures:

    def test_http_error_carries_status_and_cause(self, client):
        with pytest.raises(TransportError) as exc_info:
            client.employees.get_by_id("missing")
        err = exc_info.value
        assert err.status_code == 404
        assert isinstance(err.cause, requests.HTTPError)
        assert err.__cause__ is err.cause

    def test_connection_error(self, settings):
        boom = requests.ConnectionError("connection refused")
        gateway = GatewayClient(settings, session=_mock_session(side_effect=boom))
        with pytest.raises(TransportError) as exc_info:
            gateway.employees.list()
        assert exc_info.value.cause is boom
        assert exc_info.value.status_code is None

    def test_timeout(self, settings):
        gateway = GatewayClient(settings, session=_mock_session(side_effect=requests.Timeout("slow")))
        with pytest.raises(TransportError):
            gateway.dashboard.get_stats()

    def test_invalid_json(self, settings):
        resp = make_response(200)
        resp._content = b"<html>oops</html>"
        gateway = GatewayClient(settings, session=_mock_session(resp))
        with pytest.raises(TransportError):
            gateway.employees.list()

    def test_no_retry(self, settings):
        session = _mock_session(side_effect=requests.ConnectionError("down"))
        gateway = GatewayClient(settings, session=session)
        with pytest.raises(TransportError):
            gateway.attendance.list()
        assert session.request.call_count == 1
