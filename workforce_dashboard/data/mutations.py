"""
Page-level mutation helpers.

Each helper calls the gateway once and turns a transport failure, or an id or
date the gateway rejects, into a MutationError carrying the message shown to
the user. Callers rerun the page afterwards so every list is refetched; nothing is patched locally.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from workforce_dashboard.data.forms import require_valid
from workforce_dashboard.data.gateway import GatewayClient
from workforce_dashboard.data.models import AttendanceRecord, Employee, FormDraft
from workforce_dashboard.errors import MutationError, TransportError

logger = logging.getLogger(__name__)

SAVE_FAILED = "Error saving employee. Please try again."
DELETE_FAILED = "Error deleting employee. Please try again."
MARK_FAILED = "Error marking attendance. Please try again."


def save_employee(client: GatewayClient, draft: FormDraft, editing_id: Optional[str] = None) -> Employee:
    """Create or update depending on `editing_id`.

    Raises ValidationError before any request when the draft is invalid.
    """
    require_valid(draft)
    try:
        if editing_id:
            return client.employees.update(editing_id, draft)
        return client.employees.create(draft)
    except (TransportError, ValueError) as exc:
        logger.exception("Saving employee %s failed", editing_id or "<new>")
        raise MutationError(SAVE_FAILED) from exc


def delete_employee(client: GatewayClient, employee_id: str) -> None:
    try:
        client.employees.delete(employee_id)
    except (TransportError, ValueError) as exc:
        logger.exception("Deleting employee %s failed", employee_id)
        raise MutationError(DELETE_FAILED) from exc


def mark_attendance(
    client: GatewayClient,
    employee_id: str,
    status: str,
    today: Optional[dt.date] = None,
) -> AttendanceRecord:
    """Mark `employee_id` for today; the backend overwrites an existing mark."""
    try:
        return client.attendance.mark_attendance(employee_id, today or dt.date.today(), status)
    except (TransportError, ValueError) as exc:
        logger.exception("Marking %s as %s failed", employee_id, status)
        raise MutationError(MARK_FAILED) from exc
