"""
Page data loading: each page's fetches run concurrently and settle together.

A failed list fetch is logged and replaced by an empty list so the rest of
the page still renders. Dashboard stats degrade to None, which the page
shows as an error view.
"""

from __future__ import annotations

import datetime as dt
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from workforce_dashboard.data.gateway import GatewayClient
from workforce_dashboard.data.models import AttendanceRecord, DashboardStats, Employee
from workforce_dashboard.errors import TransportError

logger = logging.getLogger(__name__)

RECENT_EMPLOYEES = 5


@dataclass
class DashboardData:
    stats: Optional[DashboardStats]
    recent_employees: List[Employee] = field(default_factory=list)


@dataclass
class AttendancePageData:
    employees: List[Employee] = field(default_factory=list)
    records: List[AttendanceRecord] = field(default_factory=list)
    today_snapshot: List[AttendanceRecord] = field(default_factory=list)


def fetch_concurrently(
    tasks: Dict[str, Callable[[], Any]],
    fallbacks: Dict[str, Any],
) -> Dict[str, Any]:
    """Run every task in parallel and wait for all of them.

    A task raising TransportError resolves to its fallback value instead.
    """
    if not tasks:
        return {}
    results: Dict[str, Any] = {}
    # tasks share the client's requests.Session; only read-only GETs go through
    # here and urllib3's connection pool is thread-safe. Mutations stay serial.
    with ThreadPoolExecutor(max_workers=len(tasks)) as pool:
        futures = {name: pool.submit(task) for name, task in tasks.items()}
        for name, future in futures.items():
            try:
                results[name] = future.result()
            except TransportError as exc:
                logger.warning("Fetching %s failed, using fallback: %s", name, exc)
                results[name] = fallbacks.get(name)
    return results


def load_employees(client: GatewayClient) -> List[Employee]:
    try:
        return client.employees.list()
    except TransportError as exc:
        logger.warning("Fetching employees failed, using fallback: %s", exc)
        return []


def load_dashboard_data(client: GatewayClient) -> DashboardData:
    results = fetch_concurrently(
        {
            "stats": client.dashboard.get_stats,
            "employees": client.employees.list,
        },
        fallbacks={"stats": None, "employees": []},
    )
    return DashboardData(
        stats=results["stats"],
        recent_employees=results["employees"][:RECENT_EMPLOYEES],
    )


def load_attendance_page(client: GatewayClient, today: Optional[dt.date] = None) -> AttendancePageData:
    today = today or dt.date.today()
    results = fetch_concurrently(
        {
            "employees": client.employees.list,
            "records": client.attendance.list,
            "today_snapshot": lambda: client.attendance.today(today),
        },
        fallbacks={"employees": [], "records": [], "today_snapshot": []},
    )
    return AttendancePageData(**results)
