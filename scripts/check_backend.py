"""Quick smoke check against the configured backend.

Run with `python scripts/check_backend.py` to confirm API_BASE_URL points at
a reachable backend and that each read endpoint decodes into records.
"""

from __future__ import annotations

import workforce_dashboard.bootstrap_env  # noqa: F401  loads .env and logging

from workforce_dashboard.config import load_api_settings
from workforce_dashboard.data.gateway import GatewayClient
from workforce_dashboard.errors import DashboardError


def main() -> None:
    settings = load_api_settings()
    print("Backend:", settings.base_url)

    failures = []
    with GatewayClient(settings) as client:
        checks = {
            "GET /employees": lambda: f"{len(client.employees.list())} employees",
            "GET /attendance": lambda: f"{len(client.attendance.list())} attendance records",
            "GET /attendance?date=today": lambda: f"{len(client.attendance.today())} marked today",
            "GET /dashboard/stats": lambda: f"{client.dashboard.get_stats().total_employees} employees in stats",
        }
        for name, check in checks.items():
            try:
                print(f"OK   {name}: {check()}")
            except DashboardError as exc:
                failures.append(name)
                print(f"FAIL {name}: {exc}")

    if failures:
        raise SystemExit(f"{len(failures)} endpoint(s) failed: {failures}")
    print("Backend check passed.")


if __name__ == "__main__":
    main()
