"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from workforce_dashboard.errors import ConfigurationError


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered page definitions for the sidebar navigation
TABS: List[TabConfig] = [
    TabConfig("dashboard", "Dashboard"),
    TabConfig("employees", "Employees"),
    TabConfig("attendance", "Attendance"),
]
DEFAULT_TAB = "dashboard"

DEPARTMENTS: List[str] = [
    "Engineering",
    "HR",
    "Sales",
    "Finance",
    "Marketing",
    "Operations",
]

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ApiSettings:
    base_url: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        pass
    return default


def resolve_page_key(requested: Optional[str]) -> str:
    """Map a requested page key onto a known tab, falling back to the dashboard."""
    if requested:
        key = str(requested).strip().lower()
        if any(tab.key == key for tab in TABS):
            return key
    return DEFAULT_TAB


def load_api_settings() -> ApiSettings:
    """Resolve backend connection settings from env, .env or Streamlit secrets.

    The base URL must be configured explicitly through API_BASE_URL.
    """
    base_url = (get_secret("API_BASE_URL") or "").strip()
    if not base_url:
        raise ConfigurationError(
            "API_BASE_URL is not set (env, .env or Streamlit secrets). "
            "Example: API_BASE_URL=http://localhost:5000/api"
        )
    base_url = base_url.rstrip("/")

    raw_timeout = get_secret("API_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"API_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"API_TIMEOUT_SECONDS must be positive, got {raw_timeout!r}")

    return ApiSettings(base_url=base_url, timeout=timeout)
