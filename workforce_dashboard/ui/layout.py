"""
Layout helpers for the Streamlit application (page config, sidebar, header).
"""

from __future__ import annotations

from typing import List

import streamlit as st

from workforce_dashboard.config import TABS, TabConfig, resolve_page_key
from workforce_dashboard.ui.theme import Theme, current_theme, inject_theme_css, toggle_theme

NAV_STATE_KEY = "wd_page"
TAB_ICONS = {
    "dashboard": ":material/dashboard:",
    "employees": ":material/group:",
    "attendance": ":material/event_available:",
}


def setup_page() -> Theme:
    """Set Streamlit page configuration and return the active theme."""
    st.set_page_config(
        page_title="Workforce Admin",
        layout="wide",
        page_icon=":busts_in_silhouette:",
    )
    theme = current_theme()
    inject_theme_css(theme)
    return theme


FLASH_STATE_KEY = "wd_flash"


def page_header(title: str, subtitle: str) -> None:
    st.title(title)
    st.caption(subtitle)
    flash = st.session_state.pop(FLASH_STATE_KEY, None)
    if flash:
        st.toast(flash, icon="✅")


def flash_and_rerun(message: str) -> None:
    """Queue a toast for the next run, then rerun so every list is refetched."""
    st.session_state[FLASH_STATE_KEY] = message
    st.rerun()


def _tab_label(tab: TabConfig) -> str:
    icon = TAB_ICONS.get(tab.key)
    return f"{icon} {tab.label}" if icon else tab.label


def sidebar_navigation(tabs: List[TabConfig] = TABS) -> str:
    """
    Render page navigation, theme toggle and refresh control; return the selected page key.

    The first run honours `?page=<key>`; unknown keys land on the dashboard.
    """
    keys = [tab.key for tab in tabs]
    if NAV_STATE_KEY not in st.session_state:
        st.session_state[NAV_STATE_KEY] = resolve_page_key(st.query_params.get("page"))

    st.sidebar.header("Workforce Admin")
    selected = st.sidebar.radio(
        "Navigate",
        options=keys,
        format_func=lambda key: _tab_label(next(tab for tab in tabs if tab.key == key)),
        key=NAV_STATE_KEY,
        label_visibility="collapsed",
    )
    st.query_params["page"] = selected

    st.sidebar.divider()
    theme = current_theme()
    toggle_label = "☀️ Light mode" if theme.is_dark else "🌙 Dark mode"
    if st.sidebar.button(toggle_label, key="wd_theme_toggle", help="Switch between light and dark mode"):
        toggle_theme()
        st.rerun()

    if st.sidebar.button("🔄 Refresh Data", key="wd_refresh"):
        st.rerun()

    return selected
