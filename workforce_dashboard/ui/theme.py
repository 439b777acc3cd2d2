"""
Light/dark theme values.

The active theme is resolved once per run from session state and handed to
pages and charts through `PageContext`; nothing reads it globally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, MutableMapping

import streamlit as st

THEME_STATE_KEY = "wd_theme"
LIGHT = "light"
DARK = "dark"


@dataclass(frozen=True)
class Theme:
    name: str
    bg_primary: str
    bg_secondary: str
    bg_card: str
    text_primary: str
    text_secondary: str
    border_color: str
    accent: str
    plotly_template: str

    @property
    def is_dark(self) -> bool:
        return self.name == DARK

    def tooltip_style(self) -> Dict[str, object]:
        """Plotly `hoverlabel` settings matching the card colours."""
        return {
            "bgcolor": self.bg_card,
            "bordercolor": self.border_color,
            "font": {"color": self.text_primary},
        }

    def axis_color(self) -> str:
        return self.text_secondary

    def css_variables(self) -> str:
        return (
            f"--bg-primary: {self.bg_primary};"
            f"--bg-secondary: {self.bg_secondary};"
            f"--bg-card: {self.bg_card};"
            f"--text-primary: {self.text_primary};"
            f"--text-secondary: {self.text_secondary};"
            f"--border-color: {self.border_color};"
            f"--accent-purple: {self.accent};"
        )


THEMES: Dict[str, Theme] = {
    LIGHT: Theme(
        name=LIGHT,
        bg_primary="#f8fafc",
        bg_secondary="#f1f5f9",
        bg_card="#ffffff",
        text_primary="#0f172a",
        text_secondary="#475569",
        border_color="#e2e8f0",
        accent="#9333ea",
        plotly_template="plotly_white",
    ),
    DARK: Theme(
        name=DARK,
        bg_primary="#0b0f19",
        bg_secondary="#111827",
        bg_card="#1f2937",
        text_primary="#f9fafb",
        text_secondary="#9ca3af",
        border_color="#374151",
        accent="#a855f7",
        plotly_template="plotly_dark",
    ),
}


def resolve_theme(name: str | None) -> Theme:
    return THEMES.get(name or LIGHT, THEMES[LIGHT])


def toggled_name(name: str | None) -> str:
    return LIGHT if name == DARK else DARK


def current_theme(state: MutableMapping | None = None) -> Theme:
    """Read the theme from session state, initialising it to light on first load."""
    state = st.session_state if state is None else state
    if THEME_STATE_KEY not in state:
        state[THEME_STATE_KEY] = LIGHT
    return resolve_theme(state[THEME_STATE_KEY])


def toggle_theme(state: MutableMapping | None = None) -> Theme:
    state = st.session_state if state is None else state
    state[THEME_STATE_KEY] = toggled_name(state.get(THEME_STATE_KEY))
    return resolve_theme(state[THEME_STATE_KEY])


def inject_theme_css(theme: Theme) -> None:
    st.markdown(
        f"""
        <style>
        :root {{ {theme.css_variables()} }}
        .stApp {{
            background-color: var(--bg-primary);
            color: var(--text-primary);
        }}
        div[data-testid="stSidebar"] {{
            background-color: var(--bg-secondary);
        }}
        div[data-testid="stMetric"] {{
            background-color: var(--bg-card);
            border: 1px solid var(--border-color);
            border-radius: 16px;
            padding: 12px 16px;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )
