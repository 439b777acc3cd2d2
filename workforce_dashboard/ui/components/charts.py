"""
Plotly chart factory functions with consistent, theme-aware styling.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from workforce_dashboard.ui.theme import Theme

DEFAULT_COLOR_SEQUENCE = [
    "#9333ea",  # purple accent
    "#22c55e",  # green for present
    "#f97316",
    "#ef4444",  # red for absent
    "#a855f7",
    "#06b6d4",
]
STATUS_COLORS = {"Present": "#22c55e", "Absent": "#ef4444"}


def _configure_layout(fig: go.Figure, theme: Theme, height: int, yaxis_title: Optional[str] = None) -> go.Figure:
    fig.update_layout(
        template=theme.plotly_template,
        colorway=DEFAULT_COLOR_SEQUENCE,
        height=height,
        hoverlabel=theme.tooltip_style(),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=40, r=20, t=20, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False, color=theme.axis_color())
    fig.update_yaxes(showgrid=True, zeroline=True, color=theme.axis_color())
    return fig

def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

def line_chart(df: pd.DataFrame, x: str, y: str, theme: Theme, yaxis_title: Optional[str] = None) -> go.Figure:
    fig = px.line(df, x=x, y=y, markers=True)
    fig.update_traces(line=dict(color=theme.accent, width=3), marker=dict(size=9))
    return _configure_layout(fig, theme, height=280, yaxis_title=yaxis_title)

def status_bar_chart(df: pd.DataFrame, x: str, y: str, theme: Theme) -> go.Figure:
    """Bars coloured per status; unknown statuses fall back to the accent colour."""
    color_map = {name: STATUS_COLORS.get(name, theme.accent) for name in df[x].astype(str)}
    fig = px.bar(df, x=x, y=y, color=x, color_discrete_map=color_map)
    fig.update_layout(showlegend=False)
    return _configure_layout(fig, theme, height=250)

def pie_chart(df: pd.DataFrame, names: str, values: str, theme: Theme) -> go.Figure:
    fig = px.pie(df, names=names, values=values, color_discrete_sequence=DEFAULT_COLOR_SEQUENCE)
    fig.update_traces(textinfo="label+percent", texttemplate="%{label}: %{percent:.0%}")
    fig = _configure_layout(fig, theme, height=280)
    fig.update_layout(showlegend=False)
    return fig
