"""
Reusable helpers for rendering record tables and their CSV downloads.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd
import streamlit as st

from workforce_dashboard.data.export import CSV_MIME


def records_frame(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> pd.DataFrame:
    return pd.DataFrame(list(rows), columns=list(headers))


def render_table(
    headers: List[str],
    rows: List[List[str]],
    empty_message: str = "No records found",
    height: Optional[int] = None,
    status_column: Optional[str] = None,
) -> None:
    if not rows:
        st.info(empty_message)
        return

    df = records_frame(headers, rows)
    dataframe_obj = df
    if status_column and status_column in df.columns:
        def _style_func(val):
            if val == "Present":
                return "color: #22c55e; font-weight: 600;"
            if val == "Absent":
                return "color: #ef4444; font-weight: 600;"
            return ""

        dataframe_obj = df.style.map(_style_func, subset=[status_column])

    kwargs = {"height": height} if height else {}
    st.dataframe(
        dataframe_obj,
        use_container_width=True,
        hide_index=True,
        **kwargs,
    )


def render_download(file_name: str, csv_text: str, key: str, label: str = "Export CSV") -> None:
    st.download_button(
        label,
        data=csv_text.encode("utf-8"),
        file_name=file_name,
        mime=CSV_MIME,
        key=key,
    )
