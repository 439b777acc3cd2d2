from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from workforce_dashboard.ui.components.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[int] = None
    delta: Optional[str] = None
    delta_color: str = "normal"


def render_kpi_cards(cards: Sequence[KpiCard]) -> None:
    """Render the headline counts as one row of metric cards."""
    cards = list(cards)
    if not cards:
        return
    for col, card in zip(st.columns(len(cards)), cards):
        with col:
            st.metric(
                label=card.label,
                value=format_number(card.value),
                delta=card.delta,
                delta_color=card.delta_color,
            )
