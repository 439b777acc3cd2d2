from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from workforce_dashboard.data.gateway import GatewayClient
from workforce_dashboard.ui.theme import Theme


@dataclass
class PageContext:
    client: GatewayClient
    theme: Theme
    today: dt.date
