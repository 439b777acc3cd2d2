import workforce_dashboard.bootstrap_env  # must be first to set env/secrets and logging
import datetime as dt
import logging

import streamlit as st

from workforce_dashboard.config import load_api_settings
from workforce_dashboard.data.gateway import GatewayClient
from workforce_dashboard.errors import ConfigurationError
from workforce_dashboard.ui.layout import setup_page, sidebar_navigation
from workforce_dashboard.ui.pages import attendance, dashboard, employees
from workforce_dashboard.ui.pages.context import PageContext

logger = logging.getLogger("workforce_dashboard.app")

PAGE_RENDERERS = {
    "dashboard": dashboard.render,
    "employees": employees.render,
    "attendance": attendance.render,
}


def main() -> None:
    theme = setup_page()
    page_key = sidebar_navigation()

    try:
        settings = load_api_settings()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        st.error(str(exc))
        return

    with GatewayClient(settings) as client:
        context = PageContext(client=client, theme=theme, today=dt.date.today())
        renderer = PAGE_RENDERERS.get(page_key, dashboard.render)
        renderer(context)


if __name__ == "__main__":
    main()
