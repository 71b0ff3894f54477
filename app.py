import logging
from datetime import datetime, timedelta

import streamlit as st
from pydantic import ValidationError

from farm_dashboard.charts import GAUGE_CONFIG, sensor_gauge
from farm_dashboard.components import (
    footer_html,
    header_html,
    pump_logic_html,
    sensor_card_html,
    status_bar_html,
    summary_html,
)
from farm_dashboard.config import Settings, load_settings
from farm_dashboard.controller import DashboardController
from farm_dashboard.models import Theme
from farm_dashboard.theme import theme_css


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _controller(settings: Settings) -> DashboardController:
    # One controller per browser session; it is dropped (and its poller
    # stopped) together with the session state.
    if "controller" not in st.session_state:
        controller = DashboardController.from_settings(settings)
        controller.mount()
        st.session_state.controller = controller
    return st.session_state.controller


def _render_live(controller: DashboardController) -> None:
    controller.tick(datetime.now().astimezone())
    view = controller.view()

    st.markdown(header_html(view), unsafe_allow_html=True)
    st.markdown(status_bar_html(view), unsafe_allow_html=True)
    st.markdown(summary_html(view), unsafe_allow_html=True)

    columns = st.columns(len(view.cards))
    for col, card in zip(columns, view.cards):
        with col:
            st.markdown(sensor_card_html(card), unsafe_allow_html=True)
            st.plotly_chart(
                sensor_gauge(card, view.theme),
                use_container_width=True,
                config=GAUGE_CONFIG,
                key=f"gauge-{card.kind}",
            )

    st.markdown(pump_logic_html(), unsafe_allow_html=True)
    st.markdown(footer_html(view), unsafe_allow_html=True)


def main() -> None:
    st.set_page_config(page_title="Smart Farm Dashboard", page_icon="💧", layout="wide")
    try:
        settings = load_settings()
    except (RuntimeError, ValidationError) as exc:
        st.error(str(exc))
        st.stop()
    _setup_logging(settings.log_level)

    controller = _controller(settings)
    st.markdown(theme_css(controller.state.theme), unsafe_allow_html=True)

    _, toggle_col = st.columns([8, 1])
    with toggle_col:
        label = "☀️ Light" if controller.state.theme == Theme.DARK else "🌙 Dark"
        st.button(label, on_click=controller.toggle_theme, help="Toggle theme")

    live = st.fragment(_render_live, run_every=timedelta(seconds=settings.clock_tick_secs))
    live(controller)


if __name__ == "__main__":
    main()
