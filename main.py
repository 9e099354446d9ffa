"""Spanish Climb Areas - Heatmap Page.

This page displays an extruded hexagon heatmap of climbing areas in Spain,
with a sidebar to search areas by name and fly the camera to them.
"""

import dataclasses

import streamlit as st

from climb_areas import state
from climb_areas.data import load_dataset
from climb_areas.map import build_heatmap_deck
from climb_areas.selection import extract_selected_bin
from climb_areas.settings import (
    APPLICATION_NAME,
    COLUMN_NAME,
    STATE_HEATMAP_CONFIG,
    HeatmapConfig,
)
from climb_areas.utils import (
    build_main_common_components,
    build_sidebar_common_components,
    get_logger,
    load_heatmap_config,
)

logger = get_logger(__name__)

SEARCH_INPUT_KEY = "search_input"
LAST_SELECTED_BIN_KEY = "last_selected_bin"
MAP_HEIGHT = 720


def build_heatmap_page() -> None:
    """Build the heatmap page with the search panel and the map."""
    session_state = st.session_state
    config = _get_heatmap_config()

    with st.spinner("Loading climbing areas..."):
        state.ensure_dataset(
            session_state,
            lambda: load_dataset(config.data_url, config.request_timeout),
        )
    if not state.is_loaded(session_state):
        st.warning("Could not load the climbing areas. Reload the page to try again.")

    config = _render_heatmap_settings(config)
    _render_search_panel()

    deck = build_heatmap_deck(
        state.get_displayed(session_state),
        state.get_camera(session_state),
        config,
    )
    selection_state = st.pydeck_chart(
        deck,
        height=MAP_HEIGHT,
        width="stretch",
        selection_mode="single-object",
        on_select="rerun",
        key=state.map_key(session_state),
    )
    _sync_selection_to_camera(selection_state)


def _get_heatmap_config() -> HeatmapConfig:
    """Load the configuration once per session."""
    if STATE_HEATMAP_CONFIG not in st.session_state:
        st.session_state[STATE_HEATMAP_CONFIG] = load_heatmap_config()
    return st.session_state[STATE_HEATMAP_CONFIG]


def _render_heatmap_settings(config: HeatmapConfig) -> HeatmapConfig:
    """Render sliders for the hexagon parameters and return the tuned config."""
    with st.sidebar.expander("Heatmap settings", expanded=False):
        radius = st.slider(
            "Hexagon radius (m)",
            min_value=500,
            max_value=10000,
            value=_clamp(int(config.radius), 500, 10000),
            step=250,
        )
        coverage = st.slider(
            "Coverage",
            min_value=0.1,
            max_value=1.0,
            value=_clamp(float(config.coverage), 0.1, 1.0),
            step=0.05,
        )
        upper_percentile = st.slider(
            "Upper percentile",
            min_value=50,
            max_value=100,
            value=_clamp(int(config.upper_percentile), 50, 100),
        )

    return dataclasses.replace(
        config,
        radius=radius,
        coverage=coverage,
        upper_percentile=upper_percentile,
    )


def _clamp(value, low, high):
    return min(max(value, low), high)


def _render_search_panel() -> None:
    """Render reset control, search box, result count and the area list."""
    session_state = st.session_state

    st.sidebar.button(
        "Reset position",
        on_click=state.reset_camera,
        args=(session_state,),
        width="stretch",
    )
    st.sidebar.text_input(
        "Search",
        placeholder="Search climb area",
        key=SEARCH_INPUT_KEY,
        on_change=_handle_search,
        label_visibility="collapsed",
    )
    st.sidebar.caption(state.get_info(session_state))

    df_displayed = state.get_displayed(session_state)
    with st.sidebar.container(height=480):
        for index, record in df_displayed.iterrows():
            st.button(
                record[COLUMN_NAME],
                key=f"area_{index}",
                on_click=state.fly_to_record,
                args=(session_state, record),
                width="stretch",
            )


def _handle_search() -> None:
    state.apply_search(st.session_state, st.session_state[SEARCH_INPUT_KEY])


def _sync_selection_to_camera(selection_state) -> None:
    """Fly to a clicked hexagon bin, once per distinct selection."""
    selected_bin = extract_selected_bin(selection_state)
    if not selected_bin:
        return

    position = selected_bin["position"]
    if st.session_state.get(LAST_SELECTED_BIN_KEY) == position:
        return

    st.session_state[LAST_SELECTED_BIN_KEY] = position
    logger.info(f"Hexagon selected at {position} ({selected_bin['count']} areas)")
    state.fly_to_position(st.session_state, *position)
    st.rerun()


if __name__ == "__main__":
    build_main_common_components(APPLICATION_NAME)
    build_sidebar_common_components()

    build_heatmap_page()
