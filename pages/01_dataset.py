import streamlit as st

from climb_areas import state
from climb_areas.data import load_dataset
from climb_areas.settings import COLUMN_NAME, COLUMN_VALUE, STATE_HEATMAP_CONFIG
from climb_areas.statistics import calculate_dataset_stats, coordinate_ranges, top_areas
from climb_areas.utils import (
    build_main_common_components,
    build_sidebar_common_components,
    get_logger,
    load_heatmap_config,
)

logger = get_logger(__name__)


def build_dataset_page() -> None:
    """Build the dataset page with statistics and the raw records."""
    session_state = st.session_state
    config = session_state.get(STATE_HEATMAP_CONFIG) or load_heatmap_config()

    with st.spinner("Loading climbing areas..."):
        state.ensure_dataset(
            session_state,
            lambda: load_dataset(config.data_url, config.request_timeout),
        )

    if not state.is_loaded(session_state):
        st.warning("Could not load the climbing areas. Reload the page to try again.")
        return

    df_original = state.get_original(session_state)
    if df_original.empty:
        st.info("No climbing areas available.")
        return

    _render_statistics(df_original)
    _render_summaries(df_original)


def _render_statistics(df_records) -> None:
    """Render statistics cards for the loaded data."""
    stats = calculate_dataset_stats(df_records)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric(label="🧗 Areas", value=f"{stats['total_areas']:,}")
    with col2:
        st.metric(label="Total", value=f"{stats['total_value']:,.0f}")
    with col3:
        st.metric(label="Max", value=f"{stats['max_value']:,.0f}")
    with col4:
        st.metric(label="Mean", value=f"{stats['mean_value']:,.1f}")

    if stats["missing_values"]:
        st.warning(f"{stats['missing_values']} area(s) have a non-numeric value.")


def _render_summaries(df_records) -> None:
    """Render expandable data summaries."""
    with st.expander("Top Areas", expanded=True):
        st.dataframe(top_areas(df_records), width="stretch", hide_index=True)

    with st.expander("Geographic Coverage", expanded=False):
        ranges = coordinate_ranges(df_records)
        for axis, bounds in ranges.items():
            if bounds is None:
                continue
            st.write(f"- {axis.capitalize()} range: {bounds[0]:.2f} to {bounds[1]:.2f}")

    with st.expander("DataFrame - Climbing Areas", expanded=False):
        st.dataframe(
            df_records[[COLUMN_NAME, COLUMN_VALUE]],
            width="stretch",
            height=360,
        )


if __name__ == "__main__":
    build_main_common_components("Dataset")
    build_sidebar_common_components()

    build_dataset_page()
