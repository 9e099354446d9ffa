"""Session state for the heatmap page.

The loaded collection is stored twice: ``STATE_ORIGINAL`` is written once per
session, ``STATE_DISPLAYED`` is replaced by every search. All functions take
the state mapping explicitly (``st.session_state`` on the page, a plain dict
in tests).
"""

import random
from typing import Any, Callable, Mapping, MutableMapping, Optional

import pandas as pd

from climb_areas import camera
from climb_areas.camera import CameraState
from climb_areas.data import empty_records, format_result_count
from climb_areas.search import filter_records
from climb_areas.settings import (
    MAP_KEY_PREFIX,
    STATE_CAMERA,
    STATE_DISPLAYED,
    STATE_INFO,
    STATE_ORIGINAL,
    STATE_QUERY,
    STATE_RESET_COUNT,
)
from climb_areas.utils import get_logger

logger = get_logger(__name__)

State = MutableMapping[str, Any]


def init_state(state: State) -> None:
    """Ensure initial values for every key used by the heatmap page."""
    state.setdefault(STATE_DISPLAYED, empty_records())
    state.setdefault(STATE_INFO, "")
    state.setdefault(STATE_CAMERA, camera.INITIAL_CAMERA)
    state.setdefault(STATE_QUERY, "")


def is_loaded(state: State) -> bool:
    return STATE_ORIGINAL in state


def publish_dataset(state: State, df_records: pd.DataFrame) -> None:
    """Store a freshly loaded collection as both original and displayed.

    The original collection is write-once; later calls are ignored.
    """
    if is_loaded(state):
        logger.warning("Dataset already published for this session, ignoring reload")
        return

    state[STATE_ORIGINAL] = df_records
    state[STATE_DISPLAYED] = df_records
    state[STATE_INFO] = format_result_count(len(df_records))
    logger.info(f"Published {len(df_records)} climbing areas")


def ensure_dataset(state: State, loader: Callable[[], Optional[pd.DataFrame]]) -> None:
    """Load and publish the dataset unless this session already has it.

    A loader returning None leaves the state untouched, so the next page run
    tries again.
    """
    init_state(state)
    if is_loaded(state):
        return
    df_records = loader()
    if df_records is None:
        return
    publish_dataset(state, df_records)


def get_original(state: State) -> pd.DataFrame:
    return state.get(STATE_ORIGINAL, empty_records())


def get_displayed(state: State) -> pd.DataFrame:
    return state.get(STATE_DISPLAYED, empty_records())


def get_info(state: State) -> str:
    return state.get(STATE_INFO, "")


def get_camera(state: State) -> CameraState:
    return state.get(STATE_CAMERA, camera.INITIAL_CAMERA)


def apply_search(state: State, query: str) -> None:
    """Replace the displayed collection with the records matching ``query``."""
    df_displayed, info = filter_records(get_original(state), query)
    state[STATE_QUERY] = query
    state[STATE_DISPLAYED] = df_displayed
    state[STATE_INFO] = info
    logger.debug(f"Search {query!r}: {info}")


def reset_camera(state: State) -> None:
    """Return to the default camera.

    The browser keeps its own camera after drag/zoom, so every reset also
    bumps the map key to remount the chart at the default view.
    """
    state[STATE_CAMERA] = camera.reset_camera()
    state[STATE_RESET_COUNT] = state.get(STATE_RESET_COUNT, 0) + 1


def map_key(state: State) -> str:
    return f"{MAP_KEY_PREFIX}_{state.get(STATE_RESET_COUNT, 0)}"


def fly_to_record(state: State, record: Mapping[str, Any], rng: Optional[random.Random] = None) -> None:
    state[STATE_CAMERA] = camera.fly_to(record, rng)


def fly_to_position(
    state: State,
    longitude: float,
    latitude: float,
    rng: Optional[random.Random] = None,
) -> None:
    state[STATE_CAMERA] = camera.fly_to_position(longitude, latitude, rng)
