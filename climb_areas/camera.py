"""Camera positions for the heatmap view.

The browser animates between positions; this module only decides where
the camera should end up.
"""

import random
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import pydeck

from climb_areas.settings import (
    COLUMN_COORDINATES,
    DEFAULT_MAP_BEARING,
    DEFAULT_MAP_LATITUDE,
    DEFAULT_MAP_LONGITUDE,
    DEFAULT_MAP_PITCH,
    DEFAULT_MAP_ZOOM,
    FLY_TO_BEARING_RANGE,
    FLY_TO_ZOOM,
    MAX_MAP_ZOOM,
    MIN_MAP_ZOOM,
    TRANSITION_DURATION_MS,
)
from climb_areas.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CameraState:
    longitude: float
    latitude: float
    zoom: float
    min_zoom: float = MIN_MAP_ZOOM
    max_zoom: float = MAX_MAP_ZOOM
    pitch: float = DEFAULT_MAP_PITCH
    bearing: float = DEFAULT_MAP_BEARING
    transition_duration_ms: int = TRANSITION_DURATION_MS

    def to_view_state(self) -> pydeck.ViewState:
        """Build the pydeck view state, animated with deck.gl's FlyToInterpolator."""
        return pydeck.ViewState(
            longitude=self.longitude,
            latitude=self.latitude,
            zoom=self.zoom,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
            pitch=self.pitch,
            bearing=self.bearing,
            transition_duration=self.transition_duration_ms,
            transition_interpolator={"@@type": "FlyToInterpolator"},
        )


INITIAL_CAMERA = CameraState(
    longitude=DEFAULT_MAP_LONGITUDE,
    latitude=DEFAULT_MAP_LATITUDE,
    zoom=DEFAULT_MAP_ZOOM,
)


def reset_camera() -> CameraState:
    return INITIAL_CAMERA


def random_bearing(rng: Optional[random.Random] = None) -> int:
    """Pick a bearing uniformly from the inclusive fly-to range."""
    low, high = FLY_TO_BEARING_RANGE
    return (rng or random).randint(low, high)


def fly_to_position(
    longitude: float,
    latitude: float,
    rng: Optional[random.Random] = None,
) -> CameraState:
    bearing = random_bearing(rng)
    logger.debug(f"Flying to ({longitude}, {latitude}) with bearing {bearing}")
    return CameraState(
        longitude=longitude,
        latitude=latitude,
        zoom=FLY_TO_ZOOM,
        bearing=bearing,
    )


def fly_to(record: Mapping[str, Any], rng: Optional[random.Random] = None) -> CameraState:
    """Camera centred on a LocationRecord.

    Args:
        record: LocationRecord row (Series or dict) with a COORDINATES entry
        rng: Random generator for the bearing; the module generator if None

    Returns:
        CameraState at the record's coordinates with fly-to zoom
    """
    coordinates: Sequence[float] = record[COLUMN_COORDINATES]
    return fly_to_position(coordinates[0], coordinates[1], rng)

