"""Application settings and constants for Spanish Climb Areas.

This module centralizes all configuration values, constants, and
settings used across the application. Rendering parameters are kept
as immutable structures and handed to the deck builder explicitly.
"""

from dataclasses import dataclass
from typing import Tuple

# Application metadata
APPLICATION_NAME = "🧗 Spanish Climb Areas"
APPLICATION_VERSION = "1.0.0"

# Source data CSV
DATA_URL = "https://raw.githubusercontent.com/menusal/dataviz/main/escuelas_escalada.csv"
DEFAULT_REQUEST_TIMEOUT = 30

# Source feed columns
SOURCE_FIRST_COORDINATE = "lat"
SOURCE_SECOND_COORDINATE = "lng"
SOURCE_VALUE = "num"
SOURCE_NAME = "escuela"
SOURCE_COLUMNS = (SOURCE_FIRST_COORDINATE, SOURCE_SECOND_COORDINATE, SOURCE_VALUE, SOURCE_NAME)

# LocationRecord columns
COLUMN_COORDINATES = "COORDINATES"
COLUMN_VALUE = "VALUE"
COLUMN_NAME = "NAME"
RECORD_COLUMNS = [COLUMN_COORDINATES, COLUMN_VALUE, COLUMN_NAME]

# Search settings
MIN_QUERY_LENGTH = 2
NO_RESULTS_MESSAGE = "No results found"

# Basemap
MAP_STYLE = "https://basemaps.cartocdn.com/gl/dark-matter-nolabels-gl-style/style.json"

# Heatmap defaults
DEFAULT_RADIUS = 2000
DEFAULT_UPPER_PERCENTILE = 100
DEFAULT_COVERAGE = 1
ELEVATION_RANGE = (0, 5000)
ELEVATION_SCALE = 50
ELEVATION_SCALE_TRANSITION_MS = 5000

HEATMAP_LAYER_ID = "heatmap"

# Blue -> teal -> green -> yellow -> orange -> red
COLOR_RANGE: Tuple[Tuple[int, int, int], ...] = (
    (1, 152, 189),
    (73, 227, 206),
    (216, 254, 181),
    (254, 237, 177),
    (254, 173, 84),
    (209, 55, 78),
)

# Camera settings
DEFAULT_MAP_LONGITUDE = -3.74922
DEFAULT_MAP_LATITUDE = 40.463669
DEFAULT_MAP_ZOOM = 5.8
MIN_MAP_ZOOM = 2
MAX_MAP_ZOOM = 15
DEFAULT_MAP_PITCH = 40.5
DEFAULT_MAP_BEARING = -45
FLY_TO_ZOOM = 11.8
FLY_TO_BEARING_RANGE = (-120, 240)  # inclusive
TRANSITION_DURATION_MS = 4000

# Tooltip
TOOLTIP_HTML = "<div><p><b>{elevationValue}</b> Vías</p></div>"
TOOLTIP_STYLE = {
    "backgroundColor": "#f3f3f3",
    "fontSize": "0.8em",
    "color": "#111",
}

# Session state keys
STATE_ORIGINAL = "original_records"
STATE_DISPLAYED = "displayed_records"
STATE_INFO = "result_info"
STATE_CAMERA = "camera_state"
STATE_QUERY = "search_query"
STATE_HEATMAP_CONFIG = "heatmap_config"
STATE_RESET_COUNT = "camera_reset_count"
MAP_KEY_PREFIX = "climb_areas_map"

# Secrets table holding configuration overrides
SECRETS_SECTION = "heatmap"

# Dataset page
TOP_AREAS_COUNT = 10


@dataclass(frozen=True)
class Material:
    ambient: float = 0.64
    diffuse: float = 0.6
    shininess: int = 32
    specular_color: Tuple[int, int, int] = (51, 51, 51)


@dataclass(frozen=True)
class Light:
    """A light source; ``position`` is [longitude, latitude, altitude] for point lights."""

    color: Tuple[int, int, int] = (255, 255, 255)
    intensity: float = 1.0
    position: Tuple[float, ...] = ()


@dataclass(frozen=True)
class Lighting:
    ambient_light: Light = Light(intensity=1.0)
    point_lights: Tuple[Light, ...] = (
        Light(intensity=0.8, position=(-0.144528, 49.739968, 80000)),
        Light(intensity=0.8, position=(-3.807751, 54.104682, 8000)),
    )


MATERIAL = Material()
LIGHTING = Lighting()


@dataclass(frozen=True)
class HeatmapConfig:
    """Construction-time parameters for the heatmap page.

    All fields are optional; overrides come from the ``[heatmap]`` table of
    Streamlit secrets or from the sidebar sliders.
    """

    map_style: str = MAP_STYLE
    radius: float = DEFAULT_RADIUS
    upper_percentile: float = DEFAULT_UPPER_PERCENTILE
    coverage: float = DEFAULT_COVERAGE
    data_url: str = DATA_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
