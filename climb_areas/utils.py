import dataclasses
import logging
import sys

from typing import Any, Mapping, Optional

import streamlit as st

from colorama import Fore, Style, init as colorama_init
from climb_areas.exceptions import ConfigError
from climb_areas.settings import APPLICATION_NAME, SECRETS_SECTION, HeatmapConfig


colorama_init(autoreset=True)

LOG_LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.MAGENTA + Style.BRIGHT,
}

class ColorFormatter(logging.Formatter):
    def __init__(self, use_color=True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_color = use_color

    def format(self, record):
        levelname = record.levelname
        if self.use_color and levelname in LOG_LEVEL_COLORS:
            color = LOG_LEVEL_COLORS[levelname]
            record.levelname = f"{color}{levelname}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_logger(name: str = __name__, log_level: str = 'INFO') -> logging.Logger:
    logger = logging.getLogger(name)

    if logger.hasHandlers():
        return logger

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    use_color = sys.stdout.isatty()
    formatter = ColorFormatter(
        use_color=use_color,
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


logger = get_logger(__name__)


_NUMERIC_BOUNDS = {
    "radius": (0, None),
    "upper_percentile": (0, 100),
    "coverage": (0, 1),
    "request_timeout": (0, None),
}


def build_heatmap_config(overrides: Optional[Mapping[str, Any]] = None) -> HeatmapConfig:
    """Merge overrides into the default heatmap configuration.

    Args:
        overrides: Mapping of HeatmapConfig field names to values

    Returns:
        HeatmapConfig with the overrides applied

    Raises:
        ConfigError: If a value has the wrong type or is out of range
    """
    if not overrides:
        return HeatmapConfig()

    known = {field.name for field in dataclasses.fields(HeatmapConfig)}
    values = {}
    for key, value in overrides.items():
        if key not in known:
            logger.warning(f"Ignoring unknown heatmap setting '{key}'")
            continue
        values[key] = _validate_setting(key, value)

    logger.info(f"Heatmap configuration overrides: {sorted(values)}")
    return HeatmapConfig(**values)


def _validate_setting(key: str, value: Any) -> Any:
    if key not in _NUMERIC_BOUNDS:
        if not isinstance(value, str) or not value:
            raise ConfigError(key, value, "expected a non-empty string")
        return value

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(key, value, "expected a number")

    # Lower bounds are exclusive, upper bounds inclusive
    low, high = _NUMERIC_BOUNDS[key]
    if value <= low:
        raise ConfigError(key, value, f"must be greater than {low}")
    if high is not None and value > high:
        raise ConfigError(key, value, f"must be at most {high}")
    return value


def load_heatmap_config() -> HeatmapConfig:
    """Read heatmap overrides from the ``[heatmap]`` table of Streamlit secrets."""
    try:
        overrides = st.secrets.get(SECRETS_SECTION)
    except FileNotFoundError:
        logger.debug("No secrets file found, using default heatmap configuration")
        overrides = None

    return build_heatmap_config(dict(overrides) if overrides else None)


def build_main_common_components(page_name: str, show_title: bool = True):
    try:
        st.set_page_config(
            page_title=f"{page_name} - {APPLICATION_NAME}",
            layout="wide",
            initial_sidebar_state="expanded",
        )
    except Exception as e:
        logger.warning(e)
    if show_title:
        st.title(page_name)

    hide_decoration_bar_style = '''
        <style>[data-testid="stDecoration"] {display:none;}</style>
    '''
    st.markdown(hide_decoration_bar_style, unsafe_allow_html=True)
    return


def build_sidebar_common_components():
    st.sidebar.page_link("main.py", label="Map", icon=":material/map:")
    st.sidebar.page_link("pages/01_dataset.py", label="Dataset", icon=":material/table_chart:")
    st.sidebar.markdown("<br>", unsafe_allow_html=True)
