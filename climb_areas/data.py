"""Dataset loading for the climbing areas heatmap.

The feed is a CSV with one row per climbing area (``lat``, ``lng``, ``num``,
``escuela``). Rows become LocationRecords: one DataFrame row with the
COORDINATES, VALUE and NAME columns.
"""

import io
from typing import IO, Optional, Union

import pandas as pd
import requests
import streamlit as st

from climb_areas.exceptions import DatasetError
from climb_areas.settings import (
    COLUMN_COORDINATES,
    COLUMN_NAME,
    COLUMN_VALUE,
    DATA_URL,
    DEFAULT_REQUEST_TIMEOUT,
    RECORD_COLUMNS,
    SOURCE_COLUMNS,
    SOURCE_FIRST_COORDINATE,
    SOURCE_NAME,
    SOURCE_SECOND_COORDINATE,
    SOURCE_VALUE,
)
from climb_areas.utils import get_logger

logger = get_logger(__name__)


def empty_records() -> pd.DataFrame:
    """Return a LocationRecord DataFrame without rows."""
    return pd.DataFrame(
        {
            COLUMN_COORDINATES: pd.Series(dtype=object),
            COLUMN_VALUE: pd.Series(dtype=float),
            COLUMN_NAME: pd.Series(dtype=object),
        },
        columns=RECORD_COLUMNS,
    )


def format_result_count(count: int) -> str:
    return f"{count} results"


def fetch_dataset(url: str = DATA_URL, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> str:
    """Download the climbing areas CSV.

    Args:
        url: Location of the CSV resource
        timeout: Request timeout in seconds

    Returns:
        CSV body as text

    Raises:
        requests.RequestException: On connection errors or non-2xx responses
    """
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text


def parse_records(df_raw: pd.DataFrame) -> pd.DataFrame:
    """Convert raw feed rows into LocationRecords.

    Numeric fields are coerced without bounds checks; anything that is not a
    number becomes NaN. COORDINATES is ``[lat, lng]`` exactly as the feed
    labels it, and is read as ``[longitude, latitude]`` downstream.

    Args:
        df_raw: DataFrame with the feed columns

    Returns:
        DataFrame with COORDINATES, VALUE and NAME columns

    Raises:
        DatasetError: If a feed column is missing
    """
    missing = [column for column in SOURCE_COLUMNS if column not in df_raw.columns]
    if missing:
        raise DatasetError(f"Missing columns in climbing areas feed: {missing}")

    if df_raw.empty:
        return empty_records()

    first = pd.to_numeric(df_raw[SOURCE_FIRST_COORDINATE], errors="coerce")
    second = pd.to_numeric(df_raw[SOURCE_SECOND_COORDINATE], errors="coerce")
    values = pd.to_numeric(df_raw[SOURCE_VALUE], errors="coerce").astype(float)

    coerced = int(first.isna().sum() + second.isna().sum() + values.isna().sum())
    if coerced:
        logger.debug(f"{coerced} non-numeric field(s) coerced to NaN")

    df = pd.DataFrame(
        {
            COLUMN_COORDINATES: [[float(a), float(b)] for a, b in zip(first, second)],
            COLUMN_VALUE: values.to_numpy(),
            COLUMN_NAME: df_raw[SOURCE_NAME].fillna("").astype(str).to_numpy(),
        },
        columns=RECORD_COLUMNS,
    )
    return df


def read_dataset(source: Union[str, IO[str]]) -> pd.DataFrame:
    """Parse CSV text (or a readable text stream) into LocationRecords."""
    if isinstance(source, str):
        source = io.StringIO(source)
    try:
        df_raw = pd.read_csv(source)
    except pd.errors.EmptyDataError as e:
        raise DatasetError("Climbing areas feed is empty") from e
    return parse_records(df_raw)


@st.cache_data(show_spinner=False)
def fetch_records(url: str = DATA_URL, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> pd.DataFrame:
    """Fetch and parse the climbing areas feed, cached per process.

    Errors propagate, so st.cache_data only ever stores a successful load.
    """
    df = read_dataset(fetch_dataset(url, timeout))
    logger.info(f"Loaded {len(df)} climbing areas from {url}")
    return df


def load_dataset(
    url: str = DATA_URL,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> Optional[pd.DataFrame]:
    """Load the climbing areas feed without raising.

    Failures are logged and nothing is retried here; a later page run
    calls this again.

    Args:
        url: Location of the CSV resource
        timeout: Request timeout in seconds

    Returns:
        LocationRecord DataFrame, or None if the feed could not be loaded
    """
    try:
        return fetch_records(url, timeout)
    except requests.RequestException as e:
        logger.warning(f"Could not fetch climbing areas from {url}: {e}")
    except (DatasetError, pd.errors.ParserError) as e:
        logger.warning(f"Could not parse climbing areas from {url}: {e}")
    return None
