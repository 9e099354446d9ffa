"""Summary statistics for the dataset page."""

from typing import Any, Dict

import pandas as pd

from climb_areas.settings import COLUMN_COORDINATES, COLUMN_NAME, COLUMN_VALUE, TOP_AREAS_COUNT


def calculate_dataset_stats(df_records: pd.DataFrame) -> Dict[str, Any]:
    """Calculate summary statistics from LocationRecords.

    Args:
        df_records: DataFrame with COORDINATES, VALUE and NAME columns

    Returns:
        Dictionary with dataset statistics; NaN values are skipped
    """
    total_areas = len(df_records)
    values = df_records[COLUMN_VALUE] if total_areas else pd.Series(dtype=float)

    return {
        "total_areas": total_areas,
        "total_value": float(values.sum()) if values.notna().any() else 0.0,
        "max_value": float(values.max()) if values.notna().any() else 0.0,
        "mean_value": float(values.mean()) if values.notna().any() else 0.0,
        "missing_values": int(values.isna().sum()),
    }


def coordinate_ranges(df_records: pd.DataFrame) -> Dict[str, Any]:
    """Return min/max of both coordinate components, or None when empty."""
    if df_records.empty:
        return {"longitude": None, "latitude": None}

    coordinates = pd.DataFrame(
        df_records[COLUMN_COORDINATES].tolist(),
        columns=["longitude", "latitude"],
    )
    return {
        column: (float(coordinates[column].min()), float(coordinates[column].max()))
        for column in ("longitude", "latitude")
    }


def top_areas(df_records: pd.DataFrame, limit: int = TOP_AREAS_COUNT) -> pd.DataFrame:
    """Areas with the highest VALUE, as a two-column Name/Value table."""
    df_top = df_records.nlargest(limit, COLUMN_VALUE)[[COLUMN_NAME, COLUMN_VALUE]]
    df_top = df_top.reset_index(drop=True)
    df_top.columns = ["Name", "Value"]
    return df_top
