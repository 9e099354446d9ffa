"""Name search over the loaded climbing areas."""

from typing import Tuple

import pandas as pd

from climb_areas.settings import COLUMN_NAME, MIN_QUERY_LENGTH, NO_RESULTS_MESSAGE
from climb_areas.data import format_result_count


def filter_records(df_original: pd.DataFrame, query: str) -> Tuple[pd.DataFrame, str]:
    """Select the climbing areas whose name contains ``query``.

    Matching is a case-insensitive literal substring test against the
    original collection. Queries shorter than two characters select every
    record; a query matching nothing selects no records.

    Args:
        df_original: Full LocationRecord DataFrame as loaded
        query: Text typed in the search box

    Returns:
        Tuple of (records to display, result count message)
    """
    query = query or ""
    if len(query) < MIN_QUERY_LENGTH:
        return df_original, format_result_count(len(df_original))

    mask = df_original[COLUMN_NAME].str.casefold().str.contains(query.casefold(), regex=False)
    df_matches = df_original[mask.fillna(False).astype(bool)]
    if df_matches.empty:
        return df_matches, NO_RESULTS_MESSAGE
    return df_matches, format_result_count(len(df_matches))
