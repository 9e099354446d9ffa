"""Selection handling for pydeck map interactions.

This module turns the selection state returned by ``st.pydeck_chart`` into
the position of the hexagon bin the user clicked.
"""

from typing import Any, Dict, Optional, Tuple

from climb_areas.settings import HEATMAP_LAYER_ID


def extract_selected_bin(
    selection_state: Any,
    layer_id: str = HEATMAP_LAYER_ID,
) -> Optional[Dict[str, Any]]:
    """Extract the clicked hexagon bin from pydeck selection state.

    Args:
        selection_state: Selection state from pydeck chart
        layer_id: ID of the aggregation layer to read

    Returns:
        Dictionary with the bin ``position`` (longitude, latitude) and its
        ``count`` and ``elevation`` values, or None
    """
    if not selection_state:
        return None

    selection = None
    if isinstance(selection_state, dict):
        selection = selection_state.get("selection", selection_state)
    else:
        selection = getattr(selection_state, "selection", None)

    if not selection:
        return None

    objects_by_layer = selection.get("objects")
    if not isinstance(objects_by_layer, dict):
        return None

    layer_objects = objects_by_layer.get(layer_id)
    if not layer_objects:
        return None

    first_entry = layer_objects[0]
    raw_object = first_entry.get("object", first_entry)
    if not isinstance(raw_object, dict):
        return None

    position = to_position(raw_object.get("position"))
    if position is None:
        return None

    return {
        "position": position,
        "count": raw_object.get("count"),
        "elevation": raw_object.get("elevationValue"),
    }


def to_position(value: Any) -> Optional[Tuple[float, float]]:
    """Convert a ``[longitude, latitude, ...]`` sequence to a float pair.

    Args:
        value: Candidate position

    Returns:
        (longitude, latitude) tuple or None if unusable
    """
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        return None
    try:
        return float(value[0]), float(value[1])
    except (TypeError, ValueError):
        return None
