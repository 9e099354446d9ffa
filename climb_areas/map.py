"""Map display module for Spanish Climb Areas.

This module describes the extruded hexagon heatmap as a pydeck.Deck. Binning,
projection, lighting and camera animation all happen in deck.gl in the
browser; nothing here touches that logic.
"""

from typing import Any, Dict, Optional

import pandas as pd
import pydeck

from climb_areas.camera import INITIAL_CAMERA, CameraState
from climb_areas.settings import (
    COLOR_RANGE,
    COLUMN_COORDINATES,
    COLUMN_VALUE,
    ELEVATION_RANGE,
    ELEVATION_SCALE,
    ELEVATION_SCALE_TRANSITION_MS,
    HEATMAP_LAYER_ID,
    LIGHTING,
    MATERIAL,
    TOOLTIP_HTML,
    TOOLTIP_STYLE,
    HeatmapConfig,
    Lighting,
    Material,
)
from climb_areas.utils import get_logger

logger = get_logger(__name__)


def build_heatmap_deck(
    df_displayed: pd.DataFrame,
    camera: CameraState = INITIAL_CAMERA,
    config: Optional[HeatmapConfig] = None,
    *,
    material: Material = MATERIAL,
    lighting: Lighting = LIGHTING,
) -> pydeck.Deck:
    """Build a pydeck.Deck instance for the climbing areas heatmap.

    Args:
        df_displayed: LocationRecord DataFrame currently on display
        camera: Camera position the map should show
        config: Heatmap parameters; defaults if None
        material: Surface material of the hexagon columns
        lighting: Lights applied to the scene

    Returns:
        Configured pydeck.Deck instance
    """
    config = config or HeatmapConfig()

    layer = build_hexagon_layer(df_displayed, config, material)

    return pydeck.Deck(
        layers=[layer],
        initial_view_state=camera.to_view_state(),
        map_style=config.map_style,
        effects=[build_lighting_effect(lighting)],
        tooltip={"html": TOOLTIP_HTML, "style": dict(TOOLTIP_STYLE)},
    )


def build_hexagon_layer(
    df_displayed: pd.DataFrame,
    config: HeatmapConfig,
    material: Material = MATERIAL,
) -> pydeck.Layer:
    """Build the HexagonLayer aggregating the displayed records.

    Colour is the sum of VALUE per bin and elevation the largest VALUE in
    the bin. Columns collapse to the ground when there is nothing to show.
    """
    return pydeck.Layer(
        "HexagonLayer",
        data=df_displayed,
        id=HEATMAP_LAYER_ID,
        get_position=COLUMN_COORDINATES,
        color_range=[list(color) for color in COLOR_RANGE],
        coverage=config.coverage,
        radius=config.radius,
        upper_percentile=config.upper_percentile,
        elevation_range=list(ELEVATION_RANGE),
        elevation_scale=elevation_scale_for(df_displayed),
        extruded=True,
        pickable=True,
        auto_highlight=True,
        get_color_weight=COLUMN_VALUE,
        color_aggregation=pydeck.types.String("SUM"),
        get_elevation_weight=COLUMN_VALUE,
        elevation_aggregation=pydeck.types.String("MAX"),
        material=_material_props(material),
        transitions={"elevationScale": ELEVATION_SCALE_TRANSITION_MS},
    )


def build_lighting_effect(lighting: Lighting = LIGHTING) -> Dict[str, Any]:
    """Describe a deck.gl LightingEffect for the JSON converter."""
    effect: Dict[str, Any] = {
        "@@type": "LightingEffect",
        "ambientLight": {
            "@@type": "AmbientLight",
            "color": list(lighting.ambient_light.color),
            "intensity": lighting.ambient_light.intensity,
        },
    }
    for index, light in enumerate(lighting.point_lights, start=1):
        effect[f"pointLight{index}"] = {
            "@@type": "PointLight",
            "color": list(light.color),
            "intensity": light.intensity,
            "position": list(light.position),
        }
    return effect


def _material_props(material: Material) -> Dict[str, Any]:
    return {
        "ambient": material.ambient,
        "diffuse": material.diffuse,
        "shininess": material.shininess,
        "specularColor": list(material.specular_color),
    }


def elevation_scale_for(df_displayed: pd.DataFrame) -> int:
    return ELEVATION_SCALE if len(df_displayed) else 0
