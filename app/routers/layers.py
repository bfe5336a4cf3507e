"""Map layer catalog, compiled style, and the WSSS distance ring."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from airmap.layers import LAYERS, MapLayerState
from airmap.surface import RADIUS_VALUES, MapSurface, StyleGraph, create_circle
from airmap.surface.rings import WSSS_COORDS
from app.config import settings

router = APIRouter(prefix="/api", tags=["layers"])


class SubCategoryInfo(BaseModel):
    """A filterable value of a layer's category field."""
    key: str
    label: str
    color: Optional[str] = None
    flag: Optional[str] = None


class LayerInfo(BaseModel):
    """Catalog entry for one map layer group."""
    id: str
    group: str
    label: str
    type: str
    url: str
    visible: bool
    category_field: Optional[str] = None
    sublayers: list[SubCategoryInfo]
    layer_ids: list[str]


@router.get("/layers", response_model=list[LayerInfo])
async def layer_catalog():
    """Return the catalog of map layers with their default visibility."""
    return [
        LayerInfo(
            id=layer.id,
            group=layer.group,
            label=layer.label,
            type=layer.type,
            url=layer.url,
            visible=layer.visible,
            category_field=layer.category_field,
            sublayers=[
                SubCategoryInfo(key=s.key, label=s.label, color=s.color, flag=s.flag)
                for s in layer.sublayers
            ],
            layer_ids=layer.layer_ids,
        )
        for layer in LAYERS
    ]


@router.get("/map/style")
async def map_style():
    """Compile the layer registry into a Mapbox GL style fragment.

    Sources reference the data URLs; the browser fetches them itself.
    """
    engine = StyleGraph(
        center=(settings.map_center_lng, settings.map_center_lat),
        zoom=settings.map_zoom,
    )
    surface = MapSurface(MapLayerState(LAYERS))
    surface.attach(engine)
    for layer in LAYERS:
        surface.install_layer(layer, layer.url)

    style = engine.to_style()
    style["base"] = settings.map_style
    if settings.mapbox_token:
        style["accessToken"] = settings.mapbox_token
    return style


@router.get("/rings")
async def radius_ring(
    radius: int = Query(..., description="Radius in nautical miles"),
):
    """Return the distance ring around WSSS as a Polygon feature."""
    if radius not in RADIUS_VALUES:
        raise HTTPException(
            status_code=400,
            detail=f"Radius must be one of {', '.join(str(r) for r in RADIUS_VALUES)} NM",
        )
    return create_circle(WSSS_COORDS, radius)
