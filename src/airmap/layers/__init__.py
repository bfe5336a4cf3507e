"""Map layer registry and visibility state."""

from airmap.layers.config import COLORS, LAYERS, LayerDescriptor, Outline, SubCategory
from airmap.layers.state import Legend, MapLayerState, get_legends, visible_legends

__all__ = [
    "COLORS",
    "LAYERS",
    "LayerDescriptor",
    "Legend",
    "MapLayerState",
    "Outline",
    "SubCategory",
    "get_legends",
    "visible_legends",
]
