"""Map rendering surface: engine graph, layer toggles, highlight and rings."""

from airmap.surface.engine import MapEngineError, StyleGraph
from airmap.surface.highlight import Highlighter, Pulse
from airmap.surface.map import MapSurface
from airmap.surface.rings import RADIUS_VALUES, RadiusRing, create_circle
from airmap.surface.teardown import teardown_source

__all__ = [
    "Highlighter",
    "MapEngineError",
    "MapSurface",
    "Pulse",
    "RADIUS_VALUES",
    "RadiusRing",
    "StyleGraph",
    "create_circle",
    "teardown_source",
]
