"""Distance ring around Singapore Changi (WSSS).

The ring is a geodesic circle on the WGS84 ellipsoid, rebuilt whenever its
radius or visibility changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger
from pyproj import Geod

from airmap.layers.config import COLORS
from airmap.surface.engine import MapEngineError, StyleGraph

WSSS_COORDS = (103.9896372029808, 1.3592955583344983)

# Selectable radii in nautical miles
RADIUS_VALUES = (
    1, 2, 5, 10, 20, 30, 40, 50, 60, 80, 100,
    150, 200, 250, 300, 350, 400, 450, 500, 550, 600, 650, 700, 750, 800, 850, 900, 950, 1000,
    1200, 1400, 1600, 1800, 2000,
    2500, 3000, 3500, 4000, 4500, 5000,
)

METERS_PER_NM = 1852.0
CIRCLE_STEPS = 100

SOURCE_ID = "radius-ring"
LAYER_ID = "radius-ring-line"

_GEOD = Geod(ellps="WGS84")


def create_circle(
    center: tuple[float, float],
    radius_nm: float,
    steps: int = CIRCLE_STEPS,
    label: str = "WSSS",
) -> dict:
    """Build a closed Polygon feature approximating a geodesic circle.

    Args:
        center: (lng, lat) of the circle's centre.
        radius_nm: Radius in nautical miles.
        steps: Number of vertices before closing the ring.
        label: Stored in the ``center`` property.

    Returns:
        GeoJSON Feature with ``steps + 1`` ring coordinates.
    """
    lng, lat = center
    distance = radius_nm * METERS_PER_NM
    ring = []
    for i in range(steps):
        azimuth = -360.0 * i / steps
        dest_lng, dest_lat, _ = _GEOD.fwd(lng, lat, azimuth, distance)
        ring.append([dest_lng, dest_lat])
    ring.append(list(ring[0]))

    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring]},
        "properties": {
            "name": f"{radius_nm} NM Radius",
            "center": label,
            "radiusNM": radius_nm,
        },
    }


@dataclass
class RadiusRing:
    """Radius ring state: fixed centre, enumerated radius, visibility."""

    radius_nm: int = 50
    visible: bool = False
    center: tuple[float, float] = WSSS_COORDS

    def __post_init__(self) -> None:
        self._check_radius(self.radius_nm)
        self.engine: Optional[StyleGraph] = None

    @staticmethod
    def _check_radius(radius_nm: int) -> None:
        if radius_nm not in RADIUS_VALUES:
            raise ValueError(f"Unsupported radius: {radius_nm} NM")

    def to_geojson(self) -> dict:
        """The ring as a FeatureCollection (empty while hidden)."""
        features = [create_circle(self.center, self.radius_nm)] if self.visible else []
        return {"type": "FeatureCollection", "features": features}

    def attach(self, engine: StyleGraph) -> None:
        """Install the ring's source and line layer on ``engine``."""
        self.engine = engine
        engine.add_source(SOURCE_ID, {"type": "geojson", "data": self.to_geojson()})
        engine.add_layer({
            "id": LAYER_ID,
            "type": "line",
            "source": SOURCE_ID,
            "paint": {
                "line-color": COLORS["radiusCircle"],
                "line-width": 2,
                "line-dasharray": [2, 2],
            },
        })

    def set_radius(self, radius_nm: int) -> None:
        self._check_radius(radius_nm)
        self.radius_nm = radius_nm
        self._refresh()

    def toggle(self) -> bool:
        self.visible = not self.visible
        self._refresh()
        return self.visible

    def _refresh(self) -> None:
        if self.engine is None:
            return
        try:
            self.engine.set_source_data(SOURCE_ID, self.to_geojson())
        except MapEngineError as e:
            logger.warning(f"Radius ring not updated: {e}")
