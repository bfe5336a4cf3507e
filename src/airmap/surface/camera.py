"""Camera placement for a selected feature."""

from __future__ import annotations

from shapely.geometry import shape

from airmap.naming import display_name

ZOOM_POINT = 10
ZOOM_LINE = 8
ZOOM_FIR = 6
ZOOM_DEFAULT = 9


def camera_target(feature: dict) -> tuple[float, float] | None:
    """Return the (lng, lat) to center on, or None for empty geometry.

    Points use their coordinate, polygons their centroid. Lines use the
    middle vertex (index ``len // 2``), not the true midpoint along the line.
    """
    geometry = feature.get("geometry") or {}
    geom_type = geometry.get("type")
    coords = geometry.get("coordinates")
    if not coords:
        return None

    if geom_type == "Point":
        return (float(coords[0]), float(coords[1]))
    if geom_type == "LineString":
        lng, lat = coords[len(coords) // 2][:2]
        return (float(lng), float(lat))

    centroid = shape(geometry).centroid
    if centroid.is_empty:
        return None
    return (centroid.x, centroid.y)


def zoom_for(feature: dict) -> int:
    """Zoom level for a feature: points closest, FIR boundaries farthest."""
    geom_type = (feature.get("geometry") or {}).get("type")
    if geom_type == "Point":
        return ZOOM_POINT
    if geom_type == "LineString":
        return ZOOM_LINE
    if "fir" in display_name(feature, "").lower():
        return ZOOM_FIR
    return ZOOM_DEFAULT
