"""Display names and derived display categories for features."""

from __future__ import annotations

from airmap.store import geometry_type, properties_of

# Keys tried, in order, when matching a search query against a feature.
SEARCH_NAME_KEYS = ("name", "ident", "title")

# Keys tried, in order, when labelling a feature in the UI.
LABEL_KEYS = ("NAME", "name", "Ident", "ident", "title")

# Keys tried for the secondary line of a popup/result row.
SUBTITLE_KEYS = ("subtitle", "TYPE", "type")

ROUTE_TYPES = ("SID", "STAR", "ATS Route")


def first_present(properties: dict, keys: tuple[str, ...], default: str = "") -> str:
    """Return the first non-empty value among ``keys`` as a string."""
    for key in keys:
        value = properties.get(key)
        if value not in (None, ""):
            return str(value)
    return default


def search_name(feature: dict) -> str:
    """Name used by the search service's substring test."""
    return first_present(properties_of(feature), SEARCH_NAME_KEYS)


def display_name(feature: dict, default: str = "Unnamed Feature") -> str:
    """Human-readable label for result lists, popups and the search box."""
    return first_present(properties_of(feature), LABEL_KEYS, default)


def is_fir(feature: dict) -> bool:
    props = properties_of(feature)
    return "FIR" in str(props.get("NAME") or "") or "FIR" in str(props.get("name") or "")


def meta_type(feature: dict) -> str:
    """Derive the UI grouping label of a feature.

    Order matters: a FIR polygon that also carries a category is still a FIR,
    and a point is a waypoint whatever its other properties.
    """
    props = properties_of(feature)
    if is_fir(feature):
        return "FIR"
    if props.get("category"):
        return "Navigational Warning"
    if geometry_type(feature) == "Point":
        return "Waypoint"
    if props.get("fir-label"):
        return str(props["fir-label"]).upper()
    if props.get("type") in ROUTE_TYPES:
        return props["type"]
    return "Feature"


def enrich_feature(feature: dict) -> dict:
    """Return a shallow copy of ``feature`` tagged with its ``metaType``."""
    return {**feature, "metaType": meta_type(feature)}
