"""Popup and info-card content for a clicked feature."""

from __future__ import annotations

from html import escape

from airmap.layers.config import COLORS
from airmap.naming import SUBTITLE_KEYS, first_present
from airmap.store import geometry_type, properties_of

_CATEGORY_COLORS = {
    "prohibited": COLORS["prohibited"],
    "restricted": COLORS["restricted"],
    "danger": COLORS["danger"],
}


def popup_color(properties: dict) -> str:
    """Accent colour for a feature's popup border and title."""
    name = str(properties.get("name") or "")
    upper_name = str(properties.get("NAME") or "")
    category = properties.get("category") or properties.get("CATEGORY") or ""

    if properties.get("dme") == "true":
        return COLORS["waypointDME"]
    if category in _CATEGORY_COLORS:
        return _CATEGORY_COLORS[category]
    if "FIR" in name or "FIR" in upper_name:
        return COLORS["firOutline"]
    if properties.get("fir-label"):
        return properties.get("fill-color") or COLORS["firOutline"]
    return COLORS["waypoint"]


def build_popup_html(feature: dict) -> str:
    """Small HTML card with the feature's name and optional subtitle."""
    props = properties_of(feature)
    name = escape(first_present(props, ("name", "NAME")))
    subtitle = escape(first_present(props, SUBTITLE_KEYS))
    color = escape(popup_color(props))

    subtitle_html = (
        f'<div style="font-weight: 500; font-size: 0.85em; color: #444;">{subtitle}</div>'
        if subtitle else ""
    )
    return (
        f'<div class="airnav-popup" style="border: 3px solid {color};">'
        f'<div style="font-weight: 700; font-size: 0.95em; color: {color};">{name}</div>'
        f"{subtitle_html}"
        "</div>"
    )


def info_card(feature: dict) -> dict:
    """Fields shown by the feature info panel."""
    props = properties_of(feature)
    card = {
        "title": first_present(props, ("NAME", "name"), "Unnamed Feature"),
        "subtitle": props.get("subtitle") or None,
        "warning": f"{props['warning']} AREA" if props.get("warning") else None,
        "sector": str(props["fir-label"]).upper() if props.get("fir-label") else None,
        "coordinates": None,
    }
    if geometry_type(feature) == "Point":
        coords = feature["geometry"].get("coordinates") or []
        if len(coords) >= 2:
            lng, lat = coords[0], coords[1]
            card["coordinates"] = f"{lat:.4f}, {lng:.4f}"
    return card
