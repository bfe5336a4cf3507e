"""Client-side map UI: search box, chart search panel, popups."""

from airmap.ui.chart_search import ChartSearchPanel, format_coordinates, format_route
from airmap.ui.popup import build_popup_html, info_card, popup_color
from airmap.ui.search_box import SearchBox

__all__ = [
    "ChartSearchPanel",
    "SearchBox",
    "build_popup_html",
    "format_coordinates",
    "format_route",
    "info_card",
    "popup_color",
]
