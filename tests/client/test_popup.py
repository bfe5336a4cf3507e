"""Tests for feature popups and the info card."""

import pytest

from airmap.layers.config import COLORS
from airmap.ui import build_popup_html, info_card, popup_color
from tests.lib.factories import point, square


@pytest.mark.unit
class TestPopupColor:
    """popup_color() precedence."""

    def test_dme_waypoint(self):
        assert popup_color({"name": "BETA", "dme": "true"}) == COLORS["waypointDME"]

    def test_warning_categories(self):
        assert popup_color({"category": "prohibited"}) == COLORS["prohibited"]
        assert popup_color({"CATEGORY": "danger"}) == COLORS["danger"]

    def test_fir(self):
        assert popup_color({"NAME": "Singapore FIR"}) == COLORS["firOutline"]

    def test_sector_fill_color(self):
        assert popup_color({"fir-label": "Singapore", "fill-color": "#abcdef"}) == "#abcdef"
        assert popup_color({"fir-label": "Singapore"}) == COLORS["firOutline"]

    def test_default(self):
        assert popup_color({"name": "ALPHA", "dme": "false"}) == COLORS["waypoint"]


@pytest.mark.unit
class TestPopupHtml:
    """build_popup_html() content."""

    def test_name_and_subtitle(self):
        html = build_popup_html(point(0, 0, name="ALPHA", type="Waypoint"))
        assert "ALPHA" in html
        assert "Waypoint" in html
        assert COLORS["waypoint"] in html

    def test_no_subtitle(self):
        html = build_popup_html(point(0, 0, name="ALPHA"))
        assert html.count("<div") == 2

    def test_escaped(self):
        html = build_popup_html(point(0, 0, name="<b>x</b>"))
        assert "<b>" not in html
        assert "&lt;b&gt;" in html


@pytest.mark.unit
class TestInfoCard:
    """info_card() fields."""

    def test_point(self):
        card = info_card(point(103.9896372, 1.3592955, NAME="WSSS", subtitle="Changi"))
        assert card["title"] == "WSSS"
        assert card["subtitle"] == "Changi"
        assert card["coordinates"] == "1.3593, 103.9896"
        assert card["warning"] is None

    def test_warning_and_sector(self):
        card = info_card(square(0, 0, warning="DANGER", **{"fir-label": "Singapore"}))
        assert card["title"] == "Unnamed Feature"
        assert card["warning"] == "DANGER AREA"
        assert card["sector"] == "SINGAPORE"
        assert card["coordinates"] is None

    def test_point_without_coordinates(self):
        feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": []}, "properties": {"name": "X"}}
        card = info_card(feature)
        assert card["title"] == "X"
        assert card["coordinates"] is None
