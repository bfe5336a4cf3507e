"""Tests for camera placement on a selected feature."""

import pytest

from airmap.surface.camera import ZOOM_DEFAULT, ZOOM_FIR, ZOOM_LINE, ZOOM_POINT, camera_target, zoom_for
from tests.lib.factories import line, point, square


@pytest.mark.unit
class TestCameraTarget:
    """camera_target() per geometry type."""

    def test_point(self):
        assert camera_target(point(103.99, 1.36, name="WSSS")) == (103.99, 1.36)

    def test_line_uses_middle_vertex(self):
        coords = [[100, 1], [101, 1], [102, 1], [110, 1]]
        assert camera_target(line(coords)) == (102.0, 1.0)

    def test_polygon_centroid(self):
        lng, lat = camera_target(square(100.0, 0.0, size=2.0))
        assert lng == pytest.approx(101.0)
        assert lat == pytest.approx(1.0)

    def test_empty_coordinates(self):
        feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": []}}
        assert camera_target(feature) is None
        assert camera_target({"type": "Feature", "geometry": None}) is None


@pytest.mark.unit
class TestZoom:
    """zoom_for() levels."""

    def test_levels(self):
        assert zoom_for(point(0, 0)) == ZOOM_POINT
        assert zoom_for(line([[0, 0], [1, 1]])) == ZOOM_LINE
        assert zoom_for(square(0, 0, name="Singapore FIR")) == ZOOM_FIR
        assert zoom_for(square(0, 0, name="WSR31")) == ZOOM_DEFAULT

    def test_fir_match_is_case_insensitive(self):
        assert zoom_for(square(0, 0, NAME="Jakarta fir")) == ZOOM_FIR
