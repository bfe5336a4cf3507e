"""Tests for dependency-ordered source teardown."""

import pytest

from airmap.surface import StyleGraph, teardown_source


@pytest.mark.unit
class TestTeardownSource:
    """teardown_source() removal order and no-op cases."""

    def test_layers_removed_before_source(self):
        engine = StyleGraph()
        engine.add_source("s", {"type": "geojson"})
        engine.add_source("other", {"type": "geojson"})
        engine.add_layer({"id": "fill", "type": "fill", "source": "s"})
        engine.add_layer({"id": "keep", "type": "line", "source": "other"})
        engine.add_layer({"id": "line", "type": "line", "source": "s"})

        removed = teardown_source(engine, "s")

        assert removed == ["line", "fill"]
        assert engine.get_source("s") is None
        assert engine.layer_ids() == ["keep"]

    def test_missing_source_is_noop(self):
        engine = StyleGraph()
        assert teardown_source(engine, "s") == []

    def test_removed_map_is_noop(self):
        engine = StyleGraph()
        engine.add_source("s", {"type": "geojson"})
        engine.remove()
        assert teardown_source(engine, "s") == []

    def test_source_without_layers(self):
        engine = StyleGraph()
        engine.add_source("s", {"type": "geojson"})
        assert teardown_source(engine, "s") == []
        assert engine.get_source("s") is None
