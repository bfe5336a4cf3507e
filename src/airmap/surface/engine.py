"""StyleGraph, the map engine's source/layer graph.

Mirrors the mutable, order-sensitive graph of a Mapbox GL map: layers draw
from sources, a layer cannot be added before its source exists, and a source
cannot be removed while any layer still references it. The browser map obeys
the same rules; keeping them here lets the surface logic be exercised and
compiled into a style document server-side.
"""

from __future__ import annotations

import copy


class MapEngineError(Exception):
    """An operation violated the source/layer graph or hit a removed map."""


class StyleGraph:
    """In-memory map engine holding sources, ordered layers and a camera."""

    def __init__(self, center: tuple[float, float] = (0.0, 0.0), zoom: float = 0.0) -> None:
        self._sources: dict[str, dict] = {}
        self._layers: list[dict] = []
        self.center = center
        self.zoom = zoom
        self._removed = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def removed(self) -> bool:
        """True once :meth:`remove` has torn the map down."""
        return self._removed

    def remove(self) -> None:
        """Destroy the map; every later mutation raises MapEngineError."""
        self._layers = []
        self._sources = {}
        self._removed = True

    def _check_alive(self) -> None:
        if self._removed:
            raise MapEngineError("Map has been removed")

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def add_source(self, source_id: str, spec: dict) -> None:
        self._check_alive()
        if source_id in self._sources:
            raise MapEngineError(f"Source already exists: {source_id}")
        self._sources[source_id] = dict(spec)

    def get_source(self, source_id: str) -> dict | None:
        return self._sources.get(source_id)

    def set_source_data(self, source_id: str, data) -> None:
        self._check_alive()
        source = self._sources.get(source_id)
        if source is None:
            raise MapEngineError(f"Source not found: {source_id}")
        source["data"] = data

    def remove_source(self, source_id: str) -> None:
        self._check_alive()
        if source_id not in self._sources:
            raise MapEngineError(f"Source not found: {source_id}")
        users = self.layers_for_source(source_id)
        if users:
            raise MapEngineError(
                f"Source {source_id} is still used by layers: {', '.join(users)}"
            )
        del self._sources[source_id]

    def layers_for_source(self, source_id: str) -> list[str]:
        """IDs of layers drawing from ``source_id``, in draw order."""
        return [layer["id"] for layer in self._layers if layer.get("source") == source_id]

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------

    def add_layer(self, spec: dict) -> None:
        self._check_alive()
        layer_id = spec.get("id")
        if not layer_id:
            raise MapEngineError("Layer spec has no id")
        if self.get_layer(layer_id) is not None:
            raise MapEngineError(f"Layer already exists: {layer_id}")
        source = spec.get("source")
        if source not in self._sources:
            raise MapEngineError(f"Layer {layer_id} references missing source: {source}")
        layer = copy.deepcopy(spec)
        layer.setdefault("paint", {})
        layer.setdefault("layout", {})
        self._layers.append(layer)

    def get_layer(self, layer_id: str) -> dict | None:
        for layer in self._layers:
            if layer["id"] == layer_id:
                return layer
        return None

    def _require_layer(self, layer_id: str) -> dict:
        self._check_alive()
        layer = self.get_layer(layer_id)
        if layer is None:
            raise MapEngineError(f"Layer not found: {layer_id}")
        return layer

    def remove_layer(self, layer_id: str) -> None:
        layer = self._require_layer(layer_id)
        self._layers.remove(layer)

    def layer_ids(self) -> list[str]:
        return [layer["id"] for layer in self._layers]

    def set_layout_property(self, layer_id: str, name: str, value) -> None:
        self._require_layer(layer_id)["layout"][name] = value

    def set_paint_property(self, layer_id: str, name: str, value) -> None:
        self._require_layer(layer_id)["paint"][name] = value

    def set_filter(self, layer_id: str, expression: list | None) -> None:
        layer = self._require_layer(layer_id)
        if expression is None:
            layer.pop("filter", None)
        else:
            layer["filter"] = copy.deepcopy(expression)

    def get_filter(self, layer_id: str) -> list | None:
        layer = self.get_layer(layer_id)
        return None if layer is None else layer.get("filter")

    # ------------------------------------------------------------------
    # Camera
    # ------------------------------------------------------------------

    def fly_to(self, center: tuple[float, float], zoom: float) -> None:
        self._check_alive()
        self.center = (float(center[0]), float(center[1]))
        self.zoom = zoom

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_style(self) -> dict:
        """Serialize as a Mapbox GL style fragment (version 8)."""
        return {
            "version": 8,
            "center": list(self.center),
            "zoom": self.zoom,
            "sources": copy.deepcopy(self._sources),
            "layers": copy.deepcopy(self._layers),
        }
