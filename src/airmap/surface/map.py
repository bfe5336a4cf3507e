"""MapSurface binds layer state to a map engine.

The surface owns a :class:`MapLayerState` and, once the map has loaded, a
:class:`StyleGraph`. Toggles update the state and mirror it onto every render
layer of the group (primary and outline). Until an engine is attached all
operations log a warning and do nothing.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional

from loguru import logger

from airmap.layers.config import LayerDescriptor
from airmap.layers.state import Legend, MapLayerState, get_legends
from airmap.surface.engine import MapEngineError, StyleGraph

Fetcher = Callable[[str], Awaitable[object]]


def _visibility(visible: bool) -> str:
    return "visible" if visible else "none"


def layer_specs(layer: LayerDescriptor, state: MapLayerState) -> list[dict]:
    """Render-layer specs (primary, then outline) for one descriptor.

    Visibility comes from the state. A category filter is attached only
    when some sub-category is excluded.
    """
    layout = {"visibility": _visibility(state.is_visible(layer.group))}
    specs = [{
        "id": layer.id,
        "type": layer.type,
        "source": layer.id,
        "paint": dict(layer.paint),
        "layout": dict(layout),
    }]
    if layer.outline is not None:
        specs.append({
            "id": layer.outline.id,
            "type": layer.outline.type,
            "source": layer.id,
            "paint": dict(layer.outline.paint),
            "layout": dict(layout),
        })

    categories = state.category_visibility.get(layer.group, {})
    if not all(categories.values()):
        expression = state.category_filter(layer.group)
        for spec in specs:
            spec["filter"] = expression
    return specs


class MapSurface:
    """Layer registry state plus the engine it is painted on."""

    def __init__(self, state: Optional[MapLayerState] = None) -> None:
        self.state = state or MapLayerState()
        self.engine: Optional[StyleGraph] = None

    def attach(self, engine: StyleGraph) -> None:
        """Attach the loaded map engine."""
        self.engine = engine

    def detach(self) -> None:
        self.engine = None

    @property
    def ready(self) -> bool:
        return self.engine is not None and not self.engine.removed

    # ------------------------------------------------------------------
    # Installing layers
    # ------------------------------------------------------------------

    def install_layer(self, layer: LayerDescriptor, data) -> bool:
        """Add one descriptor's source and render layers.

        Args:
            layer: The descriptor to install.
            data: GeoJSON object, or a URL the engine fetches itself.

        Returns:
            True if installed, False if the surface is not ready or the
            engine refused the layer.
        """
        if not self.ready:
            logger.warning(f"Map not initialized; cannot install layer {layer.id}")
            return False
        try:
            self.engine.add_source(layer.id, {"type": "geojson", "data": data})
            for spec in layer_specs(layer, self.state):
                self.engine.add_layer(spec)
        except MapEngineError as e:
            logger.warning(f"Could not install layer {layer.id}: {e}")
            return False
        return True

    async def install_layers(self, fetch: Fetcher) -> list[str]:
        """Fetch and install every registered layer.

        A layer whose data cannot be fetched is logged and skipped; the
        others still load.

        Returns:
            IDs of the layers that were installed.
        """
        installed = []
        for layer in self.state.layers:
            try:
                data = await fetch(layer.url)
            except Exception as e:
                logger.warning(f"Failed to load {layer.url} for layer {layer.id}: {e}")
                continue
            if self.install_layer(layer, data):
                installed.append(layer.id)
        logger.info(f"Installed {len(installed)}/{len(self.state.layers)} map layers")
        return installed

    # ------------------------------------------------------------------
    # Toggles
    # ------------------------------------------------------------------

    def _present(self, layer_ids: list[str]) -> list[str]:
        return [lid for lid in layer_ids if self.engine.get_layer(lid) is not None]

    def toggle_group(self, group: str) -> Optional[bool]:
        """Show or hide every render layer of ``group``.

        Returns:
            The new visibility, or None if the map is not ready or the
            group is unknown.
        """
        if not self.ready:
            logger.warning(f"Map not initialized; ignoring toggle of {group}")
            return None

        try:
            visible = self.state.toggle_group(group)
        except KeyError as e:
            logger.warning(f"Ignoring toggle: {e.args[0]}")
            return None
        layer = self.state.descriptor(group)
        for layer_id in self._present(layer.layer_ids):
            self.engine.set_layout_property(layer_id, "visibility", _visibility(visible))
        return visible

    def toggle_category(self, group: str, key: str) -> Optional[list]:
        """Include or exclude one sub-category of ``group``.

        Returns:
            The filter now applied to the group's layers, or None if the map
            is not ready or the sub-category is unknown.
        """
        if not self.ready:
            logger.warning(f"Map not initialized; ignoring toggle of {group}/{key}")
            return None

        try:
            expression = self.state.toggle_category(group, key)
        except KeyError as e:
            logger.warning(f"Ignoring toggle: {e.args[0]}")
            return None
        layer = self.state.descriptor(group)
        for layer_id in self._present(layer.layer_ids):
            self.engine.set_filter(layer_id, expression)
        return expression

    def legends(self) -> list[Legend]:
        return get_legends(self.state)
