"""Temporary search highlight with a pulse animation.

A highlight is one GeoJSON source holding the selected feature plus one or
two layers drawing it. Replacing a highlight tears the old one down first
(layers, then source) so no layer is left pointing at a missing source.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from loguru import logger

from airmap.layers.config import COLORS
from airmap.store import properties_of
from airmap.surface.engine import MapEngineError, StyleGraph
from airmap.surface.teardown import teardown_source

SOURCE_ID = "search-highlight"
LAYER_ID = "search-highlight"
FILL_LAYER_ID = "search-highlight-fill"

FRAME_INTERVAL = 1 / 60


class Pulse:
    """Oscillate one paint property between two bounds, one step per tick.

    The pulse cancels itself when its layer disappears, when the map is
    removed, or when the engine rejects an update.
    """

    def __init__(
        self,
        engine: StyleGraph,
        layer_id: str,
        prop: str,
        low: float,
        high: float,
        step: float = 0.05,
        delay_frames: int = 3,
    ) -> None:
        self.engine = engine
        self.layer_id = layer_id
        self.prop = prop
        self.low = low
        self.high = high
        self.step = step
        self.delay_frames = delay_frames
        self.value = low
        self.growing = True
        self.cancelled = False
        self._frames = 0

    def cancel(self) -> None:
        self.cancelled = True

    def _advance(self) -> float:
        if self.growing:
            self.value = min(self.high, self.value + self.step)
        else:
            self.value = max(self.low, self.value - self.step)
        if self.value >= self.high:
            self.growing = False
        elif self.value <= self.low:
            self.growing = True
        return self.value

    def tick(self) -> bool:
        """Advance one display frame. Returns False once the pulse is over."""
        if self.cancelled:
            return False
        if self.engine.removed or self.engine.get_layer(self.layer_id) is None:
            self.cancel()
            return False

        self._frames += 1
        if self._frames < self.delay_frames:
            return True
        self._frames = 0

        try:
            self.engine.set_paint_property(self.layer_id, self.prop, self._advance())
        except MapEngineError:
            self.cancel()
            return False
        return True

    async def run(self, frame_interval: float = FRAME_INTERVAL) -> None:
        """Drive :meth:`tick` once per frame until the pulse ends."""
        while self.tick():
            await asyncio.sleep(frame_interval)


def highlight_layers(feature: dict) -> list[dict]:
    """Layer specs for highlighting ``feature``, bottom layer first."""
    geom_type = (feature.get("geometry") or {}).get("type")

    if geom_type == "Point":
        return [{
            "id": LAYER_ID,
            "type": "circle",
            "source": SOURCE_ID,
            "paint": {
                "circle-color": COLORS["highlight"],
                "circle-stroke-color": "#ffffff",
                "circle-stroke-width": 2,
                "circle-radius": ["interpolate", ["linear"], ["zoom"], 5, 4, 10, 7],
                "circle-opacity": 0.9,
            },
        }]

    if geom_type == "LineString":
        return [{
            "id": LAYER_ID,
            "type": "line",
            "source": SOURCE_ID,
            "paint": {"line-color": COLORS["highlight"], "line-width": 2},
        }]

    fill_color = properties_of(feature).get("fill") or COLORS["fir"]
    return [
        {
            "id": FILL_LAYER_ID,
            "type": "fill",
            "source": SOURCE_ID,
            "paint": {"fill-color": fill_color, "fill-opacity": 0.2},
        },
        {
            "id": LAYER_ID,
            "type": "line",
            "source": SOURCE_ID,
            "paint": {"line-color": COLORS["highlight"], "line-width": 2},
        },
    ]


def pulse_for(engine: StyleGraph, feature: dict) -> Optional[Pulse]:
    """The pulse matching the feature's geometry (None for polygons)."""
    geom_type = (feature.get("geometry") or {}).get("type")
    if geom_type == "Point":
        return Pulse(engine, LAYER_ID, "circle-radius", 6, 8)
    if geom_type == "LineString":
        return Pulse(engine, LAYER_ID, "line-width", 2, 4)
    return None


class Highlighter:
    """Owns the single search highlight drawn on a map."""

    def __init__(self, engine: StyleGraph) -> None:
        self.engine = engine
        self.pulse: Optional[Pulse] = None
        self._task: Optional[asyncio.Task] = None

    def clear(self) -> None:
        """Stop the pulse and remove the current highlight, if any."""
        if self.pulse is not None:
            self.pulse.cancel()
            self.pulse = None
        if self._task is not None:
            self._task.cancel()
            self._task = None
        try:
            teardown_source(self.engine, SOURCE_ID)
        except MapEngineError as e:
            logger.warning(f"Could not remove highlight: {e}")

    def show(self, feature: dict) -> Optional[Pulse]:
        """Replace the current highlight with one for ``feature``.

        The pulse, if any, starts on the running event loop; without a loop
        the caller drives :meth:`Pulse.tick` itself.
        """
        self.clear()
        if self.engine.removed:
            logger.warning("Map removed; highlight not drawn")
            return None

        self.engine.add_source(SOURCE_ID, {"type": "geojson", "data": feature})
        for spec in highlight_layers(feature):
            self.engine.add_layer(spec)

        self.pulse = pulse_for(self.engine, feature)
        if self.pulse is not None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
            if loop is not None:
                self._task = loop.create_task(self.pulse.run())
        return self.pulse
