"""SearchBox: debounced client of /api/search.

Typing schedules a search once the input has been quiet for the debounce
period. Selecting a result recenters the map, draws a highlight, and
suppresses the search that the text-field update would otherwise trigger.

Responses are not sequenced: once a request is in flight it is not
cancelled, so a slow response to an older query can overwrite the results of
a newer one.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import httpx
from loguru import logger

from airmap.naming import display_name
from airmap.surface.camera import camera_target, zoom_for
from airmap.surface.highlight import Highlighter
from airmap.surface.map import MapSurface

DEBOUNCE_SECONDS = 0.3


class SearchBox:
    """State and behaviour of the map's search field."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        surface: Optional[MapSurface] = None,
        debounce: float = DEBOUNCE_SECONDS,
        on_select: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.client = client
        self.surface = surface
        self.debounce = debounce
        self.on_select = on_select

        self.query = ""
        self.results: list[dict] = []
        self.show_dropdown = False

        self._suppress = False
        self._pending: Optional[asyncio.Task] = None
        self._highlighter: Optional[Highlighter] = None

    # ------------------------------------------------------------------
    # Typing
    # ------------------------------------------------------------------

    def set_query(self, text: str) -> Optional[asyncio.Task]:
        """Update the field text and (re)start the debounce timer.

        Must be called from the running event loop.

        Returns:
            The scheduled search task, or None if no search was scheduled.
        """
        self.query = text
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        if self._suppress:
            self._suppress = False
            return None

        if not text.strip():
            self.results = []
            self.show_dropdown = False
            return None

        self._pending = asyncio.get_running_loop().create_task(self._debounced(text))
        return self._pending

    async def _debounced(self, text: str) -> None:
        await asyncio.sleep(self.debounce)
        # Past the quiet period the request is no longer cancellable.
        self._pending = None
        await self.fetch(text)

    async def fetch(self, text: str) -> list[dict]:
        """Query the search endpoint and store the results."""
        try:
            resp = await self.client.get("/api/search", params={"query": text})
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Search failed: {e}")
            return self.results

        self.results = data.get("results") or []
        self.show_dropdown = True
        return self.results

    # ------------------------------------------------------------------
    # Selecting
    # ------------------------------------------------------------------

    @property
    def highlighter(self) -> Optional[Highlighter]:
        if self.surface is None or not self.surface.ready:
            return None
        if self._highlighter is None or self._highlighter.engine is not self.surface.engine:
            self._highlighter = Highlighter(self.surface.engine)
        return self._highlighter

    def select_feature(self, feature: dict) -> bool:
        """Center the map on ``feature`` and highlight it.

        Returns:
            False if the map is not ready or the feature has no geometry.
        """
        highlighter = self.highlighter
        if highlighter is None or not feature.get("geometry"):
            logger.warning("Map not initialized or feature has no geometry; selection ignored")
            return False

        self._suppress = True
        self.set_query(display_name(feature))
        self.results = []
        self.show_dropdown = False

        target = camera_target(feature)
        if target is not None:
            self.surface.engine.fly_to(target, zoom_for(feature))

        highlighter.show(feature)
        if self.on_select is not None:
            self.on_select(feature)
        return True
