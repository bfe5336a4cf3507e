"""Chart search panel: features and chart documents for one query."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Optional

import httpx
from loguru import logger

from airmap.naming import ROUTE_TYPES, enrich_feature
from airmap.store import geometry_type, properties_of


@dataclass
class ChartSearchResults:
    """Search results grouped the way the panel lists them."""

    query: str
    waypoints: list[dict] = field(default_factory=list)
    routes: list[dict] = field(default_factory=list)
    airspaces: list[dict] = field(default_factory=list)
    charts: list[dict] = field(default_factory=list)


def format_route(route) -> str:
    """Render a route's waypoint list as ``A → B → C``.

    Accepts a list, a JSON array string, or a loosely bracketed string.
    """
    if not route:
        return ""
    if isinstance(route, list):
        return " → ".join(str(p) for p in route)
    try:
        parsed = json.loads(route)
    except (json.JSONDecodeError, TypeError):
        return re.sub(r",\s*", " → ", re.sub(r'[\[\]"]', "", str(route)))
    if isinstance(parsed, list):
        return " → ".join(str(p) for p in parsed)
    return str(route)


def format_coordinates(coords) -> str:
    """Format ``[lng, lat]`` as ``1.3593°N, 103.9896°E``."""
    if not coords or len(coords) < 2:
        return "N/A"
    lng, lat = coords[0], coords[1]
    lat_dir = "N" if lat >= 0 else "S"
    lng_dir = "E" if lng >= 0 else "W"
    return f"{abs(lat):.4f}°{lat_dir}, {abs(lng):.4f}°{lng_dir}"


def group_features(query: str, features: list[dict], charts: list[dict]) -> ChartSearchResults:
    """Split enriched features into waypoints, routes and airspaces."""
    enriched = [enrich_feature(f) for f in features]
    waypoints = [f for f in enriched if geometry_type(f) == "Point"]
    routes = [f for f in enriched if properties_of(f).get("type") in ROUTE_TYPES]
    route_ids = {id(f) for f in routes}
    airspaces = [
        f for f in enriched
        if geometry_type(f) == "Polygon" and id(f) not in route_ids
    ]
    return ChartSearchResults(
        query=query,
        waypoints=waypoints,
        routes=routes,
        airspaces=airspaces,
        charts=list(charts),
    )


class ChartSearchPanel:
    """Combined feature + chart lookup used by the sidebar panel."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client
        self.results: Optional[ChartSearchResults] = None
        self.loading = False

    async def _get(self, path: str, query: str) -> dict:
        resp = await self.client.get(path, params={"query": query})
        resp.raise_for_status()
        return resp.json()

    async def _charts(self, query: str) -> list[dict]:
        """Chart listing for ``query``.

        A failed listing that still answers with a ``charts`` body counts as
        no charts; the feature results are kept.
        """
        resp = await self.client.get("/api/charts", params={"query": query})
        if resp.is_success:
            return resp.json().get("charts") or []
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "charts" in body:
            logger.warning(f"Chart listing failed ({resp.status_code}): {body.get('error')}")
            return body.get("charts") or []
        resp.raise_for_status()
        return []

    async def suggest(self, query: str, limit: int = 10) -> list[dict]:
        """Enriched feature suggestions for the dropdown."""
        if not query.strip():
            return []
        try:
            data = await self._get("/api/search", query)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Search failed: {e}")
            return []
        return [enrich_feature(f) for f in (data.get("results") or [])[:limit]]

    async def search(self, query: str) -> Optional[ChartSearchResults]:
        """Fetch features and charts for ``query`` and group them."""
        if not query.strip():
            return None

        self.loading = True
        self.results = None
        try:
            feature_data = await self._get("/api/search", query)
            charts = await self._charts(query)
            self.results = group_features(
                query,
                feature_data.get("results") or [],
                charts,
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Chart search failed: {e}")
        finally:
            self.loading = False
        return self.results
