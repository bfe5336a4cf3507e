"""Name-substring search across the configured GeoJSON collections.

Search is a linear scan: no tokenizing, no ranking. Matches come back in
file order within a collection and in configured order across collections,
with the sectors collection last.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from loguru import logger

from airmap.access import REGION_FIELD, RESTRICTED_REGION, visible_sectors
from airmap.naming import search_name
from airmap.store import CollectionError, iter_features, load_collection


def matches(feature: dict, needle: str) -> bool:
    """True if the feature's search name contains ``needle`` (lower-cased)."""
    return needle in search_name(feature).lower()


def _load_features(path: Path) -> list[dict]:
    """Load one collection's features; a bad file contributes nothing."""
    try:
        return list(iter_features(load_collection(path)))
    except CollectionError as e:
        logger.warning(f"Search skipped collection {e.path.name}: {e.reason}")
        return []


def search_features(
    query: str | None,
    collections: Iterable[Path],
    sectors_path: Path | None,
    authorized: bool,
    region: str = RESTRICTED_REGION,
    field: str = REGION_FIELD,
) -> list[dict]:
    """Return every feature whose name contains ``query``.

    Args:
        query: Text fragment. Blank or missing queries return ``[]``
            without reading any file.
        collections: Public collection files, scanned in order.
        sectors_path: The sectors collection, scanned last (None to skip).
        authorized: Whether restricted sectors may be returned.
        region: Reserved sector region label.
        field: Property holding the sector region label.

    Returns:
        Matching features, unmodified and not de-duplicated.
    """
    if not query or not query.strip():
        return []

    needle = query.lower()
    results: list[dict] = []

    for path in collections:
        results.extend(f for f in _load_features(Path(path)) if matches(f, needle))

    if sectors_path is not None:
        sectors = visible_sectors(_load_features(Path(sectors_path)), authorized, region, field)
        results.extend(f for f in sectors if matches(f, needle))

    return results
