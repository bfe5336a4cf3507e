"""Load GeoJSON (RFC 7946) collections from disk.

Collections are read fresh on every call; nothing is cached. Features are
returned exactly as stored so that callers can hand them back to the map
unchanged.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator


class CollectionError(Exception):
    """A collection file is missing, unreadable, or not a FeatureCollection."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def load_collection(path: Path | str) -> dict:
    """Read a FeatureCollection from ``path``.

    Args:
        path: Location of the .geojson file.

    Returns:
        The parsed collection dict. Top-level members other than
        ``features`` are preserved.

    Raises:
        CollectionError: If the file is missing, unreadable, not valid JSON,
            or has no ``features`` list.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CollectionError(path, "file not found")
    except OSError as e:
        raise CollectionError(path, f"unreadable ({e})")

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise CollectionError(path, f"malformed JSON ({e})")

    if not isinstance(data, dict) or not isinstance(data.get("features"), list):
        raise CollectionError(path, "not a FeatureCollection")

    return data


def iter_features(collection: dict) -> Iterator[dict]:
    """Yield the well-formed features of a collection in file order.

    Entries that are not objects are skipped. A missing or non-object
    ``properties`` member is tolerated; use :func:`properties_of` to read it.
    """
    for raw in collection.get("features", []):
        if isinstance(raw, dict):
            yield raw


def properties_of(feature: dict) -> dict:
    """Return a feature's properties, or an empty dict if absent/invalid."""
    properties = feature.get("properties") or {}
    if not isinstance(properties, dict):
        return {}
    return properties


def geometry_type(feature: dict) -> str:
    """Return the feature's geometry type ("" when the geometry is missing)."""
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return ""
    return geometry.get("type", "") or ""
