"""Sector visibility rule shared by every endpoint that returns sectors.

One sector region is restricted: its features are only returned to
authorized callers. Search and the sectors listing both filter through
:func:`visible_sectors`, so the predicate and the reserved label cannot
diverge between them.
"""

from __future__ import annotations

from typing import Iterable

from airmap.store import properties_of

RESTRICTED_REGION = "Singapore"
REGION_FIELD = "fir"


def is_restricted(
    feature: dict,
    region: str = RESTRICTED_REGION,
    field: str = REGION_FIELD,
) -> bool:
    """True if the feature belongs to the restricted sector region."""
    return properties_of(feature).get(field) == region


def visible_sectors(
    features: Iterable[dict],
    authorized: bool,
    region: str = RESTRICTED_REGION,
    field: str = REGION_FIELD,
) -> list[dict]:
    """Return the sectors a caller may see, preserving order."""
    if authorized:
        return list(features)
    return [f for f in features if not is_restricted(f, region, field)]


def filter_collection(
    collection: dict,
    authorized: bool,
    region: str = RESTRICTED_REGION,
    field: str = REGION_FIELD,
) -> dict:
    """Return ``collection`` with restricted sectors removed unless authorized.

    The input is not modified; other top-level members are carried over.
    """
    if authorized:
        return collection
    features = collection.get("features", [])
    return {**collection, "features": visible_sectors(features, False, region, field)}
