"""Dependency-ordered removal of a source and the layers drawing from it."""

from __future__ import annotations

from loguru import logger

from airmap.surface.engine import StyleGraph


def teardown_source(engine: StyleGraph, source_id: str) -> list[str]:
    """Remove ``source_id`` after every layer that references it.

    Layers are removed last-added first, then the source. Missing sources
    are a no-op, so the call is safe before anything was installed.

    Returns:
        IDs of the layers that were removed.
    """
    if engine.removed or engine.get_source(source_id) is None:
        return []

    removed = []
    for layer_id in reversed(engine.layers_for_source(source_id)):
        engine.remove_layer(layer_id)
        removed.append(layer_id)

    engine.remove_source(source_id)
    logger.debug(f"Tore down source {source_id} ({len(removed)} layers)")
    return removed
