"""Feature search across the map's GeoJSON collections."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from loguru import logger

from airmap.search import search_features
from app.auth import is_authorized
from app.config import settings

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("")
async def search(
    query: Optional[str] = Query(None, description="Name fragment, case-insensitive"),
    authorized: bool = Depends(is_authorized),
):
    """Return every feature whose name contains ``query``.

    Public collections are scanned in configured order, then sectors. A
    missing or broken collection file is skipped, never fatal.
    """
    if not query or not query.strip():
        return {"results": []}

    results = search_features(
        query,
        collections=[settings.data_dir / name for name in settings.search_collections],
        sectors_path=settings.sectors_path,
        authorized=authorized,
        region=settings.restricted_region,
        field=settings.restricted_field,
    )
    logger.debug(f"Search '{query}': {len(results)} results (authorized={authorized})")
    return {"results": results}
