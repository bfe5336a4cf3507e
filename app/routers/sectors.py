"""Airspace sectors, with the restricted region hidden from anonymous users."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from airmap.access import filter_collection
from airmap.store import CollectionError, load_collection
from app.auth import is_authorized
from app.config import settings

router = APIRouter(prefix="/api/sectors", tags=["sectors"])


@router.get("")
async def get_sectors(authorized: bool = Depends(is_authorized)):
    """Return the sectors collection, filtered unless the caller is authorized."""
    try:
        data = load_collection(settings.sectors_path)
    except CollectionError as e:
        logger.error(f"Error loading sectors: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to load sectors data"})

    filtered = filter_collection(
        data,
        authorized,
        region=settings.restricted_region,
        field=settings.restricted_field,
    )
    if authorized:
        logger.info(f"Returning all {len(data['features'])} sectors")
    else:
        logger.info(f"Filtered sectors: {len(data['features'])} -> {len(filtered['features'])}")
    return filtered
