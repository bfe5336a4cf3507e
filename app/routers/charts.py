"""Chart document listing."""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from airmap.charts import ChartListingError, list_charts
from app.config import settings

router = APIRouter(prefix="/api/charts", tags=["charts"])


class Chart(BaseModel):
    """A downloadable chart document."""
    name: str
    filename: str
    url: str


class ChartsResponse(BaseModel):
    """Chart listing result."""
    charts: list[Chart]
    error: Optional[str] = None


@router.get("", response_model=ChartsResponse, response_model_exclude_none=True)
async def get_charts(
    query: Optional[str] = Query(None, description="Filename fragment, case-insensitive"),
):
    """List chart files whose name contains ``query``."""
    try:
        charts = list_charts(
            query,
            settings.charts_dir,
            url_prefix=f"/data/{settings.charts_subdir}",
            extension=settings.chart_extension,
        )
    except ChartListingError as e:
        logger.error(f"Charts API error: {e}")
        return JSONResponse(status_code=500, content={"charts": [], "error": str(e)})

    return ChartsResponse(charts=[Chart(**c.to_dict()) for c in charts])
