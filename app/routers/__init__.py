"""API routers for AIRNAV."""

from app.routers.charts import router as charts_router
from app.routers.layers import router as layers_router
from app.routers.search import router as search_router
from app.routers.sectors import router as sectors_router

__all__ = ["charts_router", "layers_router", "search_router", "sectors_router"]
