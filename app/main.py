"""AIRNAV - Interactive Air Navigation Map.

Main FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.middleware.sessions import SessionMiddleware

from app.config import settings
from app.routers import charts_router, layers_router, search_router, sectors_router

VERSION = "0.1.0"


def _check_data_paths() -> None:
    """Log which configured data files are present."""
    if settings.data_dir.exists():
        logger.info(f"Data path: {settings.data_dir}")
    else:
        logger.warning(f"Data path not found: {settings.data_dir}")

    for name in settings.search_collections:
        if not (settings.data_dir / name).exists():
            logger.warning(f"Collection missing, search will skip it: {name}")

    if settings.sectors_path.exists():
        logger.info(f"Sectors: {settings.sectors_path}")
    else:
        logger.warning(f"Sectors file not found: {settings.sectors_path}")

    if not settings.charts_dir.exists():
        logger.warning(f"Charts directory not found: {settings.charts_dir}")


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info(f"  AIRNAV v{VERSION} - INITIALIZING")
    logger.info("=" * 60)

    _check_data_paths()
    logger.info(f"Sector authorization mode: {settings.auth_mode}")
    if settings.auth_mode == "token" and not settings.sector_access_token:
        logger.warning("SECTOR_ACCESS_TOKEN not set; restricted sectors are hidden from everyone")

    logger.info("=" * 60)
    logger.info("  AIRNAV ONLINE")
    logger.info("=" * 60)

    yield

    logger.info("AIRNAV shutting down...")


# Create FastAPI app
app = FastAPI(
    title="AIRNAV",
    description="Interactive Air Navigation Map",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Session cookie carries the signed-in principal in session auth mode
if settings.auth_mode == "session":
    app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

# Include routers
app.include_router(search_router)
app.include_router(charts_router)
app.include_router(sectors_router)
app.include_router(layers_router)

# Static files: public collections and charts. Sectors are never mounted.
if settings.data_dir.exists():
    app.mount("/data", StaticFiles(directory=settings.data_dir), name="data")


@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page pointing at the API."""
    return HTMLResponse(
        content=f"""
        <html>
            <head><title>AIRNAV</title></head>
            <body style="font-family: sans-serif;">
                <h1>AIRNAV v{VERSION}</h1>
                <p>Map data: <a href="/api/layers">/api/layers</a>,
                   style: <a href="/api/map/style">/api/map/style</a>,
                   docs: <a href="/docs">/docs</a></p>
            </body>
        </html>
        """
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "operational",
        "version": VERSION,
        "system": "AIRNAV",
    }


@app.get("/api/status")
async def status():
    """System status endpoint."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "data_path": str(settings.data_dir),
        "data_exists": settings.data_dir.exists(),
        "auth_mode": settings.auth_mode,
    }
