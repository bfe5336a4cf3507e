"""Configuration management using Pydantic settings."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "AIRNAV"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Public data (served under /data) and the non-public sectors file
    data_dir: Path = Path("./public/data")
    private_dir: Path = Path("./data/private")
    sectors_file: str = "Sectors.geojson"

    # Chart documents live under data_dir / charts_subdir
    charts_subdir: str = "charts"
    chart_extension: str = ".pdf"

    # Collections scanned by /api/search, in result order (sectors come last)
    search_collections: list[str] = [
        "FIRs.geojson",
        "NavWarnings.geojson",
        "Waypoints.geojson",
        "SIDs.geojson",
        "STARs.geojson",
        "atsRoutes.geojson",
    ]

    # Sector region hidden from unauthorized callers
    restricted_region: str = "Singapore"
    restricted_field: str = "fir"

    # Authorization: "token" (bearer header) or "session" (signed cookie).
    # Only one mode is active per deployment.
    auth_mode: Literal["token", "session"] = "token"
    sector_access_token: str = ""
    session_secret: str = "change-me"

    # Map surface
    map_style: str = "mapbox://styles/mapbox/light-v11"
    map_center_lng: float = 104.2
    map_center_lat: float = 2.0
    map_zoom: float = 6.0
    mapbox_token: Optional[str] = None

    @property
    def charts_dir(self) -> Path:
        return self.data_dir / self.charts_subdir

    @property
    def sectors_path(self) -> Path:
        return self.private_dir / self.sectors_file


settings = Settings()
