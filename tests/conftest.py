"""Shared fixtures: a throwaway data tree and settings pointed at it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from app.config import settings
from tests.lib.factories import line, point, square, write_collection

ACCESS_TOKEN = "test-sector-token"

COLLECTIONS = [
    "FIRs.geojson",
    "NavWarnings.geojson",
    "Waypoints.geojson",
    "SIDs.geojson",
    "STARs.geojson",
    "atsRoutes.geojson",  # deliberately not written
]


@dataclass
class AirnavData:
    public: Path
    private: Path
    charts: Path

    @property
    def sectors(self) -> Path:
        return self.private / "Sectors.geojson"

    @property
    def collections(self) -> list[Path]:
        return [self.public / name for name in COLLECTIONS]


@pytest.fixture
def airnav_data(tmp_path) -> AirnavData:
    """Write a small but complete data tree under tmp_path."""
    data = AirnavData(
        public=tmp_path / "public" / "data",
        private=tmp_path / "private",
        charts=tmp_path / "public" / "data" / "charts",
    )

    write_collection(
        data.public / "FIRs.geojson",
        square(102.0, 0.5, 5.0, name="Singapore FIR"),
        square(98.0, 1.0, 4.0, name="Kuala Lumpur FIR"),
    )
    write_collection(
        data.public / "NavWarnings.geojson",
        square(103.8, 1.25, 0.05, name="WSP2", category="prohibited"),
        square(103.6, 1.30, 0.10, name="WSR31", category="restricted"),
    )
    write_collection(
        data.public / "Waypoints.geojson",
        point(103.6419, 1.6408, name="ALPHA", dme="false"),
        point(104.5125, 1.7547, ident="BETA", dme="true"),
    )
    write_collection(
        data.public / "SIDs.geojson",
        line([[103.99, 1.36], [104.1, 1.5], [104.5, 1.75]], name="ALPHA 1A", type="SID", runway="RWY 02L"),
    )
    write_collection(
        data.public / "STARs.geojson",
        line([[105.0, 2.1], [104.2, 1.5]], name="BETA 2B", type="STAR", runway="RWY 20R/20C/20L"),
    )
    write_collection(
        data.sectors,
        square(103.5, 1.0, name="Singapore Sector 1", fir="Singapore"),
        square(104.5, 1.0, name="Singapore Sector 2", fir="Singapore"),
        square(100.5, 2.0, name="Kuala Lumpur Sector 3", fir="Kuala Lumpur"),
        name="Sectors",
    )

    data.charts.mkdir(parents=True)
    for filename in ("VJBB.pdf", "VJBX.PDF", "WSSS.pdf", "VJB-notes.txt"):
        (data.charts / filename).write_bytes(b"%PDF-1.4\n")

    return data


@pytest.fixture
def airnav_settings(airnav_data, monkeypatch) -> AirnavData:
    """Point the global settings at the throwaway data tree (token mode)."""
    monkeypatch.setattr(settings, "data_dir", airnav_data.public)
    monkeypatch.setattr(settings, "private_dir", airnav_data.private)
    monkeypatch.setattr(settings, "sectors_file", "Sectors.geojson")
    monkeypatch.setattr(settings, "charts_subdir", "charts")
    monkeypatch.setattr(settings, "search_collections", list(COLLECTIONS))
    monkeypatch.setattr(settings, "restricted_region", "Singapore")
    monkeypatch.setattr(settings, "restricted_field", "fir")
    monkeypatch.setattr(settings, "auth_mode", "token")
    monkeypatch.setattr(settings, "sector_access_token", ACCESS_TOKEN)
    return airnav_data


@pytest.fixture
def auth_headers(airnav_settings) -> dict:
    """Headers carrying the configured sector access token."""
    return {"Authorization": f"Bearer {ACCESS_TOKEN}"}
