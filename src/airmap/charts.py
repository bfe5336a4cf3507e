"""Chart document listing (PDF approach/aerodrome charts on disk)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path


class ChartListingError(Exception):
    """The chart directory exists but could not be listed."""


@dataclass(frozen=True)
class ChartEntry:
    """A chart document available for download."""

    name: str
    filename: str
    url: str

    def to_dict(self) -> dict:
        return asdict(self)


def strip_extension(filename: str, extension: str = ".pdf") -> str:
    """Drop a trailing chart extension, whatever its case."""
    if filename.upper().endswith(extension.upper()):
        return filename[: -len(extension)]
    return filename


def list_charts(
    query: str | None,
    charts_dir: Path,
    url_prefix: str = "/data/charts",
    extension: str = ".pdf",
) -> list[ChartEntry]:
    """List chart files whose name contains ``query`` (case-insensitive).

    Args:
        query: Text fragment. Empty queries return ``[]`` without touching
            the directory.
        charts_dir: Directory holding the chart documents.
        url_prefix: Public path the directory is served under.
        extension: Chart file extension, matched case-insensitively.

    Returns:
        Matching charts sorted by filename. A missing directory yields ``[]``.

    Raises:
        ChartListingError: On any other I/O failure while listing.
    """
    if not query:
        return []

    needle = query.upper()
    suffix = extension.upper()

    try:
        filenames = sorted(item.name for item in Path(charts_dir).iterdir())
    except FileNotFoundError:
        return []
    except OSError as e:
        raise ChartListingError(f"Cannot list {charts_dir}: {e}") from e

    charts = []
    for filename in filenames:
        upper = filename.upper()
        if not upper.endswith(suffix) or needle not in upper:
            continue
        charts.append(ChartEntry(
            name=strip_extension(filename, extension),
            filename=filename,
            url=f"{url_prefix.rstrip('/')}/{filename}",
        ))
    return charts
