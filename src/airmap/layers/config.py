"""Static layer registry: one descriptor per dataset drawn on the map.

Paint dicts follow the Mapbox GL style specification so the browser can use
them verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field

COLORS = {
    "fir": "rgba(95, 134, 149, 0.8)",
    "firOutline": "rgba(95, 134, 149, 0.8)",
    "waypoint": "hsl(218, 86.40%, 62.50%)",
    "waypointDME": "hsl(17, 100.00%, 60.00%)",
    "prohibited": "indianred",
    "restricted": "darkorange",
    "danger": "gold",
    "highlight": "hsl(24, 100.00%, 50.00%)",
    "sid": "rgba(43, 116, 66, 0.8)",
    "star": "rgba(218, 92, 92, 0.8)",
    "atsRoute": "rgba(22, 77, 98, 0.8)",
    "radiusCircle": "rgb(34, 59, 99)",
}

OUTLINE_WIDTH = 1.2
FILL_OPACITY_LIGHT = 0.08
FILL_OPACITY = 0.35


@dataclass(frozen=True)
class SubCategory:
    """A filterable value of a layer's category field."""

    key: str
    label: str
    color: str | None = None
    flag: str | None = None


@dataclass(frozen=True)
class Outline:
    """Secondary line layer drawn from the same source as its parent."""

    id: str
    type: str = "line"
    paint: dict = field(default_factory=dict)


@dataclass(frozen=True)
class LayerDescriptor:
    """Rendering configuration for one dataset.

    Attributes:
        id: Source id and primary render layer id.
        group: Visibility group key (toggled as one unit).
        label: Display name in the layer panel and legend.
        url: Where the browser fetches the GeoJSON.
        type: Render type: "fill", "line" or "circle".
        paint: Mapbox GL paint properties.
        visible: Default visibility.
        category_field: Property used for sub-category filtering.
        sublayers: Sub-category values of ``category_field``.
        outline: Optional outline layer sharing the source.
    """

    id: str
    group: str
    label: str
    url: str
    type: str
    paint: dict
    visible: bool = False
    category_field: str | None = None
    sublayers: tuple[SubCategory, ...] = ()
    outline: Outline | None = None

    @property
    def layer_ids(self) -> list[str]:
        """Render layers belonging to this descriptor, primary first."""
        ids = [self.id]
        if self.outline is not None:
            ids.append(self.outline.id)
        return ids

    @property
    def color(self) -> str | None:
        """Plain colour for the legend, if the paint uses a literal one."""
        for key in ("fill-color", "line-color", "circle-color"):
            value = self.paint.get(key)
            if isinstance(value, str):
                return value
        if self.outline is not None:
            value = self.outline.paint.get("line-color")
            if isinstance(value, str):
                return value
        return None


def _category_match(field_name: str, colors: dict[str, str], fallback: str = "#cccccc") -> list:
    expr: list = ["match", ["get", field_name]]
    for key, color in colors.items():
        expr.extend([key, color])
    expr.append(fallback)
    return expr


_WARNING_COLORS = {
    "prohibited": COLORS["prohibited"],
    "restricted": COLORS["restricted"],
    "danger": COLORS["danger"],
}

_SECTOR_COLOR = ["coalesce", ["get", "fill-color"], COLORS["firOutline"]]


LAYERS: tuple[LayerDescriptor, ...] = (
    LayerDescriptor(
        id="firs-fill",
        group="firs",
        label="FIRs",
        url="/data/FIRs.geojson",
        type="fill",
        paint={"fill-color": COLORS["fir"], "fill-opacity": FILL_OPACITY_LIGHT},
        visible=True,
        outline=Outline(
            id="firs-outline",
            paint={"line-color": COLORS["firOutline"], "line-width": OUTLINE_WIDTH},
        ),
    ),
    LayerDescriptor(
        id="navWarnings-fill",
        group="navWarnings",
        label="Nav Warnings",
        url="/data/NavWarnings.geojson",
        type="fill",
        category_field="category",
        sublayers=(
            SubCategory("prohibited", "Prohibited Area", COLORS["prohibited"]),
            SubCategory("restricted", "Restricted Area", COLORS["restricted"]),
            SubCategory("danger", "Danger Area", COLORS["danger"]),
        ),
        paint={
            "fill-color": _category_match("category", _WARNING_COLORS),
            "fill-opacity": FILL_OPACITY,
        },
        outline=Outline(
            id="navWarnings-outline",
            paint={
                "line-color": _category_match("category", _WARNING_COLORS),
                "line-width": OUTLINE_WIDTH,
            },
        ),
    ),
    LayerDescriptor(
        id="sectors-fill",
        group="sectors",
        label="Sectors",
        url="/api/sectors",
        type="fill",
        category_field="fir",
        sublayers=(
            SubCategory("Singapore", "Singapore Sectors", flag="\U0001F1F8\U0001F1EC"),
            SubCategory("Kuala Lumpur", "Kuala Lumpur Sectors", flag="\U0001F1F2\U0001F1FE"),
            SubCategory("Jakarta", "Jakarta Sectors", flag="\U0001F1EE\U0001F1E9"),
            SubCategory("Ujung Pandang", "Ujung Pandang Sectors", flag="\U0001F1EE\U0001F1E9"),
            SubCategory("Bangkok", "Bangkok Sectors", flag="\U0001F1F9\U0001F1ED"),
            SubCategory("Ho Chi Minh", "Ho Chi Minh Sectors", flag="\U0001F1FB\U0001F1F3"),
        ),
        paint={"fill-color": _SECTOR_COLOR, "fill-opacity": FILL_OPACITY},
        outline=Outline(
            id="sectors-outline",
            paint={"line-color": _SECTOR_COLOR, "line-width": OUTLINE_WIDTH},
        ),
    ),
    LayerDescriptor(
        id="waypoints",
        group="waypoints",
        label="Waypoints",
        url="/data/Waypoints.geojson",
        type="circle",
        category_field="dme",
        sublayers=(
            SubCategory("true", "DME Waypoint", COLORS["waypointDME"]),
            SubCategory("false", "Waypoint", COLORS["waypoint"]),
        ),
        paint={
            "circle-color": _category_match(
                "dme", {"false": COLORS["waypoint"], "true": COLORS["waypointDME"]}
            ),
            "circle-radius": 4,
            "circle-stroke-width": 1,
            "circle-stroke-color": COLORS["waypoint"],
        },
    ),
    LayerDescriptor(
        id="sids",
        group="sids",
        label="SIDs",
        url="/data/SIDs.geojson",
        type="line",
        category_field="runway",
        sublayers=tuple(
            SubCategory(f"RWY {rwy}", f"RWY {rwy} SIDs", COLORS["sid"])
            for rwy in ("02L", "02C", "02R", "20L", "20C", "20R")
        ),
        paint={"line-color": COLORS["sid"], "line-width": 2},
    ),
    LayerDescriptor(
        id="stars",
        group="stars",
        label="STARs",
        url="/data/STARs.geojson",
        type="line",
        category_field="runway",
        sublayers=(
            SubCategory("RWY 02L/02C/02R", "RWY 02L/02C/02R STARs", COLORS["star"]),
            SubCategory("RWY 20R/20C/20L", "RWY 20R/20C/20L STARs", COLORS["star"]),
        ),
        paint={"line-color": COLORS["star"], "line-width": 2},
    ),
    LayerDescriptor(
        id="atsRoutes",
        group="atsRoutes",
        label="ATS Routes",
        url="/data/atsRoutes.geojson",
        type="line",
        category_field="ATS",
        paint={"line-color": COLORS["atsRoute"], "line-width": 2},
    ),
)
