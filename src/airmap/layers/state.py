"""Layer visibility and sub-category state for the map surface.

Two independent pieces of state are kept per group:

    layer_visibility      group -> visible?
    category_visibility   group -> {sub-category key -> included?}

Hiding a group never touches its category state, so showing it again brings
back whatever sub-category filter was chosen before. Updates replace the
whole mapping rather than mutating it in place; readers holding an old
mapping keep a consistent snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from airmap.access import RESTRICTED_REGION
from airmap.layers.config import LAYERS, LayerDescriptor


@dataclass(frozen=True)
class Legend:
    """One row of the map legend."""

    label: str
    group: str
    color: str | None = None
    shape: str = "square"
    category: str | None = None
    flag: str | None = None


def compile_category_filter(field: str, keys: list[str]) -> list:
    """Compile included sub-category keys into a membership filter.

    The result reads "category field value is one of ``keys``". An empty
    ``keys`` list yields a filter that matches no feature at all.
    """
    return ["in", ["get", field], ["literal", list(keys)]]


class MapLayerState:
    """Visibility state of every layer group and its sub-categories."""

    def __init__(self, layers: tuple[LayerDescriptor, ...] = LAYERS) -> None:
        self.layers = layers
        self._by_group = {layer.group: layer for layer in layers}
        self.layer_visibility: dict[str, bool] = {
            layer.group: layer.visible for layer in layers
        }
        self.category_visibility: dict[str, dict[str, bool]] = {
            layer.group: {sub.key: True for sub in layer.sublayers}
            for layer in layers
            if layer.sublayers
        }

    def descriptor(self, group: str) -> LayerDescriptor:
        """Return the descriptor of ``group``.

        Raises:
            KeyError: If the group is not registered.
        """
        try:
            return self._by_group[group]
        except KeyError:
            raise KeyError(f"Layer group not found: {group}") from None

    def is_visible(self, group: str) -> bool:
        return self.layer_visibility.get(group, False)

    def toggle_group(self, group: str) -> bool:
        """Flip a group's visibility and return the new value."""
        self.descriptor(group)
        visible = not self.layer_visibility[group]
        self.layer_visibility = {**self.layer_visibility, group: visible}
        return visible

    def toggle_category(self, group: str, key: str) -> list:
        """Flip one sub-category and return the group's new filter.

        Raises:
            KeyError: If the group has no such sub-category.
        """
        categories = self.category_visibility.get(group)
        if categories is None or key not in categories:
            raise KeyError(f"Sub-category not found: {group}/{key}")
        self.category_visibility = {
            **self.category_visibility,
            group: {**categories, key: not categories[key]},
        }
        return self.category_filter(group)

    def included_categories(self, group: str) -> list[str]:
        """Keys currently included for ``group``, in descriptor order."""
        categories = self.category_visibility.get(group, {})
        return [k for k, included in categories.items() if included]

    def category_filter(self, group: str) -> list | None:
        """The group's current membership filter, or None if it has none."""
        layer = self.descriptor(group)
        if not layer.category_field or group not in self.category_visibility:
            return None
        return compile_category_filter(layer.category_field, self.included_categories(group))


def get_legends(state: MapLayerState) -> list[Legend]:
    """Derive legend rows from the current visibility state."""
    legends: list[Legend] = []
    for layer in state.layers:
        if not state.is_visible(layer.group):
            continue
        shape = "circle" if layer.type == "circle" else "square"
        if layer.sublayers:
            for sub in layer.sublayers:
                legends.append(Legend(
                    label=sub.label,
                    group=layer.group,
                    color=sub.color,
                    shape=shape,
                    category=sub.key,
                    flag=sub.flag,
                ))
        else:
            legends.append(Legend(
                label=layer.label,
                group=layer.group,
                color=layer.color,
                shape=shape,
            ))
    return legends


def visible_legends(
    legends: list[Legend],
    authorized: bool,
    region: str = RESTRICTED_REGION,
) -> list[Legend]:
    """Drop the restricted sector region's legend row for anonymous users."""
    if authorized:
        return list(legends)
    return [legend for legend in legends if legend.category != region]
