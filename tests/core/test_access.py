"""Tests for the restricted-sector visibility rule."""

import pytest

from airmap.access import filter_collection, is_restricted, visible_sectors
from tests.lib.factories import collection, square

SG1 = square(103.5, 1.0, name="SG1", fir="Singapore")
KL1 = square(100.5, 2.0, name="KL1", fir="Kuala Lumpur")
SG2 = square(104.5, 1.0, name="SG2", fir="Singapore")
JK1 = square(106.0, -6.0, name="JK1", fir="Jakarta")


@pytest.mark.unit
class TestVisibleSectors:
    """Restricted region hidden unless authorized."""

    def test_is_restricted(self):
        assert is_restricted(SG1)
        assert not is_restricted(KL1)
        assert not is_restricted(square(0, 0, name="no region"))

    def test_label_must_match_exactly(self):
        assert not is_restricted(square(0, 0, fir="singapore"))

    def test_unauthorized_drops_restricted_preserving_order(self):
        result = visible_sectors([SG1, KL1, SG2, JK1], authorized=False)
        assert [f["properties"]["name"] for f in result] == ["KL1", "JK1"]

    def test_authorized_keeps_everything(self):
        result = visible_sectors([SG1, KL1, SG2, JK1], authorized=True)
        assert result == [SG1, KL1, SG2, JK1]

    def test_difference_is_exactly_the_restricted_subset(self):
        features = [SG1, KL1, SG2, JK1]
        full = visible_sectors(features, authorized=True)
        partial = visible_sectors(features, authorized=False)
        removed = [f for f in full if f not in partial]
        assert removed == [SG1, SG2]

    def test_custom_region_and_field(self):
        feature = square(0, 0, region="Bangkok")
        assert visible_sectors([feature], False, region="Bangkok", field="region") == []


@pytest.mark.unit
class TestFilterCollection:
    """Whole-collection filtering."""

    def test_keeps_top_level_members_and_input(self):
        data = collection(SG1, KL1, name="Sectors")
        filtered = filter_collection(data, authorized=False)
        assert filtered["name"] == "Sectors"
        assert filtered["type"] == "FeatureCollection"
        assert filtered["features"] == [KL1]
        assert len(data["features"]) == 2

    def test_authorized_returns_collection_unmodified(self):
        data = collection(SG1, KL1)
        assert filter_collection(data, authorized=True) is data
