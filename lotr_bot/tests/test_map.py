"""
Tests for the map data module.

Covers the default board layout, mirrored Sauron adjacency, the Tunnel of
Moria shortcut, sideways neighbours, terrain and capacity.
"""

import pytest

from lotr_bot.rules_consts import (
    # Factions
    FELLOWSHIP, SAURON,
    # Regions
    REGION_THE_SHIRE, REGION_ARTHEDAIN, REGION_CARDOLAN,
    REGION_RHUDAUR, REGION_EREGION, REGION_ENEDWAITH,
    REGION_THE_HIGH_PASS, REGION_MISTY_MOUNTAINS, REGION_CARADHRAS,
    REGION_GAP_OF_ROHAN,
    REGION_MIRKWOOD, REGION_FANGORN, REGION_ROHAN,
    REGION_DAGORLAD, REGION_GONDOR, REGION_MORDOR,
    ALL_REGIONS,
    # Terrain / capacity
    TERRAIN_MOUNTAINS, HOME_CAPACITY, MOUNTAIN_CAPACITY, DEFAULT_CAPACITY,
)
from lotr_bot.state.catalog import default_catalog
from lotr_bot.map.map_data import (
    build_default_regions,
    get_region_data,
    get_forward_adjacent,
    get_any_adjacent,
    is_adjacent,
    get_sideways_adjacent,
    get_regions_in_row,
    is_mountain,
    get_capacity,
)


@pytest.fixture
def catalog():
    return default_catalog()


class TestLayout:

    def test_sixteen_regions(self):
        regions = build_default_regions()
        assert len(regions) == 16
        assert tuple(regions) == ALL_REGIONS

    def test_rows(self, catalog):
        assert get_regions_in_row(catalog, 0) == (REGION_THE_SHIRE,)
        assert get_regions_in_row(catalog, 3) == (
            REGION_THE_HIGH_PASS, REGION_MISTY_MOUNTAINS,
            REGION_CARADHRAS, REGION_GAP_OF_ROHAN,
        )
        assert get_regions_in_row(catalog, 6) == (REGION_MORDOR,)

    def test_unknown_region(self, catalog):
        assert get_region_data(catalog, "REGION_NOWHERE") is None
        assert get_forward_adjacent(catalog, "REGION_NOWHERE",
                                    FELLOWSHIP) == ()
        assert get_capacity(catalog, "REGION_NOWHERE", FELLOWSHIP) == 0


class TestAdjacency:

    def test_shire_fellowship_forward(self, catalog):
        assert get_forward_adjacent(catalog, REGION_THE_SHIRE, FELLOWSHIP) \
            == (REGION_ARTHEDAIN, REGION_CARDOLAN)

    def test_shire_has_no_sauron_forward(self, catalog):
        assert get_forward_adjacent(catalog, REGION_THE_SHIRE, SAURON) == ()

    def test_sauron_adjacency_is_mirrored(self, catalog):
        """Every Fellowship edge a->b appears as Sauron edge b->a."""
        for region in catalog.regions.values():
            for dest in region.adjacent[FELLOWSHIP]:
                assert region.region_id in \
                    catalog.regions[dest].adjacent[SAURON]

    def test_dagorlad_sauron_forward(self, catalog):
        assert get_forward_adjacent(catalog, REGION_DAGORLAD, SAURON) == (
            REGION_MIRKWOOD, REGION_FANGORN,
        )

    def test_tunnel_of_moria_fellowship_only(self, catalog):
        assert REGION_FANGORN in get_forward_adjacent(
            catalog, REGION_EREGION, FELLOWSHIP)
        assert REGION_EREGION not in get_forward_adjacent(
            catalog, REGION_FANGORN, SAURON)

    def test_tunnel_is_not_ordinary_adjacency(self, catalog):
        assert not is_adjacent(catalog, REGION_EREGION, REGION_FANGORN)

    def test_any_adjacent_both_directions(self, catalog):
        assert set(get_any_adjacent(catalog, REGION_EREGION)) == {
            REGION_MISTY_MOUNTAINS, REGION_CARADHRAS,
            REGION_ARTHEDAIN, REGION_CARDOLAN,
        }


class TestSideways:

    @pytest.mark.parametrize("region, expected", [
        (REGION_THE_SHIRE, ()),
        (REGION_ARTHEDAIN, (REGION_CARDOLAN,)),
        (REGION_EREGION, (REGION_RHUDAUR, REGION_ENEDWAITH)),
        (REGION_THE_HIGH_PASS, (REGION_MISTY_MOUNTAINS,)),
        (REGION_CARADHRAS, (REGION_MISTY_MOUNTAINS, REGION_GAP_OF_ROHAN)),
        (REGION_MIRKWOOD, (REGION_FANGORN,)),
        (REGION_FANGORN, (REGION_MIRKWOOD, REGION_ROHAN)),
        (REGION_GONDOR, (REGION_DAGORLAD,)),
        (REGION_MORDOR, ()),
    ])
    def test_sideways_neighbours(self, catalog, region, expected):
        assert get_sideways_adjacent(catalog, region) == expected


class TestTerrainAndCapacity:

    def test_mountains(self, catalog):
        mountains = {r for r in ALL_REGIONS if is_mountain(catalog, r)}
        assert mountains == {
            REGION_THE_HIGH_PASS, REGION_MISTY_MOUNTAINS, REGION_CARADHRAS,
        }
        assert catalog.regions[REGION_CARADHRAS].special == TERRAIN_MOUNTAINS

    def test_gap_of_rohan_is_not_mountains(self, catalog):
        assert not is_mountain(catalog, REGION_GAP_OF_ROHAN)

    @pytest.mark.parametrize("region, cap", [
        (REGION_THE_SHIRE, HOME_CAPACITY),
        (REGION_MORDOR, HOME_CAPACITY),
        (REGION_CARADHRAS, MOUNTAIN_CAPACITY),
        (REGION_GAP_OF_ROHAN, MOUNTAIN_CAPACITY),
        (REGION_ARTHEDAIN, DEFAULT_CAPACITY),
        (REGION_ROHAN, DEFAULT_CAPACITY),
        (REGION_GONDOR, DEFAULT_CAPACITY),
    ])
    def test_capacity(self, catalog, region, cap):
        assert get_capacity(catalog, region, FELLOWSHIP) == cap
        assert get_capacity(catalog, region, SAURON) == cap

    def test_rhudaur_and_enedwaith_default(self, catalog):
        assert get_capacity(catalog, REGION_RHUDAUR, SAURON) == 2
        assert get_capacity(catalog, REGION_ENEDWAITH, FELLOWSHIP) == 2
