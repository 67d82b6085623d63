"""
Map data module - Region data and adjacency queries.

Provides the RegionData record, the default 16-region board built from
rules_consts.py, and adjacency queries. Queries take a catalog (anything
with a ``regions`` mapping of region_id -> RegionData) so the same code
serves the default board and an externally loaded one.
"""

from lotr_bot.rules_consts import (
    # Factions
    FELLOWSHIP, SAURON, FACTIONS,
    # Regions
    ALL_REGIONS, REGION_NAMES, REGION_LAYOUT,
    # Terrain
    TERRAIN_MOUNTAINS, REGION_TERRAIN,
    # Capacity
    REGION_CAPACITY, DEFAULT_CAPACITY,
    # Adjacency
    FELLOWSHIP_ADJACENCY, FELLOWSHIP_SPECIAL_ADJACENCY,
)


# ============================================================================
# REGION DATA STRUCTURE
# ============================================================================

class RegionData:
    """Immutable data about a region."""
    __slots__ = ("region_id", "name", "row", "position", "adjacent",
                 "special_adjacent", "special", "capacity")

    def __init__(self, region_id, name, row, position, adjacent,
                 special_adjacent=(), special=None, capacity=None):
        """
        Args:
            region_id: Region identifier.
            name: Display name.
            row: Progression row (0 = The Shire).
            position: Left-to-right order within the row.
            adjacent: {faction: tuple of region ids} forward adjacency.
            special_adjacent: Fellowship-only one-way shortcuts.
            special: Optional terrain tag (e.g. TERRAIN_MOUNTAINS).
            capacity: {faction: int} max occupants per faction.
        """
        self.region_id = region_id
        self.name = name
        self.row = row
        self.position = position
        self.adjacent = {f: tuple(adjacent.get(f, ())) for f in FACTIONS}
        self.special_adjacent = tuple(special_adjacent)
        self.special = special
        if capacity is None:
            capacity = {f: DEFAULT_CAPACITY for f in FACTIONS}
        self.capacity = dict(capacity)

    @property
    def is_mountain(self):
        return self.special == TERRAIN_MOUNTAINS

    def get_capacity(self, faction):
        """Max occupants of ``faction`` allowed in this region."""
        return self.capacity.get(faction, DEFAULT_CAPACITY)

    def __repr__(self):
        return (
            f"RegionData(region_id={self.region_id!r}, row={self.row}, "
            f"position={self.position}, special={self.special!r})"
        )


# ============================================================================
# DEFAULT BOARD
# ============================================================================

def _mirror_adjacency(adjacency):
    """Invert a forward adjacency table (Fellowship -> Sauron direction)."""
    mirrored = {region: [] for region in adjacency}
    for origin in ALL_REGIONS:
        for dest in adjacency.get(origin, ()):
            mirrored.setdefault(dest, []).append(origin)
    return {region: tuple(dests) for region, dests in mirrored.items()}


def build_default_regions():
    """Build the default board.

    Returns:
        Dict {region_id: RegionData} in row/position order.
    """
    sauron_adjacency = _mirror_adjacency(FELLOWSHIP_ADJACENCY)
    regions = {}
    for region_id in ALL_REGIONS:
        row, position = REGION_LAYOUT[region_id]
        cap = REGION_CAPACITY.get(region_id, DEFAULT_CAPACITY)
        regions[region_id] = RegionData(
            region_id,
            REGION_NAMES[region_id],
            row,
            position,
            {
                FELLOWSHIP: FELLOWSHIP_ADJACENCY.get(region_id, ()),
                SAURON: sauron_adjacency.get(region_id, ()),
            },
            special_adjacent=FELLOWSHIP_SPECIAL_ADJACENCY.get(region_id, ()),
            special=REGION_TERRAIN.get(region_id),
            capacity={FELLOWSHIP: cap, SAURON: cap},
        )
    return regions


# ============================================================================
# QUERY FUNCTIONS
# ============================================================================

def get_region_data(catalog, region_id):
    """Get RegionData for a region, or None if unknown."""
    return catalog.regions.get(region_id)


def get_forward_adjacent(catalog, region_id, faction):
    """Get the standard forward moves for a faction from a region.

    Fellowship moves include the one-way special shortcuts (Tunnel of
    Moria). Sauron uses its own (mirrored) adjacency only.

    Args:
        catalog: Catalog with a ``regions`` mapping.
        region_id: Origin region.
        faction: Moving faction.

    Returns:
        Tuple of region ids, adjacency order first, shortcuts last.
    """
    region = catalog.regions.get(region_id)
    if region is None:
        return ()
    result = list(region.adjacent.get(faction, ()))
    if faction == FELLOWSHIP:
        for dest in region.special_adjacent:
            if dest not in result:
                result.append(dest)
    return tuple(result)


def get_any_adjacent(catalog, region_id):
    """Get regions adjacent in either faction's sense (shortcuts excluded).

    Returns:
        Tuple of region ids, Fellowship direction first.
    """
    region = catalog.regions.get(region_id)
    if region is None:
        return ()
    result = []
    for faction in FACTIONS:
        for dest in region.adjacent.get(faction, ()):
            if dest not in result:
                result.append(dest)
    return tuple(result)


def is_adjacent(catalog, region_a, region_b):
    """Check whether two regions are adjacent in either direction."""
    return region_b in get_any_adjacent(catalog, region_a)


def get_sideways_adjacent(catalog, region_id):
    """Get same-row neighbours of a region.

    Two regions of the same row are sideways neighbours when they share an
    adjacent region (one step forward or back reaches both).

    Returns:
        Tuple of region ids sorted by position.
    """
    region = catalog.regions.get(region_id)
    if region is None:
        return ()
    own_neighbours = set(get_any_adjacent(catalog, region_id))
    result = []
    for other in catalog.regions.values():
        if other.region_id == region_id or other.row != region.row:
            continue
        if own_neighbours & set(get_any_adjacent(catalog, other.region_id)):
            result.append(other)
    result.sort(key=lambda r: r.position)
    return tuple(r.region_id for r in result)


def get_regions_in_row(catalog, row):
    """Get region ids in a row, ordered by position."""
    regions = [r for r in catalog.regions.values() if r.row == row]
    regions.sort(key=lambda r: r.position)
    return tuple(r.region_id for r in regions)


def is_mountain(catalog, region_id):
    """Check if a region carries the Mountains terrain tag."""
    region = catalog.regions.get(region_id)
    return region is not None and region.is_mountain


def get_capacity(catalog, region_id, faction):
    """Get the per-faction capacity of a region (0 if unknown)."""
    region = catalog.regions.get(region_id)
    if region is None:
        return 0
    return region.get_capacity(faction)
