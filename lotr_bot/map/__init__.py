"""Map module - Region and adjacency data for the Confrontation board."""

from lotr_bot.map.map_data import (
    RegionData,
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

__all__ = [
    "RegionData",
    "build_default_regions",
    "get_region_data",
    "get_forward_adjacent",
    "get_any_adjacent",
    "is_adjacent",
    "get_sideways_adjacent",
    "get_regions_in_row",
    "is_mountain",
    "get_capacity",
]
