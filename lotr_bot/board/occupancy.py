"""
Occupancy module - The ONLY way character positions change in game state.

All location changes go through this module. state["locations"] maps
character id -> region id; state["occupants"] maps region id ->
{faction: [character ids]}. The two are kept in lockstep here. Never edit
either dict directly outside setup and tests.

Legality is NOT checked here. Movement legality belongs to
commands/move.py, which must be consulted before relocate() is called.
"""

import logging

from lotr_bot.rules_consts import FACTIONS, OPPONENT

logger = logging.getLogger(__name__)


class BoardError(Exception):
    """Raised when an occupancy operation would break state integrity."""
    pass


def _faction_of(state, character_id):
    character = state["catalog"].get_character(character_id)
    if character is None:
        raise BoardError(f"Unknown character {character_id!r}")
    return character.faction


def _region_lists(state, region_id):
    occupants = state["occupants"].get(region_id)
    if occupants is None:
        raise BoardError(f"Unknown region {region_id!r}")
    return occupants


# ============================================================================
# QUERIES
# ============================================================================

def get_location(state, character_id):
    """Region id of a character, or None if absent (defeated/unknown)."""
    return state["locations"].get(character_id)


def get_occupants(state, region_id, faction):
    """Ordered character ids of ``faction`` in a region.

    Returns:
        Tuple (empty for unknown regions).
    """
    return tuple(state["occupants"].get(region_id, {}).get(faction, ()))


def count_occupants(state, region_id, faction=None):
    """Count occupants of a region, optionally for one faction."""
    factions = (faction,) if faction else FACTIONS
    return sum(len(get_occupants(state, region_id, f)) for f in factions)


def enemy_count(state, region_id, faction):
    """Number of ``faction``'s enemies in a region."""
    return count_occupants(state, region_id, OPPONENT[faction])


def has_enemy(state, region_id, faction):
    """True if at least one enemy of ``faction`` is in the region."""
    return enemy_count(state, region_id, faction) > 0


def is_full(state, region_id, faction):
    """True if ``faction`` is already at the region's capacity."""
    region = state["catalog"].get_region(region_id)
    if region is None:
        return True
    return count_occupants(state, region_id, faction) >= \
        region.get_capacity(faction)


def has_both_factions(state, region_id):
    """True if the region holds at least one occupant of each faction."""
    return all(count_occupants(state, region_id, f) > 0 for f in FACTIONS)


def located_characters(state, faction=None):
    """Located character ids, in catalog order, optionally by faction."""
    catalog = state["catalog"]
    ids = (catalog.characters_of(faction) if faction
           else tuple(catalog.characters))
    return tuple(c for c in ids if c in state["locations"])


# ============================================================================
# MUTATORS
# ============================================================================

def place_character(state, character_id, region_id):
    """Put an off-board character into a region (setup only).

    Raises:
        BoardError: If the character is already located or ids are unknown.
    """
    faction = _faction_of(state, character_id)
    lists = _region_lists(state, region_id)
    if character_id in state["locations"]:
        raise BoardError(
            f"{character_id} is already in {state['locations'][character_id]}"
        )
    lists[faction].append(character_id)
    state["locations"][character_id] = region_id


def relocate(state, character_id, from_region, to_region):
    """Move a character between regions.

    Removes the id from the source faction list, appends it to the
    destination faction list and updates the location map.

    Args:
        state: Game state dict. Modified in place.
        character_id: Character to move.
        from_region: Region the character is in now.
        to_region: Destination region.

    Raises:
        BoardError: If the character is not in ``from_region`` or a
            region is unknown.
    """
    faction = _faction_of(state, character_id)
    source = _region_lists(state, from_region)
    dest = _region_lists(state, to_region)
    if state["locations"].get(character_id) != from_region:
        raise BoardError(f"{character_id} is not in {from_region}")

    source[faction] = [c for c in source[faction] if c != character_id]
    dest[faction].append(character_id)
    state["locations"][character_id] = to_region
    logger.debug("%s relocated %s -> %s", character_id, from_region,
                 to_region)


def remove_character(state, character_id):
    """Take a character off the board (defeat).

    Defeated characters are not kept anywhere; they simply stop being
    located.

    Returns:
        The region the character was removed from, or None if it was not
        on the board.
    """
    region_id = state["locations"].pop(character_id, None)
    if region_id is None:
        return None
    faction = _faction_of(state, character_id)
    lists = state["occupants"][region_id]
    lists[faction] = [c for c in lists[faction] if c != character_id]
    logger.debug("%s removed from %s", character_id, region_id)
    return region_id
