"""
Ability kinds - The closed set of character abilities with engine behavior.

Each kind is a small class carrying the data it needs and implementing
one or both capabilities:

- augments movement legality: movement_candidates(state, character_id)
  returns extra destination region ids. Pure; never mutates state.
- reacts to battle start: on_battle_start(state, character_id, battle)
  may mutate the battle and the board. Returns True if it acted.

Preconditions (e.g. "only when defending") are checked by the kind
itself; the dispatcher only matches trigger tags.
"""

import logging

from lotr_bot.rules_consts import FELLOWSHIP, TERRAIN_MOUNTAINS
from lotr_bot.map.map_data import (
    get_forward_adjacent, get_any_adjacent, get_sideways_adjacent,
    is_mountain,
)
from lotr_bot.board.occupancy import (
    get_location, has_enemy, enemy_count, is_full, relocate,
)

logger = logging.getLogger(__name__)


def _faction(state, character_id):
    return state["catalog"].get_character(character_id).faction


def _sideways_attacks(state, region_id, faction):
    """Same-row neighbours of region_id that hold an enemy."""
    catalog = state["catalog"]
    return [r for r in get_sideways_adjacent(catalog, region_id)
            if has_enemy(state, r, faction)]


class AbilityKind:
    """Base class. Subclasses switch on the capabilities they implement."""

    augments_movement = False
    reacts_to_battle_start = False

    def movement_candidates(self, state, character_id):
        return ()

    def on_battle_start(self, state, character_id, battle):
        return False

    def __repr__(self):
        return f"{type(self).__name__}()"


# ============================================================================
# MOVEMENT KINDS
# ============================================================================

class AttackAnyAdjacent(AbilityKind):
    """Attack any adjacent region, forward, backward or via either side's
    adjacency, as long as it holds an enemy (Aragorn)."""

    augments_movement = True

    def movement_candidates(self, state, character_id):
        origin = get_location(state, character_id)
        faction = _faction(state, character_id)
        return [r for r in get_any_adjacent(state["catalog"], origin)
                if has_enemy(state, r, faction)]


class SidewaysAttack(AbilityKind):
    """Attack a same-row neighbour holding an enemy (Witch-king).

    Not available from a region with the ``blocked_terrain`` tag.
    """

    augments_movement = True

    def __init__(self, blocked_terrain=TERRAIN_MOUNTAINS):
        self.blocked_terrain = blocked_terrain

    def movement_candidates(self, state, character_id):
        origin = get_location(state, character_id)
        region = state["catalog"].get_region(origin)
        if region.special == self.blocked_terrain:
            return []
        return _sideways_attacks(state, origin, _faction(state, character_id))


class LoneTargetAttack(AbilityKind):
    """Attack any region on the board holding exactly ``target_count``
    enemies; from the Mountains also attack sideways (Flying Nazgul)."""

    augments_movement = True

    def __init__(self, target_count=1, sideways_from_mountains=True):
        self.target_count = target_count
        self.sideways_from_mountains = sideways_from_mountains

    def movement_candidates(self, state, character_id):
        faction = _faction(state, character_id)
        origin = get_location(state, character_id)
        catalog = state["catalog"]
        result = [r for r in catalog.regions
                  if enemy_count(state, r, faction) == self.target_count]
        if self.sideways_from_mountains and is_mountain(catalog, origin):
            for r in _sideways_attacks(state, origin, faction):
                if r not in result:
                    result.append(r)
        return result


class ForwardCharge(AbilityKind):
    """Move forward any number of regions to attack (Black Rider).

    Walks the faction's forward adjacency branch by branch. A branch ends
    at the first region holding an enemy, which becomes a destination, or
    at a region the faction already fills to capacity, which blocks it.
    """

    augments_movement = True

    def movement_candidates(self, state, character_id):
        faction = _faction(state, character_id)
        catalog = state["catalog"]
        origin = get_location(state, character_id)

        result = []
        visited = {origin}
        stack = list(reversed(get_forward_adjacent(catalog, origin, faction)))
        while stack:
            region_id = stack.pop()
            if region_id in visited:
                continue
            visited.add(region_id)
            if has_enemy(state, region_id, faction):
                result.append(region_id)
                continue
            if is_full(state, region_id, faction):
                continue
            forward = get_forward_adjacent(catalog, region_id, faction)
            stack.extend(reversed(forward))
        return result


# ============================================================================
# BATTLE START KINDS
# ============================================================================

class ForcedRetreat(AbilityKind):
    """When defending, retreat before any cards are played (Frodo).

    Candidates are the forward neighbours in the ``direction`` faction's
    adjacency, in list order, minus ``blocked_terrain`` regions, enemy-held
    regions and regions where the holder's faction is at capacity. The
    first survivor is used and the battle's retreat flag is set.
    """

    reacts_to_battle_start = True

    def __init__(self, blocked_terrain=TERRAIN_MOUNTAINS,
                 direction=FELLOWSHIP):
        self.blocked_terrain = blocked_terrain
        self.direction = direction

    def retreat_options(self, state, character_id):
        faction = _faction(state, character_id)
        catalog = state["catalog"]
        origin = get_location(state, character_id)
        region = catalog.get_region(origin)
        options = []
        for dest in region.adjacent.get(self.direction, ()):
            dest_region = catalog.get_region(dest)
            if dest_region.special == self.blocked_terrain:
                continue
            if has_enemy(state, dest, faction):
                continue
            if is_full(state, dest, faction):
                continue
            options.append(dest)
        return options

    def on_battle_start(self, state, character_id, battle):
        if battle["defender"] != character_id:
            return False
        options = self.retreat_options(state, character_id)
        if not options:
            logger.debug("%s cannot retreat from %s", character_id,
                         battle["region"])
            return False
        origin = get_location(state, character_id)
        relocate(state, character_id, origin, options[0])
        battle["retreated"] = True
        battle["log"].append(f"{character_id} retreats to {options[0]}")
        logger.debug("%s retreats %s -> %s", character_id, origin,
                     options[0])
        return True
