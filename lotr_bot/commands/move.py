"""Move command - Movement legality and execution.

Every legality question is answered from one place: legal_destinations()
computes the full destination set for a character, and both highlighting
(is_legal_move) and commit-time validation (attempt_move) use it.

Destination set:
  1. Standard forward adjacency (Fellowship adds the Tunnel of Moria).
  2. Plus candidates from the character's movement abilities.
  3. Minus regions where the mover's faction is already at capacity.

A committed move that puts both factions in one region starts a battle.
"""

import logging

from lotr_bot.map.map_data import get_forward_adjacent
from lotr_bot.board.occupancy import (
    get_location, is_full, relocate, located_characters, has_enemy,
)
from lotr_bot.abilities.dispatch import movement_candidates
from lotr_bot.battle.resolve import check_for_battle

logger = logging.getLogger(__name__)


# ============================================================================
# LEGALITY
# ============================================================================

def legal_destinations(state, character_id):
    """Compute every region a character may move to right now.

    Args:
        state: Game state dict. Not modified.
        character_id: Character to move.

    Returns:
        frozenset of region ids. Empty for unknown or defeated characters.
    """
    catalog = state["catalog"]
    character = catalog.get_character(character_id)
    origin = get_location(state, character_id)
    if character is None or origin is None:
        return frozenset()
    if catalog.get_region(origin) is None:
        return frozenset()

    candidates = set(get_forward_adjacent(catalog, origin, character.faction))
    candidates |= movement_candidates(state, character_id)
    candidates.discard(origin)

    return frozenset(
        region_id for region_id in candidates
        if catalog.get_region(region_id) is not None
        and not is_full(state, region_id, character.faction)
    )


def is_legal_move(state, character_id, region_id):
    """Check whether region_id is in the character's legal set."""
    return region_id in legal_destinations(state, character_id)


def get_legal_moves(state, faction):
    """All legal (character_id, region_id) pairs for a faction.

    Returns:
        List of pairs in catalog character order, destinations sorted.
    """
    moves = []
    for character_id in located_characters(state, faction):
        for region_id in sorted(legal_destinations(state, character_id)):
            moves.append((character_id, region_id))
    return moves


def is_attack(state, character_id, region_id):
    """True if moving there would land on at least one enemy."""
    faction = state["catalog"].get_character(character_id).faction
    return has_enemy(state, region_id, faction)


# ============================================================================
# EXECUTION
# ============================================================================

def validate_move(state, character_id, region_id):
    """Check a move command without executing it.

    Returns:
        (True, "") if valid, (False, reason) if not.
    """
    if state["battle"] is not None:
        return (False, "A battle is in progress")
    character = state["catalog"].get_character(character_id)
    if character is None:
        return (False, f"Unknown character {character_id!r}")
    if character_id not in state["locations"]:
        return (False, f"{character.name} is not on the board")
    if character.faction != state["turn"]:
        return (False, f"It is not {character.faction}'s turn")
    if not is_legal_move(state, character_id, region_id):
        return (False,
                f"{character.name} cannot move to {region_id}")
    return (True, "")


def attempt_move(state, character_id, region_id):
    """Move a character if the move is legal, then check for battle.

    A rejected move leaves the state untouched.

    Args:
        state: Game state dict. Modified in place on success.
        character_id: Character to move.
        region_id: Destination region.

    Returns:
        (True, "") on success, (False, reason) on failure.
    """
    ok, reason = validate_move(state, character_id, region_id)
    if not ok:
        logger.debug("Move rejected: %s", reason)
        return (False, reason)

    origin = get_location(state, character_id)
    relocate(state, character_id, origin, region_id)
    logger.debug("%s moved %s -> %s", character_id, origin, region_id)

    faction = state["catalog"].get_character(character_id).faction
    check_for_battle(state, region_id, faction)
    return (True, "")
