"""
State schema module - Master game state dictionary.

Builds the initial state for a game: every character in its starting
region, full hands, empty discards, Sauron to act in round 1. The state is
a plain dict passed explicitly into every engine operation.

Also provides validate_state() for invariant checks and get_snapshot()
for the presentation layer.
"""

import random

from lotr_bot.rules_consts import (
    FELLOWSHIP, SAURON, FACTIONS,
    STARTING_FACTION, STARTING_ROUND, STARTING_REGIONS,
    BATTLE_PHASES,
    HIDDEN_UNIT,
)
from lotr_bot.state.catalog import CatalogError, default_catalog
from lotr_bot.board.occupancy import place_character


def build_initial_state(catalog=None, seed=None, starting_regions=None):
    """Create the state for a new game.

    Args:
        catalog: Catalog to play on. Defaults to the standard board.
        seed: Optional RNG seed for deterministic replay.
        starting_regions: Optional {faction: {character_id: region_id}}
            overriding STARTING_REGIONS.

    Returns:
        Game state dictionary.

    Raises:
        CatalogError: If a character has no starting region, or its
            starting region is not in the catalog.
    """
    if catalog is None:
        catalog = default_catalog()
    if starting_regions is None:
        starting_regions = STARTING_REGIONS

    occupants = {
        region_id: {faction: [] for faction in FACTIONS}
        for region_id in catalog.regions
    }

    players = {}
    for faction in FACTIONS:
        players[faction] = {
            "hand": list(catalog.cards_of(faction)),
            "deck": [],  # No draw mechanics; kept for record shape
            "discard": [],
        }

    state = {
        "catalog": catalog,
        "locations": {},
        "occupants": occupants,
        "players": players,
        "card_totals": {f: len(players[f]["hand"]) for f in FACTIONS},
        "turn": STARTING_FACTION,
        "round": STARTING_ROUND,
        "battle": None,
        "revealed": set(),
        "rng": random.Random(seed),
    }

    for character in catalog.characters.values():
        region_id = starting_regions.get(character.faction, {}).get(
            character.character_id
        )
        if region_id is None:
            raise CatalogError(
                f"No starting region for {character.character_id}"
            )
        if region_id not in catalog.regions:
            raise CatalogError(
                f"Starting region {region_id!r} of "
                f"{character.character_id} is not in the catalog"
            )
        place_character(state, character.character_id, region_id)

    return state


def validate_state(state):
    """Validate state integrity.

    Checks:
        - locations and occupant lists agree, no duplicates
        - no faction list exceeds its region capacity
        - hand + discard reconcile with the cards issued, and are disjoint
        - revealed units are Sauron characters
        - an active battle is in a known phase

    Args:
        state: Game state dict.

    Returns:
        List of error strings. Empty list means valid.
    """
    errors = []
    catalog = state["catalog"]

    seen = {}
    for region_id, lists in state["occupants"].items():
        region = catalog.get_region(region_id)
        for faction in FACTIONS:
            ids = lists.get(faction, [])
            if region is not None and len(ids) > region.get_capacity(faction):
                errors.append(
                    f"{region_id} {faction}: {len(ids)} occupants, "
                    f"capacity {region.get_capacity(faction)}"
                )
            for character_id in ids:
                character = catalog.get_character(character_id)
                if character is None or character.faction != faction:
                    errors.append(
                        f"{character_id} listed under {faction} in "
                        f"{region_id}"
                    )
                if character_id in seen:
                    errors.append(
                        f"{character_id} listed in {seen[character_id]} "
                        f"and {region_id}"
                    )
                seen[character_id] = region_id

    for character_id, region_id in state["locations"].items():
        if seen.get(character_id) != region_id:
            errors.append(
                f"{character_id} located in {region_id} but listed in "
                f"{seen.get(character_id)}"
            )
    for character_id, region_id in seen.items():
        if character_id not in state["locations"]:
            errors.append(
                f"{character_id} listed in {region_id} but not located"
            )

    for faction in FACTIONS:
        player = state["players"][faction]
        hand, discard = player["hand"], player["discard"]
        if set(hand) & set(discard):
            errors.append(f"{faction} hand and discard overlap")
        total = len(hand) + len(discard)
        issued = state["card_totals"][faction]
        if total != issued:
            errors.append(
                f"{faction} cards: hand({len(hand)}) + "
                f"discard({len(discard)}) = {total}, issued = {issued}"
            )

    for character_id in state["revealed"]:
        character = catalog.get_character(character_id)
        if character is None or character.faction != SAURON:
            errors.append(f"{character_id} revealed but not a Sauron unit")

    battle = state["battle"]
    if battle is not None and battle["phase"] not in BATTLE_PHASES:
        errors.append(f"Battle in unknown phase {battle['phase']!r}")

    return errors


# ============================================================================
# SNAPSHOT
# ============================================================================

def _is_visible(state, character_id, viewer):
    if viewer is None or viewer == SAURON:
        return True
    character = state["catalog"].get_character(character_id)
    return character.faction == FELLOWSHIP or character_id in state["revealed"]


def _battle_snapshot(battle):
    if battle is None:
        return None
    return {
        "region": battle["region"],
        "phase": battle["phase"],
        "attacker": battle["attacker"],
        "defender": battle["defender"],
        "fellowship_card": battle["cards"][FELLOWSHIP],
        "sauron_card": battle["cards"][SAURON],
        "fellowship_card_negated": battle["fellowship_card_negated"],
        "retreated": battle["retreated"],
        "outcome": dict(battle["outcome"]) if battle["outcome"] else None,
    }


def get_snapshot(state, viewer=None):
    """Observable state for rendering.

    Args:
        state: Game state dict.
        viewer: None for the full state, or the faction looking at the
            board. Fellowship viewers see unrevealed Sauron units as
            HIDDEN_UNIT placeholders and do not see Sauron's hand.

    Returns:
        Plain dict of turn, round, locations, occupants, hands, discards,
        revealed ids and the battle (or None).
    """
    locations = {
        c: r for c, r in state["locations"].items()
        if _is_visible(state, c, viewer)
    }
    occupants = {}
    for region_id, lists in state["occupants"].items():
        occupants[region_id] = {
            faction: [c if _is_visible(state, c, viewer) else HIDDEN_UNIT
                      for c in lists[faction]]
            for faction in FACTIONS
        }
    hands = {}
    for faction in FACTIONS:
        hand = state["players"][faction]["hand"]
        if viewer is None or viewer == faction:
            hands[faction] = list(hand)
        else:
            hands[faction] = len(hand)

    return {
        "turn": state["turn"],
        "round": state["round"],
        "locations": locations,
        "occupants": occupants,
        "hands": hands,
        "discards": {f: list(state["players"][f]["discard"])
                     for f in FACTIONS},
        "revealed": sorted(state["revealed"]),
        "battle": _battle_snapshot(state["battle"]),
    }
