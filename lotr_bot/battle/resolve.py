"""
Battle resolution - The battle state machine.

A battle is a record in state["battle"] that walks a fixed phase order:

    reveal -> character_abilities -> card_play -> resolve_cards
           -> compare_strengths -> (cleared)

advance_battle() is the single entry point. It runs phases until it must
stop and returns a status:

    BATTLE_AWAITING_CARDS - suspended in card_play until cards arrive
    BATTLE_RETREATED      - a battle-start ability retreated a combatant;
                            the battle is already cleared
    BATTLE_RESOLVED       - strengths compared, outcome recorded; the
                            record stays until acknowledge_battle_result()

The caller decides who fights whom. Turn advancement after a battle is
the caller's job (engine/game_engine.py).
"""

import logging

from lotr_bot.rules_consts import (
    # Factions
    FELLOWSHIP, SAURON, FACTIONS, OPPONENT,
    # Phases
    PHASE_REVEAL, PHASE_CHARACTER_ABILITIES, PHASE_CARD_PLAY,
    PHASE_RESOLVE_CARDS, PHASE_COMPARE_STRENGTHS,
    # Statuses
    BATTLE_AWAITING_CARDS, BATTLE_RETREATED, BATTLE_RESOLVED,
    # Cards
    NEGATION_CARD,
)
from lotr_bot.board.occupancy import (
    get_occupants, get_location, has_both_factions, remove_character,
)
from lotr_bot.abilities.dispatch import trigger_battle_start

logger = logging.getLogger(__name__)


class BattleError(Exception):
    """Raised when a battle command arrives out of phase or is invalid."""
    pass


def _new_battle(region_id, attacker_id, defender_id):
    return {
        "region": region_id,
        "attacker": attacker_id,
        "defender": defender_id,
        "phase": PHASE_REVEAL,
        "cards": {FELLOWSHIP: None, SAURON: None},
        "fellowship_card_negated": False,
        "retreated": False,
        "outcome": None,
        "log": [],
    }


# ============================================================================
# STARTING A BATTLE
# ============================================================================

def check_for_battle(state, region_id, mover_faction):
    """Start a battle if a region now holds both factions.

    Only one pair fights: the first mover-faction occupant attacks the
    first opposing occupant, in list order.

    Args:
        state: Game state dict.
        region_id: Region just moved into.
        mover_faction: Faction of the character that moved.

    Returns:
        Status from advance_battle(), or None if no battle started.
    """
    if not has_both_factions(state, region_id):
        return None
    attacker = get_occupants(state, region_id, mover_faction)[0]
    defender = get_occupants(state, region_id, OPPONENT[mover_faction])[0]
    return initiate_battle(state, attacker, defender)


def initiate_battle(state, attacker_id, defender_id):
    """Create the battle record and run it up to its first stop.

    Args:
        state: Game state dict. Modified in place.
        attacker_id: Attacking character.
        defender_id: Defending character, in the same region.

    Returns:
        Status from advance_battle().

    Raises:
        BattleError: If a battle is already active, or the two characters
            are not located together.
    """
    if state["battle"] is not None:
        raise BattleError("A battle is already in progress")
    region_id = get_location(state, attacker_id)
    if region_id is None or region_id != get_location(state, defender_id):
        raise BattleError(
            f"{attacker_id} and {defender_id} are not in the same region"
        )
    state["battle"] = _new_battle(region_id, attacker_id, defender_id)
    logger.debug("Battle in %s: %s attacks %s", region_id, attacker_id,
                 defender_id)
    return advance_battle(state)


# ============================================================================
# STATE MACHINE
# ============================================================================

def _set_phase(battle, phase):
    logger.debug("Battle phase %s -> %s", battle["phase"], phase)
    battle["phase"] = phase


def _reveal(state, battle):
    catalog = state["catalog"]
    for character_id in (battle["attacker"], battle["defender"]):
        if catalog.get_character(character_id).faction == SAURON:
            state["revealed"].add(character_id)


def _validate_cards(state, cards):
    """Check a card submission against the hands before any mutation."""
    for faction in FACTIONS:
        card_id = cards.get(faction)
        hand = state["players"][faction]["hand"]
        if card_id is None:
            if hand:
                raise BattleError(f"{faction} must play a card")
            continue
        if card_id not in hand:
            raise BattleError(f"{card_id} is not in the {faction} hand")


def _resolve_cards(state, battle):
    catalog = state["catalog"]
    f_card = battle["cards"][FELLOWSHIP]
    s_card = battle["cards"][SAURON]

    if (s_card == NEGATION_CARD and f_card is not None
            and catalog.get_card(f_card).is_text):
        battle["fellowship_card_negated"] = True
        battle["log"].append(f"{s_card} negates {f_card}")

    for faction in FACTIONS:
        card_id = battle["cards"][faction]
        if card_id is None:
            continue
        player = state["players"][faction]
        player["hand"].remove(card_id)
        player["discard"].append(card_id)


def get_effective_strength(state, battle, character_id):
    """Base strength plus the owner's played strength card, if any."""
    character = state["catalog"].get_character(character_id)
    strength = character.strength
    card_id = battle["cards"][character.faction]
    if card_id is not None:
        card = state["catalog"].get_card(card_id)
        if card.is_strength:
            strength += card.strength
    return strength


def _compare_strengths(state, battle):
    catalog = state["catalog"]
    attacker_id, defender_id = battle["attacker"], battle["defender"]
    attacker = catalog.get_character(attacker_id)
    defender = catalog.get_character(defender_id)
    a_strength = get_effective_strength(state, battle, attacker_id)
    d_strength = get_effective_strength(state, battle, defender_id)

    if a_strength > d_strength:
        winner, defeated = attacker_id, [defender_id]
        message = f"{attacker.name} defeats {defender.name}!"
    elif d_strength > a_strength:
        winner, defeated = defender_id, [attacker_id]
        message = f"{defender.name} defeats {attacker.name}!"
    else:
        winner, defeated = None, [attacker_id, defender_id]
        message = f"Both {attacker.name} and {defender.name} are defeated!"

    for character_id in defeated:
        remove_character(state, character_id)

    battle["outcome"] = {
        "attacker": attacker_id,
        "defender": defender_id,
        "attacker_name": attacker.name,
        "defender_name": defender.name,
        "attacker_strength": a_strength,
        "defender_strength": d_strength,
        "winner": winner,
        "defeated": defeated,
        "message": message,
    }
    battle["log"].append(message)
    logger.debug("%s (%d vs %d)", message, a_strength, d_strength)


def advance_battle(state, cards=None):
    """Run the active battle until it suspends or finishes.

    Args:
        state: Game state dict. Modified in place.
        cards: {faction: card_id or None}; consumed by the card_play
            phase, ignored elsewhere.

    Returns:
        BATTLE_AWAITING_CARDS, BATTLE_RETREATED or BATTLE_RESOLVED.

    Raises:
        BattleError: If no battle is active, or the cards are invalid.
            Nothing is mutated in either case.
    """
    battle = state["battle"]
    if battle is None:
        raise BattleError("No battle in progress")

    while True:
        phase = battle["phase"]

        if phase == PHASE_REVEAL:
            _reveal(state, battle)
            _set_phase(battle, PHASE_CHARACTER_ABILITIES)

        elif phase == PHASE_CHARACTER_ABILITIES:
            trigger_battle_start(state, battle)
            if battle["retreated"]:
                logger.debug("Battle in %s ends in a retreat",
                             battle["region"])
                state["battle"] = None
                return BATTLE_RETREATED
            _set_phase(battle, PHASE_CARD_PLAY)

        elif phase == PHASE_CARD_PLAY:
            if cards is None:
                return BATTLE_AWAITING_CARDS
            _validate_cards(state, cards)
            for faction in FACTIONS:
                battle["cards"][faction] = cards.get(faction)
            logger.debug("Cards played: %s", battle["cards"])
            cards = None
            _set_phase(battle, PHASE_RESOLVE_CARDS)

        elif phase == PHASE_RESOLVE_CARDS:
            _resolve_cards(state, battle)
            _set_phase(battle, PHASE_COMPARE_STRENGTHS)

        elif phase == PHASE_COMPARE_STRENGTHS:
            if battle["outcome"] is None:
                _compare_strengths(state, battle)
            return BATTLE_RESOLVED

        else:
            raise BattleError(f"Unknown battle phase {phase!r}")


# ============================================================================
# EXTERNAL COMMANDS
# ============================================================================

def submit_cards(state, fellowship_card, sauron_card):
    """Resume a battle suspended in card_play.

    Args:
        state: Game state dict.
        fellowship_card: Card id from the Fellowship hand (None only if
            that hand is empty).
        sauron_card: Card id from the Sauron hand (same rule).

    Returns:
        Status from advance_battle() (BATTLE_RESOLVED).

    Raises:
        BattleError: If no battle is waiting for cards, or a card is not
            in its owner's hand. State is unchanged.
    """
    battle = state["battle"]
    if battle is None or battle["phase"] != PHASE_CARD_PLAY:
        raise BattleError("No battle is waiting for cards")
    return advance_battle(state, {FELLOWSHIP: fellowship_card,
                                  SAURON: sauron_card})


def acknowledge_battle_result(state):
    """Clear a resolved battle.

    Returns:
        The outcome dict of the cleared battle.

    Raises:
        BattleError: If there is no resolved battle to acknowledge.
    """
    battle = state["battle"]
    if battle is None or battle["outcome"] is None:
        raise BattleError("No battle result to acknowledge")
    state["battle"] = None
    return battle["outcome"]
