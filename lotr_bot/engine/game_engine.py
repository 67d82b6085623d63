"""Game Engine - Turn and round controller.

Manages the acting faction, the round counter and the hidden-information
lifecycle: Sauron units revealed in a battle stay visible until the next
turn switch. Also drives a complete Non-Player turn (move, battle, turn
switch) through a bot strategy.

Sauron acts first. A round ends when the Fellowship turn ends.
"""

import logging

from lotr_bot.rules_consts import (
    FELLOWSHIP, SAURON, OPPONENT,
    PHASE_CARD_PLAY, BATTLE_RETREATED,
    STRATEGY_RANDOM,
    ACTION_MOVE, ACTION_PASS,
)
from lotr_bot.commands.move import attempt_move, is_attack
from lotr_bot.battle.resolve import submit_cards, acknowledge_battle_result
from lotr_bot.bots.bot_dispatch import dispatch_move, dispatch_card

logger = logging.getLogger(__name__)


class TurnError(Exception):
    """Raised when a turn command arrives at the wrong time."""
    pass


# ============================================================================
# QUERIES
# ============================================================================

def get_turn(state):
    """Faction currently acting."""
    return state["turn"]


def get_round(state):
    return state["round"]


def is_revealed(state, character_id):
    """Whether a character is visible to the Fellowship player.

    Fellowship characters are always visible. Sauron characters are
    visible only while in the revealed set.
    """
    character = state["catalog"].get_character(character_id)
    if character is None:
        return False
    if character.faction == FELLOWSHIP:
        return True
    return character_id in state["revealed"]


# ============================================================================
# TURN SWITCH
# ============================================================================

def switch_turn(state):
    """End the current faction's turn.

    Re-hides every revealed unit, increments the round when the Fellowship
    turn ends, and hands play to the other faction.

    Args:
        state: Game state dict. Modified in place.

    Returns:
        The faction now acting.

    Raises:
        TurnError: If a battle is still active (unacknowledged).
    """
    if state["battle"] is not None:
        raise TurnError("Cannot switch turn while a battle is active")

    # TODO: keep units with a "stays revealed" ability in the set once such
    # an ability exists in the catalog.
    state["revealed"].clear()

    if state["turn"] == FELLOWSHIP:
        state["round"] += 1
    state["turn"] = OPPONENT[state["turn"]]
    logger.debug("Turn switched to %s (round %d)", state["turn"],
                 state["round"])
    return state["turn"]


# ============================================================================
# NON-PLAYER TURN
# ============================================================================

def play_turn(state, strategy=STRATEGY_RANDOM):
    """Play the acting faction's turn with a bot strategy.

    The strategy picks the move and, if a battle starts, the cards for
    both sides. The battle result is acknowledged and the turn switched.

    Args:
        state: Game state dict. Modified in place.
        strategy: Registered strategy name (see bots/bot_dispatch.py).

    Returns:
        Action dict:
            "action": ACTION_MOVE or ACTION_PASS.
            "faction": Faction that acted.
            "character", "region": The move (None on pass).
            "battle": Battle outcome dict, BATTLE_RETREATED, or None.

    Raises:
        TurnError: If a battle is already active.
    """
    if state["battle"] is not None:
        raise TurnError("Finish the active battle before playing a turn")

    faction = state["turn"]
    result = {
        "action": ACTION_PASS,
        "faction": faction,
        "character": None,
        "region": None,
        "battle": None,
    }

    move = dispatch_move(state, faction, strategy)
    if move is not None:
        character_id, region_id = move
        attacking = is_attack(state, character_id, region_id)
        ok, reason = attempt_move(state, character_id, region_id)
        if not ok:
            raise TurnError(f"Strategy {strategy!r} chose an illegal move: "
                            f"{reason}")
        result.update(action=ACTION_MOVE, character=character_id,
                      region=region_id)

        battle = state["battle"]
        if battle is not None and battle["phase"] == PHASE_CARD_PLAY:
            submit_cards(
                state,
                dispatch_card(state, FELLOWSHIP, strategy),
                dispatch_card(state, SAURON, strategy),
            )
        if state["battle"] is not None:
            result["battle"] = acknowledge_battle_result(state)
        elif attacking:
            # Battle started and was cleared by a retreat
            result["battle"] = BATTLE_RETREATED

    logger.debug("%s turn: %s", faction, result)
    switch_turn(state)
    return result
