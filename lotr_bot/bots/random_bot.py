"""
Random bot - Default Non-Player strategy.

Moves: prefer attacks. Every legal (character, destination) pair of the
acting faction is enumerated; if any lands on an enemy one of those is
chosen uniformly, otherwise one of all legal moves, otherwise no move.

Cards: uniform choice from the hand.
"""

from lotr_bot.commands.move import get_legal_moves, is_attack
from lotr_bot.bots.bot_common import random_select


def select_move(state, faction):
    """Pick a legal move for ``faction``.

    Args:
        state: Game state dict. Not modified apart from the RNG.
        faction: Acting faction.

    Returns:
        (character_id, region_id), or None if no legal move exists.
    """
    moves = get_legal_moves(state, faction)
    if not moves:
        return None
    attacks = [m for m in moves if is_attack(state, *m)]
    if attacks:
        return random_select(state, attacks)
    return random_select(state, moves)


def select_card(state, faction):
    """Pick a card from ``faction``'s hand, or None if it is empty."""
    hand = state["players"][faction]["hand"]
    if not hand:
        return None
    return random_select(state, hand)
