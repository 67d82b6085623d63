"""
Bot dispatch - Route Non-Player decisions to a named strategy.

A strategy is a pair of callables:
    move(state, faction) -> (character_id, region_id) or None
    card(state, faction) -> card_id or None

The random strategy is registered by default. Hosts may register their
own under a new name.
"""

from lotr_bot.rules_consts import FACTIONS, STRATEGY_RANDOM
from lotr_bot.bots import random_bot


class BotDispatchError(Exception):
    """Raised when dispatch encounters an unknown strategy or faction."""
    pass


_STRATEGIES = {
    STRATEGY_RANDOM: (random_bot.select_move, random_bot.select_card),
}


def register_strategy(name, move, card):
    """Register a move/card strategy pair under ``name``.

    Raises:
        BotDispatchError: If either callable is missing.
    """
    if not callable(move) or not callable(card):
        raise BotDispatchError(
            f"Strategy {name!r} needs callable move and card selectors"
        )
    _STRATEGIES[name] = (move, card)


def get_strategy(name=STRATEGY_RANDOM):
    """Return the (move, card) pair registered under ``name``.

    Raises:
        BotDispatchError: If no strategy is registered under ``name``.
    """
    if name not in _STRATEGIES:
        raise BotDispatchError(
            f"Unknown strategy {name!r}. Registered: {sorted(_STRATEGIES)}"
        )
    return _STRATEGIES[name]


def _check_faction(faction):
    if faction not in FACTIONS:
        raise BotDispatchError(f"Unknown faction: {faction}")


def dispatch_move(state, faction, strategy=STRATEGY_RANDOM):
    """Ask a strategy for ``faction``'s move."""
    _check_faction(faction)
    move, _card = get_strategy(strategy)
    return move(state, faction)


def dispatch_card(state, faction, strategy=STRATEGY_RANDOM):
    """Ask a strategy for ``faction``'s battle card."""
    _check_faction(faction)
    _move, card = get_strategy(strategy)
    return card(state, faction)
