"""Battle module - Battle state machine.

This module implements battle resolution as a standalone system. The
caller (a move, or a test) decides who fights whom; the state machine
runs reveal, battle-start abilities, card play, card resolution and the
strength comparison.

Sub-modules:
    resolve: Battle record, advance_battle() and the external commands.
"""

from lotr_bot.battle.resolve import (  # noqa: F401
    BattleError,
    check_for_battle,
    initiate_battle,
    advance_battle,
    submit_cards,
    acknowledge_battle_result,
    get_effective_strength,
)
