"""Engine package - Turn/round controller and Non-Player turn driver.

Modules:
  game_engine - acting faction, rounds, reveal lifecycle, play_turn
"""

from lotr_bot.engine.game_engine import (
    TurnError,
    get_turn,
    get_round,
    is_revealed,
    switch_turn,
    play_turn,
)

__all__ = [
    "TurnError",
    "get_turn",
    "get_round",
    "is_revealed",
    "switch_turn",
    "play_turn",
]
