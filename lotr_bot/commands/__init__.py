"""Commands module - Player commands that change the board.

Sub-modules:
    move: Movement legality engine and the move command.
"""

from lotr_bot.commands.move import (  # noqa: F401
    legal_destinations,
    is_legal_move,
    get_legal_moves,
    is_attack,
    validate_move,
    attempt_move,
)
