"""Abilities package - Character ability kinds and trigger dispatch.

Modules:
  kinds - the closed set of ability kinds (movement and battle start)
  dispatch - ability id registry and trigger dispatch
"""

from lotr_bot.abilities.dispatch import (
    register_ability,
    get_ability_kind,
    movement_candidates,
    trigger_battle_start,
)

__all__ = [
    "register_ability",
    "get_ability_kind",
    "movement_candidates",
    "trigger_battle_start",
]
