"""
Ability dispatch - Route catalog ability ids to ability kinds.

The registry maps an ability id to an AbilityKind instance. Ability ids
without a registered kind are descriptive only and never dispatched.

Two triggers are dispatched:
- TRIGGER_CHECK_MOVE_LEGALITY: extra movement candidates (pure).
- TRIGGER_BATTLE_START: attacker first, then defender; every matching
  ability is invoked, no short-circuit.
"""

import logging

from lotr_bot.rules_consts import (
    TRIGGER_CHECK_MOVE_LEGALITY, TRIGGER_BATTLE_START,
    ABILITY_FRODO_RETREAT,
    ABILITY_ARAGORN_ATTACK_ADJACENT,
    ABILITY_WITCHKING_SIDEWAYS_ATTACK,
    ABILITY_FLYING_NAZGUL_ATTACK,
    ABILITY_BLACK_RIDER_CHARGE,
)
from lotr_bot.abilities.kinds import (
    AbilityKind,
    AttackAnyAdjacent, SidewaysAttack, LoneTargetAttack, ForwardCharge,
    ForcedRetreat,
)

logger = logging.getLogger(__name__)


class AbilityError(Exception):
    """Raised when registering an invalid ability kind."""
    pass


_ABILITY_KINDS = {
    ABILITY_ARAGORN_ATTACK_ADJACENT: AttackAnyAdjacent(),
    ABILITY_WITCHKING_SIDEWAYS_ATTACK: SidewaysAttack(),
    ABILITY_FLYING_NAZGUL_ATTACK: LoneTargetAttack(),
    ABILITY_BLACK_RIDER_CHARGE: ForwardCharge(),
    ABILITY_FRODO_RETREAT: ForcedRetreat(),
}


def register_ability(ability_id, kind):
    """Attach an ability kind to an ability id.

    Args:
        ability_id: Catalog ability identifier.
        kind: AbilityKind instance.

    Raises:
        AbilityError: If kind is not an AbilityKind.
    """
    if not isinstance(kind, AbilityKind):
        raise AbilityError(
            f"{ability_id!r}: expected an AbilityKind, got {kind!r}"
        )
    _ABILITY_KINDS[ability_id] = kind


def get_ability_kind(ability_id):
    """AbilityKind for an ability id, or None if descriptive only."""
    return _ABILITY_KINDS.get(ability_id)


def movement_candidates(state, character_id):
    """Extra destinations granted by the character's movement abilities.

    Returns:
        Set of region ids (empty if no ability applies).
    """
    character = state["catalog"].get_character(character_id)
    result = set()
    if character is None:
        return result
    for ability in character.abilities_for(TRIGGER_CHECK_MOVE_LEGALITY):
        kind = _ABILITY_KINDS.get(ability.ability_id)
        if kind is None or not kind.augments_movement:
            continue
        result.update(kind.movement_candidates(state, character_id))
    return result


def trigger_battle_start(state, battle):
    """Run every BATTLE_START ability of attacker then defender.

    Args:
        state: Game state dict. May be modified by the abilities.
        battle: The active battle record. May be modified.

    Returns:
        List of ability ids that acted.
    """
    fired = []
    catalog = state["catalog"]
    for character_id in (battle["attacker"], battle["defender"]):
        character = catalog.get_character(character_id)
        for ability in character.abilities_for(TRIGGER_BATTLE_START):
            kind = _ABILITY_KINDS.get(ability.ability_id)
            if kind is None or not kind.reacts_to_battle_start:
                continue
            if kind.on_battle_start(state, character_id, battle):
                fired.append(ability.ability_id)
    if fired:
        logger.debug("Battle start abilities fired: %s", fired)
    return fired
