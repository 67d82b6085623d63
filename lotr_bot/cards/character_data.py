"""
character_data.py - Structured metadata for every character.

Characters are defined once and never mutated. The engine tracks their
location and defeat in the game state, never on the CharacterData.

Source: rules_consts.py CHARACTER_DEFINITIONS
"""

from lotr_bot.rules_consts import (
    FELLOWSHIP, SAURON,
    FELLOWSHIP_CHARACTERS, SAURON_CHARACTERS,
    CHARACTER_DEFINITIONS,
)
from lotr_bot.cards.card_data import AbilityData


class CharacterData:
    """Immutable data about a character."""

    __slots__ = ("character_id", "name", "faction", "strength", "abilities")

    def __init__(self, character_id, name, faction, strength, abilities=()):
        self.character_id = character_id
        self.name = name
        self.faction = faction
        self.strength = strength
        self.abilities = tuple(abilities)

    def abilities_for(self, trigger):
        """Abilities whose trigger tag equals ``trigger``, in order."""
        return tuple(a for a in self.abilities if a.trigger == trigger)

    def __repr__(self):
        return (
            f"CharacterData(character_id={self.character_id!r}, "
            f"faction={self.faction!r}, strength={self.strength})"
        )


def build_default_characters():
    """Build the default character table, Fellowship first.

    Returns:
        Dict {character_id: CharacterData}.
    """
    characters = {}
    for faction, ids in ((FELLOWSHIP, FELLOWSHIP_CHARACTERS),
                         (SAURON, SAURON_CHARACTERS)):
        for character_id in ids:
            name, strength, abilities = CHARACTER_DEFINITIONS[character_id]
            characters[character_id] = CharacterData(
                character_id, name, faction, strength,
                [AbilityData(*ability) for ability in abilities],
            )
    return characters
