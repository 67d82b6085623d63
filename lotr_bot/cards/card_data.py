"""
card_data.py - Structured metadata for every combat card.

Each card has:
- card_id: str identifier (e.g. "CARD_SAURON_EYE_OF_SAURON")
- faction: owning faction
- name: display name
- card_type: CARD_TYPE_STRENGTH or CARD_TYPE_TEXT
- strength: int bonus for strength cards, else None
- ability: AbilityData for text cards, else None

Source: rules_consts.py
"""

from lotr_bot.rules_consts import (
    # Card types
    CARD_TYPE_STRENGTH, CARD_TYPE_TEXT,
    # Card tables
    STRENGTH_CARD_DEFINITIONS, TEXT_CARD_DEFINITIONS,
    # Triggers
    TRIGGER_CARD_PLAY,
)


# ---------------------------------------------------------------------------
# AbilityData - shared by characters and text cards
# ---------------------------------------------------------------------------
class AbilityData:
    """One ability: identifier, trigger tag and descriptive text."""

    __slots__ = ("ability_id", "trigger", "text")

    def __init__(self, ability_id, trigger, text=""):
        self.ability_id = ability_id
        self.trigger = trigger
        self.text = text

    def __repr__(self):
        return (
            f"AbilityData(ability_id={self.ability_id!r}, "
            f"trigger={self.trigger!r})"
        )


# ---------------------------------------------------------------------------
# CardData
# ---------------------------------------------------------------------------
class CardData:
    """Metadata for one combat card."""

    __slots__ = ("card_id", "faction", "name", "card_type", "strength",
                 "ability")

    def __init__(self, card_id, faction, name, card_type, strength=None,
                 ability=None):
        self.card_id = card_id
        self.faction = faction
        self.name = name
        self.card_type = card_type
        self.strength = strength
        self.ability = ability

    @property
    def is_strength(self):
        return self.card_type == CARD_TYPE_STRENGTH

    @property
    def is_text(self):
        return self.card_type == CARD_TYPE_TEXT

    def __repr__(self):
        return (
            f"CardData(card_id={self.card_id!r}, faction={self.faction!r}, "
            f"card_type={self.card_type!r}, strength={self.strength!r})"
        )


def _text_ability_id(card_id):
    return f"{card_id}_TEXT"


def build_default_cards():
    """Build the default combat card table.

    Cards are ordered by faction, strength cards first, so a fresh hand has
    a stable order.

    Returns:
        Dict {card_id: CardData}.
    """
    cards = {}
    for card_id, (faction, name, strength) in STRENGTH_CARD_DEFINITIONS.items():
        cards[card_id] = CardData(card_id, faction, name, CARD_TYPE_STRENGTH,
                                  strength=strength)
    for card_id, (faction, name, text) in TEXT_CARD_DEFINITIONS.items():
        ability = AbilityData(_text_ability_id(card_id), TRIGGER_CARD_PLAY,
                              text)
        cards[card_id] = CardData(card_id, faction, name, CARD_TYPE_TEXT,
                                  ability=ability)
    return cards
