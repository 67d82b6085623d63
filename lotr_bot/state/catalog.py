"""
Catalog module - Read-only lookup tables for characters, regions, cards.

The catalog is an external collaborator: the engine never loads it from
disk itself. ``load_catalog`` accepts an already-parsed structure with
the three collections of the published game data file (``characters``,
``regions``, ``combatCards``); ``default_catalog`` builds the standard
board from rules_consts.py.
"""

import logging

from lotr_bot.rules_consts import (
    FELLOWSHIP, SAURON, FACTIONS,
    CARD_TYPE_STRENGTH, CARD_TYPE_TEXT, CARD_TYPES,
    TRIGGER_PASSIVE, TRIGGER_CARD_PLAY, ABILITY_TRIGGERS,
)
from lotr_bot.map.map_data import RegionData, build_default_regions
from lotr_bot.cards.card_data import (
    AbilityData, CardData, build_default_cards,
)
from lotr_bot.cards.character_data import (
    CharacterData, build_default_characters,
)

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when catalog data is malformed or inconsistent."""
    pass


class Catalog:
    """Immutable lookup tables keyed by identifier.

    Attributes:
        characters: {character_id: CharacterData}
        regions: {region_id: RegionData}
        cards: {card_id: CardData}
    """

    __slots__ = ("characters", "regions", "cards")

    def __init__(self, characters, regions, cards):
        self.characters = dict(characters)
        self.regions = dict(regions)
        self.cards = dict(cards)

    def get_character(self, character_id):
        return self.characters.get(character_id)

    def get_region(self, region_id):
        return self.regions.get(region_id)

    def get_card(self, card_id):
        return self.cards.get(card_id)

    def characters_of(self, faction):
        """Character ids of a faction, in catalog order."""
        return tuple(c.character_id for c in self.characters.values()
                     if c.faction == faction)

    def cards_of(self, faction):
        """Card ids of a faction, in catalog order."""
        return tuple(c.card_id for c in self.cards.values()
                     if c.faction == faction)

    def __repr__(self):
        return (
            f"Catalog(characters={len(self.characters)}, "
            f"regions={len(self.regions)}, cards={len(self.cards)})"
        )


def default_catalog():
    """Build the catalog for the standard board."""
    return Catalog(
        build_default_characters(),
        build_default_regions(),
        build_default_cards(),
    )


# ============================================================================
# PARSING
# ============================================================================

def _require(entry, key, kind):
    if key not in entry:
        ident = entry.get("id", "?")
        raise CatalogError(f"{kind} {ident!r} is missing {key!r}")
    return entry[key]


def _check_faction(faction, kind, ident):
    if faction not in FACTIONS:
        raise CatalogError(
            f"{kind} {ident!r} has unknown faction {faction!r}"
        )


def _parse_abilities(raw_abilities, default_trigger, owner_id):
    abilities = []
    for raw in raw_abilities or ():
        trigger = raw.get("trigger", default_trigger)
        if trigger not in ABILITY_TRIGGERS:
            raise CatalogError(
                f"Ability {raw.get('id')!r} of {owner_id!r} has unknown "
                f"trigger {trigger!r}"
            )
        abilities.append(AbilityData(
            raw.get("id"),
            trigger,
            raw.get("text", ""),
        ))
    return abilities


def _parse_character(entry):
    character_id = _require(entry, "id", "Character")
    faction = _require(entry, "faction", "Character")
    _check_faction(faction, "Character", character_id)

    # Published data nests stats under versions.classic
    stats = entry.get("versions", {}).get("classic", entry)
    strength = _require(stats, "strength", "Character")
    abilities = _parse_abilities(stats.get("abilities"), TRIGGER_PASSIVE,
                                 character_id)
    return CharacterData(character_id, entry.get("name", character_id),
                         faction, strength, abilities)


def _parse_capacity(raw, region_id):
    if isinstance(raw, int):
        return {f: raw for f in FACTIONS}
    if isinstance(raw, dict):
        for faction in raw:
            _check_faction(faction, "Region capacity", region_id)
        return dict(raw)
    raise CatalogError(
        f"Region {region_id!r} has invalid capacity {raw!r}"
    )


def _parse_region(entry):
    region_id = _require(entry, "id", "Region")
    capacity = entry.get("capacity")
    return RegionData(
        region_id,
        entry.get("name", region_id),
        _require(entry, "row", "Region"),
        entry.get("position", 0),
        {
            FELLOWSHIP: entry.get("fellowshipAdjacent", ()),
            SAURON: entry.get("sauronAdjacent", ()),
        },
        special_adjacent=entry.get("fellowshipSpecialAdjacent", ()),
        special=entry.get("special"),
        capacity=(None if capacity is None
                  else _parse_capacity(capacity, region_id)),
    )


def _parse_card(entry):
    card_id = _require(entry, "id", "Card")
    faction = _require(entry, "faction", "Card")
    _check_faction(faction, "Card", card_id)
    card_type = _require(entry, "cardType", "Card")
    if card_type not in CARD_TYPES:
        raise CatalogError(
            f"Card {card_id!r} has unknown type {card_type!r}"
        )
    name = entry.get("name", card_id)
    if card_type == CARD_TYPE_STRENGTH:
        return CardData(card_id, faction, name, card_type,
                        strength=_require(entry, "strength", "Card"))
    abilities = _parse_abilities(entry.get("abilities"), TRIGGER_CARD_PLAY,
                                 card_id)
    return CardData(card_id, faction, name, CARD_TYPE_TEXT,
                    ability=abilities[0] if abilities else None)


def _index(items, kind):
    result = {}
    for item_id, item in items:
        if item_id in result:
            raise CatalogError(f"Duplicate {kind} id {item_id!r}")
        result[item_id] = item
    return result


def load_catalog(data):
    """Build a Catalog from an already-parsed game data structure.

    Args:
        data: Mapping with ``characters``, ``regions`` and ``combatCards``
            lists, using the field names of the published data file.

    Returns:
        Catalog.

    Raises:
        CatalogError: If a collection is missing, an entry is malformed,
            an id is duplicated, or adjacency names an unknown region.
    """
    for key in ("characters", "regions", "combatCards"):
        if key not in data:
            raise CatalogError(f"Catalog data is missing {key!r}")

    regions = _index(
        ((r.region_id, r) for r in map(_parse_region, data["regions"])),
        "region",
    )
    for region in regions.values():
        linked = list(region.special_adjacent)
        for faction in FACTIONS:
            linked.extend(region.adjacent[faction])
        for dest in linked:
            if dest not in regions:
                raise CatalogError(
                    f"Region {region.region_id!r} is adjacent to unknown "
                    f"region {dest!r}"
                )

    characters = _index(
        ((c.character_id, c)
         for c in map(_parse_character, data["characters"])),
        "character",
    )
    cards = _index(
        ((c.card_id, c) for c in map(_parse_card, data["combatCards"])),
        "card",
    )

    catalog = Catalog(characters, regions, cards)
    logger.debug("Loaded %r", catalog)
    return catalog
