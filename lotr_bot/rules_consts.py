"""
rules_consts.py - Canonical Labels for the Confrontation Rules Engine

Every string label for factions, regions, characters, cards, abilities,
triggers, battle phases and any other game concept used anywhere in the
codebase MUST come from this file.

If a label doesn't exist here, it is wrong.

Identifiers follow the published game data file (REGION_*, CHAR_*,
CARD_*), so an external catalog using that file's ids lines up with the
defaults below.
"""

# ============================================================================
# FACTIONS
# ============================================================================

FELLOWSHIP = "Fellowship"
SAURON = "Sauron"

FACTIONS = (FELLOWSHIP, SAURON)

OPPONENT = {
    FELLOWSHIP: SAURON,
    SAURON: FELLOWSHIP,
}

# Sauron moves first
STARTING_FACTION = SAURON
STARTING_ROUND = 1


# ============================================================================
# REGIONS
# ============================================================================
# The board is a diamond of 16 regions in 7 rows. Row 0 is the Fellowship
# home (The Shire), row 6 the Sauron home (Mordor). Fellowship moves to
# higher rows, Sauron to lower rows.

REGION_THE_SHIRE = "REGION_THE_SHIRE"
REGION_ARTHEDAIN = "REGION_ARTHEDAIN"
REGION_CARDOLAN = "REGION_CARDOLAN"
REGION_RHUDAUR = "REGION_RHUDAUR"
REGION_EREGION = "REGION_EREGION"
REGION_ENEDWAITH = "REGION_ENEDWAITH"
REGION_THE_HIGH_PASS = "REGION_THE_HIGH_PASS"
REGION_MISTY_MOUNTAINS = "REGION_MISTY_MOUNTAINS"
REGION_CARADHRAS = "REGION_CARADHRAS"
REGION_GAP_OF_ROHAN = "REGION_GAP_OF_ROHAN"
REGION_MIRKWOOD = "REGION_MIRKWOOD"
REGION_FANGORN = "REGION_FANGORN"
REGION_ROHAN = "REGION_ROHAN"
REGION_DAGORLAD = "REGION_DAGORLAD"
REGION_GONDOR = "REGION_GONDOR"
REGION_MORDOR = "REGION_MORDOR"

REGION_NAMES = {
    REGION_THE_SHIRE: "The Shire",
    REGION_ARTHEDAIN: "Arthedain",
    REGION_CARDOLAN: "Cardolan",
    REGION_RHUDAUR: "Rhudaur",
    REGION_EREGION: "Eregion",
    REGION_ENEDWAITH: "Enedwaith",
    REGION_THE_HIGH_PASS: "The High Pass",
    REGION_MISTY_MOUNTAINS: "Misty Mountains",
    REGION_CARADHRAS: "Caradhras",
    REGION_GAP_OF_ROHAN: "Gap of Rohan",
    REGION_MIRKWOOD: "Mirkwood",
    REGION_FANGORN: "Fangorn",
    REGION_ROHAN: "Rohan",
    REGION_DAGORLAD: "Dagorlad",
    REGION_GONDOR: "Gondor",
    REGION_MORDOR: "Mordor",
}

# (row, position) - position orders regions left to right within a row
REGION_LAYOUT = {
    REGION_THE_SHIRE: (0, 0),
    REGION_ARTHEDAIN: (1, 0),
    REGION_CARDOLAN: (1, 1),
    REGION_RHUDAUR: (2, 0),
    REGION_EREGION: (2, 1),
    REGION_ENEDWAITH: (2, 2),
    REGION_THE_HIGH_PASS: (3, 0),
    REGION_MISTY_MOUNTAINS: (3, 1),
    REGION_CARADHRAS: (3, 2),
    REGION_GAP_OF_ROHAN: (3, 3),
    REGION_MIRKWOOD: (4, 0),
    REGION_FANGORN: (4, 1),
    REGION_ROHAN: (4, 2),
    REGION_DAGORLAD: (5, 0),
    REGION_GONDOR: (5, 1),
    REGION_MORDOR: (6, 0),
}

ALL_REGIONS = tuple(REGION_LAYOUT)


# ============================================================================
# TERRAIN
# ============================================================================

TERRAIN_MOUNTAINS = "Mountains"

REGION_TERRAIN = {
    REGION_THE_HIGH_PASS: TERRAIN_MOUNTAINS,
    REGION_MISTY_MOUNTAINS: TERRAIN_MOUNTAINS,
    REGION_CARADHRAS: TERRAIN_MOUNTAINS,
}


# ============================================================================
# CAPACITY
# ============================================================================
# Maximum simultaneous occupants of ONE faction in a region.

HOME_CAPACITY = 4
MOUNTAIN_CAPACITY = 1
DEFAULT_CAPACITY = 2

REGION_CAPACITY = {
    REGION_THE_SHIRE: HOME_CAPACITY,
    REGION_MORDOR: HOME_CAPACITY,
    REGION_THE_HIGH_PASS: MOUNTAIN_CAPACITY,
    REGION_MISTY_MOUNTAINS: MOUNTAIN_CAPACITY,
    REGION_CARADHRAS: MOUNTAIN_CAPACITY,
    REGION_GAP_OF_ROHAN: MOUNTAIN_CAPACITY,
}


# ============================================================================
# ADJACENCY
# ============================================================================
# Fellowship forward adjacency (toward Mordor). Sauron forward adjacency is
# the mirror image and is derived in map_data.

FELLOWSHIP_ADJACENCY = {
    REGION_THE_SHIRE: (REGION_ARTHEDAIN, REGION_CARDOLAN),
    REGION_ARTHEDAIN: (REGION_RHUDAUR, REGION_EREGION),
    REGION_CARDOLAN: (REGION_EREGION, REGION_ENEDWAITH),
    REGION_RHUDAUR: (REGION_THE_HIGH_PASS, REGION_MISTY_MOUNTAINS),
    REGION_EREGION: (REGION_MISTY_MOUNTAINS, REGION_CARADHRAS),
    REGION_ENEDWAITH: (REGION_CARADHRAS, REGION_GAP_OF_ROHAN),
    REGION_THE_HIGH_PASS: (REGION_MIRKWOOD,),
    REGION_MISTY_MOUNTAINS: (REGION_MIRKWOOD, REGION_FANGORN),
    REGION_CARADHRAS: (REGION_FANGORN, REGION_ROHAN),
    REGION_GAP_OF_ROHAN: (REGION_ROHAN,),
    REGION_MIRKWOOD: (REGION_DAGORLAD,),
    REGION_FANGORN: (REGION_DAGORLAD, REGION_GONDOR),
    REGION_ROHAN: (REGION_GONDOR,),
    REGION_DAGORLAD: (REGION_MORDOR,),
    REGION_GONDOR: (REGION_MORDOR,),
    REGION_MORDOR: (),
}

# One-way Fellowship shortcut: the Tunnel of Moria
FELLOWSHIP_SPECIAL_ADJACENCY = {
    REGION_EREGION: (REGION_FANGORN,),
}


# ============================================================================
# ABILITY TRIGGERS
# ============================================================================

TRIGGER_CHECK_MOVE_LEGALITY = "CHECK_MOVE_LEGALITY"
TRIGGER_BATTLE_START = "BATTLE_START"
TRIGGER_CARD_PLAY = "CARD_PLAY"
TRIGGER_PASSIVE = "PASSIVE"

ABILITY_TRIGGERS = (
    TRIGGER_CHECK_MOVE_LEGALITY,
    TRIGGER_BATTLE_START,
    TRIGGER_CARD_PLAY,
    TRIGGER_PASSIVE,
)


# ============================================================================
# CHARACTER ABILITIES
# ============================================================================

# Abilities with engine behavior
ABILITY_FRODO_RETREAT = "FRODO_RETREAT"
ABILITY_ARAGORN_ATTACK_ADJACENT = "ARAGORN_ATTACK_ADJACENT"
ABILITY_WITCHKING_SIDEWAYS_ATTACK = "WITCHKING_SIDEWAYS_ATTACK"
ABILITY_FLYING_NAZGUL_ATTACK = "FLYING_NAZGUL_ATTACK"
ABILITY_BLACK_RIDER_CHARGE = "BLACK_RIDER_CHARGE"

# Descriptive only
ABILITY_SAM_LOYALTY = "SAM_LOYALTY"
ABILITY_PIPPIN_RETREAT = "PIPPIN_RETREAT"
ABILITY_MERRY_SLAY = "MERRY_SLAY"
ABILITY_GANDALF_FORESIGHT = "GANDALF_FORESIGHT"
ABILITY_LEGOLAS_SLAY = "LEGOLAS_SLAY"
ABILITY_GIMLI_SLAY = "GIMLI_SLAY"
ABILITY_BOROMIR_SACRIFICE = "BOROMIR_SACRIFICE"
ABILITY_BALROG_MORIA = "BALROG_MORIA"
ABILITY_SHELOB_RETURN = "SHELOB_RETURN"
ABILITY_SARUMAN_SILENCE = "SARUMAN_SILENCE"
ABILITY_ORCS_AMBUSH = "ORCS_AMBUSH"
ABILITY_WARG_IGNORE_TEXT = "WARG_IGNORE_TEXT"
ABILITY_CAVE_TROLL_NO_CARD = "CAVE_TROLL_NO_CARD"


# ============================================================================
# CHARACTERS
# ============================================================================

CHAR_FELLOWSHIP_FRODO = "CHAR_FELLOWSHIP_FRODO"
CHAR_FELLOWSHIP_SAM = "CHAR_FELLOWSHIP_SAM"
CHAR_FELLOWSHIP_PIPPIN = "CHAR_FELLOWSHIP_PIPPIN"
CHAR_FELLOWSHIP_MERRY = "CHAR_FELLOWSHIP_MERRY"
CHAR_FELLOWSHIP_GANDALF = "CHAR_FELLOWSHIP_GANDALF"
CHAR_FELLOWSHIP_ARAGORN = "CHAR_FELLOWSHIP_ARAGORN"
CHAR_FELLOWSHIP_LEGOLAS = "CHAR_FELLOWSHIP_LEGOLAS"
CHAR_FELLOWSHIP_GIMLI = "CHAR_FELLOWSHIP_GIMLI"
CHAR_FELLOWSHIP_BOROMIR = "CHAR_FELLOWSHIP_BOROMIR"

CHAR_SAURON_BALROG = "CHAR_SAURON_BALROG"
CHAR_SAURON_SHELOB = "CHAR_SAURON_SHELOB"
CHAR_SAURON_WITCHKING = "CHAR_SAURON_WITCHKING"
CHAR_SAURON_FLYING_NAZGUL = "CHAR_SAURON_FLYING_NAZGUL"
CHAR_SAURON_BLACK_RIDER = "CHAR_SAURON_BLACK_RIDER"
CHAR_SAURON_SARUMAN = "CHAR_SAURON_SARUMAN"
CHAR_SAURON_ORCS = "CHAR_SAURON_ORCS"
CHAR_SAURON_WARG = "CHAR_SAURON_WARG"
CHAR_SAURON_CAVE_TROLL = "CHAR_SAURON_CAVE_TROLL"

FELLOWSHIP_CHARACTERS = (
    CHAR_FELLOWSHIP_FRODO, CHAR_FELLOWSHIP_SAM, CHAR_FELLOWSHIP_PIPPIN,
    CHAR_FELLOWSHIP_MERRY, CHAR_FELLOWSHIP_GANDALF, CHAR_FELLOWSHIP_ARAGORN,
    CHAR_FELLOWSHIP_LEGOLAS, CHAR_FELLOWSHIP_GIMLI, CHAR_FELLOWSHIP_BOROMIR,
)

SAURON_CHARACTERS = (
    CHAR_SAURON_BALROG, CHAR_SAURON_SHELOB, CHAR_SAURON_WITCHKING,
    CHAR_SAURON_FLYING_NAZGUL, CHAR_SAURON_BLACK_RIDER, CHAR_SAURON_SARUMAN,
    CHAR_SAURON_ORCS, CHAR_SAURON_WARG, CHAR_SAURON_CAVE_TROLL,
)

# {character_id: (name, strength, ((ability_id, trigger, text), ...))}
CHARACTER_DEFINITIONS = {
    CHAR_FELLOWSHIP_FRODO: ("Frodo", 1, (
        (ABILITY_FRODO_RETREAT, TRIGGER_BATTLE_START,
         "When attacked, Frodo may retreat sideways."),
    )),
    CHAR_FELLOWSHIP_SAM: ("Sam", 2, (
        (ABILITY_SAM_LOYALTY, TRIGGER_PASSIVE,
         "Sam has strength 5 while in the same region as Frodo."),
    )),
    CHAR_FELLOWSHIP_PIPPIN: ("Pippin", 1, (
        (ABILITY_PIPPIN_RETREAT, TRIGGER_PASSIVE,
         "When attacking, Pippin may retreat backwards."),
    )),
    CHAR_FELLOWSHIP_MERRY: ("Merry", 2, (
        (ABILITY_MERRY_SLAY, TRIGGER_PASSIVE,
         "Merry defeats the Witch-king immediately."),
    )),
    CHAR_FELLOWSHIP_GANDALF: ("Gandalf", 5, (
        (ABILITY_GANDALF_FORESIGHT, TRIGGER_PASSIVE,
         "The Fellowship card is played face up; Sauron answers after."),
    )),
    CHAR_FELLOWSHIP_ARAGORN: ("Aragorn", 4, (
        (ABILITY_ARAGORN_ATTACK_ADJACENT, TRIGGER_CHECK_MOVE_LEGALITY,
         "Aragorn may attack any adjacent region."),
    )),
    CHAR_FELLOWSHIP_LEGOLAS: ("Legolas", 3, (
        (ABILITY_LEGOLAS_SLAY, TRIGGER_PASSIVE,
         "Legolas defeats the Flying Nazgul immediately."),
    )),
    CHAR_FELLOWSHIP_GIMLI: ("Gimli", 3, (
        (ABILITY_GIMLI_SLAY, TRIGGER_PASSIVE,
         "Gimli defeats the Orcs immediately."),
    )),
    CHAR_FELLOWSHIP_BOROMIR: ("Boromir", 0, (
        (ABILITY_BOROMIR_SACRIFICE, TRIGGER_PASSIVE,
         "Boromir and his opponent are both defeated."),
    )),
    CHAR_SAURON_BALROG: ("Balrog", 5, (
        (ABILITY_BALROG_MORIA, TRIGGER_PASSIVE,
         "The Balrog defeats any character using the Tunnel of Moria."),
    )),
    CHAR_SAURON_SHELOB: ("Shelob", 5, (
        (ABILITY_SHELOB_RETURN, TRIGGER_PASSIVE,
         "After a battle, Shelob returns to Gondor."),
    )),
    CHAR_SAURON_WITCHKING: ("Witch-king", 5, (
        (ABILITY_WITCHKING_SIDEWAYS_ATTACK, TRIGGER_CHECK_MOVE_LEGALITY,
         "The Witch-king may attack sideways."),
    )),
    CHAR_SAURON_FLYING_NAZGUL: ("Flying Nazgul", 3, (
        (ABILITY_FLYING_NAZGUL_ATTACK, TRIGGER_CHECK_MOVE_LEGALITY,
         "The Flying Nazgul may attack a lone character in any region."),
    )),
    CHAR_SAURON_BLACK_RIDER: ("Black Rider", 3, (
        (ABILITY_BLACK_RIDER_CHARGE, TRIGGER_CHECK_MOVE_LEGALITY,
         "The Black Rider may move forward any number of regions to "
         "attack."),
    )),
    CHAR_SAURON_SARUMAN: ("Saruman", 4, (
        (ABILITY_SARUMAN_SILENCE, TRIGGER_PASSIVE,
         "Saruman may decide that no cards are played."),
    )),
    CHAR_SAURON_ORCS: ("Orcs", 2, (
        (ABILITY_ORCS_AMBUSH, TRIGGER_PASSIVE,
         "When attacking, the Orcs defeat the first character at once."),
    )),
    CHAR_SAURON_WARG: ("Warg", 2, (
        (ABILITY_WARG_IGNORE_TEXT, TRIGGER_PASSIVE,
         "The text of the Fellowship card is ignored."),
    )),
    CHAR_SAURON_CAVE_TROLL: ("Cave Troll", 9, (
        (ABILITY_CAVE_TROLL_NO_CARD, TRIGGER_PASSIVE,
         "Sauron plays no card when the Cave Troll fights."),
    )),
}

STARTING_REGIONS = {
    FELLOWSHIP: {
        CHAR_FELLOWSHIP_FRODO: REGION_THE_SHIRE,
        CHAR_FELLOWSHIP_SAM: REGION_THE_SHIRE,
        CHAR_FELLOWSHIP_PIPPIN: REGION_THE_SHIRE,
        CHAR_FELLOWSHIP_MERRY: REGION_THE_SHIRE,
        CHAR_FELLOWSHIP_GANDALF: REGION_ARTHEDAIN,
        CHAR_FELLOWSHIP_ARAGORN: REGION_CARDOLAN,
        CHAR_FELLOWSHIP_LEGOLAS: REGION_EREGION,
        CHAR_FELLOWSHIP_GIMLI: REGION_RHUDAUR,
        CHAR_FELLOWSHIP_BOROMIR: REGION_ENEDWAITH,
    },
    SAURON: {
        CHAR_SAURON_BALROG: REGION_MORDOR,
        CHAR_SAURON_SHELOB: REGION_MORDOR,
        CHAR_SAURON_WITCHKING: REGION_MORDOR,
        CHAR_SAURON_FLYING_NAZGUL: REGION_MORDOR,
        CHAR_SAURON_BLACK_RIDER: REGION_MIRKWOOD,
        CHAR_SAURON_SARUMAN: REGION_FANGORN,
        CHAR_SAURON_ORCS: REGION_ROHAN,
        CHAR_SAURON_WARG: REGION_DAGORLAD,
        CHAR_SAURON_CAVE_TROLL: REGION_GONDOR,
    },
}


# ============================================================================
# COMBAT CARDS
# ============================================================================

CARD_TYPE_STRENGTH = "strength"
CARD_TYPE_TEXT = "text"

CARD_TYPES = (CARD_TYPE_STRENGTH, CARD_TYPE_TEXT)

CARD_FELLOWSHIP_1 = "CARD_FELLOWSHIP_1"
CARD_FELLOWSHIP_2 = "CARD_FELLOWSHIP_2"
CARD_FELLOWSHIP_3 = "CARD_FELLOWSHIP_3"
CARD_FELLOWSHIP_4 = "CARD_FELLOWSHIP_4"
CARD_FELLOWSHIP_5 = "CARD_FELLOWSHIP_5"
CARD_FELLOWSHIP_MAGIC = "CARD_FELLOWSHIP_MAGIC"
CARD_FELLOWSHIP_NOBLE_SACRIFICE = "CARD_FELLOWSHIP_NOBLE_SACRIFICE"
CARD_FELLOWSHIP_ELVEN_CLOAK = "CARD_FELLOWSHIP_ELVEN_CLOAK"
CARD_FELLOWSHIP_RETREAT = "CARD_FELLOWSHIP_RETREAT"

CARD_SAURON_1 = "CARD_SAURON_1"
CARD_SAURON_2 = "CARD_SAURON_2"
CARD_SAURON_3 = "CARD_SAURON_3"
CARD_SAURON_4 = "CARD_SAURON_4"
CARD_SAURON_5 = "CARD_SAURON_5"
CARD_SAURON_6 = "CARD_SAURON_6"
CARD_SAURON_EYE_OF_SAURON = "CARD_SAURON_EYE_OF_SAURON"
CARD_SAURON_MAGIC = "CARD_SAURON_MAGIC"
CARD_SAURON_RETREAT = "CARD_SAURON_RETREAT"

# Sauron card that negates a Fellowship text card
NEGATION_CARD = CARD_SAURON_EYE_OF_SAURON

# {card_id: (faction, name, strength)}
STRENGTH_CARD_DEFINITIONS = {
    CARD_FELLOWSHIP_1: (FELLOWSHIP, "1", 1),
    CARD_FELLOWSHIP_2: (FELLOWSHIP, "2", 2),
    CARD_FELLOWSHIP_3: (FELLOWSHIP, "3", 3),
    CARD_FELLOWSHIP_4: (FELLOWSHIP, "4", 4),
    CARD_FELLOWSHIP_5: (FELLOWSHIP, "5", 5),
    CARD_SAURON_1: (SAURON, "1", 1),
    CARD_SAURON_2: (SAURON, "2", 2),
    CARD_SAURON_3: (SAURON, "3", 3),
    CARD_SAURON_4: (SAURON, "4", 4),
    CARD_SAURON_5: (SAURON, "5", 5),
    CARD_SAURON_6: (SAURON, "6", 6),
}

# {card_id: (faction, name, text)}
TEXT_CARD_DEFINITIONS = {
    CARD_FELLOWSHIP_MAGIC: (
        FELLOWSHIP, "Magic",
        "Play any strength card from your discard pile."),
    CARD_FELLOWSHIP_NOBLE_SACRIFICE: (
        FELLOWSHIP, "Noble Sacrifice",
        "Both characters are defeated."),
    CARD_FELLOWSHIP_ELVEN_CLOAK: (
        FELLOWSHIP, "Elven Cloak",
        "The Sauron card is ignored."),
    CARD_FELLOWSHIP_RETREAT: (
        FELLOWSHIP, "Retreat",
        "Your character retreats sideways."),
    CARD_SAURON_EYE_OF_SAURON: (
        SAURON, "Eye of Sauron",
        "The text of the Fellowship card is ignored."),
    CARD_SAURON_MAGIC: (
        SAURON, "Magic",
        "Play any strength card from your discard pile."),
    CARD_SAURON_RETREAT: (
        SAURON, "Retreat",
        "Your character retreats backwards."),
}


# ============================================================================
# BATTLE PHASES
# ============================================================================

PHASE_REVEAL = "reveal"
PHASE_CHARACTER_ABILITIES = "character_abilities"
PHASE_CARD_PLAY = "card_play"
PHASE_RESOLVE_CARDS = "resolve_cards"
PHASE_COMPARE_STRENGTHS = "compare_strengths"

BATTLE_PHASES = (
    PHASE_REVEAL,
    PHASE_CHARACTER_ABILITIES,
    PHASE_CARD_PLAY,
    PHASE_RESOLVE_CARDS,
    PHASE_COMPARE_STRENGTHS,
)

# advance_battle() status values
BATTLE_AWAITING_CARDS = "awaiting_cards"
BATTLE_RETREATED = "retreated"
BATTLE_RESOLVED = "resolved"


# ============================================================================
# BOT STRATEGIES
# ============================================================================

STRATEGY_RANDOM = "random"

ACTION_MOVE = "move"
ACTION_PASS = "pass"

# Stand-in for a Sauron character the viewer cannot see
HIDDEN_UNIT = "hidden"
