"""
Tests for movement legality and the move command.

Covers standard forward movement, the Tunnel of Moria, capacity
filtering, turn and battle gating in attempt_move, and battle creation on
entering an enemy-held region.
"""

import copy

import pytest

from lotr_bot.rules_consts import (
    # Factions
    FELLOWSHIP, SAURON,
    # Regions
    REGION_THE_SHIRE, REGION_ARTHEDAIN, REGION_CARDOLAN,
    REGION_EREGION, REGION_MISTY_MOUNTAINS, REGION_CARADHRAS,
    REGION_MIRKWOOD, REGION_FANGORN, REGION_ROHAN,
    REGION_DAGORLAD, REGION_GONDOR, REGION_MORDOR,
    # Characters
    CHAR_FELLOWSHIP_FRODO, CHAR_FELLOWSHIP_GANDALF, CHAR_FELLOWSHIP_ARAGORN,
    CHAR_FELLOWSHIP_LEGOLAS,
    CHAR_SAURON_BALROG, CHAR_SAURON_WITCHKING, CHAR_SAURON_FLYING_NAZGUL,
    CHAR_SAURON_CAVE_TROLL,
    # Phases
    PHASE_CARD_PLAY,
)
from lotr_bot.state.state_schema import build_initial_state, validate_state
from lotr_bot.board.occupancy import (
    get_location, get_occupants, relocate, remove_character,
)
from lotr_bot.commands.move import (
    legal_destinations,
    is_legal_move,
    get_legal_moves,
    is_attack,
    validate_move,
    attempt_move,
)
from lotr_bot.engine.game_engine import play_turn


def make_state(seed=3):
    return build_initial_state(seed=seed)


class TestLegalDestinations:

    def test_frodo_from_shire(self):
        state = make_state()
        assert legal_destinations(state, CHAR_FELLOWSHIP_FRODO) == {
            REGION_ARTHEDAIN, REGION_CARDOLAN,
        }

    def test_full_region_excluded(self):
        state = make_state()
        relocate(state, CHAR_FELLOWSHIP_ARAGORN, REGION_CARDOLAN,
                 REGION_ARTHEDAIN)
        assert legal_destinations(state, CHAR_FELLOWSHIP_FRODO) == {
            REGION_CARDOLAN,
        }

    def test_balrog_from_mordor(self):
        state = make_state()
        assert legal_destinations(state, CHAR_SAURON_BALROG) == {
            REGION_DAGORLAD, REGION_GONDOR,
        }

    def test_witchking_from_dagorlad(self):
        state = make_state()
        relocate(state, CHAR_SAURON_WITCHKING, REGION_MORDOR, REGION_DAGORLAD)
        assert legal_destinations(state, CHAR_SAURON_WITCHKING) == {
            REGION_MIRKWOOD, REGION_FANGORN,
        }

    def test_legolas_uses_tunnel(self):
        state = make_state()
        assert legal_destinations(state, CHAR_FELLOWSHIP_LEGOLAS) == {
            REGION_MISTY_MOUNTAINS, REGION_CARADHRAS, REGION_FANGORN,
        }

    def test_mountain_holds_one(self):
        state = make_state()
        relocate(state, CHAR_FELLOWSHIP_GANDALF, REGION_ARTHEDAIN,
                 REGION_EREGION)
        relocate(state, CHAR_FELLOWSHIP_LEGOLAS, REGION_EREGION,
                 REGION_CARADHRAS)
        assert REGION_CARADHRAS not in legal_destinations(
            state, CHAR_FELLOWSHIP_GANDALF)

    def test_no_backward_moves(self):
        state = make_state()
        assert REGION_THE_SHIRE not in legal_destinations(
            state, CHAR_FELLOWSHIP_GANDALF)

    def test_defeated_character_has_no_moves(self):
        state = make_state()
        remove_character(state, CHAR_FELLOWSHIP_FRODO)
        assert legal_destinations(state, CHAR_FELLOWSHIP_FRODO) == frozenset()

    def test_unknown_character_has_no_moves(self):
        assert legal_destinations(make_state(), "CHAR_NOBODY") == frozenset()

    def test_is_legal_move(self):
        state = make_state()
        assert is_legal_move(state, CHAR_FELLOWSHIP_FRODO, REGION_CARDOLAN)
        assert not is_legal_move(state, CHAR_FELLOWSHIP_FRODO, REGION_MORDOR)

    def test_get_legal_moves_sorted(self):
        state = make_state()
        moves = get_legal_moves(state, FELLOWSHIP)
        assert moves[:2] == [
            (CHAR_FELLOWSHIP_FRODO, REGION_ARTHEDAIN),
            (CHAR_FELLOWSHIP_FRODO, REGION_CARDOLAN),
        ]
        assert all(state["catalog"].get_character(c).faction == FELLOWSHIP
                   for c, _r in moves)

    def test_is_attack(self):
        state = make_state()
        assert is_attack(state, CHAR_FELLOWSHIP_LEGOLAS, REGION_FANGORN)
        assert not is_attack(state, CHAR_FELLOWSHIP_LEGOLAS,
                             REGION_CARADHRAS)


class TestAttemptMove:

    def test_legal_move(self):
        state = make_state()
        ok, reason = attempt_move(state, CHAR_SAURON_CAVE_TROLL, REGION_ROHAN)
        assert ok, reason
        assert get_location(state, CHAR_SAURON_CAVE_TROLL) == REGION_ROHAN
        assert CHAR_SAURON_CAVE_TROLL not in get_occupants(
            state, REGION_GONDOR, SAURON)
        assert state["battle"] is None
        assert validate_state(state) == []

    def test_illegal_move_leaves_state_unchanged(self):
        state = make_state()
        locations = dict(state["locations"])
        occupants = copy.deepcopy(state["occupants"])
        players = copy.deepcopy(state["players"])
        ok, reason = attempt_move(state, CHAR_SAURON_WITCHKING,
                                  REGION_THE_SHIRE)
        assert not ok
        assert "cannot move" in reason
        assert state["locations"] == locations
        assert state["occupants"] == occupants
        assert state["players"] == players
        assert state["battle"] is None
        assert state["revealed"] == set()
        assert state["turn"] == SAURON
        assert validate_state(state) == []

    def test_wrong_faction_turn(self):
        state = make_state()
        ok, reason = attempt_move(state, CHAR_FELLOWSHIP_FRODO,
                                  REGION_ARTHEDAIN)
        assert not ok
        assert "turn" in reason
        assert get_location(state, CHAR_FELLOWSHIP_FRODO) == REGION_THE_SHIRE

    def test_unknown_character(self):
        ok, reason = attempt_move(make_state(), "CHAR_NOBODY", REGION_ROHAN)
        assert not ok
        assert "Unknown" in reason

    def test_defeated_character(self):
        state = make_state()
        remove_character(state, CHAR_SAURON_CAVE_TROLL)
        ok, reason = attempt_move(state, CHAR_SAURON_CAVE_TROLL,
                                  REGION_ROHAN)
        assert not ok
        assert "not on the board" in reason

    def test_attack_starts_battle(self):
        state = make_state()
        ok, _reason = attempt_move(state, CHAR_SAURON_FLYING_NAZGUL,
                                   REGION_ARTHEDAIN)
        assert ok
        battle = state["battle"]
        assert battle is not None
        assert battle["region"] == REGION_ARTHEDAIN
        assert battle["attacker"] == CHAR_SAURON_FLYING_NAZGUL
        assert battle["defender"] == CHAR_FELLOWSHIP_GANDALF
        assert battle["phase"] == PHASE_CARD_PLAY
        assert CHAR_SAURON_FLYING_NAZGUL in state["revealed"]

    def test_no_moves_during_battle(self):
        state = make_state()
        attempt_move(state, CHAR_SAURON_FLYING_NAZGUL, REGION_ARTHEDAIN)
        ok, reason = validate_move(state, CHAR_SAURON_CAVE_TROLL,
                                   REGION_ROHAN)
        assert not ok
        assert "battle" in reason


class TestInvariantsOverPlay:

    @pytest.mark.parametrize("seed", [1, 2, 3, 11, 99])
    def test_capacity_and_locations_hold(self, seed):
        state = make_state(seed)
        for _ in range(40):
            play_turn(state)
            assert validate_state(state) == []
            assert state["battle"] is None

    def test_battle_iff_both_factions(self):
        state = make_state(5)
        for _ in range(30):
            turn = play_turn(state)
            if turn["character"] is None:
                continue
            if turn["battle"] is None:
                region = turn["region"]
                enemies = get_occupants(
                    state, region,
                    SAURON if turn["faction"] == FELLOWSHIP else FELLOWSHIP)
                assert enemies == ()
