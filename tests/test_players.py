"""Tests for snakes_ladders.players."""

import pytest

from snakes_ladders.players import PLACEHOLDER_SYMBOL, Player, assign_symbols


def test_new_player_starts_off_board():
    p = Player("Alice")
    assert p.position == 0
    assert p.symbol == PLACEHOLDER_SYMBOL
    assert not p.is_winner


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        Player("")


def test_display():
    assert str(Player("Bob", symbol="2", position=14)) == "Bob (2) at position 14"


def test_assign_symbols():
    players = [Player(f"P{i}") for i in range(3)]
    assign_symbols(players)
    assert [p.symbol for p in players] == ["1", "2", "3"]


def test_assign_symbols_keeps_position():
    p = Player("Carol", position=12)
    assign_symbols([p])
    assert p.position == 12
    assert p.symbol == "1"
