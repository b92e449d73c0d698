"""Tests for snakes_ladders.render."""

import re

from snakes_ladders.board import Board
from snakes_ladders.dice import ScriptedDie
from snakes_ladders.game import Game
from snakes_ladders.players import Player
from snakes_ladders.render import (
    LADDER_MARK,
    SNAKE_MARK,
    describe_turn,
    print_board,
    render_board,
    render_grid,
    render_standings,
    render_statistics,
    render_track,
)


def _game(board: Board, rolls=(1,)) -> Game:
    return Game([Player("Alice"), Player("Bob")], board, ScriptedDie(rolls))


def _numbers(line: str) -> list[int]:
    return [int(n) for n in re.findall(r"\d+", line)]


# ── grid ─────────────────────────────────────────────────────────────

def test_grid_rows_snake_back_and_forth():
    lines = render_grid(Board.standard(), [])
    assert len(lines) == 11
    assert _numbers(lines[1]) == list(range(91, 101))
    assert _numbers(lines[2]) == list(range(90, 80, -1))
    assert _numbers(lines[-1]) == list(range(10, 0, -1))


def test_grid_marks_triggers():
    text = "\n".join(render_grid(Board.standard(), []))
    assert f" 99{SNAKE_MARK}" in text
    assert f"  4{LADDER_MARK}" in text


def test_grid_shows_occupants():
    game = _game(Board.standard())
    game.players[0].position = 30
    game.players[1].position = 30
    text = "\n".join(render_grid(game.board, game.players))
    assert " 30  12" in text


# ── track ────────────────────────────────────────────────────────────

def test_track_for_custom_size():
    board = Board(size=25)
    board.add_penalty(20, 3)
    board.add_shortcut(5, 15)
    lines = render_track(board, [])
    assert lines[0] == "Positions 1 to 25"
    assert len(lines) == 4  # header + 10 + 10 + 5
    text = "\n".join(lines)
    assert " 20S" in text
    assert "  5L" in text
    assert "  6." in text


def test_track_player_symbol_replaces_marker():
    board = Board(size=25)
    board.add_shortcut(5, 15)
    p = Player("Zed", symbol="7", position=5)
    assert "  57" in "\n".join(render_track(board, [p]))


# ── full snapshot ────────────────────────────────────────────────────

def test_render_board_lists_everything():
    game = _game(Board.standard())
    text = render_board(game.board, game.players)
    assert "=== Board Status ===" in text
    assert "Snake(99→54)" in text
    assert "Ladder(4→56)" in text
    assert "Alice (1) at position 0" in text
    assert "Bob (2) at position 0" in text


def test_print_board(capsys):
    game = _game(Board(size=10))
    assert print_board(game.board, game.players) is None
    assert "Positions 1 to 10" in capsys.readouterr().out


# ── results ──────────────────────────────────────────────────────────

def test_standings_and_statistics():
    game = _game(Board(size=10), rolls=(5,))
    game.play_auto()
    standings = render_standings(game)
    assert "1. Alice 🏆 WINNER!" in standings
    assert "2. Bob (Position: 5)" in standings

    stats = render_statistics(game)
    assert "- Total players: 2" in stats
    assert "- Board size: 10" in stats
    assert "- Snakes on board: 0" in stats
    assert "- Turns played: 3" in stats


def test_describe_turn():
    board = Board(size=100)
    board.add_penalty(99, 54)
    board.add_shortcut(4, 56)
    game = _game(board, rolls=(4, 2, 50))

    rec = game.take_turn()
    assert "climbed to 56" in describe_turn(rec, game.players, game.board).lower()

    game.players[1].position = 97
    rec = game.take_turn()
    assert "slid down to 54" in describe_turn(rec, game.players, game.board).lower()

    rec = game.take_turn()
    assert "needs exactly 44 to win" in describe_turn(rec, game.players, game.board)
