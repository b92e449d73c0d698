"""Tests for the python -m snakes_ladders entry point."""

import pytest

from snakes_ladders.__main__ import build_parser, main


def test_help_without_command(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_quick_game_with_named_players(capsys):
    main(["quick", "--players", "Ann", "Ben", "--seed", "3", "--quiet"])
    out = capsys.readouterr().out
    assert "GAME OVER" in out
    assert "Final Standings:" in out
    assert "Turn 1: Ann rolled" in out


def test_demo_draws_board(capsys):
    main(["demo", "--seed", "11", "--max-turns", "4"])
    out = capsys.readouterr().out
    assert "=== Board Status ===" in out
    assert "Charlie (3)" in out
    assert "maximum turn limit" in out


def test_custom_auto_game(capsys):
    main(["custom", "--players", "A", "B", "--size", "20", "--sides", "4", "--seed", "5", "--quiet"])
    out = capsys.readouterr().out
    assert "- Board size: 20" in out


def test_play_cancelled_on_eof(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    main(["play", "--players", "A", "B", "--quiet"])
    out = capsys.readouterr().out
    assert "Game cancelled." in out
    assert "GAME OVER" not in out


def test_chart_option(tmp_path, capsys):
    out_png = tmp_path / "game.png"
    main(["quick", "--players", "A", "B", "--seed", "9", "--quiet", "--chart", str(out_png)])
    assert out_png.exists()
    assert "Chart saved to" in capsys.readouterr().out


def test_custom_mode_flags_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["custom", "--interactive", "--auto"])


def test_setup_prompts_closed_stdin_exits_cleanly(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    with pytest.raises(SystemExit) as exc:
        main(["quick", "--quiet"])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "Setup cancelled." in captured.err
    assert "GAME OVER" not in captured.out


def test_setup_prompts_ctrl_c_exits_cleanly(monkeypatch, capsys):
    def interrupt(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    with pytest.raises(SystemExit) as exc:
        main(["custom", "--quiet"])
    assert exc.value.code == 1
    assert "Setup cancelled." in capsys.readouterr().err


def test_custom_defaults_come_from_config():
    from snakes_ladders.config import DEFAULT_BOARD_SIZE, DEFAULT_SIDES

    args = build_parser().parse_args(["custom"])
    assert args.size == DEFAULT_BOARD_SIZE
    assert args.sides == DEFAULT_SIDES
