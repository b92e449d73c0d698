"""Game setup: turns user input into a validated (players, board, die)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from snakes_ladders.board import DEFAULT_SIZE, Board, InvalidDefinition
from snakes_ladders.dice import Die
from snakes_ladders.game import MIN_PLAYERS
from snakes_ladders.players import Player

MAX_PLAYERS = 8
MIN_BOARD_SIZE = 10
DEFAULT_BOARD_SIZE = DEFAULT_SIZE
DEFAULT_SIDES = 6
MIN_SIDES = 2
MAX_SIDES = 20
MAX_CUSTOM_DEFINITIONS = 10

Ask = Callable[[str], str]
Say = Callable[[str], None]


@dataclass
class GameSetup:
    players: list[Player]
    board: Board
    die: Die


# ── Policy ───────────────────────────────────────────────────────────
# Out-of-range input is clamped to the nearest allowed value, not rejected.

def clamp_player_count(count: int) -> int:
    return max(MIN_PLAYERS, min(MAX_PLAYERS, count))


def clamp_board_size(size: int) -> int:
    return max(MIN_BOARD_SIZE, size)


def clamp_sides(sides: int) -> int:
    if sides < MIN_SIDES:
        return DEFAULT_SIDES
    return min(MAX_SIDES, sides)


def make_players(names: Iterable[str]) -> list[Player]:
    """Players in the given order; blank names become ``Player<i>``."""
    return [
        Player(name=name.strip() or f"Player{i}")
        for i, name in enumerate(names, start=1)
    ]


def build_board(
    size: int = DEFAULT_BOARD_SIZE,
    snakes: Sequence[tuple[int, int]] = (),
    ladders: Sequence[tuple[int, int]] = (),
    say: Say | None = None,
) -> Board:
    """Standard board of *size*, plus custom snakes/ladders on other sizes.

    Each bad definition is reported through *say* and skipped.
    """
    board = Board.standard(size)
    if size == DEFAULT_BOARD_SIZE:
        return board

    for head, tail in snakes[:MAX_CUSTOM_DEFINITIONS]:
        try:
            board.add_penalty(head, tail)
        except InvalidDefinition as e:
            if say is not None:
                say(f"  Error adding snake: {e}")
        else:
            if say is not None:
                say(f"  Added snake: {head} → {tail}")

    for bottom, top in ladders[:MAX_CUSTOM_DEFINITIONS]:
        try:
            board.add_shortcut(bottom, top)
        except InvalidDefinition as e:
            if say is not None:
                say(f"  Error adding ladder: {e}")
        else:
            if say is not None:
                say(f"  Added ladder: {bottom} → {top}")

    return board


def quick_setup(
    names: Sequence[str],
    size: int = DEFAULT_BOARD_SIZE,
    sides: int = DEFAULT_SIDES,
    seed: int | None = None,
) -> GameSetup:
    """Non-interactive setup from already-known values (CLI flags, demo)."""
    names = list(names)[:MAX_PLAYERS]
    while len(names) < MIN_PLAYERS:
        names.append("")
    return GameSetup(
        players=make_players(names),
        board=build_board(clamp_board_size(size)),
        die=Die(clamp_sides(sides), seed=seed),
    )


# ── Interactive prompts ──────────────────────────────────────────────

def _ask_int(ask: Ask, prompt: str) -> int | None:
    answer = ask(prompt).strip()
    if not answer:
        return None
    try:
        return int(answer)
    except ValueError:
        return None


def _yes(answer: str) -> bool:
    return answer.strip().lower().startswith("y")


def prompt_players(ask: Ask, say: Say) -> list[Player]:
    count = _ask_int(ask, f"Enter number of players ({MIN_PLAYERS}-{MAX_PLAYERS}): ")
    if count is None:
        say(f"Invalid input, using {MIN_PLAYERS} players.")
        count = MIN_PLAYERS
    elif count != clamp_player_count(count):
        count = clamp_player_count(count)
        say(f"Player count must be {MIN_PLAYERS}-{MAX_PLAYERS}, using {count} players.")

    names = [ask(f"Enter name for Player {i}: ") for i in range(1, count + 1)]
    return make_players(names)


def prompt_board_size(ask: Ask, say: Say) -> int:
    answer = ask(f"Enter board size (default {DEFAULT_BOARD_SIZE}): ").strip()
    if not answer:
        return DEFAULT_BOARD_SIZE
    try:
        size = int(answer)
    except ValueError:
        say(f"Invalid input, using default size {DEFAULT_BOARD_SIZE}")
        return DEFAULT_BOARD_SIZE
    if size < MIN_BOARD_SIZE:
        say(f"Board size too small, using minimum {MIN_BOARD_SIZE}")
    return clamp_board_size(size)


def _prompt_pairs(ask: Ask, say: Say, kind: str, first: str, second: str) -> list[tuple[int, int]]:
    count = _ask_int(ask, f"Enter number of {kind}s to add (0-{MAX_CUSTOM_DEFINITIONS}): ")
    if count is None:
        say(f"Invalid input for {kind}s.")
        return []

    pairs = []
    for i in range(1, min(count, MAX_CUSTOM_DEFINITIONS) + 1):
        say(f"{kind.capitalize()} {i}:")
        a = _ask_int(ask, f"  {first}: ")
        b = _ask_int(ask, f"  {second}: ")
        if a is None or b is None:
            say(f"Invalid input for {kind}s.")
            break
        pairs.append((a, b))
    return pairs


def prompt_die(ask: Ask, say: Say, seed: int | None = None) -> Die:
    answer = ask(f"Enter number of sides for dice (default {DEFAULT_SIDES}): ").strip()
    sides = DEFAULT_SIDES
    if answer:
        try:
            sides = int(answer)
        except ValueError:
            say(f"Invalid input, using standard {DEFAULT_SIDES}-sided dice.")
        else:
            if sides < MIN_SIDES:
                say(f"Dice must have at least {MIN_SIDES} sides, using {DEFAULT_SIDES}.")
            elif sides > MAX_SIDES:
                say(f"Maximum {MAX_SIDES} sides allowed, using {MAX_SIDES}.")
            sides = clamp_sides(sides)
    return Die(sides, seed=seed)


def prompt_setup(
    ask: Ask | None = None,
    say: Say | None = None,
    custom: bool = False,
    seed: int | None = None,
) -> GameSetup:
    """Collect a full game setup by asking questions.

    The standard game only asks for players. A *custom* game also asks for
    board size, extra snakes and ladders (non-standard sizes only) and die
    sides.
    """
    ask = ask or input
    say = say or print
    if not custom:
        return GameSetup(
            players=prompt_players(ask, say),
            board=Board.standard(),
            die=Die(DEFAULT_SIDES, seed=seed),
        )

    say("\n=== Custom Game Setup ===")
    size = prompt_board_size(ask, say)
    snakes: list[tuple[int, int]] = []
    ladders: list[tuple[int, int]] = []
    if size != DEFAULT_BOARD_SIZE and _yes(ask("Do you want to add custom snakes and ladders? (y/n): ")):
        snakes = _prompt_pairs(ask, say, "snake", "Head position (higher number)", "Tail position (lower number)")
        ladders = _prompt_pairs(ask, say, "ladder", "Bottom position (lower number)", "Top position (higher number)")
    board = build_board(size, snakes, ladders, say=say)
    die = prompt_die(ask, say, seed=seed)
    players = prompt_players(ask, say)
    return GameSetup(players=players, board=board, die=die)
