"""CLI entry point: python -m snakes_ladders {play,quick,custom,demo}."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence

from snakes_ladders.board import Board, InvalidDefinition
from snakes_ladders.chart import make_position_chart
from snakes_ladders.config import DEFAULT_BOARD_SIZE, DEFAULT_SIDES, GameSetup, prompt_setup, quick_setup
from snakes_ladders.game import MAX_TURNS, Game, GameResult, InvalidSetup, ListObserver, TurnRecord
from snakes_ladders.players import Player
from snakes_ladders.render import describe_turn, print_board, render_standings, render_statistics

DEMO_PLAYERS = ("Alice", "Bob", "Charlie")


@dataclass
class NarratingObserver(ListObserver):
    """Prints a line per turn while still collecting the records."""

    players: Sequence[Player] = field(default_factory=list)
    board: Board | None = None
    out: Callable[[str], None] = print

    def on_turn(self, record: TurnRecord) -> None:
        super().on_turn(record)
        self.out(f"\nTurn {record.turn_number}: " + describe_turn(record, self.players, self.board))


def _enter_to_roll(player: Player) -> bool:
    print("\n" + "=" * 50)
    try:
        input(f"{player.name}'s turn! Press Enter to roll dice...")
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return True


def _ask_yes(prompt: str) -> bool:
    try:
        return input(prompt).strip().lower().startswith("y")
    except EOFError:
        return False


# ── shared game driver ───────────────────────────────────────────────

def _setup_from_args(args: argparse.Namespace, custom: bool = False) -> GameSetup:
    if args.players:
        return quick_setup(
            args.players,
            size=getattr(args, "size", DEFAULT_BOARD_SIZE),
            sides=getattr(args, "sides", DEFAULT_SIDES),
            seed=args.seed,
        )
    return prompt_setup(custom=custom, seed=args.seed)


def _run(setup: GameSetup, args: argparse.Namespace, interactive: bool) -> GameResult:
    observer = NarratingObserver(players=setup.players, board=setup.board)
    game = Game(setup.players, setup.board, setup.die, observer=observer)
    render = None if args.quiet else print_board

    print("🎲 Welcome to Snakes and Ladders! 🎲")
    print("Players:")
    for p in game.players:
        print(f"  {p.name} ({p.symbol})")
    print(f"Goal: Reach position {game.board.winning_position} exactly!")
    if render is not None:
        render(game.board, game.players)

    if interactive:
        result = game.play_interactive(_enter_to_roll, render=render)
    else:
        result = game.play_auto(max_turns=args.max_turns, render=render)

    if result.reason == "cancelled":
        print("Game cancelled.")
        return result
    if result.reason == "max_turns":
        print("Game ended due to maximum turn limit reached.")

    print("\n" + "%" * 20)
    print("$ GAME OVER! $")
    print(f"{result.winner.name} has won the game!")
    print("%" * 20)
    print()
    print(render_standings(game))
    print()
    print(render_statistics(game))

    if args.chart:
        make_position_chart(
            observer.records, game.players,
            output_path=args.chart,
            winning_position=game.board.winning_position,
        )
        print(f"Chart saved to {args.chart}")
    return result


# ── commands ─────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> GameResult:
    """Standard board, press Enter for every roll."""
    return _run(_setup_from_args(args), args, interactive=True)


def cmd_quick(args: argparse.Namespace) -> GameResult:
    """Standard board, auto-play to the end."""
    return _run(_setup_from_args(args), args, interactive=False)


def cmd_custom(args: argparse.Namespace) -> GameResult:
    """Custom board size, snakes, ladders and die."""
    setup = _setup_from_args(args, custom=True)
    interactive = args.interactive
    if interactive is None and not args.players:
        interactive = _ask_yes("Play interactively (y) or quick auto-play (n)? ")
    return _run(setup, args, interactive=bool(interactive))


def cmd_demo(args: argparse.Namespace) -> GameResult:
    """Three-player auto-play on the standard board."""
    return _run(quick_setup(DEMO_PLAYERS, seed=args.seed), args, interactive=False)


# ── main ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders for 2-8 players",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--players", nargs="*", metavar="NAME", help="Player names (skips prompts)")
    common.add_argument("--seed", type=int, help="Seed the die for a reproducible game")
    common.add_argument("--max-turns", type=int, default=MAX_TURNS, help="Turn cap for auto-play")
    common.add_argument("--chart", metavar="PATH", help="Save a position chart PNG when the game ends")
    common.add_argument("--quiet", "-q", action="store_true", help="Don't draw the board after each turn")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("play", parents=[common], help="Interactive game (press Enter to roll)")
    sub.add_parser("quick", parents=[common], help="Automatic game")

    p_custom = sub.add_parser("custom", parents=[common], help="Custom board setup")
    p_custom.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help=f"Board size (default {DEFAULT_BOARD_SIZE})")
    p_custom.add_argument("--sides", type=int, default=DEFAULT_SIDES, help=f"Die sides (default {DEFAULT_SIDES})")
    mode = p_custom.add_mutually_exclusive_group()
    mode.add_argument("--interactive", dest="interactive", action="store_true", default=None)
    mode.add_argument("--auto", dest="interactive", action="store_false")

    sub.add_parser("demo", parents=[common], help="Three-player demo game")
    return parser


COMMANDS = {
    "play": cmd_play,
    "quick": cmd_quick,
    "custom": cmd_custom,
    "demo": cmd_demo,
}


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except (InvalidSetup, InvalidDefinition) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print("\nSetup cancelled.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
