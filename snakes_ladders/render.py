"""Text rendering of the board, players and final results."""

from __future__ import annotations

from typing import Sequence

from snakes_ladders.board import DEFAULT_SIZE, Board
from snakes_ladders.game import Game, TurnRecord
from snakes_ladders.players import Player

SNAKE_MARK = "🐍"
LADDER_MARK = "🪜"
ROW_WIDTH = 10


def _occupants(players: Sequence[Player]) -> dict[int, str]:
    """Cell → concatenated symbols of the players standing on it."""
    cells: dict[int, str] = {}
    for p in players:
        cells[p.position] = cells.get(p.position, "") + p.symbol
    return cells


def _grid_cell_number(row: int, col: int) -> int:
    # Odd rows run left to right, even rows right to left (boustrophedon).
    if row % 2 == 1:
        return row * ROW_WIDTH + col + 1
    return row * ROW_WIDTH + (ROW_WIDTH - 1 - col) + 1


def render_grid(board: Board, players: Sequence[Player]) -> list[str]:
    """10×10 layout of the standard board, 91–100 on the top row."""
    here = _occupants(players)
    lines = [f"Board Layout ({board.winning_position} = winning position):"]
    for row in range(ROW_WIDTH - 1, -1, -1):
        cells = []
        for col in range(ROW_WIDTH):
            n = _grid_cell_number(row, col)
            cell = f"{n:3d}"
            if board.is_snake(n):
                cell += SNAKE_MARK
            elif board.is_ladder(n):
                cell += LADDER_MARK
            else:
                cell += "  "
            cell += here.get(n, "")
            cells.append(cell)
        lines.append(" ".join(cells))
    return lines


def render_track(board: Board, players: Sequence[Player]) -> list[str]:
    """Plain rows of ten for any non-standard board size."""
    here = _occupants(players)
    lines = [f"Positions 1 to {board.size}"]
    row: list[str] = []
    for n in range(1, board.size + 1):
        marker = "."
        if board.is_snake(n):
            marker = "S"
        elif board.is_ladder(n):
            marker = "L"
        marker = here.get(n, marker)
        row.append(f"{n:3d}{marker}")
        if len(row) == ROW_WIDTH:
            lines.append(" ".join(row))
            row = []
    if row:
        lines.append(" ".join(row))
    return lines


def render_board(board: Board, players: Sequence[Player]) -> str:
    """Full snapshot: track, snake/ladder list and player positions."""
    lines = ["", "=== Board Status ==="]
    if board.size == DEFAULT_SIZE:
        lines += render_grid(board, players)
    else:
        lines += render_track(board, players)

    lines.append("")
    lines.append(f"{SNAKE_MARK} Snakes: " + ", ".join(str(s) for s in board.snakes))
    lines.append(f"{LADDER_MARK} Ladders: " + ", ".join(str(l) for l in board.ladders))
    lines.append("")
    lines.append("Player Positions:")
    lines += [f"  {p}" for p in players]
    return "\n".join(lines)


def print_board(board: Board, players: Sequence[Player]) -> None:
    print(render_board(board, players))


def render_standings(game: Game) -> str:
    lines = ["=== FINAL RESULTS ===", "Final Standings:"]
    for i, p in enumerate(game.standings(), start=1):
        status = " 🏆 WINNER!" if p.is_winner else f" (Position: {p.position})"
        lines.append(f"{i}. {p.name}{status}")
    return "\n".join(lines)


def render_statistics(game: Game) -> str:
    board = game.board
    return "\n".join([
        "Game Statistics:",
        f"- Total players: {len(game.players)}",
        f"- Board size: {board.size}",
        f"- Snakes on board: {len(board.snakes)}",
        f"- Ladders on board: {len(board.ladders)}",
        f"- Turns played: {game.state.turn_number}",
    ])


def describe_turn(record: TurnRecord, players: Sequence[Player], board: Board) -> str:
    """One-line narration of a resolved turn, e.g. for the CLI log."""
    move = record.move
    name = players[record.player].name
    if move.overshoot:
        needed = board.winning_position - move.start
        return f"{name} rolled {move.roll} but needs exactly {needed} to win. No movement!"
    msg = f"{name} rolled {move.roll} and moved to position {move.landing}"
    if move.via_snake:
        msg += f". {SNAKE_MARK} Snake! Slid down to {move.final}"
    elif move.via_ladder:
        msg += f". {LADDER_MARK} Ladder! Climbed to {move.final}"
    return msg
