"""Plot every player's position over the course of a game."""

from __future__ import annotations

from typing import Sequence

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from snakes_ladders.game import TurnRecord
from snakes_ladders.players import Player


def position_history(records: Sequence[TurnRecord], player_count: int) -> list[list[int]]:
    """One series per player: position at the start, then after every turn."""
    series = [[0] for _ in range(player_count)]
    if records:
        for idx, pos in enumerate(records[0].positions_before):
            series[idx][0] = pos
    for rec in records:
        for idx, pos in enumerate(rec.positions_after):
            series[idx].append(pos)
    return series


def make_position_chart(
    records: Sequence[TurnRecord],
    players: Sequence[Player],
    output_path: str = "positions.png",
    winning_position: int = 100,
    title: str = "Snakes & Ladders: positions by turn",
) -> str:
    """Create a step chart of positions per turn.

    Returns the path to the saved PNG.
    """
    series = position_history(records, len(players))
    turns = list(range(len(records) + 1))

    fig, ax = plt.subplots(figsize=(10, 5))
    for player, positions in zip(players, series):
        label = f"{player.name} ({player.symbol})"
        if player.is_winner:
            label += " - winner"
        ax.step(turns, positions, where="post", label=label)

    ax.axhline(winning_position, color="#999999", linestyle="--", linewidth=1)
    ax.set_xlabel("Turn")
    ax.set_ylabel("Position")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_ylim(bottom=0, top=winning_position + 5)
    ax.legend(loc="upper left")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
