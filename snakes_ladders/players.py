"""Player pawns and symbol assignment."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_SYMBOL = "0"
SYMBOLS = "1234567890"


@dataclass
class Player:
    """A named pawn on the track. Position 0 means not yet on the board."""

    name: str
    symbol: str = PLACEHOLDER_SYMBOL
    position: int = 0
    is_winner: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Player name must not be empty.")

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol}) at position {self.position}"


def assign_symbols(players: list[Player]) -> None:
    """Give the first ten players the symbols 1–9 then 0, in turn order.

    Players beyond the tenth keep whatever symbol they came with.
    """
    for player, symbol in zip(players, SYMBOLS):
        player.symbol = symbol
