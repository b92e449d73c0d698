"""Board layout and movement rules for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_SIZE = 100


class InvalidDefinition(ValueError):
    """A snake or ladder that cannot be placed on the board."""


# ── Snakes & ladders ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Snake:
    """Penalty: landing on *head* slides the pawn down to *tail*."""

    head: int
    tail: int

    def __post_init__(self) -> None:
        if self.head <= self.tail:
            raise InvalidDefinition(
                f"Snake head must be above its tail (got {self.head}→{self.tail})."
            )

    @property
    def trigger(self) -> int:
        return self.head

    @property
    def destination(self) -> int:
        return self.tail

    def __str__(self) -> str:
        return f"Snake({self.head}→{self.tail})"


@dataclass(frozen=True)
class Ladder:
    """Shortcut: landing on *bottom* climbs the pawn up to *top*."""

    bottom: int
    top: int

    def __post_init__(self) -> None:
        if self.bottom >= self.top:
            raise InvalidDefinition(
                f"Ladder bottom must be below its top (got {self.bottom}→{self.top})."
            )

    @property
    def trigger(self) -> int:
        return self.bottom

    @property
    def destination(self) -> int:
        return self.top

    def __str__(self) -> str:
        return f"Ladder({self.bottom}→{self.top})"


# fmt: off
DEFAULT_SNAKES: tuple[tuple[int, int], ...] = (
    (99, 54), (95, 67), (88, 24), (62, 19), (64, 60), (54, 34), (17, 7),
)
# 54 is both a snake head and a ladder bottom; the ladder is registered
# later, so it wins the lookup.
DEFAULT_LADDERS: tuple[tuple[int, int], ...] = (
    ( 4, 56), (12, 50), (14, 55), (22, 58), (41, 79), (54, 88),
)
# fmt: on


# ── Move result ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class MoveResult:
    """What a roll does to a pawn. Computed, never applied, by the board."""

    start: int
    roll: int
    final: int
    landing: int | None = None  # None = overshoot, pawn never left *start*
    overshoot: bool = False

    @property
    def via_snake(self) -> bool:
        return self.landing is not None and self.final < self.landing

    @property
    def via_ladder(self) -> bool:
        return self.landing is not None and self.final > self.landing


# ── Board ────────────────────────────────────────────────────────────

@dataclass
class Board:
    """Linear track of *size* cells plus its snake/ladder transition table.

    Triggers are looked up in one flat ``trigger -> destination`` dict.
    Two definitions sharing a trigger are not rejected: whichever was
    registered last wins the lookup.
    """

    size: int = DEFAULT_SIZE
    _snakes: list[Snake] = field(default_factory=list, init=False, repr=False)
    _ladders: list[Ladder] = field(default_factory=list, init=False, repr=False)
    _transitions: dict[int, int] = field(default_factory=dict, init=False, repr=False)
    _frozen: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise InvalidDefinition(f"Board size must be at least 1 (got {self.size}).")

    @classmethod
    def standard(cls, size: int = DEFAULT_SIZE) -> Board:
        """Board pre-loaded with the classic layout when *size* is 100."""
        board = cls(size=size)
        if size == DEFAULT_SIZE:
            for head, tail in DEFAULT_SNAKES:
                board.add_penalty(head, tail)
            for bottom, top in DEFAULT_LADDERS:
                board.add_shortcut(bottom, top)
        return board

    @property
    def winning_position(self) -> int:
        return self.size

    # ── setup ──

    def add_snake(self, snake: Snake) -> None:
        self._check_mutable()
        if snake.head > self.size or snake.tail < 1:
            raise InvalidDefinition(f"{snake} is outside the board (1–{self.size}).")
        self._snakes.append(snake)
        self._transitions[snake.head] = snake.tail

    def add_ladder(self, ladder: Ladder) -> None:
        self._check_mutable()
        if ladder.top > self.size or ladder.bottom < 1:
            raise InvalidDefinition(f"{ladder} is outside the board (1–{self.size}).")
        self._ladders.append(ladder)
        self._transitions[ladder.bottom] = ladder.top

    def add_penalty(self, head: int, tail: int) -> Snake:
        snake = Snake(head, tail)
        self.add_snake(snake)
        return snake

    def add_shortcut(self, bottom: int, top: int) -> Ladder:
        ladder = Ladder(bottom, top)
        self.add_ladder(ladder)
        return ladder

    def freeze(self) -> None:
        """Reject any further additions. Called once play begins."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise InvalidDefinition("Board is in play; snakes and ladders are fixed.")

    # ── lookups ──

    @property
    def snakes(self) -> list[Snake]:
        return list(self._snakes)

    @property
    def ladders(self) -> list[Ladder]:
        return list(self._ladders)

    @property
    def transitions(self) -> Mapping[int, int]:
        return MappingProxyType(self._transitions)

    def destination(self, cell: int) -> int | None:
        return self._transitions.get(cell)

    def is_snake(self, cell: int) -> bool:
        dest = self._transitions.get(cell)
        return dest is not None and dest < cell

    def is_ladder(self, cell: int) -> bool:
        dest = self._transitions.get(cell)
        return dest is not None and dest > cell

    # ── rules ──

    def resolve_move(self, current_position: int, roll: int) -> MoveResult:
        """Compute where a pawn on *current_position* ends up after *roll*.

        Does NOT touch any player; the caller decides whether to commit.
        Only one transition is followed per move, even if it leads onto
        another trigger.
        """
        candidate = current_position + roll

        # Overshoot → stay put
        if candidate > self.winning_position:
            return MoveResult(
                start=current_position, roll=roll,
                final=current_position, overshoot=True,
            )

        dest = self._transitions.get(candidate)
        return MoveResult(
            start=current_position,
            roll=roll,
            landing=candidate,
            final=candidate if dest is None else dest,
        )

    def has_won(self, position: int) -> bool:
        return position >= self.winning_position
