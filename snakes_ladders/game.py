"""Turn engine: drives a Snakes & Ladders game from first roll to winner."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Protocol, Sequence

from snakes_ladders.board import Board, MoveResult
from snakes_ladders.dice import Roller
from snakes_ladders.players import Player, assign_symbols

MIN_PLAYERS = 2
MAX_TURNS = 1000  # auto-play safety valve for boards nobody can finish


class InvalidSetup(ValueError):
    """The game cannot start with the players it was given."""


class GameOver(RuntimeError):
    """A turn was requested after the game already has a winner."""


# ── Structured types ────────────────────────────────────────────────

class TurnPhase(enum.Enum):
    AWAITING_ROLL = "awaiting_roll"
    RESOLVING = "resolving"
    TURN_COMPLETE = "turn_complete"
    GAME_OVER = "game_over"


@dataclass
class TurnRecord:
    """Record of a single resolved turn."""

    turn_number: int
    player: int
    roll: int
    move: MoveResult
    positions_before: list[int]
    positions_after: list[int]
    is_winning_move: bool = False


@dataclass
class GameState:
    """Mutable state that evolves during a game."""

    current_player_index: int = 0
    turn_number: int = 0
    phase: TurnPhase = TurnPhase.AWAITING_ROLL
    ended: bool = False
    winner: Player | None = None


@dataclass
class GameResult:
    winner: Player | None
    reason: str  # "win" | "max_turns" | "cancelled"
    turns: int = 0


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives a record for every turn as the game is played."""

    def on_turn(self, record: TurnRecord) -> None: ...


@dataclass
class ListObserver:
    """Default observer, collects records into a list."""

    records: list[TurnRecord] = field(default_factory=list)

    def on_turn(self, record: TurnRecord) -> None:
        self.records.append(record)


Renderer = Callable[[Board, Sequence[Player]], object]
ReadyGate = Callable[[Player], bool]


# ── Engine ───────────────────────────────────────────────────────────

class Game:
    """One game between two or more players on a single board.

    The board computes moves; the game is the only thing that writes
    positions back onto players.
    """

    def __init__(
        self,
        players: Sequence[Player],
        board: Board,
        die: Roller,
        observer: GameObserver | None = None,
    ):
        if len(players) < MIN_PLAYERS:
            raise InvalidSetup(
                f"Need at least {MIN_PLAYERS} players to play (got {len(players)})."
            )
        self.players = list(players)
        assign_symbols(self.players)
        self.board = board
        self.board.freeze()
        self.die = die
        self.state = GameState()
        self.observer = observer or ListObserver()

    @property
    def current_player(self) -> Player:
        return self.players[self.state.current_player_index]

    @property
    def ended(self) -> bool:
        return self.state.ended

    @property
    def winner(self) -> Player | None:
        return self.state.winner

    def take_turn(self) -> TurnRecord:
        """Roll for the current player, resolve, commit and check for a win."""
        if self.state.ended:
            raise GameOver(f"{self.state.winner.name} has already won.")

        idx = self.state.current_player_index
        player = self.players[idx]
        before = [p.position for p in self.players]

        roll = self.die.roll()
        self.state.phase = TurnPhase.RESOLVING
        move = self.board.resolve_move(player.position, roll)
        player.position = move.final
        self.state.turn_number += 1

        won = self._check_win()
        record = TurnRecord(
            turn_number=self.state.turn_number,
            player=idx,
            roll=roll,
            move=move,
            positions_before=before,
            positions_after=[p.position for p in self.players],
            is_winning_move=won,
        )
        self.observer.on_turn(record)

        if not won:
            self.state.phase = TurnPhase.TURN_COMPLETE
            self.state.current_player_index = (idx + 1) % len(self.players)
            self.state.phase = TurnPhase.AWAITING_ROLL
        return record

    def _check_win(self) -> bool:
        # Whole roster in turn order, not only the player who just moved.
        for player in self.players:
            if self.board.has_won(player.position):
                self._declare_winner(player)
                return True
        return False

    def _declare_winner(self, player: Player) -> None:
        player.is_winner = True
        self.state.winner = player
        self.state.ended = True
        self.state.phase = TurnPhase.GAME_OVER

    # ── loops ──

    def play_auto(
        self,
        max_turns: int = MAX_TURNS,
        render: Renderer | None = None,
    ) -> GameResult:
        """Play without pauses until someone wins or *max_turns* is reached.

        At the cap the furthest-along player (first in turn order on a tie)
        is declared the winner.
        """
        played = 0
        while not self.state.ended and played < max_turns:
            self.take_turn()
            played += 1
            if render is not None:
                render(self.board, self.players)

        if self.state.ended:
            return GameResult(winner=self.state.winner, reason="win", turns=self.state.turn_number)

        self._declare_winner(max(self.players, key=lambda p: p.position))
        return GameResult(winner=self.state.winner, reason="max_turns", turns=self.state.turn_number)

    def play_interactive(
        self,
        ready: ReadyGate,
        render: Renderer | None = None,
    ) -> GameResult:
        """Play turn by turn, asking *ready* before every roll.

        A falsy answer stops the loop and leaves the game unfinished.
        """
        while not self.state.ended:
            if not ready(self.current_player):
                return GameResult(winner=None, reason="cancelled", turns=self.state.turn_number)
            self.take_turn()
            if render is not None:
                render(self.board, self.players)

        return GameResult(winner=self.state.winner, reason="win", turns=self.state.turn_number)

    def standings(self) -> list[Player]:
        """Winner first, then everyone else by position, furthest first."""
        return sorted(self.players, key=lambda p: (not p.is_winner, -p.position))
