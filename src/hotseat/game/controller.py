"""GameController — the central orchestrator of a chess game.

Owns the authoritative :class:`GameState`, validates move attempts against
the current legal-move set and notifies listeners through simple callbacks
so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult
from hotseat.core.move import Move
from hotseat.core.piece import Piece
from hotseat.core.types import Square, square_name
from hotseat.game.interfaces import GamePhase, IGameController
from hotseat.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
ResetCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Drives a two-player game on one board: validates moves, switches
    turns, tracks check / checkmate / stalemate and notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._state.setup()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def is_king_under_check(self) -> bool:
        return self._state.is_king_under_check

    @property
    def is_king_under_mate(self) -> bool:
        return self._state.is_king_under_mate

    @property
    def is_king_under_draw(self) -> bool:
        return self._state.is_king_under_draw

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def last_move(self) -> Move | None:
        return self._state.last_move

    @property
    def legal_moves(self) -> list[Move]:
        return list(self._state.legal_moves)

    # ── IGameController impl ─────────────────────────────────────────────

    def reset(self) -> None:
        self.setup(None)

    def setup(self, board: Board | None, side_to_move: Color = Color.WHITE) -> None:
        """Start a game from *board* (the starting position if None)."""
        self._state.setup(board, side_to_move)
        _LOGGER.debug(
            "New game: %s to move, %d legal moves",
            side_to_move,
            len(self._state.legal_moves),
        )
        for cb in self.events.on_reset:
            cb(self._state)
        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)

    def select_piece(self, sq: Square) -> list[Move]:
        piece = self._state.board[sq]
        if piece is None or piece.color != self._state.side_to_move:
            return []
        return self._state.moves_from(sq)

    def attempt_move(self, from_sq: Square, to_sq: Square) -> bool:
        move = self._find_legal_move(from_sq, to_sq)
        if move is None:
            _LOGGER.debug(
                "Rejected move %s%s for %s",
                square_name(from_sq),
                square_name(to_sq),
                self._state.side_to_move,
            )
            return False
        self.apply_move(move)
        return True

    def get_square(self, sq: Square) -> Piece | None:
        return self._state.board[sq]

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply an already-validated *move* and notify listeners."""
        previous_phase = self._state.phase
        record = self._state.apply_move(move)
        _LOGGER.debug("Played %s (%s)", move, record.piece.piece_type.name.lower())

        for cb in self.events.on_move:
            cb(record, self._state)

        phase = self._state.phase
        if phase != previous_phase:
            self._emit_phase(phase)
        if phase.is_terminal:
            _LOGGER.info("Game over by %s: %s", phase.name.lower(), self._state.result.name)
            self._emit_game_over(self._state.result)
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _find_legal_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        for move in self.select_piece(from_sq):
            if move.to_sq == to_sq:
                return move
        return None

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
