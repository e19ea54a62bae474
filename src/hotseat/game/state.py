"""Game state — board, side to move, legal moves, flags and history."""

from __future__ import annotations

from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult, PieceType
from hotseat.core.move import Move
from hotseat.core.move_generator import (
    FORWARD,
    MoveGenerator,
    castling_rook_squares,
    en_passant_capture_square,
)
from hotseat.core.piece import Piece
from hotseat.core.rules import Rules
from hotseat.core.types import (
    LATERAL_DIRECTIONS,
    Square,
    direction_offset,
    squares_to_edge,
)
from hotseat.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_promotion: bool = False
    was_check: bool = False


@dataclass
class GameState:
    """The authoritative board plus everything derived from it.

    ``legal_moves`` always holds the complete legal-move set of
    ``side_to_move`` and is rebuilt after every applied move.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    legal_moves: list[Move] = field(default_factory=list)
    is_king_under_check: bool = False
    is_king_under_mate: bool = False
    is_king_under_draw: bool = False
    move_history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, from the starting position by default."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.move_history.clear()

        gen = MoveGenerator(self.board)
        self._refresh(gen, gen.is_in_check(side_to_move))

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        board = self.board
        color = self.side_to_move
        opponent = color.opposite

        # En-passant rights last for exactly one enemy reply.
        for sq in board.pieces(color):
            piece = board[sq]
            if piece is not None and piece.is_en_passantable:
                board[sq] = piece.with_en_passant(False)

        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on the starting square of {move}")
        captured = board[move.to_sq]
        board[move.from_sq] = None
        moved = piece.moved()

        was_promotion = piece.piece_type == PieceType.PAWN and not squares_to_edge(
            move.to_sq, FORWARD[color]
        )
        if was_promotion:
            moved = moved.promoted(PieceType.QUEEN)
        board[move.to_sq] = moved

        if move.is_castling:
            rook_from, rook_to = castling_rook_squares(board, move)
            rook = board[rook_from]
            assert rook is not None
            board[rook_from] = None
            board[rook_to] = rook.moved()

        if move.is_en_passant:
            captured_sq = en_passant_capture_square(move, color)
            captured = board[captured_sq]
            board[captured_sq] = None

        if move.is_double_movement and self._has_adjacent_enemy_pawn(move.to_sq, color):
            board[move.to_sq] = moved.with_en_passant(True)

        gen = MoveGenerator(board)
        gives_check = gen.is_in_check(opponent)
        self.side_to_move = opponent
        self._refresh(gen, gives_check)

        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            was_promotion=was_promotion,
            was_check=gives_check,
        )
        self.move_history.append(record)
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        if self.is_king_under_mate:
            return GamePhase.CHECKMATE
        if self.is_king_under_draw:
            return GamePhase.STALEMATE
        if self.is_king_under_check:
            return GamePhase.CHECK
        return GamePhase.IN_PROGRESS

    @property
    def result(self) -> GameResult:
        return Rules.game_result(
            self.side_to_move, self.legal_moves, self.is_king_under_check
        )

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def last_move(self) -> Move | None:
        if not self.move_history:
            return None
        return self.move_history[-1].move

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def copy(self) -> GameState:
        """Independent copy, e.g. for exploring a line without touching this game."""
        return GameState(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            legal_moves=list(self.legal_moves),
            is_king_under_check=self.is_king_under_check,
            is_king_under_mate=self.is_king_under_mate,
            is_king_under_draw=self.is_king_under_draw,
            move_history=list(self.move_history),
        )

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal moves whose starting square is *sq*."""
        return [m for m in self.legal_moves if m.from_sq == sq]

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh(self, gen: MoveGenerator, in_check: bool) -> None:
        self.legal_moves = gen.generate_legal_moves(self.side_to_move)
        self.is_king_under_check = in_check
        no_moves = not self.legal_moves
        self.is_king_under_mate = no_moves and in_check
        self.is_king_under_draw = no_moves and not in_check

    def _has_adjacent_enemy_pawn(self, sq: Square, color: Color) -> bool:
        for lateral in LATERAL_DIRECTIONS:
            if not squares_to_edge(sq, lateral):
                continue
            neighbour = self.board[sq + direction_offset(lateral)]
            if (
                neighbour is not None
                and neighbour.color != color
                and neighbour.piece_type == PieceType.PAWN
            ):
                return True
        return False
