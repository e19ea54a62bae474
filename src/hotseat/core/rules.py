"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.enums import Color, GameResult
from hotseat.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from hotseat.core.board import Board
    from hotseat.core.move import Move


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Stalemate is the only draw; repetition and move-count rules are not
    tracked.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def game_result(
        color: Color, legal_moves: list[Move], in_check: bool
    ) -> GameResult:
        """Outcome for *color* to move, given its legal moves and check status."""
        if legal_moves:
            return GameResult.IN_PROGRESS
        if in_check:
            return GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        return GameResult.DRAW
