"""Tests for Rules: check, checkmate and stalemate detection."""

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult
from hotseat.core.move import Move
from hotseat.core.rules import Rules
from hotseat.core.types import E2, E4

# After 1.f3 e5 2.g4 Qh4#
FOOLS_MATE = [
    "rnb.kbnr",
    "pppp.ppp",
    "........",
    "....p...",
    "......Pq",
    ".....P..",
    "PPPPP..P",
    "RNBQKBNR",
]

STALEMATE = [
    ".......k",
    "........",
    "......Q.",
    "........",
    "........",
    "........",
    "........",
    "K.......",
]


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        board = Board.from_diagram(FOOLS_MATE)
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_missing_king_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            Rules.is_in_check(board, Color.WHITE)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = Board.from_diagram(FOOLS_MATE)
        assert Rules.is_checkmate(board, Color.WHITE)
        assert not Rules.is_stalemate(board, Color.WHITE)

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = Board.from_diagram(
            [
                "R..k....",
                "........",
                "...K....",
                "........",
                "........",
                "........",
                "........",
                "........",
            ]
        )
        assert Rules.is_checkmate(board, Color.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = Board.from_diagram(
            [
                "R...k...",
                "........",
                "........",
                "........",
                "........",
                "........",
                "........",
                "....K...",
            ]
        )
        assert Rules.is_in_check(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)

    def test_starting_position_not_mate(self) -> None:
        assert not Rules.is_checkmate(Board.initial(), Color.WHITE)


class TestStalemate:
    def test_king_boxed_in(self) -> None:
        board = Board.from_diagram(STALEMATE)
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)

    def test_side_with_moves_not_stalemated(self) -> None:
        board = Board.from_diagram(STALEMATE)
        assert not Rules.is_stalemate(board, Color.WHITE)


class TestGameResult:
    def test_in_progress_with_moves(self) -> None:
        moves = [Move(E2, E4)]
        assert Rules.game_result(Color.WHITE, moves, False) == GameResult.IN_PROGRESS
        assert Rules.game_result(Color.WHITE, moves, True) == GameResult.IN_PROGRESS

    def test_mated_side_loses(self) -> None:
        assert Rules.game_result(Color.WHITE, [], True) == GameResult.BLACK_WINS
        assert Rules.game_result(Color.BLACK, [], True) == GameResult.WHITE_WINS

    def test_no_moves_without_check_is_draw(self) -> None:
        assert Rules.game_result(Color.BLACK, [], False) == GameResult.DRAW
