"""Tests for Board."""

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4, E5,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = [sq for sq in board.pieces(Color.WHITE) if 8 <= sq < 16]
        black = [sq for sq in board.pieces(Color.BLACK) if 48 <= sq < 56]
        assert len(white) == 8
        assert len(black) == 8

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        for sq in range(64):
            piece = board[sq]
            if piece is not None:
                assert not piece.has_moved
                assert not piece.is_en_passantable

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_follows_moves(self) -> None:
        board = Board.initial()
        king = board[E1]
        board[E1] = None
        board[E2] = king
        assert board.king_square(Color.WHITE) == E2

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(board[sq] is None for sq in range(64))

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestBoardSimulate:
    def test_changes_visible_inside_and_undone_after(self) -> None:
        board = Board.initial()
        before = board.copy()
        king = board[E1]
        with board.simulate({E1: None, E4: king}):
            assert board[E1] is None
            assert board[E4] == king
            assert board.king_square(Color.WHITE) == E4
        assert board == before
        assert board.king_square(Color.WHITE) == E1

    def test_restored_when_body_raises(self) -> None:
        board = Board.initial()
        before = board.copy()
        with pytest.raises(RuntimeError):
            with board.simulate({E2: None, E4: board[E2]}):
                raise RuntimeError("boom")
        assert board == before

    def test_nested(self) -> None:
        board = Board.initial()
        before = board.copy()
        pawn = board[E2]
        with board.simulate({E2: None, E4: pawn}):
            with board.simulate({E4: None, E5: pawn}):
                assert board[E5] == pawn
            assert board[E4] == pawn
        assert board == before


class TestBoardFromDiagram:
    def test_matches_initial(self) -> None:
        board = Board.from_diagram(
            [
                "rnbqkbnr",
                "pppppppp",
                "........",
                "........",
                "........",
                "........",
                "PPPPPPPP",
                "RNBQKBNR",
            ]
        )
        assert board == Board.initial()

    def test_displaced_pieces_are_marked_moved(self) -> None:
        board = Board.from_diagram(
            [
                "....k...",
                "........",
                "........",
                "........",
                "....P...",
                "........",
                "........",
                "...K...R",
            ]
        )
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN, has_moved=True)
        assert board[D1] == Piece(Color.WHITE, PieceType.KING, has_moved=True)
        assert board[H1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_wrong_row_count_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected 8 rows"):
            Board.from_diagram(["........"])

    def test_bad_character_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_diagram(["x......."] + ["........"] * 7)
