"""Tests for the Piece value object."""

import pytest

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece


class TestPiece:
    def test_defaults(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        assert not piece.has_moved
        assert not piece.is_en_passantable

    def test_moved_returns_copy(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        moved = piece.moved()
        assert moved.has_moved
        assert not piece.has_moved
        assert moved.piece_type == PieceType.ROOK

    def test_promotion_keeps_colour_and_flags(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN, has_moved=True)
        queen = pawn.promoted(PieceType.QUEEN)
        assert queen == Piece(Color.BLACK, PieceType.QUEEN, has_moved=True)

    def test_en_passant_flag(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN).with_en_passant(True)
        assert pawn.is_en_passantable
        assert not pawn.with_en_passant(False).is_en_passantable

    def test_frozen(self) -> None:
        piece = Piece(Color.WHITE, PieceType.KING)
        with pytest.raises(AttributeError):
            piece.has_moved = True  # type: ignore[misc]

    def test_enemy(self) -> None:
        white = Piece(Color.WHITE, PieceType.PAWN)
        black = Piece(Color.BLACK, PieceType.PAWN)
        assert white.is_enemy_of(black)
        assert not white.is_enemy_of(Piece(Color.WHITE, PieceType.QUEEN))


class TestPieceChars:
    @pytest.mark.parametrize(
        ("char", "color", "ptype"),
        [
            ("K", Color.WHITE, PieceType.KING),
            ("n", Color.BLACK, PieceType.KNIGHT),
            ("P", Color.WHITE, PieceType.PAWN),
            ("q", Color.BLACK, PieceType.QUEEN),
        ],
    )
    def test_from_char(self, char: str, color: Color, ptype: PieceType) -> None:
        piece = Piece.from_char(char)
        assert piece.color == color
        assert piece.piece_type == ptype
        assert str(piece) == char

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
