"""Pseudo-legal move generation, the king-safety probe and the legality filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.enums import Color, MoveFlag, PieceType
from hotseat.core.move import Move
from hotseat.core.piece import Piece
from hotseat.core.types import (
    DIAGONAL_DIRECTIONS,
    KNIGHT_DIRECTIONS,
    LATERAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    RAY_DIRECTIONS,
    Direction,
    Square,
    direction_offset,
    squares_to_edge,
)

if TYPE_CHECKING:
    from hotseat.core.board import Board


# -- Move-shape tables ------------------------------------------------------

_SLIDING_DIRECTIONS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.QUEEN: RAY_DIRECTIONS,
    PieceType.ROOK: ORTHOGONAL_DIRECTIONS,
    PieceType.BISHOP: DIAGONAL_DIRECTIONS,
}

FORWARD: dict[Color, Direction] = {
    Color.WHITE: Direction.NORTH,
    Color.BLACK: Direction.SOUTH,
}

_PAWN_CAPTURE_DIRECTIONS: dict[Color, tuple[Direction, ...]] = {
    Color.WHITE: (Direction.NORTH_WEST, Direction.NORTH_EAST),
    Color.BLACK: (Direction.SOUTH_WEST, Direction.SOUTH_EAST),
}

# The rook must stand at least this far from the king: the king lands two
# squares over and the rook on the square the king crossed.
_MIN_CASTLING_ROOK_DISTANCE = 3


# -- Shared move geometry ---------------------------------------------------


def en_passant_capture_square(move: Move, color: Color) -> Square:
    """Square of the pawn taken by an en-passant *move* of *color*."""
    return move.to_sq - direction_offset(FORWARD[color])


def castling_rook_squares(board: Board, move: Move) -> tuple[Square, Square]:
    """Return ``(rook_from, rook_to)`` for a castling *move*.

    The rook is the first piece beyond the king's target square in the
    castling direction; it lands on the square the king crossed.
    """
    lateral = Direction.EAST if move.to_sq > move.from_sq else Direction.WEST
    offset = direction_offset(lateral)
    sq = move.to_sq
    for _ in range(squares_to_edge(move.to_sq, lateral)):
        sq += offset
        if not board.is_empty(sq):
            return sq, move.to_sq - offset
    raise AssertionError(f"No castling rook found for {move}")


class MoveGenerator:
    """Generates moves for either color on a :class:`Board`.

    The generator writes to the board while simulating candidate moves but
    every change is scoped by :meth:`Board.simulate` and undone before a
    public method returns.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All moves of *color* that do not leave its own king attacked."""
        legal: list[Move] = []
        append_legal = legal.append

        for move in self.generate_pseudo_legal_moves(color):
            with self._board.simulate(self.move_changes(move)):
                if not self.is_in_check(color):
                    append_legal(move)
        return legal

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves of *color*.

        King steps and castling are already screened for self-check here;
        other pieces are screened by :meth:`generate_legal_moves`.
        """
        moves: list[Move] = []
        board = self._board
        for sq in board.pieces(color):
            piece = board[sq]
            assert piece is not None
            self._gen_piece(sq, piece, moves, king_safety=True)
        return moves

    def piece_moves(self, sq: Square) -> list[Move]:
        """Unrestricted moves of the piece on *sq* (no king screening, no castling)."""
        piece = self._board[sq]
        if piece is None:
            return []
        moves: list[Move] = []
        self._gen_piece(sq, piece, moves, king_safety=False)
        return moves

    def move_changes(self, move: Move) -> dict[Square, Piece | None]:
        """Square writes that play *move* on the board, for simulation."""
        board = self._board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on the starting square of {move}")

        changes: dict[Square, Piece | None] = {move.from_sq: None, move.to_sq: piece}
        if move.is_en_passant:
            changes[en_passant_capture_square(move, piece.color)] = None
        elif move.is_castling:
            rook_from, rook_to = castling_rook_squares(board, move)
            changes[rook_to] = board[rook_from]
            changes[rook_from] = None
        return changes

    # -- King-safety probe --------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self.is_square_threatened(self._board.king_square(color), color)

    def is_square_threatened(self, sq: Square, color: Color) -> bool:
        """Could a piece of *color* standing on *sq* be captured?

        Scans outward along the eight rays and the eight knight leaps; the
        first enemy piece met in each is asked whether its own moves reach
        *sq*.  The square is expected to be occupied by the probed piece,
        so pawn advances never count as attacks.
        """
        board = self._board

        for direction in RAY_DIRECTIONS:
            offset = direction_offset(direction)
            to_sq = sq
            for _ in range(squares_to_edge(sq, direction)):
                to_sq += offset
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.color != color and self._reaches(to_sq, sq):
                    return True
                break

        for direction in KNIGHT_DIRECTIONS:
            if not squares_to_edge(sq, direction):
                continue
            from_sq = sq + direction_offset(direction)
            piece = board[from_sq]
            if piece is not None and piece.color != color and self._reaches(from_sq, sq):
                return True

        return False

    def _reaches(self, from_sq: Square, target: Square) -> bool:
        return any(move.to_sq == target for move in self.piece_moves(from_sq))

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(
        self, sq: Square, piece: Piece, moves: list[Move], *, king_safety: bool
    ) -> None:
        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif piece_type == PieceType.KNIGHT:
            self._gen_knight(sq, piece, moves)
        elif piece_type in _SLIDING_DIRECTIONS:
            self._gen_sliding(sq, piece, _SLIDING_DIRECTIONS[piece_type], moves)
        elif piece_type == PieceType.KING:
            self._gen_king(sq, piece, moves, king_safety)
        else:
            raise AssertionError(f"Unhandled piece type: {piece_type!r}")

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[Direction, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for direction in directions:
            offset = direction_offset(direction)
            to_sq = sq
            for _ in range(squares_to_edge(sq, direction)):
                to_sq += offset
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_knight(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        for direction in KNIGHT_DIRECTIONS:
            if not squares_to_edge(sq, direction):
                continue
            to_sq = sq + direction_offset(direction)
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq))

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        forward = FORWARD[color]
        forward_offset = direction_offset(forward)

        # Advances never capture and stop at the first occupant.
        max_steps = 1 if piece.has_moved else 2
        to_sq = sq
        for step in range(min(max_steps, squares_to_edge(sq, forward))):
            to_sq += forward_offset
            if not board.is_empty(to_sq):
                break
            flag = MoveFlag.DOUBLE_PAWN if step == 1 else MoveFlag.NORMAL
            moves.append(Move(sq, to_sq, flag))

        for direction in _PAWN_CAPTURE_DIRECTIONS[color]:
            if not squares_to_edge(sq, direction):
                continue
            to_sq = sq + direction_offset(direction)
            target = board[to_sq]
            if target is not None and target.color != color:
                moves.append(Move(sq, to_sq))

        for lateral in LATERAL_DIRECTIONS:
            if not squares_to_edge(sq, lateral):
                continue
            beside = sq + direction_offset(lateral)
            neighbour = board[beside]
            if (
                neighbour is None
                or neighbour.color == color
                or neighbour.piece_type != PieceType.PAWN
                or not neighbour.is_en_passantable
                or not squares_to_edge(beside, forward)
            ):
                continue
            to_sq = beside + forward_offset
            if board.is_empty(to_sq):
                moves.append(Move(sq, to_sq, MoveFlag.EN_PASSANT))

    def _gen_king(
        self, sq: Square, piece: Piece, moves: list[Move], king_safety: bool
    ) -> None:
        board = self._board
        for direction in RAY_DIRECTIONS:
            if not squares_to_edge(sq, direction):
                continue
            to_sq = sq + direction_offset(direction)
            target = board[to_sq]
            if target is not None and target.color == piece.color:
                continue
            if king_safety and self._king_threatened_on(sq, to_sq, piece):
                continue
            moves.append(Move(sq, to_sq))

        if king_safety:
            self._gen_castling(sq, piece, moves)

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        if king.has_moved or self.is_square_threatened(king_sq, king.color):
            return

        board = self._board
        for lateral in LATERAL_DIRECTIONS:
            offset = direction_offset(lateral)
            rook_distance: int | None = None
            sq = king_sq
            for step in range(1, squares_to_edge(king_sq, lateral) + 1):
                sq += offset
                occupant = board[sq]
                if occupant is None:
                    continue
                if (
                    occupant.piece_type == PieceType.ROOK
                    and occupant.color == king.color
                    and not occupant.has_moved
                ):
                    rook_distance = step
                break

            if rook_distance is None or rook_distance < _MIN_CASTLING_ROOK_DISTANCE:
                continue
            if any(
                self._king_threatened_on(king_sq, king_sq + offset * step, king)
                for step in (1, 2)
            ):
                continue
            moves.append(Move(king_sq, king_sq + 2 * offset, MoveFlag.CASTLING))

    def _king_threatened_on(self, from_sq: Square, to_sq: Square, king: Piece) -> bool:
        with self._board.simulate({from_sq: None, to_sq: king}):
            return self.is_square_threatened(to_sq, king.color)
