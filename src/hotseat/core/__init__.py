"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from hotseat.core import Board, Color, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.generate_legal_moves(Color.WHITE):
        print(move)
"""

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameResult, MoveFlag, PieceType
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.piece import Piece
from hotseat.core.rules import Rules
from hotseat.core.types import (
    Direction,
    Square,
    column_of,
    direction_offset,
    make_square,
    parse_square,
    row_of,
    square_at_pixel,
    square_name,
    square_origin,
    squares_to_edge,
)

__all__ = [
    # Enums / flags
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / geometry
    "Direction",
    "Square",
    "column_of",
    "direction_offset",
    "make_square",
    "parse_square",
    "row_of",
    "square_at_pixel",
    "square_name",
    "square_origin",
    "squares_to_edge",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
]
