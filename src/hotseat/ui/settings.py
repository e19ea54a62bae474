"""User-configurable presentation settings."""

from __future__ import annotations

from dataclasses import dataclass

from hotseat.core.types import SQUARE_PIXEL_SIZE


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    square_size: int = SQUARE_PIXEL_SIZE
    show_legal_moves: bool = True
    highlight_last_move: bool = True
