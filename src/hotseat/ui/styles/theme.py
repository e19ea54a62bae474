"""Visual theme constants for the board."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selection: QColor  # selected piece and its legal targets
    highlight_check: QColor  # king in check
    highlight_mate: QColor  # king checkmated
    last_move: QColor  # last move origin and destination
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(247, 226, 205),
            dark_square=QColor(133, 104, 76),
            highlight_selection=QColor(1, 97, 30, 80),  # green transparent
            highlight_check=QColor(117, 122, 45),  # olive
            highlight_mate=QColor(199, 34, 34),  # red
            last_move=QColor(155, 199, 0, 105),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selection=QColor(1, 97, 30, 80),
            highlight_check=QColor(117, 122, 45),
            highlight_mate=QColor(199, 34, 34),
            last_move=QColor(155, 199, 0, 105),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        try:
            factory = BOARD_THEMES[name]
        except KeyError:
            raise ValueError(f"Unknown board theme: {name!r}") from None
        return factory()


BOARD_THEMES: dict[str, Callable[[], BoardTheme]] = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
}
