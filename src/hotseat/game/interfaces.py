"""Abstract interfaces for the game layer.

The presentation layer talks to the game only through
:class:`IGameController`: it selects pieces, attempts moves and reads
square contents for rendering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hotseat.core.move import Move
    from hotseat.core.piece import Piece
    from hotseat.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game.

    ``CHECK`` is a sub-state of an ongoing game; ``CHECKMATE`` and
    ``STALEMATE`` are terminal.
    """

    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.CHECKMATE, GamePhase.STALEMATE)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the starting position with White to move."""

    @abstractmethod
    def select_piece(self, sq: Square) -> list[Move]:
        """Legal moves starting on *sq* (empty if none or not that side's turn)."""

    @abstractmethod
    def attempt_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play the legal move *from_sq* → *to_sq*. Returns True if applied."""

    @abstractmethod
    def get_square(self, sq: Square) -> Piece | None:
        """Read-only access to a square for rendering."""
