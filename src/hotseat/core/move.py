"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from hotseat.core.enums import MoveFlag
from hotseat.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable candidate move.

    A move is only a description; it is not known to be safe for the
    mover's king until it survives the legality filter.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    @property
    def is_castling(self) -> bool:
        return self.flag == MoveFlag.CASTLING

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    @property
    def is_double_movement(self) -> bool:
        return self.flag == MoveFlag.DOUBLE_PAWN

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
