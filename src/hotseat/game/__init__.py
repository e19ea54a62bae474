"""Game management layer — controller and state machine.

Quick start::

    from hotseat.game import GameController
    from hotseat.core.types import E2, E4

    ctrl = GameController()
    ctrl.select_piece(E2)        # legal moves of the e2 pawn
    ctrl.attempt_move(E2, E4)    # True, Black to move
"""

from hotseat.game.controller import GameController, GameEvents
from hotseat.game.interfaces import GamePhase, IGameController
from hotseat.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
