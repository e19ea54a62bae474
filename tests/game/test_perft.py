"""Perft tests — leaf counts of the legal-move tree from the starting position.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from hotseat.game.state import GameState


def perft(state: GameState, depth: int) -> int:
    """Count leaf nodes at *depth* by playing moves on copies."""
    if depth == 0:
        return 1
    if depth == 1:
        return len(state.legal_moves)
    nodes = 0
    for move in state.legal_moves:
        child = state.copy()
        child.apply_move(move)
        nodes += perft(child, depth - 1)
    return nodes


class TestPerftStarting:
    def test_depth_1(self) -> None:
        gs = GameState()
        gs.setup()
        assert perft(gs, 1) == 20

    def test_depth_2(self) -> None:
        gs = GameState()
        gs.setup()
        assert perft(gs, 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        gs = GameState()
        gs.setup()
        assert perft(gs, 3) == 8_902
