"""Perft regression tests against published node counts.

Reference: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from arbiter.core.fen import STARTING_FEN, position_from_fen
from arbiter.core.perft import divide, perft
from arbiter.core.position import initial

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
POSITION_3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"
POSITION_4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"
POSITION_5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerftStart:
    def test_depth_zero(self) -> None:
        assert perft(initial(), 0) == 1

    def test_depth_1(self) -> None:
        assert perft(initial(), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(initial(), 2) == 400

    def test_depth_3(self) -> None:
        assert perft(position_from_fen(STARTING_FEN), 3) == 8_902

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError):
            perft(initial(), -1)


class TestPerftKnownPositions:
    @pytest.mark.parametrize(
        ("fen", "depth", "expected"),
        [
            (KIWIPETE, 1, 48),
            (KIWIPETE, 2, 2_039),
            (POSITION_3, 1, 14),
            (POSITION_3, 2, 191),
            (POSITION_3, 3, 2_812),
            (POSITION_4, 1, 6),
            (POSITION_4, 2, 264),
            (POSITION_5, 1, 44),
            (POSITION_5, 2, 1_486),
        ],
    )
    def test_node_counts(self, fen: str, depth: int, expected: int) -> None:
        assert perft(position_from_fen(fen), depth) == expected

    @pytest.mark.slow
    @pytest.mark.parametrize(
        ("fen", "depth", "expected"),
        [
            (KIWIPETE, 3, 97_862),
            (POSITION_4, 3, 9_467),
            (POSITION_5, 3, 62_379),
            (STARTING_FEN, 4, 197_281),
        ],
    )
    def test_deep_node_counts(self, fen: str, depth: int, expected: int) -> None:
        assert perft(position_from_fen(fen), depth) == expected


class TestDivide:
    def test_start_depth_2(self) -> None:
        counts = divide(initial(), 2)
        assert len(counts) == 20
        assert all(nodes == 20 for nodes in counts.values())
        assert sum(counts.values()) == 400

    def test_keys_are_move_text(self) -> None:
        counts = divide(initial(), 1)
        assert "e2e4" in counts
        assert "g1f3" in counts
        assert counts["e2e4"] == 1

    def test_sums_to_perft(self) -> None:
        pos = position_from_fen(POSITION_3)
        assert sum(divide(pos, 3).values()) == perft(pos, 3)

    def test_depth_zero_rejected(self) -> None:
        with pytest.raises(ValueError):
            divide(initial(), 0)
