"""Tests for GameRecord: play, undo, replay and off-board endings."""

import pytest

from arbiter.core.enums import Color, EndReason, GameResult
from arbiter.core.errors import GameOverError, IllegalMoveError
from arbiter.core.fen import position_from_fen
from arbiter.core.move import Move
from arbiter.core.options import RulesOptions
from arbiter.core.position import initial, parse_move
from arbiter.core.types import E2, E4, E5, parse_square
from arbiter.game import GameRecord


def _play(record: GameRecord, *moves: str) -> None:
    for text in moves:
        record.play(parse_move(record.current, text))


class TestPlay:
    def test_starts_at_initial(self) -> None:
        record = GameRecord()
        assert record.current == initial()
        assert record.ply_count == 0
        assert record.moves == []
        assert record.result == GameResult.ONGOING

    def test_play_appends_snapshot(self) -> None:
        record = GameRecord()
        pos = record.play(Move(E2, E4))
        assert record.current is pos
        assert record.ply_count == 1
        assert record.moves == [Move(E2, E4)]

    def test_illegal_move_leaves_record_unchanged(self) -> None:
        record = GameRecord()
        with pytest.raises(IllegalMoveError):
            record.play(Move(E2, E5))
        assert record.ply_count == 0

    def test_custom_start(self) -> None:
        start = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        record = GameRecord(start=start)
        _play(record, "a1a7")
        assert record.snapshots[0] is start
        assert record.current.side_to_move == Color.BLACK

    def test_options_are_used(self) -> None:
        record = GameRecord(options=RulesOptions(repetition_threshold=2))
        _play(record, "g1f3", "g8f6", "f3g1", "f6g8")
        assert record.result == GameResult.DRAW
        assert record.current.end_reason == EndReason.THREEFOLD_REPETITION

    def test_fools_mate_ends_game(self) -> None:
        record = GameRecord()
        _play(record, "f2f3", "e7e5", "g2g4", "d8h4")
        assert record.result == GameResult.BLACK_WINS
        with pytest.raises(GameOverError):
            record.play(Move(E2, E4))


class TestUndo:
    def test_undo_restores_previous(self) -> None:
        record = GameRecord()
        before = record.current
        undone = record.play(Move(E2, E4))
        assert record.undo() is undone
        assert record.current is before

    def test_undo_at_start_returns_none(self) -> None:
        record = GameRecord()
        assert record.undo() is None
        assert record.ply_count == 0

    def test_undo_out_of_checkmate(self) -> None:
        record = GameRecord()
        _play(record, "f2f3", "e7e5", "g2g4", "d8h4")
        record.undo()
        assert record.result == GameResult.ONGOING
        assert record.current.side_to_move == Color.BLACK


class TestOffBoardEndings:
    def test_resign(self) -> None:
        record = GameRecord()
        _play(record, "e2e4")
        pos = record.resign(Color.BLACK)
        assert pos.result == GameResult.WHITE_WINS
        assert pos.end_reason == EndReason.RESIGNATION
        assert record.ply_count == 1

    def test_undo_resignation(self) -> None:
        record = GameRecord()
        _play(record, "e2e4")
        before = record.current
        record.resign(Color.WHITE)
        record.undo()
        assert record.current is before
        assert record.result == GameResult.ONGOING
        record.undo()
        assert record.ply_count == 0

    def test_agree_draw(self) -> None:
        record = GameRecord()
        assert record.agree_draw().end_reason == EndReason.AGREEMENT
        assert record.result == GameResult.DRAW

    def test_lose_on_time(self) -> None:
        record = GameRecord()
        pos = record.lose_on_time(Color.WHITE)
        assert pos.result == GameResult.BLACK_WINS
        assert pos.end_reason == EndReason.TIME_OUT

    def test_no_moves_after_ending(self) -> None:
        record = GameRecord()
        record.agree_draw()
        with pytest.raises(GameOverError):
            record.play(Move(E2, E4))

    def test_undo_after_ply_following_ending(self) -> None:
        record = GameRecord(options=RulesOptions(validate_moves=False))
        _play(record, "e2e4")
        resigned = record.resign(Color.BLACK)
        record.play(Move(parse_square("e7"), parse_square("e5")))
        record.undo()
        assert record.ply_count == 1
        assert record.current is resigned
        assert record.moves == [Move(E2, E4)]


class TestReplay:
    def test_replay_matches_current(self) -> None:
        record = GameRecord()
        _play(record, "e2e4", "e7e5", "g1f3", "b8c6", "f1b5")
        assert record.replay() == record.current

    def test_replay_after_undo(self) -> None:
        record = GameRecord()
        _play(record, "d2d4", "d7d5", "c2c4")
        record.undo()
        assert record.replay() == record.current
        assert record.replay().board[E4] is None

    def test_replay_ignores_off_board_ending(self) -> None:
        record = GameRecord()
        _play(record, "e2e4")
        record.resign(Color.BLACK)
        replayed = record.replay()
        assert replayed.result == GameResult.ONGOING
        assert replayed.board == record.current.board
