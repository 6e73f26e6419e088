"""Tests for the console entry point."""

import io

import pytest

from chessrules import app
from chessrules.core.enums import Color


class TestRun:
    def test_plays_a_move(self) -> None:
        out: list[str] = []
        ctrl = app.run(["b1", "c3"], out.append)
        assert "Destinations: a3 c3" in out
        assert "1. white Nb1-c3" in out
        assert ctrl.active_color == Color.BLACK

    def test_reports_rejections(self) -> None:
        out: list[str] = []
        app.run(["e4", "e7", "c1", "z9"], out.append)
        assert "No piece on that square." in out
        assert "That piece belongs to the other player." in out
        assert "That piece has no moves." in out
        assert "Not a square." in out

    def test_reports_check(self) -> None:
        out: list[str] = []
        moves = ["e2", "e4", "f7", "f6", "d1", "h5"]
        app.run(moves, out.append)
        assert "black king in check by white queen on h5" in out

    def test_quit_stops_input(self) -> None:
        out: list[str] = []
        ctrl = app.run(["", "quit", "e2", "e4"], out.append)
        assert ctrl.state.ply == 0

    def test_controller_reused_without_duplicate_output(self) -> None:
        first: list[str] = []
        ctrl = app.run(["e2", "e4"], first.append)
        second: list[str] = []
        app.run(["e7", "e5"], second.append, controller=ctrl)
        assert second.count("2. black Pe7-e5") == 1
        assert "2. black Pe7-e5" not in first
        assert ctrl.events.on_move == []
        assert ctrl.events.on_rejected == []


class TestMain:
    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("e2\ne4\nq\n"))
        assert app.main([]) == 0
        assert "1. white Pe2-e4" in capsys.readouterr().out
