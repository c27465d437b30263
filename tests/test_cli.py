"""Tests for the command-line front end."""

import json

import pytest

from territory.cli import main

PIN_POSITION = "4k3/8/8/8/4n3/8/8/4R2K w - - 0 1"
KING_NEAR_ROOK = "3r3k/8/8/8/8/8/8/4K3 w - - 0 1"
STARTING = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep a stray .env.territory out of the way
    for name in ("TERRITORY_LOG_LEVEL", "TERRITORY_JSON_INDENT", "TERRITORY_INCLUDE_PINS"):
        monkeypatch.delenv(name, raising=False)


def run(capsys, *argv):
    main(list(argv))
    return json.loads(capsys.readouterr().out)


class TestAnalyzeCommand:
    def test_analyze(self, capsys):
        data = run(capsys, "analyze", PIN_POSITION)
        assert data["attacked_pieces"] == {"e4": "white"}
        assert data["pins"] == [{"pinned": "e4", "pinner": "e1"}]

    def test_no_pins_flag(self, capsys):
        data = run(capsys, "analyze", PIN_POSITION, "--no-pins")
        assert "pins" not in data

    def test_pins_disabled_by_setting(self, capsys, monkeypatch):
        monkeypatch.setenv("TERRITORY_INCLUDE_PINS", "false")
        data = run(capsys, "analyze", PIN_POSITION)
        assert "pins" not in data


class TestMovesCommand:
    def test_pseudo_legal(self, capsys):
        data = run(capsys, "moves", KING_NEAR_ROOK, "e1")
        assert data == {"square": "e1", "moves": ["e1e2", "e1f1", "e1d1", "e1f2", "e1d2"]}

    def test_legal(self, capsys):
        data = run(capsys, "moves", KING_NEAR_ROOK, "e1", "--legal")
        assert data["moves"] == ["e1e2", "e1f1", "e1f2"]


class TestCheckCommand:
    def test_illegal(self, capsys):
        data = run(capsys, "check", KING_NEAR_ROOK, "e1d1")
        assert data == {"move": "e1d1", "legal": False, "reason": "king_exposed"}

    def test_legal(self, capsys):
        data = run(capsys, "check", STARTING, "g1f3")
        assert data["legal"] is True

    def test_promotion_suffix_on_king_move(self, capsys):
        data = run(capsys, "check", "7k/8/8/8/8/8/8/4K3 w - - 0 1", "e1d1q")
        assert data == {"move": "e1d1q", "legal": True, "reason": "ok"}


class TestErrors:
    @pytest.mark.parametrize("argv", [
        ["analyze", "not a fen"],
        ["moves", STARTING, "e9"],
        ["check", STARTING, "e2"],
        ["check", "8/8/8/8/8/8/8/R7 w - - 0 1", "a1a2"],  # no white king
    ])
    def test_exit_code(self, capsys, argv):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err

    def test_invalid_setting_exits_cleanly(self, capsys, monkeypatch):
        monkeypatch.setenv("TERRITORY_LOG_LEVEL", "chatty")
        with pytest.raises(SystemExit) as exc:
            main(["analyze", PIN_POSITION])
        assert exc.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: invalid settings" in captured.err
