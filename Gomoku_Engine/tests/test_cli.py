"""Terminal front end driven with scripted input."""

import pytest

from Gomoku_Engine import main as main_mod
from Gomoku_Engine.utils.cli import parse_args


def _feed(monkeypatch, lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_parse_args_defaults():
    args = parse_args([])
    assert args.mode is None
    assert args.settings == "config/settings.yaml"
    args = parse_args(["--mode", "human-vs-ai", "--difficulty", "hard", "--seed", "4"])
    assert (args.mode, args.difficulty, args.seed) == ("human-vs-ai", "hard", 4)


def test_human_vs_human_game_to_the_end(monkeypatch, capsys):
    moves = ["0 0", "1 0", "0 1", "1 1", "0 2", "1 2", "0 3", "1 3", "0 4"]
    _feed(monkeypatch, moves + ["9 9", "quit"])
    main_mod.main(["--mode", "human-vs-human", "--board-size", "5"])
    out = capsys.readouterr().out
    assert "Game over: Black wins" in out
    assert "Game is over" in out


def test_invalid_input_is_reported_and_menu_asks_for_mode(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "oops", "2 2", "2 2", "menu", "1", "quit"])
    main_mod.main(["--board-size", "5"])
    out = capsys.readouterr().out
    assert "Invalid move: Invalid input format" in out
    assert "Invalid move: cell (2, 2) already occupied" in out
    assert "Reset: back to mode selection" in out


def test_eof_ends_quietly(monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    with pytest.raises(EOFError):
        main_mod.ask_mode()
