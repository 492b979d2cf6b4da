import io
import os
import sys
import termios
from unittest.mock import patch

import pytest

from chainreact.board import Board
from chainreact.cli import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    clear_screen,
    dispatch_key,
    main,
    raw_mode,
)
from chainreact.display import CLEAR


@pytest.fixture
def game():
    board = Board(5, 5, 2)
    return board, board.cursor


def test_movement_keys_wrap(game):
    board, cursor = game
    assert dispatch_key("a", board, cursor) is True
    assert cursor.position() == (4, 0)
    dispatch_key("w", board, cursor)
    assert cursor.position() == (4, 4)
    dispatch_key("d", board, cursor)
    assert cursor.position() == (0, 4)
    dispatch_key("s", board, cursor)
    assert cursor.position() == (0, 0)


def test_enter_places_orb_and_switches_player(game):
    board, cursor = game
    dispatch_key("d", board, cursor)
    assert dispatch_key("\n", board, cursor) is True
    assert board.levels()[0][1] == 1
    assert board.colors()[0][1] == board.players[0].color
    assert board.current_player() is board.players[1]


def test_enter_on_opponent_cell_keeps_turn(game):
    board, cursor = game
    dispatch_key("\n", board, cursor)
    dispatch_key("\n", board, cursor)
    assert board.levels()[0][0] == 1
    assert board.current_player() is board.players[1]


def test_quit_key_returns_false(game):
    board, cursor = game
    assert dispatch_key("q", board, cursor) is False


def test_unknown_key_changes_nothing(game):
    board, cursor = game
    before = board.levels()
    assert dispatch_key("z", board, cursor) is True
    assert cursor.position() == (0, 0)
    assert board.levels() == before


def test_clear_key_clears_screen(game):
    board, cursor = game
    with patch("chainreact.cli.subprocess.run") as run:
        assert dispatch_key("c", board, cursor) is True
    run.assert_called_once_with(["clear"], check=False)


def test_clear_screen_runs_clear_command(capsys):
    with patch("chainreact.cli.subprocess.run") as run:
        clear_screen()
    run.assert_called_once_with(["clear"], check=False)
    assert run.call_args.args[0] == ["clear"]
    assert capsys.readouterr().out == ""


def test_clear_screen_falls_back_to_escape(capsys):
    with patch("chainreact.cli.subprocess.run", side_effect=FileNotFoundError):
        clear_screen()
    assert capsys.readouterr().out == CLEAR


def test_raw_mode_on_terminal_restores_settings(capsys):
    master, slave = os.openpty()
    try:
        before = termios.tcgetattr(slave)
        with raw_mode(slave):
            inside = termios.tcgetattr(slave)
            assert inside[3] & termios.ICANON == 0
            assert inside[3] & termios.ECHO == 0
        assert termios.tcgetattr(slave) == before
    finally:
        os.close(master)
        os.close(slave)
    assert capsys.readouterr().out == HIDE_CURSOR + SHOW_CURSOR


def test_raw_mode_without_terminal_restores_on_error(capsys):
    with pytest.raises(KeyError):
        with raw_mode(None):
            raise KeyError("boom")
    assert capsys.readouterr().out == HIDE_CURSOR + SHOW_CURSOR


def test_main_plays_and_quits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5 6 3\n \nq"))
    with patch("chainreact.cli.subprocess.run"):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "Rows: 5\nColumns: 6\nPlayers: 3\n" in out
    assert "Player 3 (Green) initialized." in out
    assert out.index("Exiting game.") < out.index("Game ended.\nThank you for playing!\n")


def test_main_bad_settings_use_defaults(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 2\n q"))
    with patch("chainreact.cli.subprocess.run"):
        assert main([]) == 0
    captured = capsys.readouterr()
    assert "Rows: 5\nColumns: 5\nPlayers: 2\n" in captured.out
    assert "Invalid input" in captured.err


def test_main_ends_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5 5 2\n"))
    with patch("chainreact.cli.subprocess.run"):
        assert main([]) == 0
    assert "Thank you for playing!" in capsys.readouterr().out