import io
import random
import sys

import pytest

from undercover.app import AppState, Application, main
from undercover.game import GameState
from undercover.player import Role

PAIRS = [("Apple", "Pear")]


def make_app(seed=0):
    return Application(PAIRS, random.Random(seed))


def test_starts_in_menu():
    app = make_app()
    assert app.state is AppState.MENU
    assert app.render().startswith("Young New Undercover")


def test_start_game_uses_menu_setup():
    app = make_app()
    app.handle("add")
    app.handle("name Dana")
    app.start_game()
    assert app.state is AppState.GAME
    assert app.game.player_names() == ["Player1", "Player2", "Player3", "Dana"]
    assert app.game.words == {Role.CITIZEN: "Apple", Role.UNDERCOVER: "Pear"}


def test_start_game_rejects_empty_name():
    app = make_app()
    app.handle("name")
    with pytest.raises(ValueError, match="empty"):
        app.start_game()


def test_back_to_menu_keeps_names():
    app = make_app()
    app.handle("add")
    app.handle("ok")
    app.back_to_menu()
    assert app.state is AppState.MENU
    assert app.menu.names == ["Player1", "Player2", "Player3", "New Player"]
    assert app.menu.citizen == len(app.menu.names) - 1
    assert app.menu.undercover == 1


def test_menu_commands():
    app = make_app()
    app.handle("add")
    app.handle("+")
    assert (app.menu.citizen, app.menu.undercover) == (2, 2)
    app.handle("-")
    app.handle("white on")
    assert app.menu.white is True
    app.handle("edit 1")
    app.handle("name Ann")
    assert app.menu.names[0] == "Ann"
    app.handle("remove 4")
    assert len(app.menu.names) == 3


def test_unknown_command_raises():
    app = make_app()
    with pytest.raises(ValueError):
        app.handle("dance")


def test_bad_player_number_raises():
    app = make_app()
    with pytest.raises(ValueError):
        app.handle("edit 9")


def test_quit_returns_false():
    assert make_app().handle("quit") is False


def test_full_round_reaches_end_and_menu():
    app = make_app()
    app.handle("ok")
    game = app.game
    for _ in game.players:
        app.handle("reveal")
        app.handle("next")
    assert game.state is GameState.POLL
    with pytest.raises(ValueError):
        app.handle("reveal")
    app.handle("vote 1")
    app.handle("yes")
    assert game.over is True
    assert "menu" in app.render()
    app.handle("menu")
    assert app.state is AppState.MENU


def test_main_quits_cleanly(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words.txt"
    words.write_text("Apple:Pear\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("bogus\nquit\n"))
    assert main(["--words", str(words), "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Young New Undercover" in out
    assert "error:" in out


def test_main_missing_word_file(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "absent.txt")]) == 1
    assert "error:" in capsys.readouterr().err