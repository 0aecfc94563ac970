import io
from collections import deque

from galaxyguard.app import SAVE_ERROR, App
from galaxyguard.game import Outcome
from galaxyguard.scores import read_score_lines
from galaxyguard.screen import Screen


class FakeKeyboard:
    def __init__(self, keys=b"", filler=ord("x")):
        self.keys = deque(keys)
        self.filler = filler
        self.initialised = False
        self.destroyed = False

    def init(self):
        self.initialised = True

    def destroy(self):
        self.destroyed = True

    def keyhit(self):
        return True

    def readch(self):
        return self.keys.popleft() if self.keys else self.filler


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


def make_app(keys=b"", scores_path="scores.txt", rng=None):
    out = io.StringIO()
    keyboard = FakeKeyboard(keys)
    app = App(Screen(out), keyboard, str(scores_path), rng or FixedRng(99), lambda s: None)
    return app, keyboard, out


def test_ask_player_name():
    app, _, _ = make_app(b"bob\r")
    assert app.ask_player_name() == "bob"
    assert app.player_name == "bob"


def test_ask_player_name_backspace():
    app, _, _ = make_app(b"box\x7fb\n")
    assert app.ask_player_name() == "bob"


def test_ask_player_name_length_limit():
    app, _, _ = make_app(b"a" * 25 + b"\n")
    assert app.ask_player_name() == "a" * 19


def test_menu_play_and_quit():
    app, _, _ = make_app(b"1")
    assert app.menu() is True
    app, _, _ = make_app(b"3")
    assert app.menu() is False


def test_menu_ranking_then_play(tmp_path):
    app, keyboard, _ = make_app(b"211", tmp_path / "none.txt")
    assert app.menu() is True
    assert not keyboard.keys


def test_ranking_waits_for_one(tmp_path):
    app, keyboard, _ = make_app(b"x1z", tmp_path / "none.txt")
    app.show_ranking()
    assert list(keyboard.keys) == [ord("z")]


def test_victory_consumes_one_key():
    app, keyboard, _ = make_app(b"kz")
    app.show_victory()
    assert list(keyboard.keys) == [ord("z")]


def test_play_until_hit_saves_score(tmp_path):
    path = tmp_path / "scores.txt"
    app, _, _ = make_app(b"a" * 29, path, FixedRng(0))
    app.player_name = "ana"
    assert app.play() is Outcome.LOST
    assert read_score_lines(path) == ["Player: ana, Score: 0"]


def test_play_reports_save_error(tmp_path):
    app, _, out = make_app(b"a" * 29, tmp_path, FixedRng(0))
    assert app.play() is Outcome.LOST
    assert SAVE_ERROR in out.getvalue()


def test_run_quits_and_restores_terminal():
    app, keyboard, out = make_app(b"3")
    assert app.run() == 0
    assert keyboard.initialised and keyboard.destroyed
    assert out.getvalue().endswith("\033[?25h")