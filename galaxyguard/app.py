"""Menus, name entry, ranking view and the main game loop."""

from __future__ import annotations

import argparse
import random
import time
from typing import Callable

from galaxyguard.game import HEIGHT, WIDTH, Game, Outcome
from galaxyguard.keyboard import Keyboard
from galaxyguard.scores import read_score_lines, save_score
from galaxyguard.screen import Color, Screen

MENU_ITEMS = ("BEM VINDO AO GALAXY GUARD!", "1. Jogar", "2. Ver Pontuacoes", "3. Sair")
NAME_PROMPT = "Digite seu nome: "
BACK_PROMPT = "Pressione qualquer tecla para voltar ao menu"
RANKING_BACK = "1. Voltar ao Menu"
RANKING_ERROR = "Erro ao abrir o arquivo de scores."
SAVE_ERROR = "Erro ao abrir o arquivo para salvar o score."

NAME_MAX = 19
BACKSPACE = 127
FRAME_DELAY = 0.06
MENU_DELAY = 0.3
RANKING_DELAY = 0.4
WAIT_DELAY = 0.1


class App:
    """Drives the terminal game: menu, name entry, rounds and score keeping."""

    def __init__(
        self,
        screen: Screen | None = None,
        keyboard: Keyboard | None = None,
        scores_path: str = "scores.txt",
        rng: random.Random | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.screen = screen if screen is not None else Screen()
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.scores_path = scores_path
        self.sleep = sleep if sleep is not None else time.sleep
        self.game = Game(rng)
        self.player_name = ""

    def _centered(self, y: int, text: str) -> int:
        x = (WIDTH - len(text)) // 2
        self.screen.put_text(x, y, text)
        return x

    def _wait_for_key(self) -> None:
        while not self.keyboard.keyhit():
            self.sleep(WAIT_DELAY)
        self.keyboard.readch()

    def menu(self) -> bool:
        """Show the main menu; True to start a round, False to quit."""
        while True:
            self.screen.clear()
            self.screen.init(True)
            self.screen.set_color(Color.GREEN, Color.BLACK)
            start_y = HEIGHT // 2 - len(MENU_ITEMS)
            for row, item in enumerate(MENU_ITEMS):
                self._centered(start_y + row, item)
                self.screen.update()
            self.sleep(MENU_DELAY)
            self.screen.update()
            if self.keyboard.keyhit():
                ch = self.keyboard.readch()
                if ch == ord("1"):
                    return True
                if ch == ord("2"):
                    self.show_ranking()
                elif ch == ord("3"):
                    return False

    def ask_player_name(self) -> str:
        """Read the player's name, echoing it; Enter ends, DEL erases."""
        y = HEIGHT // 2
        x = self._centered(y, NAME_PROMPT) + len(NAME_PROMPT)
        self.screen.update()

        chars: list[str] = []
        while True:
            ch = self.keyboard.readch()
            if ch in (ord("\n"), ord("\r")):
                break
            if ch == BACKSPACE:
                if chars:
                    chars.pop()
                    self.screen.put_char(x + len(chars), y, " ")
                    self.screen.update()
            elif len(chars) < NAME_MAX:
                chars.append(chr(ch))
                self.screen.put_char(x + len(chars) - 1, y, chr(ch))
                self.screen.update()
        self.player_name = "".join(chars)
        return self.player_name

    def show_ranking(self) -> None:
        """Show the score file until '1' is pressed."""
        while True:
            self.screen.clear()
            self.screen.init(True)
            self.screen.set_color(Color.GREEN, Color.BLACK)
            try:
                rows = read_score_lines(self.scores_path)
            except OSError:
                self.screen.put_text(2, 2, RANKING_ERROR)
            else:
                for y, row in enumerate(rows, start=2):
                    self.screen.put_text(2, y, row)
            self._centered(HEIGHT - 2, RANKING_BACK)
            self.screen.update()
            self.sleep(RANKING_DELAY)
            if self.keyboard.keyhit() and self.keyboard.readch() == ord("1"):
                return

    def _show_end(self, message: str, color: Color) -> None:
        self.screen.init(True)
        y = HEIGHT // 2
        self.screen.set_color(color, Color.BLACK)
        self._centered(y, message)
        self.screen.set_color(Color.YELLOW, Color.BLACK)
        self._centered(y + 2, BACK_PROMPT)
        self.screen.update()
        self._wait_for_key()

    def show_game_over(self) -> None:
        """Show the defeat message and wait for a key."""
        self._show_end("GAME-OVER", Color.RED)

    def show_victory(self) -> None:
        """Show the victory message and wait for a key."""
        self._show_end("VOCE VENCEU!", Color.GREEN)

    def _save_score(self) -> None:
        try:
            save_score(self.scores_path, self.player_name, self.game.score)
        except OSError:
            self.screen.stream.write(SAVE_ERROR + "\n")

    def play(self) -> Outcome:
        """Play one round to its end, show the result and record the score."""
        self.game.reset()
        while True:
            self.game.draw(self.screen)
            outcome = self.game.step()
            if outcome is not Outcome.PLAYING:
                self.screen.clear()
                if outcome is Outcome.LOST:
                    self.show_game_over()
                else:
                    self.show_victory()
                self._save_score()
                return outcome
            if self.keyboard.keyhit():
                self.game.handle_key(self.keyboard.readch())
            self.sleep(FRAME_DELAY)

    def _finish(self) -> None:
        self.keyboard.destroy()
        self.screen.destroy()

    def run(self) -> int:
        """Run menus and rounds until the player quits; returns the exit status."""
        self.screen.init(True)
        self.keyboard.init()
        try:
            while self.menu():
                self.ask_player_name()
                self.play()
        finally:
            self._finish()
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="galaxyguard", description="Terminal space shooter.")
    parser.add_argument("--scores", default="scores.txt", help="score file to append to")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    app = App(Screen(), Keyboard(), args.scores, random.Random(args.seed), time.sleep)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())