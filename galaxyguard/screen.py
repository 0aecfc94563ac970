"""ANSI terminal output: cursor movement, colours and box-drawn borders."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\033"
NORMALTEXT = "[0m"
BOLDTEXT = "[1m"
ITALICTEXT = "[3m"
BLINKTEXT = "[5m"
REVERSETEXT = "[7m"
HOMECURSOR = "[f"
SHOWCURSOR = "[?25h"
HIDECURSOR = "[?25l"
CLEARSCREEN = "[2J"
RESETCOLORS = "[0;39;49m"

# DEC special graphics (line drawing) character set
BOX_ENABLE = "(0"
BOX_DISABLE = "(B"
BOX_VLINE = 0x78
BOX_HLINE = 0x71
BOX_UPLEFT = 0x6C
BOX_UPRIGHT = 0x6B
BOX_DWNLEFT = 0x6D
BOX_DWNRIGHT = 0x6A
BOX_CROSS = 0x6E
BOX_TLEFT = 0x74
BOX_TRIGHT = 0x75
BOX_TUP = 0x77
BOX_TDOWN = 0x76
BOX_DIAMOND = 0x60
BOX_BLOCK = 0x61
BOX_DOT = 0x7E

# Area the game may draw in
SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24


class Color(IntEnum):
    """Terminal colours; values above LIGHTGRAY are the bright variants."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


class Screen:
    """Writes ANSI control sequences to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _emit(self, code: str) -> None:
        self.stream.write(ESC + code)

    def home_cursor(self) -> None:
        self._emit(HOMECURSOR)

    def show_cursor(self) -> None:
        self._emit(SHOWCURSOR)

    def hide_cursor(self) -> None:
        self._emit(HIDECURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self._emit(CLEARSCREEN)

    def update(self) -> None:
        """Flush pending output to the terminal."""
        self.stream.flush()

    def set_normal(self) -> None:
        self._emit(NORMALTEXT)

    def set_bold(self) -> None:
        self._emit(BOLDTEXT)

    def set_blink(self) -> None:
        self._emit(BLINKTEXT)

    def set_reverse(self) -> None:
        self._emit(REVERSETEXT)

    def box_enable(self) -> None:
        self._emit(BOX_ENABLE)

    def box_disable(self) -> None:
        self._emit(BOX_DISABLE)

    def draw_borders(self) -> None:
        """Clear the screen and draw a box around the whole playing area."""
        hline = chr(BOX_HLINE)
        vline = chr(BOX_VLINE)

        self.clear()
        self.box_enable()

        self.put_char(MINX, MINY, chr(BOX_UPLEFT))
        for x in range(MINX + 1, MAXX):
            self.put_char(x, MINY, hline)
        self.put_char(MAXX, MINY, chr(BOX_UPRIGHT))

        for y in range(MINY + 1, MAXY):
            self.put_char(MINX, y, vline)
            self.put_char(MAXX, y, vline)

        self.put_char(MINX, MAXY, chr(BOX_DWNLEFT))
        for x in range(MINX + 1, MAXX):
            self.put_char(x, MAXY, hline)
        self.put_char(MAXX, MAXY, chr(BOX_DWNRIGHT))

        self.box_disable()

    def init(self, draw_borders: bool = True) -> None:
        """Clear the screen, optionally draw borders, home and hide the cursor."""
        self.clear()
        if draw_borders:
            self.draw_borders()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Restore colours and cursor and clear the screen."""
        self._emit(RESETCOLORS)
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def gotoxy(self, x: int, y: int) -> None:
        """Move the cursor to (x, y), clamped to the screen."""
        x = 0 if x < 0 else (MAXX - 1 if x >= MAXX else x)
        y = 0 if y < 0 else (MAXY if y > MAXY else y)
        self.stream.write(f"{ESC}{HOMECURSOR}{ESC}[{y}B{ESC}[{x}C")

    def set_color(self, fg: Color | int, bg: Color | int) -> None:
        """Set foreground and background colours."""
        fg = int(fg)
        bg = int(bg)
        attr = "[0;"
        if fg > Color.LIGHTGRAY:
            attr = "[1;"
            fg -= 8
        self.stream.write(f"{ESC}{attr}{fg + 30};{bg + 40}m")

    def put_char(self, x: int, y: int, ch: str) -> None:
        """Draw a single character at (x, y)."""
        self.gotoxy(x, y)
        self.stream.write(ch)

    def put_text(self, x: int, y: int, text: str) -> None:
        """Draw text starting at (x, y), one positioned character at a time."""
        for offset, ch in enumerate(text):
            self.put_char(x + offset, y, ch)