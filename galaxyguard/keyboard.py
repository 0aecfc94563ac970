"""Non-blocking, unechoed single-key input from a terminal."""

from __future__ import annotations

import os
import termios


class Keyboard:
    """Raw-mode keyboard on a terminal file descriptor with one key of look-ahead."""

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._initial: list | None = None
        self._raw: list | None = None
        self._peek: int | None = None

    def init(self) -> None:
        """Switch the terminal to non-canonical, unechoed mode without signals."""
        self._initial = termios.tcgetattr(self.fd)
        raw = termios.tcgetattr(self.fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        self._raw = raw
        termios.tcsetattr(self.fd, termios.TCSANOW, raw)

    def destroy(self) -> None:
        """Restore the terminal settings saved by init()."""
        if self._initial is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._initial)

    def _set_vmin(self, vmin: int) -> None:
        assert self._raw is not None
        self._raw[6][termios.VMIN] = vmin
        termios.tcsetattr(self.fd, termios.TCSANOW, self._raw)

    def keyhit(self) -> bool:
        """Return True if a key is waiting, without consuming it."""
        if self._peek is not None:
            return True
        if self._raw is None:
            raise RuntimeError("keyboard is not initialised")
        self._set_vmin(0)
        try:
            data = os.read(self.fd, 1)
        finally:
            self._set_vmin(1)
        if data:
            self._peek = data[0]
            return True
        return False

    def readch(self) -> int:
        """Return the next key as a byte value, waiting for one if needed."""
        if self._peek is not None:
            ch, self._peek = self._peek, None
            return ch
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("end of keyboard input")
        return data[0]

    def __enter__(self) -> Keyboard:
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()