"""The score file: one line per finished round, appended."""

from __future__ import annotations

import os

# Rows longer than this are split, as a fixed-size line buffer would read them.
LINE_CHUNK = 99


def format_score_line(name: str, score: int) -> str:
    """Return the line recorded for a player's score."""
    return f"Player: {name}, Score: {score}\n"


def save_score(path: str | os.PathLike, name: str, score: int) -> None:
    """Append a score line to the file; raises OSError if it cannot be opened."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_score_line(name, score))


def read_score_lines(path: str | os.PathLike) -> list[str]:
    """Return the file's rows without line endings, long lines split into chunks."""
    rows: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            while line:
                chunk, line = line[:LINE_CHUNK], line[LINE_CHUNK:]
                rows.append(chunk.removesuffix("\n"))
    return rows