# galaxyguard

A small arcade shooter played in a POSIX terminal. Rows of enemies (`M`) shoot
back at your ship (`W`) while you try to clear the sky before you are hit.
The on-screen texts are in Portuguese.

## Installing

```
pip install .
```

The package has no dependencies beyond the standard library. It needs a
POSIX system (keyboard input uses `termios`).

## Playing

```
galaxyguard
```

Options:

- `--scores PATH` – the score file to append to and show (default
  `scores.txt` in the current directory).
- `--seed N` – seed for the random number generator that decides when
  enemies fire, for repeatable games.

The game needs an ANSI-capable terminal of at least 81 columns and 24 rows.

The menu has three choices:

- `1` starts a game; you are then asked for your name (Enter to confirm,
  Backspace/DEL to erase, up to 19 characters).
- `2` shows the score file line by line; press `1` to return to the menu.
  If the file cannot be opened, an error message is shown instead.
- `3` quits and restores the terminal.

In the game:

- `a` moves left, `d` moves right.
- Space fires. Only one of your shots can be in the air at a time.
- Each enemy destroyed is worth 10 points.
- Enemy shots move down once every three frames.

A game ends when an enemy shot reaches your ship ("GAME-OVER") or when every
enemy is gone ("VOCE VENCEU!"). Press any key to return to the menu. Either
way the result is appended to the score file as a line like:

```
Player: ana, Score: 120
```

The score is not reset between games in one session, so each line records
the running total up to that game.

## Using the pieces

The package's modules can be used on their own:

- `galaxyguard.screen.Screen` writes ANSI cursor, colour and DEC box-drawing
  sequences to any text stream (standard output by default): `gotoxy()`,
  `set_color()`, `put_char()`, `put_text()`, `clear()`, `init()`,
  `draw_borders()`, `destroy()` and the like. `galaxyguard.screen.Color`
  names the sixteen colours.
- `galaxyguard.keyboard.Keyboard` puts a terminal file descriptor into
  non-canonical, unechoed mode and offers `keyhit()` (is a key waiting?) and
  `readch()` (next key as a byte value); it works as a context manager.
- `galaxyguard.timer.Timer` is a millisecond countdown: `time_over()` is true
  once the delay has passed and then restarts; `reset()`, `elapsed_ms()` and
  `report()` are also offered. A clock function can be passed in for testing.
- `galaxyguard.game.Game` holds the game state (`player`, `enemies`,
  `player_shots`, `enemy_shots`, `score`); `step()` advances one frame and
  returns an `Outcome` (`PLAYING`, `LOST` or `WON`), `handle_key()` applies a
  key press, `reset()` starts a new round and `draw()` renders onto a `Screen`.
- `galaxyguard.scores` offers `save_score()`, `read_score_lines()` and
  `format_score_line()`.
- `galaxyguard.app.App` runs the menus and rounds; screen, keyboard, score
  path, random generator and sleep function can all be supplied.

## What it does not do

The score screen shows the file as it stands, in the order games were
played; scores are not sorted or ranked. The timer module is not used by the
game itself.

## Running the tests

```
pip install ".[test]"
pytest
```