# chainreact

A chain-reaction board game played in the terminal by two to six players
sharing one keyboard.

Players take turns placing orbs on a grid. A cell explodes once it holds as
many orbs as it has neighbours: corner cells at 2, edge cells at 3 and inner
cells at 4. An exploding cell empties and throws one orb into each
neighbour, which then belongs to the player who caused the explosion. Those
neighbours may explode in turn, so one move can set off a chain reaction.

Once every player has moved at least once, a player who owns no cells is
listed as eliminated. When only one player still owns cells, the game is
marked as over.

## Installing

```
pip install .
```

The game needs a POSIX terminal: it switches the terminal out of line mode
to read single keypresses, and clears the screen with the `clear` command
(falling back to an escape sequence if `clear` is not available).

## Playing

```
chainreact
```

You are first asked for the settings on one line:

```
rows cols players
```

separated by spaces. Rows and columns must each be greater than 4, and there
must be between 2 and 6 players. If the line does not hold exactly three
numbers, or a value is out of range, the reason is printed and a 5 × 5 board
with 2 players is used instead.

Players are given colours in order: Red, Blue, Green, Yellow, Cyan, Magenta.
After the settings are shown, press any key to start.

### Keys

| Key   | Action                                      |
|-------|---------------------------------------------|
| `w`   | move the cursor up (wraps around)           |
| `s`   | move the cursor down (wraps around)         |
| `a`   | move the cursor left (wraps around)         |
| `d`   | move the cursor right (wraps around)        |
| Enter | place an orb in the cell under the cursor   |
| `c`   | clear the screen                            |
| `q`   | quit                                        |

Other keys are ignored. A player may only place an orb in an empty cell or
one they already own; after a successful move the turn passes to the next
player.

The screen is redrawn every tenth of a second. Explosions are resolved by a
background worker, and each step of a chain reaction is queued as a frame
and shown in order before the live board is drawn again.

## Using the pieces

The game logic can be used without the terminal front end:

- `chainreact.settings`: `GameSettings`, `parse_settings(text)` (raises
  `SettingsError` on bad input) and `prompt_settings(...)`.
- `chainreact.board`: `Board(rows, cols, players)` with `cells`,
  `current_player()`, `switch_player()`, `colors()`, `levels()`,
  `end_check()`, `snapshot()` and `render(x, y)`; `Cell.select(player)`
  places an orb.
- `chainreact.cursor`: `Cursor(rows, cols)`, a wrapping, thread-safe cursor.
- `chainreact.explosions`: `ExplosionQueue` and `ExplosionProcessor`, which
  resolves queued explosions on a background thread (or one at a time with
  `process_once()`).
- `chainreact.frames`: `GameFrame`, `FrameQueue` and
  `render_frame(frame, rows, cols)`.
- `chainreact.display`: `DisplayThread`, with `draw_once()` for a single
  redraw.
- `chainreact.cli`: `main()`, `dispatch_key(key, board, cursor)` and the
  `raw_mode(fd)` context manager.

## What it does not do

The game does not stop by itself when it is over; press `q` to leave. There
is no computer opponent, no network play, and games cannot be saved or
resumed.

## Running the tests

```
pip install .[test]
pytest
```