# ffge

Free Fighting Game Engine: a small skeleton for a two-player fighting game,
built on pygame. It has two keyboard-controlled players, four patrolling
enemies, a health bar for player 1 and an editor for dragging players and
enemies around the stage.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
ffge
```

This opens a 640×480 window titled "ffge - Free Fighting Game Engine" and
runs at up to 60 frames per second. Press Escape or close the window to quit.

Option:

- `--frames N` stops the game after N frames (N must be a positive integer).

The exit status is 0 on a normal exit and 1 if the engine or the video mode
could not be set up.

### Controls

| Action  | Player 1    | Player 2  |
|---------|-------------|-----------|
| Move    | Arrow keys  | W A S D   |
| Attack  | Z           | L         |

Each step moves a player 4 pixels. Whenever a player's position changes,
the position packed as `(x << 8) | y` is pushed onto the front of its
17-entry movement history (`Player.slot`), the oldest entry dropping off.

Enemies walk one pixel per frame and turn back once they pass x = 100 or
x = 400; even-numbered enemies set off to the right, odd ones to the left.

## Using it as a library

The game's pieces can be driven without a window:

```python
from ffge.player import create_players, update_players
from ffge.enemy import create_enemies, update_enemies
from ffge.editor import Editor

players = create_players()
enemies = create_enemies()
editor = Editor()

pressed = {"right", "d"}   # pygame key names held down this frame
update_players(players, pressed)
update_enemies(enemies)

editor.toggle()            # switch the editor on, in STAGE mode
editor.update(pressed, players, enemies)
print(editor.status_lines())   # ['EDITOR ATIVO [STAGE]']
```

### Editor

`Editor.toggle()` switches the editor on (in `EditorMode.STAGE`) or off,
clearing the selection. While it is active, `Editor.update()` reacts to:

- `tab`: cycle the mode through NONE, STAGE, PLAYER, ENEMY (then pauses
  150 ms to debounce);
- arrow keys: move the cursor 4 pixels;
- `return`: select player 1 in PLAYER mode, enemy 0 in ENEMY mode, nothing
  otherwise (also debounced).

The selected entity is moved to the cursor every frame.
`Editor.status_lines()` gives the text the renderer shows in the top-left
corner.

### Other modules

- `ffge.config`: module constants for the screen size, frame rate, limits,
  resource paths and key bindings; `Config` gathers them and
  `load_config()` returns the defaults.
- `ffge.input`: `KeyState`, `PlayerControls` and `InputManager` track, per
  frame, which of each player's twelve buttons were pressed, held or released.
- `ffge.utils`: `rand_range`, `clamp`, `get_time_ms` (processor time in ms),
  `delay` and `log` (prints a line prefixed with `[ffge]`).
- `ffge.graphics`: `Renderer` draws players, enemies, the health bar and the
  editor overlay, onto a given surface or its own window.
- `ffge.engine`: `Engine` starts pygame, keeps the millisecond clock and
  decides when the game should end.

## Limitations

- The `ffge` command has no key that switches the editor on; the editor is
  only reachable through `Editor.toggle()` when using the package as a library.
- Editor changes are not saved anywhere.
- No sprites, sounds, music or fonts are loaded from the asset paths in
  `ffge.config`; players and enemies are drawn as plain coloured shapes.
- Attacks only change the player's state for the frame; there is no
  collision, damage or win condition.