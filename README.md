# solong

A small tile-based 2D game. You walk a hero through a walled map, pick up
every treasure, stay away from the skeletons and leave through the exit.
The window is drawn with pygame and the sprites are read from XPM files.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Playing

    solong path/to/level.ber

The map file name must have the `.ber` extension. Controls:

- arrow keys or `W` `A` `S` `D` move the hero;
- `Esc` or closing the window quits.

Walls block a step. Walking onto a treasure picks it up. Walking onto a
skeleton loses the game; reaching the exit after collecting every treasure
wins it. A step counter is shown in the top-left corner, and the hero and
the skeletons play a two-frame idle animation.

When the game ends a message is printed: `YOU WIN !`, `YOU LOOSE !`, or a
taunt if you quit. The command exits with status 0 after a game and 1 on
an error, in which case it prints `Error` on standard output and the
reason on standard error.

### Textures

The sprites are loaded from the directory `srcs/textures`, relative to the
directory the command is run from. It must hold these XPM files:
`wall.xpm`, `floor.xpm`, `tresure.xpm`, `exit.xpm`, `play_left_1.xpm`,
`play_left_2.xpm`, `play_right_1.xpm`, `play_right_2.xpm`, `skeleton.xpm`
and `skeleton2.xpm`. Tiles are 42 by 42 pixels. If any of them cannot be
read, the game stops with `Textures loading error !`.

## Map format

A map is a text file of equal-length lines, each ending with a newline
(the last one included), using these characters:

| Char | Meaning  |
|------|----------|
| `1`  | wall     |
| `0`  | floor    |
| `P`  | player   |
| `C`  | treasure |
| `E`  | exit     |
| `F`  | skeleton |

A valid map is rectangular, fully surrounded by walls, holds exactly one
`P`, exactly one `E` and at least one `C`, contains no other characters,
and every treasure and the exit must be reachable from the start without
walking through walls or skeletons. For example:

    1111111
    1P0C0E1
    1000F01
    1111111

## Using it as a library

- `solong.mapfile.load_map(path)` checks the file name, reads the file and
  returns a `GameMap`; `solong.mapfile.validate(lines)` checks raw lines.
  Both raise `solong.mapfile.MapError` with the first problem found.
- `solong.game.Game(game_map)` holds a game in progress. `move(dy, dx)`,
  `handle_key(keycode)`, `tick()` and `sprite_at(x, y)` drive it without
  any window; `outcome` is an `Outcome` (`PLAYING`, `WON`, `LOST`, `QUIT`).
- `solong.xpm.load_xpm(path)` and `solong.xpm.parse_xpm_text(text)` read an
  XPM picture into a `solong.image.Image`, raising `solong.xpm.XpmError`.
- `solong.image.Image` is a 32-bit pixel buffer with `put_pixel`,
  `get_pixel`, `blit` and `to_rgb_bytes`.
- `solong.colors.lookup_color(name)` gives the RGB value of an X11 colour
  name; `solong.colors.parse_color(name, extra)` resolves an XPM colour
  spec.
- `solong.formatting.format_message(fmt, *args)` expands the `%c %s %p %x
  %X %d %i %u %%` conversions.

## What it does not do

The package ships no sprites and no maps: the texture files described
above and the `.ber` levels must be supplied separately.