# sidescroll

A small side-scrolling shooter that runs in a terminal. The level is built
from a compact seed map: each character of the map expands into a 30 x 6
chunk of ground, an upward ramp or a downward ramp, giving a world 900
columns wide and 32 rows tall. The camera follows the player across it, and
three weapons (pistol, shotgun and minigun) fire bullets with random spread.

## Installing

```
pip install .
```

## Playing

Put a `seed_map.txt` in the current directory and start the game:

```
sidescroll
```

Options:

- `--seed-map PATH`: read the seed map from another file (default `seed_map.txt`)
- `--frames N`: stop after drawing N frames

If the seed map cannot be read or is too short, the command prints an error
and exits with status 1.

The seed map needs 120 characters (4 rows of 30). Line breaks are ignored
while reading, and any characters beyond the first 120 are not used:

- `G`: a solid block of ground
- `U`: a ramp going up, with ground underneath it
- `D`: a ramp going down, with ground underneath it
- any other character: open air

The screen is 180 columns by 45 rows. On Windows the console is resized with
`mode`; on other systems a resize escape sequence is sent to the terminal.
The game logic ticks 60 times per second; frame and tick rates are shown in
the top right corner.

### Controls

| Key                     | Action                          |
|-------------------------|---------------------------------|
| Left / A                | move left                       |
| Right / D               | move right                      |
| Z or Ctrl+Space         | jump                            |
| Up                      | aim upwards while held          |
| 1, 2, 3                 | select pistol, shotgun, minigun |
| Space                   | fire, or restart after dying    |
| Escape                  | quit                            |

Walking onto a ramp lifts the player one row; walls of ground stop horizontal
movement. If you fall to the bottom of the world, a "You have died!" box
appears; press Space to put the player back at the start.

## What the game does not have

There are no enemies, no health and no hit detection: bullets fly until they
leave the world and then disappear. Tiles such as `HEALING`, `TRAP` and
`STAR` exist in `TileType` but are never placed by the seed map.

## Using the pieces

The modules can also be used without the game loop:

```python
from sidescroll.world import World
from sidescroll.screen import ScreenBuffer, BorderThickness, Color

world = World.from_text("G" * 30 + "\n" + "." * 90)
print(world.ground_level(10))  # 8: the first row below the sky

buffer = ScreenBuffer(20, 5)
buffer.draw_rect(0, 0, 20, 5, Color.WHITE, Color.BLACK, BorderThickness.MEDIUM)
print("\n".join(buffer.rows()))
```

- `sidescroll.world`: `parse_seed`, `World` (generation, `tile`, `ground_level`)
- `sidescroll.weapons`: `Weapon`, `Bullet`, `default_weapons`, `update_bullets`
- `sidescroll.timing`: `RateCounter` and `format_rate` for the FPS/TPS labels
- `sidescroll.screen`: `ScreenBuffer` with lines, rectangles, aligned text and
  ANSI output, plus `print_unicode_array`
- `sidescroll.player`: `Player` movement, jumping, gravity and ramps
- `sidescroll.game`: `Game` state, `Key` input handling and tick timing
- `sidescroll.render`: `draw_world`, `draw_ui` and `render_frame`
- `sidescroll.app`: the terminal loop (`run`, `main`), `keys_from_input`,
  `set_console_size`

`Game` takes an optional random source and clock, so its behaviour can be
driven deterministically.

## Running the tests

```
pip install ".[test]"
pytest
```