# forestfire

A forest fire simulator for the terminal. It grows a random square forest with
lakes and four kinds of tree. Each time you press Enter, lightning strikes a
random spot. If it hits a living tree, fire spreads to the neighbouring trees
one step at a time, and every step is redrawn so you can watch it spread.

## Installing

```
pip install .
```

## Running

```
forestfire
```

At startup you are asked for three values. If an answer is not a number in
range, the question is asked again.

- forest size: a whole number from 10 to 100 (the grid is size × size)
- desired forest density: 0.1 to 1.0
- desired water density: 0.0 to 0.5

After that, press Enter to call down lightning, or type `q` (or `Q`) and press
Enter to quit. The program also stops at the end of input. It exits with
status 0 after a normal quit. It exits with status 1 if input runs out during
setup or if it is interrupted with Ctrl-C.

## What you see

| Symbol | Meaning |
|--------|---------|
| `P` | Pine: flammability 0.9, burns for 1 step |
| `O` | Oak: flammability 0.5, burns for 3 steps |
| `B` | Birch: flammability 0.7, burns for 2 steps |
| `R` | Redwood: flammability 0.3, burns for 4 steps |
| `X` | tree struck by lightning |
| `K` | kindling, just caught fire |
| `F` | burning |
| `#` | burned |
| `~` | water |
| `.` | bare grass |

Fire spreads to all eight neighbours. It never crosses water. A tree's
flammability is the chance that it catches fire from a burning neighbour.
When a strike's fire has died out, any tree still kindling or burning is
marked as burned. The tree hit by lightning stays marked `X`.

The header shows these figures:

- the forest size
- the original density and number of trees
- the current density and the remaining trees
- the share of trees burned so far
- the water density
- the count of each tree type still standing

Output is coloured with ANSI escape codes. The screen is cleared with an escape
sequence, or with `cls` on Windows.

## Using it from Python

The modules can also be used directly. The caller can supply the random
source, the input and the output.

- `forestfire.tree`: `TreeType` (species with `symbol`, `flammability`,
  `burn_time`), `TreeStatus`, and the frozen `Tree` with `Tree.random(rng)`
  and `Tree.with_status(status, burn_time=None)`.
- `forestfire.tile`: `TileType` (`GRASS`, `WATER`) and `Tile` with
  `set_entity(tree)`.
- `forestfire.config`: `Config`, which holds the settings and the running
  counts (`counts` maps each `TreeType` to the number still standing).
  `Config.prompt(ask=None, out=None)` asks for the settings interactively.
  `record_lost(tree_type)` counts one tree of that type as lost.
- `forestfire.forest`: `create_water_body`, `init_forest(cfg, rng=None)`,
  `render_forest(forest, cfg)` (returns the screen as a string),
  `display_forest`, `clear_forest` and `calc_forest_density`.
- `forestfire.simulation`: `burn_adjacent_trees`, `run_simulation` and `main`.
- `forestfire.console`: `clear_screen` and `get_user_input`.
  `get_user_input` raises `EOFError` when input is exhausted.

```python
import random
from forestfire.config import Config
from forestfire.forest import init_forest, render_forest
from forestfire.simulation import burn_adjacent_trees

cfg = Config(forest_size=20, desired_forest_density=0.6, desired_water_density=0.1)
rng = random.Random(7)
forest = init_forest(cfg, rng)
burned = burn_adjacent_trees(forest, 5, 5, cfg, rng)
print(burned, "trees caught fire")
print(render_forest(forest, cfg))
```

`burn_adjacent_trees` only draws frames and pauses if you pass a `show`
callback, which is called as `show(forest, cfg, message)`. It returns the
number of trees that caught fire. That number is 0 if the spot holds no
living tree.

## Running the tests

```
pip install ".[test]"
pytest
```