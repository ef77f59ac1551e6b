"""Lightning strikes and the spread of fire through the forest."""

from __future__ import annotations

import random
import sys
import time
from collections import deque
from typing import Callable, Sequence, TextIO

from forestfire.config import Config
from forestfire.console import clear_screen
from forestfire.forest import Forest, calc_forest_density, clear_forest, display_forest, init_forest
from forestfire.tile import TileType
from forestfire.tree import TreeStatus

ShowFrame = Callable[[Forest, Config, "str | None"], None]

_NEIGHBOURS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def burn_adjacent_trees(
    forest: Forest,
    x: int,
    y: int,
    cfg: Config,
    rng: random.Random | None = None,
    show: ShowFrame | None = None,
    delay: Callable[[float], None] = time.sleep,
) -> int:
    """Strike the tree at (x, y) and spread the fire; return how many trees caught.

    ``show`` is called with each frame of the fire; without it no frames are
    drawn and no pauses are made.
    """
    if cfg.tree_count == 0:
        return 0
    rng = rng or random.Random()
    size = len(forest)

    def frame(message: str | None, seconds: float) -> None:
        if show is not None:
            show(forest, cfg, message)
            delay(seconds)

    queue: deque[tuple[int, int, int]] = deque()
    burned = 0

    tree = forest[x][y].tile_entity
    if tree is not None and tree.status is TreeStatus.ALIVE:
        cfg.record_lost(tree.tree_type)
        forest[x][y].set_entity(tree.with_status(TreeStatus.STRUCK))
        frame("Lightning struck! Tree has been hit.", 0.1)
        queue.append((x, y, tree.burn_time))
        burned += 1
        cfg.tree_count -= 1

    while queue:
        cx, cy, remaining = queue.popleft()
        is_origin = (cx, cy) == (x, y)
        tile = forest[cx][cy]

        if remaining > 1 and not is_origin and tile.tile_entity is not None:
            tile.set_entity(tile.tile_entity.with_status(TreeStatus.BURNING, remaining - 1))
            queue.append((cx, cy, remaining - 1))
            continue

        for dx, dy in _NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if not (0 <= nx < size and 0 <= ny < size):
                continue
            neighbour = forest[nx][ny]
            if neighbour.tile_type is TileType.WATER:
                continue
            other = neighbour.tile_entity
            if other is None:
                continue
            if other.status is TreeStatus.ALIVE:
                if rng.random() <= other.flammability:
                    cfg.record_lost(other.tree_type)
                    neighbour.set_entity(other.with_status(TreeStatus.KINDLING))
                    cfg.tree_count -= 1
                    queue.append((nx, ny, other.burn_time))
                    burned += 1
            elif other.status is TreeStatus.KINDLING:
                neighbour.set_entity(other.with_status(TreeStatus.BURNING))

        cfg.tree_count = cfg.original_tree_count - burned
        cfg.current_forest_density = calc_forest_density(forest, cfg.tree_count)

        if not is_origin and tile.tile_entity is not None:
            tile.set_entity(tile.tile_entity.with_status(TreeStatus.BURNED, 0))

        frame(None, cfg.simulation_speed_ms / 1000)

    return burned


def run_simulation(
    forest: Forest,
    cfg: Config,
    rng: random.Random | None = None,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
    delay: Callable[[float], None] = time.sleep,
) -> None:
    """Strike lightning on every entered line until 'q' or end of input."""
    rng = rng or random.Random()
    out = out if out is not None else sys.stdout
    if read_line is None:
        def read_line() -> str:
            return sys.stdin.readline()

    def show(current: Forest, settings: Config, message: str | None = None) -> None:
        clear_screen(out)
        display_forest(current, settings, out)
        if message:
            print(message, file=out)

    show(forest, cfg)

    while True:
        line = read_line()
        if not line or line.strip() in ("q", "Q"):
            break

        struck_x = rng.randrange(cfg.forest_size)
        struck_y = rng.randrange(cfg.forest_size)
        clear_screen(out)
        print(f"Lightning struck at ({struck_x}, {struck_y})", file=out)

        tree = forest[struck_x][struck_y].tile_entity
        if tree is None:
            show(forest, cfg, "No tree at the struck location!")
        elif tree.status is TreeStatus.ALIVE:
            burn_adjacent_trees(forest, struck_x, struck_y, cfg, rng, show, delay)
        else:
            show(forest, cfg, "Lightning struck a non-living tree!")

        clear_screen(out)
        clear_forest(forest)
        display_forest(forest, cfg, out)


def main(argv: Sequence[str] | None = None) -> int:
    """Set up a forest interactively and run the simulation."""
    clear_screen()
    try:
        cfg = Config.prompt()
        forest = init_forest(cfg)
        run_simulation(forest, cfg)
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0