"""Building, drawing and tidying the forest grid."""

from __future__ import annotations

import math
import random
import sys
from collections import deque
from typing import TextIO

from forestfire.config import Config
from forestfire.tile import Tile, TileType
from forestfire.tree import Tree, TreeStatus, TreeType

Forest = list[list[Tile]]

_RESET = "\x1b[0m"
_GREEN = "\x1b[32m"
_WHITE = "\x1b[37m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"
_BLUE = "\x1b[34m"
_GREY = "\x1b[38;2;128;128;128m"

_STATUS_GLYPHS = {
    TreeStatus.STRUCK: ("X", _WHITE),
    TreeStatus.KINDLING: ("K", _YELLOW),
    TreeStatus.BURNING: ("F", _RED),
    TreeStatus.BURNED: ("#", _GREY),
}

_WATER_SPREAD_CHANCE = 0.7


def _paint(text: str, colour: str) -> str:
    return f"{colour}{text}{_RESET}"


def _round_half_away(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _glyph(tile: Tile) -> str:
    tree = tile.tile_entity
    if tree is not None:
        if tree.status is TreeStatus.ALIVE:
            return _paint(tree.tree_type.symbol, _GREEN)
        symbol, colour = _STATUS_GLYPHS[tree.status]
        return _paint(symbol, colour)
    if tile.tile_type is TileType.WATER:
        return _paint("~", _BLUE)
    return _paint(".", _GREY)


def create_water_body(
    forest: Forest, start_x: int, start_y: int, size: int, rng: random.Random
) -> None:
    """Grow a lake of at most ``size`` tiles outward from a starting point."""
    queue = deque([(start_x, start_y)])
    placed = 0
    while queue:
        x, y = queue.popleft()
        if placed >= size:
            break
        if not (0 <= x < len(forest) and 0 <= y < len(forest[0])):
            continue
        forest[x][y] = Tile(x, y, TileType.WATER)
        placed += 1
        for dx, dy in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            if rng.random() < _WATER_SPREAD_CHANCE:
                queue.append((x + dx, y + dy))


def init_forest(cfg: Config, rng: random.Random | None = None) -> Forest:
    """Build a grid with lakes and trees until the desired densities are met."""
    rng = rng or random.Random()
    size = cfg.forest_size
    area = size * size
    forest = [[Tile(x, y, TileType.GRASS) for y in range(size)] for x in range(size)]

    while cfg.current_water_density < cfg.desired_water_density:
        x = rng.randrange(size)
        y = rng.randrange(size)
        create_water_body(forest, x, y, rng.randrange(3, 16), rng)
        water = sum(tile.tile_type is TileType.WATER for row in forest for tile in row)
        cfg.current_water_density = water / area

    while cfg.current_forest_density < cfg.desired_forest_density:
        x = rng.randrange(size)
        y = rng.randrange(size)
        tile = forest[x][y]
        if tile.tile_type is TileType.GRASS:
            tree = Tree.random(rng)
            cfg.counts[tree.tree_type] += 1
            tile.set_entity(tree)
            cfg.tree_count += 1
            cfg.current_forest_density += 1.0 / area

    cfg.original_tree_count = cfg.tree_count
    return forest


def render_forest(forest: Forest, cfg: Config) -> str:
    """Return the status header and the coloured grid as text."""
    if cfg.original_tree_count:
        burned = (cfg.original_tree_count - cfg.tree_count) / cfg.original_tree_count * 100.0
    else:
        burned = math.nan
    burned = _round_half_away(burned)
    size = cfg.forest_size
    counts = cfg.counts
    lines = [
        f"Forest size: {size}x{size} | "
        f"Original density: {_round_half_away(cfg.desired_forest_density * 100.0):.2f}% | "
        f"Original number of trees: {cfg.original_tree_count}",
        f"Current density: {cfg.current_forest_density * 100.0:.2f}% | "
        f"Remaining trees: {cfg.tree_count} | Burned: {burned:.2f}% ",
        f"Water density: {cfg.current_water_density * 100.0:.2f}% ",
        f"Pine: {counts[TreeType.PINE]} | Oak: {counts[TreeType.OAK]} | "
        f"Birch: {counts[TreeType.BIRCH]} | Redwood: {counts[TreeType.REDWOOD]}",
        "Tree types: P = Pine, O = Oak, B = Birch, R = Redwood",
        "Legend: X = Struck, K = Kindling, F = Burning, # = Burned",
        "Press Enter for lightning, 'q' to quit",
    ]
    lines.extend("".join(f"{_glyph(tile)} " for tile in row) for row in forest)
    return "\n".join(lines) + "\n"


def display_forest(forest: Forest, cfg: Config, out: TextIO | None = None) -> None:
    """Write the rendered forest to ``out`` (standard output by default)."""
    out = out if out is not None else sys.stdout
    out.write(render_forest(forest, cfg))
    out.flush()


def clear_forest(forest: Forest) -> None:
    """Turn every kindling or burning tree into a burned one."""
    for row in forest:
        for tile in row:
            tree = tile.tile_entity
            if tree is not None and tree.status in (TreeStatus.KINDLING, TreeStatus.BURNING):
                tile.set_entity(tree.with_status(TreeStatus.BURNED, 0))


def calc_forest_density(forest: Forest, tree_count: int) -> float:
    """Return the share of tiles holding a living tree."""
    return tree_count / (len(forest) * len(forest[0]))