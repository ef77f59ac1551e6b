import random

import pytest

from forestfire.config import Config
from forestfire.forest import (
    calc_forest_density,
    clear_forest,
    create_water_body,
    display_forest,
    init_forest,
    render_forest,
)
from forestfire.tile import Tile, TileType
from forestfire.tree import Tree, TreeStatus, TreeType


class _AlwaysSpread:
    def random(self):
        return 0.0


class _NeverSpread:
    def random(self):
        return 0.99


def _grid(n):
    return [[Tile(x, y, TileType.GRASS) for y in range(n)] for x in range(n)]


def _water_count(forest):
    return sum(tile.tile_type is TileType.WATER for row in forest for tile in row)


def _config(n=10, forest_density=0.3, water_density=0.0):
    return Config(
        forest_size=n,
        desired_forest_density=forest_density,
        desired_water_density=water_density,
    )


def test_water_body_fills_exact_size_when_always_spreading():
    forest = _grid(10)
    create_water_body(forest, 5, 5, 7, _AlwaysSpread())
    assert _water_count(forest) == 7
    assert forest[5][5].tile_type is TileType.WATER


def test_water_body_without_spread_is_single_tile():
    forest = _grid(10)
    create_water_body(forest, 2, 3, 15, _NeverSpread())
    assert _water_count(forest) == 1
    assert forest[2][3].tile_type is TileType.WATER
    assert (forest[2][3].x, forest[2][3].y) == (2, 3)


def test_water_body_out_of_bounds_places_nothing():
    forest = _grid(10)
    create_water_body(forest, -1, 4, 10, _AlwaysSpread())
    assert _water_count(forest) == 0


@pytest.mark.parametrize("seed", range(5))
def test_water_body_never_exceeds_size(seed):
    forest = _grid(10)
    create_water_body(forest, 0, 0, 9, random.Random(seed))
    assert 1 <= _water_count(forest) <= 9


@pytest.mark.parametrize("seed", range(5))
def test_init_forest_meets_densities(seed):
    cfg = _config(20, 0.4, 0.2)
    forest = init_forest(cfg, random.Random(seed))
    assert len(forest) == 20
    assert all(len(row) == 20 for row in forest)
    assert cfg.current_water_density >= cfg.desired_water_density
    assert cfg.current_forest_density >= cfg.desired_forest_density
    assert cfg.original_tree_count == cfg.tree_count
    assert sum(cfg.counts.values()) == cfg.tree_count
    for row in forest:
        for tile in row:
            if tile.tile_entity is not None:
                assert tile.tile_type is TileType.GRASS
                assert tile.tile_entity.status is TreeStatus.ALIVE


def test_init_forest_without_water():
    cfg = _config(10, 0.5, 0.0)
    forest = init_forest(cfg, random.Random(1))
    assert _water_count(forest) == 0
    assert cfg.current_water_density == 0.0


def test_render_header_and_rows():
    cfg = _config(10, 0.3, 0.0)
    text = render_forest(_grid(10), cfg)
    lines = text.splitlines()
    assert len(lines) == 17
    assert lines[0] == "Forest size: 10x10 | Original density: 30.00% | Original number of trees: 0"
    assert lines[4] == "Tree types: P = Pine, O = Oak, B = Birch, R = Redwood"
    assert lines[6] == "Press Enter for lightning, 'q' to quit"
    assert all(line.count(".") == 10 for line in lines[7:])


def test_render_shows_tree_states():
    forest = _grid(10)
    pine = Tree(TreeStatus.ALIVE, TreeType.PINE, 0.9, 1)
    forest[0][0].set_entity(pine)
    forest[0][1].set_entity(pine.with_status(TreeStatus.STRUCK))
    forest[0][2].set_entity(pine.with_status(TreeStatus.KINDLING))
    forest[0][3].set_entity(pine.with_status(TreeStatus.BURNING))
    forest[0][4].set_entity(pine.with_status(TreeStatus.BURNED))
    forest[1][0] = Tile(1, 0, TileType.WATER)
    row0, row1 = render_forest(forest, _config()).splitlines()[7:9]
    for symbol in ("P", "X", "K", "F", "#"):
        assert symbol in row0
    assert "~" in row1


def test_display_forest_writes_render(capsys):
    forest = _grid(10)
    cfg = _config()
    display_forest(forest, cfg)
    assert capsys.readouterr().out == render_forest(forest, cfg)


def test_clear_forest_burns_out_active_fires():
    forest = _grid(10)
    oak = Tree(TreeStatus.ALIVE, TreeType.OAK, 0.5, 3)
    forest[0][0].set_entity(oak)
    forest[0][1].set_entity(oak.with_status(TreeStatus.STRUCK))
    forest[0][2].set_entity(oak.with_status(TreeStatus.KINDLING))
    forest[0][3].set_entity(oak.with_status(TreeStatus.BURNING, 2))
    clear_forest(forest)
    assert forest[0][0].tile_entity.status is TreeStatus.ALIVE
    assert forest[0][1].tile_entity.status is TreeStatus.STRUCK
    assert forest[0][2].tile_entity.status is TreeStatus.BURNED
    assert forest[0][3].tile_entity.status is TreeStatus.BURNED
    assert forest[0][3].tile_entity.burn_time == 0
    assert forest[0][3].tile_entity.tree_type is TreeType.OAK


def test_calc_forest_density():
    forest = _grid(10)
    assert calc_forest_density(forest, 0) == 0.0
    assert calc_forest_density(forest, 100) == 1.0
    assert calc_forest_density(forest, 25) == 0.25