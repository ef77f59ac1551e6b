"""Tiles of the forest grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from forestfire.tree import Tree


class TileType(Enum):
    """Ground a tile is made of."""

    GRASS = auto()
    WATER = auto()


@dataclass
class Tile:
    """A grid cell, possibly holding a tree."""

    x: int
    y: int
    tile_type: TileType
    tile_entity: Tree | None = None

    def set_entity(self, entity: Tree) -> None:
        """Place a tree on this tile, replacing any previous one."""
        self.tile_entity = entity