"""Trees that grow in the forest and the states they pass through while burning."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from enum import Enum, auto


class TreeStatus(Enum):
    """Life cycle of a tree during a fire."""

    ALIVE = auto()
    STRUCK = auto()
    KINDLING = auto()
    BURNING = auto()
    BURNED = auto()


class TreeType(Enum):
    """Tree species with their symbol, flammability and burn time."""

    PINE = ("P", 0.9, 1)  # highly flammable, burns quickly
    OAK = ("O", 0.5, 3)  # less flammable, burns slowly
    BIRCH = ("B", 0.7, 2)  # medium flammability
    REDWOOD = ("R", 0.3, 4)  # fire resistant

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def flammability(self) -> float:
        return self.value[1]

    @property
    def burn_time(self) -> int:
        return self.value[2]


@dataclass(frozen=True)
class Tree:
    """A single tree standing on a tile."""

    status: TreeStatus
    tree_type: TreeType
    flammability: float
    burn_time: int

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Tree:
        """Return a living tree of a uniformly chosen species."""
        rng = rng or random.Random()
        tree_type = rng.choice(list(TreeType))
        return cls(
            status=TreeStatus.ALIVE,
            tree_type=tree_type,
            flammability=tree_type.flammability,
            burn_time=tree_type.burn_time,
        )

    def with_status(self, status: TreeStatus, burn_time: int | None = None) -> Tree:
        """Return a copy in a new state, optionally with a new burn time."""
        if burn_time is None:
            return dataclasses.replace(self, status=status)
        return dataclasses.replace(self, status=status, burn_time=burn_time)