"""Simulation settings and running tallies."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from forestfire.console import get_user_input
from forestfire.tree import TreeType

_INT_RE = re.compile(r"[+-]?\d+")


def _parse_int(text: str) -> int | None:
    return int(text) if _INT_RE.fullmatch(text) else None


def _parse_float(text: str) -> float | None:
    if "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


@dataclass
class Config:
    """Settings chosen by the user and the forest's current statistics."""

    forest_size: int
    desired_forest_density: float
    desired_water_density: float
    current_forest_density: float = 0.0
    current_water_density: float = 0.0
    tree_count: int = 0
    original_tree_count: int = 0
    simulation_speed_ms: int = 100
    counts: dict[TreeType, int] = field(default_factory=lambda: dict.fromkeys(TreeType, 0))

    @classmethod
    def prompt(
        cls,
        ask: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> Config:
        """Ask for the forest settings until each answer is in range."""
        out = out if out is not None else sys.stdout
        if ask is None:
            def ask(text: str) -> str:
                return get_user_input(text, out=out)

        print("Forest Fire Simulator Setup\n", file=out)

        while True:
            size = _parse_int(ask("Enter forest size (10-100): "))
            if size is not None and 10 <= size <= 100:
                break
            print("Please enter a number between 10 and 100", file=out)

        while True:
            forest_density = _parse_float(ask("Enter desired forest density (0.1-1.0): "))
            if forest_density is not None and 0.1 <= forest_density <= 1.0:
                break
            print("Please enter a number between 0.1 and 1.0", file=out)

        while True:
            water_density = _parse_float(ask("Enter desired water density (0.0-0.5): "))
            if water_density is not None and 0.0 <= water_density <= 0.5:
                break
            print("Please enter a number between 0.0 and 0.5", file=out)

        return cls(
            forest_size=size,
            desired_forest_density=forest_density,
            desired_water_density=water_density,
        )

    def record_lost(self, tree_type: TreeType) -> None:
        """Count one living tree of the given species as lost to fire."""
        self.counts[tree_type] -= 1