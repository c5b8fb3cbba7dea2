# tsp2opt/structures/tour.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, Tuple
import math

import numpy as np

from tsp2opt.structures.graph import Graph


def cyclic_cost(graph: Graph, route: Sequence[int]) -> float:
    """
    Total length of the closed route, wrap-around edge included.

    Summed with math.fsum, so every rotation or reflection of the same
    cycle gives exactly the same float.
    """
    if len(route) < 2:
        return 0.0
    idx = np.asarray(route, dtype=int)
    return math.fsum(graph.weights[idx, np.roll(idx, -1)].tolist())


@dataclass(frozen=True)
class Tour:
    """A cyclic permutation of all vertices of `graph`."""

    graph: Graph = field(repr=False)
    route: Tuple[int, ...]
    cost: float = field(init=False)

    def __post_init__(self):
        if any(int(v) != v for v in self.route):
            raise ValueError(f"Route entries must be integers: {list(self.route)}")
        route = tuple(int(v) for v in self.route)
        n = self.graph.vertex_count
        if len(route) != n or set(route) != set(range(n)):
            raise ValueError(f"Route is not a permutation of 0..{n - 1}: {list(route)}")
        object.__setattr__(self, "route", route)
        object.__setattr__(self, "cost", cyclic_cost(self.graph, route))

    def compute_cost(self) -> float:
        """Recompute the cost from the route (ignores the cached value)."""
        return cyclic_cost(self.graph, self.route)

    def __len__(self) -> int:
        return len(self.route)

    def __str__(self) -> str:
        return f"Tour(route={list(self.route)}, cost={self.cost:.4f})"
