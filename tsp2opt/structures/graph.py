# tsp2opt/structures/graph.py
from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np


@dataclass(frozen=True, eq=False)
class Graph:
    """
    Complete, undirected, edge-weighted graph over vertices 0..n-1.

    - weights: (n, n) symmetric matrix, weights[i, j] = w(i, j) >= 0

    The matrix is copied and marked read-only, so a Graph never changes
    while tours built over it are alive.
    """

    weights: np.ndarray = field(repr=False)

    def __post_init__(self):
        w = np.array(self.weights, dtype=float)
        if w.ndim != 2 or w.shape[0] != w.shape[1]:
            raise ValueError(f"Weight matrix must be square, got shape {w.shape}")
        if w.shape[0] < 1:
            raise ValueError("Graph needs at least one vertex.")
        if not np.all(np.isfinite(w)):
            raise ValueError("Weight matrix contains non-finite entries.")
        if np.any(w < 0):
            raise ValueError("Edge weights must be non-negative.")
        if not np.allclose(w, w.T):
            raise ValueError("Weight matrix must be symmetric.")
        # average out rounding noise so w(i, j) == w(j, i) exactly
        w = (w + w.T) / 2
        w.setflags(write=False)
        object.__setattr__(self, "weights", w)

    @classmethod
    def from_coordinates(cls, coords) -> "Graph":
        """Build the complete Euclidean graph over an (n, 2) array of points."""
        pts = np.asarray(coords, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"Coordinates must have shape (n, 2), got {pts.shape}")
        diff = pts[:, None, :] - pts[None, :, :]
        return cls(np.sqrt((diff ** 2).sum(axis=-1)))

    @property
    def vertex_count(self) -> int:
        return int(self.weights.shape[0])

    def weight(self, i: int, j: int) -> float:
        """Return w(i, j). Out-of-range indices raise IndexError."""
        n = self.vertex_count
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"Vertex pair ({i}, {j}) out of range for n={n}")
        return float(self.weights[i, j])
