from typing import Optional

import numpy as np

from tsp2opt.structures.graph import Graph
from tsp2opt.structures.tour import Tour


def identity_tour(graph: Graph) -> Tour:
    return Tour(graph, tuple(range(graph.vertex_count)))


def random_tour(graph: Graph, rng: Optional[np.random.Generator] = None) -> Tour:
    """Uniformly random permutation of the graph's vertices."""
    if rng is None:
        rng = np.random.default_rng()
    return Tour(graph, rng.permutation(graph.vertex_count).tolist())
