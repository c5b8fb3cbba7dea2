# tsp2opt/heuristics/local_search/operators/two_opt.py
from typing import List

from tsp2opt.structures.tour import Tour

Route = List[int]  # e.g., [v0, v1, ..., v_{n-1}], closed back to v0


def apply_two_opt(route: Route, pos1: int, pos2: int) -> Route:
    """
    Remove edges (r[pos1], r[pos1+1]) and (r[pos2], r[pos2+1 mod n]) and
    reconnect by reversing the segment between them.

    If pos2 is the last index the second edge is the closing edge
    (r[n-1], r[0]); the route is then rotated so it starts at r[pos1+1]:
        r[pos1+1], ..., r[n-1], r[pos1], r[pos1-1], ..., r[1], r[0]
    For pos1 == 0 both removed edges share r[0] and the result is only a
    rotation of the input cycle.
    """
    n = len(route)
    if pos2 != n - 1:
        return route[:pos1 + 1] + route[pos1 + 1:pos2 + 1][::-1] + route[pos2 + 1:]
    if pos1 == 0:
        return route[1:] + route[:1]
    return route[pos1 + 1:] + [route[pos1]] + route[1:pos1][::-1] + [route[0]]


def exchange(tour: Tour, pos1: int, pos2: int) -> Tour:
    """Return a new tour after the 2-opt exchange at (pos1, pos2); `tour` is untouched."""
    n = len(tour.route)
    assert tour.graph.vertex_count == n
    assert pos1 >= 0
    assert pos2 > pos1 + 1
    assert pos2 < n

    return Tour(tour.graph, apply_two_opt(list(tour.route), pos1, pos2))


def scan_neighborhood(tour: Tour, first_fit: bool) -> Tour:
    """
    Single pass over the full 2-opt neighborhood of `tour`.

    Pairs (i, j) with 0 <= i <= n-2 and i+2 <= j <= n-1 are visited in
    row-major order.
    - first_fit: return the first neighbor cheaper than `tour`.
    - best fit: scan everything and return the cheapest neighbor; ties keep
      the earliest one.
    If nothing improves, the input object itself is returned.
    """
    assert len(tour.route) > 0

    n = len(tour.route)
    best = tour
    best_cost = tour.cost

    for i in range(n - 1):
        for j in range(i + 2, n):
            cand = exchange(tour, i, j)
            if cand.cost < best_cost:
                best, best_cost = cand, cand.cost
                if first_fit:
                    return best
    return best
