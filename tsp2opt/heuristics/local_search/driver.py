# tsp2opt/heuristics/local_search/driver.py
from typing import Optional

from tsp2opt.structures.tour import Tour
from .operators.two_opt import scan_neighborhood


def iterative_two_opt(
    tour: Tour,
    first_fit: bool = False,
    max_loops: Optional[int] = None,
    verbose: bool = False,
) -> Tour:
    """
    Apply 2-opt scans until no exchange improves the tour.

    first_fit performs a single scan and returns its result (one accepted
    improving step at most); repeat the call to keep going.
    Best fit keeps scanning while the cost strictly decreases, so the
    returned tour is 2-opt optimal unless `max_loops` stops it earlier.
    """
    if max_loops is not None and max_loops < 1:
        raise ValueError(f"max_loops must be positive, got {max_loops}")

    current = tour
    candidate = scan_neighborhood(current, first_fit)
    if first_fit:
        if verbose and candidate is not current:
            print(f"First-fit step: cost {current.cost:.4f} -> {candidate.cost:.4f}")
        return candidate

    loops = 1
    while candidate.cost < current.cost:
        if verbose:
            print(f"Iteration {loops}: cost {current.cost:.4f} -> {candidate.cost:.4f}")
        current = candidate
        if max_loops is not None and loops >= max_loops:
            break
        candidate = scan_neighborhood(current, first_fit)
        loops += 1

    if verbose:
        print(f"Stopped after {loops} scan(s), cost={current.cost:.4f}")
    return current
