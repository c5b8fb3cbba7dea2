import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from tsp2opt.structures.graph import Graph
from tsp2opt.structures.tour import Tour
from tsp2opt.heuristics.config import LocalSearchConfig
from tsp2opt.heuristics.construction import random_tour
from tsp2opt.heuristics.local_search.driver import iterative_two_opt
from tsp2opt.io.data_loader import load_graph
from tsp2opt.io.tour_io import save_summary_json


@dataclass
class RestartSummary:
    """
    Outcome of running 2-opt from many random tours of one graph.

    - best_tour / worst_tour: cheapest and most expensive local optima found
    - runs: one row per restart (restart, initial_cost, final_cost)
    """

    best_tour: Tour
    worst_tour: Tour
    runs: pd.DataFrame

    @property
    def min_cost(self) -> float:
        return float(self.runs["final_cost"].min())

    @property
    def max_cost(self) -> float:
        return float(self.runs["final_cost"].max())

    @property
    def mean_cost(self) -> float:
        return float(self.runs["final_cost"].mean())


def run_random_restarts(graph: Graph, config: LocalSearchConfig) -> RestartSummary:
    if config.n_restarts < 1:
        raise ValueError(f"n_restarts must be positive, got {config.n_restarts}")

    rng = np.random.default_rng(config.seed)
    best: Optional[Tour] = None
    worst: Optional[Tour] = None
    rows = []

    for r in range(config.n_restarts):
        start = random_tour(graph, rng)
        solution = iterative_two_opt(
            start,
            first_fit=config.first_fit,
            max_loops=config.max_loops,
            verbose=config.verbose,
        )

        if best is None or solution.cost < best.cost:
            best = solution
        if worst is None or solution.cost > worst.cost:
            worst = solution

        rows.append({"restart": r, "initial_cost": start.cost, "final_cost": solution.cost})

    return RestartSummary(best_tour=best, worst_tour=worst, runs=pd.DataFrame(rows))


def format_report(summary: RestartSummary) -> str:
    return (
        f"Best: {summary.best_tour}\n"
        f"Min: {summary.min_cost} | Max: {summary.max_cost} | Avg: {summary.mean_cost}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run 2-opt from random initial tours of a graph.")
    parser.add_argument("--file", required=True, help="Graph as .csv/.xlsx (weight matrix or X,Y points).")
    parser.add_argument("--restarts", type=int, default=100, help="Number of random initial tours.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--first-fit", action="store_true", help="Accept the first improving exchange (single step).")
    parser.add_argument("--max-loops", type=int, default=None, help="Cap on best-fit scans per restart.")
    parser.add_argument("--output", default=None, help="Write the summary as JSON to this path.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    graph = load_graph(Path(args.file))
    config = LocalSearchConfig(
        n_restarts=args.restarts,
        seed=args.seed,
        first_fit=args.first_fit,
        max_loops=args.max_loops,
        verbose=args.verbose,
    )

    summary = run_random_restarts(graph, config)
    print(format_report(summary))

    if args.output:
        save_summary_json(summary, Path(args.output))
        print(f"Summary written to {args.output}")


if __name__ == "__main__":
    main()

# run with:
# python -m tsp2opt.experiments.run_random_restarts --file data/square.csv --restarts 20
