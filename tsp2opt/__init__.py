from tsp2opt.structures.graph import Graph
from tsp2opt.structures.tour import Tour
from tsp2opt.heuristics.local_search.operators.two_opt import exchange, scan_neighborhood
from tsp2opt.heuristics.local_search.driver import iterative_two_opt

__all__ = ["Graph", "Tour", "exchange", "scan_neighborhood", "iterative_two_opt"]
