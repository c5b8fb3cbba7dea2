from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from tsp2opt.structures.graph import Graph
from tsp2opt.structures.tour import Tour


def _tour_to_dict(tour: Tour) -> Dict[str, Any]:
    return {"route": list(tour.route), "cost": tour.cost}


def save_tour_json(tour: Tour, path: Path) -> None:
    """Save a tour (route and cost) to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(_tour_to_dict(tour), f, indent=2)


def load_tour_json(path: Path, graph: Graph) -> Tour:
    """Load a tour over `graph`; the stored cost is ignored and recomputed."""
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    return Tour(graph, [int(v) for v in data["route"]])


def save_summary_json(summary, path: Path) -> None:
    """Save a RestartSummary: best/worst tours, cost statistics and per-run rows."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "best_tour": _tour_to_dict(summary.best_tour),
        "worst_tour": _tour_to_dict(summary.worst_tour),
        "min_cost": summary.min_cost,
        "max_cost": summary.max_cost,
        "mean_cost": summary.mean_cost,
        "runs": summary.runs.to_dict(orient="records"),
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
