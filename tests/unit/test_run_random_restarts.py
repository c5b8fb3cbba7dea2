import json
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from tsp2opt.structures.graph import Graph
from tsp2opt.heuristics.config import LocalSearchConfig
from tsp2opt.experiments.run_random_restarts import format_report, main, run_random_restarts

SQUARE = [[0, 0], [1, 0], [1, 1], [0, 1]]


def test_square_always_reaches_perimeter():
    graph = Graph.from_coordinates(SQUARE)
    summary = run_random_restarts(graph, LocalSearchConfig(n_restarts=10, seed=0))
    assert len(summary.runs) == 10
    assert summary.min_cost == summary.max_cost == 4.0
    assert summary.best_tour.cost == 4.0


def test_restarts_are_reproducible_and_ordered():
    graph = Graph.from_coordinates(np.random.default_rng(2).random((10, 2)))
    config = LocalSearchConfig(n_restarts=8, seed=5)
    a = run_random_restarts(graph, config)
    b = run_random_restarts(graph, config)

    pd.testing.assert_frame_equal(a.runs, b.runs)
    assert list(a.runs.columns) == ["restart", "initial_cost", "final_cost"]
    assert (a.runs["final_cost"] <= a.runs["initial_cost"]).all()
    assert a.min_cost <= a.mean_cost <= a.max_cost
    assert a.best_tour.cost == a.min_cost
    assert a.worst_tour.cost == a.max_cost


def test_first_fit_restarts_improve_each_start():
    graph = Graph.from_coordinates(np.random.default_rng(6).random((10, 2)))
    summary = run_random_restarts(graph, LocalSearchConfig(n_restarts=5, seed=1, first_fit=True))
    assert (summary.runs["final_cost"] <= summary.runs["initial_cost"]).all()


def test_zero_restarts_rejected():
    graph = Graph.from_coordinates(SQUARE)
    with pytest.raises(ValueError):
        run_random_restarts(graph, LocalSearchConfig(n_restarts=0))


def test_report_lists_min_max_avg():
    graph = Graph.from_coordinates(SQUARE)
    report = format_report(run_random_restarts(graph, LocalSearchConfig(n_restarts=3)))
    assert report.startswith("Best: Tour(route=")
    assert "Min: 4.0 | Max: 4.0 | Avg: 4.0" in report


def test_cli_writes_summary(tmp_path, capsys):
    graph_path = tmp_path / "square.csv"
    pd.DataFrame({"X": [0, 1, 1, 0], "Y": [0, 0, 1, 1]}).to_csv(graph_path)
    out_path = tmp_path / "results" / "summary.json"

    main(["--file", str(graph_path), "--restarts", "4", "--output", str(out_path)])

    assert "Min: 4.0" in capsys.readouterr().out
    with out_path.open() as f:
        payload = json.load(f)
    assert payload["best_tour"]["cost"] == 4.0
    assert len(payload["runs"]) == 4
