from pathlib import Path

import pandas as pd

from tsp2opt.structures.graph import Graph

COORD_COLUMNS = ["X", "Y"]


def _read_table(file_path: Path, sheet_name) -> pd.DataFrame:
    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(file_path, index_col=0)
    if suffix == ".xlsx":
        return pd.read_excel(file_path, sheet_name=sheet_name, index_col=0)
    raise ValueError(f"Unsupported graph file type: {file_path.suffix}")


def load_graph(file_path, sheet_name=0) -> Graph:
    """
    Load a complete graph from a .csv or .xlsx table.

    Two layouts are accepted (first column is always the row index):
      - a point list with columns X, Y -> Euclidean distances
      - an n x n weight matrix

    Raises FileNotFoundError for a missing file and ValueError for a
    table that is not a valid graph.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Graph file not found: {file_path}")

    df = _read_table(file_path, sheet_name)
    if list(df.columns) == COORD_COLUMNS:
        return Graph.from_coordinates(df[COORD_COLUMNS].to_numpy(dtype=float))

    weights = df.to_numpy(dtype=float)
    if weights.shape[0] != weights.shape[1]:
        raise ValueError(f"Weight matrix in {file_path.name} is not square: {weights.shape}")
    return Graph(weights)
