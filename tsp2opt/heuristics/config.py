from dataclasses import dataclass
from typing import Optional

@dataclass
class LocalSearchConfig:
    n_restarts: int = 100
    seed: int = 42
    first_fit: bool = False
    max_loops: Optional[int] = None  # cap on best-fit scans (leave None to run to convergence)
    verbose: bool = False
