"""Entry points used by the scripts and the plotting layer."""

import copy

import numpy as np

from mallseg.config import CONFIG
from mallseg.customers import customers_to_points
from mallseg.KMeansSolver import ClusterResult, KMeansSolver


def run_kmeans(customers, k: int, max_iterations: int | None = None,
               rng: np.random.Generator | None = None, config: dict | None = None) -> ClusterResult:
    if len(customers) == 0:
        raise ValueError("Cannot cluster an empty customer sequence")

    local_config = copy.deepcopy(config if config is not None else CONFIG)
    local_config["num_clusters"] = k
    if max_iterations is not None:
        local_config["max_iter"] = max_iterations

    solver = KMeansSolver(local_config, rng=rng)
    return solver.solve(customers_to_points(customers))


def compute_elbow(customers, max_k: int = CONFIG["max_k"], rng: np.random.Generator | None = None,
                  n_init: int = 1, config: dict | None = None) -> list[dict]:
    """
    WCSS for k = 1 .. max_k, ascending, with the solver settings of `config`.

    Every run gets its own child generator. With n_init > 1 the lowest WCSS
    over that many seedings is reported for each k.
    """
    if max_k < 1:
        raise ValueError(f"max_k must be >= 1, got {max_k}")
    if n_init < 1:
        raise ValueError(f"n_init must be >= 1, got {n_init}")
    if rng is None:
        rng = np.random.default_rng((config or CONFIG)["seed"])

    results = []
    for k, child in zip(range(1, max_k + 1), rng.spawn(max_k)):
        runs = child.spawn(n_init)
        wcss = min(run_kmeans(customers, k, rng=r, config=config).wcss for r in runs)
        results.append({"k": k, "wcss": wcss})
    return results
