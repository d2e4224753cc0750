import numpy as np
import pytest

from mallseg import benchmark
from mallseg.benchmark import clustering_wrapper, run_benchmark, run_test
from mallseg.customers import customers_to_points


@pytest.mark.parametrize("method", ["mallseg", "sklearn"])
def test_run_test_metrics(customers, method):
    X = customers_to_points(customers)
    row = run_test(X, 3, method, seed=0)
    assert row["method"] == method
    assert row["k"] == 3
    assert row["wcss"] >= 0
    assert -1.0 <= row["silhouette"] <= 1.0


def test_unsupported_method(customers):
    with pytest.raises(ValueError):
        clustering_wrapper(customers_to_points(customers), 3, "dbscan", seed=0)


def test_run_benchmark_writes_outputs(config, tmp_path):
    config["max_k"] = 3
    config["benchmark"].update({
        "ks": [2, 3],
        "num_customers": 40,
        "elbow_restarts": 2,
        "output_dir": str(tmp_path),
    })
    df = run_benchmark(config)
    assert len(df) == 4
    assert set(df["method"]) == {"mallseg", "sklearn"}
    assert (tmp_path / "kmeans_benchmark.csv").exists()
    assert (tmp_path / "elbow.png").exists()


def test_benchmark_uses_caller_config(customers, config, monkeypatch):
    seen = []

    class RecordingSolver(benchmark.KMeansSolver):
        def __init__(self, cfg, rng=None):
            seen.append(dict(cfg))
            super().__init__(cfg, rng=rng)

    monkeypatch.setattr(benchmark, "KMeansSolver", RecordingSolver)
    config.update(max_iter=7, empty_cluster="keep")

    run_test(customers_to_points(customers), 3, "mallseg", seed=0, config=config)
    assert seen[0]["max_iter"] == 7
    assert seen[0]["empty_cluster"] == "keep"
    assert seen[0]["num_clusters"] == 3
