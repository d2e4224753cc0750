CONFIG = {
    "num_customers": 200,
    "num_clusters": 3,
    "max_iter": 100,
    "tol": 0.1,
    "max_k": 10,
    "seed": None,
    "empty_cluster": "reseed",
    "reseed_range": (0.0, 100.0),
    "benchmark": {
        "ks": [2, 3, 4, 5, 6],
        "num_customers": 200,
        "elbow_restarts": 10,
        "seed": 42,
        "output_dir": "output"
    }
}
