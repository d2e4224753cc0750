import copy
import datetime
import logging
import os
from time import time

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from sklearn.cluster import KMeans
from sklearn.metrics import davies_bouldin_score, silhouette_score
from tqdm import tqdm

from mallseg.clustering import compute_elbow
from mallseg.config import CONFIG
from mallseg.customers import customers_to_points, generate_customers
from mallseg.KMeansSolver import KMeansSolver
from mallseg.objective import WCSSObjective


# === General clustering wrapper for both methods ===
def clustering_wrapper(X, k, method, seed, config: dict = CONFIG):
    if method == "mallseg":
        local_config = copy.deepcopy(config)
        local_config["num_clusters"] = k
        solver = KMeansSolver(local_config, rng=np.random.default_rng(seed))
        result = solver.solve(X)
        return result.centroids, result.assignments

    elif method == "sklearn":
        model = KMeans(n_clusters=k, init="k-means++", n_init=1, random_state=seed)
        labels = model.fit_predict(X)
        return model.cluster_centers_, labels

    else:
        raise ValueError("Unsupported method.")


# === Run test and compute metrics ===
def run_test(X, k, method, seed, config: dict = CONFIG):
    start_time = time()
    centers, labels = clustering_wrapper(X, k, method, seed, config)
    runtime = time() - start_time

    if 1 < len(np.unique(labels)) < len(X):
        sil = silhouette_score(X, labels)
        db = davies_bouldin_score(X, labels)
    else:
        sil = db = np.nan

    return {
        "method": method,
        "k": k,
        "time": runtime,
        "silhouette": sil,
        "db_index": db,
        "wcss": WCSSObjective(X)(centers, labels),
    }


def run_benchmark(config: dict = CONFIG) -> pd.DataFrame:
    bench = config["benchmark"]
    output_dir = bench["output_dir"]
    os.makedirs(output_dir, exist_ok=True)

    rng = np.random.default_rng(bench["seed"])
    customers = generate_customers(bench["num_customers"], rng=rng)
    X = customers_to_points(customers)

    results = []
    for method in ["mallseg", "sklearn"]:
        print(f"=== Method: {method} ===")
        for k in tqdm(bench["ks"], desc=method):
            print(f"[{datetime.datetime.now().strftime('%H:%M:%S')}] Running for k = {k}...")
            results.append(run_test(X, k, method, bench["seed"], config))

    df = pd.DataFrame(results)
    df.to_csv(os.path.join(output_dir, "kmeans_benchmark.csv"), index=False)

    # === Plots ===
    sns.set(style="whitegrid")
    for metric in ["silhouette", "db_index", "wcss", "time"]:
        plt.figure(figsize=(12, 4))
        sns.lineplot(data=df, x="k", y=metric, hue="method", marker="o")
        plt.title(f"{metric.replace('_', ' ').title()} vs. k")
        plt.xlabel("Number of Clusters (k)")
        plt.ylabel(metric.replace('_', ' ').title())
        plt.legend(title="Method")
        plt.tight_layout()
        plt.savefig(os.path.join(output_dir, f"{metric}_vs_k.png"))
        plt.close()

    # === Elbow, best of several seedings ===
    elbow = pd.DataFrame(compute_elbow(customers, max_k=config["max_k"], rng=rng,
                                       n_init=bench["elbow_restarts"], config=config))
    elbow.to_csv(os.path.join(output_dir, "elbow.csv"), index=False)
    plt.figure(figsize=(8, 4))
    sns.lineplot(data=elbow, x="k", y="wcss", marker="o")
    plt.title(f"Elbow (min WCSS over {bench['elbow_restarts']} seedings)")
    plt.tight_layout()
    plt.savefig(os.path.join(output_dir, "elbow.png"))
    plt.close()

    return df


# === Main ===
if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    print(run_benchmark())
