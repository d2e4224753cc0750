import matplotlib.pyplot as plt
import numpy as np

from mallseg.customers import customers_to_points
from mallseg.KMeansSolver import ClusterResult

CLUSTER_COLORS = ["#8B5CF6", "#06B6D4", "#10B981", "#F59E0B", "#EF4444", "#EC4899"]


def _color(index: int) -> str:
    if index < len(CLUSTER_COLORS):
        return CLUSTER_COLORS[index]
    return plt.cm.tab10(index % 10)


def plot_clusters(customers, result: ClusterResult, save_path: str | None = None):
    A = customers_to_points(customers)
    labels = np.asarray(result.assignments)

    fig, ax = plt.subplots(figsize=(8, 6))
    for index in range(result.k):
        members = A[labels == index]
        ax.scatter(members[:, 0], members[:, 1], s=30, alpha=0.6,
                   color=_color(index), label=f"Cluster {index + 1}")
    ax.scatter(result.centroids[:, 0], result.centroids[:, 1], color="black",
               marker="x", s=100, label="Centroids")
    ax.set_xlabel("Annual Income (k$)")
    ax.set_ylabel("Spending Score (1-100)")
    ax.set_title(f"K-Means Customer Segments (k={result.k}, {result.iterations} iterations)")
    ax.legend()
    ax.grid(True)
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path)
    return fig


def plot_elbow(elbow: list[dict], save_path: str | None = None):
    ks = [row["k"] for row in elbow]
    wcss = [row["wcss"] for row in elbow]

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(ks, wcss, marker="o")
    ax.set_xlabel("Number of Clusters (k)")
    ax.set_ylabel("WCSS")
    ax.set_title("Elbow Method")
    ax.set_xticks(ks)
    ax.grid(True)
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path)
    return fig
