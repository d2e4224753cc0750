import numpy as np
from scipy.spatial.distance import cdist


def euclidean_distance(p, q) -> float:
    """Euclidean distance between two (income, spending) points."""
    dx = float(p[0]) - float(q[0])
    dy = float(p[1]) - float(q[1])
    return float(np.sqrt(dx * dx + dy * dy))


def squared_distances(A: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """(m, k) matrix of squared distances from every point to every center."""
    return cdist(np.asarray(A, dtype=float), np.asarray(centers, dtype=float), metric="sqeuclidean")


def compute_wcss(A: np.ndarray, centers: np.ndarray, labels: np.ndarray) -> float:
    """Within-cluster sum of squares for a fixed assignment."""
    A = np.asarray(A, dtype=float)
    centers = np.asarray(centers, dtype=float)
    labels = np.asarray(labels, dtype=int)
    if len(A) == 0:
        return 0.0
    diff = A - centers[labels]
    return float(np.sum(diff ** 2))


class WCSSObjective:
    def __init__(self, A: np.ndarray):
        self.A = np.asarray(A, dtype=float)
        self.m, self.n = self.A.shape

    def __call__(self, centers: np.ndarray, labels: np.ndarray | None = None) -> float:
        centers = np.asarray(centers, dtype=float).reshape((-1, self.n))
        if labels is None:
            # score against the nearest center, as for an externally fitted model
            return float(np.sum(np.min(squared_distances(self.A, centers), axis=1)))
        return compute_wcss(self.A, centers, labels)
