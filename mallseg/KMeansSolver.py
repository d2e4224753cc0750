import logging
from dataclasses import dataclass

import numpy as np

from mallseg.objective import compute_wcss, euclidean_distance, squared_distances

logger = logging.getLogger(__name__)

EMPTY_CLUSTER_POLICIES = ("reseed", "keep")


@dataclass(frozen=True, eq=False)
class ClusterResult:
    centroids: np.ndarray    # (k, 2), row index = cluster label
    assignments: np.ndarray  # (n,), values in [0, k)
    iterations: int
    wcss: float
    converged: bool = True

    @property
    def k(self) -> int:
        return len(self.centroids)


class KMeansSolver:
    """
    Lloyd's k-means on (income, spending) points with k-means++ seeding.

    SEED -> (ASSIGN -> UPDATE -> CHECK)* -> DONE, bounded by max_iter.
    All randomness is drawn from self.rng.
    """

    def __init__(self, config: dict, rng: np.random.Generator | None = None):
        self.k = config["num_clusters"]
        self.max_iter = config["max_iter"]
        self.tol = config["tol"]
        self.empty_cluster = config["empty_cluster"]
        self.reseed_range = config["reseed_range"]
        self.config = config

        if self.k < 1:
            raise ValueError(f"num_clusters must be >= 1, got {self.k}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"Unsupported empty cluster policy: {self.empty_cluster}")

        self.rng = rng if rng is not None else np.random.default_rng(config["seed"])

    def initialize_centroids(self, A: np.ndarray) -> np.ndarray:
        """
        k-means++ seeding.

        1. First centroid: a uniformly random point.
        2. Every further centroid: a point drawn with probability
           proportional to D(x)^2, the squared distance to the nearest
           centroid chosen so far.
        """
        m = A.shape[0]
        centroids = [A[int(self.rng.random() * m)]]

        for _ in range(1, self.k):
            d2 = np.min(squared_distances(A, np.array(centroids)), axis=1)
            centroids.append(A[self._sample_weighted(d2)])

        return np.array(centroids, dtype=float)

    def _sample_weighted(self, weights: np.ndarray) -> int:
        # cumulative-sum scan: first index whose running total reaches r
        cumulative = np.cumsum(weights)
        r = self.rng.random() * cumulative[-1]
        return int(np.searchsorted(cumulative, r, side="left"))

    def assign_clusters(self, A: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        # argmin returns the first minimum, so ties go to the lowest index
        return np.argmin(squared_distances(A, centroids), axis=1)

    def update_centroids(self, A: np.ndarray, labels: np.ndarray,
                         previous: np.ndarray | None = None) -> np.ndarray:
        centroids = np.zeros((self.k, A.shape[1]))

        for j in range(self.k):
            mask = labels == j
            if np.any(mask):
                centroids[j] = A[mask].mean(axis=0)
            elif self.empty_cluster == "keep" and previous is not None:
                centroids[j] = previous[j]
            else:
                # Empty cluster: reseed somewhere in the plotting square
                low, high = self.reseed_range
                centroids[j] = low + self.rng.random(A.shape[1]) * (high - low)
                logger.debug("Cluster %d is empty, reseeded at %s", j, centroids[j])

        return centroids

    def has_converged(self, old: np.ndarray, new: np.ndarray) -> bool:
        # every centroid must have moved no more than tol
        return all(euclidean_distance(o, n) <= self.tol for o, n in zip(old, new))

    def solve(self, A: np.ndarray) -> ClusterResult:
        A = np.asarray(A, dtype=float)
        if A.ndim != 2 or A.shape[0] == 0:
            raise ValueError("k-means needs a non-empty (m, n) array of points")

        logger.debug("Starting k-means with k=%d on %d points", self.k, A.shape[0])

        centroids = self.initialize_centroids(A)
        labels = np.zeros(A.shape[0], dtype=int)
        iterations = 0
        converged = False

        while iterations < self.max_iter:
            iterations += 1
            new_labels = self.assign_clusters(A, centroids)
            new_centroids = self.update_centroids(A, new_labels, centroids)
            converged = self.has_converged(centroids, new_centroids)

            labels = new_labels
            centroids = new_centroids
            if converged:
                break

        if converged:
            logger.info("K-means converged after %d iterations", iterations)
        else:
            logger.warning("K-means stopped at max_iter=%d without converging", self.max_iter)

        wcss = compute_wcss(A, centroids, labels)
        logger.info("Final WCSS (k=%d): %.2f", self.k, wcss)

        return ClusterResult(
            centroids=centroids,
            assignments=labels,
            iterations=iterations,
            wcss=wcss,
            converged=converged,
        )
