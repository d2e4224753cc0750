import logging

import matplotlib.pyplot as plt
import numpy as np

from mallseg.clustering import compute_elbow, run_kmeans
from mallseg.config import CONFIG
from mallseg.customers import generate_customers
from mallseg.plots import plot_clusters, plot_elbow
from mallseg.stats import overview, summarize_clusters

logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

# Generate dataset
rng = np.random.default_rng(CONFIG["seed"])
customers = generate_customers(CONFIG["num_customers"], rng=rng)
result = run_kmeans(customers, CONFIG["num_clusters"], CONFIG["max_iter"], rng=rng)

print(overview(customers, result))
print(summarize_clusters(customers, result).to_string(index=False))

# Plot results
plot_clusters(customers, result)
plot_elbow(compute_elbow(customers, CONFIG["max_k"], rng=rng))
plt.show()
