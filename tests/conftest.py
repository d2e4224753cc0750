import copy

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from mallseg.config import CONFIG
from mallseg.customers import Customer, generate_customers


@pytest.fixture
def config():
    return copy.deepcopy(CONFIG)


@pytest.fixture
def customers():
    return generate_customers(120, rng=np.random.default_rng(1234))


@pytest.fixture
def make_customers():
    def _make(points):
        return [
            Customer(customer_id=i + 1, gender="Female" if i % 2 else "Male", age=30 + i,
                     annual_income=float(x), spending_score=float(y))
            for i, (x, y) in enumerate(points)
        ]
    return _make
