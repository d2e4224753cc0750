"""
Synthetic Mall-Customers style data.

Customers are drawn from five behavioural segments with equal probability.
Each segment fixes uniform ranges for income (k$), spending score and age.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

GENDERS = ("Male", "Female")

# name, cumulative threshold, income, spending, age
SEGMENTS = [
    ("luxury",       0.2, (70, 120), (70, 100), (25, 60)),
    ("conservative", 0.4, (70, 120), (10, 40),  (35, 65)),
    ("ambitious",    0.6, (15, 50),  (70, 100), (18, 43)),
    ("budget",       0.8, (15, 50),  (10, 40),  (25, 65)),
    ("average",      1.0, (40, 80),  (40, 80),  (25, 60)),
]

COLUMNS = {
    "customer_id": "CustomerID",
    "gender": "Gender",
    "age": "Age",
    "annual_income": "Annual Income (k$)",
    "spending_score": "Spending Score (1-100)",
}


@dataclass(frozen=True)
class Customer:
    customer_id: int
    gender: str
    age: int
    annual_income: float
    spending_score: float

    @property
    def point(self) -> tuple[float, float]:
        return (self.annual_income, self.spending_score)


def _pick_segment(u: float):
    for segment in SEGMENTS:
        if u < segment[1]:
            return segment
    return SEGMENTS[-1]


def _uniform(rng: np.random.Generator, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return int(round(low + rng.random() * (high - low)))


def generate_customers(count: int, rng: np.random.Generator | None = None) -> list[Customer]:
    """
    Generate `count` customers with sequential IDs starting at 1.

    Draw order per customer: segment, income, spending, age, gender.
    """
    if count < 1:
        raise ValueError(f"count must be a positive integer, got {count}")
    if rng is None:
        rng = np.random.default_rng()

    customers = []
    for customer_id in range(1, count + 1):
        _, _, income_range, spending_range, age_range = _pick_segment(rng.random())
        income = _uniform(rng, income_range)
        spending = _uniform(rng, spending_range)
        age = _uniform(rng, age_range)
        gender = GENDERS[int(rng.random() * len(GENDERS))]
        customers.append(Customer(customer_id, gender, age, income, spending))
    return customers


def customers_to_points(customers) -> np.ndarray:
    """(n, 2) array of (annual income, spending score)."""
    return np.array([[c.annual_income, c.spending_score] for c in customers], dtype=float).reshape(-1, 2)


def customers_to_frame(customers) -> pd.DataFrame:
    df = pd.DataFrame([
        (c.customer_id, c.gender, c.age, c.annual_income, c.spending_score)
        for c in customers
    ], columns=list(COLUMNS.values()))
    return df


def customers_from_frame(df: pd.DataFrame) -> list[Customer]:
    missing = [col for col in COLUMNS.values() if col not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")
    return [
        Customer(
            customer_id=int(row["CustomerID"]),
            gender=str(row["Gender"]),
            age=int(row["Age"]),
            annual_income=float(row["Annual Income (k$)"]),
            spending_score=float(row["Spending Score (1-100)"]),
        )
        for _, row in df.iterrows()
    ]


# === Loader for the Kaggle Mall_Customers.csv ===
def load_mall_data(path: str = "data/Mall_Customers.csv") -> list[Customer]:
    df = pd.read_csv(path)
    # some copies of the file ship "Genre" instead of "Gender"
    df = df.rename(columns={"Genre": "Gender"})
    return customers_from_frame(df)
