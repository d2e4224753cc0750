import numpy as np
import pandas as pd

from mallseg.customers import customers_to_frame
from mallseg.KMeansSolver import ClusterResult


def label_cluster(avg_income: float, avg_spending: float) -> str:
    if avg_income > 70 and avg_spending > 70:
        return "High Value"
    if avg_income > 70 and avg_spending < 40:
        return "Conservative"
    if avg_income < 40 and avg_spending > 70:
        return "Ambitious"
    if avg_income < 40 and avg_spending < 40:
        return "Budget Conscious"
    return "Moderate"


def overview(customers, result: ClusterResult) -> dict:
    return {
        "total_customers": len(customers),
        "clusters": result.k,
        "iterations": result.iterations,
        "converged": result.converged,
        "wcss": result.wcss,
    }


def summarize_clusters(customers, result: ClusterResult) -> pd.DataFrame:
    """
    One row per cluster index: size, share, centroid income/spending,
    average age, gender split and a descriptive label.
    """
    df = customers_to_frame(customers)
    df["cluster"] = np.asarray(result.assignments, dtype=int)

    rows = []
    for index, (income, spending) in enumerate(result.centroids):
        members = df[df["cluster"] == index]
        avg_income = int(round(income))
        avg_spending = int(round(spending))
        rows.append({
            "cluster": index,
            "count": len(members),
            "percentage": 100.0 * len(members) / len(df),
            "avg_income": avg_income,
            "avg_spending": avg_spending,
            "avg_age": round(members["Age"].mean()) if len(members) else np.nan,
            "male_count": int((members["Gender"] == "Male").sum()),
            "female_count": int((members["Gender"] == "Female").sum()),
            "label": label_cluster(avg_income, avg_spending),
        })
    return pd.DataFrame(rows)
