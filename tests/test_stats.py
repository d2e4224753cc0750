import numpy as np
import pytest

from mallseg.KMeansSolver import ClusterResult
from mallseg.stats import label_cluster, overview, summarize_clusters


@pytest.mark.parametrize("income, spending, label", [
    (90, 85, "High Value"),
    (90, 20, "Conservative"),
    (30, 85, "Ambitious"),
    (30, 20, "Budget Conscious"),
    (55, 55, "Moderate"),
    (70, 80, "Moderate"),
])
def test_label_cluster(income, spending, label):
    assert label_cluster(income, spending) == label


@pytest.fixture
def result():
    return ClusterResult(
        centroids=np.array([[20.4, 19.6], [95.0, 90.0], [50.0, 50.0]]),
        assignments=np.array([0, 0, 1, 1]),
        iterations=3,
        wcss=12.5,
    )


def test_summarize_clusters(make_customers, result):
    customers = make_customers([(20, 20), (21, 19), (94, 91), (96, 89)])
    summary = summarize_clusters(customers, result)

    assert list(summary["cluster"]) == [0, 1, 2]
    assert list(summary["count"]) == [2, 2, 0]
    assert summary["percentage"].sum() == pytest.approx(100.0)
    assert list(summary["label"]) == ["Budget Conscious", "High Value", "Moderate"]
    assert summary.loc[0, "avg_income"] == 20
    assert summary.loc[0, "avg_spending"] == 20
    assert summary.loc[0, "avg_age"] == 30
    assert summary.loc[0, "male_count"] == 1
    assert summary.loc[0, "female_count"] == 1
    assert np.isnan(summary.loc[2, "avg_age"])


def test_overview(make_customers, result):
    customers = make_customers([(20, 20), (21, 19), (94, 91), (96, 89)])
    info = overview(customers, result)
    assert info["total_customers"] == 4
    assert info["clusters"] == 3
    assert info["iterations"] == 3
