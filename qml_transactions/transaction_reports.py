"""Derived views over an annotated dataset, shaped for charts and tables."""

from typing import Optional

import numpy as np
import pandas as pd

from qml_core.qml_algorithms import ALGORITHMS, Algorithm
from qml_core.qml_metrics import validate_threshold
from .transaction_detector import QuantumAnomalyDetector, compute_metrics


def flag_anomalies(dataset: pd.DataFrame, threshold: float = 0.5) -> pd.DataFrame:
    threshold = validate_threshold(threshold)
    return dataset[dataset["anomaly_score"] > threshold].reset_index(drop=True)


def _edge(i: int, bins: int) -> str:
    # One decimal for 10 bins, more only when the edges need it.
    for digits in range(1, 7):
        text = f"{i / bins:.{digits}f}"
        if np.isclose(float(text), i / bins):
            return text
    return f"{i / bins:g}"


def score_histogram(dataset: pd.DataFrame, bins: int = 10) -> pd.DataFrame:
    """
    Count anomaly scores per equal-width bin over [0, 1].

    Bin index is floor(score * (bins - 0.01)), which keeps a score of
    exactly 1.0 in the last bin.
    """
    if bins <= 0:
        raise ValueError("bins must be positive")
    scores = dataset["anomaly_score"].to_numpy(dtype=float)
    idx = np.floor(scores * (bins - 0.01)).astype(int)
    counts = np.bincount(idx, minlength=bins)[:bins]
    labels = [f"{_edge(i, bins)}-{_edge(i + 1, bins)}" for i in range(bins)]
    return pd.DataFrame({"range": labels, "count": counts})


def scatter_points(dataset: pd.DataFrame) -> pd.DataFrame:
    return dataset[["amount", "anomaly_score", "is_fraud"]].copy()


def compare_algorithms(
    dataset: pd.DataFrame,
    circuit_depth: int = 4,
    noise_level: float = 0.1,
    threshold: float = 0.5,
    seed: Optional[int] = None,
    detector: Optional[QuantumAnomalyDetector] = None,
) -> pd.DataFrame:
    """
    Run every algorithm on the same dataset and tabulate accuracy and F1.

    One row per algorithm, in enum order.
    """
    detector = detector or QuantumAnomalyDetector()
    rng = np.random.default_rng(seed)
    rows = []
    for algo in Algorithm:
        annotated = detector.detect(dataset, algo, circuit_depth, noise_level, rng=rng)
        metrics = compute_metrics(annotated, threshold)
        desc = ALGORITHMS[algo]
        rows.append(
            {
                "algorithm": algo.value,
                "name": desc.name,
                "accuracy": metrics.accuracy,
                "f1": metrics.f1,
                "color": desc.color,
            }
        )
    return pd.DataFrame(rows)
