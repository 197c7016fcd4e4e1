from typing import Optional

import numpy as np
import pandas as pd

from qml_core.qml_algorithms import Algorithm, resolve_algorithm
from qml_core.qml_logging import get_logger
from qml_core.qml_metrics import MetricsSummary, summarize_predictions, validate_threshold
from qml_core.qml_scoring import score, score_batch
from qml_core.qml_utils import make_rng
from .transaction_encoder import TransactionFeatureEncoder, TransactionLike
from .transaction_schema import Transaction, check_frame

logger = get_logger(__name__)


class QuantumAnomalyDetector:
    """
    Runs one simulated quantum detection pass over a dataset.

    - Encodes every transaction with TransactionFeatureEncoder.
    - Scores the feature matrix with the selected strategy.
    - Returns a copy of the dataset with a fresh anomaly_score column.

    The input frame is never modified, and an unknown algorithm id fails
    before anything is scored.
    """

    def __init__(self, encoder: Optional[TransactionFeatureEncoder] = None):
        self.encoder = encoder or TransactionFeatureEncoder()

    def score_transaction(
        self,
        transaction: TransactionLike,
        algorithm,
        circuit_depth: int = 4,
        noise_level: float = 0.1,
        rng: Optional[np.random.Generator] = None,
    ) -> float:
        algo = resolve_algorithm(algorithm)
        features = self.encoder.encode(transaction)
        # Only the variational classifier reads the label.
        is_fraud = None
        if algo is Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER:
            if isinstance(transaction, Transaction):
                is_fraud = transaction.is_fraud
            else:
                is_fraud = transaction.get("is_fraud")
        return score(
            features,
            algo,
            circuit_depth,
            noise_level,
            is_fraud=is_fraud,
            rng=rng,
        )

    def detect(
        self,
        dataset: pd.DataFrame,
        algorithm,
        circuit_depth: int = 4,
        noise_level: float = 0.1,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> pd.DataFrame:
        algo = resolve_algorithm(algorithm)
        check_frame(dataset)

        features = self.encoder.encode_frame(dataset)
        scores = score_batch(
            features,
            algo,
            circuit_depth,
            noise_level,
            is_fraud=dataset["is_fraud"].to_numpy(dtype=bool),
            rng=make_rng(seed, rng),
        )

        annotated = dataset.copy()
        annotated["anomaly_score"] = scores
        logger.info(
            "Scored %d transactions with %s (depth=%d, noise=%.2f)",
            len(annotated),
            algo.value,
            circuit_depth,
            noise_level,
        )
        return annotated


def compute_metrics(dataset: pd.DataFrame, threshold: float = 0.5) -> MetricsSummary:
    """
    Precision / recall / F1 / accuracy of anomaly_score > threshold against is_fraud.

    An empty dataset yields an all-zero summary rather than an error.
    """
    threshold = validate_threshold(threshold)
    if len(dataset) == 0:
        logger.debug("compute_metrics called on an empty dataset; returning zeros")
        return MetricsSummary()

    check_frame(dataset)
    return summarize_predictions(
        dataset["anomaly_score"].to_numpy(dtype=float),
        dataset["is_fraud"].to_numpy(dtype=bool),
        threshold,
    )


_DEFAULT_DETECTOR = QuantumAnomalyDetector()


def detect(
    dataset: pd.DataFrame,
    algorithm,
    circuit_depth: int = 4,
    noise_level: float = 0.1,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    return _DEFAULT_DETECTOR.detect(
        dataset,
        algorithm,
        circuit_depth=circuit_depth,
        noise_level=noise_level,
        seed=seed,
        rng=rng,
    )
