"""Simulated quantum scoring strategies.

Each strategy mimics the *shape* of a quantum model (reconstruction error,
class probability, kernel distance, deep circuit output) with ordinary
numpy math. Strategies are pure functions over a batch of encoded feature
vectors, shape (N, F), and return raw scores of shape (N,). The public
entry points clamp the result to [0, 1].

Randomness (autoencoder and neural network) comes only from the `rng`
argument, so seeded runs are reproducible.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .qml_algorithms import Algorithm, resolve_algorithm
from .qml_errors import InvalidConfiguration
from .qml_utils import centered_noise, clamp01, make_rng


def _autoencoder(features, circuit_depth, noise_level, is_fraud, rng):
    # Reconstruction = features with relative jitter of +/- noise_level/2.
    reconstruction = features * (1.0 + centered_noise(rng, noise_level, features.shape))
    return np.sum((features - reconstruction) ** 2, axis=1)


def _variational_classifier(features, circuit_depth, noise_level, is_fraud, rng):
    # NOTE: reads the ground-truth label. This is how the simulated
    # classifier reports "confidence in the correct class"; it is not a
    # blind detector and should not be benchmarked as one.
    if is_fraud is None:
        raise InvalidConfiguration(
            "variational_quantum_classifier needs the is_fraud labels"
        )
    class_prob = 1.0 / (1.0 + np.exp(-np.sum(features, axis=1)))
    return np.where(is_fraud, class_prob, 1.0 - class_prob)


def _svm(features, circuit_depth, noise_level, is_fraud, rng):
    kernel = np.exp(-np.sum(features ** 2, axis=1))
    return np.abs(kernel - 0.5) * 2.0


def _neural_network(features, circuit_depth, noise_level, is_fraud, rng):
    layer_output = features
    for _ in range(int(circuit_depth)):
        layer_output = np.tanh(layer_output + centered_noise(rng, noise_level, layer_output.shape))
    return np.abs(layer_output.mean(axis=1))


Strategy = Callable[..., np.ndarray]

STRATEGIES: dict[Algorithm, Strategy] = {
    Algorithm.QUANTUM_AUTOENCODER: _autoencoder,
    Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER: _variational_classifier,
    Algorithm.QUANTUM_SVM: _svm,
    Algorithm.QUANTUM_NEURAL_NETWORK: _neural_network,
}

_missing = set(Algorithm) - set(STRATEGIES)
if _missing:
    raise RuntimeError(f"No scoring strategy for {sorted(a.value for a in _missing)}")


def score_batch(
    features: np.ndarray,
    algorithm,
    circuit_depth: int = 4,
    noise_level: float = 0.1,
    *,
    is_fraud: Optional[np.ndarray] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Score a batch of encoded feature vectors.

    features: array of shape (N, F).
    is_fraud: boolean labels of shape (N,); only the variational classifier reads them.

    Returns an array of N scores in [0, 1].
    """
    algo = resolve_algorithm(algorithm)

    features = np.asarray(features, dtype=np.float64)
    if features.ndim != 2:
        raise ValueError(f"score_batch expects a 2D feature matrix, got shape {features.shape}")

    if is_fraud is not None:
        is_fraud = np.asarray(is_fraud, dtype=bool)
        if is_fraud.shape != (features.shape[0],):
            raise InvalidConfiguration(
                f"is_fraud.shape {is_fraud.shape} does not match {features.shape[0]} feature rows"
            )

    if features.shape[0] == 0:
        if algo is Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER and is_fraud is None:
            raise InvalidConfiguration(
                "variational_quantum_classifier needs the is_fraud labels"
            )
        return np.zeros(0, dtype=np.float64)

    raw = STRATEGIES[algo](features, circuit_depth, noise_level, is_fraud, make_rng(rng=rng))
    return clamp01(raw)


def score(
    features: np.ndarray,
    algorithm,
    circuit_depth: int = 4,
    noise_level: float = 0.1,
    *,
    is_fraud: Optional[bool] = None,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Score a single feature vector. See score_batch."""
    features = np.asarray(features, dtype=np.float64)
    if features.ndim != 1:
        raise ValueError(f"score expects a 1D feature vector, got shape {features.shape}")

    labels = None if is_fraud is None else np.array([bool(is_fraud)])
    out = score_batch(
        features.reshape(1, -1),
        algorithm,
        circuit_depth,
        noise_level,
        is_fraud=labels,
        rng=rng,
    )
    return float(out[0])
