import numpy as np
import pytest

from qml_core.qml_algorithms import Algorithm
from qml_core.qml_errors import InvalidConfiguration, UnknownAlgorithm
from qml_core.qml_scoring import score, score_batch


def test_svm_exact_values():
    assert np.isclose(score(np.zeros(6), "quantum_svm"), 1.0)
    expected = abs(np.exp(-6.0) - 0.5) * 2
    assert np.isclose(score(np.ones(6), "quantum_svm"), expected)


def test_variational_classifier_uses_label():
    p = 1.0 / (1.0 + np.exp(-6.0))
    ones = np.ones(6)
    assert np.isclose(score(ones, Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER, is_fraud=True), p)
    assert np.isclose(score(ones, Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER, is_fraud=False), 1 - p)
    assert np.isclose(score(np.zeros(6), Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER, is_fraud=True), 0.5)


def test_variational_classifier_requires_labels():
    with pytest.raises(InvalidConfiguration):
        score(np.ones(6), "variational_quantum_classifier")


def test_noise_free_strategies():
    x = np.full(6, 0.7)
    assert score(x, "quantum_autoencoder", noise_level=0.0) == 0.0
    assert score(np.zeros(6), "quantum_neural_network", circuit_depth=3, noise_level=0.0) == 0.0
    assert np.isclose(
        score(np.ones(6), "quantum_neural_network", circuit_depth=1, noise_level=0.0),
        np.tanh(1.0),
    )
    assert np.isclose(
        score(np.ones(6), "quantum_neural_network", circuit_depth=2, noise_level=0.0),
        np.tanh(np.tanh(1.0)),
    )


def test_neural_network_zero_depth_is_mean_of_features():
    x = np.array([0.1, -0.3, 0.2, 0.0, 0.4, -0.1])
    assert np.isclose(score(x, "quantum_neural_network", circuit_depth=0, noise_level=0.3), abs(x.mean()))


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_scores_clamped_to_unit_interval(algorithm):
    rng = np.random.default_rng(0)
    features = rng.uniform(-1, 1, size=(300, 6))
    labels = rng.random(300) < 0.5
    out = score_batch(features, algorithm, circuit_depth=8, noise_level=50.0, is_fraud=labels, rng=rng)
    assert out.shape == (300,)
    assert (out >= 0.0).all() and (out <= 1.0).all()


def test_autoencoder_large_noise_saturates():
    rng = np.random.default_rng(1)
    out = score_batch(np.ones((50, 6)), "quantum_autoencoder", noise_level=100.0, rng=rng)
    assert np.isclose(out.max(), 1.0)


def test_seeded_stochastic_strategies_reproducible():
    x = np.random.default_rng(2).uniform(-1, 1, size=(20, 6))
    for algo in ("quantum_autoencoder", "quantum_neural_network"):
        a = score_batch(x, algo, noise_level=0.3, rng=np.random.default_rng(5))
        b = score_batch(x, algo, noise_level=0.3, rng=np.random.default_rng(5))
        assert np.array_equal(a, b)


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithm):
        score(np.ones(6), "classical_lasso")
    with pytest.raises(InvalidConfiguration):
        score_batch(np.ones((2, 6)), "classical_lasso")


def test_label_shape_mismatch():
    with pytest.raises(InvalidConfiguration):
        score_batch(np.ones((3, 6)), "quantum_svm", is_fraud=np.array([True, False]))


def test_empty_batch():
    assert score_batch(np.zeros((0, 6)), "quantum_svm").shape == (0,)


def test_every_algorithm_has_a_strategy():
    from qml_core.qml_scoring import STRATEGIES

    assert set(STRATEGIES) == set(Algorithm)
