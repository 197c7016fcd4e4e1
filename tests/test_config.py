import pytest

from qml_core.qml_algorithms import Algorithm
from qml_core.qml_errors import InvalidConfiguration, UnknownAlgorithm
from qml_transactions import DEFAULT_CONFIG, DetectionConfig


def test_defaults():
    assert DEFAULT_CONFIG.algorithm is Algorithm.QUANTUM_AUTOENCODER
    assert DEFAULT_CONFIG.circuit_depth == 4
    assert DEFAULT_CONFIG.noise_level == 0.1
    assert DEFAULT_CONFIG.threshold == 0.5
    assert DEFAULT_CONFIG.n_transactions == 1000
    assert DEFAULT_CONFIG.fraud_rate == 0.05


def test_algorithm_string_is_resolved():
    cfg = DetectionConfig(algorithm="quantum_svm")
    assert cfg.algorithm is Algorithm.QUANTUM_SVM


@pytest.mark.parametrize(
    "changes",
    [
        {"circuit_depth": 1},
        {"circuit_depth": 9},
        {"noise_level": 0.6},
        {"threshold": 1.5},
        {"fraud_rate": -0.1},
        {"n_transactions": -5},
    ],
)
def test_out_of_range_values_rejected(changes):
    with pytest.raises(InvalidConfiguration):
        DEFAULT_CONFIG.replace(**changes)


def test_unknown_algorithm_rejected():
    with pytest.raises(UnknownAlgorithm):
        DetectionConfig(algorithm="quantum_boosting")


def test_replace_returns_new_config():
    cfg = DEFAULT_CONFIG.replace(circuit_depth=6)
    assert cfg.circuit_depth == 6
    assert DEFAULT_CONFIG.circuit_depth == 4


def test_from_env_overrides():
    env = {
        "QML_ALGORITHM": "quantum_neural_network",
        "QML_CIRCUIT_DEPTH": "7",
        "QML_NOISE_LEVEL": "0.25",
        "QML_SEED": "11",
        "QML_THRESHOLD": "",
    }
    cfg = DetectionConfig.from_env(environ=env)
    assert cfg.algorithm is Algorithm.QUANTUM_NEURAL_NETWORK
    assert cfg.circuit_depth == 7
    assert cfg.noise_level == 0.25
    assert cfg.seed == 11
    assert cfg.threshold == 0.5


def test_from_env_bad_value():
    with pytest.raises(InvalidConfiguration):
        DetectionConfig.from_env(environ={"QML_CIRCUIT_DEPTH": "deep"})
