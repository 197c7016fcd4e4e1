# qml_core/qml_algorithms.py

from dataclasses import dataclass
from enum import Enum

from .qml_errors import UnknownAlgorithm


class Algorithm(str, Enum):
    """Closed set of simulated quantum models."""

    QUANTUM_AUTOENCODER = "quantum_autoencoder"
    VARIATIONAL_QUANTUM_CLASSIFIER = "variational_quantum_classifier"
    QUANTUM_SVM = "quantum_svm"
    QUANTUM_NEURAL_NETWORK = "quantum_neural_network"


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    Static display record for one algorithm.

    `qubit_count` and `gates` are labels only: nothing is sized or executed
    from them, apart from the runtime estimate shown next to the circuit.
    """

    name: str
    description: str
    color: str
    qubit_count: int
    gates: tuple[str, ...]


ALGORITHMS: dict[Algorithm, AlgorithmDescriptor] = {
    Algorithm.QUANTUM_AUTOENCODER: AlgorithmDescriptor(
        name="Quantum Autoencoder",
        description="Unsupervised learning to compress normal transactions and detect anomalies",
        color="#8B5CF6",
        qubit_count=6,
        gates=("RX", "RY", "RZ", "CNOT"),
    ),
    Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER: AlgorithmDescriptor(
        name="Variational Quantum Classifier",
        description="Supervised classification with parameterized quantum circuits",
        color="#10B981",
        qubit_count=8,
        gates=("RX", "RY", "RZ", "CNOT", "CZ"),
    ),
    Algorithm.QUANTUM_SVM: AlgorithmDescriptor(
        name="Quantum Support Vector Machine",
        description="Quantum kernel methods for anomaly boundary detection",
        color="#F59E0B",
        qubit_count=5,
        gates=("RX", "RY", "CNOT"),
    ),
    Algorithm.QUANTUM_NEURAL_NETWORK: AlgorithmDescriptor(
        name="Quantum Neural Network",
        description="Deep quantum circuits for complex pattern recognition",
        color="#EF4444",
        qubit_count=10,
        gates=("RX", "RY", "RZ", "CNOT", "CZ", "CRY"),
    ),
}

SECONDS_PER_QUBIT_LAYER = 0.1


def resolve_algorithm(algorithm_id) -> Algorithm:
    """
    Map an id string (or an Algorithm) onto the enum.

    Raises UnknownAlgorithm for anything outside the closed set.
    """
    if isinstance(algorithm_id, Algorithm):
        return algorithm_id
    try:
        return Algorithm(algorithm_id)
    except ValueError:
        raise UnknownAlgorithm(algorithm_id) from None


def get_descriptor(algorithm_id) -> AlgorithmDescriptor:
    return ALGORITHMS[resolve_algorithm(algorithm_id)]


def estimate_runtime_seconds(algorithm_id, circuit_depth: int) -> float:
    """Cosmetic runtime estimate: qubits x depth x 0.1s."""
    desc = get_descriptor(algorithm_id)
    return desc.qubit_count * circuit_depth * SECONDS_PER_QUBIT_LAYER
