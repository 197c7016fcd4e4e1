"""Configuration defaults for a detection run.

The dashboard keeps one DetectionConfig in session state and threads it
through every core call; nothing in the core reads global settings.
"""

import dataclasses
import os
from dataclasses import dataclass
from typing import Optional

from qml_core.qml_algorithms import Algorithm, resolve_algorithm
from qml_core.qml_errors import InvalidConfiguration

CIRCUIT_DEPTH_RANGE = (2, 8)
NOISE_LEVEL_RANGE = (0.0, 0.5)
THRESHOLD_RANGE = (0.0, 1.0)

ENV_PREFIX = "QML_"


@dataclass(frozen=True)
class DetectionConfig:
    algorithm: Algorithm = Algorithm.QUANTUM_AUTOENCODER
    circuit_depth: int = 4
    noise_level: float = 0.1
    threshold: float = 0.5
    # Shown next to the controls; no strategy trains on it.
    learning_rate: float = 0.01
    n_transactions: int = 1000
    fraud_rate: float = 0.05
    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "algorithm", resolve_algorithm(self.algorithm))
        self.validate()

    def validate(self) -> None:
        lo, hi = CIRCUIT_DEPTH_RANGE
        if not lo <= self.circuit_depth <= hi:
            raise InvalidConfiguration(f"circuit_depth must be in [{lo}, {hi}], got {self.circuit_depth}")
        lo, hi = NOISE_LEVEL_RANGE
        if not lo <= self.noise_level <= hi:
            raise InvalidConfiguration(f"noise_level must be in [{lo}, {hi}], got {self.noise_level}")
        lo, hi = THRESHOLD_RANGE
        if not lo <= self.threshold <= hi:
            raise InvalidConfiguration(f"threshold must be in [{lo}, {hi}], got {self.threshold}")
        if not 0.0 <= self.fraud_rate <= 1.0:
            raise InvalidConfiguration(f"fraud_rate must be in [0, 1], got {self.fraud_rate}")
        if self.n_transactions < 0:
            raise InvalidConfiguration(f"n_transactions must be non-negative, got {self.n_transactions}")

    def replace(self, **changes) -> "DetectionConfig":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ=None) -> "DetectionConfig":
        """Defaults overridden by PREFIX_<FIELD> environment variables."""
        environ = os.environ if environ is None else environ
        casts = {
            "algorithm": str,
            "circuit_depth": int,
            "noise_level": float,
            "threshold": float,
            "learning_rate": float,
            "n_transactions": int,
            "fraud_rate": float,
            "seed": int,
        }
        kwargs = {}
        for name, cast in casts.items():
            raw = environ.get(prefix + name.upper())
            if raw is None or raw == "":
                continue
            try:
                kwargs[name] = cast(raw)
            except ValueError:
                raise InvalidConfiguration(f"{prefix}{name.upper()}={raw!r} is not a valid {cast.__name__}") from None
        return cls(**kwargs)


DEFAULT_CONFIG = DetectionConfig()
