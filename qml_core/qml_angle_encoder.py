# qml_core/qml_angle_encoder.py

import numpy as np


class AngleEncoder:
    """
    Generic angle encoder.

    Given an array of raw (roughly [0,1]-normalized) features, returns the
    rotation-angle embedding

        x_i = sin(f_i * pi / 2)

    Inputs are not clipped: values outside [0,1] still pass through the sine,
    which folds them back and narrows their discriminative range.

    Domain-specific layers (e.g., qml_transactions.TransactionFeatureEncoder)
    decide how raw features are built from records.
    """

    def __init__(self, scale: float = np.pi / 2):
        self.scale = scale

    def encode(self, features: np.ndarray) -> np.ndarray:
        features = np.asarray(features, dtype=np.float64)
        return np.sin(features * self.scale)
