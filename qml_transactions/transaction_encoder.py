from typing import Any, Mapping, Union

import numpy as np
import pandas as pd

from qml_core.qml_angle_encoder import AngleEncoder
from .transaction_schema import (
    HOURS_PER_DAY,
    N_LOCATIONS,
    N_MERCHANT_CATEGORIES,
    Transaction,
)

TransactionLike = Union[Transaction, pd.Series, Mapping[str, Any]]

FEATURE_NAMES = [
    "log_amount",
    "time_of_day",
    "location",
    "merchant_category",
    "frequency",
    "velocity",
]


class TransactionFeatureEncoder:
    """
    Transaction-specific wrapper around the generic AngleEncoder.

    Pipeline:
    - Normalize the six numeric fields of a transaction:
        log(amount + 1) / 10, time / 24, location / 100,
        merchant_category / 20, frequency (as is), velocity / 10
    - Angle-encode each one: sin(f * pi / 2).

    frequency and velocity are not clipped first, so large values wrap
    around the sine. That is expected, not an error.
    """

    n_features = len(FEATURE_NAMES)

    def __init__(self):
        self.angle_encoder = AngleEncoder()

    @staticmethod
    def _field(transaction: TransactionLike, name: str) -> float:
        if isinstance(transaction, Transaction):
            return float(getattr(transaction, name))
        return float(transaction[name])

    def raw_features(self, transaction: TransactionLike) -> np.ndarray:
        def f(name: str) -> float:
            return self._field(transaction, name)

        return np.array(
            [
                np.log(f("amount") + 1.0) / 10.0,
                f("time") / HOURS_PER_DAY,
                f("location") / N_LOCATIONS,
                f("merchant_category") / N_MERCHANT_CATEGORIES,
                f("frequency"),
                f("velocity") / 10.0,
            ],
            dtype=np.float64,
        )

    def encode(self, transaction: TransactionLike) -> np.ndarray:
        """Feature vector (6,) for a single transaction."""
        return self.angle_encoder.encode(self.raw_features(transaction))

    def raw_feature_matrix(self, df: pd.DataFrame) -> np.ndarray:
        if len(df) == 0:
            return np.zeros((0, self.n_features), dtype=np.float64)
        return np.column_stack(
            [
                np.log(df["amount"].to_numpy(dtype=float) + 1.0) / 10.0,
                df["time"].to_numpy(dtype=float) / HOURS_PER_DAY,
                df["location"].to_numpy(dtype=float) / N_LOCATIONS,
                df["merchant_category"].to_numpy(dtype=float) / N_MERCHANT_CATEGORIES,
                df["frequency"].to_numpy(dtype=float),
                df["velocity"].to_numpy(dtype=float) / 10.0,
            ]
        )

    def encode_frame(self, df: pd.DataFrame) -> np.ndarray:
        """Feature matrix (N, 6) for a whole dataset, row order preserved."""
        return self.angle_encoder.encode(self.raw_feature_matrix(df))


_DEFAULT_ENCODER = TransactionFeatureEncoder()


def encode(transaction: TransactionLike) -> np.ndarray:
    return _DEFAULT_ENCODER.encode(transaction)
