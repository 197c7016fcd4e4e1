from typing import Optional

import numpy as np
import pandas as pd

from qml_core.qml_errors import InvalidConfiguration
from qml_core.qml_logging import get_logger
from qml_core.qml_utils import make_rng
from .transaction_schema import (
    COLUMN_DTYPES,
    HOURS_PER_DAY,
    N_LOCATIONS,
    N_MERCHANT_CATEGORIES,
    TRANSACTION_COLUMNS,
    empty_frame,
)

logger = get_logger(__name__)

DEFAULT_COUNT = 1000
DEFAULT_FRAUD_RATE = 0.05


def generate_synthetic_transactions(
    count: int = DEFAULT_COUNT,
    fraud_rate: float = DEFAULT_FRAUD_RATE,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """
    Generate a fictional labeled transaction dataset.

    Fraudulent rows differ from normal ones in three signals:
    - amount: large tickets (5k-15k) instead of everyday ones (10-1010)
    - frequency: near zero instead of 0.5-2.5
    - velocity: 5-15 instead of 0-3

    Every base amount gets a symmetric +/-10% jitter. time, location and
    merchant_category are drawn the same way for both classes.

    Pass `seed` or an explicit `rng` for reproducible datasets; each call
    is otherwise independent.
    """
    if count < 0:
        raise InvalidConfiguration(f"count must be non-negative, got {count}")
    if not 0.0 <= fraud_rate <= 1.0:
        raise InvalidConfiguration(f"fraud_rate must be in [0, 1], got {fraud_rate}")

    count = int(count)
    if count == 0:
        return empty_frame()

    rng = make_rng(seed, rng)

    is_fraud = rng.random(count) < fraud_rate

    base_amount = np.where(
        is_fraud,
        rng.uniform(5000.0, 15000.0, size=count),
        rng.uniform(10.0, 1010.0, size=count),
    )
    amount = base_amount + rng.uniform(-0.1, 0.1, size=count) * base_amount

    frequency = np.where(
        is_fraud,
        rng.uniform(0.0, 0.1, size=count),
        rng.uniform(0.5, 2.5, size=count),
    )
    velocity = np.where(
        is_fraud,
        rng.uniform(5.0, 15.0, size=count),
        rng.uniform(0.0, 3.0, size=count),
    )

    df = pd.DataFrame(
        {
            "id": np.arange(count),
            "amount": amount,
            "time": rng.uniform(0.0, HOURS_PER_DAY, size=count),
            "location": rng.uniform(0.0, N_LOCATIONS, size=count),
            "merchant_category": rng.integers(0, N_MERCHANT_CATEGORIES, size=count),
            "frequency": frequency,
            "velocity": velocity,
            "is_fraud": is_fraud,
            "anomaly_score": np.zeros(count),
        },
        columns=TRANSACTION_COLUMNS,
    ).astype(COLUMN_DTYPES)

    logger.info("Generated %d synthetic transactions (%d fraudulent)", count, int(is_fraud.sum()))
    return df
