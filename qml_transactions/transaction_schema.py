"""
Defines the schema for synthetic transactions used in the demo.

Each row in a dataset has exactly these columns:

- id: zero-based generation index, unique within the dataset
- amount: positive transaction amount (currency units)
- time: hour of day in [0, 24)
- location: opaque location code in [0, 100)
- merchant_category: integer category in [0, 20)
- frequency: non-negative transaction frequency signal
- velocity: non-negative transaction velocity signal
- is_fraud: ground-truth label, fixed at creation
- anomaly_score: in [0, 1]; 0 until a detection run overwrites it
"""

from dataclasses import asdict, dataclass
from typing import Iterable

import pandas as pd

TRANSACTION_COLUMNS = [
    "id",
    "amount",
    "time",
    "location",
    "merchant_category",
    "frequency",
    "velocity",
    "is_fraud",
    "anomaly_score",
]

COLUMN_DTYPES = {
    "id": "int64",
    "amount": "float64",
    "time": "float64",
    "location": "float64",
    "merchant_category": "int64",
    "frequency": "float64",
    "velocity": "float64",
    "is_fraud": "bool",
    "anomaly_score": "float64",
}

HOURS_PER_DAY = 24.0
N_LOCATIONS = 100.0
N_MERCHANT_CATEGORIES = 20


@dataclass(frozen=True)
class Transaction:
    id: int
    amount: float
    time: float
    location: float
    merchant_category: int
    frequency: float
    velocity: float
    is_fraud: bool
    anomaly_score: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def empty_frame() -> pd.DataFrame:
    return frame_from_transactions([])


def frame_from_transactions(records: Iterable[Transaction]) -> pd.DataFrame:
    """Build a dataset frame from Transaction records, with schema dtypes."""
    rows = [r.to_dict() for r in records]
    df = pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)
    return df.astype(COLUMN_DTYPES)


def check_frame(df: pd.DataFrame) -> None:
    missing = [c for c in TRANSACTION_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Dataset is missing columns: {missing}")
