"""
Transaction-anomaly integration for QML Core.

This package:
- Defines the synthetic transaction schema.
- Generates labeled synthetic datasets.
- Encodes transactions into angle-encoded feature vectors.
- Runs simulated quantum detection passes and computes metrics.

Report helpers for the dashboard live in qml_transactions.transaction_reports
and are imported explicitly by callers.
"""

from .detection_config import DEFAULT_CONFIG, DetectionConfig
from .synthetic_data_generator import generate_synthetic_transactions
from .transaction_detector import QuantumAnomalyDetector, compute_metrics, detect
from .transaction_encoder import TransactionFeatureEncoder, encode
from .transaction_schema import TRANSACTION_COLUMNS, Transaction, frame_from_transactions

generate = generate_synthetic_transactions

__all__ = [
    "DEFAULT_CONFIG",
    "DetectionConfig",
    "QuantumAnomalyDetector",
    "TRANSACTION_COLUMNS",
    "Transaction",
    "TransactionFeatureEncoder",
    "compute_metrics",
    "detect",
    "encode",
    "frame_from_transactions",
    "generate",
    "generate_synthetic_transactions",
]
