import numpy as np
import pytest

from qml_core.qml_errors import InvalidConfiguration
from qml_transactions import TRANSACTION_COLUMNS, generate_synthetic_transactions


def test_amounts_positive_and_fraud_count_bounded():
    for seed in range(5):
        df = generate_synthetic_transactions(500, fraud_rate=0.2, seed=seed)
        assert len(df) == 500
        assert (df["amount"] > 0).all()
        assert 0 <= int(df["is_fraud"].sum()) <= 500


def test_schema_ids_and_initial_scores():
    df = generate_synthetic_transactions(50, seed=0)
    assert list(df.columns) == TRANSACTION_COLUMNS
    assert df["id"].tolist() == list(range(50))
    assert (df["anomaly_score"] == 0.0).all()
    assert df["is_fraud"].dtype == bool


def test_field_ranges():
    df = generate_synthetic_transactions(2000, fraud_rate=0.3, seed=1)
    assert df["time"].between(0, 24, inclusive="left").all()
    assert df["location"].between(0, 100, inclusive="left").all()
    assert df["merchant_category"].between(0, 19).all()

    fraud = df[df["is_fraud"]]
    normal = df[~df["is_fraud"]]
    assert fraud["amount"].between(5000 * 0.9, 15000 * 1.1).all()
    assert normal["amount"].between(10 * 0.9, 1010 * 1.1).all()
    assert fraud["frequency"].between(0, 0.1, inclusive="left").all()
    assert normal["frequency"].between(0.5, 2.5, inclusive="left").all()
    assert fraud["velocity"].between(5, 15, inclusive="left").all()
    assert normal["velocity"].between(0, 3, inclusive="left").all()


def test_extreme_fraud_rates():
    assert not generate_synthetic_transactions(200, fraud_rate=0.0, seed=2)["is_fraud"].any()
    assert generate_synthetic_transactions(200, fraud_rate=1.0, seed=2)["is_fraud"].all()


def test_seed_and_rng_reproducible():
    a = generate_synthetic_transactions(100, seed=7)
    b = generate_synthetic_transactions(100, seed=7)
    assert a.equals(b)

    c = generate_synthetic_transactions(100, rng=np.random.default_rng(7))
    assert a.equals(c)


def test_zero_count_returns_empty_frame():
    df = generate_synthetic_transactions(0)
    assert len(df) == 0
    assert list(df.columns) == TRANSACTION_COLUMNS


@pytest.mark.parametrize("count,fraud_rate", [(-1, 0.05), (10, -0.1), (10, 1.5)])
def test_invalid_arguments(count, fraud_rate):
    with pytest.raises(InvalidConfiguration):
        generate_synthetic_transactions(count, fraud_rate=fraud_rate)


def test_default_count_and_fraud_rate():
    df = generate_synthetic_transactions(seed=0)
    assert len(df) == 1000
    # 5% of 1000, with generous slack for the Bernoulli draw
    assert 20 <= int(df["is_fraud"].sum()) <= 90
