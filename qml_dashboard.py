import os
import sys
import time

import pandas as pd
import streamlit as st

# Ensure project root is on sys.path (helps Streamlit find qml_core/qml_transactions)
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from qml_core.qml_algorithms import ALGORITHMS, Algorithm, estimate_runtime_seconds
from qml_core.qml_errors import InvalidConfiguration
from qml_core.qml_logging import configure_logging
from qml_transactions import (
    DetectionConfig,
    QuantumAnomalyDetector,
    compute_metrics,
    generate_synthetic_transactions,
)
from qml_transactions.detection_config import CIRCUIT_DEPTH_RANGE, NOISE_LEVEL_RANGE
from qml_transactions.transaction_reports import (
    compare_algorithms,
    flag_anomalies,
    scatter_points,
    score_histogram,
)

configure_logging()

# -----------------------------------------------------------------------------
# Streamlit page config
# -----------------------------------------------------------------------------
st.set_page_config(
    page_title="Quantum Machine Learning",
    layout="wide",
)

st.title("Quantum Machine Learning")
st.markdown("**Transaction Anomaly Detection Framework**")

# -----------------------------------------------------------------------------
# Session state
# -----------------------------------------------------------------------------
if "config" not in st.session_state:
    try:
        st.session_state["config"] = DetectionConfig.from_env()
    except InvalidConfiguration as exc:
        st.error(f"Ignoring environment overrides: {exc}")
        st.session_state["config"] = DetectionConfig()
    st.session_state["df"] = None
    st.session_state["results"] = None
    st.session_state["detector"] = QuantumAnomalyDetector()

base_config: DetectionConfig = st.session_state["config"]

# -----------------------------------------------------------------------------
# Sidebar controls
# -----------------------------------------------------------------------------
st.sidebar.header("Algorithm Selection")

algo_options = list(Algorithm)
algorithm = st.sidebar.radio(
    "Simulated quantum model",
    algo_options,
    index=algo_options.index(base_config.algorithm),
    format_func=lambda a: ALGORITHMS[a].name,
)
st.sidebar.caption(ALGORITHMS[algorithm].description)

st.sidebar.header("Parameters")
circuit_depth = st.sidebar.slider(
    "Circuit depth", CIRCUIT_DEPTH_RANGE[0], CIRCUIT_DEPTH_RANGE[1], base_config.circuit_depth
)
noise_level = st.sidebar.slider(
    "Noise level", NOISE_LEVEL_RANGE[0], NOISE_LEVEL_RANGE[1], base_config.noise_level, step=0.01
)
threshold = st.sidebar.slider("Anomaly threshold", 0.0, 1.0, base_config.threshold, step=0.01)

config = base_config.replace(
    algorithm=algorithm,
    circuit_depth=circuit_depth,
    noise_level=noise_level,
    threshold=threshold,
)
st.session_state["config"] = config

st.sidebar.header("Controls")
run_btn = st.sidebar.button("Run Detection")
reset_btn = st.sidebar.button("Reset")

# -----------------------------------------------------------------------------
# Generate / reset dataset
# -----------------------------------------------------------------------------
if reset_btn or st.session_state["df"] is None:
    st.session_state["df"] = generate_synthetic_transactions(
        count=config.n_transactions,
        fraud_rate=config.fraud_rate,
        seed=config.seed,
    )
    st.session_state["results"] = None

df = st.session_state["df"]
detector: QuantumAnomalyDetector = st.session_state["detector"]


def run_detection(cfg: DetectionConfig) -> pd.DataFrame:
    return detector.detect(
        df,
        cfg.algorithm,
        circuit_depth=cfg.circuit_depth,
        noise_level=cfg.noise_level,
        seed=cfg.seed,
    )


def detection_key(cfg: DetectionConfig) -> tuple:
    return (cfg.algorithm, cfg.circuit_depth, cfg.noise_level)


if run_btn:
    # Cosmetic training animation; the detection itself returns immediately.
    progress = st.progress(0, text="Training...")
    for step in range(101):
        time.sleep(0.01)
        progress.progress(step, text="Training...")
    progress.empty()
    st.session_state["results"] = None

# Rerun detection whenever the model or its circuit parameters change.
if st.session_state["results"] is None or st.session_state.get("results_key") != detection_key(config):
    st.session_state["results"] = run_detection(config)
    st.session_state["results_key"] = detection_key(config)

results = st.session_state["results"]

metrics = compute_metrics(results, config.threshold)

# -----------------------------------------------------------------------------
# Metric tiles
# -----------------------------------------------------------------------------
col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Accuracy", f"{metrics.accuracy:.1%}")
with col2:
    st.metric("Precision", f"{metrics.precision:.1%}")
with col3:
    st.metric("Recall", f"{metrics.recall:.1%}")
with col4:
    st.metric("F1 Score", f"{metrics.f1:.1%}")

anomalies = flag_anomalies(results, config.threshold)
st.write(
    f"**{len(anomalies):,}** of **{len(results):,}** transactions flagged "
    f"(TP={metrics.true_positive}, FP={metrics.false_positive}, "
    f"TN={metrics.true_negative}, FN={metrics.false_negative})."
)

if config.algorithm is Algorithm.VARIATIONAL_QUANTUM_CLASSIFIER:
    st.warning(
        "The variational classifier reads the ground-truth label when scoring, "
        "so its metrics are not comparable to a blind detector."
    )

# -----------------------------------------------------------------------------
# Charts
# -----------------------------------------------------------------------------
left, right = st.columns(2)

with left:
    st.subheader("Anomaly Detection Results")
    plot_df = scatter_points(results)
    plot_df["class"] = plot_df["is_fraud"].map({True: "Fraudulent", False: "Normal"})
    st.scatter_chart(plot_df, x="amount", y="anomaly_score", color="class")

with right:
    st.subheader("Anomaly Score Distribution")
    st.bar_chart(score_histogram(results).set_index("range"))

st.subheader("Algorithm Performance Comparison")
comparison = compare_algorithms(
    df,
    circuit_depth=config.circuit_depth,
    noise_level=config.noise_level,
    threshold=config.threshold,
    seed=config.seed,
)
st.bar_chart(comparison.set_index("name")[["accuracy", "f1"]])

# -----------------------------------------------------------------------------
# Current algorithm details
# -----------------------------------------------------------------------------
desc = ALGORITHMS[config.algorithm]
st.subheader(f"Current Algorithm: {desc.name}")
st.write(desc.description)
st.markdown("**Gates:** " + " ".join(f"`{g}`" for g in desc.gates))
st.caption(
    f"Qubits: {desc.qubit_count} | Depth: {config.circuit_depth} | "
    f"Noise: {config.noise_level * 100:.0f}% | "
    f"Runtime: ~{estimate_runtime_seconds(config.algorithm, config.circuit_depth):.1f}s"
)

st.markdown("### Flagged Transactions (first 200 rows)")
st.dataframe(anomalies.head(200))

st.caption("Simulated quantum computing environment - Educational and research purposes")
