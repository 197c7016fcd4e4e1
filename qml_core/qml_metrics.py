from dataclasses import asdict, dataclass

import numpy as np

from .qml_errors import InvalidConfiguration


@dataclass(frozen=True)
class MetricsSummary:
    """
    Binary-classification quality for one thresholded detection run.

    Ratios are 0.0 whenever their denominator is 0. The four counts always
    add up to the number of scored records.
    """

    precision: float = 0.0
    recall: float = 0.0
    f1: float = 0.0
    accuracy: float = 0.0
    true_positive: int = 0
    false_positive: int = 0
    true_negative: int = 0
    false_negative: int = 0

    @property
    def total(self) -> int:
        return self.true_positive + self.false_positive + self.true_negative + self.false_negative

    @classmethod
    def from_counts(cls, tp: int, fp: int, tn: int, fn: int) -> "MetricsSummary":
        precision = _safe_div(tp, tp + fp)
        recall = _safe_div(tp, tp + fn)
        f1 = _safe_div(2.0 * precision * recall, precision + recall)
        accuracy = _safe_div(tp + tn, tp + fp + tn + fn)
        return cls(
            precision=precision,
            recall=recall,
            f1=f1,
            accuracy=accuracy,
            true_positive=int(tp),
            false_positive=int(fp),
            true_negative=int(tn),
            false_negative=int(fn),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def _safe_div(num: float, den: float) -> float:
    if den == 0:
        return 0.0
    return float(num) / float(den)


def validate_threshold(threshold: float) -> float:
    threshold = float(threshold)
    if not 0.0 <= threshold <= 1.0:
        raise InvalidConfiguration(f"threshold must be in [0, 1], got {threshold}")
    return threshold


def confusion_counts(scores, labels, threshold: float = 0.5) -> tuple[int, int, int, int]:
    """
    Tally (tp, fp, tn, fn) with predicted = score > threshold (strict).
    """
    scores = np.asarray(scores, dtype=float)
    labels = np.asarray(labels, dtype=bool)
    if scores.shape != labels.shape:
        raise ValueError(f"scores.shape {scores.shape} != labels.shape {labels.shape}")

    predicted = scores > threshold
    tp = int(np.sum(predicted & labels))
    fp = int(np.sum(predicted & ~labels))
    fn = int(np.sum(~predicted & labels))
    tn = int(np.sum(~predicted & ~labels))
    return tp, fp, tn, fn


def summarize_predictions(scores, labels, threshold: float = 0.5) -> MetricsSummary:
    threshold = validate_threshold(threshold)
    tp, fp, tn, fn = confusion_counts(scores, labels, threshold)
    return MetricsSummary.from_counts(tp, fp, tn, fn)
