"""
Binary confusion matrix at a fixed decision threshold.

An item is predicted positive when its score is at least the threshold and
is actually positive when its label equals 1. Any other label counts as
negative.

Ratios whose denominator is zero (for example precision when nothing is
predicted positive) are ``nan``; test with :func:`math.isnan`.
"""

from dataclasses import dataclass

import numpy as np

from ._base import frozen, validate_pair


def _ratio(num: float, den: float) -> float:
    if den == 0:
        return float("nan")
    return num / den


@dataclass(frozen=True)
class ConfusionMatrix:
    """Counts of a binary confusion matrix."""

    observations: int
    pos: int
    neg: int
    true_pos: int
    true_neg: int
    false_pos: int
    false_neg: int

    @classmethod
    def from_scores(cls, scores, labels, threshold: float) -> "ConfusionMatrix":
        """Tally a matrix; see :func:`confusion_matrix`."""
        s, y = validate_pair(scores, labels)
        predicted = s >= threshold
        actual = y == 1
        return cls(
            observations=int(s.size),
            pos=int(np.count_nonzero(actual)),
            neg=int(np.count_nonzero(~actual)),
            true_pos=int(np.count_nonzero(actual & predicted)),
            true_neg=int(np.count_nonzero(~actual & ~predicted)),
            false_pos=int(np.count_nonzero(~actual & predicted)),
            false_neg=int(np.count_nonzero(actual & ~predicted)),
        )

    @property
    def precision(self) -> float:
        """TP / (TP + FP)."""
        return _ratio(self.true_pos, self.true_pos + self.false_pos)

    @property
    def recall(self) -> float:
        """TP / (TP + FN)."""
        return _ratio(self.true_pos, self.true_pos + self.false_neg)

    @property
    def accuracy(self) -> float:
        """(TN + TP) / observations."""
        return _ratio(self.true_neg + self.true_pos, self.observations)

    @property
    def f1(self) -> float:
        """Harmonic mean of precision and recall."""
        p, r = self.precision, self.recall
        return _ratio(2 * p * r, p + r)

    def to_array(self) -> np.ndarray:
        """
        Cell grid for heat-map style rendering.

        Returns:
            np.ndarray: Read-only ``(2, 2)`` integer array
            ``[[TN, FP], [FN, TP]]``. Rows are actual No/Yes, columns are
            predicted No/Yes.
        """
        return frozen(
            np.array(
                [[self.true_neg, self.false_pos], [self.false_neg, self.true_pos]],
                dtype=int,
            )
        )

    def __str__(self) -> str:
        horiz = "-" * 102 + "\n"
        s = f"Observations = {self.observations:<10d} |       Predicted No       |       Predicted Yes      |\n"
        s += horiz
        s += f"Actual No                 |       TN = {self.true_neg:<10d}    |       FP = {self.false_pos:<10d}    |\n"
        s += (
            f"Actual Yes                |       FN = {self.false_neg:<10d}    |"
            f"       TP = {self.true_pos:<10d}    |  Recall = {self.recall:f}\n"
        )
        s += horiz
        s += f"{'':<53s}|   Precision = {self.precision:<10f} |  Accuracy = {self.accuracy:f}\n"
        s += f"F1 Score = {self.f1:f}\n"
        return s


def confusion_matrix(scores, labels, threshold: float) -> ConfusionMatrix:
    """
    Tally a binary confusion matrix.

    Args:
        scores: Predicted probability or score per item.
        labels: Ground-truth labels aligned with ``scores``; ``1`` is the
            positive class.
        threshold: Items scoring at least ``threshold`` are predicted
            positive.

    Returns:
        ConfusionMatrix: Immutable counts with ratio properties.

    Raises:
        ValueError: If ``scores`` and ``labels`` differ in length or hold
            NaN or Inf values.

    Examples:
        >>> cm = confusion_matrix([0.1, 0.9, 0.6, 0.3], [0, 1, 1, 0], 0.5)
        >>> cm.true_pos, cm.false_pos, cm.true_neg, cm.false_neg
        (2, 0, 2, 0)
        >>> cm.precision, cm.recall, cm.accuracy
        (1.0, 1.0, 1.0)
    """
    return ConfusionMatrix.from_scores(scores, labels, threshold)


__all__ = [
    "ConfusionMatrix",
    "confusion_matrix",
]
