"""
Precision-recall curves and their scalar summaries.

Items are ranked by descending score and walked from the top. After the
:math:`(k+1)`-th item, with :math:`h_k` relevant items seen out of
:math:`P` relevant items in total,

.. math::
    \\mathrm{recall}_k = \\frac{h_k}{P}, \\qquad
    \\mathrm{precision}_k = \\frac{h_k}{k + 1}.

The walk stops at the first rank where recall reaches 1. The recorded points
are then stored lowest-score first and followed by the anchor point
(precision 1, recall 0), so ``precision[-1 - k]`` is precision@k and
``precision[-1]`` is precision@0.

A label above zero marks a relevant item; zero or negative labels mark
irrelevant items. Graded relevance labels are therefore treated as binary.
"""

import logging
from dataclasses import dataclass

import numpy as np

from rankeval.utils import stable_argsort

from ._base import frozen, validate_cutoff, validate_pair

logger = logging.getLogger(__name__)

INTERPOLATION_RECALL_LEVELS = tuple(i / 10 for i in range(11))


@dataclass(frozen=True, eq=False)
class PrecisionRecallCurve:
    """
    Truncated precision-recall curve.

    Attributes:
        precision: Precision at each recorded rank, lowest score first,
            ending with the anchor value ``1.0``.
        recall: Recall aligned with ``precision``, ending with the anchor
            value ``0.0``.
        thresholds: Scores at the recorded ranks, ascending. One shorter
            than ``precision`` since the anchor has no threshold.
        positives: Number of relevant items (labels above zero).
    """

    precision: np.ndarray
    recall: np.ndarray
    thresholds: np.ndarray
    positives: int

    @classmethod
    def from_scores(cls, scores, labels) -> "PrecisionRecallCurve":
        """Build a curve; see :func:`precision_recall_curve`."""
        s, y = validate_pair(scores, labels)
        positives = int(np.count_nonzero(y > 0))

        if positives == 0:
            logger.debug(
                "no relevant items among %d; returning anchor-only curve", s.size
            )
            return cls(
                precision=frozen(np.array([1.0])),
                recall=frozen(np.array([0.0])),
                thresholds=frozen(np.array([], dtype=float)),
                positives=0,
            )

        order = stable_argsort(s)
        precision = np.zeros(s.size, dtype=float)
        recall = np.zeros(s.size, dtype=float)

        hits = 0
        k = 0
        for idx in order[::-1]:
            if y[idx] > 0:
                hits += 1
            recall[k] = hits / positives
            precision[k] = hits / (k + 1)
            if hits == positives:
                break
            k += 1
        m = k + 1

        # truncate at the rank where the last relevant item was found
        precision = precision[:m][::-1]
        recall = recall[:m][::-1]

        return cls(
            precision=frozen(np.append(precision, 1.0)),
            recall=frozen(np.append(recall, 0.0)),
            thresholds=frozen(s[order][-m:].copy()),
            positives=positives,
        )

    def __len__(self) -> int:
        return int(self.precision.shape[0])

    def points(self) -> np.ndarray:
        """
        Curve as ``(recall, precision)`` pairs for plotting.

        Returns:
            np.ndarray: Read-only array of shape ``(len(self), 2)``; column 0
            is recall (x), column 1 is precision (y).
        """
        return frozen(np.column_stack((self.recall, self.precision)))

    def average_precision(self) -> float:
        """
        Area under the precision-recall curve.

        Returns:
            float: AP in ``[0, 1]``.

        Formula:
            .. math::
                \\mathrm{AP} = -\\sum_{i=0}^{n-2}
                (r_{i+1} - r_i)\\, p_i

            Recall decreases along the stored arrays, so the sum is
            negated, computed as :math:`\\sum (r_i - r_{i+1})\\, p_i`.

        Examples:
            >>> curve = precision_recall_curve([0.1, 0.4, 0.35, 0.8], [0, 0, 1, 1])
            >>> round(curve.average_precision(), 4)
            0.8333
        """
        return float(np.sum((self.recall[:-1] - self.recall[1:]) * self.precision[:-1]))

    def average_interpolated_precision(self) -> float:
        """
        Mean interpolated precision over the 11 recall levels
        ``0.0, 0.1, ..., 1.0``.
        """
        return float(
            np.mean(
                [self.interpolated_precision_at(r) for r in INTERPOLATION_RECALL_LEVELS]
            )
        )

    def r_precision(self) -> float:
        """
        Precision at a cut-off equal to the number of relevant items.

        If there are R relevant items and r of them are ranked in the top
        R, this is r / R.
        """
        return float(self.precision[len(self) - 1 - self.positives])

    def precision_at(self, k: int) -> float:
        """
        Precision@k, the fraction of the top ``k`` items that are relevant.

        Args:
            k: Cut-off in ``[0, len(self) - 1]``; ``k=0`` gives the anchor
                value ``1.0``.

        Raises:
            ValueError: If ``k`` is not an integer or is out of range.
        """
        k = validate_cutoff(k, len(self) - 1, low=0)
        return float(self.precision[len(self) - 1 - k])

    def interpolated_precision_at(self, r: float) -> float:
        """
        Highest precision among points with recall of at least ``r``.

        Gives a precision for recall values that do not occur exactly in
        the ranking. Returns ``0.0`` when no point qualifies.
        """
        mask = self.recall >= r
        if not np.any(mask):
            return 0.0
        return float(np.max(self.precision[mask]))


def precision_recall_curve(scores, labels) -> PrecisionRecallCurve:
    """
    Build a precision-recall curve from scores and ground-truth labels.

    Args:
        scores: Predicted probability or similarity per item.
        labels: Ground-truth labels aligned with ``scores``; values above
            zero are relevant.

    Returns:
        PrecisionRecallCurve: Immutable curve. With no relevant items the
        curve is the anchor point alone.

    Raises:
        ValueError: If ``scores`` and ``labels`` differ in length or hold
            NaN or Inf values.

    Examples:
        >>> curve = precision_recall_curve([0.1, 0.4, 0.35, 0.8], [0, 0, 1, 1])
        >>> curve.recall.tolist()
        [1.0, 0.5, 0.5, 0.0]
        >>> curve.thresholds.tolist()
        [0.35, 0.4, 0.8]
        >>> curve.r_precision()
        0.5
    """
    return PrecisionRecallCurve.from_scores(scores, labels)


__all__ = [
    "PrecisionRecallCurve",
    "precision_recall_curve",
]
