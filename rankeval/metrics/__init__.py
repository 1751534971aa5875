"""Evaluation metrics for rankings and binary classifiers.

All engines take two index-aligned 1D sequences, model ``scores`` and
ground-truth ``labels``, and return an immutable result object.

Ordering
--------
Items are ranked by a stable ascending argsort that is then reversed (see
:func:`rankeval.utils.descending_order`). Tied items are therefore ranked in
reverse input order, and every result is reproducible for a given input.

Available Engines
-----------------
- Gain family: ``ranking_evaluation`` returning ``RankingEvaluation`` with
  cumulative, discounted and normalised discounted cumulative gain, plus the
  ``traditional_relevancy`` and ``emphasised_relevancy`` gain functions.
- Curve family: ``precision_recall_curve`` returning
  ``PrecisionRecallCurve`` with average precision, interpolated average
  precision, R-precision, precision@k and interpolated precision@r.
- Threshold family: ``confusion_matrix`` returning ``ConfusionMatrix`` with
  precision, recall, accuracy and F1.

Contract violations (length mismatch, out-of-range cut-offs) raise
``ValueError``.
"""

from ._types import RelevancyFunction
from .confusion import ConfusionMatrix, confusion_matrix
from .gain import (
    RankingEvaluation,
    emphasised_relevancy,
    ranking_evaluation,
    traditional_relevancy,
)
from .pr_curve import PrecisionRecallCurve, precision_recall_curve

__all__ = [
    # Gain family
    "ranking_evaluation",
    "RankingEvaluation",
    "traditional_relevancy",
    "emphasised_relevancy",
    "RelevancyFunction",
    # Curve family
    "precision_recall_curve",
    "PrecisionRecallCurve",
    # Threshold family
    "confusion_matrix",
    "ConfusionMatrix",
]
