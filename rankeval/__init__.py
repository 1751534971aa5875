"""Rankeval package for evaluating rankings and binary classifiers.

Modules
------------------
- ``rankeval.metrics`` provides the gain family (CG, DCG, NDCG), the
  precision-recall curve with its scalar summaries, and the confusion
  matrix.
- ``rankeval.utils`` provides the stable ordering utilities shared by the
  metric engines.

"""

__version__ = "0.1.0"

from . import metrics, utils

__all__ = ["metrics", "utils"]
