"""
Cumulative gain family for ranked lists.

Let :math:`y \\in \\mathbb{R}^{n}` be ground-truth relevancies and
:math:`\\pi` a ranking of the item indices (highest first). With a relevancy
function :math:`g` the discounted cumulative gain at cut-off :math:`k` is

.. math::
    \\mathrm{DCG}@k = \\sum_{i=0}^{k-1} \\frac{g(y_{\\pi_i})}{\\log_2(i + 2)}.

:class:`RankingEvaluation` holds two rankings of the same items: the
predicted ranking (by model score) and the perfect ranking an oracle would
produce (by relevance). NDCG is the ratio of their discounted gains.
"""

import logging
from dataclasses import dataclass

import numpy as np

from rankeval.utils import descending_order

from ._base import frozen, validate_cutoff, validate_pair
from ._types import RelevancyFunction

logger = logging.getLogger(__name__)


def traditional_relevancy(r: float) -> float:
    """Use the degree of relevancy ``r`` directly as the gain."""
    return r


def emphasised_relevancy(r: float) -> float:
    """
    Exponential gain :math:`2^r - 1`.

    Widens the gap between low and high relevance grades, so placing a
    highly relevant item near the top matters more than under
    :func:`traditional_relevancy`.

    >>> emphasised_relevancy(0.0), emphasised_relevancy(3.0)
    (0.0, 7.0)
    """
    return 2.0**r - 1.0


@dataclass(frozen=True, eq=False)
class RankingEvaluation:
    """
    Predicted and perfect rankings of a set of items.

    Attributes:
        relevancies: Ground-truth relevancy values in original item order.
        predicted_rank: Item indices ranked by descending model score.
        perfect_rank: Item indices ranked by descending relevancy.

    Both rankings come from a stable ascending argsort that is then
    reversed, so tied items are ranked in reverse input order.
    """

    relevancies: np.ndarray
    predicted_rank: np.ndarray
    perfect_rank: np.ndarray

    @classmethod
    def from_scores(cls, scores, labels) -> "RankingEvaluation":
        """Build an evaluation; see :func:`ranking_evaluation`."""
        s, y = validate_pair(scores, labels)
        return cls(
            relevancies=frozen(y),
            predicted_rank=frozen(descending_order(s)),
            perfect_rank=frozen(descending_order(y)),
        )

    def __len__(self) -> int:
        return int(self.relevancies.shape[0])

    def cumulative_gain(self, k: int) -> float:
        """
        Sum of relevancies of the top ``k`` predicted items.

        Args:
            k: Cut-off in ``[1, len(self)]``. Pass ``len(self)`` for no
                cut-off.

        Returns:
            float: :math:`\\sum_{i=0}^{k-1} y_{\\pi_i}`.

        Raises:
            ValueError: If ``k`` is not an integer or is out of range.
        """
        k = validate_cutoff(k, len(self))
        return float(np.sum(self.relevancies[self.predicted_rank[:k]]))

    def _discounted_gain(
        self, k: int, ranking: np.ndarray, rel: RelevancyFunction
    ) -> float:
        gains = np.array([rel(v) for v in self.relevancies[ranking[:k]]], dtype=float)
        # rank 0 divides by log2(2) = 1
        discounts = np.log2(np.arange(k, dtype=float) + 2.0)
        return float(np.sum(gains / discounts))

    def discounted_cumulative_gain(
        self, k: int, rel: RelevancyFunction = traditional_relevancy
    ) -> float:
        """
        Discounted cumulative gain of the predicted ranking.

        Args:
            k: Cut-off in ``[1, len(self)]``.
            rel: Relevancy function mapping a relevance value to a gain,
                e.g. :func:`traditional_relevancy` (default) or
                :func:`emphasised_relevancy`.

        Returns:
            float: DCG@k.

        Raises:
            ValueError: If ``k`` is not an integer or is out of range.
        """
        k = validate_cutoff(k, len(self))
        return self._discounted_gain(k, self.predicted_rank, rel)

    def normalised_discounted_cumulative_gain(
        self, k: int, rel: RelevancyFunction = traditional_relevancy
    ) -> float:
        """
        DCG of the predicted ranking divided by DCG of the perfect ranking.

        Args:
            k: Cut-off in ``[1, len(self)]``.
            rel: Relevancy function, as for
                :meth:`discounted_cumulative_gain`.

        Returns:
            float: NDCG@k. Exactly ``1.0`` when no item has a relevancy
            above zero, since any ordering is then perfect.

        Raises:
            ValueError: If ``k`` is not an integer or is out of range.

        Examples:
            >>> ev = ranking_evaluation([0.1, 0.4, 0.35, 0.8], [0, 0, 1, 1])
            >>> round(ev.normalised_discounted_cumulative_gain(len(ev)), 4)
            0.9197
        """
        k = validate_cutoff(k, len(self))
        if np.max(self.relevancies) == 0:
            logger.debug("no relevant items among %d; NDCG is 1.0", len(self))
            return 1.0
        return self._discounted_gain(
            k, self.predicted_rank, rel
        ) / self._discounted_gain(k, self.perfect_rank, rel)


def ranking_evaluation(scores, labels) -> RankingEvaluation:
    """
    Rank items by model score and by ground truth.

    Args:
        scores: Predicted relevancy, probability or similarity per item.
        labels: Ground-truth relevancy per item, aligned with ``scores``.

    Returns:
        RankingEvaluation: Immutable evaluation exposing CG, DCG and NDCG.

    Raises:
        ValueError: If ``scores`` and ``labels`` differ in length or hold
            NaN or Inf values.

    Examples:
        >>> ev = ranking_evaluation([0.1, 0.4, 0.35, 0.8], [0, 0, 1, 1])
        >>> ev.predicted_rank.tolist(), ev.perfect_rank.tolist()
        ([3, 1, 2, 0], [3, 2, 1, 0])
        >>> ev.cumulative_gain(4), ev.discounted_cumulative_gain(4)
        (2.0, 1.5)
    """
    return RankingEvaluation.from_scores(scores, labels)


__all__ = [
    "RankingEvaluation",
    "ranking_evaluation",
    "traditional_relevancy",
    "emphasised_relevancy",
]
