"""
Base utilities for the metric engines.

This module provides input validation shared by the gain, curve and
confusion-matrix constructors.
"""

import numpy as np


def _as_1d_float(x, name: str) -> np.ndarray:
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be a 1D sequence; got shape {arr.shape}")
    if not np.isfinite(arr).all():
        raise ValueError(f"{name} must not contain NaN or Inf values")
    return arr


def validate_pair(scores, labels) -> tuple[np.ndarray, np.ndarray]:
    """
    Validate and convert an index-aligned score/label pair.

    Args:
        scores: Model scores, one per item.
        labels: Ground-truth relevance or class labels, aligned with
            ``scores`` so that ``scores[i]`` belongs to ``labels[i]``.

    Returns:
        Tuple ``(scores, labels)`` of fresh float arrays.

    Raises:
        ValueError: If either input is not 1D, holds NaN or Inf values, or
            the lengths differ.
    """
    s = _as_1d_float(scores, "scores")
    y = _as_1d_float(labels, "labels")
    if s.shape[0] != y.shape[0]:
        raise ValueError(
            f"scores and labels must have the same length; got {s.shape[0]} and {y.shape[0]}"
        )
    return s.copy(), y.copy()


def validate_cutoff(k: int, n: int, low: int = 1) -> int:
    """Validate an integer rank cut-off ``k`` in ``[low, n]``."""
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise ValueError(f"k must be an integer; got {k!r}")
    if not (low <= k <= n):
        raise ValueError(f"k must be in [{low}, {n}]; got {k}")
    return int(k)


def frozen(arr: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    arr.setflags(write=False)
    return arr


__all__ = [
    "validate_pair",
    "validate_cutoff",
    "frozen",
]
