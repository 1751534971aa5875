import numpy as np


def stable_argsort(values):
    """
    Ascending argsort that keeps equal values in their original order.

    Args:
        values (list or np.ndarray): 1D sequence of real numbers.

    Returns:
        np.ndarray: Integer permutation ``order`` such that ``values[order]``
        is sorted ascending and ties keep their input order.
    """
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"values must be a 1D sequence; got shape {arr.shape}")
    return np.argsort(arr, kind="stable")


def descending_order(values):
    """
    Indices of ``values`` from highest to lowest.

    Obtained by reversing :func:`stable_argsort`, not by sorting descending,
    so tied values come out in reverse input order:

    >>> descending_order([0.5, 0.9, 0.5]).tolist()
    [1, 2, 0]

    Args:
        values (list or np.ndarray): 1D sequence of real numbers.

    Returns:
        np.ndarray: Integer permutation, highest value first.
    """
    return stable_argsort(values)[::-1].copy()


__all__ = [
    "stable_argsort",
    "descending_order",
]
