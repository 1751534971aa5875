"""Tests for rankeval.utils module."""

from __future__ import annotations

import numpy as np
import pytest

from rankeval.utils import descending_order, stable_argsort


class TestStableArgsort:
    def test_basic_ascending(self) -> None:
        order = stable_argsort([0.1, 0.4, 0.35, 0.8])
        np.testing.assert_array_equal(order, [0, 2, 1, 3])

    def test_ties_keep_input_order(self) -> None:
        order = stable_argsort([2.0, 1.0, 2.0, 1.0, 2.0])
        np.testing.assert_array_equal(order, [1, 3, 0, 2, 4])

    def test_all_tied_is_identity(self) -> None:
        order = stable_argsort([5.0] * 6)
        np.testing.assert_array_equal(order, np.arange(6))

    def test_empty(self) -> None:
        assert stable_argsort([]).shape == (0,)

    def test_1d_validation(self) -> None:
        with pytest.raises(ValueError, match="1D sequence"):
            stable_argsort(np.array([[1.0, 2.0], [3.0, 4.0]]))


class TestDescendingOrder:
    def test_highest_first(self) -> None:
        order = descending_order([0.1, 0.4, 0.35, 0.8])
        np.testing.assert_array_equal(order, [3, 1, 2, 0])

    def test_ties_come_out_reversed(self) -> None:
        # reversing a stable ascending sort flips tie order
        order = descending_order([0.5, 0.9, 0.5, 0.5])
        np.testing.assert_array_equal(order, [1, 3, 2, 0])

    def test_differs_from_direct_descending_sort_on_ties(self) -> None:
        values = np.array([1.0, 1.0, 0.0])
        direct = np.argsort(-values, kind="stable")
        np.testing.assert_array_equal(direct, [0, 1, 2])
        np.testing.assert_array_equal(descending_order(values), [1, 0, 2])

    def test_returns_contiguous_copy(self) -> None:
        order = descending_order([3.0, 1.0, 2.0])
        assert order.flags["C_CONTIGUOUS"]
        order[0] = 99
        np.testing.assert_array_equal(descending_order([3.0, 1.0, 2.0]), [0, 2, 1])
