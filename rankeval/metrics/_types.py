"""Shared type aliases for gain weighting."""

from typing import Callable, TypeAlias

RelevancyFunction: TypeAlias = Callable[[float], float]
