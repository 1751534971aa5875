from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pytest


@dataclass(frozen=True)
class ScoredDataset:
    scores: np.ndarray
    labels: np.ndarray


# Ground-truth relevance with predicted scores; shared by the metric tests so
# expected values line up by dataset index.
DATASETS = [
    ScoredDataset(
        scores=np.array([0.1, 0.4, 0.35, 0.8]),
        labels=np.array([0.0, 0.0, 1.0, 1.0]),
    ),
    ScoredDataset(
        scores=np.array([0.1, 0.4, 0.35, 0.8, 0.85]),
        labels=np.array([0.0, 0.0, 1.0, 1.0, 0.0]),
    ),
    ScoredDataset(
        scores=np.array([0.02, 0.1, 0.4, 0.35, 0.8, 0.85]),
        labels=np.array([1.0, 0.0, 0.0, 1.0, 1.0, 0.0]),
    ),
    ScoredDataset(
        scores=np.array([0.02, 0.1]),
        labels=np.array([0.0, 0.0]),
    ),
    # no relevant items and many tied scores
    ScoredDataset(
        scores=np.array(
            [
                0.001485745854553862,
                0.0014863790364460178,
                0.0014863790364460178,
                0.0014854873139097426,
                0.001485745854553862,
                0.001485745854553862,
                0.0014863790364460178,
                0.0014863790364460178,
                0.001485745854553862,
                0.001485745854553862,
                0.0014863646408943988,
                0.0014857314651254725,
                0.0014857314651254725,
                0.0014857314651254725,
                0.0014863646408943988,
                0.0014857314651254725,
                0.0014863646408943988,
            ]
        ),
        labels=np.zeros(17),
    ),
]


@pytest.fixture(scope="session")
def datasets() -> list[ScoredDataset]:
    return DATASETS


@pytest.fixture(params=range(len(DATASETS)), ids=lambda i: f"dataset{i}")
def dataset_index(request: pytest.FixtureRequest) -> int:
    return request.param
