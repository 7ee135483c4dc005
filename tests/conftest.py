"""Shared fixtures: sample distance matrices and a random graph factory."""

from __future__ import annotations

import random
from typing import Callable, List

import pytest

INF = 9999


@pytest.fixture
def five_vertex_graph() -> List[List[int]]:
    """Directed graph where 1 -> 3 is only reachable through vertex 2."""
    return [
        [0, 5, INF, 7, 8],
        [INF, 0, 1, INF, 6],
        [INF, INF, 0, 4, 5],
        [INF, INF, INF, 0, 4],
        [INF, INF, INF, INF, 0],
    ]


@pytest.fixture
def five_vertex_expected() -> List[List[int]]:
    return [
        [0, 5, 6, 7, 8],
        [INF, 0, 1, 5, 6],
        [INF, INF, 0, 4, 5],
        [INF, INF, INF, 0, 4],
        [INF, INF, INF, INF, 0],
    ]


@pytest.fixture
def disconnected_graph() -> List[List[int]]:
    """Four vertices, no edges."""
    return [[0 if i == j else INF for j in range(4)] for i in range(4)]


@pytest.fixture
def random_graph() -> Callable[..., List[List[int]]]:
    """Factory for reproducible random directed graphs.

    Weights lie in [1, max_weight] so no path sum can reach INF for the
    sizes used in tests.
    """

    def _make(
        n: int, seed: int, edge_prob: float = 0.3, max_weight: int = 20
    ) -> List[List[int]]:
        rng = random.Random(seed)
        return [
            [
                0
                if i == j
                else (rng.randint(1, max_weight) if rng.random() < edge_prob else INF)
                for j in range(n)
            ]
            for i in range(n)
        ]

    return _make
