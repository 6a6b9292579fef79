"""
Shared fixtures for rsplan tests.
"""

import numpy as np
import pytest

from rsplan import Pose


@pytest.fixture
def random_queries():
    """Random (start, goal, R) triples in world units."""
    np.random.seed(42)
    queries = []
    for _ in range(40):
        start = Pose(*(np.random.rand(2) * 20 - 10), np.random.rand() * 2 * np.pi)
        goal = Pose(*(np.random.rand(2) * 20 - 10), np.random.rand() * 2 * np.pi)
        R = float(0.5 + np.random.rand() * 3)
        queries.append((start, goal, R))
    return queries


@pytest.fixture
def random_local_goals():
    """Random goals in the normalized start-local frame."""
    np.random.seed(7)
    goals = []
    for _ in range(60):
        x, y = np.random.rand(2) * 12 - 6
        phi = np.random.rand() * 2 * np.pi
        goals.append((float(x), float(y), float(phi)))
    return goals
