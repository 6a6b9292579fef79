"""Assertion helpers shared by the test modules."""

import numpy as np

EPS = 1e-6


def assert_pose_close(a, b, tol=EPS):
    """Check two poses agree in position and wrapped heading."""
    assert abs(a.x - b.x) < tol, f"x: {a} vs {b}"
    assert abs(a.y - b.y) < tol, f"y: {a} vs {b}"
    assert abs(a.heading_error(b)) < tol, f"theta: {a} vs {b}"


def is_finite_path(path):
    return all(np.isfinite(e.param) for e in path)
