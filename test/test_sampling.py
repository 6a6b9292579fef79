"""
Pytest unit tests for the path sampler
Run with: pytest test_sampling.py -v
"""

import casadi as ca
import numpy as np
import pytest
from common import assert_pose_close

from rsplan import Gear, Path, PathElement, Pose, Steering, plan_optimal
from rsplan.sampling import (
    derive_step,
    end_pose,
    polyline_length,
    poses_to_array,
    resample,
    sample_exact,
    sample_path,
    step_pose,
)


@pytest.fixture(scope="module")
def pose_step():
    return derive_step()


@pytest.fixture
def planned_queries(random_queries):
    return [(plan_optimal(start, goal, R), start, goal, R) for start, goal, R in random_queries]


class TestPoseStep:
    def test_function_signature(self, pose_step):
        assert isinstance(pose_step, ca.Function)
        assert pose_step.n_in() == 5
        assert pose_step.n_out() == 1

    def test_straight(self):
        p = step_pose(Pose(0.0, 0.0, np.pi / 2), PathElement(2.0, Steering.STRAIGHT), 1.5)
        assert_pose_close(p, Pose(0.0, 3.0, np.pi / 2))

    def test_straight_backward(self):
        p = step_pose(Pose(1.0, 0.0, 0.0), PathElement(1.0, Steering.STRAIGHT, Gear.BACKWARD), 2.0)
        assert_pose_close(p, Pose(-1.0, 0.0, 0.0))

    def test_left_quarter(self):
        p = step_pose(Pose(0.0, 0.0, 0.0), PathElement(np.pi / 2, Steering.LEFT), 1.0)
        assert_pose_close(p, Pose(1.0, 1.0, np.pi / 2))

    def test_right_backward_quarter(self):
        # reversing with right steer swings around the center at (0, -1)
        p = step_pose(Pose(0.0, 0.0, 0.0), PathElement(np.pi / 2, Steering.RIGHT, Gear.BACKWARD), 1.0)
        assert_pose_close(p, Pose(-1.0, -1.0, np.pi / 2))

    def test_fraction(self):
        e = PathElement(np.pi, Steering.LEFT)
        half = step_pose(Pose(0.0, 0.0, 0.0), e, 2.0, 0.5)
        assert_pose_close(half, Pose(2.0, 2.0, np.pi / 2))

    def test_radius_scales_arc(self):
        p = step_pose(Pose(0.0, 0.0, 0.0), PathElement(np.pi, Steering.RIGHT), 3.0)
        assert_pose_close(p, Pose(0.0, -6.0, np.pi))


class TestExact:
    def test_boundaries(self):
        path = Path(
            (
                PathElement(np.pi / 2, Steering.LEFT),
                PathElement(1.0, Steering.STRAIGHT),
                PathElement(np.pi / 2, Steering.RIGHT, Gear.BACKWARD),
            )
        )
        poses, gears = sample_exact(path, Pose(0.0, 0.0, 0.0), 1.0)
        assert len(poses) == 4
        assert gears == [1, 1, 1, -1]
        assert_pose_close(poses[1], Pose(1.0, 1.0, np.pi / 2))
        assert_pose_close(poses[2], Pose(1.0, 2.0, np.pi / 2))
        assert_pose_close(poses[3], Pose(2.0, 1.0, np.pi))

    def test_empty_path(self):
        start = Pose(1.0, 2.0, 3.0)
        assert end_pose(Path(), start, 1.0) == start


class TestFixedStep:
    def test_first_pose_is_start(self, planned_queries):
        for path, start, goal, R in planned_queries:
            poses, gears = sample_path(path, start, R, 0.1)
            assert poses[0] == start
            assert len(poses) == len(gears)

    def test_terminal_matches_exact(self, planned_queries):
        for path, start, goal, R in planned_queries:
            poses, _ = sample_path(path, start, R, 0.1)
            assert_pose_close(poses[-1], end_pose(path, start, R))
            assert_pose_close(poses[-1], goal)

    def test_gears_are_signs(self, planned_queries):
        for path, start, goal, R in planned_queries:
            _, gears = sample_path(path, start, R, 0.2)
            assert set(gears) <= {-1, 1}
            assert gears[0] == path[0].gear.sign()

    def test_polyline_close_to_path_length(self, planned_queries):
        for path, start, goal, R in planned_queries:
            poses, _ = sample_path(path, start, R, 0.05)
            length = polyline_length(poses)
            assert length <= path.world_length(R) + 1e-9
            assert length == pytest.approx(path.world_length(R), rel=1e-2)

    def test_no_large_jumps(self, planned_queries):
        step = 0.1
        for path, start, goal, R in planned_queries:
            poses, _ = sample_path(path, start, R, step)
            xy = poses_to_array(poses)[:, :2]
            jumps = np.linalg.norm(np.diff(xy, axis=0), axis=1)
            assert np.max(jumps) <= step + 1e-9

    def test_substep_count(self):
        path = Path((PathElement(1.0, Steering.STRAIGHT),))
        poses, _ = sample_path(path, Pose(0.0, 0.0, 0.0), 1.0, 0.25)
        assert len(poses) == 5
        assert poses[2].x == pytest.approx(0.5)

    def test_short_element_gets_two_substeps(self):
        path = Path((PathElement(0.1, Steering.LEFT),))
        poses, _ = sample_path(path, Pose(0.0, 0.0, 0.0), 1.0, 0.25)
        assert len(poses) == 3

    def test_gear_switch(self):
        path = Path(
            (
                PathElement(0.5, Steering.STRAIGHT, Gear.BACKWARD),
                PathElement(0.5, Steering.STRAIGHT, Gear.FORWARD),
            )
        )
        poses, gears = sample_path(path, Pose(0.0, 0.0, 0.0), 1.0, 0.25)
        assert gears == [-1, -1, -1, 1, 1]
        assert poses[2].x == pytest.approx(-0.5)
        assert poses[-1].x == pytest.approx(0.0, abs=1e-12)

    def test_empty_path(self):
        start = Pose(1.0, 1.0, 0.0)
        poses, gears = sample_path(Path(), start, 1.0, 0.1)
        assert poses == [start]
        assert gears == [1]

    def test_finite(self, planned_queries):
        for path, start, goal, R in planned_queries:
            poses, _ = sample_path(path, start, R, 0.3)
            assert np.all(np.isfinite(poses_to_array(poses)))

    def test_corrective_pose_logged(self, caplog):
        path = Path((PathElement(np.pi / 3, Steering.LEFT), PathElement(1.0, Steering.STRAIGHT)))
        with caplog.at_level("WARNING", logger="rsplan"):
            poses, gears = sample_path(path, Pose(0.0, 0.0, 0.0), 1.0, 0.01, tolerance=-1.0)
        assert "terminal pose" in caplog.text
        assert poses[-1] == end_pose(path, Pose(0.0, 0.0, 0.0), 1.0)
        assert len(poses) == len(gears)


class TestInvalidInput:
    @pytest.mark.parametrize("step", [0.0, -0.5, float("nan")])
    def test_bad_step(self, step):
        with pytest.raises(ValueError):
            sample_path(Path(), Pose(0.0, 0.0, 0.0), 1.0, step)

    @pytest.mark.parametrize("R", [0.0, -2.0])
    def test_bad_radius(self, R):
        with pytest.raises(ValueError):
            sample_path(Path(), Pose(0.0, 0.0, 0.0), R, 0.1)
        with pytest.raises(ValueError):
            sample_exact(Path(), Pose(0.0, 0.0, 0.0), R)


class TestResample:
    def test_densify_segment(self):
        poses = resample([Pose(0.0, 0.0, 0.0), Pose(1.0, 0.0, 0.0)], 0.25)
        assert len(poses) == 5
        assert poses[1].x == pytest.approx(0.25)

    def test_heading_shortest_arc(self):
        poses = resample([Pose(0.0, 0.0, 0.1), Pose(1.0, 0.0, 2 * np.pi - 0.1)], 0.5)
        assert poses[1].heading_error(Pose(0.0, 0.0, 0.0)) == pytest.approx(0.0, abs=1e-12)

    def test_keeps_short_segments(self):
        src = [Pose(0.0, 0.0, 0.0), Pose(0.1, 0.0, 0.0)]
        assert resample(src, 1.0) == src

    def test_empty(self):
        assert resample([], 0.5) == []

    def test_polyline_length(self):
        poses = [Pose(0.0, 0.0, 0.0), Pose(3.0, 4.0, 0.0), Pose(3.0, 0.0, 0.0)]
        assert polyline_length(poses) == pytest.approx(9.0)
        assert polyline_length(poses[:1]) == 0.0
