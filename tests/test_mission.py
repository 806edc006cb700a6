import math

import numpy as np
import pytest

from quadmpc.mission import (
    GRAVITY,
    RefPoint,
    acc_to_quaternion,
    attitude_command,
    hover_reference,
    reach_goal,
    takeoff_reference,
    trajectory_reference,
)


def _body_z(q):
    w, x, y, z = q
    return np.array([2 * (x * z + w * y), 2 * (y * z - w * x), 1 - 2 * (x * x + y * y)])


def test_level_acceleration_gives_identity():
    q = acc_to_quaternion((0.0, 0.0, GRAVITY), 0.0)
    assert q == pytest.approx((1.0, 0.0, 0.0, 0.0))


@pytest.mark.parametrize("acc,yaw", [((1.0, 0.5, 9.0), 0.3), ((-2.0, 1.0, 8.0), 2.5), ((0.0, 3.0, 1.0), -1.0)])
def test_quaternion_is_unit_and_aligns_thrust(acc, yaw):
    q = acc_to_quaternion(acc, yaw)
    assert sum(v * v for v in q) == pytest.approx(1.0)
    expected = np.array(acc) / np.linalg.norm(acc)
    assert np.allclose(_body_z(q), expected)


def test_reach_goal():
    assert reach_goal((1.0, 2.0, 3.0), (1.0, 2.0, 3.0))
    assert reach_goal((0.1, 0.0, 0.0), (0.0, 0.0, 0.0))
    assert not reach_goal((0.2, 0.2, 0.0), (0.0, 0.0, 0.0))
    assert not reach_goal((9.0, 0.0, 2.0), (0.0, 0.0, 2.0))


def test_hover_reference_level():
    ref = hover_reference((1.0, 2.0, 3.0), (1.0, 0.0, 0.0, 0.0), 4)
    assert ref.shape == (5, 14)
    assert list(ref[0]) == [1.0, 2.0, 3.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, GRAVITY, 0.0, 0.0, 0.0]
    assert np.array_equal(ref[0], ref[-1])


def test_hover_reference_folds_large_yaw():
    yaw = 3.0
    ref = hover_reference((0.0, 0.0, 1.0), (math.cos(yaw / 2), 0.0, 0.0, math.sin(yaw / 2)), 2)
    folded = yaw - 3.1415926
    assert ref[0, 3] == pytest.approx(math.cos(folded / 2))
    assert ref[0, 6] == pytest.approx(math.sin(folded / 2))


def test_hover_reference_keeps_small_negative_yaw():
    yaw = -0.5
    ref = hover_reference((0.0, 0.0, 1.0), (math.cos(yaw / 2), 0.0, 0.0, math.sin(yaw / 2)), 1)
    assert ref[1, 3] == pytest.approx(math.cos(yaw / 2), abs=1e-6)
    assert ref[1, 6] == pytest.approx(math.sin(yaw / 2), abs=1e-6)


def test_takeoff_reference():
    orientation = (0.9, 0.1, 0.2, 0.3)
    ref = takeoff_reference((1.0, -1.0, 0.0), orientation, 2.0, 3)
    assert ref.shape == (4, 14)
    assert list(ref[2, :7]) == [1.0, -1.0, 2.0, *orientation]
    assert ref[2, 10] == GRAVITY


def test_negative_horizon_raises():
    with pytest.raises(ValueError):
        takeoff_reference((0.0, 0.0, 0.0), (1.0, 0.0, 0.0, 0.0), 1.0, -1)


def test_trajectory_along_x_is_level():
    points = [RefPoint((float(i), 0.0, 2.0), (1.0, 0.0, 0.0)) for i in range(3)]
    ref = trajectory_reference((0.0, 0.0), points, 5)
    assert ref.shape == (6, 14)
    for k, point in enumerate(points):
        assert list(ref[k, :3]) == list(point.position)
        assert ref[k, 3:7] == pytest.approx([1.0, 0.0, 0.0, 0.0])
        assert list(ref[k, 7:10]) == [1.0, 0.0, 0.0]
    assert not ref[3:].any()
    assert not ref[:, 10:].any()


def test_trajectory_heading_follows_travel():
    points = [RefPoint((0.0, 1.0, 2.0)), RefPoint((0.0, 2.0, 2.0))]
    ref = trajectory_reference((0.0, 0.0), points, 2)
    expected = acc_to_quaternion((0.0, 0.0, GRAVITY), math.pi / 2)
    assert ref[0, 3:7] == pytest.approx(expected)
    assert ref[1, 3:7] == pytest.approx(expected)


def test_trajectory_too_long_raises():
    points = [RefPoint((0.0, 0.0, 0.0))] * 4
    with pytest.raises(ValueError):
        trajectory_reference((0.0, 0.0), points, 2)


def test_attitude_command():
    thrust, rates = attitude_command((GRAVITY, 0.1, 0.2, 0.3), 0.5)
    assert thrust == pytest.approx(0.5)
    assert rates == (0.1, 0.2, 0.3)
    zero_thrust, _ = attitude_command((0.0, 0.0, 0.0, 0.0), 0.5)
    assert zero_thrust == 0.0