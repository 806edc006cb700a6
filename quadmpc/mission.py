"""Reference generation and command shaping for quadrotor MPC missions.

Reference rows hold ``px, py, pz, qw, qx, qy, qz, vx, vy, vz, thrust,
wx, wy, wz``; a reference for a horizon of ``N`` intervals has ``N + 1``
rows.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

GRAVITY = 9.8066
REFERENCE_SIZE = 14
GOAL_TOLERANCE = 0.08
"""Squared distance below which a goal counts as reached."""

_HALF_PI = 1.5707963
_PI = 3.1415926


class MissionMode(Enum):
    """Stage of the flight mission."""

    AUTO_TAKEOFF = "takeoff"
    AUTO_HOVER = "hover"
    AUTO_TRACKING = "tracking"


@dataclass(frozen=True)
class RefPoint:
    """One sample of a reference trajectory."""

    position: tuple[float, float, float]
    velocity: tuple[float, float, float] = (0.0, 0.0, 0.0)
    acceleration: tuple[float, float, float] = (0.0, 0.0, 0.0)


def acc_to_quaternion(acc: Sequence[float], yaw: float) -> tuple[float, float, float, float]:
    """Return the attitude ``(w, x, y, z)`` that aligns body z with ``acc`` at heading ``yaw``."""
    acc_vec = np.asarray(acc, dtype=float)
    yc = np.array([-math.sin(yaw), math.cos(yaw), 0.0])
    zb = acc_vec / np.linalg.norm(acc_vec)
    xb = np.cross(yc, zb)
    xb /= np.linalg.norm(xb)
    yb = np.cross(zb, xb)
    yb /= np.linalg.norm(yb)
    r = np.column_stack((xb, yb, zb))

    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        q = (0.25 * s, (r[2, 1] - r[1, 2]) / s, (r[0, 2] - r[2, 0]) / s, (r[1, 0] - r[0, 1]) / s)
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
        q = ((r[2, 1] - r[1, 2]) / s, 0.25 * s, (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s)
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
        q = ((r[0, 2] - r[2, 0]) / s, (r[0, 1] + r[1, 0]) / s, 0.25 * s, (r[1, 2] + r[2, 1]) / s)
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
        q = ((r[1, 0] - r[0, 1]) / s, (r[0, 2] + r[2, 0]) / s, (r[1, 2] + r[2, 1]) / s, 0.25 * s)
    return tuple(float(v) for v in q)  # type: ignore[return-value]


def reach_goal(position: Sequence[float], goal: Sequence[float]) -> bool:
    """True when ``position`` lies within the goal tolerance of ``goal``."""
    distance = sum((p - g) * (p - g) for p, g in zip(position, goal, strict=True))
    return distance < GOAL_TOLERANCE


def _hover_yaw(orientation: Sequence[float]) -> float:
    w, x, y, z = (float(v) for v in orientation)
    r00 = 1.0 - 2.0 * (y * y + z * z)
    r10 = 2.0 * (x * y + w * z)
    yaw = math.atan2(r10, r00)
    if yaw < 0.0:
        yaw += math.pi
    if yaw > _HALF_PI:
        yaw -= _PI
    return yaw


def _check_horizon(horizon: int) -> None:
    if horizon < 0:
        raise ValueError(f"horizon must not be negative: {horizon}")


def hover_reference(position: Sequence[float], orientation: Sequence[float], horizon: int) -> np.ndarray:
    """Hold ``position`` with level attitude at the heading of ``orientation`` ``(w, x, y, z)``."""
    _check_horizon(horizon)
    yaw = _hover_yaw(orientation)
    px, py, pz = (float(v) for v in position)
    row = [px, py, pz, math.cos(yaw / 2), 0.0, 0.0, math.sin(yaw / 2),
           0.0, 0.0, 0.0, GRAVITY, 0.0, 0.0, 0.0]
    return np.tile(np.array(row), (horizon + 1, 1))


def takeoff_reference(
    position: Sequence[float], orientation: Sequence[float], height: float, horizon: int
) -> np.ndarray:
    """Climb above the start ``position`` to ``height`` keeping ``orientation`` ``(w, x, y, z)``."""
    _check_horizon(horizon)
    px, py = float(position[0]), float(position[1])
    w, x, y, z = (float(v) for v in orientation)
    row = [px, py, float(height), w, x, y, z, 0.0, 0.0, 0.0, GRAVITY, 0.0, 0.0, 0.0]
    return np.tile(np.array(row), (horizon + 1, 1))


def trajectory_reference(
    start_xy: Sequence[float], points: Sequence[RefPoint], horizon: int
) -> np.ndarray:
    """Build a tracking reference from trajectory samples.

    The heading of each sample follows the direction of travel from the
    previous one, starting at ``start_xy``; rows beyond the samples stay zero.
    """
    _check_horizon(horizon)
    if len(points) > horizon + 1:
        raise ValueError(f"{len(points)} points exceed a horizon of {horizon + 1} samples")
    reference = np.zeros((horizon + 1, REFERENCE_SIZE))
    last_px, last_py = float(start_xy[0]), float(start_xy[1])
    last_yaw = 0.0
    for row, point in zip(reference, points):
        px, py, pz = point.position
        if px == last_px and py == last_py:
            yaw = last_yaw
        else:
            dx, dy = px - last_px, py - last_py
            yaw = math.acos(dx / math.sqrt(dx * dx + dy * dy))
        last_yaw, last_px, last_py = yaw, px, py
        ax, ay, az = point.acceleration
        quat = acc_to_quaternion((ax, ay, az + GRAVITY), yaw)
        row[:10] = [px, py, pz, *quat, *point.velocity]
    return reference


def attitude_command(
    control: Sequence[float], hover_thrust: float
) -> tuple[float, tuple[float, float, float]]:
    """Turn an MPC control ``(thrust, wx, wy, wz)`` into normalised thrust and body rates."""
    thrust_acc, wx, wy, wz = (float(v) for v in control)
    return thrust_acc * hover_thrust / GRAVITY, (wx, wy, wz)