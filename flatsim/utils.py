"""Angle helpers and planar pose composition."""

from __future__ import annotations

import math

from flatsim.types import Pose


def rad2deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def deg2rad(deg: float) -> float:
    return deg * math.pi / 180.0


def mapper(x: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``x`` from one range onto another."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def float_to_byte(v: float, lo: float = 0.0, hi: float = 255.0) -> int:
    """Convert a unit value to a byte, clamping ``v`` to [0, 1] first.

    ``lo`` and ``hi`` bound an intermediate value but do not change the result.
    """
    v = min(max(v, 0.0), 1.0)
    scaled = v * 255.0
    _ = min(max(scaled, lo), hi)
    return int(math.floor(scaled + 0.5))


def normalize_angle(a: float) -> float:
    """Wrap an angle into [-pi, pi]."""
    return math.atan2(math.sin(a), math.cos(a))


def shift(parent: Pose, child: Pose) -> Pose:
    """Compose ``child`` (in the parent's frame) with ``parent``."""
    cy, sy = math.cos(parent.yaw), math.sin(parent.yaw)
    off_x = child.x * cy - child.y * sy
    off_y = child.x * sy + child.y * cy
    return Pose(
        x=parent.x + off_x,
        y=parent.y + off_y,
        z=parent.z + child.z,
        roll=normalize_angle(parent.roll + child.roll),
        pitch=normalize_angle(parent.pitch + child.pitch),
        yaw=normalize_angle(parent.yaw + child.yaw),
    )


def move(from_origin: Pose, trans_pose: Pose) -> Pose:
    """Place a local offset into the frame of ``trans_pose``; takes its yaw."""
    yaw = trans_pose.yaw
    cy, sy = math.cos(yaw), math.sin(yaw)
    return Pose(
        x=trans_pose.x + from_origin.x * cy - from_origin.y * sy,
        y=trans_pose.y + from_origin.x * sy + from_origin.y * cy,
        yaw=yaw,
    )


def ackermann_scale(angle_rad: float, track_width: float) -> float:
    """Steering scale of the inner wheel for a given angle and track width."""
    if abs(angle_rad) < 1e-6:
        return 1.0
    radius = track_width / math.tan(angle_rad)
    return (radius - track_width * 0.5) / radius