"""IMU measurement records: acceleration, rotation rate, magnetic field, attitude."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum


class CalibrationStatus(IntEnum):
    UNCALIBRATED = 0
    PARTIALLY_CALIBRATED = 1
    MOSTLY_CALIBRATED = 2
    FULLY_CALIBRATED = 3


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class IMUData:
    """A 9-DOF IMU sample in the body frame.

    Acceleration in m/s², angular velocity in rad/s, magnetic field in µT,
    orientation as a world-to-body quaternion and as roll/pitch/yaw in radians.
    """

    accel_x: float = 0.0
    accel_y: float = 0.0
    accel_z: float = 0.0

    gyro_x: float = 0.0
    gyro_y: float = 0.0
    gyro_z: float = 0.0

    mag_x: float = 0.0
    mag_y: float = 0.0
    mag_z: float = 0.0

    quat_w: float = 1.0
    quat_x: float = 0.0
    quat_y: float = 0.0
    quat_z: float = 0.0

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    accel_cal: CalibrationStatus = CalibrationStatus.UNCALIBRATED
    gyro_cal: CalibrationStatus = CalibrationStatus.UNCALIBRATED
    mag_cal: CalibrationStatus = CalibrationStatus.UNCALIBRATED

    temperature: float = 25.0  # °C
    timestamp: datetime = field(default_factory=_now)