"""LIDAR scan records and scan patterns."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum, auto


class ScanStatus(IntEnum):
    IDLE = 0
    SCANNING = 1
    COMPLETE = 2
    ERROR = 3


class ScanPattern(Enum):
    CIRCULAR_2D = auto()  # full 360° planar scan
    SECTOR_2D = auto()  # planar scan over a sector
    MULTI_LAYER_3D = auto()  # several stacked layers
    SPINNING_3D = auto()  # dense spinning 3D scanner
    SOLID_STATE_3D = auto()  # non-rotating 3D scanner


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LIDARData:
    """One scan: per-beam ranges, angles and returns plus the sensor configuration.

    Ranges are in metres, angles in radians; point coordinates are in the
    sensor frame. Intensities lie in [0, 1].
    """

    ranges: list[float] = field(default_factory=list)
    angles: list[float] = field(default_factory=list)
    valid: list[bool] = field(default_factory=list)

    points_x: list[float] = field(default_factory=list)
    points_y: list[float] = field(default_factory=list)
    points_z: list[float] = field(default_factory=list)

    min_range: float = 0.0
    max_range: float = 0.0
    angular_resolution: float = 0.0
    num_beams: int = 0

    scan_duration: float = 0.0
    beam_interval: float = 0.0

    intensities: list[float] = field(default_factory=list)
    num_returns: list[int] = field(default_factory=list)

    scan_status: ScanStatus = ScanStatus.IDLE

    ambient_light: float = 0.5
    visibility: float = 1.0

    timestamp: datetime = field(default_factory=_now)

    def clear(self) -> None:
        """Drop all measurements, keeping the configuration and status."""
        for measurements in (
            self.ranges,
            self.angles,
            self.valid,
            self.points_x,
            self.points_y,
            self.points_z,
            self.intensities,
            self.num_returns,
        ):
            measurements.clear()