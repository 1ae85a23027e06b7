"""GPS measurement records with RTK status."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum


class RTKStatus(IntEnum):
    NO_FIX = 0
    SINGLE = 1  # standard GPS
    DGPS = 2  # differential GPS
    RTK_FLOAT = 3  # RTK with float ambiguities
    RTK_FIXED = 4  # RTK with fixed ambiguities, highest accuracy


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GPSData:
    """A GPS fix: position in degrees/metres, velocity in m/s, accuracy in metres."""

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    velocity_north: float = 0.0
    velocity_east: float = 0.0
    velocity_up: float = 0.0
    horizontal_accuracy: float = 0.0
    vertical_accuracy: float = 0.0
    rtk_status: RTKStatus = RTKStatus.NO_FIX
    num_satellites: int = 0
    timestamp: datetime = field(default_factory=_now)