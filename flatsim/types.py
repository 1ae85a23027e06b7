"""Plain data types describing poses, machines and their parts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass
class Pose:
    """Position and orientation in the local east-north-up frame."""

    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0
    z: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0

    def corners(self, size: Size) -> list[tuple[float, float]]:
        """Corners of a rectangle of ``size`` centred on this pose.

        Order: front-left, front-right, rear-right, rear-left (in the local frame).
        """
        hw, hh = size.x / 2.0, size.y / 2.0
        cy, sy = math.cos(self.yaw), math.sin(self.yaw)
        local = [(-hw, hh), (hw, hh), (hw, -hh), (-hw, -hh)]
        return [(self.x + lx * cy - ly * sy, self.y + lx * sy + ly * cy) for lx, ly in local]


@dataclass
class Size:
    """Extent along x (width), y (height/length) and z (depth)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Bound:
    """A sized rectangle placed at a pose."""

    pose: Pose = field(default_factory=Pose)
    size: Size = field(default_factory=Size)


@dataclass(frozen=True)
class RGB:
    """An 8-bit colour."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class RobotControl:
    """Per-wheel control limits."""

    steerings_max: list[float] = field(default_factory=list)
    throttles_max: list[float] = field(default_factory=list)
    steerings_diff: list[float] = field(default_factory=list)
    throttles_diff: list[float] = field(default_factory=list)
    left_side: list[bool] = field(default_factory=list)


@dataclass
class KarosserieInfo:
    name: str = ""
    bound: Bound = field(default_factory=Bound)
    color: RGB = field(default_factory=RGB)
    sections: int = 0
    has_physics: bool = True


@dataclass
class HitchInfo:
    """A hitch relative to the robot centre; masters pull, slaves are pulled."""

    bound: Bound = field(default_factory=Bound)
    is_master: bool = True


@dataclass
class TankInfo:
    name: str = ""
    capacity: float = 0.0
    bound: Bound = field(default_factory=Bound)


class PowerType(Enum):
    FUEL = auto()
    BATTERY = auto()


@dataclass
class PowerInfo:
    name: str = ""
    kind: PowerType = PowerType.FUEL
    capacity: float = 0.0
    consumption_rate: float = 0.0
    charge_rate: float = 0.0


class RobotRole(Enum):
    MASTER = auto()
    FOLLOWER = auto()
    SLAVE = auto()


@dataclass
class Capability:
    work_on: list[str] = field(default_factory=list)
    connect_to: list[str] = field(default_factory=list)
    unload_to: list[str] = field(default_factory=list)


@dataclass
class RobotInfo:
    """Full description of a machine."""

    rci: int = 0
    group: int = 0
    slave: bool = False
    name: str = "unnamed"
    uuid: str = "none"
    kind: str = "none"
    works_on: list[str] = field(default_factory=list)
    capability: Capability = field(default_factory=Capability)
    color: RGB = field(default_factory=RGB)
    bound: Bound = field(default_factory=Bound)
    outline: list[tuple[float, float]] = field(default_factory=list)
    wheels: list[Bound] = field(default_factory=list)
    controls: RobotControl = field(default_factory=RobotControl)
    hitches: dict[str, HitchInfo] = field(default_factory=dict)
    karos: list[KarosserieInfo] = field(default_factory=list)
    tank: TankInfo | None = None
    power_source: PowerInfo | None = None
    role: RobotRole = RobotRole.MASTER


class OP(Enum):
    """Operation mode of a robot."""

    IDLE = auto()
    CHARGING = auto()
    STOP = auto()
    PAUSE = auto()
    EMERGENCY = auto()
    TRANSPORT = auto()
    WORK = auto()


@dataclass
class FollowerCapabilities:
    has_steering: bool = False
    has_throttle: bool = False
    has_tank: bool = False
    has_additional_hitches: bool = False
    available_master_hitches: list[str] = field(default_factory=list)