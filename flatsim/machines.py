"""Built-in machine descriptions: harvester, tractor, trailer and truck."""

from __future__ import annotations

from dataclasses import replace

from flatsim.types import (
    RGB,
    Bound,
    HitchInfo,
    KarosserieInfo,
    Pose,
    PowerInfo,
    PowerType,
    RobotControl,
    RobotInfo,
    RobotRole,
    Size,
    TankInfo,
)
from flatsim.utils import deg2rad

_YELLOW = RGB(255, 200, 0)
_BLUE = RGB(100, 100, 255)


def _base(pose: Pose, name: str, uuid: str, kind: str, works_on: list[str],
          width: float, height: float, color: RGB) -> RobotInfo:
    return RobotInfo(
        rci=3,
        name=name,
        uuid=uuid or name,
        kind=kind,
        works_on=works_on,
        bound=Bound(replace(pose), Size(width, height, 0.0)),
        color=color,
    )


def _wheel(x: float, y: float, size: Size) -> Bound:
    return Bound(Pose(x, y, 0.0), replace(size))


def oxbo_harvester(pose: Pose, name: str, color: RGB = _YELLOW, uuid: str = "") -> RobotInfo:
    """A six-wheeled pea harvester with a harvest bin and a fuel tank."""
    width, height = 2.8, 7.68
    robot = _base(pose, name, uuid, "harvester", ["pea"], width, height, color)

    w_size = Size(width * 0.25, height * 0.2, 0.0)
    robot.wheels = [
        _wheel(width / 2, (height / 2) * 0.6, w_size),
        _wheel(-width / 2, (height / 2) * 0.6, w_size),
        _wheel(width / 2, 0.1, w_size),
        _wheel(-width / 2, 0.1, w_size),
        _wheel(width / 2, -(height / 2) * 0.7, w_size),
        _wheel(-width / 2, -(height / 2) * 0.7, w_size),
    ]

    robot.controls = RobotControl(
        steerings_max=[deg2rad(14), deg2rad(14), 0.0, 0.0, -deg2rad(25), -deg2rad(25)],
        throttles_max=[0.2, 0.2, 0.0, 0.0, 0.9, 0.9],
        steerings_diff=[-deg2rad(2), deg2rad(2), 0.0, 0.0, deg2rad(4), -deg2rad(4)],
        throttles_diff=[0.0] * 6,
        left_side=[False, True, False, True, False, True],
    )

    front_size = Size(width * 1.26, height * 0.23, 0.0)
    back_size = Size(width * 0.9, height * 0.15, 0.0)
    robot.karos = [
        KarosserieInfo(
            name="front",
            bound=Bound(Pose(0.0, height / 2 + front_size.y / 2, 0.0), front_size),
            color=color,
            sections=5,
            has_physics=True,
        ),
        KarosserieInfo(
            name="back",
            bound=Bound(Pose(0.0, -(height / 2) - back_size.y / 2, 0.0), back_size),
            color=color,
            sections=0,
            has_physics=True,
        ),
    ]

    padding = 0.2
    tank_width = width * (1.0 - 2 * padding)
    tank_height = height * (1.0 / 2.0 - padding)
    y_offset = height / 2 - tank_height / 2 - padding
    robot.tank = TankInfo(
        name="harvest_bin",
        capacity=10000.0,
        bound=Bound(Pose(0.0, y_offset, 0.0), Size(tank_width, tank_height, 0.0)),
    )

    robot.power_source = PowerInfo(
        name="fuel_tank", kind=PowerType.FUEL, capacity=200.0, consumption_rate=0.05
    )
    return robot


def tractor(pose: Pose, name: str, color: RGB = _YELLOW, uuid: str = "") -> RobotInfo:
    """A four-wheeled tractor with a rear hitch for pulling trailers."""
    width, height = 1.6, 2.8
    robot = _base(pose, name, uuid, "tractor", ["food"], width, height, color)

    front_w = Size(width * 0.22, height * 0.30, 0.0)
    back_w = Size(width * 0.4, height * 0.5, 0.0)
    robot.wheels = [
        _wheel(width / 2, (height / 2) * 0.6, front_w),
        _wheel(-width / 2, (height / 2) * 0.6, front_w),
        _wheel(width / 2, -(height / 2) * 0.6, back_w),
        _wheel(-width / 2, -(height / 2) * 0.6, back_w),
    ]

    robot.controls = RobotControl(
        steerings_max=[deg2rad(35), deg2rad(35), 0.0, 0.0],
        throttles_max=[0.0, 0.0, 0.2, 0.2],
        steerings_diff=[-deg2rad(4), deg2rad(4), 0.0, 0.0],
        throttles_diff=[0.0] * 4,
        left_side=[False, True, False, True],
    )

    k_size = Size(width * 0.50, height * 0.05, 0.0)
    hitch_size = Size(width * 0.15, height * 0.1, 0.0)
    rear_y = -(height / 2) - hitch_size.y / 2
    robot.karos = [
        KarosserieInfo(
            name="front",
            bound=Bound(Pose(0.0, height / 2 + k_size.y / 2, 0.0), k_size),
            color=color,
            sections=0,
            has_physics=True,
        ),
        KarosserieInfo(
            name="hitch_mount",
            bound=Bound(Pose(0.0, rear_y, 0.0), hitch_size),
            color=color,
            sections=0,
            has_physics=False,
        ),
    ]

    robot.hitches["rear_hitch"] = HitchInfo(
        bound=Bound(Pose(0.0, rear_y, 0.0), Size(0.05, 0.05, 0.0)), is_master=True
    )

    robot.power_source = PowerInfo(
        name="fuel_tank", kind=PowerType.FUEL, capacity=150.0, consumption_rate=0.03
    )
    return robot


def trailer(pose: Pose, name: str, color: RGB = _YELLOW, uuid: str = "") -> RobotInfo:
    """A two-wheeled storage trailer with a towing pole and front hitch; no power."""
    width, height = 1.8, 2.6
    robot = _base(pose, name, uuid, "trailer", ["food"], width, height, color)
    robot.role = RobotRole.SLAVE

    back_w = Size(width * 0.22, height * 0.30, 0.0)
    robot.wheels = [
        _wheel(width / 2, -(height / 2) * 0.6, back_w),
        _wheel(-width / 2, -(height / 2) * 0.6, back_w),
    ]

    robot.controls = RobotControl(
        steerings_max=[0.0, 0.0],
        throttles_max=[0.0, 0.0],
        steerings_diff=[0.0, 0.0],
        throttles_diff=[0.0, 0.0],
        left_side=[False, True],
    )

    pole_size = Size(width * 0.1, height * 0.4, 0.0)
    robot.karos = [
        KarosserieInfo(
            name="towing_pole",
            bound=Bound(Pose(0.0, height / 2 + pole_size.y / 2, 0.0), pole_size),
            color=color,
            sections=0,
            has_physics=True,
        )
    ]

    robot.hitches["front_hitch"] = HitchInfo(
        bound=Bound(Pose(0.0, height / 2 + pole_size.y + 0.2, 0.0), Size(0.05, 0.05, 0.0)),
        is_master=True,
    )

    robot.tank = TankInfo(
        name="storage_bin",
        capacity=2000.0,
        bound=Bound(Pose(0.0, 0.0, 0.0), Size(width * 0.9, height * 0.9, 0.0)),
    )
    return robot


def truck(pose: Pose, name: str, color: RGB = _BLUE, uuid: str = "") -> RobotInfo:
    """An eight-wheeled cargo truck with a cabin, cargo bed and large fuel tank."""
    width, height = 2.5, 8.0
    cabin_height = height * 0.25
    robot = _base(pose, name, uuid, "big_truck", ["cargo"], width, height, color)

    w_size = Size(width * 0.18, height * 0.12, 0.0)
    front_y = height / 2 + cabin_height / 2
    middle_y = height * 0.3
    rear_y1 = -height / 2 + height * 0.30
    rear_y2 = -height / 2 + height * 0.15
    robot.wheels = [
        _wheel(x, y, w_size)
        for y in (front_y, middle_y, rear_y1, rear_y2)
        for x in (width / 2, -width / 2)
    ]

    robot.controls = RobotControl(
        steerings_max=[
            deg2rad(30), deg2rad(30), 0.0, 0.0,
            -deg2rad(15), -deg2rad(15), -deg2rad(15), -deg2rad(15),
        ],
        throttles_max=[0.25] * 8,
        steerings_diff=[
            -deg2rad(3), deg2rad(3), 0.0, 0.0,
            deg2rad(3), -deg2rad(3), deg2rad(3), -deg2rad(3),
        ],
        throttles_diff=[0.15, -0.15, 0.25, -0.25, 0.6, -0.6, 0.8, -0.8],
        left_side=[False, True] * 4,
    )

    cabin_size = Size(width * 1.05, cabin_height, 0.0)
    robot.karos = [
        KarosserieInfo(
            name="cabin",
            bound=Bound(Pose(0.0, height / 2 + cabin_size.y / 2, 0.0), cabin_size),
            color=color,
            sections=0,
            has_physics=True,
        )
    ]

    robot.tank = TankInfo(
        name="cargo_bed",
        capacity=50000.0,
        bound=Bound(Pose(0.0, 0.0, 0.0), Size(width * 0.9, height * 0.95, 0.0)),
    )

    robot.power_source = PowerInfo(
        name="fuel_tank", kind=PowerType.FUEL, capacity=500.0, consumption_rate=0.1
    )
    return robot