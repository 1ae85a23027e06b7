"""Reading machine descriptions from JSON files."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import replace
from pathlib import Path
from typing import Any

from flatsim.types import (
    RGB,
    Bound,
    HitchInfo,
    KarosserieInfo,
    Pose,
    PowerInfo,
    PowerType,
    RobotInfo,
    RobotRole,
    Size,
    TankInfo,
)
from flatsim.utils import deg2rad

log = logging.getLogger(__name__)

_REQUIRED_TOP = ("info", "dimensions", "color", "wheels", "controls")
_REQUIRED_INFO = ("type", "name", "rci", "works_on")
_RAND_MAX = 2**31 - 1


def load_from_json(
    json_path: str | Path,
    spawn_pose: Pose,
    name: str = "",
    color: RGB | None = None,
) -> RobotInfo:
    """Build a :class:`RobotInfo` from a machine file, placed at ``spawn_pose``.

    ``name`` overrides the name in the file when non-empty; ``color`` overrides
    the file's colour when given.
    """
    path = Path(json_path)
    log.info("Loading machine from: %s", path)
    try:
        with path.open(encoding="utf-8") as handle:
            doc = json.load(handle)
    except OSError as exc:
        raise RuntimeError(f"Cannot open machine file: {path}") from exc

    info = doc["info"]
    default_name = str(info["name"])
    uuid = info.get("uuid", "")

    robot = RobotInfo(
        kind=info["type"],
        name=name or default_name,
        uuid=uuid or f"{default_name}_{random.randint(0, _RAND_MAX)}",
        rci=int(info["rci"]),
        works_on=list(info["works_on"]),
        role=_parse_role(info.get("role", "MASTER")),
    )

    dims = doc["dimensions"]
    robot.bound = Bound(
        replace(spawn_pose), Size(float(dims["width"]), float(dims["height"]), 0.0)
    )

    robot_color = color if color is not None else _parse_color(doc["color"])
    robot.color = robot_color

    _parse_wheels(robot, doc["wheels"])
    _parse_controls(robot, doc["controls"])

    if "karosseries" in doc:
        _parse_karosseries(robot, doc["karosseries"], robot_color)
    if "hitches" in doc:
        _parse_hitches(robot, doc["hitches"])
    if "tank" in doc:
        _parse_tank(robot, doc["tank"])
    if "power" in doc:
        _parse_power(robot, doc["power"])
    if "capability" in doc:
        _parse_capability(robot, doc["capability"])

    return robot


def find_machine_files(directory: str | Path) -> list[Path]:
    """Return the ``.json`` files directly inside ``directory``, sorted by name."""
    root = Path(directory)
    if not root.exists():
        log.warning("Machine directory does not exist: %s", root)
        return []
    return sorted(
        entry for entry in root.iterdir() if entry.is_file() and entry.suffix == ".json"
    )


def validate_json(json_path: str | Path) -> bool:
    """Check that a machine file can be read and holds the required fields."""
    path = Path(json_path)
    try:
        with path.open(encoding="utf-8") as handle:
            doc = json.load(handle)
    except OSError:
        return False
    except ValueError as exc:
        log.error("JSON validation failed for %s: %s", path, exc)
        return False

    if not isinstance(doc, dict) or any(key not in doc for key in _REQUIRED_TOP):
        return False
    info = doc["info"]
    return isinstance(info, dict) and all(key in info for key in _REQUIRED_INFO)


def _parse_role(role: str) -> RobotRole:
    if role == "SLAVE":
        return RobotRole.SLAVE
    if role == "FOLLOWER":
        return RobotRole.FOLLOWER
    return RobotRole.MASTER


def _parse_color(color: dict[str, Any]) -> RGB:
    return RGB(int(color["r"]), int(color["g"]), int(color["b"]))


def _parse_pose(pos: dict[str, Any]) -> Pose:
    return Pose(float(pos["x"]), float(pos["y"]), float(pos.get("yaw", 0.0)))


def _parse_size(size: dict[str, Any]) -> Size:
    return Size(float(size["width"]), float(size["height"]), float(size.get("depth", 0.0)))


def _parse_wheels(robot: RobotInfo, wheels: list[dict[str, Any]]) -> None:
    robot.wheels = [Bound(_parse_pose(w["position"]), _parse_size(w["size"])) for w in wheels]
    robot.controls.left_side = [w["side"] == "left" for w in wheels]


def _parse_controls(robot: RobotInfo, controls: dict[str, Any]) -> None:
    steering = controls["steering"]
    throttle = controls["throttle"]
    ctl = robot.controls
    ctl.steerings_max.extend(deg2rad(float(a)) for a in steering["max_angles"])
    ctl.steerings_diff.extend(deg2rad(float(d)) for d in steering["differential"])
    ctl.throttles_max.extend(float(v) for v in throttle["max_values"])
    if "differential" in throttle:
        ctl.throttles_diff.extend(float(d) for d in throttle["differential"])
    else:
        ctl.throttles_diff = [0.0] * len(ctl.throttles_max)


def _parse_karosseries(
    robot: RobotInfo, karos: list[dict[str, Any]], default_color: RGB
) -> None:
    for karo in karos:
        robot.karos.append(
            KarosserieInfo(
                name=karo["name"],
                bound=Bound(_parse_pose(karo["position"]), _parse_size(karo["size"])),
                color=_parse_color(karo["color"]) if "color" in karo else default_color,
                sections=int(karo.get("sections", 0)),
                has_physics=bool(karo.get("has_physics", True)),
            )
        )


def _parse_hitches(robot: RobotInfo, hitches: dict[str, dict[str, Any]]) -> None:
    for hitch_name, hitch in hitches.items():
        robot.hitches[hitch_name] = HitchInfo(
            bound=Bound(_parse_pose(hitch["position"]), _parse_size(hitch["size"])),
            is_master=bool(hitch.get("is_master", True)),
        )


def _parse_tank(robot: RobotInfo, tank: dict[str, Any]) -> None:
    robot.tank = TankInfo(
        name=tank["name"],
        capacity=float(tank["capacity"]),
        bound=Bound(_parse_pose(tank["position"]), _parse_size(tank["size"])),
    )


def _parse_power(robot: RobotInfo, power: dict[str, Any]) -> None:
    robot.power_source = PowerInfo(
        name=power["name"],
        kind=PowerType.BATTERY if power["type"] == "BATTERY" else PowerType.FUEL,
        capacity=float(power["capacity"]),
        consumption_rate=float(power["consumption_rate"]),
        charge_rate=float(power.get("charge_rate", 0.0)),
    )


def _parse_capability(robot: RobotInfo, capability: dict[str, Any]) -> None:
    cap = robot.capability
    cap.work_on.extend(str(w) for w in capability.get("work_on", []))
    cap.connect_to.extend(str(c) for c in capability.get("connect_to", []))
    cap.unload_to.extend(str(u) for u in capability.get("unload_to", []))