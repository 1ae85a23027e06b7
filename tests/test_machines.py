import pytest

from flatsim.machines import oxbo_harvester, tractor, trailer, truck
from flatsim.types import RGB, Pose, PowerType, RobotRole
from flatsim.utils import deg2rad

BUILDERS = [oxbo_harvester, tractor, trailer, truck]


@pytest.mark.parametrize("builder", BUILDERS)
def test_uuid_defaults_to_name(builder):
    robot = builder(Pose(1.0, 2.0, 0.5), "machine")
    assert robot.uuid == "machine"
    assert robot.name == "machine"
    assert robot.rci == 3


@pytest.mark.parametrize("builder", BUILDERS)
def test_explicit_uuid_kept(builder):
    robot = builder(Pose(), "machine", RGB(1, 2, 3), "custom-id")
    assert robot.uuid == "custom-id"


@pytest.mark.parametrize("builder", BUILDERS)
def test_control_lists_match_wheel_count(builder):
    robot = builder(Pose(), "m")
    n = len(robot.wheels)
    ctl = robot.controls
    assert len(ctl.steerings_max) == n
    assert len(ctl.throttles_max) == n
    assert len(ctl.steerings_diff) == n
    assert len(ctl.throttles_diff) == n
    assert ctl.left_side == [i % 2 == 1 for i in range(n)]


@pytest.mark.parametrize("builder", BUILDERS)
def test_wheels_on_left_side_have_negative_x(builder):
    robot = builder(Pose(), "m")
    for wheel, left in zip(robot.wheels, robot.controls.left_side):
        assert (wheel.pose.x < 0) == left


@pytest.mark.parametrize("builder", BUILDERS)
def test_spawn_pose_copied(builder):
    pose = Pose(5.0, -3.0, 1.2)
    robot = builder(pose, "m")
    assert robot.bound.pose == pose
    pose.x = 100.0
    assert robot.bound.pose.x == 5.0


@pytest.mark.parametrize("builder", BUILDERS)
def test_color_propagates_to_karosseries(builder):
    color = RGB(10, 20, 30)
    robot = builder(Pose(), "m", color)
    assert robot.color == color
    assert all(k.color == color for k in robot.karos)


@pytest.mark.parametrize("builder", BUILDERS)
def test_wheel_sizes_are_independent(builder):
    robot = builder(Pose(), "m")
    original = robot.wheels[1].size.x
    robot.wheels[0].size.x = 99.0
    assert robot.wheels[0].size.x == 99.0
    assert robot.wheels[1].size.x == original
    assert builder(Pose(), "m").wheels[0].size.x == pytest.approx(original)


@pytest.mark.parametrize("builder", BUILDERS)
def test_tank_fits_inside_body(builder):
    robot = builder(Pose(), "m")
    if robot.tank is None:
        assert builder is tractor
        return_value = robot.power_source
        assert return_value is not None and return_value.capacity == 150.0
    else:
        t = robot.tank.bound
        half_h = robot.bound.size.y / 2
        assert t.size.x <= robot.bound.size.x
        assert t.pose.y + t.size.y / 2 <= half_h + 1e-9
        assert t.pose.y - t.size.y / 2 >= -half_h - 1e-9


def test_harvester_details():
    robot = oxbo_harvester(Pose(), "oxbo")
    assert robot.kind == "harvester"
    assert robot.works_on == ["pea"]
    assert robot.color == RGB(255, 200, 0)
    assert len(robot.wheels) == 6
    assert [k.name for k in robot.karos] == ["front", "back"]
    assert robot.karos[0].sections == 5
    assert robot.tank.name == "harvest_bin"
    assert robot.tank.capacity == 10000.0
    assert robot.power_source.kind is PowerType.FUEL
    assert robot.power_source.capacity == 200.0
    assert robot.power_source.consumption_rate == pytest.approx(0.05)
    assert robot.controls.steerings_max[0] == pytest.approx(deg2rad(14))
    assert robot.controls.steerings_max[4] == pytest.approx(-deg2rad(25))
    assert robot.role is RobotRole.MASTER


def test_harvester_karosseries_touch_body_edges():
    robot = oxbo_harvester(Pose(), "oxbo")
    half_h = robot.bound.size.y / 2
    front, back = robot.karos
    assert front.bound.pose.y - front.bound.size.y / 2 == pytest.approx(half_h)
    assert back.bound.pose.y + back.bound.size.y / 2 == pytest.approx(-half_h)


def test_tractor_details():
    robot = tractor(Pose(), "t")
    assert robot.kind == "tractor"
    assert robot.works_on == ["food"]
    assert robot.tank is None
    assert robot.power_source.capacity == 150.0
    assert [k.name for k in robot.karos] == ["front", "hitch_mount"]
    assert robot.karos[1].has_physics is False
    assert list(robot.hitches) == ["rear_hitch"]
    assert robot.controls.throttles_max == [0.0, 0.0, 0.2, 0.2]


def test_tractor_hitch_at_mount_centre():
    robot = tractor(Pose(), "t")
    mount = robot.karos[1]
    hitch = robot.hitches["rear_hitch"]
    assert hitch.bound.pose.y == pytest.approx(mount.bound.pose.y)
    assert hitch.bound.pose.y < -robot.bound.size.y / 2
    assert hitch.is_master is True


def test_trailer_details():
    robot = trailer(Pose(), "tr")
    assert robot.kind == "trailer"
    assert robot.role is RobotRole.SLAVE
    assert robot.power_source is None
    assert robot.tank.name == "storage_bin"
    assert robot.tank.capacity == 2000.0
    assert all(v == 0.0 for v in robot.controls.throttles_max)
    assert list(robot.hitches) == ["front_hitch"]


def test_trailer_hitch_beyond_pole():
    robot = trailer(Pose(), "tr")
    pole = robot.karos[0]
    hitch = robot.hitches["front_hitch"]
    pole_tip = pole.bound.pose.y + pole.bound.size.y / 2
    assert hitch.bound.pose.y > pole_tip
    assert pole.name == "towing_pole"


def test_truck_details():
    robot = truck(Pose(), "big")
    assert robot.kind == "big_truck"
    assert robot.works_on == ["cargo"]
    assert robot.color == RGB(100, 100, 255)
    assert len(robot.wheels) == 8
    assert robot.tank.name == "cargo_bed"
    assert robot.tank.capacity == 50000.0
    assert robot.power_source.capacity == 500.0
    assert robot.controls.throttles_diff == [0.15, -0.15, 0.25, -0.25, 0.6, -0.6, 0.8, -0.8]
    assert robot.karos[0].name == "cabin"


def test_truck_front_wheels_under_cabin():
    robot = truck(Pose(), "big")
    cabin = robot.karos[0]
    assert robot.wheels[0].pose.y == pytest.approx(cabin.bound.pose.y)
    ys = [w.pose.y for w in robot.wheels[::2]]
    assert ys == sorted(ys, reverse=True)