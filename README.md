# flatsim

Building blocks for a flat, two-dimensional simulation of agricultural
machines such as tractors, trailers, harvesters and trucks. The package
describes each machine: its body, wheels, control limits, body parts
(karosseries), hitches, storage tank and power source. It also gives simple
runtime models for tanks and power sources, and data records for GPS, IMU
and LIDAR measurements.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Describing machines

`flatsim.types` holds the data model, built from dataclasses and enums:

- `Pose`: position (`x`, `y`, `z`) and orientation (`yaw`, `roll`, `pitch`).
  `Pose.corners(size)` returns the four corners of a rectangle of that size
  centred on the pose and rotated by its yaw.
- `Size`, `Bound` (a pose plus a size), and `RGB` (which is frozen).
- `RobotControl`: per-wheel steering and throttle limits, differentials,
  and the side of each wheel.
- `KarosserieInfo`, `HitchInfo`, `TankInfo`, `PowerInfo`, `Capability`,
  `FollowerCapabilities`.
- `RobotInfo`: the full description of a machine.
- Enums `PowerType` (`FUEL`, `BATTERY`), `RobotRole` (`MASTER`, `FOLLOWER`,
  `SLAVE`) and `OP` (the operation modes `IDLE`, `CHARGING`, `STOP`, `PAUSE`,
  `EMERGENCY`, `TRANSPORT` and `WORK`).

`flatsim.machines` builds ready-made descriptions. Each function takes a
pose, a name, an optional colour and an optional uuid. When no uuid is
given, the name is used as the uuid.

```python
from flatsim.types import Pose, RGB
from flatsim.machines import tractor, trailer, oxbo_harvester, truck

t = tractor(Pose(0.0, 0.0, 0.0), "tractor0")
w = trailer(Pose(0.0, -5.0, 0.0), "trailer1", RGB(255, 150, 0))
h = oxbo_harvester(Pose(10.0, 10.0, 0.0), "oxbo2")
k = truck(Pose(20.0, 0.0, 0.0), "big_truck3")
```

The machines differ as follows:

- `tractor`: four wheels, a rear hitch named `rear_hitch`, and a fuel tank.
- `trailer`: has the `SLAVE` role, two wheels, a towing pole, a front hitch
  named `front_hitch`, and a storage bin. It has no power source.
- `oxbo_harvester`: six wheels, a front body with five sections, a harvest
  bin and a fuel tank.
- `truck`: eight wheels, a cabin, a cargo bed and a large fuel tank.

## Loading machines from JSON

`flatsim.loader` reads machine descriptions from JSON files:

```python
from flatsim.loader import load_from_json, find_machine_files, validate_json
from flatsim.types import Pose

for path in find_machine_files("machines"):
    if validate_json(path):
        info = load_from_json(path, Pose(0.0, 0.0, 0.0), "", None)
```

- `find_machine_files(directory)` returns the `.json` files directly inside
  the directory, sorted by name. It returns an empty list, and logs a
  warning, if the directory does not exist.
- `validate_json(path)` returns `True` only if the file can be read as JSON
  and has the required fields: `info`, `dimensions`, `color`, `wheels` and
  `controls` at the top level, and `type`, `name`, `rci` and `works_on`
  inside `info`.
- `load_from_json(path, spawn_pose, name="", color=None)` builds a
  `RobotInfo`:
  - It raises `RuntimeError` if the file cannot be opened.
  - A non-empty `name` replaces the file's name, and a given `color`
    replaces the file's colour.
  - If the file has no uuid, one is made from the file's name plus a random
    number.
  - Steering angles in `controls.steering` are given in degrees and stored
    in radians.
  - If `controls.throttle.differential` is missing, the throttle
    differentials are all zero.
  - The sections `karosseries`, `hitches`, `tank`, `power` and `capability`
    are optional.

## Runtime components

- `flatsim.power.Power` is a fuel or battery store that starts full.
  - `update(dt, multiplier)` consumes energy at the consumption rate scaled
    by the multiplier, and never goes below zero.
  - `charge(dt)` only has an effect on batteries.
  - `refuel(amount)` and `refuel_full()` top up the store, up to its
    capacity.
  - `percentage` is a property. `is_low()` is true below 15 %.
- `flatsim.tank.Tank` is a store of material that starts empty. Its kind is
  a `TankType`.
  - `fill` and `empty` clamp the amount to the range from 0 to the capacity.
    `empty_all()` empties the tank.
  - `attach(color, parent_name, bound)` binds the tank to its machine.
  - `tick(dt, pose)` moves the tank with the machine's pose.
- `flatsim.sensor.Sensor` is the abstract sensor interface, with `update`,
  `set_robot_pose`, `data`, `sensor_type`, `is_data_valid` and `frequency`.
  `create_sensor(cls, *args, **kwargs)` creates an instance of a `Sensor`
  subclass, and raises `TypeError` for any other class.
- Sensor data records:
  - `flatsim.gps.GPSData`, with the `RTKStatus` enum.
  - `flatsim.imu.IMUData`, with the `CalibrationStatus` enum.
  - `flatsim.lidar.LIDARData`, with the `ScanStatus` and `ScanPattern`
    enums. `LIDARData.clear()` removes all measurements and keeps the
    configuration.
- `flatsim.utils`:
  - angle conversion (`rad2deg`, `deg2rad`, `normalize_angle`)
  - `mapper` for mapping a value from one range to another
  - `float_to_byte`
  - pose composition (`shift`, `move`)
  - `ackermann_scale`
- `flatsim.constants`: tuning values for physics and the camera.
- `flatsim.exceptions`: the error hierarchy. All errors derive from
  `MultiverseException`, which is a subclass of `RuntimeError`.

## What this package does not do

The package has no physics engine, no simulation loop and no visualisation.
No module drives wheels, steers machines, connects or disconnects trailers,
or renders anything. `Sensor` is only an interface: there are no concrete
GPS, IMU or LIDAR sensors that produce measurements, only the data records
those measurements would fill. The package has no command-line program.