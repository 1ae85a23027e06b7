"""Base class for robot sensors and a small factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from flatsim.types import Pose

S = TypeVar("S", bound="Sensor")


class Sensor(ABC):
    """A sensor updated periodically and queried for its latest data."""

    def __init__(self) -> None:
        self.last_update_time = 0.0
        self.data_valid = False
        self.robot_pose = Pose()

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the sensor by ``dt`` seconds."""

    def set_robot_pose(self, pose: Pose) -> None:
        """Record the pose of the robot carrying this sensor."""
        self.robot_pose = pose

    @property
    @abstractmethod
    def data(self) -> Any:
        """The sensor-specific data record."""

    @property
    @abstractmethod
    def sensor_type(self) -> str:
        """Identifier of the sensor kind."""

    @abstractmethod
    def is_data_valid(self) -> bool:
        """Whether the current data can be used."""

    @property
    @abstractmethod
    def frequency(self) -> float:
        """Update frequency in Hz."""


def create_sensor(sensor_class: type[S], *args: Any, **kwargs: Any) -> S:
    """Instantiate ``sensor_class`` with the given arguments."""
    if not (isinstance(sensor_class, type) and issubclass(sensor_class, Sensor)):
        raise TypeError(f"{sensor_class!r} is not a Sensor class")
    return sensor_class(*args, **kwargs)