"""Storage tanks carried by harvesters, trailers and trucks."""

from __future__ import annotations

from enum import Enum, auto

from flatsim.types import RGB, Bound, Pose
from flatsim.utils import move


class TankType(Enum):
    HARVEST = auto()
    WASTE = auto()


class Tank:
    """A bounded store of material that follows its carrier."""

    def __init__(
        self,
        name: str,
        kind: TankType,
        capacity: float,
        fill_rate: float,
        empty_rate: float,
    ) -> None:
        self.name = name
        self.kind = kind
        self.capacity = capacity
        self.current_amount = 0.0
        self.fill_rate = fill_rate
        self.empty_rate = empty_rate
        self.parent_name = ""
        self.bound = Bound()
        self.pose = Pose()
        self.color = RGB()

    def fill(self, amount: float) -> None:
        self.current_amount = min(self.current_amount + amount, self.capacity)

    def empty(self, amount: float) -> None:
        self.current_amount = max(self.current_amount - amount, 0.0)

    def empty_all(self) -> None:
        self.current_amount = 0.0

    @property
    def percentage(self) -> float:
        return self.current_amount / self.capacity * 100.0 if self.capacity > 0.0 else 0.0

    def is_full(self) -> bool:
        return self.current_amount >= self.capacity

    def is_empty(self) -> bool:
        return self.current_amount <= 0.0

    def attach(self, color: RGB, parent_name: str, bound: Bound) -> None:
        """Bind the tank to its carrier with a local bound."""
        self.color = color
        self.parent_name = parent_name
        self.bound = bound

    def tick(self, dt: float, trans_pose: Pose) -> None:
        """Move the tank with its carrier's pose."""
        new_pose = move(self.bound.pose, trans_pose)
        self.pose.x = new_pose.x
        self.pose.y = new_pose.y
        self.pose.yaw = new_pose.yaw