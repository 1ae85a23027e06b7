"""Fuel tanks and batteries that drain with work and recharge."""

from __future__ import annotations

from flatsim.types import PowerType

LOW_THRESHOLD_PERCENT = 15.0


class Power:
    """An energy store: litres of fuel or kWh of battery."""

    def __init__(
        self,
        name: str,
        kind: PowerType,
        capacity: float,
        consumption_rate: float,
        charge_rate: float = 0.0,
    ) -> None:
        self.name = name
        self.kind = kind
        self.capacity = capacity
        self.current_amount = capacity
        self.consumption_rate = consumption_rate
        self.charge_rate = charge_rate

    def update(self, dt: float, consumption_multiplier: float) -> None:
        """Consume energy for ``dt`` seconds scaled by the operation mode."""
        if self.current_amount > 0.0:
            self.current_amount = max(
                0.0, self.current_amount - self.consumption_rate * consumption_multiplier * dt
            )

    def charge(self, dt: float) -> None:
        """Charge for ``dt`` seconds; only batteries charge."""
        if self.kind is PowerType.BATTERY and self.current_amount < self.capacity:
            self.current_amount = min(self.current_amount + self.charge_rate * dt, self.capacity)

    def refuel(self, amount: float) -> None:
        self.current_amount = min(self.current_amount + amount, self.capacity)

    def refuel_full(self) -> None:
        self.current_amount = self.capacity

    @property
    def percentage(self) -> float:
        return self.current_amount / self.capacity * 100.0 if self.capacity > 0.0 else 0.0

    def is_empty(self) -> bool:
        return self.current_amount <= 0.0

    def is_low(self) -> bool:
        return self.percentage < LOW_THRESHOLD_PERCENT

    def is_full(self) -> bool:
        return self.current_amount >= self.capacity