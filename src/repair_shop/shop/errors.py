from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vehicle import Vehicle


class ShopError(Exception):
    """Base class for everything the repair shop raises on purpose."""


class VehicleUnrepairable(ShopError):
    """A work order was requested for a vehicle already in CannotFix."""

    def __init__(self, vehicle: "Vehicle") -> None:
        self.vehicle = vehicle
        super().__init__(f"Vehicle {vehicle.model} cannot be repaired.")


class CannotRepair(ShopError):
    """A repair attempt ended with the vehicle condemned."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"Vehicle {model} is beyond repair.")


class OrderAlreadyProcessed(ShopError):
    """Work orders are one-shot."""


class RepairInProgress(ShopError):
    """Another work order is already repairing this vehicle."""
