from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class VehicleStatus(str, Enum):
    """Lifecycle order: Waiting -> Repairing -> {Fixed | CannotFix}."""
    WAITING = "Waiting"
    REPAIRING = "Repairing"
    FIXED = "Fixed"
    CANNOT_FIX = "CannotFix"

    @property
    def is_terminal(self) -> bool:
        return self in (VehicleStatus.FIXED, VehicleStatus.CANNOT_FIX)


@dataclass(frozen=True, eq=False)
class Vehicle:
    """
    One physical car in the shop.

    Identity is the VIN: two instances with the same VIN are the same car,
    whatever their model string or status.

    The vehicle only holds its status. Sequencing of transitions is driven by
    the mechanic and the work order, never checked here. VIN and model are
    fixed for the life of the instance.
    """
    vin: str
    model: str
    _status: VehicleStatus = field(default=VehicleStatus.WAITING, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.vin, str) or not self.vin.strip():
            raise ValueError("vin must be a non-empty string")
        if not isinstance(self.model, str) or not self.model.strip():
            raise ValueError(f"model must be a non-empty string for {self.vin}")

    @classmethod
    def written_off(cls, vin: str, model: str) -> "Vehicle":
        """A vehicle that arrives already condemned."""
        v = cls(vin, model)
        v._transition(VehicleStatus.CANNOT_FIX)
        return v

    @property
    def status(self) -> VehicleStatus:
        return self._status

    def _transition(self, new_status: VehicleStatus) -> None:
        # internal: only the repair actor moves a vehicle through its lifecycle
        if not isinstance(new_status, VehicleStatus):
            raise TypeError(f"unknown vehicle status: {new_status!r}")
        object.__setattr__(self, "_status", new_status)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.vin == other.vin

    def __hash__(self) -> int:
        return hash(self.vin)

    def __str__(self) -> str:
        return f"{self.model} (VIN: {self.vin}), status: {self._status.value}"
