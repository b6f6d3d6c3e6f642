from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from .errors import CannotRepair
from .events import ShopEvent, narrate
from .order import RepairResult, WorkOrder, create_order
from .outcome import OutcomeResolver, RandomOutcomeResolver
from .vehicle import Vehicle, VehicleStatus

logger = logging.getLogger(__name__)


def _check_name(name: str, role: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{role} name must be a non-empty string")


class RepairActor(Protocol):
    """Anything that can carry out a repair attempt for a work order."""
    name: str

    def repair(self, order: WorkOrder) -> RepairResult:
        ...


@dataclass(frozen=True)
class Client:
    name: str

    def __post_init__(self) -> None:
        _check_name(self.name, "client")

    def request_repair(self, vehicle: Vehicle, mechanic: RepairActor) -> WorkOrder:
        return create_order(self, vehicle, mechanic)


@dataclass(frozen=True)
class Mechanic:
    """
    Repair actor. Mechanics are interchangeable: the only thing that decides an
    outcome is the resolver, which may be shared between several of them.
    """
    name: str
    resolver: OutcomeResolver = field(default_factory=RandomOutcomeResolver, compare=False, repr=False)

    def __post_init__(self) -> None:
        _check_name(self.name, "mechanic")

    def repair(self, order: WorkOrder) -> RepairResult:
        """
        Waiting/any -> Repairing -> Fixed | CannotFix.

        A CannotFix verdict is returned as a failed RepairResult carrying
        CannotRepair; the vehicle is never left in Repairing on return.
        """
        car = order.vehicle
        previous = car.status
        narrate(logger, ShopEvent.REPAIR_STARTED,
                f"{self.name} started repairing {car.model}",
                mechanic=self.name, vin=car.vin, model=car.model)
        car._transition(VehicleStatus.REPAIRING)

        verdict = self.resolver.resolve()

        if verdict is VehicleStatus.FIXED:
            car._transition(VehicleStatus.FIXED)
            narrate(logger, ShopEvent.REPAIR_SUCCEEDED,
                    f"{self.name} successfully repaired {car.model}",
                    mechanic=self.name, vin=car.vin, model=car.model)
            return RepairResult(status=VehicleStatus.FIXED)

        if verdict is VehicleStatus.CANNOT_FIX:
            car._transition(VehicleStatus.CANNOT_FIX)
            narrate(logger, ShopEvent.REPAIR_FAILED,
                    f"{self.name} reported that {car.model} is beyond repair",
                    mechanic=self.name, vin=car.vin, model=car.model)
            return RepairResult(status=VehicleStatus.CANNOT_FIX, error=CannotRepair(car.model))

        car._transition(previous)
        raise ValueError(f"resolver returned a non-terminal verdict: {verdict!r}")
