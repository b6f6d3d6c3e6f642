from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Set

from .errors import CannotRepair, OrderAlreadyProcessed, RepairInProgress, VehicleUnrepairable
from .events import ShopEvent, narrate
from .vehicle import Vehicle, VehicleStatus

if TYPE_CHECKING:
    from .roles import Client, RepairActor

logger = logging.getLogger(__name__)

# VINs with a process() call currently running
_IN_FLIGHT: Set[str] = set()


@dataclass(frozen=True)
class RepairResult:
    """Outcome of one repair attempt: a terminal status, plus the error on failure."""
    status: VehicleStatus
    error: Optional[CannotRepair] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_failure(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass(eq=False)
class WorkOrder:
    """
    One-shot repair request binding a client, a vehicle and a mechanic.

    Building one for a CannotFix vehicle raises VehicleUnrepairable, however
    it is built. Consume it once with process().
    """
    client: "Client"
    vehicle: Vehicle
    mechanic: "RepairActor"
    _processed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.vehicle.status is VehicleStatus.CANNOT_FIX:
            self._reject()

        narrate(logger, ShopEvent.ORDER_CREATED,
                f"{self.client.name} created a repair order for {self.vehicle.model}",
                client=self.client.name, mechanic=self.mechanic.name,
                vin=self.vehicle.vin, model=self.vehicle.model)

    @classmethod
    def create(cls, client: "Client", vehicle: Vehicle, mechanic: "RepairActor") -> "WorkOrder":
        return cls(client, vehicle, mechanic)

    def _reject(self) -> None:
        err = VehicleUnrepairable(self.vehicle)
        narrate(logger, ShopEvent.ORDER_REJECTED, f"Order rejected for {self.client.name}: {err}",
                level=logging.WARNING,
                client=self.client.name, vin=self.vehicle.vin, model=self.vehicle.model,
                error=str(err))
        raise err

    @property
    def processed(self) -> bool:
        return self._processed

    def process(self) -> RepairResult:
        """
        Run the repair attempt.

        - A vehicle condemned since the order was created is not touched again:
          the order is consumed and VehicleUnrepairable raised.
        - CannotRepair comes back as a failed RepairResult and is logged here,
          it does not reach the caller as an exception.
        - The final vehicle status is reported once on every exit path of the
          attempt, including unexpected exceptions, which propagate.
        """
        if self._processed:
            raise OrderAlreadyProcessed(f"order for {self.vehicle.vin} was already processed")
        vin = self.vehicle.vin
        if vin in _IN_FLIGHT:
            raise RepairInProgress(f"vehicle {vin} is already being repaired")

        self._processed = True
        if self.vehicle.status is VehicleStatus.CANNOT_FIX:
            self._reject()

        _IN_FLIGHT.add(vin)
        try:
            result = self.mechanic.repair(self)
            if not result.ok:
                logger.warning("Exception: %s", result.error,
                               extra={"structured": {"client": self.client.name, "vin": vin,
                                                     "error": type(result.error).__name__}})
            return result
        finally:
            _IN_FLIGHT.discard(vin)
            narrate(logger, ShopEvent.FINAL_STATUS,
                    f"Vehicle status after repair attempt: {self.vehicle.status.value}",
                    client=self.client.name, vin=vin, model=self.vehicle.model,
                    status=self.vehicle.status.value)


def create_order(client: "Client", vehicle: Vehicle, mechanic: "RepairActor") -> WorkOrder:
    return WorkOrder.create(client, vehicle, mechanic)
