from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from repair_shop.preprocessing.schema import GarageSpec
from repair_shop.shop.errors import VehicleUnrepairable
from repair_shop.shop.order import create_order
from repair_shop.shop.outcome import OutcomeResolver, RandomOutcomeResolver
from repair_shop.shop.roles import Client, Mechanic
from repair_shop.shop.vehicle import Vehicle, VehicleStatus

logger = logging.getLogger(__name__)


@dataclass
class Garage:
    clients: List[Client]
    mechanics: List[Mechanic]
    vehicles: List[Vehicle]


@dataclass(frozen=True)
class RequestReport:
    """What happened to one client's request."""
    round_no: int
    client: str
    mechanic: str
    vin: str
    model: str
    accepted: bool
    final_status: VehicleStatus
    error: Optional[str] = None


def build_garage(spec: GarageSpec, resolver: Optional[OutcomeResolver] = None) -> Garage:
    """
    Mechanics share one resolver, so a single seed replays the whole run.
    """
    if resolver is None:
        resolver = RandomOutcomeResolver()

    vehicles = [
        Vehicle.written_off(v.vin, v.model) if v.written_off else Vehicle(v.vin, v.model)
        for v in spec.vehicles
    ]
    return Garage(
        clients=[Client(n) for n in spec.clients],
        mechanics=[Mechanic(n, resolver=resolver) for n in spec.mechanics],
        vehicles=vehicles,
    )


def run_workshop(
    garage: Garage,
    rounds: int = 1,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[RequestReport]:
    """
    Every client, once per round, brings a random vehicle to a random mechanic.

    Rejected orders (vehicle already condemned) are recorded and the loop goes
    on; failed repairs are reported by the work order itself.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")

    if rng is None:
        rng = np.random.default_rng(seed)
    reports: List[RequestReport] = []

    for r in range(1, rounds + 1):
        for client in garage.clients:
            car = garage.vehicles[int(rng.integers(0, len(garage.vehicles)))]
            mechanic = garage.mechanics[int(rng.integers(0, len(garage.mechanics)))]

            try:
                result = create_order(client, car, mechanic).process()
            except VehicleUnrepairable as ex:
                logger.error("[Error] Client %s: %s", client.name, ex)
                reports.append(RequestReport(
                    round_no=r, client=client.name, mechanic=mechanic.name,
                    vin=car.vin, model=car.model, accepted=False,
                    final_status=car.status, error=str(ex),
                ))
                continue

            reports.append(RequestReport(
                round_no=r, client=client.name, mechanic=mechanic.name,
                vin=car.vin, model=car.model, accepted=True,
                final_status=result.status,
                error=None if result.ok else str(result.error),
            ))

    return reports


def summarize(reports: List[RequestReport]) -> Dict[str, int]:
    summary = {"requests": len(reports), "rejected": 0, "fixed": 0, "cannot_fix": 0}
    for rep in reports:
        if not rep.accepted:
            summary["rejected"] += 1
        elif rep.final_status is VehicleStatus.FIXED:
            summary["fixed"] += 1
        else:
            summary["cannot_fix"] += 1
    return summary


def outcome_frequencies(resolver: OutcomeResolver, n_draws: int) -> Dict[VehicleStatus, float]:
    """Empirical verdict distribution over n_draws independent resolutions."""
    if n_draws < 1:
        raise ValueError("n_draws must be >= 1")

    verdicts = np.array([resolver.resolve() is VehicleStatus.FIXED for _ in range(n_draws)])
    p_fixed = float(verdicts.mean())
    return {VehicleStatus.FIXED: p_fixed, VehicleStatus.CANNOT_FIX: 1.0 - p_fixed}
