from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class VehicleSpec:
    vin: str
    model: str
    written_off: bool = False


@dataclass(frozen=True)
class GarageSpec:
    clients: List[str]
    mechanics: List[str]
    vehicles: List[VehicleSpec]


@dataclass(frozen=True)
class Scenario:
    garage: GarageSpec
    rounds: int = 1
    seed: Optional[int] = None

    @property
    def n_requests(self) -> int:
        return self.rounds * len(self.garage.clients)
