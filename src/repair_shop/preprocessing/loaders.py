from __future__ import annotations

import json
from pathlib import Path
from typing import List

from repair_shop.preprocessing.schema import GarageSpec, Scenario, VehicleSpec


def load_json(path: str | Path) -> dict:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _names(data: dict, key: str) -> List[str]:
    names = data.get(key, [])
    if not isinstance(names, list) or not names:
        raise ValueError(f"{key} must be a non-empty list")
    for n in names:
        if not isinstance(n, str) or not n.strip():
            raise ValueError(f"{key} entries must be non-empty strings, got {n!r}")
    return list(names)


def garage_from_dict(data: dict) -> GarageSpec:
    clients = _names(data, "clients")
    mechanics = _names(data, "mechanics")

    vehicles_data = data.get("vehicles", [])
    if not vehicles_data:
        raise ValueError("vehicles must be a non-empty list")

    vehicles: List[VehicleSpec] = []
    seen = set()
    for v in vehicles_data:
        spec = VehicleSpec(
            vin=str(v["vin"]),
            model=str(v["model"]),
            written_off=bool(v.get("written_off", False)),
        )

        # Basic validation
        if not spec.vin.strip():
            raise ValueError("vin must not be empty")
        if spec.vin in seen:
            raise ValueError(f"duplicate vin {spec.vin}")
        seen.add(spec.vin)

        vehicles.append(spec)

    return GarageSpec(clients=clients, mechanics=mechanics, vehicles=vehicles)


def load_garage_from_json(path: str | Path) -> GarageSpec:
    return garage_from_dict(load_json(path))


def load_scenario(path: str | Path) -> Scenario:
    """
    Load a workshop scenario.
    Scenario JSON must contain:
        - garage_file
    and may contain:
        - rounds (default 1)
        - seed (default: unseeded)
    """
    path = Path(path)
    data = load_json(path)

    # Resolve garage file relative to scenario file
    garage_path = Path(data["garage_file"])
    if not garage_path.is_absolute():
        garage_path = path.parent / garage_path

    garage = load_garage_from_json(garage_path)

    rounds = int(data.get("rounds", 1))
    if rounds < 1:
        raise ValueError("rounds must be >= 1")

    seed = data.get("seed")
    if seed is not None:
        seed = int(seed)

    return Scenario(garage=garage, rounds=rounds, seed=seed)
