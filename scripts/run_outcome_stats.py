from __future__ import annotations

import argparse

from repair_shop.shop.outcome import FIX_THRESHOLD, DRAW_RANGE, RandomOutcomeResolver
from repair_shop.shop.vehicle import VehicleStatus
from repair_shop.simulation.workshop import outcome_frequencies


def main() -> None:
    parser = argparse.ArgumentParser(description="Empirical repair outcome distribution.")
    parser.add_argument("--draws", type=int, default=10_000)
    parser.add_argument("--seed", type=int, default=123)
    args = parser.parse_args()

    freq = outcome_frequencies(RandomOutcomeResolver(seed=args.seed), args.draws)

    print("Draws:", args.draws, "Seed:", args.seed)
    print(f"Expected P(Fixed) = {FIX_THRESHOLD / DRAW_RANGE:.3f}")
    print(f"Observed P(Fixed) = {freq[VehicleStatus.FIXED]:.3f}")
    print(f"Observed P(CannotFix) = {freq[VehicleStatus.CANNOT_FIX]:.3f}")


if __name__ == "__main__":
    main()
