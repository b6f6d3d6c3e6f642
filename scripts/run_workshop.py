from __future__ import annotations

import argparse

import numpy as np

from repair_shop.preprocessing.loaders import load_scenario
from repair_shop.reporting.logging_setup import configure_logging
from repair_shop.shop.outcome import RandomOutcomeResolver
from repair_shop.simulation.workshop import build_garage, run_workshop, summarize


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the repair-shop workshop scenario.")
    parser.add_argument("--scenario", default="data/v1/scenarios/baseline.json")
    parser.add_argument("--seed", type=int, default=None, help="overrides the scenario seed")
    parser.add_argument("--rounds", type=int, default=None, help="overrides the scenario rounds")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-format", choices=["text", "json"], default="text")
    args = parser.parse_args()

    configure_logging(level=args.log_level, fmt=args.log_format)

    scenario = load_scenario(args.scenario)
    seed = args.seed if args.seed is not None else scenario.seed
    rounds = args.rounds if args.rounds is not None else scenario.rounds

    # one seed, two independent streams: repair verdicts and who brings which car
    verdict_seq, pick_seq = np.random.SeedSequence(seed).spawn(2)
    resolver = RandomOutcomeResolver(rng=np.random.default_rng(verdict_seq))
    garage = build_garage(scenario.garage, resolver=resolver)
    reports = run_workshop(garage, rounds=rounds, rng=np.random.default_rng(pick_seq))

    print()
    print("=== RESULTS ===")
    for rep in reports:
        outcome = rep.final_status.value if rep.accepted else "rejected"
        print(f"round {rep.round_no:02d} | {rep.client:<10} -> {rep.mechanic:<8} {rep.model} ({rep.vin}): {outcome}")
    print("Summary:", summarize(reports))
    print("Final garage:")
    for car in garage.vehicles:
        print(" ", car)


if __name__ == "__main__":
    main()
