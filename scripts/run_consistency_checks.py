#!/usr/bin/env python3
"""Run the property-engine consistency checks.

This script runs:
1. Saturation table checks (monotonicity, steam-table agreement)
2. Ideal-gas reference datum
3. Antoine boiling points
4. Binary mixture identities
5. Water quality mode vs P,T saturated liquid

Usage:
    python scripts/run_consistency_checks.py [--verbose]
"""

import argparse
import logging
import sys
import time


def main():
    parser = argparse.ArgumentParser(description="Run property-engine consistency checks")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every check")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from jax_thermolab.validation import run_all_checks

    print("=" * 60)
    print("PROPERTY ENGINE CONSISTENCY CHECKS")
    print("=" * 60)

    start = time.time()
    results = run_all_checks()
    elapsed = time.time() - start

    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"  {result.name:<32} {status}  (max error {result.max_error:.3g})")
        if args.verbose:
            for detail in result.details:
                print(f"      - {detail}")

    n_failed = sum(not r.passed for r in results)
    print("-" * 60)
    print(f"{len(results) - n_failed}/{len(results)} checks passed in {elapsed:.1f} s")

    return 1 if n_failed else 0


if __name__ == "__main__":
    sys.exit(main())
