#!/usr/bin/env python3
"""Rankine and Brayton cycle example.

This script demonstrates how to:
1. Build the default cycle configurations
2. Chain the stages into a cycle
3. Report per-stage work and heat
4. Plot the T-s diagram with the saturation dome

Run with: python examples/rankine_cycle.py
"""

import matplotlib.pyplot as plt
import numpy as np

from jax_thermolab.core.saturation import STEAM_SAT_TABLE
from jax_thermolab.processes import (
    create_brayton_cycle_config,
    create_rankine_cycle_config,
    cycle_ts_path,
    run_cycle_config,
)


def report(title, result):
    print(f"\n{title}:")
    for point in result.points:
        state = point.state
        print(
            f"  {point.name:<16} P={float(state.P):8.1f} kPa  T={float(state.T):7.1f} K  "
            f"h={float(state.h):8.1f} kJ/kg  [{state.phase}]"
        )
    print(f"  Net work:     {float(result.total_work):.1f} kJ/kg")
    print(f"  Heat input:   {float(result.total_heat_in):.1f} kJ/kg")
    print(f"  Efficiency:   {float(result.thermal_efficiency):.1%}")


def main():
    print("=" * 60)
    print("Power Cycle Analysis")
    print("=" * 60)

    rankine = run_cycle_config(create_rankine_cycle_config())
    brayton = run_cycle_config(create_brayton_cycle_config())

    report("Rankine Cycle (water)", rankine)
    report("Brayton Cycle (air)", brayton)

    try:
        fig, axes = plt.subplots(1, 2, figsize=(12, 5))

        # Saturation dome
        dome_T = np.array([row.T for row in STEAM_SAT_TABLE]) + 273.15
        dome_sf = np.array([row.sf for row in STEAM_SAT_TABLE])
        dome_sg = np.array([row.sg for row in STEAM_SAT_TABLE])
        axes[0].plot(dome_sf, dome_T, color="gray", linestyle="--", label="Saturation dome")
        axes[0].plot(dome_sg, dome_T, color="gray", linestyle="--")

        for ax, result, title in (
            (axes[0], rankine, "Rankine"),
            (axes[1], brayton, "Brayton"),
        ):
            s, T = cycle_ts_path(result)
            ax.plot(np.asarray(s), np.asarray(T), "o-", label=title)
            ax.set_xlabel("Entropy [kJ/kg/K]")
            ax.set_ylabel("Temperature [K]")
            ax.set_title(f"{title} T-s Diagram")
            ax.legend()
            ax.grid(True)

        plt.tight_layout()
        plt.savefig("cycle_ts_diagram.png", dpi=150)
        print("\nPlot saved to: cycle_ts_diagram.png")
        plt.show()

    except Exception as e:
        print(f"\nNote: Could not create plots ({e})")


if __name__ == "__main__":
    main()
