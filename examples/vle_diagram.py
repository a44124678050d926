#!/usr/bin/env python3
"""Binary mixture P-x-y example.

This script demonstrates how to:
1. Look up two components and their interaction coefficient
2. Compute the regular-solution and ideal P-x-y curves
3. Check the phase-split flag
4. Plot the P-x-y diagram

Run with: python examples/vle_diagram.py
"""

import matplotlib.pyplot as plt
import numpy as np

from jax_thermolab.core.components import default_margules_coefficient, get_component
from jax_thermolab.core.mixture import ideal_vle_curve, mixture_curve


def main():
    a = get_component("Ethanol")
    b = get_component("Water")
    T_celsius = 70.0
    A = default_margules_coefficient(a.name, b.name)

    print("=" * 60)
    print(f"{a.name}/{b.name} at {T_celsius:.0f} C (Margules A = {A})")
    print("=" * 60)

    curve = mixture_curve(a, b, T_celsius, A)
    ideal = ideal_vle_curve(a, b, T_celsius)

    print(f"  Psat {a.name}: {float(curve.Psat_a):.2f} kPa")
    print(f"  Psat {b.name}: {float(curve.Psat_b):.2f} kPa")
    print(f"  Phase split predicted: {bool(curve.unstable)}")

    print("\n   x_a     y_a     P [kPa]   gamma_a  gamma_b")
    for point in curve.as_sequence()[::4]:
        print(
            f"  {float(point.x_a):.3f}  {float(point.y_a):.3f}  {float(point.P_total):8.2f}  "
            f"{float(point.gamma_a):7.3f}  {float(point.gamma_b):7.3f}"
        )

    try:
        fig, ax = plt.subplots(figsize=(7, 5))
        x = np.asarray(curve.points.x_a)
        ax.plot(x, np.asarray(curve.points.P_total), color="blue", label="Bubble (regular)")
        ax.plot(np.asarray(curve.points.y_a), np.asarray(curve.points.P_total), color="red", label="Dew (regular)")
        ax.plot(np.asarray(ideal.x_a), np.asarray(ideal.P), color="gray", linestyle="--", label="Raoult")
        ax.set_xlabel(f"Mole fraction {a.name}")
        ax.set_ylabel("Pressure [kPa]")
        ax.set_title(f"P-x-y at {T_celsius:.0f} C")
        ax.legend()
        ax.grid(True)

        plt.tight_layout()
        plt.savefig("pxy_diagram.png", dpi=150)
        print("\nPlot saved to: pxy_diagram.png")
        plt.show()

    except Exception as e:
        print(f"\nNote: Could not create plots ({e})")


if __name__ == "__main__":
    main()
