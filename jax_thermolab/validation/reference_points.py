"""Reference data points for validating the property engine.

Two sets are kept here:
- Saturated steam rows (T, P, hf, hg) at round temperatures, taken from
  standard steam tables.
- Normal boiling points of the database components, used to check the
  Antoine coefficients at 760 mmHg.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class SteamReferencePoint:
    """A saturated-steam reference point.

    Attributes:
        temperature_c: Saturation temperature [°C].
        pressure_kpa: Saturation pressure [kPa].
        hf: Saturated-liquid enthalpy [kJ/kg].
        hg: Saturated-vapor enthalpy [kJ/kg].
        source: Source reference.
    """

    temperature_c: float
    pressure_kpa: float
    hf: float
    hg: float
    source: str = "Steam tables"


@dataclass
class BoilingPoint:
    """Normal boiling point of a component.

    Attributes:
        compound: Component name as used in the component database.
        temperature_c: Boiling temperature at 101.325 kPa [°C].
        uncertainty_pct: Tolerance applied to the Antoine pressure.
    """

    compound: str
    temperature_c: float
    uncertainty_pct: float = 2.0


STEAM_REFERENCE: List[SteamReferencePoint] = [
    SteamReferencePoint(20.0, 2.339, 83.9, 2537.4),
    SteamReferencePoint(100.0, 101.42, 419.17, 2675.6),
    SteamReferencePoint(150.0, 476.16, 632.18, 2745.9),
    SteamReferencePoint(200.0, 1554.9, 852.26, 2792.0),
    SteamReferencePoint(300.0, 8587.9, 1344.8, 2749.6),
]

NORMAL_BOILING_POINTS: Dict[str, BoilingPoint] = {
    "Water": BoilingPoint("Water", 100.0),
    "Ethanol": BoilingPoint("Ethanol", 78.37),
    "Benzene": BoilingPoint("Benzene", 80.1),
    "Methane": BoilingPoint("Methane", -161.5),
}

ATMOSPHERIC_PRESSURE_KPA = 101.325


def get_boiling_point(compound: str) -> BoilingPoint:
    """Get the normal boiling point of a compound.

    Raises:
        ValueError: If no reference is available for the compound.
    """
    if compound not in NORMAL_BOILING_POINTS:
        available = list(NORMAL_BOILING_POINTS.keys())
        raise ValueError(f"Unknown compound: {compound}. Available: {available}")
    return NORMAL_BOILING_POINTS[compound]
