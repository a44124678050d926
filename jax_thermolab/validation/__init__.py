"""Reference data and consistency checks for the property engine."""

from jax_thermolab.validation.consistency import (
    ALL_CHECKS,
    CheckResult,
    run_all_checks,
)
from jax_thermolab.validation.reference_points import (
    NORMAL_BOILING_POINTS,
    STEAM_REFERENCE,
)

__all__ = [
    "ALL_CHECKS",
    "CheckResult",
    "run_all_checks",
    "NORMAL_BOILING_POINTS",
    "STEAM_REFERENCE",
]
