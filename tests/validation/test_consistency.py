"""Tests for the consistency checks and reference data."""

import pytest

from jax_thermolab.core.components import COMPONENT_DB
from jax_thermolab.validation import ALL_CHECKS, CheckResult, run_all_checks
from jax_thermolab.validation.consistency import (
    check_antoine_boiling_points,
    check_ideal_gas_datum,
    check_mixture_identities,
    check_quality_vs_saturated_liquid,
    check_saturation_monotonic,
    check_saturation_reference,
)
from jax_thermolab.validation.reference_points import (
    NORMAL_BOILING_POINTS,
    get_boiling_point,
)


class TestReferencePoints:
    """Tests for the reference data."""

    def test_every_component_has_boiling_point(self):
        assert set(NORMAL_BOILING_POINTS) == set(COMPONENT_DB)

    def test_unknown_compound(self):
        with pytest.raises(ValueError, match="Unknown compound"):
            get_boiling_point("Toluene")


class TestConsistencyChecks:
    """Each check should pass on the shipped data."""

    @pytest.mark.parametrize(
        "check",
        [
            check_saturation_monotonic,
            check_saturation_reference,
            check_ideal_gas_datum,
            check_antoine_boiling_points,
            check_mixture_identities,
            check_quality_vs_saturated_liquid,
        ],
    )
    def test_check_passes(self, check):
        result = check()
        assert isinstance(result, CheckResult)
        assert result.passed, result.details

    def test_failing_check_reports(self):
        """An impossible tolerance fails and keeps the error."""
        result = check_saturation_reference(tolerance=0.0)
        assert not result.passed
        assert result.max_error > 0.0
        assert result.details

    def test_run_all(self):
        results = run_all_checks()
        assert len(results) == len(ALL_CHECKS)
        assert all(r.passed for r in results)
