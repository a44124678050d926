"""Tests for the package-level quick start."""

import doctest

import jax_thermolab


class TestQuickStart:
    """The examples in the package docstring run as written."""

    def test_docstring_examples(self):
        results = doctest.testmod(jax_thermolab, verbose=False)
        assert results.attempted > 0
        assert results.failed == 0

    def test_version(self):
        assert jax_thermolab.__version__ == "0.1.0"
