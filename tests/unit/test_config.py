"""Unit tests for QuadratureConfig."""

import math
from unittest import mock

import pytest

from adaptquad.config import QuadratureConfig
from adaptquad.numerics.errors import ConvergenceBudgetExhausted
from adaptquad.numerics.integration import DEFAULT_MAX_DEPTH, DEFAULT_TOLERANCE


class TestQuadratureConfig:

    def test_defaults(self):
        config = QuadratureConfig()
        assert config.tolerance == DEFAULT_TOLERANCE
        assert config.max_depth == DEFAULT_MAX_DEPTH

    @pytest.mark.parametrize("tolerance", [0.0, -1.0, math.nan])
    def test_rejects_bad_tolerance(self, tolerance):
        with pytest.raises(ValueError):
            QuadratureConfig(tolerance=tolerance)

    @pytest.mark.parametrize("max_depth", [-1, 1.5, True])
    def test_rejects_bad_max_depth(self, max_depth):
        with pytest.raises(ValueError):
            QuadratureConfig(max_depth=max_depth)

    def test_frozen(self):
        config = QuadratureConfig()
        with pytest.raises(AttributeError):
            config.tolerance = 1.0

    def test_integrate_uses_settings(self):
        """A zero budget config reports non-convergence for x^2."""
        config = QuadratureConfig(tolerance=1e-12, max_depth=0)
        with pytest.warns(ConvergenceBudgetExhausted):
            value = config.integrate(lambda x: x * x, 0.0, 1.0)
        assert value == pytest.approx(1 / 3)

    def test_integrate_with_diagnostics(self):
        config = QuadratureConfig(tolerance=1e-12, max_depth=1)
        result = config.integrate_with_diagnostics(lambda x: x * x, 0.0, 1.0)
        assert len(result.diagnostics) == 2

    def test_integration_methods_are_documented(self):
        assert QuadratureConfig.integrate.__doc__
        assert QuadratureConfig.integrate_with_diagnostics.__doc__


class TestFromEnv:

    def test_defaults_without_env(self):
        with mock.patch.dict("os.environ", {}, clear=True):
            assert QuadratureConfig.from_env() == QuadratureConfig()

    def test_reads_env(self):
        env = {"AQ_TOLERANCE": "1e-6", "AQ_MAX_DEPTH": "12"}
        with mock.patch.dict("os.environ", env, clear=True):
            config = QuadratureConfig.from_env()
        assert config.tolerance == 1e-6
        assert config.max_depth == 12

    def test_invalid_env_raises(self):
        with mock.patch.dict("os.environ", {"AQ_MAX_DEPTH": "-3"}, clear=True):
            with pytest.raises(ValueError):
                QuadratureConfig.from_env()
