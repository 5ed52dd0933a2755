"""Default integration settings.

Example usage:
    from adaptquad.config import QuadratureConfig

    config = QuadratureConfig(tolerance=1e-8, max_depth=30)
    value = config.integrate(math.sin, 0.0, math.pi)

Environment variables (read by QuadratureConfig.from_env):
    AQ_TOLERANCE: Per-subinterval absolute tolerance
    AQ_MAX_DEPTH: Recursion budget
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from adaptquad.numerics.integration import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_TOLERANCE,
    QuadratureResult,
    integrate,
    integrate_with_diagnostics,
)


@dataclass(frozen=True)
class QuadratureConfig:
    """Tolerance and recursion budget applied to integrations.

    Attributes:
        tolerance: Absolute tolerance on |trapezoid - simpson| per subinterval.
        max_depth: Maximum recursion depth before falling back to a warned estimate.

    Raises:
        ValueError: If tolerance is not positive or max_depth is negative.
    """

    tolerance: float = DEFAULT_TOLERANCE
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance!r}")
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth!r}")

    @classmethod
    def from_env(cls) -> QuadratureConfig:
        """Build a config from AQ_TOLERANCE / AQ_MAX_DEPTH, falling back to defaults."""
        tolerance = os.environ.get("AQ_TOLERANCE", "")
        max_depth = os.environ.get("AQ_MAX_DEPTH", "")
        return cls(
            tolerance=float(tolerance) if tolerance else DEFAULT_TOLERANCE,
            max_depth=int(max_depth) if max_depth else DEFAULT_MAX_DEPTH,
        )

    def integrate(self, f: Callable[[float], float], a: float, b: float, **kwargs: Any) -> float:
        """integrate() with this config's tolerance and max_depth."""
        return integrate(f, a, b, self.tolerance, self.max_depth, **kwargs)

    def integrate_with_diagnostics(
        self, f: Callable[[float], float], a: float, b: float, **kwargs: Any
    ) -> QuadratureResult:
        """integrate_with_diagnostics() with this config's tolerance and max_depth."""
        return integrate_with_diagnostics(f, a, b, self.tolerance, self.max_depth, **kwargs)
