"""Numerical integration methods.

Provides adaptive Simpson's rule integration with a recursion budget. When
the budget runs out on a subinterval that has not converged, the Simpson
estimate for that subinterval is used anyway and a ConvergenceDiagnostic is
reported, so a hard-to-integrate function degrades the accuracy of the
answer instead of aborting the computation.

Two entry points share one implementation:

- integrate() returns a plain float. Diagnostics go to an injected
  ``on_diagnostic`` callback, or are issued as ConvergenceBudgetExhausted
  warnings when no callback is given.
- integrate_with_diagnostics() returns a QuadratureResult carrying the
  value and every diagnostic, and issues no warnings.
"""

from __future__ import annotations

import logging
import math
import numbers
import warnings
from collections.abc import Callable
from dataclasses import dataclass, field

from adaptquad.numerics.errors import ConvergenceBudgetExhausted, IntegrationError
from adaptquad.numerics.trace import EvaluationTrace

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-10
DEFAULT_MAX_DEPTH = 20


@dataclass(frozen=True)
class ConvergenceDiagnostic:
    """Where and by how much a subinterval failed to converge.

    Attributes:
        a: Left end of the unconverged subinterval.
        b: Right end of the unconverged subinterval.
        midpoint: Midpoint the next split would have used.
        trapezoid: Trapezoid estimate over [a, b].
        simpson: Simpson estimate over [a, b] (the value that was used).
        difference: |trapezoid - simpson|, the local error indicator.
    """

    a: float
    b: float
    midpoint: float
    trapezoid: float
    simpson: float
    difference: float

    @property
    def message(self) -> str:
        return (
            f"recursion budget exhausted at x = {self.midpoint!r} "
            f"(subinterval [{self.a!r}, {self.b!r}], |error| ~ {self.difference:.3g})"
        )


@dataclass
class QuadratureResult:
    """Value of an integral together with its non-fatal diagnostics.

    Attributes:
        value: The integral estimate.
        diagnostics: One entry per subinterval where the budget ran out.
        evaluations: Number of integrand evaluations performed.
    """

    value: float
    diagnostics: list[ConvergenceDiagnostic] = field(default_factory=list)
    evaluations: int = 0

    @property
    def converged(self) -> bool:
        """True if every subinterval met the tolerance."""
        return not self.diagnostics

    def __float__(self) -> float:
        return self.value


def _check_real(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise IntegrationError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise IntegrationError(f"{name} must be finite, got {value!r}")
    return value


def _validate(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float,
    max_depth: int,
) -> tuple[float, float, float, int]:
    if not callable(f):
        raise TypeError(f"integrand must be callable, got {type(f).__name__}")
    a = _check_real("a", a)
    b = _check_real("b", b)
    tolerance = _check_real("tolerance", tolerance)
    if tolerance <= 0:
        raise IntegrationError(f"tolerance must be positive, got {tolerance!r}")
    if isinstance(max_depth, bool) or not isinstance(max_depth, numbers.Integral):
        raise IntegrationError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise IntegrationError(f"max_depth must be non-negative, got {max_depth!r}")
    return a, b, tolerance, int(max_depth)


def _adaptive_simpson(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float,
    max_depth: int,
    report: Callable[[ConvergenceDiagnostic], None],
    trace: EvaluationTrace | None,
) -> tuple[float, int]:
    """Bisect [a, b] (a < b) depth-first, left half before right half.

    Pending subintervals live on an explicit stack of
    (a, b, fa, fb, depth, budget) frames, so the reachable depth is bounded
    by max_depth only and not by the interpreter's recursion limit.

    Returns:
        Tuple of (integral_value, number_of_evaluations).
    """
    evaluations = 0

    def _evaluate(x: float, depth: int) -> float:
        nonlocal evaluations
        evaluations += 1
        fx = f(x)
        if trace is not None:
            trace.record(x, fx, depth)
        return fx

    total = 0.0
    stack = [(a, b, _evaluate(a, 0), _evaluate(b, 0), 0, max_depth)]

    while stack:
        a, b, fa, fb, depth, budget = stack.pop()
        d = (a + b) / 2.0
        fd = _evaluate(d, depth)

        a1 = (fa + fb) * (b - a) / 2.0
        a2 = (fa + 4.0 * fd + fb) * (b - a) / 6.0

        if abs(a1 - a2) < tolerance:
            total += a2
            continue

        if budget <= 0:
            report(
                ConvergenceDiagnostic(
                    a=a,
                    b=b,
                    midpoint=d,
                    trapezoid=a1,
                    simpson=a2,
                    difference=abs(a1 - a2),
                )
            )
            total += a2
            continue

        # Right pushed first so the left half is popped first
        stack.append((d, b, fd, fb, depth + 1, budget - 1))
        stack.append((a, d, fa, fd, depth + 1, budget - 1))

    return total, evaluations


def _run(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float,
    max_depth: int,
    report: Callable[[ConvergenceDiagnostic], None],
    trace: EvaluationTrace | None,
) -> tuple[float, int]:
    a, b, tolerance, max_depth = _validate(f, a, b, tolerance, max_depth)

    if a == b:
        return 0.0, 0

    if a > b:
        value, evaluations = _adaptive_simpson(f, b, a, tolerance, max_depth, report, trace)
        return -value, evaluations

    return _adaptive_simpson(f, a, b, tolerance, max_depth, report, trace)


def integrate(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    on_diagnostic: Callable[[ConvergenceDiagnostic], None] | None = None,
    trace: EvaluationTrace | None = None,
) -> float:
    """Adaptive Simpson's rule integration.

    Each subinterval compares its trapezoid and Simpson estimates. If they
    agree to within ``tolerance`` the Simpson estimate is accepted, otherwise
    the subinterval is bisected at its midpoint and both halves are
    integrated with one less level of recursion budget. Endpoint and
    midpoint values are handed down so no point is evaluated twice.

    Running out of budget is not an error. The Simpson estimate for the
    subinterval is used and a diagnostic locating it is reported.

    The tolerance is absolute and the same at every depth, so an integrand
    that is large compared to it may need the whole budget everywhere. The
    worst case is 2**(max_depth + 1) + 1 evaluations: about two million at
    the default max_depth of 20.

    Args:
        f: Function to integrate.
        a: Lower bound.
        b: Upper bound. If b < a the result is negated.
        tolerance: Absolute per-subinterval tolerance on |trapezoid - simpson|.
        max_depth: Maximum bisection depth. Bounds the work, see above.
        on_diagnostic: Called with each ConvergenceDiagnostic as soon as it is
            detected. When omitted, diagnostics are logged and issued as
            ConvergenceBudgetExhausted warnings.
        trace: Optional EvaluationTrace that receives every evaluation point.

    Returns:
        The integral estimate.

    Raises:
        IntegrationError: If bounds, tolerance or max_depth are invalid.
        TypeError: If f is not callable.
    """
    collected: list[ConvergenceDiagnostic] = []
    report = on_diagnostic if on_diagnostic is not None else collected.append

    value, evaluations = _run(f, a, b, tolerance, max_depth, report, trace)

    for diagnostic in collected:
        logger.warning("Integration did not converge: %s", diagnostic.message)
        warnings.warn(diagnostic.message, ConvergenceBudgetExhausted, stacklevel=2)

    logger.debug(
        "Integrated over [%s, %s]: value=%r evaluations=%d", a, b, value, evaluations
    )
    return value


def integrate_with_diagnostics(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    trace: EvaluationTrace | None = None,
) -> QuadratureResult:
    """Like integrate(), but returns diagnostics instead of warning.

    Returns:
        QuadratureResult with the value, the diagnostics in detection order
        and the evaluation count.
    """
    result = QuadratureResult(value=0.0)
    value, evaluations = _run(f, a, b, tolerance, max_depth, result.diagnostics.append, trace)
    result.value = value
    result.evaluations = evaluations

    if not result.converged:
        logger.info(
            "Integration over [%s, %s] finished with %d unconverged subinterval(s)",
            a,
            b,
            len(result.diagnostics),
        )
    return result
