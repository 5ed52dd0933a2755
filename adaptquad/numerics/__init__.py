"""Numerical methods.

This module provides pure Python implementations of:
- Adaptive Simpson integration with a recursion budget
- Evaluation tracing for inspecting where the integrator worked
- Closed-form Beta function references
"""

from adaptquad.numerics.errors import (
    ConvergenceBudgetExhausted,
    IntegrationError,
    QuadratureWarning,
)
from adaptquad.numerics.integration import (
    ConvergenceDiagnostic,
    QuadratureResult,
    integrate,
    integrate_with_diagnostics,
)
from adaptquad.numerics.special import beta_function, beta_integrand
from adaptquad.numerics.trace import EvaluationPoint, EvaluationTrace

__all__ = [
    "ConvergenceBudgetExhausted",
    "ConvergenceDiagnostic",
    "EvaluationPoint",
    "EvaluationTrace",
    "IntegrationError",
    "QuadratureResult",
    "QuadratureWarning",
    "beta_function",
    "beta_integrand",
    "integrate",
    "integrate_with_diagnostics",
]
