"""adaptquad: adaptive Simpson quadrature with non-fatal convergence diagnostics."""

import logging

from adaptquad.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)

logging.getLogger("adaptquad").addHandler(logging.NullHandler())

from adaptquad.account import Account, InsufficientFundsError
from adaptquad.conditions import Captured, capture
from adaptquad.config import QuadratureConfig
from adaptquad.introspection import find_predicates, true_predicates
from adaptquad.numerics import (
    ConvergenceBudgetExhausted,
    ConvergenceDiagnostic,
    EvaluationPoint,
    EvaluationTrace,
    IntegrationError,
    QuadratureResult,
    QuadratureWarning,
    beta_function,
    beta_integrand,
    integrate,
    integrate_with_diagnostics,
)

__version__ = "0.1.0"

__all__ = [
    # Integration
    "integrate",
    "integrate_with_diagnostics",
    "QuadratureResult",
    "ConvergenceDiagnostic",
    "EvaluationPoint",
    "EvaluationTrace",
    "QuadratureConfig",
    "beta_function",
    "beta_integrand",
    # Errors
    "QuadratureWarning",
    "ConvergenceBudgetExhausted",
    "IntegrationError",
    "InsufficientFundsError",
    # Idioms
    "Captured",
    "capture",
    "find_predicates",
    "true_predicates",
    "Account",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]
