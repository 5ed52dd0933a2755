"""Closed-form special functions used as integration references."""

import math
from collections.abc import Callable


def beta_function(alpha: float, beta: float) -> float:
    """Euler's Beta function B(alpha, beta) via log-gamma.

    Raises:
        ValueError: If alpha or beta is not positive.
    """
    if alpha <= 0 or beta <= 0:
        raise ValueError(f"alpha and beta must be positive, got alpha={alpha}, beta={beta}")
    return math.exp(math.lgamma(alpha) + math.lgamma(beta) - math.lgamma(alpha + beta))


def beta_integrand(alpha: float, beta: float) -> Callable[[float], float]:
    """Return f(x) = x^(alpha-1) * (1-x)^(beta-1), whose integral on [0, 1] is B(alpha, beta)."""
    if alpha <= 0 or beta <= 0:
        raise ValueError(f"alpha and beta must be positive, got alpha={alpha}, beta={beta}")

    def f(x: float) -> float:
        return x ** (alpha - 1.0) * (1.0 - x) ** (beta - 1.0)

    return f
