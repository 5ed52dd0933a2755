"""Warning and error types raised by the quadrature routines."""


class QuadratureWarning(UserWarning):
    """Base class for non-fatal quadrature issues."""


class ConvergenceBudgetExhausted(QuadratureWarning):
    """The recursion budget ran out before a subinterval converged.

    Issued once per unconverged subinterval. The estimate is still returned.
    """


class IntegrationError(ValueError):
    """Invalid arguments passed to an integration routine."""
