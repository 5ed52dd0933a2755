"""Run a callable and keep its value alongside any warnings or error.

capture() is the warning-and-continue pattern as an explicit result type:
the call runs to completion, every warning it issues is recorded instead of
printed, and an expected exception is stored instead of propagating.

Example:
    >>> captured = capture(integrate, f, 0.0, 1.0, 1e-10, 3)
    >>> captured.value          # the degraded estimate
    >>> captured.messages       # ["recursion budget exhausted at x = ...", ...]
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any
from warnings import WarningMessage

logger = logging.getLogger(__name__)


@dataclass
class Captured:
    """Outcome of capture().

    Attributes:
        value: Return value of the call, or None if it raised.
        warnings: Warnings issued during the call, in order.
        error: The caught exception, or None if the call returned.
    """

    value: Any = None
    warnings: list[WarningMessage] = field(default_factory=list)
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        """True if the call returned normally (warnings allowed)."""
        return self.error is None

    @property
    def messages(self) -> list[str]:
        """Warning message strings."""
        return [str(w.message) for w in self.warnings]

    @property
    def categories(self) -> list[type[Warning]]:
        """Warning categories, in the same order as messages."""
        return [w.category for w in self.warnings]

    def unwrap(self) -> Any:
        """Return the value, or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


def capture(
    func: Callable[..., Any],
    *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> Captured:
    """Call func(*args, **kwargs), recording warnings and catching errors.

    All warning filters are set to "always" for the duration of the call so
    repeated warnings from the same location are each recorded.

    Args:
        func: Callable to run.
        *args: Positional arguments for func.
        catch: Exception type(s) to store in Captured.error. Anything else
            propagates.
        **kwargs: Keyword arguments for func.

    Returns:
        Captured with the value (or error) and the recorded warnings.
    """
    result = Captured()
    with warnings.catch_warnings(record=True) as recorded:
        warnings.simplefilter("always")
        try:
            result.value = func(*args, **kwargs)
        except catch as e:
            logger.debug("capture(%s) caught %s: %s", getattr(func, "__name__", func), type(e).__name__, e)
            result.error = e
    result.warnings = list(recorded)
    return result
