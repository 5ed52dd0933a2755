"""Recording of integrand evaluation points.

EvaluationTrace is an optional side-channel for the integrators. Pass one
in and every point at which the integrand is evaluated is appended, in
evaluation order, together with the recursion depth it was evaluated at.
Mostly useful for plotting where the adaptive scheme concentrated its work.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import pandas as pd


@dataclass(frozen=True)
class EvaluationPoint:
    """A single integrand evaluation.

    Attributes:
        x: Abscissa the integrand was evaluated at.
        fx: Value returned by the integrand.
        depth: Recursion depth of the subinterval that requested it (0 = top).
    """

    x: float
    fx: float
    depth: int


class EvaluationTrace:
    """Append-only, ordered record of evaluation points."""

    X = "x"
    FX = "fx"
    DEPTH = "depth"

    def __init__(self) -> None:
        self._points: List[EvaluationPoint] = []

    def record(self, x: float, fx: float, depth: int) -> None:
        self._points.append(EvaluationPoint(x=x, fx=fx, depth=depth))

    def clear(self) -> None:
        """Remove all recorded points."""
        self._points.clear()

    @property
    def points(self) -> List[EvaluationPoint]:
        return list(self._points)

    @property
    def xs(self) -> List[float]:
        """Abscissae in evaluation order."""
        return [p.x for p in self._points]

    @property
    def values(self) -> List[float]:
        """Integrand values in evaluation order."""
        return [p.fx for p in self._points]

    @property
    def max_depth(self) -> int:
        """Deepest recursion level recorded. Returns 0 if empty."""
        if not self._points:
            return 0
        return max(p.depth for p in self._points)

    def to_dataframe(self) -> pd.DataFrame:
        """Points as a DataFrame with columns x, fx, depth in evaluation order."""
        return pd.DataFrame(
            {
                self.X: self.xs,
                self.FX: self.values,
                self.DEPTH: [p.depth for p in self._points],
            },
            columns=[self.X, self.FX, self.DEPTH],
        )

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[EvaluationPoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"EvaluationTrace(points={len(self._points)}, max_depth={self.max_depth})"
