"""Plot an integrand together with the points the integrator evaluated."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from adaptquad.numerics.trace import EvaluationTrace

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


def plot_evaluation_points(
    f: Callable[[float], float],
    a: float,
    b: float,
    trace: EvaluationTrace,
    path: str | Path | None = None,
    samples: int = 400,
    title: str | None = None,
) -> Figure:
    """Draw f over [a, b] with the traced evaluation points.

    Top panel: the curve and the evaluated (x, f(x)) points coloured by
    recursion depth. Bottom panel: a rug of abscissae showing where the
    adaptive scheme refined.

    Args:
        f: The integrand.
        a: Lower bound.
        b: Upper bound.
        trace: Trace filled in by integrate(..., trace=trace).
        path: If given, the figure is saved there as PNG and closed.
        samples: Points used to draw the curve.
        title: Figure title. Defaults to a summary of the trace.

    Returns:
        The matplotlib Figure.
    """
    import matplotlib.pyplot as plt

    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")

    step = (b - a) / (samples - 1)
    xs = [a + i * step for i in range(samples)]
    ys = [f(x) for x in xs]

    df = trace.to_dataframe()

    fig, (ax_curve, ax_rug) = plt.subplots(
        2, 1, figsize=(10, 6), sharex=True, gridspec_kw={"height_ratios": [4, 1]}
    )

    ax_curve.plot(xs, ys, color="black", linewidth=1, label="f(x)")
    if not df.empty:
        points = ax_curve.scatter(
            df[EvaluationTrace.X],
            df[EvaluationTrace.FX],
            c=df[EvaluationTrace.DEPTH],
            cmap="viridis",
            s=12,
            zorder=3,
            label="evaluations",
        )
        fig.colorbar(points, ax=[ax_curve, ax_rug], label="recursion depth")
        ax_rug.vlines(df[EvaluationTrace.X], 0, 1, linewidth=0.5, color="tab:blue")

    ax_curve.set_ylabel("f(x)")
    ax_curve.legend(loc="upper left")
    ax_curve.grid(True, alpha=0.3)

    ax_rug.set_yticks([])
    ax_rug.set_xlabel("x")
    ax_rug.set_xlim(a, b)

    fig.suptitle(title or f"{len(trace)} evaluations, max depth {trace.max_depth}")

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=150)
        plt.close(fig)
        logger.info("Saved evaluation plot to %s", path)

    return fig
