"""Adaptive Simpson integration of a Beta density kernel.

This example shows:
1. Integrating f(x) = x^(alpha-1) (1-x)^(beta-1) on [0, 1] and comparing
   against the closed form B(alpha, beta) = exp(lgamma(a) + lgamma(b) - lgamma(a+b))
2. What happens when the recursion budget is too small: the integrator
   still returns an estimate, and reports where it gave up
3. Where the integrator spent its evaluations (plot of the trace)

## Why this integrand

For beta < 2 the kernel has an infinite derivative at x = 1, so the
adaptive scheme must bisect repeatedly near the right end while a few
coarse panels suffice elsewhere:

```
depth 0  |-------------------------------|
depth 1                  |---------------|
depth 2                          |-------|
  ...                                  |-|
```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from adaptquad import (
    EvaluationTrace,
    beta_function,
    beta_integrand,
    enable_console_logging,
    integrate_with_diagnostics,
)


@dataclass
class BetaIntegralConfig:
    alpha: float = 3.5
    beta: float = 1.5
    tolerance: float = 1e-9
    max_depth: int = 50
    shallow_depth: int = 4


def run_comparison(config: BetaIntegralConfig) -> dict:
    """Integrate with the full and the shallow budget and collect results."""
    f = beta_integrand(config.alpha, config.beta)
    exact = beta_function(config.alpha, config.beta)

    trace = EvaluationTrace()
    full = integrate_with_diagnostics(f, 0.0, 1.0, config.tolerance, config.max_depth, trace=trace)
    shallow = integrate_with_diagnostics(f, 0.0, 1.0, config.tolerance, config.shallow_depth)

    return {
        "f": f,
        "exact": exact,
        "full": full,
        "shallow": shallow,
        "trace": trace,
    }


def print_summary(config: BetaIntegralConfig, results: dict) -> None:
    print("\n" + "=" * 70)
    print(f"BETA INTEGRAL  alpha={config.alpha}  beta={config.beta}")
    print("=" * 70)

    exact = results["exact"]
    for label, result, depth in (
        ("Full budget", results["full"], config.max_depth),
        ("Shallow budget", results["shallow"], config.shallow_depth),
    ):
        print(f"\n{label} (max_depth={depth}):")
        print(f"  Estimate:     {result.value:.15f}")
        print(f"  Closed form:  {exact:.15f}")
        print(f"  Abs error:    {abs(result.value - exact):.3e}")
        print(f"  Evaluations:  {result.evaluations}")
        print(f"  Converged:    {result.converged}")
        for diagnostic in result.diagnostics[:5]:
            print(f"    - {diagnostic.message}")
        if len(result.diagnostics) > 5:
            print(f"    ... {len(result.diagnostics) - 5} more")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Adaptive Simpson integration of a Beta kernel")
    parser.add_argument("--alpha", type=float, default=3.5, help="Beta alpha parameter")
    parser.add_argument("--beta", type=float, default=1.5, help="Beta beta parameter")
    parser.add_argument("--tol", type=float, default=1e-9, help="Per-subinterval tolerance")
    parser.add_argument("--max-depth", type=int, default=50, help="Recursion budget")
    parser.add_argument("--shallow-depth", type=int, default=4, help="Deliberately small budget")
    parser.add_argument("--output", type=str, default="output/beta_integral", help="Output directory")
    parser.add_argument("--no-viz", action="store_true", help="Skip visualization generation")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    if args.verbose:
        enable_console_logging(level="DEBUG")

    config = BetaIntegralConfig(
        alpha=args.alpha,
        beta=args.beta,
        tolerance=args.tol,
        max_depth=args.max_depth,
        shallow_depth=args.shallow_depth,
    )

    results = run_comparison(config)
    print_summary(config, results)

    if not args.no_viz:
        from adaptquad.visual import plot_evaluation_points

        output_path = Path(args.output) / "evaluation_points.png"
        plot_evaluation_points(results["f"], 0.0, 1.0, results["trace"], path=output_path)
        print(f"Saved: {output_path}")
