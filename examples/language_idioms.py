"""Small demonstrations of Python idioms around the integrator.

This example shows:
1. Capturing warnings while keeping the computed value (capture)
2. Catching an error instead of aborting (capture with catch=...)
3. Listing the is* predicates in a module and applying them to values
4. An account object whose state changes only through its methods
"""

from __future__ import annotations

import math

from adaptquad import (
    Account,
    InsufficientFundsError,
    IntegrationError,
    capture,
    find_predicates,
    integrate,
    true_predicates,
)


def demo_capture() -> None:
    print("\n--- Warnings are recorded, the value is kept ---")

    def step(x: float) -> float:
        return 1.0 if x >= 1 / 3 else 0.0

    captured = capture(integrate, step, 0.0, 1.0, 1e-12, 6)
    print(f"value    = {captured.value:.6f}")
    print(f"warnings = {len(captured.warnings)}")
    for message in captured.messages[:3]:
        print(f"  {message}")

    print("\n--- Errors are caught, not raised ---")
    captured = capture(integrate, math.sin, 0.0, 1.0, -1.0, catch=IntegrationError)
    print(f"ok = {captured.ok}, error = {captured.error!r}")


def demo_predicates() -> None:
    print("\n--- Predicates in the math module ---")
    for name in find_predicates(math):
        print(f"  math.{name}")

    for value in (1.0, math.inf, math.nan):
        print(f"  {value!r:>5}: {', '.join(true_predicates(value, math)) or '-'}")


def demo_account() -> None:
    print("\n--- Account ---")
    account = Account(100.0, owner="demo")
    print(account)
    account.deposit(50.0)
    print(account)
    account.withdraw(30.0)
    print(account)
    try:
        account.withdraw(500.0)
    except InsufficientFundsError as e:
        print(f"Refused: {e}")


if __name__ == "__main__":
    demo_capture()
    demo_predicates()
    demo_account()
