"""A bank account holding private balance state."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


class InsufficientFundsError(ValueError):
    """Withdrawal larger than the current balance."""


class Account:
    """Balance that only changes through deposit() and withdraw().

    Args:
        total: Opening balance. Must be non-negative.
        owner: Optional name used in log messages and repr.
    """

    def __init__(self, total: float = 0.0, owner: str | None = None) -> None:
        if not math.isfinite(total) or total < 0:
            raise ValueError(f"opening balance must be finite and non-negative, got {total}")
        self._total = float(total)
        self.owner = owner

    @property
    def balance(self) -> float:
        return self._total

    def deposit(self, amount: float) -> float:
        """Add amount to the balance and return the new balance."""
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"deposit amount must be positive, got {amount}")
        self._total += amount
        logger.info("%s: deposited %.2f, balance %.2f", self._label(), amount, self._total)
        return self._total

    def withdraw(self, amount: float) -> float:
        """Remove amount from the balance and return the new balance.

        Raises:
            ValueError: If amount is not a positive finite number.
            InsufficientFundsError: If amount exceeds the balance.
        """
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"withdrawal amount must be positive, got {amount}")
        if amount > self._total:
            raise InsufficientFundsError(
                f"cannot withdraw {amount:.2f}: balance is only {self._total:.2f}"
            )
        self._total -= amount
        logger.info("%s: withdrew %.2f, balance %.2f", self._label(), amount, self._total)
        return self._total

    def _label(self) -> str:
        return self.owner or "account"

    def __str__(self) -> str:
        return f"Your balance is {self._total:.2f}"

    def __repr__(self) -> str:
        return f"Account(total={self._total!r}, owner={self.owner!r})"
