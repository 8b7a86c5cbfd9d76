"""A simple bank account."""

from __future__ import annotations

__all__ = ["InsufficientBalance", "Account"]


class InsufficientBalance(ValueError):
    """Raised when a withdrawal exceeds the balance."""


class Account:
    """A named account holding a balance."""

    def __init__(self, name: str = "None", balance: float = 0.0) -> None:
        self.name = name
        self.balance = balance

    def __repr__(self) -> str:
        return f"Account(name={self.name!r}, balance={self.balance!r})"

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` from the balance and return the new balance."""
        if amount > self.balance:
            raise InsufficientBalance(
                f"cannot withdraw {amount} from a balance of {self.balance}"
            )
        self.balance -= amount
        return self.balance