"""Small numeric exercises."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Change",
    "CleaningEstimate",
    "PRICE_PER_SMALL_ROOM",
    "PRICE_PER_LARGE_ROOM",
    "TAX_RATE",
    "ESTIMATE_VALIDITY_DAYS",
    "climb_stairs",
    "is_palindrome",
    "celsius_to_fahrenheit",
    "double_and_sum",
    "numbers_equal",
    "make_change",
    "estimate_cleaning",
]

PRICE_PER_SMALL_ROOM = 25
PRICE_PER_LARGE_ROOM = 35
TAX_RATE = 0.06
ESTIMATE_VALIDITY_DAYS = 30


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide truncating toward zero; the remainder takes the sign of ``a``."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


@dataclass(frozen=True)
class Change:
    """Coins making up an amount of cents."""

    dollars: int
    quarters: int
    dimes: int
    nickels: int
    pennies: int


@dataclass(frozen=True)
class CleaningEstimate:
    """Cost, tax and total of a carpet-cleaning job."""

    cost: int
    tax: float

    @property
    def total(self) -> float:
        return self.cost + self.tax


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps one or two at a time."""
    if n < 0:
        raise ValueError(f"number of steps must not be negative: {n}")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def celsius_to_fahrenheit(celsius: int) -> int:
    """Convert whole degrees Celsius to Fahrenheit, truncating toward zero."""
    return _trunc_divmod(celsius * 9, 5)[0] + 32


def double_and_sum(num1: int, num2: int) -> tuple[int, int]:
    """Set the first number to twice the second, then add it to the second."""
    num1 = 2 * num2
    num2 += num1
    return num1, num2


def numbers_equal(num1: int, num2: int) -> bool:
    """Tell whether two numbers are equal."""
    return num1 == num2


def make_change(cents: int) -> Change:
    """Split ``cents`` into dollars, quarters, dimes, nickels and pennies."""
    dollars, rest = _trunc_divmod(cents, 100)
    quarters, rest = _trunc_divmod(rest, 25)
    dimes, rest = _trunc_divmod(rest, 10)
    nickels, pennies = _trunc_divmod(rest, 5)
    return Change(dollars, quarters, dimes, nickels, pennies)


def estimate_cleaning(small_rooms: int, large_rooms: int) -> CleaningEstimate:
    """Price the cleaning of the given numbers of small and large rooms."""
    cost = large_rooms * PRICE_PER_LARGE_ROOM + small_rooms * PRICE_PER_SMALL_ROOM
    return CleaningEstimate(cost=cost, tax=cost * TAX_RATE)