"""Small numeric exercises: means, lottery odds, factorials, arithmetic."""

from __future__ import annotations

OPERATION_NAMES = ("Dodawanie", "Dzielenie", "Mnozenie", "Odejmowanie")


def harmonic_mean(x: float, y: float) -> float:
    """Return the harmonic mean of two numbers."""
    return 2.0 * x * y / (x + y)


def lottery_odds(numbers: int, picks: int, meganum: int) -> float:
    """Return N where the chance of winning is 1/N.

    ``picks`` numbers are drawn from ``numbers`` and one extra number from
    ``meganum``.
    """
    result = 1.0
    n = float(numbers)
    for p in range(picks, 0, -1):
        result = result * n / p
        n -= 1
    return result * meganum


def factorial(n: int) -> float:
    """Return n! as a float."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    result = 1.0
    for k in range(2, n + 1):
        result *= k
    return result


def add(a: float, b: float) -> float:
    return a + b


def divide(a: float, b: float) -> float:
    """Divide, giving 0 when the divisor is zero."""
    return a / b if b != 0 else 0


def multiply(a: float, b: float) -> float:
    """Multiply, giving 0 when the second factor is zero."""
    return a * b if b != 0 else 0


def subtract(a: float, b: float) -> float:
    return a - b


def apply_all(a: float, b: float) -> dict[str, float]:
    """Apply every basic operation to ``a`` and ``b``, keyed by its name."""
    operations = (add, divide, multiply, subtract)
    return {name: op(a, b) for name, op in zip(OPERATION_NAMES, operations)}