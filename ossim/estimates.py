"""Effort estimates: hours of work needed for a number of lines of code."""

from __future__ import annotations

from typing import Callable


def betsy(lines: int) -> float:
    """Betsy's estimate: a flat rate per line."""
    return 0.05 * lines


def pam(lines: int) -> float:
    """Pam's estimate: a linear rate plus a quadratic penalty."""
    return 0.04 * lines + 0.0004 * lines * lines


def fun1(lines: int) -> float:
    """Flat-rate estimate."""
    return 0.05 * lines


def fun2(lines: int) -> float:
    """Linear-plus-quadratic estimate with a lower linear rate."""
    return 0.03 * lines + 0.0004 * lines * lines


def estimate(lines: int, rate: Callable[[int], float]) -> str:
    """Describe how many hours ``rate`` predicts for ``lines`` lines."""
    return f"{lines} wierszy wymaga {rate(lines):g} godzin pracy.\n"