"""Text and input helpers: upper-casing, counted display, reading values."""

from __future__ import annotations

import math
import re
from typing import Iterable, Sequence

SEASONS = ("Wiosna", "Lato", "Jesień", "Zima")

_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def upper_string(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return "".join(c.upper() if c.isascii() else c for c in text)


class ShowCounter:
    """Shows text, numbering it by how many times it was shown before."""

    def __init__(self) -> None:
        self.shown = 0

    def show(self, text: str, n: int = 0) -> str:
        """Return ``text`` once, or numbered once per earlier call if ``n`` is non-zero."""
        if n != 0:
            result = "".join(f"{i}. {text}\n" for i in range(1, self.shown + 1))
        else:
            result = f"{text}\n"
        self.shown += 1
        return result


def read_values(tokens: Iterable[str], size: int) -> list[float]:
    """Read up to ``size`` numbers, stopping at the first token that is not one."""
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    values: list[float] = []
    for token in tokens:
        if len(values) >= size or not _FLOAT.fullmatch(token.strip()):
            break
        values.append(float(token))
    return values


def read_scores(tokens: Iterable[str], limit: int = 10) -> list[int]:
    """Read up to ``limit`` integer scores; ``q`` ends input, bad tokens are skipped."""
    scores: list[int] = []
    for token in tokens:
        if len(scores) >= limit or token == "q":
            break
        match = _INT_PREFIX.match(token)
        if not match:
            continue
        value = int(match.group(1))
        if _INT_MIN <= value <= _INT_MAX:
            scores.append(value)
    return scores


def average(values: Sequence[float]) -> float:
    """Return the mean of ``values``, NaN when there are none."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def seasonal_report(expenses: Sequence[float]) -> str:
    """Render expenses per season and their yearly total."""
    if len(expenses) != len(SEASONS):
        raise ValueError(f"expected {len(SEASONS)} seasonal expenses, got {len(expenses)}")
    lines = ["", "Wydatki"]
    lines.extend(f"{season}: {amount:g} zł" for season, amount in zip(SEASONS, expenses))
    lines.append(f"Łączne wydatki roczne: {sum(expenses):g} zł")
    return "\n".join(lines) + "\n"