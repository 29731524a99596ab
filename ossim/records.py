"""Simple records: boxes, students, candy bars and counted strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

NAME_LIMIT = 30


@dataclass
class Box:
    """A box described by its maker and its dimensions."""

    maker: str
    height: float
    width: float
    length: float

    def volume(self) -> float:
        return self.height * self.length * self.width

    def describe(self) -> str:
        return (
            f"Producent: {self.maker}\n"
            f"Wysokosc: {self.height:g}\n"
            f"Szerokosc: {self.width:g}\n"
            f"Dlugosc: {self.length:g}\n"
            f"Objetosc: {self.volume():g}\n"
        )


@dataclass
class Student:
    fullname: str
    hobby: str
    ooplevel: int

    def describe(self) -> str:
        return f"{self.fullname}, {self.hobby}, {self.ooplevel}"


def _clip(text: str) -> str:
    return text[: NAME_LIMIT - 1]


def read_students(lines: Iterable[str], limit: int) -> list[Student]:
    """Read up to ``limit`` students as name, hobby and level lines.

    Reading stops at an empty name or when the input runs out.
    """
    students: list[Student] = []
    source = iter(lines)
    while len(students) < limit:
        name = next(source, "").rstrip("\n")
        if not name:
            break
        hobby = next(source, "").rstrip("\n")
        level_line = next(source, None)
        if level_line is None:
            raise ValueError(f"missing programming level for {name!r}")
        level_text = level_line.split()
        if not level_text:
            raise ValueError(f"missing programming level for {name!r}")
        students.append(Student(_clip(name), _clip(hobby), int(level_text[0])))
    return students


@dataclass
class CandyBar:
    brand: str = "Millenium Munch"
    weight: float = 2.85
    calories: int = 350

    def describe(self) -> str:
        return (
            f"MARKA: {self.brand}\n"
            f"KALORIE: {self.calories}\n"
            f"WAGA: {self.weight:g}\n"
        )


@dataclass
class Stringy:
    """A string together with its length."""

    text: str

    @property
    def ct(self) -> int:
        return len(self.text)

    def show(self, times: int = 1) -> str:
        """Repeat the text ``times`` times, then give its length."""
        return show_text(self.text, times) + f"{self.ct}\n"


def show_text(text: str, times: int = 1) -> str:
    """Return ``text`` on ``times`` lines."""
    return "".join(f"{text}\n" for _ in range(times))