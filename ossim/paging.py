"""Page replacement simulation: FIFO and most-frequently-used."""

from __future__ import annotations

import argparse
import csv
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

REFERENCE_STRING = (1, 2, 3, 4, 2, 1, 5, 6, 2, 1, 2, 3, 7, 6, 3, 2, 1, 2, 3, 6)

STEP_HEADER = ("Algorithm", "Frame Size", "Reference", "Pages in Frames", "Page Fault")
SUMMARY_HEADER = ("Algorithm", "Frame Size", "Total Page Faults", "Hit Rate")


@dataclass(frozen=True)
class Step:
    """One memory reference and the frame contents after it."""

    page: int
    frames: tuple[int | None, ...]
    fault: bool

    @property
    def frames_text(self) -> str:
        return "".join("_ " if frame is None else f"{frame} " for frame in self.frames)


@dataclass
class Simulation:
    """The full trace of a page replacement run."""

    algorithm: str
    frame_size: int
    steps: list[Step] = field(default_factory=list)

    @property
    def page_faults(self) -> int:
        return sum(step.fault for step in self.steps)

    def hit_rate(self) -> float:
        """Percentage of references served without a fault (NaN if none)."""
        total = len(self.steps)
        if not total:
            return float("nan")
        return (total - self.page_faults) / total * 100

    def format_report(self) -> str:
        """Render the step table and the summary."""
        lines = [
            "",
            f"Symulacja {self.algorithm} ({self.frame_size} ramki):",
            "Referencja\tStrony w ramkach\tPage Fault",
            "-" * 45,
        ]
        lines.extend(
            f"{step.page:>3}\t\t{step.frames_text}\t{'TAK' if step.fault else 'NIE'}"
            for step in self.steps
        )
        lines += [
            "",
            f"Liczba page fault'ów: {self.page_faults}",
            f"Stopień trafień: {self.hit_rate():.2f}%",
        ]
        return "\n".join(lines) + "\n"

    def csv_rows(self) -> list[tuple]:
        """Return the per-step rows followed by a blank row and the summary."""
        rows: list[tuple] = [STEP_HEADER]
        rows.extend(
            (
                self.algorithm,
                self.frame_size,
                step.page,
                step.frames_text,
                "YES" if step.fault else "NO",
            )
            for step in self.steps
        )
        rows.append(())
        rows.append(SUMMARY_HEADER)
        rows.append(
            (self.algorithm, self.frame_size, self.page_faults, f"{self.hit_rate():.2f}%")
        )
        return rows


def _check_frame_size(frame_size: int) -> None:
    if frame_size <= 0:
        raise ValueError(f"frame size must be positive, got {frame_size}")


def fifo(reference_string: Iterable[int], frame_size: int) -> Simulation:
    """Replace the page that has been resident the longest."""
    _check_frame_size(frame_size)
    frames: list[int | None] = [None] * frame_size
    next_victim = 0
    simulation = Simulation("FIFO", frame_size)
    for page in reference_string:
        fault = page not in frames
        if fault:
            frames[next_victim] = page
            next_victim = (next_victim + 1) % frame_size
        simulation.steps.append(Step(page, tuple(frames), fault))
    return simulation


def mfu(reference_string: Iterable[int], frame_size: int) -> Simulation:
    """Replace the resident page referenced most often so far."""
    _check_frame_size(frame_size)
    frames: list[int | None] = [None] * frame_size
    frequency: Counter[int] = Counter()
    simulation = Simulation("MFU", frame_size)
    for page in reference_string:
        fault = page not in frames
        if fault:
            if None in frames:
                victim = frames.index(None)
            else:
                victim = max(enumerate(frames), key=lambda item: frequency[item[1]])[0]
            frames[victim] = page
        frequency[page] += 1
        simulation.steps.append(Step(page, tuple(frames), fault))
    return simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run both algorithms on the sample reference string and write a CSV report."""
    parser = argparse.ArgumentParser(description="Compare FIFO and MFU page replacement.")
    parser.add_argument("-f", "--frames", type=int, default=3)
    parser.add_argument("-o", "--output", default="page_replacement_results.csv")
    args = parser.parse_args(argv)
    if args.frames <= 0:
        parser.error("frame count must be positive")

    print("Sekwencja odniesień do stron:")
    print("".join(f"{page} " for page in REFERENCE_STRING))
    print()

    try:
        handle = open(args.output, "w", newline="", encoding="utf-8")
    except OSError:
        print("Nie można utworzyć pliku CSV", file=sys.stderr)
        return 1

    with handle:
        writer = csv.writer(handle, lineterminator="\n")
        for algorithm in (fifo, mfu):
            simulation = algorithm(REFERENCE_STRING, args.frames)
            print(simulation.format_report(), end="")
            writer.writerows(simulation.csv_rows())
    return 0