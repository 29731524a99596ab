"""CPU scheduling simulation: first-come first-served and round robin."""

from __future__ import annotations

import argparse
import csv
import sys
from collections import deque
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import Iterable, Sequence

CSV_HEADER = (
    "Algorithm",
    "Process ID",
    "Arrival Time",
    "Burst Time",
    "Completion Time",
    "Turnaround Time",
    "Waiting Time",
)

_RESULT_COLUMNS = (
    ("Proces", 10),
    ("Przybycie", 10),
    ("Czas bursta", 10),
    ("Czas zakończenia", 15),
    ("Czas od przybycia do zakończenia", 15),
    ("Czas oczekiwania", 10),
)

_INPUT_COLUMNS = (("Proces", 10), ("Przybycie", 10), ("Czas bursta", 10))


@dataclass
class Process:
    """A CPU-bound job together with its scheduling metrics."""

    id: int
    arrival_time: int
    burst_time: int
    completion_time: int = 0
    turnaround_time: int = 0
    waiting_time: int = 0


def fcfs(processes: Iterable[Process]) -> list[Process]:
    """Schedule first-come first-served; return the jobs in arrival order."""
    current_time = 0
    scheduled = []
    for process in sorted(processes, key=attrgetter("arrival_time")):
        start = max(current_time, process.arrival_time)
        completion = start + process.burst_time
        turnaround = completion - process.arrival_time
        scheduled.append(
            replace(
                process,
                completion_time=completion,
                turnaround_time=turnaround,
                waiting_time=turnaround - process.burst_time,
            )
        )
        current_time = completion
    return scheduled


def round_robin(processes: Iterable[Process], quantum: int) -> list[Process]:
    """Schedule round robin with the given quantum; keep the input order.

    The waiting time of a job is its turnaround time less the length of
    the final slice it ran for.
    """
    if quantum <= 0:
        raise ValueError(f"quantum must be positive, got {quantum}")
    originals = list(processes)
    results = [replace(process) for process in originals]
    ready = deque(
        (index, process.arrival_time, process.burst_time)
        for index, process in enumerate(originals)
    )
    current_time = 0
    while ready:
        index, arrival, remaining = ready.popleft()
        current_time = max(current_time, arrival)
        if remaining > quantum:
            current_time += quantum
            ready.append((index, arrival, remaining - quantum))
        else:
            current_time += remaining
            turnaround = current_time - arrival
            results[index] = replace(
                originals[index],
                completion_time=current_time,
                turnaround_time=turnaround,
                waiting_time=turnaround - remaining,
            )
    return results


def csv_rows(algorithm: str, processes: Iterable[Process]) -> list[tuple]:
    """Return one CSV row per process, labelled with the algorithm."""
    return [
        (
            algorithm,
            p.id,
            p.arrival_time,
            p.burst_time,
            p.completion_time,
            p.turnaround_time,
            p.waiting_time,
        )
        for p in processes
    ]


def _table_row(values: Iterable[object], widths: Iterable[int]) -> str:
    return "".join(f"{value!s:>{width}}" for value, width in zip(values, widths))


def format_results(processes: Sequence[Process], algorithm: str) -> str:
    """Render the results table and the average metrics."""
    if not processes:
        raise ValueError("no processes to report")
    widths = [width for _, width in _RESULT_COLUMNS]
    lines = [
        "",
        f"Wyniki dla harmonogramowania {algorithm}:",
        _table_row((title for title, _ in _RESULT_COLUMNS), widths),
    ]
    lines.extend(
        _table_row(
            (
                p.id,
                p.arrival_time,
                p.burst_time,
                p.completion_time,
                p.turnaround_time,
                p.waiting_time,
            ),
            widths,
        )
        for p in processes
    )
    count = len(processes)
    avg_turnaround = sum(p.turnaround_time for p in processes) / count
    avg_waiting = sum(p.waiting_time for p in processes) / count
    lines += [
        "",
        f"Średni czas od przybycia do zakończenia: {avg_turnaround:g} ms",
        f"Średni czas oczekiwania: {avg_waiting:g} ms",
    ]
    return "\n".join(lines) + "\n"


def sample_processes() -> list[Process]:
    """Return the demonstration workload."""
    jobs = [
        (1, 0, 24), (2, 4, 3), (3, 5, 3), (4, 6, 12), (5, 15, 6),
        (6, 18, 5), (7, 20, 8), (8, 22, 4), (9, 25, 10), (10, 28, 7),
        (11, 30, 9), (12, 32, 6), (13, 35, 11), (14, 38, 5), (15, 40, 8),
        (16, 42, 4), (17, 45, 10), (18, 48, 7), (19, 50, 9), (20, 52, 6),
        (21, 55, 11),
    ]
    return [Process(*job) for job in jobs]


def _format_input(processes: Iterable[Process]) -> str:
    widths = [width for _, width in _INPUT_COLUMNS]
    lines = [
        "Procesy przed harmonogramowaniem:",
        _table_row((title for title, _ in _INPUT_COLUMNS), widths),
    ]
    lines.extend(
        _table_row((p.id, p.arrival_time, p.burst_time), widths) for p in processes
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run both schedulers on the sample workload and write a CSV report."""
    parser = argparse.ArgumentParser(description="Compare FCFS and round robin scheduling.")
    parser.add_argument("-o", "--output", default="cpu_scheduler_results.csv")
    parser.add_argument("-q", "--quantum", type=int, default=4)
    args = parser.parse_args(argv)
    if args.quantum <= 0:
        parser.error("quantum must be positive")

    processes = sample_processes()
    try:
        handle = open(args.output, "w", newline="", encoding="utf-8")
    except OSError:
        print("Nie można utworzyć pliku CSV", file=sys.stderr)
        return 1

    with handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        print(_format_input(processes), end="")

        fcfs_done = fcfs(processes)
        writer.writerows(csv_rows("FCFS", fcfs_done))
        print(format_results(fcfs_done, "FCFS"), end="")

        rr_done = round_robin(processes, args.quantum)
        by_completion = sorted(rr_done, key=attrgetter("completion_time"))
        writer.writerows(csv_rows("RR", by_completion))
        print(format_results(rr_done, f"Round Robin (Q={args.quantum})"), end="")
    return 0