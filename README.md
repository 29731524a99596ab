# ossim

Small teaching simulations of two classic operating-system algorithms,
CPU scheduling and page replacement, plus a handful of practice
utilities. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## CPU scheduling

`ossim.scheduler` simulates First-Come, First-Served and Round Robin
scheduling of CPU-bound processes. It reports completion, turnaround and
waiting times for each process.

```
ossim-scheduler [-q QUANTUM] [-o OUTPUT]
```

The command runs both algorithms on a built-in workload of 21 processes.
`--quantum` sets the Round Robin quantum and defaults to 4. It prints the
input table, then one results table for each algorithm with the average
turnaround and waiting times. Every row also goes to a CSV file, by
default `cpu_scheduler_results.csv`; the Round Robin rows are written in
order of completion. If the file cannot be created, the command prints an
error and exits with status 1.

From Python:

```python
from ossim.scheduler import sample_processes, fcfs, round_robin, format_results, csv_rows

done = fcfs(sample_processes())          # new list, sorted by arrival time
print(format_results(done, "FCFS"))

rr = round_robin(sample_processes(), 4)  # new list, in input order
print(format_results(rr, "Round Robin (Q=4)"))
rows = csv_rows("RR", rr)
```

- `Process` is a dataclass with `id`, `arrival_time`, `burst_time`,
  `completion_time`, `turnaround_time` and `waiting_time`.
- `round_robin` raises `ValueError` for a quantum that is not positive.
  The waiting time it reports is the turnaround time less the length of
  the process's final time slice.
- `format_results` raises `ValueError` for an empty list.

## Page replacement

`ossim.paging` simulates the FIFO and MFU (Most Frequently Used) page
replacement algorithms step by step.

```
ossim-paging [-f FRAMES] [-o OUTPUT]
```

The command runs both algorithms on a built-in reference string of 20
pages. `--frames` sets the number of frames and defaults to 3. For every
reference it prints the frame contents and whether a fault occurred, then
the fault count and the hit rate. The same data goes to a CSV file, by
default `page_replacement_results.csv`.

From Python:

```python
from ossim.paging import fifo, mfu

sim = fifo([1, 2, 3, 4, 2, 1, 5, 6], 3)
print(sim.format_report())
print(sim.page_faults, f"{sim.hit_rate():.2f}%")
for step in sim.steps:
    print(step.page, step.frames, step.fault)
```

`fifo` and `mfu` return a `Simulation` and raise `ValueError` if the
frame count is not positive. Empty frames appear as `None` in
`Step.frames`. `hit_rate()` returns NaN when there were no references.
`csv_rows()` returns the per-step rows, a blank row and a summary row.

## Practice utilities

- `ossim.estimates`: work-time estimators `betsy`, `pam`, `fun1` and
  `fun2`. `estimate(lines, rate)` returns a sentence giving the hours
  that `rate` predicts.
- `ossim.calc`: `harmonic_mean`, `lottery_odds` and `factorial`
  (`factorial` raises `ValueError` for negative numbers). It also has the
  arithmetic helpers `add`, `divide`, `multiply` and `subtract`; `divide`
  and `multiply` return 0 when the second argument is 0. `apply_all(a, b)`
  returns a dict of all four results, keyed by their names.
- `ossim.records`: small record types with text descriptions.
  - `Box` has `volume()`.
  - `Student` records are read by `read_students(lines, limit)` from
    name, hobby and level lines. Reading stops at an empty name.
  - `CandyBar` has default field values.
  - `Stringy` counts its own length.
  - `show_text(text, times)` repeats a line.
- `ossim.text`:
  - `upper_string` upper-cases ASCII letters.
  - `ShowCounter` numbers its output by how many times it has been called.
  - `read_values(tokens, size)` reads numbers up to the first bad token.
  - `read_scores(tokens, limit=10)` reads integers, skips bad tokens and
    stops at `q`.
  - `average` returns NaN for an empty sequence.
  - `seasonal_report` expects exactly four expenses.

## What it does not do

The practice utilities are library functions only. They take their input
as arguments or as iterables of lines or tokens, and they do not prompt
at a terminal. The only commands are `ossim-scheduler` and `ossim-paging`.
Both always run on their built-in workloads and do not read processes or
reference strings from a file.