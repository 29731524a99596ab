import math

import pytest

from ossim.paging import (
    REFERENCE_STRING,
    STEP_HEADER,
    SUMMARY_HEADER,
    Simulation,
    Step,
    fifo,
    mfu,
    main,
)


def test_fifo_replaces_oldest_page():
    sim = fifo([1, 2, 3, 4], 3)
    assert sim.steps[-1].frames == (4, 2, 3)
    assert sim.page_faults == len([1, 2, 3, 4])


def test_fifo_repeated_page_faults_once():
    sim = fifo([5] * 6, 2)
    assert sim.page_faults == 1
    assert [step.fault for step in sim.steps[1:]] == [False] * 5


def test_mfu_evicts_most_used_page():
    sim = mfu([1, 1, 2, 3], 2)
    assert [step.fault for step in sim.steps] == [True, False, True, True]
    assert sim.steps[-1].frames == (3, 2)


def test_mfu_fills_empty_frames_first():
    sim = mfu([7, 8], 3)
    assert sim.steps[-1].frames == (7, 8, None)


def test_trace_invariants():
    for sim in (fifo(REFERENCE_STRING, 3), mfu(REFERENCE_STRING, 3)):
        assert [step.page for step in sim.steps] == list(REFERENCE_STRING)
        assert sim.page_faults == sum(step.fault for step in sim.steps)
        for step in sim.steps:
            assert len(step.frames) == 3
            assert step.page in step.frames
            resident = [frame for frame in step.frames if frame is not None]
            assert len(resident) == len(set(resident))


def test_distinct_pages_always_fault():
    pages = [1, 2, 3, 4, 5]
    for sim in (fifo(pages, 2), mfu(pages, 2)):
        assert sim.page_faults == len(pages)
        assert sim.hit_rate() == 0


def test_enough_frames_means_compulsory_faults_only():
    for sim in (fifo(REFERENCE_STRING, 10), mfu(REFERENCE_STRING, 10)):
        assert sim.page_faults == len(set(REFERENCE_STRING))


@pytest.mark.parametrize("frames", [0, -1])
def test_fifo_rejects_non_positive_frames(frames):
    with pytest.raises(ValueError):
        fifo([1, 2], frames)


@pytest.mark.parametrize("frames", [0, -1])
def test_mfu_rejects_non_positive_frames(frames):
    with pytest.raises(ValueError):
        mfu([1, 2], frames)


def test_empty_reference_hit_rate_is_nan():
    for sim in (fifo([], 3), mfu([], 3)):
        assert sim.page_faults == 0
        assert math.isnan(sim.hit_rate())


def test_hit_rate_stays_within_bounds():
    for sim in (fifo(REFERENCE_STRING, 3), mfu(REFERENCE_STRING, 3)):
        rate = sim.hit_rate()
        assert 0 <= rate <= 100


def test_step_frames_text():
    step = Step(2, (2, None, 9), False)
    assert step.frames_text == "2 _ 9 "


def test_format_report_lines():
    text = fifo([1], 3).format_report()
    lines = text.splitlines()
    assert lines[1] == "Symulacja FIFO (3 ramki):"
    assert "  1\t\t1 _ _ \tTAK" in lines
    assert text.endswith("Stopień trafień: 0.00%\n")


def test_format_report_marks_hits():
    text = mfu([4, 4], 2).format_report()
    assert text.splitlines()[-4].endswith("\tNIE")
    assert "Liczba page fault'ów: 1" in text


def test_csv_rows_layout():
    sim = fifo([1, 2], 2)
    rows = sim.csv_rows()
    assert rows[0] == STEP_HEADER
    assert rows[1] == ("FIFO", 2, 1, "1 _ ", "YES")
    assert rows[-3] == ()
    assert rows[-2] == SUMMARY_HEADER
    assert rows[-1] == ("FIFO", 2, sim.page_faults, "0.00%")
    assert len(rows) == len(sim.steps) + 4


def test_simulation_defaults_to_empty_trace():
    sim = Simulation("MFU", 4)
    assert sim.steps == []
    assert sim.page_faults == 0


def test_main_writes_both_algorithms(tmp_path, capsys):
    target = tmp_path / "pages.csv"
    assert main(["--output", str(target)]) == 0
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines.count(",".join(STEP_HEADER)) == 2
    assert lines.count(",".join(SUMMARY_HEADER)) == 2
    assert sum(line.startswith("FIFO,3,") for line in lines) == len(REFERENCE_STRING) + 1
    assert sum(line.startswith("MFU,3,") for line in lines) == len(REFERENCE_STRING) + 1
    out = capsys.readouterr().out
    assert out.startswith("Sekwencja odniesień do stron:\n")
    assert "Symulacja MFU (3 ramki):" in out


def test_main_reports_unwritable_output(tmp_path, capsys):
    target = tmp_path / "missing" / "pages.csv"
    assert main(["--output", str(target)]) == 1
    assert "Nie można utworzyć pliku CSV" in capsys.readouterr().err