from pathlib import Path

import pytest

from scheduler_sim.cli import build_parser, main


def _workload(tmp_path: Path, text: str = "1,5,0,2\n2,3,1,1\n3,8,2,3\n") -> Path:
    p = tmp_path / "processes.csv"
    p.write_text(text)
    return p


def test_parser_defaults():
    args = build_parser().parse_args(["run", "-w", "x.csv"])
    assert args.algorithms == ["fcfs", "sjf", "priority", "rr"]
    assert args.quantum == 2
    assert not args.verbose


def test_parser_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "-w", "x.csv", "-a", "mlfq"])


def test_run_prints_every_algorithm(tmp_path: Path, capsys):
    assert main(["run", "-w", str(_workload(tmp_path))]) == 0
    out = capsys.readouterr().out
    for title in ["First-come, first-serve", "Shortest-job-first", "Priority", "Round-robin"]:
        assert title in out
    assert "Schedule table" in out


def test_compare(tmp_path: Path, capsys):
    assert main(["compare", "-w", str(_workload(tmp_path)), "-a", "fcfs", "rr", "-q", "3"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm comparison" in out
    assert "Round-robin" in out
    assert "Shortest-job-first" not in out


def test_invalid_workload_reports_error(tmp_path: Path, capsys):
    path = _workload(tmp_path, "1,5,0\n2,0,1\n")
    assert main(["run", "-w", str(path)]) == 1
    out = capsys.readouterr().out
    assert "burst_time" in out
    # Nothing is printed for the valid process either.
    assert "Schedule table" not in out
    assert "Gantt schedule" not in out


def test_missing_workload_reports_error(tmp_path: Path, capsys):
    assert main(["run", "-w", str(tmp_path / "missing.csv")]) == 1
    assert "Error" in capsys.readouterr().out


def test_verbose_after_subcommand():
    args = build_parser().parse_args(["run", "-w", "x.csv", "-v"])
    assert args.verbose
    args = build_parser().parse_args(["compare", "-w", "x.csv", "--verbose"])
    assert args.verbose


def test_run_plain_gantt(tmp_path: Path, capsys):
    assert main(["run", "-w", str(_workload(tmp_path)), "-a", "fcfs", "--plain"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Gantt schedule" in lines
    row = lines[lines.index("Gantt schedule") + 1]
    assert row.split("|")[1:-1] == ["   1    ", "   2    ", "   3    "]
    assert lines[lines.index("Gantt schedule") + 2].split() == ["0", "5", "8", "16"]
