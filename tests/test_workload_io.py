from pathlib import Path

import pytest

from scheduler_sim.models import Process
from scheduler_sim.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":1,"arrival_time":0,"burst_time":3,"priority":1},'
                 '{"pid":2,"arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[1].priority == 0
    assert procs[1].arrival_time == 1


def test_load_csv_with_header(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\n1,0,3,1\n2,1,2,\n")
    procs = load_workload(p)
    assert procs[0].pid == 1
    assert procs[1].priority == 0


def test_load_headerless_csv(tmp_path: Path):
    # id, burst, arrival[, priority]
    p = tmp_path / "processes.csv"
    p.write_text("1,5,0,2\n2,9,3\n\n")
    procs = load_workload(p)
    assert procs == [Process(1, 0, 5, 2), Process(2, 3, 9, 0)]


def test_load_empty_csv(tmp_path: Path):
    p = tmp_path / "empty.csv"
    p.write_text("")
    assert load_workload(p) == []


def test_invalid_row(tmp_path: Path):
    p = tmp_path / "bad.csv"
    p.write_text("1,five,0\n")
    with pytest.raises(ValueError):
        load_workload(p)


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("1,5,0\n")
    with pytest.raises(ValueError):
        load_workload(p)
