from pathlib import Path

import pytest

from schedsim.errors import InvalidConfiguration
from schedsim.models import Process
from schedsim.workload_io import example_workload, load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":3,"priority":1},'
                 '{"pid":"B","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].priority == 1
    assert procs[1].priority == 0
    assert procs[1].arrival_time == 1


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA,0,3,1\nB,1,2,\n")
    procs = load_workload(p)
    assert procs[0].pid == "A"
    assert procs[0].burst_time == 3
    assert procs[1].priority == 0


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.yaml"
    p.write_text("- pid: A\n")
    with pytest.raises(InvalidConfiguration):
        load_workload(p)


@pytest.mark.parametrize(
    "content",
    [
        '{"pid": "A"}',
        '[{"pid": "A", "arrival_time": 0}]',
        '[{"pid": "A", "arrival_time": 0, "burst_time": "lots"}]',
        '[{"pid": "A", "arrival_time": 0, "burst_time": 0}]',
        '[{"pid": "A", "arrival_time": -2, "burst_time": 1}]',
        '["A"]',
        "not json",
    ],
)
def test_invalid_json_workloads(tmp_path: Path, content):
    p = tmp_path / "w.json"
    p.write_text(content)
    with pytest.raises(InvalidConfiguration):
        load_workload(p)


def test_example_workload():
    procs = example_workload()
    assert [(p.pid, p.burst_time, p.arrival_time, p.priority) for p in procs] == [
        ("P1", 10, 0, 3),
        ("P2", 5, 1, 1),
        ("P3", 8, 2, 2),
    ]
    # Fresh records every call.
    assert example_workload()[0] is not procs[0]
