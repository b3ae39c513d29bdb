from pathlib import Path

import pytest

from schedsim.cli import build_parser, main


def test_run_priority_on_builtin_workload(capsys):
    assert main(["run", "--algorithm", "priority"]) == 0
    out = capsys.readouterr().out
    assert "Priority (non-preemptive)" in out
    assert "Per-process metrics" in out
    assert "0 1 6 14 24" in out


def test_run_rr_requires_quantum(capsys):
    assert main(["run", "-a", "rr"]) == 1
    assert "positive integer quantum" in capsys.readouterr().out


def test_run_rr_with_quantum(capsys):
    assert main(["-v", "run", "-a", "rr", "-q", "2", "--ignore-arrivals"]) == 0
    out = capsys.readouterr().out
    assert "Round Robin (arrivals ignored)" in out
    assert "Quantum: 2" in out


def test_run_on_csv_workload(tmp_path: Path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA,0,3,1\nB,1,2,\n")
    assert main(["run", "-a", "srtf", "-w", str(p)]) == 0
    assert "SRTF" in capsys.readouterr().out


def test_bad_workload_reports_error(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text('[{"pid": "A", "arrival_time": 0, "burst_time": 0}]')
    assert main(["run", "-a", "priority", "-w", str(p)]) == 1
    assert "Error" in capsys.readouterr().out


def test_missing_workload_file(tmp_path: Path, capsys):
    assert main(["run", "-a", "priority", "-w", str(tmp_path / "missing.json")]) == 1
    assert "Error" in capsys.readouterr().out


def test_compare(capsys):
    assert main(["compare"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm comparison" in out
    assert "SRTF" in out


def test_unknown_algorithm_rejected_by_parser():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "-a", "fcfs"])
