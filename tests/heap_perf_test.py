import os
import sys
import csv
import logging

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapalgo import perf


def test_generate_random_list_size_and_range():
    data = perf.generate_random_list(50)
    assert len(data) == 50
    assert all(0 <= x <= 1000000 for x in data)


@pytest.mark.parametrize("name", sorted(perf.OPERATIONS))
def test_benchmarked_operations(name):
    data = [5, 3, 8, 1, 9, 2]
    result = perf.OPERATIONS[name](list(data))
    if name == "pop_heap":
        assert result == []
    elif name == "sort_heap":
        assert result == sorted(data)
    else:
        assert sorted(result) == sorted(data)
        assert result[0] == max(data)


def test_measure_operation_time_single_iteration():
    avg, std = perf.measure_operation_time(perf.bench_make_heap, 10, iterations=1)
    assert avg >= 0.0
    assert std == 0.0


def test_run_benchmarks_writes_report(tmp_path, caplog):
    out = tmp_path / "report.csv"
    with caplog.at_level(logging.INFO, logger="heapalgo.perf"):
        written = perf.run_benchmarks(str(out), base_input=4, rounds=3, iterations=2)

    assert written == len(perf.OPERATIONS) * 3
    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == perf.CSV_HEADER
    assert len(rows) == written + 1
    assert {r[0] for r in rows[1:]} == {"4", "8", "16"}
    assert {r[1] for r in rows[1:]} == set(perf.OPERATIONS)
    assert "Results saved to" in caplog.text


@pytest.mark.parametrize(
    "kwargs",
    [{"base_input": 0}, {"rounds": 0}, {"iterations": 0}],
)
def test_run_benchmarks_rejects_bad_arguments(tmp_path, kwargs):
    with pytest.raises(ValueError):
        perf.run_benchmarks(str(tmp_path / "never.csv"), **kwargs)
