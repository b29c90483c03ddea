"""
Poly Secret — CLI tests.

Drives cli.main() with argument lists against record files in a temp dir.
"""

import json
import os
import sys

import pytest

# Add parent to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import cli

SCENARIO_B = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}

# x^2 + x + 2 sampled at 1, 2, 3
QUADRATIC = {
    "keys": {"n": 3, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "16", "value": "8"},
    "3": {"base": "7", "value": "20"},
}


@pytest.fixture
def record_file(tmp_path):
    def write(name, record):
        path = tmp_path / name
        path.write_text(json.dumps(record) if not isinstance(record, str) else record)
        return str(path)
    return write


def test_solve_single_file(record_file, capsys):
    path = record_file("test1.json", SCENARIO_B)
    assert cli.main(["solve", path]) == 0

    out = capsys.readouterr().out
    assert f"{path}: secret = 3" in out
    assert "methods agree: yes" in out


def test_solve_multiple_files_summary(record_file, capsys):
    p1 = record_file("test1.json", SCENARIO_B)
    p2 = record_file("test2.json", QUADRATIC)
    assert cli.main(["solve", p1, p2]) == 0

    out = capsys.readouterr().out
    assert "FINAL SUMMARY" in out
    assert f"Test Case 1 ({p1}) Secret: 3" in out
    assert f"Test Case 2 ({p2}) Secret: 2" in out
    assert "Successfully processed 2 of 2 file(s)" in out


def test_solve_missing_file_is_skipped(record_file, tmp_path, capsys):
    p1 = record_file("test1.json", SCENARIO_B)
    missing = str(tmp_path / "test2.json")
    assert cli.main(["solve", p1, missing]) == 1

    captured = capsys.readouterr()
    assert "file not found" in captured.err
    assert "Successfully processed 1 of 2 file(s)" in captured.out


def test_solve_bad_record_reports_error(record_file, capsys):
    bad = dict(SCENARIO_B)
    bad["1"] = {"base": "10", "value": "1a"}
    path = record_file("bad.json", bad)
    assert cli.main(["solve", path]) == 1

    err = capsys.readouterr().err
    assert "Error processing" in err
    assert "Invalid digit 'a' for base 10" in err


def test_solve_invalid_json(record_file, capsys):
    path = record_file("broken.json", "{ not json")
    assert cli.main(["solve", path]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_solve_directory_is_skipped(record_file, tmp_path, capsys):
    p1 = record_file("test1.json", SCENARIO_B)
    folder = tmp_path / "records"
    folder.mkdir()
    assert cli.main(["solve", str(folder), p1]) == 1

    captured = capsys.readouterr()
    assert "cannot read" in captured.err
    assert f"Test Case 2 ({p1}) Secret: 3" in captured.out
    assert "Successfully processed 1 of 2 file(s)" in captured.out


def test_solve_float_overflow_reports_error(record_file, capsys):
    big = "9" * 400
    record = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": big},
        "2": {"base": "10", "value": big},
    }
    path = record_file("big.json", record)
    assert cli.main(["solve", path, "--float"]) == 1
    assert "too large for float" in capsys.readouterr().err

    assert cli.main(["solve", path]) == 0
    assert f"secret = {big}" in capsys.readouterr().out


def test_solve_report(record_file, capsys):
    path = record_file("test1.json", SCENARIO_B)
    assert cli.main(["solve", path, "--report"]) == 0

    out = capsys.readouterr().out
    assert "Newton's Divided Difference Table:" in out
    assert "Vandermonde Matrix:" in out
    assert "Barycentric weights:" in out
    assert "FINAL ANSWER: The secret (constant term) is: 3" in out


def test_solve_json_output(record_file, capsys):
    path = record_file("test1.json", SCENARIO_B)
    assert cli.main(["solve", path, "--json", "--float"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["secret"] == 3
    assert data["arithmetic"] == "float"
    assert data["validation"]["values"] == [3, 3, 3]


def test_solve_json_multiple_files_is_one_list(record_file, tmp_path, capsys):
    p1 = record_file("test1.json", SCENARIO_B)
    p2 = record_file("test2.json", QUADRATIC)
    missing = str(tmp_path / "test3.json")
    assert cli.main(["solve", p1, p2, missing, "--json"]) == 1

    data = json.loads(capsys.readouterr().out)
    assert [doc["file"] for doc in data] == [p1, p2]
    assert [doc["secret"] for doc in data] == [3, 2]


def test_solve_method_selection(record_file, capsys):
    path = record_file("test1.json", SCENARIO_B)
    assert cli.main(["solve", path, "--json", "-m", "lagrange", "gaussian"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["primary"] == "lagrange"
    assert data["validation"]["methods"] == ["lagrange", "gaussian"]


def test_solve_primary_not_in_methods(record_file, capsys):
    path = record_file("test1.json", SCENARIO_B)
    assert cli.main(["solve", path, "-m", "newton", "--primary", "gaussian"]) == 1
    assert "Primary method" in capsys.readouterr().err


def test_decode(capsys):
    assert cli.main(["decode", "111", "--base", "2"]) == 0
    assert capsys.readouterr().out.strip() == "7"

    assert cli.main(["decode", "213", "-b", "4"]) == 0
    assert capsys.readouterr().out.strip() == "39"


def test_decode_invalid(capsys):
    assert cli.main(["decode", "2", "--base", "2"]) == 1
    assert "Invalid digit '2' for base 2" in capsys.readouterr().err

    assert cli.main(["decode", "1", "--base", "40"]) == 1
    assert "Invalid base" in capsys.readouterr().err


def test_inspect(record_file, capsys):
    path = record_file("test1.json", SCENARIO_B)
    assert cli.main(["inspect", path]) == 0

    out = capsys.readouterr().out
    assert "Threshold (k): 3" in out
    assert "Degree:        2" in out
    assert "111  ->  7" in out
    assert "Present:       3" in out
    assert "213" not in out


def test_inspect_flags_bad_digits(record_file, capsys):
    bad = dict(SCENARIO_B)
    bad["3"] = {"base": "8", "value": "19"}
    path = record_file("bad.json", bad)
    assert cli.main(["inspect", path]) == 1
    assert "Invalid digit '9' for base 8" in capsys.readouterr().out


def test_no_command(capsys):
    assert cli.main([]) == 1
