from __future__ import annotations

import io
from pathlib import Path

import pytest

from aoc2023.cli import SOLVERS, RunConfig, main, run

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def test_main_prints_answer(capsys):
    exit_code = main(["5", "--part", "2", "--input", str(EXAMPLES_DIR / "day05.txt")])
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "46"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO((EXAMPLES_DIR / "day09.txt").read_text()))
    assert main(["9"]) == 0
    assert capsys.readouterr().out.strip() == "114"


def test_parse_failure_exit_code(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("seeds: 1\n\nseed-to-location map:\n1 2\n", encoding="utf-8")
    assert main(["5", "-i", str(path)]) == 2
    assert "Failed to parse input" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path):
    assert main(["1", "-i", str(tmp_path / "missing")]) == 2


def test_lookup_failure_exit_code(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("seeds: 1\n\nseed-to-soil map:\n1 2 3\n", encoding="utf-8")
    assert main(["5", "-i", str(path)]) == 3
    assert "Lookup failed" in capsys.readouterr().err


def test_empty_result_exit_code(tmp_path):
    path = tmp_path / "input"
    path.write_text("L\n\nBBZ = (BBZ, BBZ)\n", encoding="utf-8")
    assert main(["8", "--part", "2", "-i", str(path)]) == 4


def test_single_part_day_rejects_part_two():
    with pytest.raises(SystemExit):
        main(["10", "--part", "2"])


@pytest.mark.parametrize(
    "day, part, name, expected",
    [
        (1, 2, "day01.txt", 281),
        (2, 1, "day02.txt", 8),
        (3, 2, "day03.txt", 467835),
        (4, 2, "day04.txt", 30),
        (5, 1, "day05.txt", 35),
        (6, 1, "day06.txt", 288),
        (7, 1, "day07.txt", 6440),
        (8, 2, "day08_ghost.txt", 6),
        (9, 2, "day09.txt", 2),
        (10, 1, "day10_complex.txt", 8),
    ],
)
def test_run_every_day(example, day, part, name, expected):
    assert run(RunConfig(day=day, part=part), example(name)) == expected


@pytest.mark.parametrize(
    "day, name, expected",
    [
        (1, "day01_digits.txt", 142),
        (2, "day02.txt", 8),
        (3, "day03.txt", 4361),
        (4, "day04.txt", 13),
        (5, "day05.txt", 35),
        (6, "day06.txt", 288),
        (7, "day07.txt", 6440),
        (8, "day08.txt", 2),
        (9, "day09.txt", 114),
        (10, "day10_complex.txt", 8),
    ],
)
def test_solvers_default_to_part_one(example, day, name, expected):
    assert SOLVERS[day](example(name)) == expected
