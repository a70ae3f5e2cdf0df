from __future__ import annotations

import json

import pytest

from textspan.cli import main


def test_format(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["format", "4", "5"]) == 0
    assert capsys.readouterr().out == "[4:9]\n"


def test_format_negative_start_is_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["format", "-1", "5"]) == 1
    assert "start must not be negative" in capsys.readouterr().err


def test_parse(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", "[4:9]", "[3:3]"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "start=4 length=5 end=9",
        "start=3 length=0 end=3",
    ]


def test_parse_invalid_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", "[9:4]"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "'[9:4]' is not valid" in captured.err


def test_binary_commands(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["enclosing", "[0:3]", "[5:7]"]) == 0
    assert main(["gap", "[0:3]", "[5:7]"]) == 0
    assert main(["inner", "[5:7]", "[0:3]"]) == 0
    assert main(["overlaps", "[0:3]", "[2:4]"]) == 0
    assert main(["overlaps", "[3:3]", "[3:3]"]) == 0
    assert capsys.readouterr().out.splitlines() == ["[0:7]", "[3:5]", "[3:7]", "true", "false"]


def test_gap_of_overlapping_spans(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["gap", "[0:3]", "[2:4]"]) == 1
    assert "length must not be negative" in capsys.readouterr().err


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", "enclosing", "[0:3]", "[5:7]"]) == 0
    assert json.loads(capsys.readouterr().out) == {"start": 0, "length": 7, "end": 7, "text": "[0:7]"}

    assert main(["--json", "overlaps", "[0:3]", "[3:5]"]) == 0
    assert json.loads(capsys.readouterr().out) is False


def test_usage_error_exits_2() -> None:
    with pytest.raises(SystemExit) as e:
        main(["format", "x", "1"])
    assert e.value.code == 2


def test_parse_oversized_offset_is_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", "[0:" + "9" * 5000 + "]"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "is not valid" in captured.err
