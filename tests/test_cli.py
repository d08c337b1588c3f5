"""Tests for the ``randline`` command line."""

from __future__ import annotations

import io
import logging

import pytest

from randline import cli
from randline.cli import build_parser, main


def _run(argv: list[str], stdin_text: str) -> tuple[int, str]:
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
    return code, stdout.getvalue()


def test_selects_a_single_line_if_no_arg(capsys) -> None:
    assert _run([], "a\na\na\na\na\na\n") == (0, "a\n")
    assert capsys.readouterr().err == ""


def test_selects_k_lines_if_more_lines_than_k() -> None:
    assert _run(["2"], "a\na\na\na\na\na\n") == (0, "a\na\n")


def test_selects_k_lines_if_equal_lines_to_k() -> None:
    assert _run(["2"], "a\na\n") == (0, "a\na\n")


def test_selects_all_lines_if_less_lines_than_k() -> None:
    assert _run(["5"], "a\na\n") == (0, "a\na\n")


def test_selected_lines_come_from_input() -> None:
    code, out = _run(["3", "--seed", "4"], "x\ny\nz\nw\nv\n")
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 3
    assert set(lines) <= {"x", "y", "z", "w", "v"}


def test_seed_makes_output_reproducible() -> None:
    text = "".join(f"{i}\n" for i in range(100))
    assert _run(["5", "--seed", "8"], text) == _run(["5", "--seed", "8"], text)


@pytest.mark.parametrize("argv", [["XXX"], ["0"], ["-1"], ["1", "2", "3"]])
def test_bad_arguments_print_usage(argv: list[str], capsys) -> None:
    assert _run(argv, "a\n") == (1, "")
    assert capsys.readouterr().err == "Usage: randline [k]\n"


def test_config_file_supplies_k(tmp_path) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("k: 2\nseed: 1\n", encoding="utf-8")
    assert _run(["--config", str(path)], "a\na\na\n") == (0, "a\na\n")


def test_config_with_zero_k_prints_usage(tmp_path, capsys) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text("k: 0\n", encoding="utf-8")
    assert _run(["--config", str(path)], "a\n") == (1, "")
    assert capsys.readouterr().err == "Usage: randline [k]\n"


def test_missing_config_file(tmp_path, capsys) -> None:
    assert _run(["--config", str(tmp_path / "nope.yaml")], "a\n") == (1, "")
    assert capsys.readouterr().err.startswith("Unable to load config:")


def test_unreadable_stdin(capsys) -> None:
    class _Broken:
        def readline(self) -> str:
            raise OSError("Input/output error")

    stdout = io.StringIO()
    assert main(["2"], stdin=_Broken(), stdout=stdout) == 1  # type: ignore[arg-type]
    assert stdout.getvalue() == ""
    assert capsys.readouterr().err == "Unable to read from stdin: Input/output error\n"


def test_negative_seed_prints_usage(capsys) -> None:
    assert _run(["2", "--seed", "-5"], "a\nb\nc\n") == (1, "")
    assert capsys.readouterr().err == "Usage: randline [k]\n"


@pytest.mark.parametrize(
    ("yaml_text", "message"),
    [
        ("seed: -1\n", "seed must be non-negative"),
        ("key_block_size: 0\n", "key_block_size must be positive"),
        ("key_block_size: -4\n", "key_block_size must be positive"),
    ],
)
def test_out_of_range_config_values_are_reported(
    yaml_text: str, message: str, tmp_path, capsys
) -> None:
    path = tmp_path / "sample.yaml"
    path.write_text(yaml_text, encoding="utf-8")
    assert _run(["--config", str(path)], "a\nb\nc\n") == (1, "")
    err = capsys.readouterr().err
    assert err.startswith("Unable to load config:")
    assert message in err


def test_verbose_emits_debug_records(caplog) -> None:
    caplog.set_level(logging.DEBUG)
    assert _run(["2", "-v", "--seed", "3"], "a\nb\nc\n")[0] == 0
    messages = [
        record.getMessage()
        for record in caplog.records
        if record.levelno == logging.DEBUG and record.name.startswith("randline")
    ]
    assert "Sampling 2 line(s) with seed=3" in messages
    assert any(message.startswith("Sampled 2 of 3 items") for message in messages)


def test_debug_records_suppressed_without_verbose(caplog) -> None:
    caplog.set_level(logging.DEBUG)
    assert _run(["2"], "a\nb\nc\n")[0] == 0
    assert not [record for record in caplog.records if record.name.startswith("randline")]


def test_parser_builds_without_module_docstring(monkeypatch) -> None:
    """Docstrings are stripped under ``python -OO``."""
    monkeypatch.setattr(cli, "__doc__", None)
    assert build_parser().description
    assert _run(["1"], "a\n") == (0, "a\n")
