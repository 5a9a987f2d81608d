"""Test the command-line entrypoint."""
import io
import sys

import pytest

from roman_arabic_calculator.common.models import OperatorSelection
from roman_arabic_calculator.console.repl import ErrorPolicy
from roman_arabic_calculator.main import main, parse_args


def test_parse_args_defaults() -> None:
    """Without options the loop continues on error and picks the leftmost operator."""
    args = parse_args([])
    assert args.on_error is ErrorPolicy.CONTINUE
    assert args.operator_selection is OperatorSelection.LEFTMOST
    assert args.log_level == "WARNING"


def test_parse_args_options() -> None:
    """Options are converted to their enum values."""
    args = parse_args([
        "--on-error", "exit",
        "--operator-selection", "scan-order",
        "--log-level", "debug",
    ])

    assert args.on_error is ErrorPolicy.EXIT
    assert args.operator_selection is OperatorSelection.SCAN_ORDER
    assert args.log_level == "DEBUG"


def test_parse_args_invalid_policy() -> None:
    """Unknown choices are rejected by argparse."""
    with pytest.raises(SystemExit):
        parse_args(["--on-error", "retry"])


def test_main_interactive(monkeypatch, capsys) -> None:
    """The interactive loop reads stdin until the exit command."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("VIII+II\nexit\n"))

    assert main([]) == 0

    out = capsys.readouterr().out.splitlines()
    assert "X" in out
    assert out[-1].startswith("Enter an arithmetic expression")


def test_main_interactive_exit_on_error(monkeypatch, capsys) -> None:
    """With --on-error exit the loop stops at the first invalid expression."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("1+x\n2+2\n"))

    assert main(["--on-error", "exit"]) == 1

    out = capsys.readouterr().out.splitlines()
    assert "4" not in out


def test_parse_args_rejects_file_option(tmp_path) -> None:
    """The calculator reads the console only; there is no file input option."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1+1\n")

    with pytest.raises(SystemExit):
        parse_args(["--file", str(input_file)])
