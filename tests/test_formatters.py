from __future__ import annotations

import io

import pytest

from flagparse.parser.formatters import IndentedHelpFormatter
from flagparse.parser.formatters import TitledHelpFormatter
from flagparse.parser.optparser import SUPPRESS_HELP
from flagparse.parser.optparser import SUPPRESS_USAGE
from flagparse.parser.optparser import OptionParser


def make_parser(**kwargs) -> OptionParser:
    kwargs.setdefault("formatter", IndentedHelpFormatter(width=80))
    parser = OptionParser(prog="prog", **kwargs)
    parser.add_option("-f", "--file", metavar="FILE", help="write report to FILE")
    parser.add_option(
        "-n", "--num", default="3", help="number of runs [default: %default]"
    )
    parser.add_option("--mode", choices=["a", "b"], help="pick a mode")
    parser.add_option("-v", action="store_true", help="be chatty")
    return parser


def test_usage() -> None:
    parser = make_parser()
    assert parser.get_usage() == "Usage: prog [options]\n"


def test_usage_prefix_is_stripped() -> None:
    parser = make_parser(usage="usage: %prog FILE")
    assert parser.get_usage() == "Usage: prog FILE\n"


def test_suppressed_usage() -> None:
    parser = make_parser(usage=SUPPRESS_USAGE)
    assert parser.get_usage() == ""
    assert not parser.format_help().startswith("Usage")


def test_format_help_layout() -> None:
    text = make_parser().format_help()
    assert text.startswith("Usage: prog [options]\n\nOptions:\n")
    assert "  -f FILE, --file=FILE  write report to FILE\n" in text
    assert "  -h, --help" in text
    assert "show this help message and exit" in text


def test_default_is_expanded() -> None:
    parser = make_parser()
    assert "number of runs [default: 3]" in parser.format_help()
    parser.set_defaults("num", 10)
    assert "number of runs [default: 10]" in parser.format_help()


def test_missing_default_is_none() -> None:
    parser = OptionParser(prog="prog")
    parser.add_option("-x", help="value is %default")
    assert "value is none" in parser.format_help()


def test_choices_metavar() -> None:
    assert "--mode={a,b}" in make_parser().format_help()


def test_dest_metavar() -> None:
    assert "-n NUM, --num=NUM" in make_parser().format_help()


def test_suppressed_help() -> None:
    parser = make_parser()
    parser.add_option("--secret", help=SUPPRESS_HELP)
    assert "--secret" not in parser.format_help()


def test_description_and_epilog() -> None:
    parser = make_parser(description="%prog does things", epilog="see the docs")
    text = parser.format_help()
    assert "Usage: prog [options]\n\nprog does things\n\nOptions:\n" in text
    assert text.endswith("\nsee the docs\n")


def test_long_description_is_wrapped() -> None:
    parser = make_parser(description="word " * 40)
    text = parser.format_help()
    lines = text.splitlines()
    assert all(len(line) <= 80 for line in lines)


def test_titled_formatter() -> None:
    parser = make_parser(formatter=TitledHelpFormatter(width=80))
    text = parser.format_help()
    assert text.startswith("Usage\n=====\n  prog [options]\n")
    assert "Options\n=======\n" in text
    # long options first
    assert "--file=FILE, -f FILE" in text


def test_opt_delimiters() -> None:
    formatter = IndentedHelpFormatter(width=80)
    formatter.set_short_opt_delimiter("")
    formatter.set_long_opt_delimiter(" ")
    text = make_parser(formatter=formatter).format_help()
    assert "-fFILE, --file FILE" in text
    with pytest.raises(ValueError):
        formatter.set_short_opt_delimiter("=")
    with pytest.raises(ValueError):
        formatter.set_long_opt_delimiter("")


def test_width_from_columns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "60")
    assert IndentedHelpFormatter().width == 58
    monkeypatch.setenv("COLUMNS", "wide")
    assert IndentedHelpFormatter().width == 78
    monkeypatch.delenv("COLUMNS")
    assert IndentedHelpFormatter().width == 78


def test_print_help_to_file() -> None:
    parser = make_parser()
    out = io.StringIO()
    parser.print_help(out)
    assert out.getvalue() == parser.format_help()


def test_version_expands_prog() -> None:
    parser = OptionParser(prog="prog", version="%prog 2.1")
    assert parser.get_version() == "prog 2.1"
    out = io.StringIO()
    parser.print_version(out)
    assert out.getvalue() == "prog 2.1\n"


def test_no_version() -> None:
    parser = OptionParser(prog="prog")
    out = io.StringIO()
    parser.print_version(out)
    assert out.getvalue() == ""
