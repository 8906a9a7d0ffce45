from __future__ import annotations

import sys

from typing import Sequence

from flagparse.parser.optparser import OptionParser


def build_parser() -> OptionParser:
    parser = OptionParser(
        usage="%prog [OPTIONS] FILE...",
        version="%prog 1.0",
        description="just an example",
        prog="example",
    )
    parser.add_option("-f", "--file").set_dest("filename").set_help(
        "write report to FILE"
    ).set_metavar("FILE")
    parser.add_option("-q", "--quiet").set_action("store_false").set_dest(
        "verbose"
    ).set_default("1").set_help("don't print status messages to stdout")
    parser.add_option(
        "-v",
        "--verbosity",
        action="count",
        dest="level",
        help="increase verbosity (default: %default)",
        default=0,
    )
    parser.add_option(
        "-m",
        "--mode",
        choices=["fast", "slow"],
        default="fast",
        help="processing mode",
    )
    parser.add_option(
        "-I", "--include", action="append", metavar="DIR", help="add DIR to the path"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    options, args = parser.parse_args_or_exit(
        sys.argv[1:] if argv is None else argv
    )

    if not args:
        # Calling error() here makes the usage message part of the
        # report, just like for errors found while parsing.
        parser.error("need at least one file")

    if options.get("verbose").as_bool():
        print("Files:", ", ".join(args))
        print("Report:", options["filename"] or "(stdout)")
        print("Mode:", options["mode"])
        print("Level:", options.get("level").as_int())
        print("Include:", ", ".join(options.all("include")) or "(none)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
