from __future__ import annotations

import sys

from twsizes.cli.infer_mode import run_infer_command
from twsizes.cli.json_io import dumps_pretty
from twsizes.cli.length_mode import run_length_command
from twsizes.config.loader import read_config_source
from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message
from twsizes.errors.render import format_error, format_short_error
from twsizes.version import get_version

COMMANDS = {"infer", "length", "help"}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    context: dict = {}
    try:
        if not args:
            _print_usage()
            return 1
        cmd = args[0].strip().lower()
        if cmd == "--version":
            print(f"twsizes {get_version()}")
            return 0
        if cmd in {"help", "--help", "-h"}:
            _print_usage()
            return 0
        if cmd == "infer":
            return run_infer_command(args[1:], context)
        if cmd == "length":
            return run_length_command(args[1:], context)
        raise TwSizesError(
            build_guidance_message(
                what=f"Unknown command: '{args[0]}'.",
                why=f"Supported commands are {', '.join(sorted(COMMANDS))}.",
                fix="Run twsizes help to see usage.",
                example='twsizes infer "w-full max-w-50"',
            )
        )
    except TwSizesError as err:
        if "--json" in args:
            print(dumps_pretty({"ok": False, "error": format_short_error(err)}))
            return 1
        sources = read_config_source(context.get("root"), context.get("config_path"))
        print(format_error(err, sources or None), file=sys.stderr)
        return 1


def _print_usage() -> None:
    usage = """Usage:
  twsizes infer "<classes>" [--ratio N] [--style JSON] [--src JSON] [--json] [--explain]
                                      # infer a responsive sizes value
  twsizes length <value> [--json]    # resolve one utility value (e.g. 32, 1/2, [50%])
  twsizes --version                  # print the version
Options:
  --root DIR      read twsizes.toml from DIR
  --config FILE   read settings from FILE
"""
    print(usage.strip())


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
