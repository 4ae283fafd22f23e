from __future__ import annotations

from twsizes.cli.args import take_value, unknown_flag_message
from twsizes.cli.json_io import dumps_pretty
from twsizes.config.loader import load_config
from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message
from twsizes.lengths.utility_length import resolve_utility_length

EXAMPLE = "twsizes length 1/2"


def run_length_command(args: list[str], context: dict | None = None) -> int:
    fragments: list[str] = []
    root = None
    config_path = None
    json_mode = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--root":
            root = take_value(args, i, arg, example=f"{EXAMPLE} --root .")
            i += 2
            continue
        if arg == "--config":
            config_path = take_value(args, i, arg, example=f"{EXAMPLE} --config twsizes.toml")
            i += 2
            continue
        if arg.startswith("--"):
            raise TwSizesError(unknown_flag_message(arg, command="length", example=EXAMPLE))
        fragments.append(arg)
        i += 1
    if len(fragments) != 1:
        raise TwSizesError(
            build_guidance_message(
                what="twsizes length takes exactly one value.",
                why=f"Got {len(fragments)} values.",
                fix="Pass the utility value without its prefix.",
                example=EXAMPLE,
            )
        )
    if context is not None:
        context["root"] = root
        context["config_path"] = config_path
    config = load_config(root=root, path=config_path)
    fragment = fragments[0]
    length = resolve_utility_length(fragment, config.base_spacing_px, config.breakpoints, config.custom_spacing)
    if json_mode:
        print(dumps_pretty({"ok": length is not None, "value": fragment, "length": length}))
    elif length is not None:
        print(length)
    else:
        print(f"'{fragment}' does not resolve to a length.")
    return 0 if length is not None else 2


__all__ = ["run_length_command"]
