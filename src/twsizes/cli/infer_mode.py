from __future__ import annotations

import sys
from dataclasses import dataclass, field

from twsizes.cli.args import parse_float, take_value, unknown_flag_message
from twsizes.cli.json_io import dumps_pretty, parse_payload
from twsizes.config.loader import load_config
from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message
from twsizes.infer import SIZES_FALLBACK, SizesExplanation

EXAMPLE = 'twsizes infer "size-25 lg:size-30"'

EXIT_UNINFERABLE = 2


@dataclass(frozen=True)
class _InferCommand:
    classes: tuple[str, ...]
    ratio: float | None = None
    style: dict = field(default_factory=dict)
    src: object = None
    root: str | None = None
    config_path: str | None = None
    json_mode: bool = False
    explain: bool = False


def run_infer_command(args: list[str], context: dict | None = None) -> int:
    params = _parse_args(args)
    if context is not None:
        context["root"] = params.root
        context["config_path"] = params.config_path
    config = load_config(root=params.root, path=params.config_path)
    explanation = config.explain(
        class_name=list(params.classes),
        style=params.style,
        ratio=params.ratio,
        src=params.src,
    )
    if params.json_mode:
        print(dumps_pretty(_payload(explanation, explain=params.explain)))
    else:
        _print_text(explanation, explain=params.explain)
    return 0 if explanation.sizes is not None else EXIT_UNINFERABLE


def _payload(explanation: SizesExplanation, *, explain: bool) -> dict:
    payload: dict = {
        "ok": explanation.sizes is not None,
        "sizes": explanation.sizes,
        "fallback": SIZES_FALLBACK,
    }
    if explain:
        payload["explain"] = explanation.as_dict()
    return payload


def _print_text(explanation: SizesExplanation, *, explain: bool) -> None:
    if explanation.sizes is not None:
        print(explanation.sizes)
    else:
        print(f"Could not infer sizes. Use the fallback: {SIZES_FALLBACK}", file=sys.stderr)
    if not explain:
        return
    if explanation.aspect_ratio is not None:
        print(f"aspect ratio: {explanation.aspect_ratio:g} (from {explanation.aspect_ratio_source})")
    for name, resolved in explanation.resolved.items():
        print(f"{name}: {resolved if resolved is not None else '-'}")
    for event in explanation.events:
        fields = event.get("fields") or {}
        detail = " ".join(f"{key}={value}" for key, value in fields.items())
        line = f"[{event['level']}] {event['message']}"
        print(f"{line} {detail}".rstrip())


def _parse_args(args: list[str]) -> _InferCommand:
    classes: list[str] = []
    ratio = None
    style: dict = {}
    src = None
    root = None
    config_path = None
    json_mode = False
    explain = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--explain":
            explain = True
            i += 1
            continue
        if arg == "--ratio":
            ratio = parse_float(take_value(args, i, arg, example=EXAMPLE), arg, example=f"{EXAMPLE} --ratio 1.5")
            i += 2
            continue
        if arg == "--style":
            style = _ensure_object(parse_payload(take_value(args, i, arg, example=EXAMPLE), flag=arg), arg)
            i += 2
            continue
        if arg == "--src":
            src = _ensure_object(parse_payload(take_value(args, i, arg, example=EXAMPLE), flag=arg), arg)
            i += 2
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
            raise TwSizesError(unknown_flag_message(arg, command="infer", example=EXAMPLE))
        classes.append(arg)
        i += 1
    if not classes:
        raise TwSizesError(
            build_guidance_message(
                what="No classes given.",
                why="twsizes infer needs the class string of the image wrapper.",
                fix="Pass the classes as an argument.",
                example=EXAMPLE,
            )
        )
    return _InferCommand(
        classes=tuple(classes),
        ratio=ratio,
        style=style,
        src=src,
        root=root,
        config_path=config_path,
        json_mode=json_mode,
        explain=explain,
    )


def _ensure_object(value: object, flag: str) -> dict:
    if isinstance(value, dict):
        return value
    raise TwSizesError(
        build_guidance_message(
            what=f"{flag} must be a JSON object.",
            why=f"Got {type(value).__name__}.",
            fix="Wrap the values in braces.",
            example=f'{EXAMPLE} {flag} \'{{"width": 120}}\'',
        )
    )


__all__ = ["EXIT_UNINFERABLE", "run_infer_command"]
