from __future__ import annotations

from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message


def take_value(args: list[str], index: int, flag: str, *, example: str) -> str:
    if index + 1 >= len(args):
        raise TwSizesError(
            build_guidance_message(
                what=f"{flag} flag is missing a value.",
                why=f"{flag} expects a value after it.",
                fix=f"Pass a value after {flag}.",
                example=example,
            )
        )
    return args[index + 1]


def parse_float(value: str, flag: str, *, example: str) -> float:
    try:
        return float(value)
    except ValueError as err:
        raise TwSizesError(
            build_guidance_message(
                what=f"{flag} must be a number.",
                why=f"Got {value!r}.",
                fix=f"Pass a number after {flag}.",
                example=example,
            )
        ) from err


def unknown_flag_message(flag: str, *, command: str, example: str) -> str:
    return build_guidance_message(
        what=f"Unknown flag '{flag}'.",
        why=f"twsizes {command} does not accept this flag.",
        fix="Remove the flag or run twsizes help.",
        example=example,
    )


__all__ = ["parse_float", "take_value", "unknown_flag_message"]
