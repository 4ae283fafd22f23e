from __future__ import annotations

import json

from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message


def dumps_pretty(payload: object) -> str:
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)


def parse_payload(text: str, *, flag: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise TwSizesError(
            build_guidance_message(
                what=f"Invalid JSON for {flag}.",
                why=f"JSON parsing failed at line {err.lineno}, column {err.colno}: {err.msg}.",
                fix="Ensure the value is valid JSON with double-quoted keys/strings.",
                example=f'{flag} \'{{"width": 120}}\'',
            )
        ) from err


__all__ = ["dumps_pretty", "parse_payload"]
