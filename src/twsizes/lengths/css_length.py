from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

STYLE_LENGTH_UNITS: tuple[str, ...] = (
    "px",
    "rem",
    "em",
    "vw",
    "vh",
    "vmin",
    "vmax",
    "dvw",
    "lvw",
    "svw",
    "dvh",
    "lvh",
    "svh",
)

_CSS_LENGTH_LITERAL = re.compile(r"[0-9]+(?:\.[0-9]+)?(?:" + "|".join(STYLE_LENGTH_UNITS) + r")")
_CSS_FUNC_LENGTH = re.compile(r"(?:calc|min|max|clamp)\(.+\)", re.DOTALL)
_CSS_VAR = re.compile(r"var\(.+\)", re.DOTALL)
_PX_NUMBER = re.compile(r"([0-9]+(?:\.[0-9]+)?)px")
_RATIO_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_RATIO_FRACTION = re.compile(r"([0-9]+(?:\.[0-9]+)?)\s*/\s*([0-9]+(?:\.[0-9]+)?)")

PX_DECIMALS = 3
PERCENT_DECIMALS = 6


def format_number(value: float, places: int) -> str | None:
    if _as_float(value) is None:
        return None
    quantum = Decimal(1).scaleb(-places)
    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_px(value: float) -> str | None:
    text = format_number(value, PX_DECIMALS)
    return None if text is None else f"{text}px"


def format_percent(value: float) -> str | None:
    text = format_number(value, PERCENT_DECIMALS)
    return None if text is None else f"{text}%"


def parse_px_number(length: str) -> float | None:
    match = _PX_NUMBER.fullmatch(length)
    if match is None:
        return None
    return _as_float(float(match.group(1)))


def min_px(a: str, b: str) -> str | None:
    first = parse_px_number(a)
    second = parse_px_number(b)
    if first is None or second is None:
        return None
    return format_px(min(first, second))


def max_px(a: str, b: str) -> str | None:
    first = parse_px_number(a)
    second = parse_px_number(b)
    if first is None or second is None:
        return None
    return format_px(max(first, second))


def parse_style_length(value: object) -> str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = _as_float(value)
        if number is None or number < 0:
            return None
        return format_px(number)
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if trimmed == "" or trimmed == "auto":
        return None
    if _CSS_LENGTH_LITERAL.fullmatch(trimmed):
        return trimmed
    if _CSS_FUNC_LENGTH.fullmatch(trimmed):
        return trimmed
    if _CSS_VAR.fullmatch(trimmed):
        return trimmed
    return None


def parse_style_aspect_ratio(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if is_positive_finite(value) else None
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if trimmed == "":
        return None
    if _RATIO_NUMBER.fullmatch(trimmed):
        numeric = float(trimmed)
        return numeric if is_positive_finite(numeric) else None
    match = _RATIO_FRACTION.fullmatch(trimmed)
    if match is None:
        return None
    return ratio_from_parts(float(match.group(1)), float(match.group(2)))


def ratio_from_parts(numerator: float, denominator: float) -> float | None:
    if not (is_positive_finite(numerator) and is_positive_finite(denominator)):
        return None
    ratio = numerator / denominator
    return ratio if is_positive_finite(ratio) else None


def is_positive_finite(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    number = _as_float(value)
    return number is not None and number > 0


def _as_float(value: int | float) -> float | None:
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


__all__ = [
    "PERCENT_DECIMALS",
    "PX_DECIMALS",
    "STYLE_LENGTH_UNITS",
    "format_number",
    "format_percent",
    "format_px",
    "is_positive_finite",
    "max_px",
    "min_px",
    "parse_px_number",
    "parse_style_aspect_ratio",
    "parse_style_length",
    "ratio_from_parts",
]
