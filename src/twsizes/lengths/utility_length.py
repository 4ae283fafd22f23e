from __future__ import annotations

import math
import re
from typing import Callable, Mapping

from twsizes.breakpoints import BreakpointConfig, breakpoint_threshold
from twsizes.lengths.css_length import format_percent, format_px

UNSIZED_VALUES = frozenset({"auto", "full"})
VIEWPORT_KEYWORDS = frozenset({"dvw", "lvw", "svw", "dvh", "lvh", "svh"})
SCREEN_PREFIX = "screen-"

_UNSIGNED_NUMBER = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def resolve_utility_length(
    raw: str,
    base_spacing_px: float,
    breakpoints: BreakpointConfig,
    custom_spacing: Mapping[str, str] | None = None,
) -> str | None:
    if raw in UNSIZED_VALUES:
        return None
    resolvers: tuple[Callable[[str], str | None], ...] = (
        lambda value: _from_named_spacing(value, custom_spacing or {}),
        lambda value: _from_screen(value, breakpoints),
        _from_viewport_keyword,
        _from_fraction,
        _from_arbitrary_brackets,
        _from_arbitrary_parens,
        lambda value: _from_spacing_scale(value, base_spacing_px),
    )
    for resolver in resolvers:
        resolved = resolver(raw)
        if resolved is not None:
            return resolved
    return None


def parse_unsigned_number(raw: str) -> float | None:
    if not _UNSIGNED_NUMBER.fullmatch(raw):
        return None
    value = float(raw)
    return value if math.isfinite(value) else None


def _from_named_spacing(raw: str, custom_spacing: Mapping[str, str]) -> str | None:
    if raw == "px":
        return "1px"
    value = custom_spacing.get(raw)
    if isinstance(value, str):
        return value
    return None


def _from_screen(raw: str, breakpoints: BreakpointConfig) -> str | None:
    if raw == "screen":
        return "100vw"
    if not raw.startswith(SCREEN_PREFIX):
        return None
    threshold = breakpoint_threshold(breakpoints, raw[len(SCREEN_PREFIX) :])
    if threshold is None:
        return None
    return f"{threshold}px"


def _from_viewport_keyword(raw: str) -> str | None:
    if raw in VIEWPORT_KEYWORDS:
        return f"100{raw}"
    return None


def _from_fraction(raw: str) -> str | None:
    if raw.count("/") != 1:
        return None
    numerator_raw, denominator_raw = raw.split("/")
    numerator = parse_unsigned_number(numerator_raw)
    denominator = parse_unsigned_number(denominator_raw)
    if numerator is None or denominator is None or denominator == 0:
        return None
    percent = numerator / denominator * 100
    if not math.isfinite(percent):
        return None
    return format_percent(percent)


def _from_arbitrary_brackets(raw: str) -> str | None:
    if not (len(raw) >= 2 and raw.startswith("[") and raw.endswith("]")):
        return None
    inner = raw[1:-1].replace("_", " ").strip()
    return inner or None


def _from_arbitrary_parens(raw: str) -> str | None:
    if not (len(raw) >= 2 and raw.startswith("(") and raw.endswith(")")):
        return None
    inner = raw[1:-1].strip()
    if not inner:
        return None
    if inner.startswith("--"):
        return f"var({inner})"
    return inner


def _from_spacing_scale(raw: str, base_spacing_px: float) -> str | None:
    value = parse_unsigned_number(raw)
    if value is None:
        return None
    pixels = value * base_spacing_px
    if not math.isfinite(pixels) or pixels < 0:
        return None
    return format_px(pixels)


__all__ = [
    "SCREEN_PREFIX",
    "UNSIZED_VALUES",
    "VIEWPORT_KEYWORDS",
    "parse_unsigned_number",
    "resolve_utility_length",
]
