from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from twsizes.inference_log import InferenceLog
from twsizes.lengths.css_length import is_positive_finite, parse_style_aspect_ratio, ratio_from_parts
from twsizes.lengths.utility_length import parse_unsigned_number
from twsizes.tokens.class_names import ClassNameValue, split_class_tokens
from twsizes.tokens.variants import parse_variant_token

NAMED_ASPECT_RATIOS: dict[str, float] = {
    "aspect-square": 1.0,
    "aspect-video": 16 / 9,
}

_ASPECT_FRACTION = re.compile(r"aspect-([0-9]+(?:\.[0-9]+)?)/([0-9]+(?:\.[0-9]+)?)")
_ASPECT_BRACKET = re.compile(r"aspect-\[(.+)\]", re.DOTALL)


@dataclass(frozen=True)
class AspectRatioResult:
    value: float | None
    source: str | None = None


def resolve_aspect_ratio(
    *,
    ratio: object = None,
    style_aspect_ratio: object = None,
    src: object = None,
    class_name: ClassNameValue = None,
    log: InferenceLog | None = None,
) -> AspectRatioResult:
    if ratio is not None and _explicit_ratio(ratio) is None and log is not None:
        log.warn("explicit ratio ignored", ratio=ratio)
    candidates = (
        ("ratio", lambda: _explicit_ratio(ratio)),
        ("style", lambda: parse_style_aspect_ratio(style_aspect_ratio)),
        ("src", lambda: get_src_aspect_ratio(src)),
        ("class", lambda: get_aspect_ratio_from_class_name(class_name, log=log)),
    )
    for source, compute in candidates:
        value = compute()
        if value is not None:
            if log is not None:
                log.debug("aspect ratio resolved", source=source, ratio=value)
            return AspectRatioResult(value=value, source=source)
    return AspectRatioResult(value=None)


def get_src_aspect_ratio(src: object) -> float | None:
    dimensions = _read_dimensions(src)
    if dimensions is None:
        dimensions = _read_dimensions(_read_field(src, "default"))
    if dimensions is None:
        return None
    width, height = dimensions
    return ratio_from_parts(width, height)


def get_aspect_ratio_from_class_name(class_name: ClassNameValue, *, log: InferenceLog | None = None) -> float | None:
    for token in split_class_tokens(class_name):
        base = parse_variant_token(token).base
        if not base.startswith("aspect-"):
            continue
        value = parse_aspect_ratio_token(base)
        if value is not None:
            return value
        if log is not None:
            log.debug("aspect token ignored", token=token)
    return None


def parse_aspect_ratio_token(base: str) -> float | None:
    named = NAMED_ASPECT_RATIOS.get(base)
    if named is not None:
        return named
    match = _ASPECT_FRACTION.fullmatch(base)
    if match is not None:
        return ratio_from_parts(float(match.group(1)), float(match.group(2)))
    match = _ASPECT_BRACKET.fullmatch(base)
    if match is None:
        return None
    raw = match.group(1).replace("_", " ").strip()
    if not raw:
        return None
    if "/" in raw:
        parts = [part.strip() for part in raw.split("/")]
        if len(parts) != 2:
            return None
        numerator = parse_unsigned_number(parts[0])
        denominator = parse_unsigned_number(parts[1])
        if numerator is None or denominator is None:
            return None
        return ratio_from_parts(numerator, denominator)
    value = parse_unsigned_number(raw)
    if value is None or value <= 0:
        return None
    return value


def _explicit_ratio(ratio: object) -> float | None:
    if is_positive_finite(ratio):
        return float(ratio)  # type: ignore[arg-type]
    return None


def _read_dimensions(value: object) -> tuple[float, float] | None:
    width = _read_field(value, "width")
    height = _read_field(value, "height")
    if not (is_positive_finite(width) and is_positive_finite(height)):
        return None
    return float(width), float(height)  # type: ignore[arg-type]


def _read_field(value: object, name: str) -> object:
    if value is None or isinstance(value, (str, bytes, int, float)):
        return None
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


__all__ = [
    "AspectRatioResult",
    "NAMED_ASPECT_RATIOS",
    "get_aspect_ratio_from_class_name",
    "get_src_aspect_ratio",
    "parse_aspect_ratio_token",
    "resolve_aspect_ratio",
]
