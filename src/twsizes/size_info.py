from __future__ import annotations

from typing import Mapping

from twsizes.breakpoints import BASE_BUCKET, BreakpointConfig
from twsizes.inference_log import InferenceLog
from twsizes.lengths.css_length import parse_style_length
from twsizes.lengths.utility_length import resolve_utility_length
from twsizes.model import SizeInfo, SizeInfoByBreakpoint
from twsizes.tokens.class_names import ClassNameValue, split_class_tokens
from twsizes.tokens.variants import get_breakpoint, parse_variant_token

# Evaluated in order, first prefix wins.
SIZING_UTILITIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("size-", ("width", "height")),
    ("w-", ("width",)),
    ("min-w-", ("min_width",)),
    ("max-w-", ("max_width",)),
    ("h-", ("height",)),
    ("min-h-", ("min_height",)),
    ("max-h-", ("max_height",)),
)

STYLE_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "width": ("width",),
    "min_width": ("min_width", "minWidth"),
    "max_width": ("max_width", "maxWidth"),
    "height": ("height",),
    "min_height": ("min_height", "minHeight"),
    "max_height": ("max_height", "maxHeight"),
}


def parse_size_info_by_breakpoint(
    class_name: ClassNameValue,
    base_spacing_px: float,
    breakpoints: BreakpointConfig,
    custom_spacing: Mapping[str, str] | None = None,
    *,
    log: InferenceLog | None = None,
) -> SizeInfoByBreakpoint:
    by_breakpoint = SizeInfoByBreakpoint()
    for token in split_class_tokens(class_name):
        split = parse_variant_token(token)
        bucket_name = get_breakpoint(split.variants, breakpoints)
        existing = by_breakpoint.bucket(bucket_name) or SizeInfo()
        applied = apply_sizing_token(
            existing,
            split.base,
            base_spacing_px=base_spacing_px,
            breakpoints=breakpoints,
            custom_spacing=custom_spacing,
        )
        if applied is None:
            continue
        if not applied:
            if log is not None:
                log.debug("sizing value rejected", token=token)
            continue
        if bucket_name is None:
            by_breakpoint.base = existing
        else:
            by_breakpoint.breakpoints[bucket_name] = existing
        if log is not None:
            log.debug("sizing token applied", token=token, bucket=bucket_name or BASE_BUCKET)
    return by_breakpoint


def apply_sizing_token(
    info: SizeInfo,
    base_token: str,
    *,
    base_spacing_px: float,
    breakpoints: BreakpointConfig,
    custom_spacing: Mapping[str, str] | None = None,
) -> bool | None:
    """Apply one base utility to ``info``.

    Returns ``None`` for tokens that are not sizing utilities, ``False`` when the
    utility is recognized but its value does not resolve, ``True`` otherwise.
    """
    for prefix, targets in SIZING_UTILITIES:
        if not base_token.startswith(prefix) or len(base_token) == len(prefix):
            continue
        value = resolve_utility_length(base_token[len(prefix) :], base_spacing_px, breakpoints, custom_spacing)
        if value is None:
            return False
        for name in targets:
            setattr(info, name, value)
        return True
    return None


def merge_style_into_size_info(
    info: SizeInfo,
    style: Mapping[str, object] | None,
    *,
    log: InferenceLog | None = None,
) -> SizeInfo:
    if not style:
        return info
    for name, keys in STYLE_FIELD_KEYS.items():
        raw = _first_present(style, keys)
        if raw is None:
            continue
        value = parse_style_length(raw)
        if value is None:
            if log is not None:
                log.debug("style value ignored", field=name, value=raw)
            continue
        setattr(info, name, value)
    return info


def _first_present(style: Mapping[str, object], keys: tuple[str, ...]) -> object:
    for key in keys:
        value = style.get(key)
        if value is not None:
            return value
    return None


__all__ = [
    "SIZING_UTILITIES",
    "STYLE_FIELD_KEYS",
    "apply_sizing_token",
    "merge_style_into_size_info",
    "parse_size_info_by_breakpoint",
]
