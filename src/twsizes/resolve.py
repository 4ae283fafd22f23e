from __future__ import annotations

from twsizes.lengths.css_length import format_px, max_px, min_px, parse_px_number
from twsizes.model import SizeInfo


def apply_min_max(value: str, min_value: str | None, max_value: str | None) -> str | None:
    if min_value and max_value:
        value_px = parse_px_number(value)
        min_value_px = parse_px_number(min_value)
        max_value_px = parse_px_number(max_value)
        if value_px is not None and min_value_px is not None and max_value_px is not None:
            return format_px(min(max(value_px, min_value_px), max_value_px))
        return f"clamp({min_value}, {value}, {max_value})"
    if min_value:
        return max_px(value, min_value) or f"max({value}, {min_value})"
    if max_value:
        return min_px(value, max_value) or f"min({value}, {max_value})"
    return value


def resolve_height_px(info: SizeInfo) -> float | None:
    height_px = parse_px_number(info.height) if info.height else None
    min_height_px = parse_px_number(info.min_height) if info.min_height else None
    max_height_px = parse_px_number(info.max_height) if info.max_height else None

    if height_px is not None:
        resolved = height_px
        if max_height_px is not None:
            resolved = min(resolved, max_height_px)
        if min_height_px is not None:
            resolved = max(resolved, min_height_px)
        return resolved

    if max_height_px is not None:
        resolved = max_height_px
        if min_height_px is not None:
            resolved = max(resolved, min_height_px)
        return resolved

    return None


def compute_resolved_width(info: SizeInfo, aspect_ratio: float | None) -> str | None:
    if info.width:
        return apply_min_max(info.width, info.min_width, info.max_width)

    # Fluid width capped by max-width.
    if info.max_width:
        return info.max_width

    if not aspect_ratio:
        return None

    height_px = resolve_height_px(info)
    if height_px is None:
        return None

    # Overflowing products have no px representation.
    derived = format_px(height_px * aspect_ratio)
    if derived is None:
        return None
    return apply_min_max(derived, info.min_width, info.max_width)


__all__ = ["apply_min_max", "compute_resolved_width", "resolve_height_px"]
