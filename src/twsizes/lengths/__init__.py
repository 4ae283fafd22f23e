from twsizes.lengths.css_length import (
    format_percent,
    format_px,
    max_px,
    min_px,
    parse_px_number,
    parse_style_aspect_ratio,
    parse_style_length,
)
from twsizes.lengths.utility_length import resolve_utility_length

__all__ = [
    "format_percent",
    "format_px",
    "max_px",
    "min_px",
    "parse_px_number",
    "parse_style_aspect_ratio",
    "parse_style_length",
    "resolve_utility_length",
]
