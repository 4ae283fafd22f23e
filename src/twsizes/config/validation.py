from __future__ import annotations

import math
from typing import Any

from twsizes.breakpoints import BASE_BUCKET
from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message


def ensure_base_spacing(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        try:
            value = float(str(value).strip())
        except ValueError as err:
            raise TwSizesError(_spacing_message(label, value)) from err
    if not math.isfinite(value) or value <= 0:
        raise TwSizesError(_spacing_message(label, value))
    return value


def ensure_breakpoints(value: Any, label: str) -> dict[str, int]:
    if not isinstance(value, dict):
        raise TwSizesError(
            build_guidance_message(
                what=f"{label} must be a table of breakpoint names to pixel widths.",
                why=f"Got {type(value).__name__}.",
                fix="Map each breakpoint name to a positive integer.",
                example='{"md": 768, "lg": 1200}',
            )
        )
    breakpoints: dict[str, int] = {}
    for name, threshold in value.items():
        if not isinstance(name, str) or not name.strip() or name == BASE_BUCKET:
            raise TwSizesError(
                build_guidance_message(
                    what=f"{label} has an invalid breakpoint name: {name!r}.",
                    why=f'Breakpoint names must be non-empty and cannot be "{BASE_BUCKET}".',
                    fix="Rename the breakpoint.",
                    example="lg = 1200",
                )
            )
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
            raise TwSizesError(
                build_guidance_message(
                    what=f"{label}.{name} must be a positive integer.",
                    why=f"Got {threshold!r}.",
                    fix="Use the breakpoint min-width in pixels.",
                    example=f"{name} = 1024",
                )
            )
        breakpoints[name] = threshold
    return breakpoints


def ensure_spacing(value: Any, label: str) -> dict[str, str]:
    if not isinstance(value, dict) or any(
        not isinstance(k, str) or not isinstance(v, str) or not v.strip() for k, v in value.items()
    ):
        raise TwSizesError(
            build_guidance_message(
                what=f"{label} must be a mapping of names to CSS lengths.",
                why="Every custom spacing value must be a non-empty string.",
                fix="Quote each length.",
                example='container = "1312px"',
            )
        )
    return {str(k): str(v) for k, v in value.items()}


def _spacing_message(label: str, value: Any) -> str:
    return build_guidance_message(
        what=f"{label} must be a positive number.",
        why=f"Got {value!r}.",
        fix="Use the pixel size of one spacing step.",
        example="base_spacing_px = 4",
    )


__all__ = ["ensure_base_spacing", "ensure_breakpoints", "ensure_spacing"]
