from __future__ import annotations

from typing import Mapping

BreakpointConfig = Mapping[str, int]

# Standard Tailwind CSS v4 breakpoints (min-width thresholds in pixels).
DEFAULT_BREAKPOINTS: dict[str, int] = {
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
}

BASE_BUCKET = "base"


def ordered_breakpoints(breakpoints: BreakpointConfig) -> list[tuple[str, int]]:
    return sorted(breakpoints.items(), key=lambda item: (-item[1], item[0]))


def breakpoint_threshold(breakpoints: BreakpointConfig, name: str) -> int | None:
    value = breakpoints.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


__all__ = [
    "BASE_BUCKET",
    "BreakpointConfig",
    "DEFAULT_BREAKPOINTS",
    "breakpoint_threshold",
    "ordered_breakpoints",
]
