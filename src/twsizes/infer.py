from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from twsizes.aspect_ratio import resolve_aspect_ratio
from twsizes.breakpoints import BASE_BUCKET, DEFAULT_BREAKPOINTS, BreakpointConfig, ordered_breakpoints
from twsizes.inference_log import InferenceLog
from twsizes.model import SizeInfo
from twsizes.resolve import compute_resolved_width
from twsizes.size_info import merge_style_into_size_info, parse_size_info_by_breakpoint
from twsizes.tokens.class_names import ClassNameValue

DEFAULT_BASE_SPACING_PX = 4
SIZES_FALLBACK = "100vw"
STYLE_ASPECT_RATIO_KEYS: tuple[str, ...] = ("aspect_ratio", "aspectRatio")


@dataclass
class SizesExplanation:
    sizes: str | None
    aspect_ratio: float | None = None
    aspect_ratio_source: str | None = None
    buckets: dict[str, SizeInfo] = field(default_factory=dict)
    resolved: dict[str, str | None] = field(default_factory=dict)
    conditions: list[str] = field(default_factory=list)
    events: list[dict] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "sizes": self.sizes,
            "aspect_ratio": self.aspect_ratio,
            "aspect_ratio_source": self.aspect_ratio_source,
            "buckets": {name: info.as_dict() for name, info in self.buckets.items()},
            "resolved": dict(self.resolved),
            "conditions": list(self.conditions),
            "events": list(self.events),
        }


def infer_image_sizes(
    *,
    class_name: ClassNameValue = None,
    style: Mapping[str, object] | None = None,
    ratio: float | None = None,
    src: object = None,
    base_spacing_px: float = DEFAULT_BASE_SPACING_PX,
    breakpoints: BreakpointConfig | None = None,
    custom_spacing: Mapping[str, str] | None = None,
) -> str | None:
    """Infer a responsive image ``sizes`` value from sizing utility classes.

    Supports ``size-*``, ``w-*``, ``min-w-*``, ``max-w-*``, ``h-*``, ``min-h-*``
    and ``max-h-*`` utilities (with breakpoint variants such as ``lg:``),
    arbitrary values like ``w-[350px]`` and inline style lengths.

    Returns ``None`` when the base width cannot be inferred; callers then fall
    back to ``SIZES_FALLBACK``.
    """
    return explain_image_sizes(
        class_name=class_name,
        style=style,
        ratio=ratio,
        src=src,
        base_spacing_px=base_spacing_px,
        breakpoints=breakpoints,
        custom_spacing=custom_spacing,
    ).sizes


def explain_image_sizes(
    *,
    class_name: ClassNameValue = None,
    style: Mapping[str, object] | None = None,
    ratio: float | None = None,
    src: object = None,
    base_spacing_px: float = DEFAULT_BASE_SPACING_PX,
    breakpoints: BreakpointConfig | None = None,
    custom_spacing: Mapping[str, str] | None = None,
) -> SizesExplanation:
    log = InferenceLog()
    breakpoints = DEFAULT_BREAKPOINTS if breakpoints is None else breakpoints
    by_breakpoint = parse_size_info_by_breakpoint(
        class_name,
        base_spacing_px,
        breakpoints,
        custom_spacing or {},
        log=log,
    )

    base_info = by_breakpoint.base.copy() if by_breakpoint.base is not None else SizeInfo()
    merge_style_into_size_info(base_info, style, log=log)
    base_constraints = base_info.constraints()

    aspect = resolve_aspect_ratio(
        ratio=ratio,
        style_aspect_ratio=_style_aspect_ratio(style),
        src=src,
        class_name=class_name,
        log=log,
    )
    explanation = SizesExplanation(
        sizes=None,
        aspect_ratio=aspect.value,
        aspect_ratio_source=aspect.source,
    )
    explanation.buckets[BASE_BUCKET] = base_info

    resolved_base = compute_resolved_width(base_info, aspect.value)
    explanation.resolved[BASE_BUCKET] = resolved_base
    if not resolved_base:
        log.warn("base width could not be inferred", fallback=SIZES_FALLBACK)
        explanation.events = log.snapshot()
        return explanation

    emitted: set[int] = set()
    for name, min_width_px in ordered_breakpoints(breakpoints):
        info = by_breakpoint.breakpoints.get(name)
        if info is None:
            continue
        if min_width_px in emitted:
            log.warn("breakpoint shares a threshold with an earlier one", breakpoint=name, min_width=min_width_px)
            continue
        merged = info.merged_over(base_constraints)
        explanation.buckets[name] = merged
        resolved = compute_resolved_width(merged, aspect.value)
        explanation.resolved[name] = resolved
        if not resolved:
            log.info("breakpoint width could not be inferred", breakpoint=name)
            continue
        emitted.add(min_width_px)
        explanation.conditions.append(f"(min-width: {min_width_px}px) {resolved}")

    if explanation.conditions:
        explanation.sizes = f"{', '.join(explanation.conditions)}, {resolved_base}"
    else:
        explanation.sizes = resolved_base
    log.info("sizes inferred", sizes=explanation.sizes)
    explanation.events = log.snapshot()
    return explanation


def _style_aspect_ratio(style: Mapping[str, object] | None) -> object:
    if not style:
        return None
    for key in STYLE_ASPECT_RATIO_KEYS:
        value = style.get(key)
        if value is not None:
            return value
    return None


__all__ = [
    "DEFAULT_BASE_SPACING_PX",
    "SIZES_FALLBACK",
    "SizesExplanation",
    "explain_image_sizes",
    "infer_image_sizes",
]
