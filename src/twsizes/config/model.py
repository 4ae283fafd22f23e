from __future__ import annotations

from dataclasses import dataclass, field

from twsizes.breakpoints import DEFAULT_BREAKPOINTS
from twsizes.infer import DEFAULT_BASE_SPACING_PX, explain_image_sizes, infer_image_sizes


@dataclass
class SizesConfig:
    base_spacing_px: float = DEFAULT_BASE_SPACING_PX
    breakpoints: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    custom_spacing: dict[str, str] = field(default_factory=dict)

    def infer(self, **kwargs):
        return infer_image_sizes(**self._with_defaults(kwargs))

    def explain(self, **kwargs):
        return explain_image_sizes(**self._with_defaults(kwargs))

    def _with_defaults(self, kwargs: dict) -> dict:
        options = dict(kwargs)
        options.setdefault("base_spacing_px", self.base_spacing_px)
        options.setdefault("breakpoints", self.breakpoints)
        options.setdefault("custom_spacing", self.custom_spacing)
        return options


__all__ = ["SizesConfig"]
