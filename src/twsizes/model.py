from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

SIZE_FIELDS: tuple[str, ...] = (
    "width",
    "min_width",
    "max_width",
    "height",
    "min_height",
    "max_height",
)
CONSTRAINT_FIELDS: tuple[str, ...] = ("min_width", "max_width", "min_height", "max_height")


@dataclass(frozen=True)
class VariantSplit:
    base: str
    variants: tuple[str, ...] = ()


@dataclass
class SizeInfo:
    width: str | None = None
    min_width: str | None = None
    max_width: str | None = None
    height: str | None = None
    min_height: str | None = None
    max_height: str | None = None

    def copy(self) -> "SizeInfo":
        return replace(self)

    def constraints(self) -> "SizeInfo":
        return SizeInfo(**{name: getattr(self, name) for name in CONSTRAINT_FIELDS})

    def merged_over(self, fallback: "SizeInfo") -> "SizeInfo":
        merged = fallback.copy()
        for name in SIZE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(merged, name, value)
        return merged

    def as_dict(self) -> dict[str, str]:
        return {item.name: getattr(self, item.name) for item in fields(self) if getattr(self, item.name) is not None}


@dataclass
class SizeInfoByBreakpoint:
    base: SizeInfo | None = None
    breakpoints: dict[str, SizeInfo] = field(default_factory=dict)

    def bucket(self, name: str | None) -> SizeInfo | None:
        if name is None:
            return self.base
        return self.breakpoints.get(name)


__all__ = [
    "CONSTRAINT_FIELDS",
    "SIZE_FIELDS",
    "SizeInfo",
    "SizeInfoByBreakpoint",
    "VariantSplit",
]
