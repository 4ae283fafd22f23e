from __future__ import annotations

from typing import Iterable

from twsizes.breakpoints import BreakpointConfig
from twsizes.model import VariantSplit


def parse_variant_token(token: str) -> VariantSplit:
    if ":" not in token:
        return VariantSplit(base=token)
    parts = _split_top_level_colons(token)
    if len(parts) <= 1:
        return VariantSplit(base=token)
    # An empty segment means a stray colon; keep the token whole.
    if any(part == "" for part in parts):
        return VariantSplit(base=token)
    return VariantSplit(base=parts[-1], variants=tuple(parts[:-1]))


def get_breakpoint(variants: Iterable[str], breakpoints: BreakpointConfig) -> str | None:
    for variant in variants:
        if variant in breakpoints:
            return variant
    return None


def _split_top_level_colons(token: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    bracket_depth = 0
    paren_depth = 0
    for char in token:
        bracket_depth = _next_depth(bracket_depth, paren_depth, char, "[", "]")
        paren_depth = _next_depth(paren_depth, bracket_depth, char, "(", ")")
        if char == ":" and bracket_depth == 0 and paren_depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def _next_depth(current: int, other_depth: int, char: str, opener: str, closer: str) -> int:
    if other_depth != 0:
        return current
    if char == opener:
        return current + 1
    if char == closer and current > 0:
        return current - 1
    return current


__all__ = ["get_breakpoint", "parse_variant_token"]
