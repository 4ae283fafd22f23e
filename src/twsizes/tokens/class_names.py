from __future__ import annotations

from typing import Iterable, Union

ClassNameValue = Union[str, None, bool, int, Iterable["ClassNameValue"]]

MAX_NESTING_DEPTH = 10


def split_class_tokens(value: ClassNameValue) -> list[str]:
    tokens: list[str] = []
    values = value if isinstance(value, (list, tuple)) else (value,)
    _append_tokens(tokens, values, 0)
    return tokens


def join_class_names(*values: ClassNameValue) -> str:
    tokens: list[str] = []
    _append_tokens(tokens, values, 0)
    return " ".join(tokens)


def _append_tokens(out: list[str], values: Iterable[ClassNameValue], depth: int) -> None:
    if depth > MAX_NESTING_DEPTH:
        return
    for value in values:
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            _append_tokens(out, value, depth + 1)
            continue
        if not isinstance(value, str):
            continue
        out.extend(value.split())


__all__ = ["ClassNameValue", "MAX_NESTING_DEPTH", "join_class_names", "split_class_tokens"]
