from __future__ import annotations

from pathlib import Path
from typing import Mapping, Union

from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import parse_guidance

ConfigSources = Union[str, Mapping[Union[str, Path], str]]


def format_error(err: TwSizesError, sources: ConfigSources | None = None) -> str:
    """Render an error, pointing at the offending config line when it is known."""
    message = str(err)
    file_path = err.details.get("file")
    source_text = _lookup_source(sources, file_path)
    if err.line is None or not source_text:
        return message
    lines = source_text.splitlines()
    if not 1 <= err.line <= len(lines):
        return message
    line_text = lines[err.line - 1]
    column = min(max(err.column or 1, 1), len(line_text) + 1)
    rendered = f"{message}\n{line_text}\n{' ' * (column - 1)}^"
    return f"File: {file_path}\n{rendered}" if file_path else rendered


def format_short_error(err: TwSizesError) -> str:
    """One-line form used by `--json` output."""
    text = str(err)
    parts = parse_guidance(text)
    what = parts.get("what") or next((line.strip() for line in text.splitlines() if line.strip()), "")
    what = what or "An unexpected error occurred."
    fix = parts.get("fix")
    return f"{what} {fix}" if fix else what


def _lookup_source(sources: ConfigSources | None, file_path: object) -> str | None:
    if sources is None or isinstance(sources, str):
        return sources
    if file_path:
        for key, text in sources.items():
            if Path(key).as_posix() == str(file_path):
                return text
    return next(iter(sources.values()), None)


__all__ = ["ConfigSources", "format_error", "format_short_error"]
