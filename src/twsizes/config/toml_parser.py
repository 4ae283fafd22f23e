from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any, Dict

from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message

_TOML_POSITION = re.compile(r"at line (\d+), column (\d+)")


def parse_toml(text: str, path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        line, column = _error_position(err)
        raise TwSizesError(
            build_guidance_message(
                what=f"{path.name} is not valid TOML.",
                why=f"TOML parsing failed: {err}.",
                fix=f"Fix the TOML syntax in {path.name}.",
                example="[breakpoints]\\nlg = 1200",
            ),
            line=line,
            column=column,
            details={"file": path.as_posix()},
        ) from err
    return data if isinstance(data, dict) else {}


def _error_position(err: tomllib.TOMLDecodeError) -> tuple[int | None, int | None]:
    line = getattr(err, "lineno", None)
    column = getattr(err, "colno", None)
    if line is not None:
        return line, column
    match = _TOML_POSITION.search(str(err))
    if match is None:
        return None, None
    return int(match.group(1)), int(match.group(2))


__all__ = ["parse_toml"]
