from __future__ import annotations

import json
import os

from twsizes.config.model import SizesConfig
from twsizes.config.validation import ensure_base_spacing, ensure_breakpoints, ensure_spacing
from twsizes.errors.base import TwSizesError
from twsizes.errors.guidance import build_guidance_message

ENV_BASE_SPACING_PX = "TWSIZES_BASE_SPACING_PX"
ENV_BREAKPOINTS = "TWSIZES_BREAKPOINTS"
ENV_SPACING = "TWSIZES_SPACING"


def apply_env_overrides(config: SizesConfig) -> bool:
    used = False
    spacing = os.getenv(ENV_BASE_SPACING_PX)
    if spacing:
        config.base_spacing_px = ensure_base_spacing(spacing, ENV_BASE_SPACING_PX)
        used = True
    breakpoints = os.getenv(ENV_BREAKPOINTS)
    if breakpoints:
        config.breakpoints = ensure_breakpoints(_load_json(breakpoints, ENV_BREAKPOINTS), ENV_BREAKPOINTS)
        used = True
    custom_spacing = os.getenv(ENV_SPACING)
    if custom_spacing:
        config.custom_spacing.update(ensure_spacing(_load_json(custom_spacing, ENV_SPACING), ENV_SPACING))
        used = True
    return used


def _load_json(raw: str, name: str) -> object:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as err:
        raise TwSizesError(
            build_guidance_message(
                what=f"{name} is not valid JSON.",
                why=f"JSON parsing failed at line {err.lineno}, column {err.colno}: {err.msg}.",
                fix=f"Set {name} to a JSON object.",
                example='{"md": 768, "lg": 1200}',
            )
        ) from err


__all__ = ["ENV_BASE_SPACING_PX", "ENV_BREAKPOINTS", "ENV_SPACING", "apply_env_overrides"]
