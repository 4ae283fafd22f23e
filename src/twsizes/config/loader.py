from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from twsizes.config.env_loader import apply_env_overrides
from twsizes.config.model import SizesConfig
from twsizes.config.toml_parser import parse_toml
from twsizes.config.validation import ensure_base_spacing, ensure_breakpoints, ensure_spacing

CONFIG_FILENAME = "twsizes.toml"


@dataclass(frozen=True)
class ConfigSource:
    kind: str
    path: str | None = None


def load_config(root: Path | str | None = None, path: Path | str | None = None) -> SizesConfig:
    config, _ = resolve_config(root=root, path=path)
    return config


def resolve_config(
    root: Path | str | None = None,
    path: Path | str | None = None,
) -> tuple[SizesConfig, list[ConfigSource]]:
    config = SizesConfig()
    sources: list[ConfigSource] = []
    toml_path = _resolve_config_path(root, path)
    if toml_path is not None and toml_path.exists():
        data = parse_toml(toml_path.read_text(encoding="utf-8"), toml_path)
        _apply_toml_config(config, data)
        sources.append(ConfigSource(kind="toml", path=toml_path.as_posix()))
    if apply_env_overrides(config):
        sources.append(ConfigSource(kind="env", path=None))
    return config, sources


def read_config_source(root: Path | str | None = None, path: Path | str | None = None) -> dict[str, str]:
    toml_path = _resolve_config_path(root, path)
    if toml_path is None or not toml_path.exists():
        return {}
    return {toml_path.as_posix(): toml_path.read_text(encoding="utf-8")}


def _resolve_config_path(root: Path | str | None, path: Path | str | None) -> Path | None:
    if path:
        return Path(path).resolve()
    if root:
        return Path(root).resolve() / CONFIG_FILENAME
    return None


def _apply_toml_config(config: SizesConfig, data: Dict[str, Any]) -> None:
    if not isinstance(data, dict):
        return
    _apply_settings_toml(config, data.get("twsizes"))
    breakpoints = data.get("breakpoints")
    if breakpoints is not None:
        config.breakpoints = ensure_breakpoints(breakpoints, "breakpoints")
    spacing = data.get("spacing")
    if spacing is not None:
        config.custom_spacing = ensure_spacing(spacing, "spacing")


def _apply_settings_toml(config: SizesConfig, table: Any) -> None:
    if not isinstance(table, dict):
        return
    spacing = table.get("base_spacing_px")
    if spacing is not None:
        config.base_spacing_px = ensure_base_spacing(spacing, "twsizes.base_spacing_px")


__all__ = ["CONFIG_FILENAME", "ConfigSource", "load_config", "read_config_source", "resolve_config"]
