from __future__ import annotations

from importlib import metadata
from pathlib import Path

DISTRIBUTION = "twsizes"
# src/twsizes/version.py -> repository root
VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"


def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        pass
    if VERSION_FILE.is_file():
        return VERSION_FILE.read_text(encoding="utf-8").strip()
    return "0.0.0"


__all__ = ["DISTRIBUTION", "VERSION_FILE", "get_version"]
