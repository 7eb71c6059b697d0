"""Helpers for resolving catalogue file locations."""
from __future__ import annotations

import sys
from pathlib import Path


def get_repo_root() -> Path:
    """Return the repository root (or the unpacked bundle root when frozen)."""
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing the JSON catalogue files."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data" / "definitions"
