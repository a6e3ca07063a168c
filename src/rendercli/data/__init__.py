"""
rendercli data resource helpers.

Bundled configuration defaults, schemas and templates live in this package
and are located with importlib.resources, so they resolve relative to
wherever rendercli is installed.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a bundled data file or directory.

    Args:
        subpackage: Data subdirectory (e.g., "config", "views/test")
        filename: Optional filename within the subdirectory

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("views/test", "basic.html")
        PosixPath('/path/to/rendercli/data/views/test/basic.html')
    """
    pkg = resources.files("rendercli.data")
    base = Path(str(pkg)) / subpackage
    return base / filename if filename else base


def get_views_dir() -> Path:
    """Directory holding the templates the commands render by default."""
    return get_data_path("views/test")


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled YAML file (cached)."""
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


@lru_cache(maxsize=16)
def read_json(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled JSON file (cached)."""
    path = get_data_path(subpackage, filename)
    return json.loads(path.read_text(encoding="utf-8"))


def clear_caches() -> None:
    """Clear all read caches."""
    read_yaml.cache_clear()
    read_json.cache_clear()


__all__ = [
    "get_data_path",
    "get_views_dir",
    "read_yaml",
    "read_json",
    "clear_caches",
]
