"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

from rendercli.core.config import ConfigManager, RenderSettings
from rendercli.core.stdlib_logging import configure_logging


def load_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load configuration for a command and set up logging from it.

    ``--verbose`` forces DEBUG regardless of ``logging.level``.
    """
    config_path = getattr(args, "config", None)
    manager = ConfigManager(config_path=Path(config_path) if config_path else None)
    cfg = manager.load_config()

    log_cfg = cfg.get("logging") or {}
    level = "DEBUG" if getattr(args, "verbose", False) else str(log_cfg.get("level") or "WARNING")
    log_file = log_cfg.get("file")
    configure_logging(level=level, log_path=Path(log_file) if log_file else None)
    return cfg


def get_render_settings(
    args: argparse.Namespace,
    *,
    iterations: Optional[int] = None,
) -> RenderSettings:
    """Resolve RenderSettings from config plus the command-line overrides."""
    cfg = load_config(args)
    return RenderSettings.from_config(
        cfg,
        template=getattr(args, "template", None),
        templates_dir=getattr(args, "templates_dir", None),
        iterations=iterations,
    )


__all__ = ["load_config", "get_render_settings"]
