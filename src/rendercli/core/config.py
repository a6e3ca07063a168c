"""
rendercli configuration management (layered YAML).
"""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from rendercli.core.exceptions import ConfigError
from rendercli.core.utils.merge import deep_merge
from rendercli.core.utils.profiling import span
from rendercli.data import get_views_dir, read_json, read_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "RENDERCLI_"
PROJECT_CONFIG_NAMES = (".rendercli.yml", ".rendercli.yaml")


class ConfigManager:
    """Load, merge, and validate rendercli configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: RENDERCLI_<SECTION>__<KEY>
    2. Project config: the file passed as ``config_path``, otherwise
       ``.rendercli.yml`` / ``.rendercli.yaml`` in the working directory
    3. Bundled defaults: rendercli.data/config/defaults.yaml
    """

    def __init__(self, config_path: Optional[Path] = None, cwd: Optional[Path] = None) -> None:
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.config_path = Path(config_path) if config_path is not None else None

    def project_config_file(self) -> Optional[Path]:
        """Return the project config file to merge, if any."""
        if self.config_path is not None:
            path = self.config_path if self.config_path.is_absolute() else self.cwd / self.config_path
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}", context={"path": str(path)})
            return path
        for name in PROJECT_CONFIG_NAMES:
            candidate = self.cwd / name
            if candidate.exists():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config file {path} is not valid UTF-8: {exc.reason}", context={"path": str(path)}) from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc.strerror or exc}", context={"path": str(path)}) from exc
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        if value.strip().lower() in {"null", "~"}:
            return None
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = raw.split("__")
            if len(segs) < 2 or any(not s for s in segs):
                logger.debug("Ignoring malformed config override %s", key)
                continue
            yield [s.lower() for s in segs], self._coerce_type(os.environ[key])

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            cur = cfg
            for part in path[:-1]:
                nxt = cur.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    cur[part] = nxt
                cur = nxt
            cur[path[-1]] = value
            logger.debug("Config override %s=%r", ".".join(path), value)

    # ========== Loading ==========

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        schema = read_json("schemas", "config.schema.json")
        try:
            jsonschema.validate(instance=cfg, schema=schema)
        except jsonschema.ValidationError as exc:
            where = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at {where}: {exc.message}",
                context={"path": where},
            ) from exc

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration document."""
        with span("config.load"):
            cfg = deep_merge({}, read_yaml("config", "defaults.yaml"))
            project_file = self.project_config_file()
            if project_file is not None:
                logger.debug("Merging project config %s", project_file)
                cfg = deep_merge(cfg, self.load_yaml(project_file))
            self.apply_env_overrides(cfg)
            if validate:
                self.validate_schema(cfg)
        return cfg


@dataclass(frozen=True)
class RenderSettings:
    """Everything a render or benchmark run needs, resolved from config."""

    templates_dir: Path
    template: str
    strict_undefined: bool = True
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    iterations: int = 10000

    @classmethod
    def from_config(
        cls,
        cfg: Dict[str, Any],
        *,
        template: Optional[str] = None,
        templates_dir: Optional[str] = None,
        iterations: Optional[int] = None,
        cwd: Optional[Path] = None,
    ) -> "RenderSettings":
        """Build settings from a loaded config; explicit arguments win."""
        render_cfg = cfg.get("render") or {}
        bench_cfg = cfg.get("bench") or {}

        raw_dir = templates_dir or render_cfg.get("templates_dir")
        if raw_dir:
            path = Path(raw_dir).expanduser()
            if not path.is_absolute():
                path = (Path(cwd) if cwd is not None else Path.cwd()) / path
        else:
            path = get_views_dir()

        count = iterations if iterations is not None else bench_cfg.get("iterations", 10000)
        if count < 1:
            raise ConfigError(f"iterations must be at least 1, got {count}", context={"iterations": count})

        return cls(
            templates_dir=path,
            template=template or render_cfg.get("template", "basic.html"),
            strict_undefined=bool(render_cfg.get("strict_undefined", True)),
            autoescape=bool(render_cfg.get("autoescape", True)),
            trim_blocks=bool(render_cfg.get("trim_blocks", True)),
            lstrip_blocks=bool(render_cfg.get("lstrip_blocks", True)),
            iterations=int(count),
        )


__all__ = ["ConfigManager", "RenderSettings", "ENV_PREFIX", "PROJECT_CONFIG_NAMES"]
