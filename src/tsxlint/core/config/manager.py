"""
tsx-text-lint configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import jsonschema
import yaml

from tsxlint.core.errors import ConfigError
from tsxlint.core.utils.merge import deep_merge
from tsxlint.data import CONFIG_DIR, get_data_path, read_schema

logger = logging.getLogger(__name__)

ENV_PREFIX = "TSXLINT_"
PROJECT_CONFIG_DIRNAME = ".tsxlint"
SCHEMA_NAME = "config.schema.yaml"


def _iter_yaml_files(directory: Path) -> List[Path]:
    if not directory.is_dir():
        return []
    files = [p for p in directory.iterdir() if p.suffix in {".yaml", ".yml"} and p.is_file()]
    return sorted(files, key=lambda p: p.name)


class ConfigManager:
    """Load, merge, and validate tsx-text-lint configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: TSXLINT_<section>__<key>
    2. Project config: <repo-root>/.tsxlint/config/*.yaml (alphabetical order)
    3. Bundled defaults: tsxlint.data/config/*.yaml (alphabetical order)

    All YAML files are loaded and deep-merged; lists replace unless their first
    element is "+".
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root else Path.cwd()
        self.core_config_dir = get_data_path(CONFIG_DIR)
        self.project_config_dir = self.repo_root / PROJECT_CONFIG_DIRNAME / "config"

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in _iter_yaml_files(directory):
            logger.debug("Merging config file %s", path)
            cfg = deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ---------- Environment overrides ----------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("[") and s.endswith("]")) or (s.startswith("{") and s.endswith("}")):
            try:
                return json.loads(s)
            except ValueError:
                return s
        return s

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = raw.split("__")
            if not raw or any(seg == "" for seg in segs):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: '{key}'")
            yield [seg.lower() for seg in segs], self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur: Union[Dict[str, Any], Any] = root
        for part in path[:-1]:
            if not isinstance(cur, dict):
                raise ConfigError(f"Cannot apply override {'.'.join(path)}: path traverses a non-mapping")
            lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key = lower_map.get(part, part)
            if key not in cur or cur[key] is None:
                cur[key] = {}
            cur = cur[key]
        if not isinstance(cur, dict):
            raise ConfigError(f"Cannot apply override {'.'.join(path)}: path traverses a non-mapping")
        lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[lower_map.get(path[-1], path[-1])] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("Applying env override %s", ".".join(path))
            self._set_nested(cfg, path, typed_value)

    # ---------- Loading ----------

    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = read_schema(SCHEMA_NAME)
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.ValidationError as exc:
            where = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(f"Invalid configuration at {where}: {exc.message}") from exc

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration.

        Args:
            validate: Validate the merged result against the bundled JSON schema.

        Raises:
            ConfigError: A config file is unreadable, an override is malformed,
                or schema validation fails.
        """
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key (e.g. ``checkers.timeout_seconds``)."""
        cur: Any = self.load_config(validate=False)
        for part in key.split("."):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_DIRNAME"]
