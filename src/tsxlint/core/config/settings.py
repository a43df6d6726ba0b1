"""Typed access to the merged configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from tsxlint.core.engine.attributes import AttributeRules
from tsxlint.core.engine.directives import Directives
from tsxlint.core.engine.pipeline import DEFAULT_CHECKER_TIMEOUT

from .manager import ConfigManager


def _section(cfg: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = cfg.get(key)
    return dict(value) if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class ScanSettings:
    extensions: Tuple[str, ...] = (".tsx", ".jsx")
    exclude_dirs: Tuple[str, ...] = ("node_modules", ".git")
    max_concurrency: int = 4

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> "ScanSettings":
        defaults = cls()
        extensions = section.get("extensions")
        exclude = section.get("exclude_dirs")
        return cls(
            extensions=tuple(
                e if e.startswith(".") else f".{e}" for e in (str(x).lower() for x in extensions)
            ) if isinstance(extensions, list) else defaults.extensions,
            exclude_dirs=tuple(str(d) for d in exclude) if isinstance(exclude, list) else defaults.exclude_dirs,
            max_concurrency=max(1, int(section.get("max_concurrency") or defaults.max_concurrency)),
        )


@dataclass(frozen=True)
class LintSettings:
    """Everything the linter needs, derived from one configuration load."""

    attributes: AttributeRules = field(default_factory=AttributeRules)
    directives: Directives = field(default_factory=Directives)
    checkers: Dict[str, Any] = field(default_factory=dict)
    scan: ScanSettings = field(default_factory=ScanSettings)
    log_level: str = "WARNING"

    @property
    def checker_timeout(self) -> float:
        return float(self.checkers.get("timeout_seconds") or DEFAULT_CHECKER_TIMEOUT)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "LintSettings":
        return cls(
            attributes=AttributeRules.from_config(cfg.get("attributes")),
            directives=Directives.from_config(cfg.get("directives")),
            checkers=_section(cfg, "checkers"),
            scan=ScanSettings.from_config(_section(cfg, "scan")),
            log_level=str(_section(cfg, "logging").get("level") or "WARNING"),
        )

    @classmethod
    def load(cls, repo_root: Optional[Path] = None, *, validate: bool = True) -> "LintSettings":
        return cls.from_config(ConfigManager(repo_root).load_config(validate=validate))


__all__ = ["LintSettings", "ScanSettings"]
