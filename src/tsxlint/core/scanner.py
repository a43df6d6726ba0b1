"""Lint files and directories: parse, validate, collect per-file reports.

Each document gets its own parse and its own pipeline traversal; several
documents are validated concurrently, bounded by ``scan.max_concurrency``.
Parse failures and unreadable files degrade to an empty report.
"""
from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from tsxlint.core.checkers import Checker, build_checkers
from tsxlint.core.config.settings import LintSettings, ScanSettings
from tsxlint.core.engine.models import Diagnostic
from tsxlint.core.engine.pipeline import ValidationPipeline
from tsxlint.core.errors import ParseUnavailableError
from tsxlint.core.parsing import TsxParser

logger = logging.getLogger(__name__)


@dataclass
class FileReport:
    path: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    skipped: bool = False

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "skipped": self.skipped,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def iter_source_files(paths: Iterable[Path], scan: ScanSettings) -> Iterator[Path]:
    """Expand files and directories into matching source files, sorted.

    Explicitly named files are always included; directory walks honor the
    configured extensions and excluded directory names.
    """
    found: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            found.add(path)
            continue
        if not path.is_dir():
            logger.warning("Path does not exist: %s", path)
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in scan.exclude_dirs)
            for name in files:
                if Path(name).suffix.lower() in scan.extensions:
                    found.add(Path(root) / name)
    yield from sorted(found)


class Linter:
    """Glue between parser, pipeline and the filesystem.

    Example:
        linter = Linter.from_settings(LintSettings.load(repo_root))
        reports = linter.lint_paths_sync([Path("src")])
    """

    def __init__(
        self,
        pipeline: ValidationPipeline,
        *,
        parser: Optional[TsxParser] = None,
        scan: Optional[ScanSettings] = None,
    ) -> None:
        self.pipeline = pipeline
        self.parser = parser or TsxParser()
        self.scan = scan or ScanSettings()

    @classmethod
    def from_settings(
        cls,
        settings: LintSettings,
        *,
        checkers: Optional[Sequence[Checker]] = None,
    ) -> "Linter":
        pipeline = ValidationPipeline(
            rules=settings.attributes,
            checkers=list(checkers) if checkers is not None else build_checkers(settings.checkers),
            directives=settings.directives,
            timeout=settings.checker_timeout,
        )
        return cls(pipeline, scan=settings.scan)

    async def lint_source(self, source: str, file_id: str) -> List[Diagnostic]:
        try:
            document = self.parser.parse(source, file_id)
        except ParseUnavailableError as exc:
            logger.warning("%s; reporting no diagnostics", exc)
            return []
        return await self.pipeline.validate(document)

    async def lint_file(self, path: Path) -> FileReport:
        try:
            source = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            return FileReport(path=str(path), skipped=True)
        try:
            document = self.parser.parse(source, str(path))
            diagnostics = await self.pipeline.validate(document)
        except ParseUnavailableError as exc:
            logger.warning("%s; reporting no diagnostics", exc)
            return FileReport(path=str(path), skipped=True)
        except Exception:
            logger.exception("Unexpected failure while linting %s", path)
            return FileReport(path=str(path), skipped=True)
        return FileReport(path=str(path), diagnostics=diagnostics)

    async def lint_paths(self, paths: Iterable[Path]) -> List[FileReport]:
        files = list(iter_source_files(paths, self.scan))
        semaphore = asyncio.Semaphore(self.scan.max_concurrency)

        async def _bounded(path: Path) -> FileReport:
            async with semaphore:
                return await self.lint_file(path)

        logger.info("Linting %d file(s)", len(files))
        return list(await asyncio.gather(*(_bounded(p) for p in files)))

    def lint_paths_sync(self, paths: Iterable[Path]) -> List[FileReport]:
        return asyncio.run(self.lint_paths(paths))


__all__ = ["FileReport", "Linter", "iter_source_files"]
