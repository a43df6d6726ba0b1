import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'tsxlint' and tests/ importable as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from tsxlint.core.config import ENV_PREFIX
from tsxlint.core.stdlib_logging import reset_logging_for_tests
from tsxlint.data import clear_caches


@pytest.fixture(autouse=True)
def _isolate_tsxlint(monkeypatch: pytest.MonkeyPatch):
    """Each test starts without TSXLINT_* overrides, cached data or log handlers."""
    import os

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    clear_caches()
    reset_logging_for_tests()
    yield
    reset_logging_for_tests()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project root with a .tsxlint/config directory."""
    (tmp_path / ".tsxlint" / "config").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_project_config(project_root: Path):
    """Write ``<project>/.tsxlint/config/<name>`` from a YAML string."""

    def _write(name: str, content: str) -> Path:
        path = project_root / ".tsxlint" / "config" / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
