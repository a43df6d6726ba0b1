from __future__ import annotations

import asyncio
import logging
from typing import List

import pytest

from tsxlint.core.checkers import BlockingChecker, Checker, ProseChecker, build_checkers, register_checker
from tsxlint.core.checkers.registry import available_checkers
from tsxlint.core.engine import Issue
from tsxlint.core.errors import CheckerError


def test_builds_enabled_checkers_in_order() -> None:
    checkers = build_checkers({"enabled": ["prose"], "prose": {"rules": {"double-space": False}}})
    assert [c.name for c in checkers] == ["prose"]
    assert isinstance(checkers[0], ProseChecker)
    assert "prose/double-space" not in checkers[0].rule_ids


def test_unknown_checker_is_logged_and_skipped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="tsxlint"):
        checkers = build_checkers({"enabled": ["grammar", "prose"]})
    assert [c.name for c in checkers] == ["prose"]
    assert "Unknown checker 'grammar'" in caplog.text


def test_missing_section_builds_nothing() -> None:
    assert build_checkers(None) == []
    assert build_checkers({"enabled": []}) == []


class _ShoutChecker(BlockingChecker):
    name = "shout"

    def check_text(self, text: str) -> List[Issue]:
        if text.isupper():
            return [Issue(message="Avoid all caps", rule_id="shout/all-caps")]
        return []


def test_registered_checker_is_buildable() -> None:
    register_checker("shout", lambda section: _ShoutChecker())
    assert "shout" in available_checkers()
    [checker] = build_checkers({"enabled": ["shout"]})
    assert isinstance(checker, Checker)
    assert asyncio.run(checker.check("STOP"))[0].rule_id == "shout/all-caps"


class _CrashingChecker(BlockingChecker):
    name = "crash"

    def check_text(self, text: str) -> List[Issue]:
        raise KeyError(text)


def test_blocking_checker_failures_surface_as_checker_error() -> None:
    with pytest.raises(CheckerError) as excinfo:
        asyncio.run(_CrashingChecker().check("boom"))
    assert excinfo.value.checker == "crash"
