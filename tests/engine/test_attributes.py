from __future__ import annotations

import pytest

from tsxlint.core.config import LintSettings
from tsxlint.core.engine import AttributeClass, AttributeRules


@pytest.fixture
def default_rules() -> AttributeRules:
    return LintSettings.load(validate=False).attributes


@pytest.mark.parametrize(
    "name",
    ["placeholder", "title", "alt", "label", "aria-label", "description", "content", "tooltip", "aria-description"],
)
def test_default_targets_are_checked(default_rules: AttributeRules, name: str) -> None:
    assert default_rules.classify(name) is AttributeClass.CHECKED


@pytest.mark.parametrize("name", ["className", "class", "style", "id", "key", "data-testid", "data-foo", "data-"])
def test_default_ignores_are_ignored(default_rules: AttributeRules, name: str) -> None:
    assert default_rules.classify(name) is AttributeClass.IGNORED
    assert not default_rules.is_checked(name)


def test_unknown_attribute_is_unspecified_and_not_checked(default_rules: AttributeRules) -> None:
    assert default_rules.classify("onClick") is AttributeClass.UNSPECIFIED
    assert not default_rules.is_checked("onClick")


def test_ignore_wins_over_target() -> None:
    rules = AttributeRules(target=frozenset({"title", "data-title"}), ignore=frozenset({"title", "data-*"}))
    for name in ("title", "data-title"):
        assert rules.classify(name) is AttributeClass.IGNORED


def test_wildcard_only_applies_to_entries_ending_in_star() -> None:
    rules = AttributeRules(target=frozenset({"data-label"}), ignore=frozenset({"data-"}))
    assert rules.classify("data-label") is AttributeClass.CHECKED


def test_empty_sets_check_nothing() -> None:
    rules = AttributeRules.from_config({"target": [], "ignore": []})
    assert not rules.is_checked("alt")


@pytest.mark.parametrize("section", [None, "oops", {"target": "alt"}, {}])
def test_malformed_sections_degrade_to_check_nothing(section) -> None:
    rules = AttributeRules.from_config(section)
    assert rules.target == frozenset()
    assert not rules.is_checked("alt")
