from __future__ import annotations

import asyncio
import logging

import pytest
from helpers.checkers import FAKE_RULE, FailingChecker, RecordingChecker, SlowChecker
from helpers.nodes import attr, comment, document, element, expr, text

from tsxlint.core.engine import AttributeRules, Diagnostic, SegmentOrigin, ValidationPipeline

RULES = AttributeRules(
    target=frozenset({"alt", "title", "placeholder", "aria-label"}),
    ignore=frozenset({"className", "data-*"}),
)


def make_pipeline(*checkers, timeout: float = 5.0) -> ValidationPipeline:
    return ValidationPipeline(rules=RULES, checkers=list(checkers) or [RecordingChecker()], timeout=timeout)


def test_misspelled_alt_reports_on_the_attribute_line() -> None:
    doc = document(element(attr("alt", '"Plsae confirm"', line=7), tag="img", line=7))
    diagnostics = make_pipeline().validate_sync(doc)
    assert diagnostics == [
        Diagnostic(line=7, message='"Plsae" is misspelled', rule_id=FAKE_RULE, checker="fake", file="App.tsx")
    ]


def test_value_line_wins_over_attribute_line() -> None:
    doc = document(element(attr("title", '"txet"', line=3, value_line=4)))
    [diag] = make_pipeline().validate_sync(doc)
    assert diag.line == 4


def test_ignored_attribute_never_reaches_checkers() -> None:
    checker = RecordingChecker()
    doc = document(element(attr("className", '"wrong-txet"'), attr("data-hint", '"txet"')))
    assert make_pipeline(checker).validate_sync(doc) == []
    assert checker.calls == []


def test_unspecified_and_dynamic_attributes_are_skipped() -> None:
    checker = RecordingChecker()
    doc = document(element(attr("onClick", '"txet"'), attr("alt", None)))
    assert make_pipeline(checker).validate_sync(doc) == []
    assert checker.calls == []


def test_text_without_letters_is_not_submitted() -> None:
    checker = RecordingChecker()
    doc = document(element(text("42%"), tag="span"), element(attr("title", '"100"')))
    assert make_pipeline(checker).validate_sync(doc) == []
    assert checker.calls == []


def test_fragmented_text_yields_nothing() -> None:
    checker = RecordingChecker()
    doc = document(element(text("Count: "), expr("{count}"), text(" txet"), tag="p"))
    assert make_pipeline(checker).validate_sync(doc) == []
    assert checker.calls == []


def test_text_run_is_normalized_before_checking() -> None:
    checker = RecordingChecker()
    doc = document(element(text("\n   Plsae   sign\n      in  \n", line=2), tag="p"))
    [diag] = make_pipeline(checker).validate_sync(doc)
    assert checker.calls == ["Plsae sign in"]
    assert diag.line == 2


def test_single_ignore_suppresses_exactly_one_attribute() -> None:
    doc = document(
        element(attr("alt", '"Plsae"', line=1, leading=["/* @text-lint ignore */"]), line=1),
        element(attr("alt", '"Plsae"', line=2), line=2),
    )
    diagnostics = make_pipeline().validate_sync(doc)
    assert [d.line for d in diagnostics] == [2]


def test_region_suppression_resumes_after_end_marker() -> None:
    doc = document(
        element(
            comment("{/* @text-lint ignore start */}", line=1),
            element(text("txet", line=2), tag="p", line=2),
            element(attr("title", '"txet"', line=3), line=3),
            comment("{/* @text-lint ignore end */}", line=4),
            element(text("txet", line=5), tag="p", line=5),
        )
    )
    diagnostics = make_pipeline().validate_sync(doc)
    assert [d.line for d in diagnostics] == [5]


def test_unbalanced_region_suppresses_rest_of_document() -> None:
    doc = document(
        element(text("txet", line=1), tag="p"),
        comment("// @text-lint ignore start", line=2),
        element(text("txet", line=3), tag="p"),
    )
    assert [d.line for d in make_pipeline().validate_sync(doc)] == [1]


def test_region_state_does_not_carry_over_between_calls() -> None:
    pipeline = make_pipeline()
    first = document(comment("// @text-lint ignore start"), element(text("txet")))
    second = document(element(text("txet")))
    assert pipeline.validate_sync(first) == []
    assert len(pipeline.validate_sync(second)) == 1


def test_results_follow_document_order_and_checker_order() -> None:
    first = RecordingChecker(name="first", flagged=("txet",))
    second = RecordingChecker(name="second", flagged=("txet", "Plsae"))
    doc = document(
        element(attr("alt", '"Plsae txet"', line=1), line=1),
        element(text("txet", line=2), tag="p", line=2),
    )
    diagnostics = make_pipeline(first, second).validate_sync(doc)
    assert [(d.line, d.checker, d.message) for d in diagnostics] == [
        (1, "first", '"txet" is misspelled'),
        (1, "second", '"Plsae" is misspelled'),
        (1, "second", '"txet" is misspelled'),
        (2, "first", '"txet" is misspelled'),
        (2, "second", '"txet" is misspelled'),
    ]


def test_validate_is_idempotent() -> None:
    pipeline = make_pipeline()
    doc = document(element(attr("alt", '"Plsae"')), element(text("txet", line=3), tag="p"))
    assert pipeline.validate_sync(doc) == pipeline.validate_sync(doc)


def test_repeated_text_is_checked_once_but_reported_per_line() -> None:
    checker = RecordingChecker()
    doc = document(
        element(attr("alt", '"Plsae"', line=1)),
        element(attr("title", "'Plsae'", line=9)),
    )
    diagnostics = make_pipeline(checker).validate_sync(doc)
    assert checker.calls == ["Plsae"]
    assert [d.line for d in diagnostics] == [1, 9]


def test_failing_checker_is_logged_and_others_still_run(caplog: pytest.LogCaptureFixture) -> None:
    broken, good = FailingChecker(), RecordingChecker()
    doc = document(element(attr("alt", '"Plsae"', line=1)), element(text("txet", line=2), tag="p"))
    with caplog.at_level(logging.WARNING, logger="tsxlint"):
        diagnostics = make_pipeline(broken, good).validate_sync(doc)
    assert [d.line for d in diagnostics] == [1, 2]
    assert broken.calls == 2
    assert "dictionary exploded" in caplog.text


def test_slow_checker_times_out_without_stopping_traversal(caplog: pytest.LogCaptureFixture) -> None:
    doc = document(element(attr("alt", '"Plsae"', line=1)))
    with caplog.at_level(logging.WARNING, logger="tsxlint"):
        diagnostics = make_pipeline(SlowChecker(delay=5.0), RecordingChecker(), timeout=0.05).validate_sync(doc)
    assert [d.checker for d in diagnostics] == ["fake"]
    assert "timed out" in caplog.text


def test_extract_segments_reports_origin_and_raw_text() -> None:
    doc = document(element(attr("alt", '"Save"', line=1), text(" Hello ", line=2), tag="button"))
    segments = make_pipeline().extract_segments(doc)
    assert [(s.text, s.line, s.origin) for s in segments] == [
        ('"Save"', 1, SegmentOrigin.ATTRIBUTE),
        ("Hello", 2, SegmentOrigin.TEXT_RUN),
    ]


def test_concurrent_validations_keep_their_own_region_state() -> None:
    pipeline = make_pipeline(SlowChecker(name="slow", delay=0.01), RecordingChecker())
    suppressed = document(comment("// @text-lint ignore start"), element(text("txet")), file_id="a.tsx")
    visible = document(element(text("txet")), element(text("Plsae")), file_id="b.tsx")

    async def run():
        return await asyncio.gather(pipeline.validate(suppressed), pipeline.validate(visible))

    a, b = asyncio.run(run())
    assert a == []
    assert {d.file for d in b} == {"b.tsx"}
    assert [d.message for d in b if d.checker == "fake"] == ['"txet" is misspelled', '"Plsae" is misspelled']


def test_no_checkers_means_no_diagnostics() -> None:
    pipeline = ValidationPipeline(rules=RULES, checkers=[])
    assert pipeline.validate_sync(document(element(attr("alt", '"Plsae"')))) == []
