from __future__ import annotations

from helpers.nodes import attr, comment, document, element, text

from tsxlint.core.engine import Directives, IgnoreRegionTracker, NodeKind, has_ignore_directive

START = "{/* @text-lint ignore start */}"
END = "{/* @text-lint ignore end */}"
SINGLE = "// @text-lint ignore"


def test_is_single_does_not_match_region_markers() -> None:
    d = Directives()
    assert d.is_single(SINGLE)
    assert not d.is_single(START)
    assert not d.is_single(END)


def test_region_start_and_end_toggle_suppression() -> None:
    doc = document(comment(START), text("hidden"), comment(END), text("shown"))
    start, hidden, end, shown = doc.root.children
    tracker = IgnoreRegionTracker()

    assert tracker.observe(start) is True
    assert tracker.suppresses(hidden)
    assert tracker.observe(hidden) is False
    assert tracker.observe(end) is True
    assert not tracker.suppresses(shown)


def test_region_is_flat_not_nested() -> None:
    doc = document(comment(START), comment(START), comment(END), text("shown"))
    tracker = IgnoreRegionTracker()
    for node in doc.root.children[:3]:
        tracker.observe(node)
    assert not tracker.suppresses(doc.root.children[3])


def test_unbalanced_start_stays_active_to_end_of_document() -> None:
    doc = document(comment(START), element(text("a"), element(text("b"))))
    tracker = IgnoreRegionTracker()
    for node in doc.iter_nodes():
        tracker.observe(node)
        if node.kind is not NodeKind.COMMENT:
            assert tracker.suppresses(node)


def test_region_does_not_leak_into_another_document() -> None:
    tracker = IgnoreRegionTracker()
    tracker.observe(document(comment(START), file_id="a.tsx").root.children[0])
    other = document(text("hi"), file_id="b.tsx").root.children[0]
    assert not tracker.suppresses(other)


def test_leading_comments_drive_the_state_without_being_control_nodes() -> None:
    node = attr("title", '"x"', leading=["/* @text-lint ignore start */"])
    document(element(node))
    tracker = IgnoreRegionTracker()
    assert tracker.observe(node) is False
    assert tracker.suppresses(node)


def test_reset_clears_region() -> None:
    tracker = IgnoreRegionTracker()
    tracker.observe(document(comment(START)).root.children[0])
    tracker.reset()
    assert not tracker.region.active


def test_custom_markers_from_config() -> None:
    d = Directives.from_config({"region_start": "lint-off", "region_end": "lint-on", "single": "lint-skip"})
    doc = document(comment("{/* lint-off */}"), text("hidden"))
    tracker = IgnoreRegionTracker(directives=d)
    tracker.observe(doc.root.children[0])
    assert tracker.suppresses(doc.root.children[1])
    assert d.is_single("// lint-skip")


def test_single_marker_in_leading_comment() -> None:
    node = attr("alt", '"Plsae"', leading=[SINGLE])
    assert has_ignore_directive(node, Directives())


def test_single_marker_in_preceding_comment_sibling_skips_blank_runs() -> None:
    target = text("Plsae confirm")
    element(comment("{/* @text-lint ignore */}"), text("\n    "), target, tag="p")
    assert has_ignore_directive(target, Directives())


def test_single_marker_applies_to_the_next_node_only() -> None:
    first, second = text("one"), text("two")
    element(comment("{/* @text-lint ignore */}"), first, element(second), tag="p")
    assert has_ignore_directive(first, Directives())
    assert not has_ignore_directive(second, Directives())


def test_region_marker_is_not_a_single_node_directive() -> None:
    target = text("hello")
    element(comment(START), target)
    assert not has_ignore_directive(target, Directives())
