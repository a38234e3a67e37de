import logging

from jfmt_linter.autofix import AutoFixEngine, apply_edits, find_conflicts
from jfmt_linter.models import Edit, Issue


def test_no_edits_is_identity():
    source = "class A {}\r\n\tünïcode\n"
    assert apply_edits(source, []) == source


def test_single_edit():
    source = "hello world"
    assert apply_edits(source, [Edit(6, 11, "there")]) == source[:6] + "there" + source[11:]


def test_insertion_and_deletion():
    assert apply_edits("hello world", [Edit(5, 5, ",")]) == "hello, world"
    assert apply_edits("a;;b", [Edit(2, 3, "")]) == "a;b"


def test_edits_applied_in_start_order():
    edits = [Edit(6, 11, "there"), Edit(0, 5, "HELLO")]
    assert apply_edits("hello world", edits) == "HELLO there"


def test_equal_starts_keep_input_order():
    assert apply_edits("xy", [Edit(1, 1, "A"), Edit(1, 1, "B")]) == "xABy"
    assert apply_edits("xy", [Edit(1, 1, "B"), Edit(1, 1, "A")]) == "xBAy"


def test_overlapping_edits_are_concatenated():
    assert apply_edits("abcdef", [Edit(1, 4, "X"), Edit(2, 5, "Y")]) == "aXYf"


def test_contained_edit_moves_cursor_back():
    # The cursor follows the last applied edit, even when it ends earlier
    assert apply_edits("abcdefg", [Edit(0, 5, "Z"), Edit(2, 3, "Q")]) == "ZQdefg"


def test_end_past_source_is_clamped():
    assert apply_edits("abcdef", [Edit(3, 99, "!")]) == "abc!"


def test_offsets_are_utf8_bytes():
    source = "é;x"
    assert apply_edits(source, [Edit(2, 3, "")]) == "éx"


def test_find_conflicts():
    a, b, c = Edit(0, 5, "Z"), Edit(2, 3, "Q"), Edit(5, 6, "R")
    assert find_conflicts([c, b, a]) == [(a, b)]
    assert find_conflicts([Edit(0, 2, ""), Edit(2, 4, "")]) == []


def test_autofix_engine_applies_only_fixes():
    source = "\tx();;\n"
    issues = [
        Issue("no-empty-statement", "Remove unnecessary empty statement", 1, 6, Edit(5, 6, "")),
        Issue("max-line-length", "Line exceeds 3 characters (was 6)", 1, 4),
        Issue("indent-style", "Use spaces for indentation", 1, 1, Edit(0, 1, "    ")),
    ]
    engine = AutoFixEngine()

    assert engine.collect_edits(issues) == [Edit(5, 6, ""), Edit(0, 1, "    ")]
    assert engine.apply(source, issues) == "    x();\n"


def test_autofix_engine_warns_on_overlap(caplog):
    issues = [
        Issue("r", "m", 1, 1, Edit(0, 3, "A")),
        Issue("r", "m", 1, 2, Edit(1, 2, "B")),
    ]
    with caplog.at_level(logging.WARNING, logger="jfmt_linter.autofix"):
        assert AutoFixEngine().apply("abcd", issues) == "ABcd"
    assert "Overlapping fixes" in caplog.text
