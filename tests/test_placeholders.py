"""Unit tests for placeholder scanning and rewriting."""

from __future__ import annotations

from fragql.compile.placeholders import expand_placeholders, locate_placeholders, render_run


def test_locate_in_order():
    assert locate_placeholders("a = ? AND b IN (?)") == [4, 16]


def test_locate_adjacent_markers():
    assert locate_placeholders("???") == [0, 1, 2]


def test_locate_none():
    assert locate_placeholders("WHERE 1 = 1") == []
    assert locate_placeholders("") == []


def test_locate_custom_marker():
    assert locate_placeholders("a = $ AND b = ?", "$") == [4]


def test_render_run():
    assert render_run(1) == "?"
    assert render_run(3) == "?,?,?"
    assert render_run(2, "$", ", ") == "$, $"


def test_expand_applies_running_offset():
    template = "a in (?) AND b in (?)"
    out = expand_placeholders(template, locate_placeholders(template), [(0, 3), (1, 2)])
    assert out == "a in (?,?,?) AND b in (?,?)"


def test_expand_skips_unlisted_markers():
    template = "a = ? AND b in (?) AND c = ? AND d in (?)"
    out = expand_placeholders(template, locate_placeholders(template), [(1, 2), (3, 3)])
    assert out == "a = ? AND b in (?,?) AND c = ? AND d in (?,?,?)"


def test_expand_nothing_returns_template():
    assert expand_placeholders("a = ?", [4], []) == "a = ?"
