"""Unit tests for the QueryFragment value object."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fragql.errors import PlaceholderCountError
from fragql.schema.fragment import QueryFragment


def test_parity_enforced():
    with pytest.raises(PlaceholderCountError) as exc_info:
        QueryFragment(template="a = ? AND b = ?", parameters=(1,))
    assert exc_info.value.code == "PLACEHOLDER_COUNT_MISMATCH"


def test_frozen():
    f = QueryFragment(template="a = ?", parameters=(1,))
    with pytest.raises(ValidationError):
        f.template = "b = ?"


def test_with_prefix_returns_new_fragment():
    f = QueryFragment(template="WHERE a = ?", parameters=(1,))
    g = f.with_prefix("SELECT * FROM t")
    assert g.template == "SELECT * FROM t WHERE a = ?"
    assert g.parameters == (1,)
    assert f.template == "WHERE a = ?"


def test_with_prefix_on_match_all():
    assert QueryFragment().with_prefix("SELECT * FROM t").template == "SELECT * FROM t"


def test_with_prefix_rejects_markers():
    with pytest.raises(PlaceholderCountError):
        QueryFragment().with_prefix("SELECT * FROM t WHERE a = ?")


def test_as_tuple():
    f = QueryFragment(template="a IN (?,?)", parameters=(1, None))
    assert f.as_tuple() == ("a IN (?,?)", [1, None])


def test_is_match_all():
    assert QueryFragment().is_match_all
    assert not QueryFragment(template="a = ?", parameters=(1,)).is_match_all
    assert QueryFragment(template="a = ?", parameters=(1,)).placeholder_count == 1


def test_custom_placeholder_parity():
    f = QueryFragment(template="a = $ AND b = '?'", parameters=(1,), placeholder="$")
    assert f.placeholder_count == 1
