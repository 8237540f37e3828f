"""fragQL – parameterized query fragments with array expansion.

A fragment is everything after the ``SELECT`` clause of a query plus the
values bound to its ``?`` placeholders.  Array parameters expand in place::

    fragment = fragql.build("WHERE title = ? AND dept IN (?)", ["manager", ["eng", "ops"]])
    fragment.template    # 'WHERE title = ? AND dept IN (?,?)'
    fragment.parameters  # ('manager', 'eng', 'ops')

Public API
----------
``build``
    Build a fragment from a template and an explicit parameter sequence.

``build_format``
    Build a fragment from a template and one positional value per
    placeholder; returns ``None`` (and logs) on bad input.

``match_all``
    A fragment with no filter.

Re-exported types
-----------------
``QueryBuilder``, ``QueryFragment``, ``BuilderConfig``, the parameter
models, and all error classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fragql.compile.builder import QueryBuilder
from fragql.compile.converters import named_template, to_sqlalchemy_text
from fragql.compile.placeholders import locate_placeholders
from fragql.config import DEFAULT_CONFIG, REFERENCE_EPOCH, BuilderConfig
from fragql.errors import (
    ConfigError,
    FragQLError,
    ParameterError,
    PlaceholderCountError,
    PlaceholderLocationError,
    UnsupportedParameterError,
)
from fragql.schema.fragment import QueryFragment
from fragql.schema.params import (
    PARAM_ADAPTER,
    ArrayParam,
    DateParam,
    NumberParam,
    Param,
    TextParam,
    to_param,
)

__all__ = [
    # Core pipeline
    "build",
    "build_format",
    "match_all",
    "locate_placeholders",
    # Builder and result
    "QueryBuilder",
    "QueryFragment",
    # Configuration
    "BuilderConfig",
    "DEFAULT_CONFIG",
    "REFERENCE_EPOCH",
    # Parameters
    "Param",
    "NumberParam",
    "DateParam",
    "TextParam",
    "ArrayParam",
    "PARAM_ADAPTER",
    "to_param",
    # Converters
    "named_template",
    "to_sqlalchemy_text",
    # Errors
    "FragQLError",
    "ParameterError",
    "UnsupportedParameterError",
    "PlaceholderCountError",
    "PlaceholderLocationError",
    "ConfigError",
]


def build(
    template: str | None,
    parameters: Sequence[Any] | None = None,
    config: BuilderConfig | None = None,
) -> QueryFragment | None:
    """Build a fragment from ``template`` and ``parameters``.

    Args:
        template: Query text after the SELECT clause, or ``None``.
        parameters: One value per placeholder; list/tuple values expand.
        config: Optional builder configuration.

    Returns:
        The fragment, or ``None`` when ``template`` is ``None``.

    Raises:
        UnsupportedParameterError: If a value is outside the supported set.
        PlaceholderCountError: If placeholders and parameters do not pair up.
    """
    return QueryBuilder(config).build_from_string(template, parameters)


def build_format(template: str | None, *values: Any) -> QueryFragment | None:
    """Build a fragment from ``template`` and one positional value per placeholder."""
    return QueryBuilder().build_from_format(template, *values)


def match_all() -> QueryFragment:
    """Return the fragment that selects everything."""
    return QueryBuilder().match_all()
