"""Adapters from QueryFragment to external query APIs.

SQLAlchemy converter
--------------------
:func:`to_sqlalchemy_text` turns a fragment into a
:class:`sqlalchemy.sql.expression.TextClause` with named bind parameters,
for engines whose driver does not use the ``qmark`` style.

Install the optional dependency before using this module::

    pip install "fragql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from fragql.compile.converters import to_sqlalchemy_text

    engine = create_engine("sqlite:///mydb.db")
    clause = to_sqlalchemy_text(fragment, prefix="SELECT name FROM employees")
    with engine.connect() as conn:
        rows = conn.execute(clause).all()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fragql.compile.placeholders import locate_placeholders
from fragql.schema.fragment import QueryFragment

if TYPE_CHECKING:
    from sqlalchemy import TextClause


def named_template(
    fragment: QueryFragment,
    name_prefix: str = "param_",
    *,
    escape_colons: bool = False,
) -> tuple[str, dict]:
    """Rewrite positional markers as ``:param_0``, ``:param_1``, ...

    Args:
        fragment: The fragment to convert.
        name_prefix: Prefix for generated bind names.
        escape_colons: Backslash-escape every literal ``:`` in the template
            text, as ``sqlalchemy.text()`` reads ``:word`` as a bind name.

    Returns:
        ``(sql, params)`` where ``params`` maps each generated name to its
        value.
    """
    template = fragment.template
    parts: list[str] = []
    params: dict = {}
    last = 0

    def literal(segment: str) -> str:
        return segment.replace(":", r"\:") if escape_colons else segment

    for i, pos in enumerate(locate_placeholders(template, fragment.placeholder)):
        name = f"{name_prefix}{i}"
        parts.append(literal(template[last:pos]))
        parts.append(f":{name}")
        params[name] = fragment.parameters[i]
        last = pos + 1
    parts.append(literal(template[last:]))
    return "".join(parts), params


def to_sqlalchemy_text(fragment: QueryFragment, prefix: str = "") -> TextClause:
    """Build a SQLAlchemy ``TextClause`` from ``fragment``.

    Args:
        fragment: The fragment to convert.
        prefix: Optional statement preamble (e.g. ``"SELECT * FROM t"``).

    Returns:
        A ``TextClause`` with every parameter already bound.
    """
    from sqlalchemy import text

    if prefix:
        fragment = fragment.with_prefix(prefix)
    sql, params = named_template(fragment, escape_colons=True)
    clause = text(sql)
    if params:
        clause = clause.bindparams(**params)
    return clause
