"""fragQL compilation layer: template + parameters → QueryFragment."""
from fragql.compile.builder import QueryBuilder
from fragql.compile.placeholders import expand_placeholders, locate_placeholders, render_run

__all__ = [
    "QueryBuilder",
    "expand_placeholders",
    "locate_placeholders",
    "render_run",
]
