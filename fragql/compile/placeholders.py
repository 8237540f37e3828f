"""Placeholder scanning and rewriting primitives.

Neither function knows anything about SQL: a marker inside a string literal
is still a marker.
"""
from __future__ import annotations

from collections.abc import Sequence


def locate_placeholders(template: str, placeholder: str = "?") -> list[int]:
    """Return the offset of every ``placeholder`` in ``template``, ascending."""
    locations: list[int] = []
    pos = template.find(placeholder)
    while pos != -1:
        locations.append(pos)
        pos = template.find(placeholder, pos + 1)
    return locations


def render_run(count: int, placeholder: str = "?", separator: str = ",") -> str:
    """Return ``count`` markers joined by ``separator`` (``"?,?,?"`` for 3)."""
    return separator.join(placeholder for _ in range(count))


def expand_placeholders(
    template: str,
    locations: Sequence[int],
    expansions: Sequence[tuple[int, int]],
    placeholder: str = "?",
    separator: str = ",",
) -> str:
    """Replace single markers with runs of markers.

    Args:
        template: The original template.
        locations: Marker offsets in ``template`` (see
            :func:`locate_placeholders`).
        expansions: ``(param_index, count)`` pairs in ascending
            ``param_index`` order.  The marker at ``locations[param_index]``
            becomes a run of ``count`` markers.
        placeholder: Marker character.
        separator: Text between markers of a run.

    Returns:
        The rewritten template.
    """
    result = template
    unpacking_offset = 0
    for param_index, count in expansions:
        run = render_run(count, placeholder, separator)
        start = locations[param_index] + unpacking_offset
        result = result[:start] + run + result[start + 1 :]
        unpacking_offset += len(run) - 1
    return result
