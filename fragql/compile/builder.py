"""Template + parameters → QueryFragment.

``QueryBuilder`` is the only entry point for building fragments.  It
converts caller values into typed params, flattens array params, and
rewrites the template so every bound value has its own marker.

Array expansion
---------------
Given ``"col1 = ? AND col2 IN (?)"`` and ``[0, [1, 2]]``:

1. One pass over the params by index flattens them to ``[0, 1, 2]`` and
   records that param 1 expands to 2 markers.
2. The marker belonging to param 1 is replaced by ``"?,?"``; later offsets
   shift right by the growth of every earlier replacement.

Result: ``"col1 = ? AND col2 IN (?,?)"`` bound to ``(0, 1, 2)``.

An empty array keeps its single marker and binds ``None`` (SQL ``NULL``), so
``IN (?)`` matches nothing and the marker/value counts still agree.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fragql.compile.placeholders import expand_placeholders, locate_placeholders
from fragql.config import DEFAULT_CONFIG, BuilderConfig
from fragql.errors import ParameterError, PlaceholderCountError, PlaceholderLocationError
from fragql.schema.fragment import QueryFragment
from fragql.schema.params import ArrayParam, BoundValue, Param, to_param

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Builds :class:`~fragql.schema.fragment.QueryFragment` objects.

    Args:
        config: Marker, separator and date epoch settings.  Defaults to
            :data:`~fragql.config.DEFAULT_CONFIG`.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> BuilderConfig:
        """The settings this builder was created with."""
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def match_all(self) -> QueryFragment:
        """Return a fragment with no filter (empty template, no parameters)."""
        return QueryFragment(template="", parameters=(), placeholder=self._config.placeholder)

    def locate_placeholders(self, template: str) -> list[int]:
        """Return the offset of every placeholder marker in ``template``."""
        return locate_placeholders(template, self._config.placeholder)

    def build_from_format(self, template: str | None, *values: Any) -> QueryFragment | None:
        """Build a fragment from a template and one value per placeholder.

        Example::

            builder.build_from_format("WHERE title = ? AND dept IN (?)", "manager", ["eng", "ops"])

        Returns:
            The fragment, or ``None`` if ``template`` is ``None`` or the values
            do not fit the template (logged, never raised).
        """
        return self.build_from_format_args(template, values)

    def build_from_format_args(
        self, template: str | None, args: Sequence[Any]
    ) -> QueryFragment | None:
        """Same as :meth:`build_from_format` with a prepared argument sequence."""
        if template is None:
            return None

        locations = self.locate_placeholders(template)
        expected = len(locations)
        try:
            if len(args) != expected:
                raise PlaceholderCountError(expected=expected, received=len(args))
            params = [to_param(args[i], i) for i in range(expected)]
            return self._build(template, params, locations)
        except ParameterError as exc:
            logger.error(
                f"Error processing query. Expected {expected} parameters. "
                f"All parameters must be numbers, dates, strings or arrays of those. {exc}"
            )
            return None

    def build_from_string(
        self,
        template: str | None,
        parameters: Sequence[Any] | None = None,
        *,
        locations: Sequence[int] | None = None,
    ) -> QueryFragment | None:
        """Build a fragment from a template and an explicit parameter sequence.

        Args:
            template: Query text after the SELECT clause, or ``None``.
            parameters: One value per placeholder.  A list/tuple value is an
                array parameter and expands to one marker per element.
            locations: Optional pre-computed placeholder offsets for
                ``template``; scanned when omitted.

        Returns:
            The fragment, or ``None`` if ``template`` is ``None``.

        Raises:
            UnsupportedParameterError: If a value is outside the supported set.
            PlaceholderCountError: If the template's placeholders and the
                parameters do not pair up one to one.
            PlaceholderLocationError: If a supplied location does not point at
                a placeholder marker in ``template``.
        """
        if template is None:
            return None
        params = [to_param(value, i) for i, value in enumerate(parameters or ())]
        return self._build(template, params, locations)

    # ------------------------------------------------------------------
    # Array expansion
    # ------------------------------------------------------------------

    def _build(
        self,
        template: str,
        params: list[Param],
        locations: Sequence[int] | None,
    ) -> QueryFragment:
        config = self._config
        flattened: list[BoundValue] = []
        expansions: list[tuple[int, int]] = []

        for index, param in enumerate(params):
            if isinstance(param, ArrayParam):
                if not param.items:
                    flattened.append(None)
                else:
                    expansions.append((index, len(param.items)))
                    flattened.extend(param.bind_all(config))
            else:
                flattened.append(param.bind(config))

        if locations is None:
            locations = self.locate_placeholders(template)
        if len(locations) != len(params):
            raise PlaceholderCountError(expected=len(locations), received=len(params))
        for loc in locations:
            if not 0 <= loc < len(template) or template[loc] != config.placeholder:
                raise PlaceholderLocationError(loc, config.placeholder)

        if expansions:
            template = expand_placeholders(
                template, locations, expansions, config.placeholder, config.separator
            )
            logger.debug(f"Expanded {len(expansions)} array parameter(s): {template!r}")

        return QueryFragment(
            template=template,
            parameters=tuple(flattened),
            placeholder=config.placeholder,
        )
