"""The QueryFragment value object.

A fragment is everything after the ``SELECT`` clause of a query, generally
starting with ``WHERE``, together with the values bound to its placeholders.
The executor that receives it prefixes the template with its own preamble
and binds ``parameters`` positionally::

    fragment = QueryBuilder().build_from_format("WHERE dept = ? AND salary >= ?", "eng", 5000)
    cursor.execute(*fragment.with_prefix("SELECT rowid FROM employees").as_tuple())
"""
from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, model_validator

from fragql.errors import PlaceholderCountError


class QueryFragment(BaseModel):
    """Immutable ``(template, parameters)`` pair.

    Attributes:
        template: Query text with one placeholder marker per bound value.
        parameters: Values to bind, in left-to-right placeholder order.
            ``None`` is bound as SQL ``NULL``.
        placeholder: The marker character used in ``template``.

    Raises:
        PlaceholderCountError: If the number of markers in ``template``
            differs from ``len(parameters)``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    template: str = ""
    parameters: tuple[Union[StrictInt, StrictFloat, StrictStr, None], ...] = ()
    placeholder: str = Field("?", repr=False)

    @model_validator(mode="after")
    def _check_parity(self) -> QueryFragment:
        markers = self.template.count(self.placeholder)
        if markers != len(self.parameters):
            raise PlaceholderCountError(expected=markers, received=len(self.parameters))
        return self

    @property
    def placeholder_count(self) -> int:
        """Number of placeholder markers, equal to ``len(parameters)``."""
        return len(self.parameters)

    @property
    def is_match_all(self) -> bool:
        """True when the fragment carries no filter at all."""
        return not self.template.strip() and not self.parameters

    def with_prefix(self, prefix: str) -> QueryFragment:
        """Return a new fragment with ``prefix`` (e.g. a SELECT preamble) prepended.

        Args:
            prefix: Statement text to put before the template.  It must not
                contain placeholder markers, since no values exist for them.

        Returns:
            A new :class:`QueryFragment`; ``self`` is unchanged.
        """
        extra = prefix.count(self.placeholder)
        if extra:
            raise PlaceholderCountError(
                expected=len(self.parameters) + extra, received=len(self.parameters)
            )
        template = f"{prefix} {self.template}" if self.template else prefix
        return self.model_copy(update={"template": template})

    def as_tuple(self) -> tuple[str, list]:
        """Return ``(template, parameters)`` ready for ``cursor.execute``."""
        return self.template, list(self.parameters)
