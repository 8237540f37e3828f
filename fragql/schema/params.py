"""Typed parameter models for query fragments.

Only a closed set of values may be bound to a placeholder: numbers, dates,
strings, and flat arrays of those.  Each is a small frozen Pydantic model;
Pydantic v2 discriminated-union parsing turns their JSON form
(e.g. ``{"number": 5}`` or ``{"items": [{"text": "a"}]}``) into the right
model, and :func:`to_param` does the same for plain Python values.

Usage::

    from fragql.schema.params import ArrayParam, NumberParam, to_param

    p = to_param([1, 2])
    assert isinstance(p, ArrayParam)
    assert p.items == (NumberParam(number=1), NumberParam(number=2))
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    StrictFloat,
    StrictInt,
    StrictStr,
    Tag,
    TypeAdapter,
)

from fragql.config import DEFAULT_CONFIG, BuilderConfig
from fragql.errors import UnsupportedParameterError

_FROZEN = ConfigDict(frozen=True, extra="forbid")

#: A value ready to hand to a database driver.
BoundValue = Union[int, float, str, None]


# ---------------------------------------------------------------------------
# Scalar parameter types
# ---------------------------------------------------------------------------


class NumberParam(BaseModel):
    """A numeric value: ``{"number": 42}``."""

    model_config = _FROZEN

    number: Union[StrictInt, StrictFloat]

    def bind(self, config: BuilderConfig = DEFAULT_CONFIG) -> int | float:
        return self.number


class DateParam(BaseModel):
    """A point in time: ``{"timestamp": "2024-01-01T00:00:00Z"}``.

    Bound as float seconds since ``config.reference_epoch``.  Naive values
    are read as UTC.
    """

    model_config = _FROZEN

    timestamp: datetime

    def bind(self, config: BuilderConfig = DEFAULT_CONFIG) -> float:
        ts = self.timestamp
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return (ts - config.epoch).total_seconds()


class TextParam(BaseModel):
    """A string value: ``{"text": "engineering"}``."""

    model_config = _FROZEN

    text: StrictStr

    def bind(self, config: BuilderConfig = DEFAULT_CONFIG) -> str:
        return self.text


def _scalar_discriminator(v: Any) -> str | None:
    """Return the tag for the scalar discriminated union."""
    if isinstance(v, dict):
        for key in ("number", "timestamp", "text"):
            if key in v:
                return key
    if isinstance(v, NumberParam):
        return "number"
    if isinstance(v, DateParam):
        return "timestamp"
    if isinstance(v, TextParam):
        return "text"
    return None


ScalarParam = Annotated[
    Union[
        Annotated[NumberParam, Tag("number")],
        Annotated[DateParam, Tag("timestamp")],
        Annotated[TextParam, Tag("text")],
    ],
    Discriminator(_scalar_discriminator),
]


# ---------------------------------------------------------------------------
# Array parameter
# ---------------------------------------------------------------------------


class ArrayParam(BaseModel):
    """A flat sequence of scalars: ``{"items": [{"number": 1}, ...]}``.

    Its single placeholder expands to one marker per item.  Arrays of arrays
    are not accepted.
    """

    model_config = _FROZEN

    items: tuple[ScalarParam, ...] = ()

    def bind_all(self, config: BuilderConfig = DEFAULT_CONFIG) -> list[BoundValue]:
        return [item.bind(config) for item in self.items]


def _param_discriminator(v: Any) -> str | None:
    if isinstance(v, ArrayParam) or (isinstance(v, dict) and "items" in v):
        return "items"
    return _scalar_discriminator(v)


Param = Annotated[
    Union[
        Annotated[NumberParam, Tag("number")],
        Annotated[DateParam, Tag("timestamp")],
        Annotated[TextParam, Tag("text")],
        Annotated[ArrayParam, Tag("items")],
    ],
    Discriminator(_param_discriminator),
]

#: Parse the JSON form of a parameter into a typed model.
PARAM_ADAPTER: TypeAdapter[Param] = TypeAdapter(Param)

_TYPED = (NumberParam, DateParam, TextParam, ArrayParam)


# ---------------------------------------------------------------------------
# Plain Python values -> typed params
# ---------------------------------------------------------------------------


def _to_scalar(value: Any, index: int | None) -> NumberParam | DateParam | TextParam:
    if isinstance(value, (NumberParam, DateParam, TextParam)):
        return value
    # bool is an int subclass but never a query number.
    if isinstance(value, bool):
        raise UnsupportedParameterError(value, index)
    if isinstance(value, (int, float)):
        return NumberParam(number=value)
    if isinstance(value, Decimal):
        if value.is_snan():
            raise UnsupportedParameterError(value, index)
        return NumberParam(number=float(value))
    if isinstance(value, datetime):
        return DateParam(timestamp=value)
    if isinstance(value, date):
        return DateParam(timestamp=datetime.combine(value, time(), tzinfo=timezone.utc))
    if isinstance(value, str):
        return TextParam(text=value)
    raise UnsupportedParameterError(value, index)


def to_param(value: Any, index: int | None = None) -> Param:
    """Convert a plain Python value to a typed param, or return it as-is.

    Args:
        value: An ``int``, ``float``, ``Decimal``, ``datetime``, ``date``,
            ``str``, a list/tuple of those, or an already-typed param.
        index: Position of the value in the caller's parameter list; only
            used in error details.

    Returns:
        A :class:`NumberParam`, :class:`DateParam`, :class:`TextParam` or
        :class:`ArrayParam`.

    Raises:
        UnsupportedParameterError: For ``None``, ``bool``, mappings, bytes,
            nested sequences and any other type.
    """
    if isinstance(value, _TYPED):
        return value
    if isinstance(value, (list, tuple)):
        return ArrayParam(items=tuple(_to_scalar(v, index) for v in value))
    return _to_scalar(value, index)

