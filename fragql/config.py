"""Builder configuration.

``BuilderConfig`` controls the few knobs the placeholder rewriter has:

* **placeholder** – the single marker character that stands for one bound
  value (``"?"`` for DB-API ``qmark`` drivers such as ``sqlite3``).
* **separator** – inserted between markers when an array parameter expands
  (``"?,?,?"`` with the default ``","``).
* **reference_epoch** – date parameters are bound as float seconds since
  this instant.  The default is 2001-01-01 UTC.

Example::

    config = BuilderConfig(separator=", ")
    builder = QueryBuilder(config)
    builder.build_from_string("id IN (?)", [[1, 2]]).template
    # 'id IN (?, ?)'
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, model_validator

from fragql.errors import ConfigError

#: Default reference instant for date parameters.
REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)


class BuilderConfig(BaseModel):
    """Immutable configuration for :class:`~fragql.compile.builder.QueryBuilder`.

    Attributes:
        placeholder: Marker character; must be exactly one character long.
        separator: Text placed between markers of an expanded array.  Must
            not contain the marker.
        reference_epoch: Instant that date parameters are measured from.
            A naive value is read as UTC.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    placeholder: str = "?"
    separator: str = ","
    reference_epoch: datetime = REFERENCE_EPOCH

    @model_validator(mode="after")
    def _check_markers(self) -> BuilderConfig:
        if len(self.placeholder) != 1:
            raise ConfigError(
                f"placeholder must be a single character, got {self.placeholder!r}.",
                field="placeholder",
            )
        if self.placeholder in self.separator:
            raise ConfigError(
                f"separator {self.separator!r} must not contain the placeholder "
                f"{self.placeholder!r}.",
                field="separator",
            )
        return self

    @property
    def epoch(self) -> datetime:
        """Return ``reference_epoch`` as an aware datetime."""
        if self.reference_epoch.tzinfo is None:
            return self.reference_epoch.replace(tzinfo=timezone.utc)
        return self.reference_epoch


#: Shared default instance.
DEFAULT_CONFIG = BuilderConfig()
