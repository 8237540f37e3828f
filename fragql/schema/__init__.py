"""fragQL schema models: typed parameters and the QueryFragment result."""
from fragql.schema.fragment import QueryFragment
from fragql.schema.params import (
    ArrayParam,
    DateParam,
    NumberParam,
    Param,
    TextParam,
    to_param,
)

__all__ = [
    "QueryFragment",
    "ArrayParam",
    "DateParam",
    "NumberParam",
    "Param",
    "TextParam",
    "to_param",
]
