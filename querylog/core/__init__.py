"""Statement, value and host types the query logger consumes."""

from querylog.core import types
from querylog.core.host import Host
from querylog.core.statement import (
    INTERNAL_STATEMENT,
    BatchStatement,
    BatchType,
    BoundStatement,
    BoundValue,
    ColumnDefinition,
    InternalStatement,
    PreparedStatement,
    SimpleStatement,
    Statement,
)
from querylog.core.types import DataType

__all__ = (
    "INTERNAL_STATEMENT",
    "BatchStatement",
    "BatchType",
    "BoundStatement",
    "BoundValue",
    "ColumnDefinition",
    "DataType",
    "Host",
    "InternalStatement",
    "PreparedStatement",
    "SimpleStatement",
    "Statement",
    "types",
)
