"""Statement variants handed to the query logger.

The set of statement shapes is closed: plain query text, a bound prepared
statement, a batch of statements, and the sentinel marking internal driver
queries. Instances are immutable and only borrowed by the logger for the
duration of one call.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Final, Union

from typing_extensions import TypeAlias

from querylog.core.types import DataType

__all__ = (
    "INTERNAL_STATEMENT",
    "BatchStatement",
    "BatchType",
    "BoundStatement",
    "BoundValue",
    "ColumnDefinition",
    "InternalStatement",
    "PreparedStatement",
    "SimpleStatement",
    "Statement",
)


class BatchType(Enum):
    """Kind of batch, as spelled in ``BEGIN ... BATCH``."""

    LOGGED = auto()
    UNLOGGED = auto()
    COUNTER = auto()


@dataclass(frozen=True, slots=True)
class ColumnDefinition:
    """A bind variable of a prepared statement."""

    name: str
    type: DataType


@dataclass(frozen=True, slots=True)
class BoundValue:
    """Serialized value bound to one placeholder.

    ``raw`` is ``None`` (or empty) for SQL NULL.
    """

    raw: "bytes | None"
    data_type: DataType

    @property
    def is_null(self) -> bool:
        return not self.raw

    def to_string(self) -> str:
        """Return the printable form of the value.

        Raises whatever the codec raises for malformed bytes.
        """
        return self.data_type.to_string(self.raw or b"")


@dataclass(frozen=True, slots=True)
class SimpleStatement:
    """Plain query text, sent as is."""

    query_string: str


@dataclass(frozen=True, slots=True)
class PreparedStatement:
    """Query text with its bind variable metadata."""

    query_string: str
    variables: "tuple[ColumnDefinition, ...]" = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", tuple(self.variables))

    def bind(self, *values: Any, **named_values: Any) -> "BoundStatement":
        """Bind Python values to the placeholders.

        Positional values fill variables in declaration order, keyword values
        fill variables by name. Variables left unset are bound to NULL.

        Raises:
            ValueError: On too many positional values or an unknown variable name.
        """
        if len(values) > len(self.variables):
            msg = f"Too many values: statement has {len(self.variables)} variables, got {len(values)}"
            raise ValueError(msg)
        by_position: list[Any] = [*values, *([None] * (len(self.variables) - len(values)))]
        names = [variable.name for variable in self.variables]
        for name, value in named_values.items():
            if name not in names:
                msg = f"{name!r} is not a variable of this statement"
                raise ValueError(msg)
            by_position[names.index(name)] = value

        bound = tuple(
            BoundValue(None if value is None else variable.type.serialize(value), variable.type)
            for variable, value in zip(self.variables, by_position)
        )
        return BoundStatement(self, bound)


@dataclass(frozen=True, slots=True)
class BoundStatement:
    """A prepared statement with concrete values for its placeholders."""

    prepared: PreparedStatement
    values: "tuple[BoundValue, ...]" = ()

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if len(values) != len(self.prepared.variables):
            msg = f"Expected {len(self.prepared.variables)} bound values, got {len(values)}"
            raise ValueError(msg)
        object.__setattr__(self, "values", values)

    @property
    def query_string(self) -> str:
        return self.prepared.query_string

    @property
    def names(self) -> "tuple[str, ...]":
        return tuple(variable.name for variable in self.prepared.variables)

    def named_values(self) -> "Iterator[tuple[str, BoundValue]]":
        """Yield ``(name, value)`` pairs in binding order."""
        yield from zip(self.names, self.values)


@dataclass(frozen=True, slots=True)
class BatchStatement:
    """An ordered group of statements applied as one unit."""

    statements: "tuple[Statement, ...]" = field(default=())
    batch_type: BatchType = BatchType.LOGGED

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))

    def add(self, statement: "Statement") -> "BatchStatement":
        """Return a new batch with ``statement`` appended."""
        return BatchStatement((*self.statements, statement), self.batch_type)

    def add_all(self, statements: "Iterable[Statement]") -> "BatchStatement":
        return BatchStatement((*self.statements, *statements), self.batch_type)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> "Iterator[Statement]":
        return iter(self.statements)


class InternalStatement:
    """Marker for queries the driver issues for its own bookkeeping."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "INTERNAL_STATEMENT"


INTERNAL_STATEMENT: Final = InternalStatement()

Statement: TypeAlias = Union[SimpleStatement, BoundStatement, BatchStatement, InternalStatement]
