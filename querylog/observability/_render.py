"""Length-bounded text for statements and bound values."""

from typing import TYPE_CHECKING, Final, Union

from querylog.core.statement import BatchStatement, BatchType, BoundStatement, InternalStatement, SimpleStatement
from querylog.exceptions import RenderingError
from querylog.observability._budget import ELLIPSIS, RenderBudget
from querylog.observability._config import UNLIMITED

if TYPE_CHECKING:
    from querylog.core.statement import BoundValue, Statement

__all__ = ("NULL_VALUE", "UNKNOWN_STATEMENT", "render_parameter", "render_statement")

NULL_VALUE: Final = "NULL"
UNKNOWN_STATEMENT: Final = "??Unknown Statement??"

_BATCH_QUALIFIERS: Final = {BatchType.UNLOGGED: " UNLOGGED", BatchType.COUNTER: " COUNTER"}


def render_statement(statement: "Statement", budget: "Union[RenderBudget, int]" = UNLIMITED) -> str:
    """Render a statement as query text within a character budget.

    Args:
        statement: Statement to render. Batches are rendered as
            ``BEGIN [UNLOGGED|COUNTER] BATCH ... APPLY BATCH;`` with every member
            drawing from the same budget. Driver-internal statements render
            as nothing, including as batch members.
        budget: A :class:`RenderBudget` to draw from, or a limit to start a
            fresh one with (``-1`` for no limit).

    Returns:
        The rendered text. A chunk cut by the budget ends with ``...``; text
        after an exact fit is dropped without one.
    """
    if not isinstance(budget, RenderBudget):
        budget = RenderBudget(budget)
    _append_statement(budget, statement)
    return budget.getvalue()


def _append_statement(budget: RenderBudget, statement: "Statement") -> None:
    if budget.exhausted:
        return

    match statement:
        case InternalStatement():
            return
        case SimpleStatement(query_string=query_string):
            budget.append(query_string.strip())
        case BoundStatement():
            budget.append(statement.query_string.strip())
        case BatchStatement(statements=members, batch_type=batch_type):
            budget.append("BEGIN")
            budget.append(_BATCH_QUALIFIERS.get(batch_type, ""))
            budget.append(" BATCH")
            for member in members:
                if isinstance(member, InternalStatement):
                    continue
                budget.append(" ")
                _append_statement(budget, member)
            budget.append(" APPLY BATCH")
        case _:
            budget.append(UNKNOWN_STATEMENT)

    if not budget.endswith(";"):
        budget.append(";")


def render_parameter(value: "BoundValue | None", limit: int = UNLIMITED) -> str:
    """Render one bound value, cut to ``limit`` characters.

    NULL values render as ``NULL`` whatever the limit.

    Raises:
        RenderingError: If the raw bytes cannot be decoded by the value's type.
    """
    if value is None or value.is_null:
        return NULL_VALUE
    try:
        text = value.to_string()
    except Exception as exc:
        msg = f"Cannot render {value.data_type} value from {len(value.raw or b'')} bytes"
        raise RenderingError(msg) from exc
    if limit != UNLIMITED and len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text
