from __future__ import annotations

from typing import Optional

from cron_expander.core.errors import CronError, ExpressionError
from cron_expander.core.expand.expand_field import expand_field
from cron_expander.core.model import Expression, Field


FIELD_COUNT = len(Field)


def parse_expression(line: str) -> tuple[Optional[Expression], Optional[CronError]]:
    """Parse `<minute> <hour> <dom> <month> <dow> <command...>`.

    Returns (expression, None) or (None, error). Fields are separated by
    single spaces; everything after the fifth separator is the command,
    verbatim. The first failing field aborts the parse.
    """
    parts = line.split(" ", FIELD_COUNT)
    if len(parts) != FIELD_COUNT + 1:
        return None, ExpressionError(
            code="E_INVALID_EXPRESSION",
            message="invalid expression",
            text=line,
        )

    expanded: dict[Field, tuple[int, ...]] = {}
    for field in Field:
        values, err = expand_field(parts[field], field)
        if err is not None:
            return None, err
        assert values is not None
        expanded[field] = tuple(values)

    expr = Expression(
        minute=expanded[Field.MINUTE],
        hour=expanded[Field.HOUR],
        day_of_month=expanded[Field.DAY_OF_MONTH],
        month=expanded[Field.MONTH],
        day_of_week=expanded[Field.DAY_OF_WEEK],
        command=parts[FIELD_COUNT],
    )
    return expr, None


def parse(line: str) -> Expression:
    """Raising variant of parse_expression."""
    expr, err = parse_expression(line)
    if err is not None:
        raise err
    assert expr is not None
    return expr
