from __future__ import annotations

from typing import Any

from cron_expander.core.model import Expression, Field


LABEL_WIDTH = 14


def format_expression(expr: Expression) -> str:
    """Render one row per field, then the command.

    Labels are left-justified in a fixed column; values are space-joined.
    """
    rows = [
        _row(field.label, " ".join(str(v) for v in expr.values(field))) for field in Field
    ]
    rows.append(_row("command", expr.command))
    return "".join(rows)


def expression_to_dict(expr: Expression) -> dict[str, Any]:
    out: dict[str, Any] = {field.name.lower(): list(expr.values(field)) for field in Field}
    out["command"] = expr.command
    return out


def _row(label: str, value: str) -> str:
    return f"{label.ljust(LABEL_WIDTH)}{value}\n"
