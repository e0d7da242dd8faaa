from __future__ import annotations

import json
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from cron_expander.core.errors import CronError, CrontabLoadError, ExpressionError
from cron_expander.core.io.load_crontab import load_crontab
from cron_expander.core.model import FIELD_BOUNDS, FIELD_NAMES, Field
from cron_expander.core.parse.parse_expression import parse_expression
from cron_expander.core.render.render_expression import expression_to_dict, format_expression

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

FORMATS = ("text", "json")


@app.callback()
def _callback() -> None:
    """Cron expression expander."""
    return


# Options must precede the expression; everything after the first field,
# flags included, belongs to the expression (e.g. `find -name x --help`).
@app.command(
    "parse",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def parse(
    expression: list[str] = typer.Argument(
        ..., help="Cron expression: five fields followed by the command"
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Expand a cron expression into the explicit values of each field."""
    _check_format(format)

    line = " ".join(expression)
    expr, err = parse_expression(line)

    if format == "json":
        payload = {
            "tool": "cron-expander",
            "command": "parse",
            "ok": err is None,
            "error_count": 0 if err is None else 1,
            "errors": [] if err is None else [_to_item(err)],
            "expression": expression_to_dict(expr) if expr is not None else None,
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=0 if err is None else 2)

    if err is not None:
        _print_errors([err])
        raise typer.Exit(code=2)

    assert expr is not None
    typer.echo(format_expression(expr), nl=False)


@app.command("check")
def check(
    path: str = typer.Argument(
        ...,
        help="Path to a crontab file (.txt/.yaml/.yml/.json); errors cite file:line or file:entries[i]",
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Parse every expression in a crontab file and report the invalid ones."""
    _check_format(format)

    def _emit_json(ok: bool, *, exit_code: int, errors: list[CronError], count: int) -> None:
        payload = {
            "tool": "cron-expander",
            "command": "check",
            "ok": ok,
            "entry_count": count,
            "error_count": len(errors),
            "errors": [_to_item(e) for e in _sorted(errors)],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=exit_code)

    try:
        entries = load_crontab(path)
    except CrontabLoadError as e:
        if format == "json":
            _emit_json(False, exit_code=1, errors=[e], count=0)
        _print_errors([e])
        raise typer.Exit(code=1)

    errors: list[CronError] = []
    for entry in entries:
        _, err = parse_expression(entry.text)
        if err is not None:
            errors.append(err.at(path, entry.line, entry.path))

    if format == "json":
        _emit_json(not errors, exit_code=2 if errors else 0, errors=errors, count=len(entries))

    if errors:
        _print_errors(errors)
        raise typer.Exit(code=2)
    typer.echo(f"OK: {len(entries)} expressions")


@app.command("fields")
def fields() -> None:
    """List each field's bounds and accepted names."""
    table = Table(title="Fields")
    table.add_column("index", justify="right")
    table.add_column("field", no_wrap=True)
    table.add_column("min", justify="right")
    table.add_column("max", justify="right")
    table.add_column("names")
    for field in Field:
        lo, hi = FIELD_BOUNDS[field]
        names = FIELD_NAMES.get(field, {})
        table.add_row(str(int(field)), field.label, str(lo), str(hi), " ".join(names))
    console.print(table)


def _check_format(format: str) -> None:
    if format not in FORMATS:
        err = ExpressionError(
            code="E_UNKNOWN_FORMAT",
            message=f"unknown format: {format} (choose one of: {', '.join(FORMATS)})",
        )
        _print_errors([err])
        raise typer.Exit(code=2)


def _to_item(e: CronError) -> dict[str, Any]:
    return {
        "code": e.code,
        "message": e.message,
        "field": e.field,
        "text": e.text,
        "file": e.file,
        "line": e.line,
        "path": e.path,
    }


def _sorted(errors: list[CronError]) -> list[CronError]:
    return sorted(
        errors,
        key=lambda e: (e.file or "", _or_minus(e.line), e.path or "", _or_minus(e.field), e.code),
    )


def _or_minus(v: Optional[int]) -> int:
    return -1 if v is None else v


def _print_errors(errors: list[CronError]) -> None:
    for e in _sorted(errors):
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="cron-expander")


if __name__ == "__main__":
    main()
