import json

from typer.testing import CliRunner

from cron_expander.cli import app

runner = CliRunner()


def test_cli_parse_json_success():
    r = runner.invoke(app, ["parse", "--format", "json", "0 0 1 jaN SuN /bin/names"])
    assert r.exit_code == 0
    payload = json.loads(r.stdout)
    assert payload["command"] == "parse"
    assert payload["ok"] is True
    assert payload["error_count"] == 0
    assert payload["errors"] == []
    assert payload["expression"] == {
        "minute": [0],
        "hour": [0],
        "day_of_month": [1],
        "month": [1],
        "day_of_week": [7],
        "command": "/bin/names",
    }


def test_cli_parse_json_failure():
    r = runner.invoke(app, ["parse", "--format", "json", "0 0 1 1,2,5-100 1 /bin/test"])
    assert r.exit_code == 2
    payload = json.loads(r.stdout)
    assert payload["ok"] is False
    assert payload["expression"] is None
    assert payload["errors"] == [
        {
            "code": "E_INVALID_LIST_ELEMENT",
            "message": "outside of range: 1-12",
            "field": 3,
            "text": "1,2,5-100",
            "file": None,
            "line": None,
            "path": None,
        }
    ]


def test_cli_parse_json_command_keeps_format_words():
    r = runner.invoke(app, ["parse", "--format", "json", "0 0 1 1 1 mytool --format text"])
    assert r.exit_code == 0
    payload = json.loads(r.stdout)
    assert payload["expression"]["command"] == "mytool --format text"
