from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from cron_expander.core.errors import CrontabLoadError


@dataclass(frozen=True)
class CrontabEntry:
    line: Optional[int]
    text: str
    path: Optional[str] = None


def load_crontab(path: str) -> list[CrontabEntry]:
    """Load expressions from a crontab text file or a YAML/JSON document.

    YAML/JSON documents are either a list of strings or a mapping with an
    `entries` list. Anything else is read as crontab text: one expression per
    line with leading blanks dropped, blank lines and `#` comments skipped.
    Document entries carry `path` ("entries[i]") instead of a line number.
    Does not parse the expressions; callers own that.
    """

    p = Path(path)
    if not p.exists():
        raise CrontabLoadError(
            code="E_FILE_NOT_FOUND",
            message="file does not exist",
            file=str(p),
        )

    suffix = p.suffix.lower()
    try:
        raw_text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CrontabLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e

    if suffix not in {".yaml", ".yml", ".json"}:
        return _text_entries(raw_text)

    try:
        if suffix == ".json":
            data = json.loads(raw_text)
        else:
            data = yaml.safe_load(raw_text)
    except Exception as e:
        code = "E_JSON_PARSE" if suffix == ".json" else "E_YAML_PARSE"
        raise CrontabLoadError(code=code, message=str(e), file=str(p)) from e

    return _document_entries(data, str(p))


def _text_entries(raw_text: str) -> list[CrontabEntry]:
    entries: list[CrontabEntry] = []
    for i, raw in enumerate(raw_text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append(CrontabEntry(line=i, text=raw.lstrip()))
    return entries


def _document_entries(data: Any, file: str) -> list[CrontabEntry]:
    if isinstance(data, dict):
        items = data.get("entries")
    else:
        items = data

    if not isinstance(items, list):
        raise CrontabLoadError(
            code="E_INVALID_TOP_LEVEL",
            message="document must be a list of expressions or a mapping with an 'entries' list",
            file=file,
        )

    entries: list[CrontabEntry] = []
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise CrontabLoadError(
                code="E_INVALID_ENTRY",
                message="entries must be strings",
                file=file,
                path=f"entries[{i}]",
            )
        entries.append(CrontabEntry(line=None, text=item, path=f"entries[{i}]"))
    return entries
