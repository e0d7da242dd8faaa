from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class CronError(Exception):
    """Base error envelope. The core returns these; wrappers and the CLI raise or print them."""

    code: str
    message: str
    field: Optional[int] = None
    text: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None
    # Location inside a structured document, e.g. "entries[3]".
    path: Optional[str] = None

    def at(
        self, file: Optional[str], line: Optional[int] = None, path: Optional[str] = None
    ) -> "CronError":
        return replace(self, file=file, line=line, path=path)

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.line is not None:
            parts.append(str(self.line))
        elif self.path:
            parts.append(self.path)
        loc = ":".join(parts)
        if self.field is not None:
            loc = f"{loc}: field {self.field}" if loc else f"field {self.field}"
        return f"{loc or '<expression>'}: {self.code}: {self.message}"


@dataclass(frozen=True)
class FieldError(CronError):
    # Set on E_INVALID_LIST_ELEMENT to the failing element's own error.
    cause: Optional["FieldError"] = None


class ExpressionError(CronError):
    pass


class CrontabLoadError(CronError):
    pass
