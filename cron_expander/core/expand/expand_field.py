from __future__ import annotations

from typing import Optional

from cron_expander.core.errors import FieldError
from cron_expander.core.model import FIELD_BOUNDS, FIELD_NAMES, Field


# Largest value a field token may spell out; everything above is a parse failure.
MAX_TOKEN_VALUE = 255


def expand_field(text: str, field: Field) -> tuple[Optional[list[int]], Optional[FieldError]]:
    """Expand one field's syntax into the values it matches.

    Returns (values, None) on success and (None, error) on failure.
    """
    try:
        return expand_values(text, field), None
    except FieldError as e:
        return None, e


def expand_values(text: str, field: Field) -> list[int]:
    """Raising variant of expand_field.

    Grammar, in precedence order: list, `*`, `*/N`, `A-B[/N]`, single value
    or name. List elements are expanded with the same field; lists cannot
    nest because every top-level comma is consumed by the first split.
    """
    lo, hi = FIELD_BOUNDS[field]

    if "," in text:
        out: list[int] = []
        for part in text.split(","):
            try:
                out.extend(_expand_element(part, field, lo, hi))
            except FieldError as e:
                raise FieldError(
                    code="E_INVALID_LIST_ELEMENT",
                    message=e.message,
                    field=int(field),
                    text=text,
                    cause=e,
                ) from e
        return out

    return _expand_element(text, field, lo, hi)


def _expand_element(text: str, field: Field, lo: int, hi: int) -> list[int]:
    if text == "*":
        if field is Field.DAY_OF_WEEK:
            lo += 1  # 0 and 7 are both Sunday; list it once
        return _step_range(lo, hi, 1)
    if text.startswith("*/"):
        return _expand_any_step(text, field, lo, hi)
    if "-" in text:
        return _expand_range(text, field, lo, hi)
    return _expand_single(text, field, lo, hi)


def _expand_any_step(text: str, field: Field, lo: int, hi: int) -> list[int]:
    step = _parse_step(text[2:])
    if step is None:
        raise _error("E_INVALID_STEP_RANGE", f"invalid step range: {text}", field, text)
    return _step_range(lo, hi, step)


def _expand_range(text: str, field: Field, lo: int, hi: int) -> list[int]:
    parts = text.split("-")
    if len(parts) != 2:
        raise _error("E_INVALID_RANGE", f"invalid range: {text}", field, text)
    start_str, end_str = parts

    start = _atoi(start_str)
    if start is None:
        raise _error("E_INVALID_RANGE", f"invalid range start: {start_str}", field, text)

    step = 1
    if "/" in end_str:
        step_parts = end_str.split("/")
        if len(step_parts) != 2:
            raise _error("E_INVALID_STEP_RANGE", f"invalid step range: {text}", field, text)
        end_str = step_parts[0]
        parsed_step = _parse_step(step_parts[1])
        if parsed_step is None:
            raise _error("E_INVALID_STEP_RANGE", f"invalid step range: {text}", field, text)
        step = parsed_step

    end = _atoi(end_str)
    if end is None:
        raise _error("E_INVALID_RANGE", f"invalid range end: {end_str}", field, text)

    if start > end:
        raise _error("E_INVALID_RANGE", f"invalid range: {start} > {end}", field, text)
    if not (lo <= start <= hi) or not (lo <= end <= hi):
        raise _error("E_OUT_OF_RANGE", f"outside of range: {lo}-{hi}", field, text)
    return _step_range(start, end, step)


def _expand_single(text: str, field: Field, lo: int, hi: int) -> list[int]:
    names = FIELD_NAMES.get(field)
    if names is not None:
        named = names.get(text.lower())
        if named is not None:
            return [named]

    value = _atoi(text)
    if value is None:
        raise _error("E_INVALID_VALUE", f"invalid value: {text}", field, text)
    if not (lo <= value <= hi):
        raise _error("E_OUT_OF_RANGE", f"outside of range: {lo}-{hi}", field, text)
    return [value]


def _step_range(start: int, end: int, step: int) -> list[int]:
    # Always includes start, even when start + step is already past end.
    return list(range(start, end + 1, step))


def _parse_step(text: str) -> Optional[int]:
    step = _atoi(text)
    if step is None or step == 0:
        return None
    return step


def _atoi(text: str) -> Optional[int]:
    if not text or not (text.isascii() and text.isdigit()):
        return None
    value = int(text, 10)
    if value > MAX_TOKEN_VALUE:
        return None
    return value


def _error(code: str, message: str, field: Field, text: str) -> FieldError:
    return FieldError(code=code, message=message, field=int(field), text=text)
