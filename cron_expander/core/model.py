from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class Field(IntEnum):
    MINUTE = 0
    HOUR = 1
    DAY_OF_MONTH = 2
    MONTH = 3
    DAY_OF_WEEK = 4

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


# Inclusive (min, max). Day of week accepts both 0 and 7 for Sunday.
FIELD_BOUNDS: Mapping[Field, tuple[int, int]] = MappingProxyType(
    {
        Field.MINUTE: (0, 59),
        Field.HOUR: (0, 23),
        Field.DAY_OF_MONTH: (1, 31),
        Field.MONTH: (1, 12),
        Field.DAY_OF_WEEK: (0, 7),
    }
)

FIELD_NAMES: Mapping[Field, Mapping[str, int]] = MappingProxyType(
    {
        Field.MONTH: MappingProxyType(
            {
                "jan": 1,
                "feb": 2,
                "mar": 3,
                "apr": 4,
                "may": 5,
                "jun": 6,
                "jul": 7,
                "aug": 8,
                "sep": 9,
                "oct": 10,
                "nov": 11,
                "dec": 12,
            }
        ),
        Field.DAY_OF_WEEK: MappingProxyType(
            {
                "mon": 1,
                "tue": 2,
                "wed": 3,
                "thu": 4,
                "fri": 5,
                "sat": 6,
                "sun": 7,
            }
        ),
    }
)


@dataclass(frozen=True)
class Expression:
    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    def values(self, field: Field) -> tuple[int, ...]:
        return getattr(self, field.name.lower())
