"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self

from src.core.exceptions import InvalidDirectionError


class Direction(StrEnum):
    """The four ways a player can push the tiles. Closed set: no other moves exist."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: "str | Direction") -> Self:
        """Accept an existing Direction or its (case-insensitive) name, e.g. ' Left '."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() in cls._value2member_map_:
            return cls(value.strip().lower())
        raise InvalidDirectionError(
            f"Invalid direction: {value!r}. \nPick one from {','.join(d.value for d in cls)}"
        )


class Status(StrEnum):
    ACTIVE = "active"
    TERMINAL = "terminal"
