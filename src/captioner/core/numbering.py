"""
Hierarchical sequence numbering.

A sequence number is a fixed-length tuple of level values. Each level has
its own kind (numeric, lowercase letters, uppercase letters); values are
stored as positive integers and only turned into text when rendered.

Letters follow spreadsheet-column succession: a, b, ..., z, aa, ab, ...
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from captioner.exceptions import InvalidLevelError


class LevelType(str, Enum):
    """How the value at one level is displayed."""

    NUMERIC = "n"
    LOWER_ALPHA = "c"
    UPPER_ALPHA = "C"

    def format(self, value: int) -> str:
        """Render a 1-based level value."""
        if self is LevelType.NUMERIC:
            return str(value)
        letters = to_letters(value)
        if self is LevelType.UPPER_ALPHA:
            return letters.upper()
        return letters


def to_letters(value: int) -> str:
    """Convert a 1-based integer to lowercase letters (1 -> a, 27 -> aa)."""
    if value < 1:
        raise ValueError(f"Can't represent {value} with letters")

    s = ""
    while value > 0:
        value, rem = divmod(value - 1, 26)
        s = string.ascii_lowercase[rem] + s
    return s


@dataclass(frozen=True)
class SequenceNumber:
    """An immutable multi-level number such as 2.1 or 1.b.

    Attributes:
        values: 1-based value per level.
        types: Display kind per level, same length as values.
    """

    values: tuple[int, ...]
    types: tuple[LevelType, ...]

    def __post_init__(self) -> None:
        if len(self.values) != len(self.types):
            raise ValueError(
                f"Got {len(self.values)} values for {len(self.types)} levels"
            )

    @property
    def levels(self) -> int:
        return len(self.values)

    @property
    def parts(self) -> tuple[str, ...]:
        """Display text of each level."""
        return tuple(t.format(v) for v, t in zip(self.values, self.types))

    def join(self, infix: str = ".") -> str:
        return infix.join(self.parts)

    def __str__(self) -> str:
        return self.join()


def initial_number(types: Iterable[LevelType]) -> SequenceNumber:
    """First number of a fresh sequence, e.g. 1.1 or 1.a."""
    types = tuple(types)
    return SequenceNumber(values=(1,) * len(types), types=types)


def normalize_level(level: Any, levels: int) -> int:
    """Validate a requested bump level and return it as an int.

    Whole-number floats (2.0) are accepted, as they are for ``levels``.

    Raises:
        InvalidLevelError: Unless level is a whole number in 1..levels.
    """
    if isinstance(level, bool) or not isinstance(level, (int, float)):
        raise InvalidLevelError(
            f"Level must be a whole number, got {type(level).__name__}"
        )
    if isinstance(level, float) and not level.is_integer():
        raise InvalidLevelError(f"Level must be a whole number, got {level}")
    if level > levels:
        raise InvalidLevelError(
            f"Level too large: {level} requested, only {levels} configured"
        )
    if level < 1:
        raise InvalidLevelError(f"Level must be at least 1, got {level}")
    return int(level)


def increment(previous: SequenceNumber, level: Any = None) -> SequenceNumber:
    """Compute the number that follows ``previous``.

    Args:
        previous: The number of the preceding entry.
        level: 1-based level to advance. Levels above it are copied, levels
            below it restart at their first value. Defaults to the deepest
            level, which gives ordinary sequential numbering.

    Returns:
        The next SequenceNumber.

    Raises:
        InvalidLevelError: If level is outside 1..previous.levels.

    Example:
        >>> n = initial_number([LevelType.NUMERIC, LevelType.NUMERIC])
        >>> str(increment(n))
        '1.2'
        >>> str(increment(increment(n), level=1))
        '2.1'
    """
    if level is None:
        level = previous.levels
    level = normalize_level(level, previous.levels)

    pos = level - 1
    values = (
        previous.values[:pos]
        + (previous.values[pos] + 1,)
        + (1,) * (previous.levels - level)
    )
    return SequenceNumber(values=values, types=previous.types)
