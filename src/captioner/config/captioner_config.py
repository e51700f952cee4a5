"""Captioner configuration.

A CaptionerConfig is validated once when it is built and never changes
afterwards. Every handle owns exactly one.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from captioner.core.numbering import LevelType
from captioner.exceptions import InvalidConfigError


# Host renderer's target format when none is passed explicitly
OUTPUT_FORMAT_ENV = "CAPTIONER_OUTPUT_FORMAT"

LevelTypeLike = Union[LevelType, str]


def default_output_format() -> Optional[str]:
    """Read the host output format from the environment, if set."""
    value = os.getenv(OUTPUT_FORMAT_ENV, "").strip()
    return value or None


def _check_class(name: str, value: Any, expected: type) -> None:
    # bool passes isinstance checks for int
    if expected is not bool and isinstance(value, bool):
        raise InvalidConfigError(
            f"'{name}' must be of type {expected.__name__}, got bool"
        )
    if not isinstance(value, expected):
        raise InvalidConfigError(
            f"'{name}' must be of type {expected.__name__}, got {type(value).__name__}"
        )


def _normalize_levels(levels: Any) -> int:
    if isinstance(levels, bool) or not isinstance(levels, (int, float)):
        raise InvalidConfigError(
            f"'levels' must be numeric, got {type(levels).__name__}"
        )
    if isinstance(levels, float) and not levels.is_integer():
        raise InvalidConfigError(f"'levels' must be a whole number, got {levels}")
    if levels < 1:
        raise InvalidConfigError(f"'levels' must be at least 1, got {levels}")
    return int(levels)


def _normalize_types(
    types: Optional[Sequence[LevelTypeLike]], levels: int
) -> tuple[LevelType, ...]:
    if types is None:
        types = ()
    elif isinstance(types, (str, LevelType)):
        types = (types,)

    result = []
    for t in list(types)[:levels]:
        try:
            result.append(LevelType(t))
        except ValueError:
            raise InvalidConfigError(
                f"Invalid 'type' value used: {t!r}. Expecting 'n', 'c', or 'C'."
            ) from None

    # Missing levels are numeric
    result.extend([LevelType.NUMERIC] * (levels - len(result)))
    return tuple(result)


@dataclass(frozen=True)
class CaptionerConfig:
    """Settings captured when a captioner is created.

    Attributes:
        prefix: Text placed before the number, e.g. "Figure" or "Table".
        auto_space: Add a single space after the prefix.
        levels: Number of hierarchical levels (1 = flat numbering).
        types: Display kind per level. Accepts LevelType members or the
            codes "n", "c", "C". Padded with numeric or truncated to
            ``levels``.
        infix: Text placed between level values, e.g. "." for 2.1.
        link: Emit cross-reference links when the output format supports it.
        output_format: Target format tag from the host renderer ("latex",
            "html", ...). Falls back to $CAPTIONER_OUTPUT_FORMAT.

    Raises:
        InvalidConfigError: If any option has the wrong type or value.
    """

    prefix: str = "Figure"
    auto_space: bool = True
    levels: int = 1
    types: Optional[Sequence[LevelTypeLike]] = None
    infix: str = "."
    link: bool = False
    output_format: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate and normalize option values."""
        _check_class("prefix", self.prefix, str)
        _check_class("auto_space", self.auto_space, bool)
        _check_class("infix", self.infix, str)
        _check_class("link", self.link, bool)

        levels = _normalize_levels(self.levels)
        object.__setattr__(self, "levels", levels)
        object.__setattr__(self, "types", _normalize_types(self.types, levels))

        output_format = self.output_format
        if output_format is None:
            output_format = default_output_format()
        elif not isinstance(output_format, str):
            raise InvalidConfigError(
                f"'output_format' must be of type str, got {type(output_format).__name__}"
            )
        object.__setattr__(self, "output_format", output_format)

    @property
    def label_prefix(self) -> str:
        """Prefix as it appears in rendered text."""
        if self.auto_space:
            return self.prefix + " "
        return self.prefix

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CaptionerConfig":
        """Build a config from a plain mapping of option names.

        The short option name ``type`` is accepted for ``types``
        and ``fmt`` for ``output_format``.

        Raises:
            InvalidConfigError: On unknown options or bad values.
        """
        data = dict(data)
        if "type" in data:
            data["types"] = data.pop("type")
        if "fmt" in data:
            data["output_format"] = data.pop("fmt")

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigError(f"Unknown captioner option(s): {', '.join(unknown)}")

        return cls(**data)
