"""Core numbering, registry and rendering modules.

Only the numbering primitives are re-exported here; registry, formatter
and handle import the config package, which itself depends on numbering.
"""

from captioner.core.numbering import (
    LevelType,
    SequenceNumber,
    increment,
    initial_number,
    to_letters,
)

__all__ = [
    "LevelType",
    "SequenceNumber",
    "increment",
    "initial_number",
    "to_letters",
]
