"""
captioner: stable numbered captions for figures, tables and friends

Register an object once by name and cite it anywhere in a document; its
number never changes.
"""

__version__ = "1.0.0"

from captioner.config.captioner_config import CaptionerConfig
from captioner.core.formatter import DisplayFormatter, DisplayMode, OutputFormat
from captioner.core.handle import Captioner, captioner
from captioner.core.numbering import LevelType, SequenceNumber, increment
from captioner.core.registry import CaptionEntry, ObjectRegistry
from captioner.exceptions import (
    CaptionerError,
    InvalidConfigError,
    InvalidDisplayModeWarning,
    InvalidLevelError,
)

__all__ = [
    "Captioner",
    "CaptionerConfig",
    "CaptionEntry",
    "CaptionerError",
    "DisplayFormatter",
    "DisplayMode",
    "InvalidConfigError",
    "InvalidDisplayModeWarning",
    "InvalidLevelError",
    "LevelType",
    "ObjectRegistry",
    "OutputFormat",
    "SequenceNumber",
    "captioner",
    "increment",
]
