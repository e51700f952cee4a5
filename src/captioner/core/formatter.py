"""
Caption rendering.

Turns a registered entry into one of three views:
- full: "Figure 1: caption"
- cite: "Figure 1"
- num:  "1"

With linking enabled, hypertext output gets anchors and markdown links,
and fixed-layout (LaTeX) output gets \\label / \\ref directives. For
fixed-layout output the document engine does its own numbering, so the
linked views carry a reference instead of the captioner's number.
"""

import re
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from captioner.config.captioner_config import CaptionerConfig
from captioner.core.registry import CaptionEntry
from captioner.exceptions import InvalidDisplayModeWarning
from captioner.logging import get_logger

logger = get_logger(__name__)


class DisplayMode(str, Enum):
    """Which view of a caption to return."""

    FULL = "full"
    CITE = "cite"
    NUM = "num"
    SUPPRESSED = "suppressed"

    @classmethod
    def parse(cls, value: Union["DisplayMode", str, bool, None]) -> Optional["DisplayMode"]:
        """Translate a caller-supplied display value.

        Accepts members, their values, the one-letter forms "f", "c" and
        "n", and False/None for a suppressed display.

        Returns:
            The DisplayMode, or None if the value is not recognized.
        """
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.SUPPRESSED
        if not isinstance(value, str):
            return None
        return _DISPLAY_ALIASES.get(value)


_DISPLAY_ALIASES = {
    "full": DisplayMode.FULL,
    "f": DisplayMode.FULL,
    "cite": DisplayMode.CITE,
    "c": DisplayMode.CITE,
    "num": DisplayMode.NUM,
    "n": DisplayMode.NUM,
    "suppressed": DisplayMode.SUPPRESSED,
}


class OutputFormat(str, Enum):
    """Link style implied by the host's output format tag."""

    PLAIN = "plain"
    HYPERTEXT = "html"
    FIXED_LAYOUT = "latex"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "OutputFormat":
        if not tag:
            return cls.PLAIN
        tag = tag.strip().lower()
        if tag in ("latex", "pdf", "beamer"):
            return cls.FIXED_LAYOUT
        if tag in ("html", "html4", "html5"):
            return cls.HYPERTEXT
        return cls.PLAIN


@dataclass
class RenderedViews:
    """All three views of one entry."""

    full: str
    cite: str
    num: str

    def select(self, mode: DisplayMode) -> str:
        if mode is DisplayMode.SUPPRESSED:
            return ""
        return getattr(self, mode.value)


_WHITESPACE = re.compile(r"\s+")


def anchor_token(label_prefix: str, display_number: str) -> str:
    """Link target for an entry, e.g. "Figure_1" or "Table_2.a"."""
    return _WHITESPACE.sub("", f"{label_prefix}_{display_number}")


class DisplayFormatter:
    """Renders entries according to one captioner's configuration."""

    def __init__(self, config: CaptionerConfig) -> None:
        self.config = config
        if config.link:
            self.output_format = OutputFormat.from_tag(config.output_format)
        else:
            self.output_format = OutputFormat.PLAIN

    def views(self, entry: CaptionEntry) -> RenderedViews:
        """Render every view of ``entry``."""
        prefix = self.config.label_prefix
        num = entry.number.join(self.config.infix)
        caption = entry.caption
        ref = anchor_token(prefix, num)

        if self.output_format is OutputFormat.FIXED_LAYOUT:
            return RenderedViews(
                full=f"{caption}\\label{{{ref}}}",
                cite=f"{prefix}\\ref{{{ref}}}",
                num=f"\\ref{{{ref}}}",
            )
        if self.output_format is OutputFormat.HYPERTEXT:
            return RenderedViews(
                full=f'<a name="{ref}"></a>{prefix}{num}: {caption}',
                cite=f"[{prefix}{num}](#{ref})",
                num=f"[{num}](#{ref})",
            )
        return RenderedViews(
            full=f"{prefix}{num}: {caption}",
            cite=f"{prefix}{num}",
            num=num,
        )

    def render(self, entry: CaptionEntry, mode: Any = DisplayMode.FULL) -> str:
        """Render one view of ``entry``.

        Args:
            entry: A registered entry.
            mode: A DisplayMode or any value DisplayMode.parse accepts.

        Returns:
            The rendered text. "" for a suppressed display, and for an
            unrecognized mode, which also emits InvalidDisplayModeWarning.
        """
        parsed = DisplayMode.parse(mode)
        if parsed is None:
            message = f"Invalid display mode used: {mode!r}. Caption was still saved."
            logger.warning(message, extra={"event": "invalid_display_mode"})
            warnings.warn(message, InvalidDisplayModeWarning, stacklevel=3)
            return ""
        return self.views(entry).select(parsed)
