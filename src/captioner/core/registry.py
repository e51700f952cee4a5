"""
Caption Registry

Keeps every registered object of one captioner in insertion order and
hands each a number the first time its name is seen.
"""

import threading
from dataclasses import dataclass
from typing import Any, Optional

from captioner.config.captioner_config import CaptionerConfig
from captioner.core.numbering import (
    SequenceNumber,
    increment,
    initial_number,
    normalize_level,
)
from captioner.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CaptionEntry:
    """A single registered object."""

    name: str
    caption: str
    number: SequenceNumber
    index: int


class ObjectRegistry:
    """Ordered registry of captioned objects.

    Numbers are assigned in registration order. The first entry gets the
    initial number; every later entry gets the previous entry's number
    incremented at the requested level (the deepest level by default).
    Once assigned a number never changes. The only mutation of an existing
    entry is filling in a caption that was empty.

    Thread Safety:
        resolve() holds a lock across lookup and append, so a registry
        shared between threads still numbers entries in insertion order.

    Example:
        >>> registry = ObjectRegistry(CaptionerConfig(levels=2))
        >>> str(registry.resolve("a").number)
        '1.1'
        >>> str(registry.resolve("b", level=1).number)
        '2.1'
        >>> str(registry.resolve("a").number)
        '1.1'
    """

    def __init__(self, config: CaptionerConfig) -> None:
        self.config = config
        self._lock = threading.RLock()
        self._entries: list[CaptionEntry] = []

        # name -> position in _entries
        self._index: dict[str, int] = {}

    def resolve(
        self,
        name: str,
        caption: str = "",
        level: Any = None,
    ) -> CaptionEntry:
        """Return the entry for ``name``, registering it if it is new.

        Args:
            name: Object name. Any string, including "", is a valid key.
            caption: Caption text. Stored on first registration, or on a
                later call if the stored caption is still empty.
            level: 1-based level to bump for a new entry. False, None and
                0 mean the deepest level. Whole-number floats are
                accepted. Ignored for existing entries but still validated.

        Returns:
            The (possibly updated) CaptionEntry.

        Raises:
            InvalidLevelError: If level is not a whole number in
                1..levels. The registry is left unchanged.
        """
        bump = None
        if level:
            bump = normalize_level(level, self.config.levels)

        with self._lock:
            pos = self._index.get(name)
            if pos is not None:
                entry = self._entries[pos]
                if not entry.caption and caption:
                    entry.caption = caption
                    logger.debug(
                        "Filled caption for %r", name,
                        extra={"event": "caption_filled", "index": pos},
                    )
                return entry

            if self._entries:
                number = increment(self._entries[-1].number, bump)
            else:
                number = initial_number(self.config.types)

            entry = CaptionEntry(
                name=name,
                caption=caption,
                number=number,
                index=len(self._entries),
            )
            self._entries.append(entry)
            self._index[name] = entry.index

        logger.debug(
            "Registered %r as %s", name, number.join(self.config.infix),
            extra={"event": "object_registered", "index": entry.index},
        )
        return entry

    def get(self, name: str) -> Optional[CaptionEntry]:
        """Look up an entry without registering it.

        Returns:
            The CaptionEntry, or None if the name was never registered.
        """
        with self._lock:
            pos = self._index.get(name)
            return self._entries[pos] if pos is not None else None

    def entries(self) -> list[CaptionEntry]:
        """Snapshot of all entries in registration order."""
        with self._lock:
            return list(self._entries)

    def to_dict(self) -> dict:
        """Summarize the registry as plain data.

        Returns:
            {name: {"caption", "number", "index"}} in registration order.
        """
        with self._lock:
            return {
                e.name: {
                    "caption": e.caption,
                    "number": e.number.join(self.config.infix),
                    "index": e.index,
                }
                for e in self._entries
            }

    def __len__(self) -> int:
        """Return number of registered objects."""
        with self._lock:
            return len(self._entries)

    def __contains__(self, name: str) -> bool:
        """Check if name has been registered."""
        with self._lock:
            return name in self._index

    def __repr__(self) -> str:
        """Return string representation."""
        with self._lock:
            return f"ObjectRegistry(prefix={self.config.prefix!r}, entries={len(self._entries)})"
