"""
Captioner handle.

The public entry point: one callable per numbering sequence (figures,
tables, ...) that registers objects by name and returns their caption,
citation or number.
"""

import warnings
from pathlib import Path
from typing import Any, Optional

from captioner.config.captioner_config import CaptionerConfig
from captioner.config.config_loader import load_configs_from_yaml
from captioner.core.formatter import DisplayFormatter, DisplayMode
from captioner.core.registry import ObjectRegistry
from captioner.exceptions import InvalidConfigError
from captioner.logging import get_logger

logger = get_logger(__name__)


class Captioner:
    """Numbers and formats captions for one kind of object.

    Objects are numbered in the order they are first registered. Calling
    the handle again with a known name returns the same number, so a
    caption can be cited any number of times.

    Example:
        >>> figures = Captioner(CaptionerConfig(prefix="Figure"))
        >>> figures("flowers", "Distribution of flower colors")
        'Figure 1: Distribution of flower colors'
        >>> figures("flowers", display="cite")
        'Figure 1'
        >>> figures("trees", display="num")
        '2'
    """

    def __init__(self, config: Optional[CaptionerConfig] = None) -> None:
        self.config = config if config is not None else CaptionerConfig()
        self.registry = ObjectRegistry(self.config)
        self.formatter = DisplayFormatter(self.config)

    @classmethod
    def from_yaml(cls, path: Path | str, name: str) -> "Captioner":
        """Create a handle from one named entry of a YAML config file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            InvalidConfigError: If the file is invalid or has no such entry.
        """
        configs = load_configs_from_yaml(path)
        if name not in configs:
            raise InvalidConfigError(f"No captioner named '{name}' in {path}")
        return cls(configs[name])

    def __call__(
        self,
        name: str,
        caption: str = "",
        display: Any = DisplayMode.FULL,
        level: Any = False,
        cite: bool = False,
        num: bool = False,
    ) -> str:
        """Register ``name`` if needed and render it.

        Args:
            name: Object name.
            caption: Caption text; may be supplied on a later call instead.
            display: "full", "cite", "num" (or "f", "c", "n"), a
                DisplayMode, or False to register without output.
            level: 1-based level to bump when registering a new object
                with hierarchical numbering. False means the deepest level.
            cite: Deprecated. Use display="cite".
            num: Deprecated. Use display="num".

        Returns:
            The rendered text, or "" when the display is suppressed or
            unrecognized.

        Raises:
            InvalidLevelError: If level exceeds the configured levels.
        """
        entry = self.registry.resolve(name, caption, level)

        # Legacy flags take precedence over display
        if cite:
            _warn_deprecated("cite")
            return self.formatter.render(entry, DisplayMode.CITE)
        if num:
            _warn_deprecated("num")
            return self.formatter.render(entry, DisplayMode.NUM)

        return self.formatter.render(entry, display)

    def number_of(self, name: str) -> Optional[str]:
        """Display number of a registered name, or None. Never registers."""
        entry = self.registry.get(name)
        if entry is None:
            return None
        return entry.number.join(self.config.infix)

    def __len__(self) -> int:
        return len(self.registry)

    def __contains__(self, name: str) -> bool:
        return name in self.registry

    def __repr__(self) -> str:
        return f"Captioner(prefix={self.config.prefix!r}, levels={self.config.levels}, entries={len(self)})"


def _warn_deprecated(flag: str) -> None:
    message = f"'{flag}' is deprecated. Use display='{flag}' instead."
    logger.warning(message, extra={"event": "deprecated_flag"})
    # stacklevel points at the caller of Captioner.__call__
    warnings.warn(message, DeprecationWarning, stacklevel=3)


def captioner(
    prefix: str = "Figure",
    auto_space: bool = True,
    levels: int = 1,
    type: Any = None,
    infix: str = ".",
    link: bool = False,
    fmt: Optional[str] = None,
) -> Captioner:
    """Create a captioner with keyword options.

    Args:
        prefix: Text before the object number.
        auto_space: Add a space after the prefix.
        levels: Number of hierarchical numbering levels.
        type: Per-level kind: "n" numeric, "c" lowercase, "C" uppercase.
            Missing levels default to numeric.
        infix: Text between level values.
        link: Link citations to captions for HTML or LaTeX output.
        fmt: Output format of the host renderer ("html", "latex", ...).

    Raises:
        InvalidConfigError: If an option has the wrong type or value.
    """
    config = CaptionerConfig(
        prefix=prefix,
        auto_space=auto_space,
        levels=levels,
        types=type,
        infix=infix,
        link=link,
        output_format=fmt,
    )
    return Captioner(config)
