"""Unit tests for the formatter module."""

import pytest

from captioner.config.captioner_config import CaptionerConfig
from captioner.core.formatter import (
    DisplayFormatter,
    DisplayMode,
    OutputFormat,
    anchor_token,
)
from captioner.core.registry import ObjectRegistry
from captioner.exceptions import InvalidDisplayModeWarning


def make_entry(config: CaptionerConfig, caption: str = "A caption", bumps: int = 0):
    registry = ObjectRegistry(config)
    entry = registry.resolve("first", caption)
    for i in range(bumps):
        entry = registry.resolve(f"next-{i}", caption)
    return entry


class TestDisplayMode:
    """Tests for DisplayMode.parse."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("full", DisplayMode.FULL),
            ("f", DisplayMode.FULL),
            ("cite", DisplayMode.CITE),
            ("c", DisplayMode.CITE),
            ("num", DisplayMode.NUM),
            ("n", DisplayMode.NUM),
            (False, DisplayMode.SUPPRESSED),
            (None, DisplayMode.SUPPRESSED),
            (DisplayMode.CITE, DisplayMode.CITE),
        ],
    )
    def test_known_values(self, value, expected):
        assert DisplayMode.parse(value) is expected

    @pytest.mark.parametrize("value", ["caption", "FULL", True, 3])
    def test_unknown_values(self, value):
        assert DisplayMode.parse(value) is None


class TestOutputFormat:
    """Tests for OutputFormat.from_tag."""

    def test_tags(self):
        assert OutputFormat.from_tag("latex") is OutputFormat.FIXED_LAYOUT
        assert OutputFormat.from_tag("LaTeX") is OutputFormat.FIXED_LAYOUT
        assert OutputFormat.from_tag("html") is OutputFormat.HYPERTEXT
        assert OutputFormat.from_tag("docx") is OutputFormat.PLAIN
        assert OutputFormat.from_tag(None) is OutputFormat.PLAIN


class TestAnchorToken:
    """Tests for anchor_token."""

    def test_whitespace_removed(self):
        assert anchor_token("Figure ", "1") == "Figure_1"
        assert anchor_token("Supp Table ", "2.a") == "SuppTable_2.a"


class TestPlainRendering:
    """Tests for rendering without links."""

    def test_views(self):
        formatter = DisplayFormatter(CaptionerConfig(prefix="Figure"))
        entry = make_entry(formatter.config)

        assert formatter.render(entry, DisplayMode.FULL) == "Figure 1: A caption"
        assert formatter.render(entry, DisplayMode.CITE) == "Figure 1"
        assert formatter.render(entry, DisplayMode.NUM) == "1"
        assert formatter.render(entry, DisplayMode.SUPPRESSED) == ""

    def test_infix_and_no_auto_space(self):
        config = CaptionerConfig(prefix="Tab.", auto_space=False, levels=2, infix="-")
        formatter = DisplayFormatter(config)
        entry = make_entry(config, bumps=1)

        assert formatter.render(entry, "cite") == "Tab.1-2"

    def test_empty_caption(self):
        formatter = DisplayFormatter(CaptionerConfig())
        entry = make_entry(formatter.config, caption="")

        assert formatter.render(entry) == "Figure 1: "

    def test_format_tag_ignored_without_link(self):
        formatter = DisplayFormatter(CaptionerConfig(output_format="html"))

        assert formatter.output_format is OutputFormat.PLAIN

    def test_link_with_unknown_format_is_plain(self):
        formatter = DisplayFormatter(CaptionerConfig(link=True, output_format="docx"))
        entry = make_entry(formatter.config)

        assert formatter.render(entry, "cite") == "Figure 1"

    def test_unknown_mode_warns(self):
        formatter = DisplayFormatter(CaptionerConfig())
        entry = make_entry(formatter.config)

        with pytest.warns(InvalidDisplayModeWarning, match="Caption was still saved"):
            assert formatter.render(entry, "caption") == ""


class TestLinkedRendering:
    """Tests for hypertext and fixed-layout links."""

    def test_hypertext(self):
        config = CaptionerConfig(prefix="Table", levels=2, link=True, output_format="html")
        formatter = DisplayFormatter(config)
        entry = make_entry(config)

        views = formatter.views(entry)
        assert views.full == '<a name="Table_1.1"></a>Table 1.1: A caption'
        assert views.cite == "[Table 1.1](#Table_1.1)"
        assert views.num == "[1.1](#Table_1.1)"

    def test_fixed_layout(self):
        config = CaptionerConfig(link=True, output_format="latex")
        formatter = DisplayFormatter(config)
        entry = make_entry(config)

        views = formatter.views(entry)
        assert views.full == "A caption\\label{Figure_1}"
        assert views.cite == "Figure \\ref{Figure_1}"
        assert views.num == "\\ref{Figure_1}"
