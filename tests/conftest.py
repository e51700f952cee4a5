"""Pytest fixtures and configuration."""

import pytest

from captioner import Captioner, CaptionerConfig, LevelType
from captioner.config.captioner_config import OUTPUT_FORMAT_ENV


@pytest.fixture(autouse=True)
def no_output_format_env(monkeypatch):
    """Keep the host format variable from leaking into tests."""
    monkeypatch.delenv(OUTPUT_FORMAT_ENV, raising=False)


@pytest.fixture
def figures():
    """Flat figure numbering."""
    return Captioner(CaptionerConfig(prefix="Figure"))


@pytest.fixture
def tables():
    """Two-level numeric table numbering, e.g. Table 1.2."""
    return Captioner(CaptionerConfig(prefix="Table", levels=2))


@pytest.fixture
def exercises():
    """Numeric chapter with lettered exercises, e.g. Exercise 1.a."""
    return Captioner(
        CaptionerConfig(
            prefix="Exercise",
            levels=2,
            types=[LevelType.NUMERIC, LevelType.LOWER_ALPHA],
        )
    )
