"""Exceptions and warnings raised by captioner."""


class CaptionerError(Exception):
    """Base class for all captioner errors."""


class InvalidConfigError(CaptionerError, ValueError):
    """A construction parameter has the wrong type or value."""


class InvalidLevelError(CaptionerError, ValueError):
    """A requested bump level is outside the configured depth."""


class InvalidDisplayModeWarning(UserWarning):
    """An unknown display mode was requested. The caption is still stored."""
