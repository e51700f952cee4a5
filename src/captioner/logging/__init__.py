"""Logging configuration module for captioner."""

from captioner.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
