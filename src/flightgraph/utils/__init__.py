"""Shared helpers: the package logger."""
from .logging import configure_logging, configure_logging_from_settings, logger

__all__ = ["configure_logging", "configure_logging_from_settings", "logger"]
