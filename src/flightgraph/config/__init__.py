"""Configuration loading utilities."""
from .defaults import DEFAULT_HEIGHT, PALETTE
from .loader import load_settings
from .schema import Settings

__all__ = ["DEFAULT_HEIGHT", "PALETTE", "Settings", "load_settings"]
