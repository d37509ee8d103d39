"""Utilities for Container PS."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager'
]
