"""Container PS - List engine containers with pluggable sort keys."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
