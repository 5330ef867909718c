"""CLI display."""

from .CLIDisplay import CLIDisplay

__all__ = ["CLIDisplay"]
