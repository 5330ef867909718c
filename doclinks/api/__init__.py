"""API module for doclinks.

Command functions defined here return StageResult objects and are the single
source of truth for the CLI.
"""

__all__ = []
