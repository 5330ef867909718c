"""Link parsers package."""

from ._MarkdownParser import MarkdownParser
from .ParsedLink import ParsedLink

__all__ = ["MarkdownParser", "ParsedLink"]
