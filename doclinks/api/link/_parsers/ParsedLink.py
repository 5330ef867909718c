"""Parsed link dataclass (UNO: single model)."""

from dataclasses import dataclass

from ..LinkType import LinkType


@dataclass(frozen=True)
class ParsedLink:
    """A link found by the markdown parser, before any filtering."""

    link_type: LinkType
    dest_url: str
    title: str
    start: int
    end: int
    broken: bool = False
