"""Replacement dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Replacement:
    """One edit to a chapter: replace ``[start, end)`` with ``md_link(url)``."""

    md_link: str
    url: str
    start: int
    end: int
