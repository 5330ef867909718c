"""Apply planned edits to a chapter."""

from collections.abc import Iterable

from .Replacement import Replacement


def _apply_replacements(content: str, replacements: Iterable[Replacement]) -> str:
    """Return ``content`` with every replacement written as an inline link.

    Edits are applied in descending span order into a fresh buffer. This may
    orphan reference link definitions; they are left in place.
    """
    pieces: list[str] = []
    tail = len(content)
    for replacement in sorted(replacements, key=lambda r: r.start, reverse=True):
        pieces.append(content[replacement.end : tail])
        pieces.append(f"{replacement.md_link}({replacement.url})")
        tail = replacement.start
    pieces.append(content[:tail])
    return "".join(reversed(pieces))
