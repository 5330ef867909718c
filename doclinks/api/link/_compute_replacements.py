"""Plan the edits for one chapter."""

from collections.abc import Sequence

from .InternalLinkError import InternalLinkError
from .Link import Link
from .LinkPatterns import LINK_PATTERNS, LinkPatterns
from .LinkType import LinkType
from .OutputMismatchError import OutputMismatchError
from .Replacement import Replacement
from ._relative_url import _relative_url


def _compute_replacements(
    content: str,
    links: Sequence[Link],
    urls: Sequence[str],
    depth: int,
    relative: bool = True,
    patterns: LinkPatterns = LINK_PATTERNS,
) -> list[Replacement]:
    """Computes the replacements to make in the markdown content.

    Each replacement keeps the bracketed text the reader sees (like ``[foo]``)
    and points it at the resolved URL. The result is sorted by span start,
    descending, so it can be applied bottom-up without shifting offsets.

    Raises:
        OutputMismatchError: If a link's text does not have the shape of its
            style, or a URL is not on the canonical documentation host
        InternalLinkError: If an autolink or email link is passed in
    """
    style_patterns = {
        LinkType.INLINE: patterns.md_link_inline,
        LinkType.REFERENCE: patterns.md_link_reference,
        LinkType.COLLAPSED: patterns.md_link_reference,
        LinkType.SHORTCUT: patterns.md_link_shortcut,
    }

    replacements = []
    for url, link in zip(urls, links):
        pattern = style_patterns.get(link.link_type)
        if pattern is None:
            raise InternalLinkError(f"unexpected link type: {link!r}")

        md_link = content[link.start : link.end]
        match = pattern.match(md_link)
        if match is None:
            raise OutputMismatchError(
                f"expected link `{md_link}` of type {link.link_type.value} to match regex {pattern.pattern}"
            )
        replacements.append(
            Replacement(
                md_link=match.group(1),
                url=_relative_url(url, depth, relative, patterns),
                start=link.start,
                end=link.end,
            )
        )

    # Bottom-up so earlier ranges don't shift
    replacements.sort(key=lambda r: r.start, reverse=True)
    return replacements
