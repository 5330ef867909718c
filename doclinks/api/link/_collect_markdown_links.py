"""Collect the links in a chapter that look like library symbol links."""

import logging

from ._parsers import MarkdownParser
from .Document import Document
from .Link import Link
from .LinkType import LinkType
from .UnsupportedLinkError import UnsupportedLinkError

logger = logging.getLogger(__name__)

_PARSER = MarkdownParser()


def _is_ordinary_link(dest_url: str) -> bool:
    """Web URLs, chapter files and in-page anchors are not symbol links."""
    return dest_url.startswith("http") or ".md" in dest_url or ".html" in dest_url or dest_url.startswith("#")


def _collect_markdown_links(document: Document) -> list[Link]:
    """Collect all markdown links that look like they might be standard library links.

    Well-formed links come first in document order, followed by broken
    reference links (e.g. ``[std::option::Option]`` with no definition) in
    document order. The resolved URLs are split back using this same order.

    Raises:
        UnsupportedLinkError: If a candidate link has a title
    """
    links: list[Link] = []
    broken_links: list[Link] = []

    for parsed in _PARSER.parse(document.content):
        if parsed.link_type in (LinkType.AUTOLINK, LinkType.EMAIL):
            continue
        if _is_ordinary_link(parsed.dest_url):
            continue
        if parsed.title:
            raise UnsupportedLinkError(
                "titles in links are not supported\n"
                f"Link {parsed.dest_url} has title `{parsed.title}` found in chapter "
                f"{document.name} ({document.path})"
            )
        link = Link(parsed.link_type, parsed.dest_url, parsed.start, parsed.end, broken=parsed.broken)
        if parsed.broken:
            broken_links.append(link)
        else:
            links.append(link)

    links.extend(broken_links)
    logger.debug(f"Collected {len(links)} links ({len(broken_links)} broken) in {document.path}")
    return links
