"""Translate links to the standard library into documentation URLs."""

import logging
from collections.abc import Sequence

from ._apply_replacements import _apply_replacements
from ._collect_markdown_links import _collect_markdown_links
from ._compute_replacements import _compute_replacements
from ._split_urls import _split_urls
from .Document import Document
from .InternalLinkError import InternalLinkError
from .Link import Link
from .LinkType import LinkType
from .OutputMismatchError import OutputMismatchError
from .Replacement import Replacement
from .Resolver import Resolver

logger = logging.getLogger(__name__)

_RESOLVABLE = (LinkType.INLINE, LinkType.REFERENCE, LinkType.COLLAPSED, LinkType.SHORTCUT)


def plan_replacements(
    documents: Sequence[Document], resolver: Resolver, relative: bool = True
) -> list[list[Replacement]]:
    """Collect, resolve and plan the link replacements of every chapter.

    Links are collected from all chapters, resolved in one batch and split
    back by chapter in the same order. Nothing is modified.

    Args:
        documents: Chapters in book order
        resolver: Oracle mapping symbol paths to absolute URLs
        relative: Make URLs relative to each chapter (``../std/...``)

    Returns:
        One replacement list per chapter, parallel to ``documents``

    Raises:
        LinkRewriteError: On any unsupported link or resolver/output mismatch
    """
    chapter_links: list[list[Link]] = [_collect_markdown_links(document) for document in documents]

    destinations: list[str] = []
    for links in chapter_links:
        for link in links:
            if link.link_type not in _RESOLVABLE:
                raise InternalLinkError(f"link type should have been filtered: {link!r}")
            destinations.append(link.dest_url)

    logger.info(f"Resolving {len(destinations)} links from {len(documents)} chapters")
    urls = resolver.resolve(destinations) if destinations else []
    if len(urls) != len(destinations):
        raise OutputMismatchError(f"expected rustdoc to generate {len(destinations)} links, but found {len(urls)}")

    # Unflatten the urls list so that it is split back by chapter
    chapter_urls = _split_urls(urls, [len(links) for links in chapter_links])

    return [
        _compute_replacements(document.content, links, doc_urls, document.depth, relative)
        for document, links, doc_urls in zip(documents, chapter_links, chapter_urls)
    ]


def std_links(documents: Sequence[Document], resolver: Resolver, relative: bool = True) -> dict[str, str]:
    """Compute the rewritten content of every chapter without modifying them.

    Returns:
        Mapping of chapter path to new content, for every chapter given
    """
    plans = plan_replacements(documents, resolver, relative)
    return {
        document.path: _apply_replacements(document.content, replacements)
        for document, replacements in zip(documents, plans)
    }


def rewrite_documents(
    documents: Sequence[Document], resolver: Resolver, relative: bool = True
) -> tuple[list[str], int]:
    """Rewrite chapters in place.

    Every chapter is computed first; contents are committed only after the
    whole run succeeded.

    Returns:
        Paths whose content changed, and the number of links rewritten
    """
    plans = plan_replacements(documents, resolver, relative)
    new_contents = [
        _apply_replacements(document.content, replacements) for document, replacements in zip(documents, plans)
    ]
    changed = []
    for document, new_content in zip(documents, new_contents):
        if new_content != document.content:
            changed.append(document.path)
        document.content = new_content
    link_count = sum(len(replacements) for replacements in plans)
    logger.info(f"Rewrote {link_count} links in {len(changed)} of {len(documents)} chapters")
    return changed, link_count
