"""Precompiled patterns shared across the link pipeline."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LinkPatterns:
    """Immutable set of compiled regular expressions."""

    # Extracts the std links from the HTML generated by rustdoc
    std_link_extract: re.Pattern[str] = field(default=re.compile(r"<li>LINK: (.*)</li>"))
    # Extracts the URL from an HTML anchor
    anchor_url: re.Pattern[str] = field(default=re.compile(r'<a href="([^"]+)"'))
    # Markdown inline link, like `[foo](bar)`
    md_link_inline: re.Pattern[str] = field(default=re.compile(r"(?s)(\[.+\])(\(.+\))"))
    # Markdown reference link, like `[foo][bar]`
    md_link_reference: re.Pattern[str] = field(default=re.compile(r"(?s)(\[.+\])(\[.*\])"))
    # Markdown shortcut link, like `[foo]`
    md_link_shortcut: re.Pattern[str] = field(default=re.compile(r"(?s)(\[.+\])"))
    # Canonical documentation host plus release channel
    doc_url: re.Pattern[str] = field(
        default=re.compile(r"^https://doc\.rust-lang\.org/(?:nightly|beta|stable|dev|1\.[0-9]+\.[0-9]+)")
    )


LINK_PATTERNS = LinkPatterns()
