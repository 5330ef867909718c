"""Make documentation URLs relative to a chapter."""

from .LinkPatterns import LINK_PATTERNS, LinkPatterns
from .OutputMismatchError import OutputMismatchError


def _relative_url(url: str, depth: int, relative: bool = True, patterns: LinkPatterns = LINK_PATTERNS) -> str:
    """Convert a doc.rust-lang.org URL to one relative to a chapter at ``depth``.

    Relative links work offline and with the link checker. When ``relative``
    is False the URL is returned unchanged.

    Raises:
        OutputMismatchError: If the URL is not on the canonical documentation host
    """
    if not relative:
        return url

    match = patterns.doc_url.match(url)
    if match is None:
        raise OutputMismatchError(f"expected rustdoc URL to start with {patterns.doc_url.pattern}, got {url}")

    url_path = url[match.end() :]
    if depth <= 0:
        return url_path.lstrip("/")
    dots = "/".join([".."] * depth)
    return f"{dots}{url_path}"
