"""Unsupported link construct error."""

from .LinkRewriteError import LinkRewriteError


class UnsupportedLinkError(LinkRewriteError):
    """Raised when a candidate link uses markdown the rewriter cannot express (titles)."""
