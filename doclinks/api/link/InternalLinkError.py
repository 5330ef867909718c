"""Internal invariant error."""

from .LinkRewriteError import LinkRewriteError


class InternalLinkError(LinkRewriteError):
    """Raised when a link style that should have been filtered reaches a later stage."""
