"""Resolver output shape error."""

from .LinkRewriteError import LinkRewriteError


class OutputMismatchError(LinkRewriteError):
    """Raised when resolver output cannot be mapped back onto the collected links."""
