"""Base error for the link rewrite pipeline."""


class LinkRewriteError(Exception):
    """Raised when a link rewrite run must abort.

    Every subclass is fatal for the whole run: no chapter is rewritten.
    """
