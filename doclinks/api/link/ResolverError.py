"""Resolver invocation error."""

from .LinkRewriteError import LinkRewriteError


class ResolverError(LinkRewriteError):
    """Raised when the resolver is missing, exits nonzero, or produces no output."""

    def __init__(self, message: str, stderr: str = "", returncode: int | None = None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode
