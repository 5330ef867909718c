"""Link API domain."""

from .._output_schemas.link import LinkCollectOutput, LinkRewriteOutput
from .Document import Document
from .InternalLinkError import InternalLinkError
from .Link import Link
from .LinkRewriteError import LinkRewriteError
from .LinkType import LinkType
from .OutputMismatchError import OutputMismatchError
from .Replacement import Replacement
from .Resolver import Resolver
from .ResolverError import ResolverError
from .UnsupportedLinkError import UnsupportedLinkError

__all__ = [
    "Document",
    "InternalLinkError",
    "Link",
    "LinkCollectOutput",
    "LinkRewriteError",
    "LinkRewriteOutput",
    "LinkType",
    "OutputMismatchError",
    "Replacement",
    "Resolver",
    "ResolverError",
    "UnsupportedLinkError",
]
