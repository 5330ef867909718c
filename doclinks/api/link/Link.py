"""Candidate link dataclass."""

from dataclasses import dataclass

from .LinkType import LinkType


@dataclass(frozen=True)
class Link:
    """A markdown link that looks like a library symbol reference.

    All links are rewritten as inline links. For reference-style links the
    reference definition is left behind unused: ``[`OsString`]`` with the
    definition ``[`OsString`]: std::ffi::OsString`` becomes
    ``[`OsString`](../std/ffi/struct.OsString.html)``.
    """

    link_type: LinkType
    # Where the link goes, for example ``std::ffi::OsString``
    dest_url: str
    # Span of the whole link in the original markdown
    start: int
    end: int
    # True when the label had no reference definition (e.g. ``[std::option::Option]``)
    broken: bool = False
