"""Book chapter dataclass."""

from dataclasses import dataclass


@dataclass
class Document:
    """A book chapter whose links may be rewritten.

    Attributes:
        path: Chapter path relative to the book source root (POSIX form)
        content: Raw markdown, replaced when the chapter is rewritten
        depth: Number of path components between the chapter and the
            documentation root, used to build ``../`` prefixes
        name: Chapter title, used in diagnostics
    """

    path: str
    content: str
    depth: int
    name: str = ""
