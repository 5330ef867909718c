"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCollectOutput(BaseOutputSchema):
    """Output schema for link collect command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - book_dir: str - book source directory that was scanned
    - documents: list[dict] - one entry per chapter, with "path" and "links"
    - total: int - number of candidate links across all chapters
    """

    book_dir: str = Field(..., description="Book source directory that was scanned")
    documents: list[dict[str, Any]] = Field(..., description="Per-chapter candidate links in collection order")
    total: int = Field(..., description="Number of candidate links across all chapters")


class LinkRewriteOutput(BaseOutputSchema):
    """Output schema for link rewrite command."""

    book_dir: str = Field(..., description="Book source directory that was read")
    out_dir: str = Field(..., description="Directory the chapters were written to")
    documents: int = Field(..., description="Number of chapters processed")
    links: int = Field(..., description="Number of links rewritten")
    changed: list[str] = Field(..., description="Chapter paths whose content changed")
    dry_run: bool = Field(..., description="True if nothing was written")


# Register schemas
register_output_schema("link", "collect", LinkCollectOutput)
register_output_schema("link", "rewrite", LinkRewriteOutput)
