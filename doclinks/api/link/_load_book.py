"""Load the chapters of a book source directory."""

import logging
import re
from pathlib import Path, PurePosixPath

from .Document import Document

logger = logging.getLogger(__name__)

# - [Title](path/to/chapter.md)
SUMMARY_ENTRY_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")
SUMMARY_FILE = "SUMMARY.md"


def _summary_entries(summary: str) -> list[tuple[str, str]]:
    """Return (title, path) pairs in SUMMARY.md order; draft chapters have an empty path."""
    entries = []
    for line in summary.splitlines():
        for match in SUMMARY_ENTRY_PATTERN.finditer(line):
            entries.append((match.group(1).strip(), match.group(2).strip()))
    return entries


def _load_book(src_dir: Path) -> list[Document]:
    """Load chapters in book order.

    With a SUMMARY.md the chapter order is the order of its entries; draft
    chapters (empty path) and missing files are skipped. Without one, every
    markdown file is loaded in sorted path order.

    Raises:
        ValueError: If ``src_dir`` is not a directory
    """
    src_dir = src_dir.expanduser().resolve()
    if not src_dir.is_dir():
        raise ValueError(f"Book source directory not found: {src_dir}")

    summary_path = src_dir / SUMMARY_FILE
    if summary_path.is_file():
        entries = _summary_entries(summary_path.read_text(encoding="utf-8"))
    else:
        entries = [
            (path.stem, path.relative_to(src_dir).as_posix())
            for path in sorted(src_dir.rglob("*.md"))
            if path.name != SUMMARY_FILE
        ]

    documents: list[Document] = []
    seen: set[str] = set()
    for title, rel_path in entries:
        if not rel_path:
            logger.debug(f"Skipping draft chapter {title!r}")
            continue
        chapter_path = PurePosixPath(rel_path.split("#", 1)[0])
        key = chapter_path.as_posix()
        if key in seen:
            continue
        file_path = src_dir / chapter_path
        if not file_path.is_file():
            logger.warning(f"Chapter {title!r} points to missing file {key}")
            continue
        seen.add(key)
        documents.append(
            Document(
                path=key,
                content=file_path.read_text(encoding="utf-8"),
                depth=len(chapter_path.parts),
                name=title,
            )
        )
    return documents
